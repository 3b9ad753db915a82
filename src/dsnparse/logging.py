"""Structured logging for DSN parsing."""

import json
import logging
import re
from typing import TYPE_CHECKING

from .constants import CREDENTIAL_MASK, LOGGER_NAME

if TYPE_CHECKING:
    from .record import ParsedDSN

dsn_logger = logging.getLogger(LOGGER_NAME)

# Optional scheme, then everything up to the last '@' before the first '/'
_CREDENTIALS_PATTERN = re.compile(r"^((?:[A-Za-z][A-Za-z0-9+.\-]*://)?)[^/]*@")


def sanitize_dsn(dsn: str) -> str:
    """Sanitize DSN by masking credentials.

    Args:
        dsn: Raw connection string

    Returns:
        DSN with the ``username[:password]@`` part replaced by ``***:***@``
    """
    return _CREDENTIALS_PATTERN.sub(
        rf"\g<1>{CREDENTIAL_MASK}:{CREDENTIAL_MASK}@", dsn, count=1
    )


def log_parse(parsed: "ParsedDSN") -> None:
    """Log a successful parse with the credentials masked.

    Args:
        parsed: Result of the parse
    """
    if not dsn_logger.isEnabledFor(logging.DEBUG):
        return
    log_data = {
        "event": "dsn_parsed",
        "fields": parsed.to_dict(mask_credentials=True),
    }
    dsn_logger.debug(json.dumps(log_data))


def log_query_fallback(query: str, reason: str) -> None:
    """Log a query string that could not be decoded.

    Args:
        query: Raw query string (values are not logged, only its length)
        reason: Why decoding failed
    """
    log_data = {
        "event": "query_decode_failed",
        "query_length": len(query),
        "reason": reason,
    }
    dsn_logger.debug(json.dumps(log_data))
