"""Parser for database-style DSN connection strings.

    [scheme://][username[:password]@][protocol[(address)]]/path[?key=value&...]

Architecture:
- dsn.py: parse() entry point
- scheme.py: scheme:// prefix detection
- body.py: credentials, protocol/address, path and query extraction
- query.py: pluggable query string decoder
- record.py: ParsedDSN result record
- errors.py: DSNError hierarchy
- logging.py: structured logging and credential masking
"""

from dsnparse.dsn import parse
from dsnparse.errors import (
    DSNError,
    InvalidSchemeError,
    MissingSlashError,
    UnescapedValueError,
    UnterminatedAddressError,
)
from dsnparse.logging import sanitize_dsn
from dsnparse.query import QueryDecoder, UrllibQueryDecoder
from dsnparse.record import ParsedDSN

__all__ = [
    "DSNError",
    "InvalidSchemeError",
    "MissingSlashError",
    "ParsedDSN",
    "QueryDecoder",
    "UnescapedValueError",
    "UnterminatedAddressError",
    "UrllibQueryDecoder",
    "parse",
    "sanitize_dsn",
]
