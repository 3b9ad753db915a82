"""Parsing of the DSN body that follows the scheme.

Body grammar::

    [username[:password]@][protocol[(address)]]/path[?key=value&...]

Everything before the first '/' is the authority. Inside it the last '@'
ends the credentials and the first '(' after that starts the address, so a
password may contain ':' or '@' and an address may contain ':' without
confusing either search.
"""

from typing import Any

from .constants import (
    ADDRESS_CLOSE,
    ADDRESS_OPEN,
    CREDENTIALS_SEPARATOR,
    PASSWORD_SEPARATOR,
    PATH_SEPARATOR,
    QUERY_SEPARATOR,
)
from .errors import MissingSlashError, UnescapedValueError, UnterminatedAddressError
from .query import QueryDecoder, collapse_params


def parse_credentials(source: str, end: int) -> tuple[str, str, int]:
    """Find credentials in ``source[:end]``.

    Args:
        source: DSN body
        end: Index of the first '/'

    Returns:
        Tuple of (username, password, at) where ``at`` is the index of the
        last '@' before ``end``, or -1 when there are no credentials
    """
    at = source.rfind(CREDENTIALS_SEPARATOR, 0, end)
    if at < 0:
        return "", "", -1

    colon = source.find(PASSWORD_SEPARATOR, 0, at)
    if colon < 0:
        return source[:at], "", at
    return source[:colon], source[colon + 1:at], at


def parse_address(source: str, start: int, end: int) -> tuple[str, str]:
    """Split ``source[start:end]`` into protocol and parenthesized address.

    Args:
        source: DSN body
        start: First index after the credentials
        end: Index of the first '/'

    Returns:
        Tuple of (protocol, address)

    Raises:
        UnescapedValueError: If ')' is present but not right before ``end``
        UnterminatedAddressError: If '(' is never closed
    """
    paren = source.find(ADDRESS_OPEN, start, end)
    if paren < 0:
        return source[start:end], ""

    if source[end - 1] != ADDRESS_CLOSE:
        if ADDRESS_CLOSE in source[paren + 1:end]:
            raise UnescapedValueError(source, position=paren)
        raise UnterminatedAddressError(source, position=paren)
    return source[start:paren], source[paren + 1:end - 1]


def parse_body(source: str, decoder: QueryDecoder) -> dict[str, Any]:
    """Parse a DSN body (the DSN with any scheme prefix removed).

    Error positions index into ``source``.

    Args:
        source: DSN body
        decoder: Query string decoder used for the part after '?'

    Returns:
        Dictionary with keys: username, password, protocol, address,
        path, params

    Raises:
        MissingSlashError: If a non-empty body has no '/'
        UnterminatedAddressError: If an address is not closed before '/'
        UnescapedValueError: If a ')' appears inside the address
    """
    fields: dict[str, Any] = {
        "username": "",
        "password": "",
        "protocol": "",
        "address": "",
        "path": "",
        "params": {},
    }
    if not source:
        return fields

    slash = source.find(PATH_SEPARATOR)
    if slash < 0:
        raise MissingSlashError(source)

    if slash > 0:
        username, password, at = parse_credentials(source, slash)
        protocol, address = parse_address(source, at + 1, slash)
        fields.update(
            username=username,
            password=password,
            protocol=protocol,
            address=address,
        )

    question = source.find(QUERY_SEPARATOR, slash + 1)
    if question < 0:
        fields["path"] = source[slash:]
    else:
        fields["path"] = source[slash:question]
        fields["params"] = collapse_params(decoder.decode(source[question + 1:]))

    return fields
