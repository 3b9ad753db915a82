"""Scheme detection for the ``scheme://`` prefix."""

from .constants import PASSWORD_SEPARATOR, SCHEME_EXTRA_CHARS, SCHEME_SEPARATOR
from .errors import InvalidSchemeError

_SLASHES = SCHEME_SEPARATOR[1:]


def _is_letter(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def _is_scheme_char(c: str) -> bool:
    return "0" <= c <= "9" or c in SCHEME_EXTRA_CHARS


def scan_scheme(raw: str) -> tuple[str, str]:
    """Split an optional ``scheme://`` prefix off a DSN.

    A scheme is ``[a-zA-Z][a-zA-Z0-9+-.]*`` terminated by ``://``. Anything
    that does not match that shape means "no scheme" and the input comes
    back unchanged as the remainder, so ``host:1234/path`` is valid.

    Args:
        raw: Full DSN text

    Returns:
        Tuple of (scheme, remainder); scheme is empty if there is none

    Raises:
        InvalidSchemeError: If the DSN starts with ':'
    """
    for i, c in enumerate(raw):
        if _is_letter(c):
            continue
        if _is_scheme_char(c):
            if i == 0:
                return "", raw
            continue
        if c == PASSWORD_SEPARATOR:
            if i == 0:
                raise InvalidSchemeError(raw, position=0)
            # Slicing keeps the lookahead inside the string
            if raw[i + 1:i + 3] == _SLASHES:
                return raw[:i], raw[i + 3:]
            return "", raw
        # Character outside the scheme alphabet
        return "", raw
    return "", raw
