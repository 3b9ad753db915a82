"""DSN parsing error hierarchy.

Every error describes a structural defect in the DSN text. All of them
derive from ``ValueError`` so callers that only care about "bad input" can
catch that, while :class:`DSNError` and its subtypes allow distinct catch
clauses per defect.
"""

from typing import Optional

from .constants import (
    DSN_FORMAT,
    ERROR_INVALID_SCHEME,
    ERROR_MISSING_SLASH,
    ERROR_UNESCAPED_VALUE,
    ERROR_UNTERMINATED_ADDRESS,
)
from .logging import sanitize_dsn


class DSNError(ValueError):
    """Base exception for all DSN parsing errors.

    Attributes:
        dsn: The DSN text that failed to parse (credentials masked)
        position: Index in ``dsn`` where parsing stopped, if known
    """

    #: Default message, taken from the subclass.
    message: str = "invalid DSN"
    #: Suggestion appended to the message.
    hint: str = f"Use format {DSN_FORMAT}"

    def __init__(self, dsn: str = "", position: Optional[int] = None):
        self.dsn = sanitize_dsn(dsn)
        self.position = position
        super().__init__(self._format())

    def __reduce__(self):
        # Rebuild from the constructor arguments, not the formatted message
        return (self.__class__, (self.dsn, self.position))

    def relocate(self, dsn: str, offset: int) -> "DSNError":
        """Return the same error reported against an enclosing DSN.

        Args:
            dsn: Full DSN text the scanned text was taken from
            offset: Index of the scanned text within ``dsn``

        Returns:
            New error of the same type with ``position`` shifted by ``offset``
        """
        position = self.position
        if position is not None:
            position += offset
        return self.__class__(dsn, position)

    def _format(self) -> str:
        lines = [self.message]
        if self.dsn:
            lines.append(f"  DSN: {self.dsn}")
        if self.position is not None:
            lines.append(f"  Position: {self.position}")
        lines.append(f"  Hint: {self.hint}")
        return "\n".join(lines)


class InvalidSchemeError(DSNError):
    """Raised when the DSN starts with ':' and no scheme token precedes it."""

    message = ERROR_INVALID_SCHEME
    hint = "A scheme must start with a letter, e.g. mysql://..."


class MissingSlashError(DSNError):
    """Raised when a non-empty DSN body contains no '/' at all."""

    message = ERROR_MISSING_SLASH
    hint = "Add a path, e.g. user:pass@tcp(localhost:3306)/dbname"


class UnterminatedAddressError(DSNError):
    """Raised when '(' opens an address but ')' does not precede the path slash."""

    message = ERROR_UNTERMINATED_ADDRESS
    hint = "Close the address with ')' right before the '/', e.g. tcp(host:port)/path"


class UnescapedValueError(DSNError):
    """Raised when a ')' sits inside the address region but not at its end.

    Usually means a field before the path contains a literal '/' or '@'
    that should have been percent-escaped.
    """

    message = ERROR_UNESCAPED_VALUE
    hint = "Percent-escape '/' and '@' in credentials and addresses (%2F, %40)"
