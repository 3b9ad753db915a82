"""The parsed DSN record."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .constants import CREDENTIAL_MASK


@dataclass(frozen=True)
class ParsedDSN:
    """Structural components of a DSN.

    Every string field is empty when its segment is absent. ``params`` is
    always a mapping, empty when there is no query string.
    """

    scheme: str = ""
    username: str = ""
    password: str = ""
    protocol: str = ""
    address: str = ""
    path: str = ""
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only view over a private copy
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((
            self.scheme,
            self.username,
            self.password,
            self.protocol,
            self.address,
            self.path,
            frozenset(self.params.items()),
        ))

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from plain values
        return (self.__class__, tuple(self.to_dict().values()))

    def __repr__(self) -> str:
        # Password is never shown
        return (
            f"{self.__class__.__name__}(scheme={self.scheme!r}, "
            f"username={self.username!r}, protocol={self.protocol!r}, "
            f"address={self.address!r}, path={self.path!r}, "
            f"params={dict(self.params)!r})"
        )

    def to_dict(self, mask_credentials: bool = False) -> dict[str, Any]:
        """Return the fields as a plain dictionary.

        Args:
            mask_credentials: Replace a non-empty username and password
                with a mask, the same way ``sanitize_dsn`` does

        Returns:
            Dictionary with keys: scheme, username, password, protocol,
            address, path, params
        """
        username = self.username
        password = self.password
        if mask_credentials:
            if username:
                username = CREDENTIAL_MASK
            if password:
                password = CREDENTIAL_MASK
        return {
            "scheme": self.scheme,
            "username": username,
            "password": password,
            "protocol": self.protocol,
            "address": self.address,
            "path": self.path,
            "params": dict(self.params),
        }
