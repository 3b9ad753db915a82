"""Query string decoding.

The body parser only needs one capability from a query decoder: turn
``key=value&...`` into a mapping of key to ordered values. Any object with a
matching ``decode`` method can be passed to :func:`dsnparse.parse`, which
makes it easy to stub the decoder out in tests.
"""

import re
from typing import Mapping, Protocol, Sequence
from urllib.parse import parse_qs

from .logging import log_query_fallback

# '%' not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class QueryDecoder(Protocol):
    """Decodes a query string into key -> values."""

    def decode(self, query: str) -> Mapping[str, Sequence[str]]:
        """Decode ``query``; return an empty mapping if it is malformed."""
        ...


class UrllibQueryDecoder:
    """Standard URL query decoder backed by ``urllib.parse.parse_qs``.

    Pairs are '&' separated, '+' decodes to a space and percent escapes are
    decoded. Blank values are kept and a pair without '=' yields an empty
    value. Malformed input (a broken percent escape or a ';' inside a pair)
    degrades to an empty mapping instead of raising.
    """

    def decode(self, query: str) -> Mapping[str, Sequence[str]]:
        try:
            self._check(query)
            return parse_qs(query, keep_blank_values=True)
        except ValueError as e:
            log_query_fallback(query, str(e))
            return {}

    @staticmethod
    def _check(query: str) -> None:
        if ";" in query:
            raise ValueError("invalid semicolon separator in query")
        match = _BAD_ESCAPE.search(query)
        if match:
            raise ValueError(f"invalid URL escape at position {match.start()}")


def collapse_params(values: Mapping[str, Sequence[str]]) -> dict[str, str]:
    """Keep the first value for every key.

    Args:
        values: Decoder output

    Returns:
        Dictionary of key -> first value; keys without values are dropped
    """
    params = {}
    for key, key_values in values.items():
        if len(key_values) > 0:
            params[key] = key_values[0]
    return params


default_decoder = UrllibQueryDecoder()
