"""Shared fixtures for dsnparse tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pytest


class StubDecoder:
    """Query decoder returning a fixed mapping and recording its calls."""

    def __init__(self, result: Mapping[str, Sequence[str]] | None = None) -> None:
        self.result = result if result is not None else {}
        self.calls: list[str] = []

    def decode(self, query: str) -> Mapping[str, Sequence[str]]:
        self.calls.append(query)
        return self.result


@pytest.fixture
def stub_decoder() -> StubDecoder:
    return StubDecoder({"level": ["debug", "info"], "ttl": ["1s"], "empty": []})


@pytest.fixture
def empty_decoder() -> StubDecoder:
    return StubDecoder()
