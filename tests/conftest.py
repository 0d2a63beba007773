from __future__ import annotations

import pytest


class CountingCursor:
    """Cursor over 0, 1, 2, ... (below `limit` if given) that counts pulls."""

    def __init__(self, limit: int | None = None) -> None:
        self.limit = limit
        self.pulls = 0
        self.closed = False

    def __iter__(self) -> CountingCursor:
        return self

    def __next__(self) -> int:
        if self.limit is not None and self.pulls >= self.limit:
            raise StopIteration
        value = self.pulls
        self.pulls += 1
        return value

    def close(self) -> None:
        self.closed = True


class RestartingCursor:
    """Misbehaving cursor that yields again after signalling exhaustion."""

    def __init__(self) -> None:
        self.calls = 0

    def __iter__(self) -> RestartingCursor:
        return self

    def __next__(self) -> int:
        self.calls += 1
        if self.calls % 2 == 0:
            raise StopIteration
        return self.calls


class Sparse:
    """Array-like without an iteration protocol."""

    def __init__(self, length: int, values: dict[int, str]) -> None:
        self.length = length
        self.values = values

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> str | None:
        return self.values.get(index)


@pytest.fixture
def counting() -> CountingCursor:
    return CountingCursor()


@pytest.fixture
def finite() -> CountingCursor:
    return CountingCursor(limit=5)
