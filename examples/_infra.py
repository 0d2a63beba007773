from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    customer: str
    total: float


@dataclass(slots=True)
class FakeOrderFeed:
    """Cursor over orders that records pulls and whether it was closed."""

    orders: list[Order]
    pulls: int = 0
    closed: bool = False

    def __iter__(self) -> Iterator[Order]:
        return self

    def __next__(self) -> Order:
        if self.closed or self.pulls >= len(self.orders):
            raise StopIteration
        order = self.orders[self.pulls]
        self.pulls += 1
        return order

    def close(self) -> None:
        self.closed = True


def sample_orders() -> list[Order]:
    customers = ["ann", "bob", "cid"]
    return [Order(id=i, customer=customers[i % 3], total=10.0 * (i % 4 + 1)) for i in range(12)]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
