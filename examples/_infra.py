from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Shipment:
    number: str
    weight_kg: float
    is_hazardous: bool = False


def _default_shipments() -> list[Shipment]:
    return [
        Shipment("SH-001", 12.0),
        Shipment("SH-002", 410.5, is_hazardous=True),
        Shipment("SH-003", 88.2),
        Shipment("SH-004", 1.4),
        Shipment("SH-005", 230.0, is_hazardous=True),
    ]


@dataclass(slots=True)
class FakeStore:
    """Pretend document store: every query returns a fresh one-shot cursor."""

    shipments: list[Shipment] = field(default_factory=_default_shipments)
    delay_seconds: float = 0.0
    fetched: int = 0

    def query(self) -> AsyncIterator[Shipment]:
        return self._cursor()

    async def _cursor(self) -> AsyncIterator[Shipment]:
        for shipment in self.shipments:
            await asyncio.sleep(self.delay_seconds)
            self.fetched += 1
            yield shipment


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
