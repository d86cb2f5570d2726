from __future__ import annotations

from _infra import FakeStore, Shipment, banner, run

from cursor_algorithms import accumulate, any_of, find, transform
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: transform, accumulate, any_of, find")

    store = FakeStore(delay_seconds=0.001)

    numbers = await transform(store.query(), lambda s: s.number)
    total = await accumulate(store.query(), lambda acc, s: acc + s.weight_kg, initial=0.0)
    hazardous = await any_of(store.query(), lambda s: s.is_hazardous)
    heavy = await find(store.query(), lambda s: s.weight_kg > 200)

    print(f"numbers:   {numbers.unwrap()}")
    print(f"total kg:  {total.unwrap():.1f}")
    print(f"hazardous: {hazardous.unwrap()}")

    match heavy:
        case Ok(Shipment(number=number)):
            print(f"first heavy shipment: {number}")
        case Ok(None):
            print("no heavy shipment")
        case Error(err):
            print(f"error: {err!r}")

    # nothing to scan: defaults, no traversal
    print(f"absent cursor -> {(await transform(None, str)).unwrap()!r}")


if __name__ == "__main__":
    run(main)
