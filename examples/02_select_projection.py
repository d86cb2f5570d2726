from __future__ import annotations

from _infra import FakeStore, banner, run

from cursor_algorithms import Algorithms


async def main() -> None:
    banner("02_select_projection: bounded select, filter before/after projection")

    algo = Algorithms()
    store = FakeStore()

    # filter on raw shipments, emit numbers; stops after the second match
    hazardous = algo.select(store.query(), 2).where(lambda s: s.is_hazardous)
    numbers = await hazardous.project(lambda s: s.number)
    print(f"hazardous: {numbers.unwrap()} (fetched {store.fetched} of {len(store.shipments)})")

    # project first, then filter the projected weights
    store = FakeStore()
    weights = (
        algo.select(store.query(), 3)
        .pre_project()
        .where(lambda kg: kg < 100)
    )
    light = await weights.project(lambda s: s.weight_kg)
    print(f"light weights: {light.unwrap()}")


if __name__ == "__main__":
    run(main)
