from __future__ import annotations

from _infra import FakeStore, banner, run

from cursor_algorithms import Log, TraversalEvent, all_of_w, none_of_w, select_w
from kungfu import Error, Ok


async def main() -> None:
    banner("03_traced: writer variants log one TraversalEvent per run")

    store = FakeStore()
    log = Log[TraversalEvent]()

    checks = [
        all_of_w(store.query(), lambda s: s.weight_kg < 500),
        none_of_w(store.query(), lambda s: s.weight_kg > 1000),
        none_of_w(None, lambda s: True),
    ]
    for check in checks:
        wr = await check
        log = log.combine(wr.log)
        match wr.result:
            case Ok(value):
                print(f"{wr.log[0].combinator}: {value}")
            case Error(err):
                print(f"error: {err!r}")

    wr = await select_w(store.query(), lambda s: s.number, count=1)
    log = log.combine(wr.log)

    for event in log:
        print(event)


if __name__ == "__main__":
    run(main)
