import asyncio

import pytest
from kungfu import Ok

from cursor_algorithms import (
    DEFAULT_PROVIDER,
    AsyncIterableProvider,
    Reducer,
    TraversalStats,
    find,
    for_each_async,
    reduce,
    transform,
    while_async,
)

from fakes import ClosingProvider, CountingCursor, RecordingProvider, Spy, resolve


def test_default_provider_accepts_sync_and_async_cursors() -> None:
    async def run() -> tuple[list[int], list[int]]:
        plain = [x async for x in DEFAULT_PROVIDER.elements([1, 2, 3])]
        lazy = [x async for x in DEFAULT_PROVIDER.elements(CountingCursor([4, 5]))]
        return plain, lazy

    plain, lazy = asyncio.run(run())
    assert plain == [1, 2, 3]
    assert lazy == [4, 5]
    assert isinstance(DEFAULT_PROVIDER, AsyncIterableProvider)


def test_for_each_async_visits_everything_in_order() -> None:
    visit = Spy(lambda x: False)
    stats = asyncio.run(for_each_async(DEFAULT_PROVIDER, [3, 1, 2], visit))

    # the visit return value never stops the unconditional traversal
    assert visit.seen == [3, 1, 2]
    assert stats == TraversalStats(visited=3, stopped_early=False)


def test_while_async_stops_after_first_falsy_visit() -> None:
    cursor = CountingCursor([1, 2, 3, 4])
    visit = Spy(lambda x: x < 2)
    stats = asyncio.run(while_async(DEFAULT_PROVIDER, cursor, visit))

    assert visit.seen == [1, 2]
    assert cursor.pulled == 2
    assert stats == TraversalStats(visited=2, stopped_early=True)


def test_while_async_over_empty_cursor() -> None:
    visit = Spy(lambda x: True)
    stats = asyncio.run(while_async(DEFAULT_PROVIDER, [], visit))

    assert visit.calls == []
    assert stats == TraversalStats(visited=0)


def _largest() -> Reducer[int, int | None, int | None]:
    def step(best: int | None, x: int) -> tuple[int | None, bool]:
        return (x if best is None or x > best else best), True

    return Reducer(
        name="largest",
        kind="each",
        initial=lambda: None,
        step=step,
        finish=lambda best: best,
        default=lambda: None,
    )


def test_custom_reducer_runs_over_cursor() -> None:
    assert resolve(reduce([4, 9, 2], _largest())).unwrap() == 9
    assert resolve(reduce([], _largest())).unwrap() is None


def test_absent_cursor_never_reaches_provider() -> None:
    provider = RecordingProvider()
    result = resolve(reduce(None, _largest(), provider=provider))

    match result:
        case Ok(value):
            assert value is None
        case _:
            pytest.fail(f"unexpected {result!r}")
    assert provider.opened == []


def test_present_but_empty_cursor_is_traversed() -> None:
    provider = RecordingProvider()
    resolve(reduce([], _largest(), provider=provider))

    assert provider.opened == [[]]


def test_reducer_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        Reducer(
            name="bad",
            kind="sometimes",  # type: ignore[arg-type]
            initial=list,
            step=lambda s, x: (s, True),
            finish=list,
            default=list,
        )


def test_results_are_lazy_until_awaited() -> None:
    mapper = Spy(lambda x: x)
    cursor = CountingCursor([1, 2])
    pending = transform(cursor, mapper)

    assert mapper.calls == []
    assert cursor.pulled == 0

    assert resolve(pending).unwrap() == [1, 2]


def test_fault_in_caller_function_propagates_on_await() -> None:
    cursor = CountingCursor([1, 2, 3])

    def explode(x: int) -> int:
        if x == 2:
            raise RuntimeError("boom")
        return x

    with pytest.raises(RuntimeError, match="boom"):
        resolve(transform(cursor, explode))

    # traversal aborted at the faulting element
    assert cursor.pulled == 2


def test_element_stream_closed_when_find_stops_early() -> None:
    provider = ClosingProvider()

    async def run() -> tuple[int | None, int]:
        found = await find([1, 2, 3], lambda x: x == 2, provider=provider)
        # checked before the loop shuts down and finalizes stray generators
        return found.unwrap(), provider.closed

    found, closed = asyncio.run(run())
    assert found == 2
    assert closed == 1


def test_element_stream_closed_when_caller_function_raises() -> None:
    provider = ClosingProvider()

    def explode(x: int) -> int:
        raise RuntimeError("boom")

    async def run() -> int:
        with pytest.raises(RuntimeError, match="boom"):
            await transform([1, 2, 3], explode, provider=provider)
        return provider.closed

    assert asyncio.run(run()) == 1


def test_element_stream_closed_after_full_traversal() -> None:
    provider = ClosingProvider()

    async def run() -> int:
        await transform([1, 2], str, provider=provider)
        return provider.closed

    assert asyncio.run(run()) == 1
