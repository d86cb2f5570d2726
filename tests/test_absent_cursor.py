"""An absent cursor (None) resolves to each combinator's default without
calling any caller-supplied function or opening the provider."""

import pytest

from cursor_algorithms import (
    SelectOptions,
    accumulate,
    all_of,
    any_of,
    collect,
    find,
    find_first,
    for_each,
    none_of,
    select,
    transform,
)

from fakes import RecordingProvider, Spy, resolve


@pytest.mark.parametrize(
    ("build", "expected"),
    [
        (lambda spy, p: for_each(None, spy, provider=p), None),
        (lambda spy, p: transform(None, spy, provider=p), []),
        (lambda spy, p: accumulate(None, spy, initial="seed", provider=p), "seed"),
        (lambda spy, p: collect(None, spy, provider=p), []),
        (lambda spy, p: any_of(None, spy, provider=p), False),
        (lambda spy, p: all_of(None, spy, provider=p), False),
        (lambda spy, p: none_of(None, spy, provider=p), False),
        (lambda spy, p: find(None, spy, provider=p), None),
        (lambda spy, p: find_first(None, provider=p), None),
        (
            lambda spy, p: select(None, spy, count=3, options=SelectOptions(predicate=spy), provider=p),
            [],
        ),
    ],
    ids=[
        "for_each",
        "transform",
        "accumulate",
        "collect",
        "any_of",
        "all_of",
        "none_of",
        "find",
        "find_first",
        "select",
    ],
)
def test_absent_cursor_default(build, expected) -> None:
    spy = Spy(lambda *args: True)
    provider = RecordingProvider()

    assert resolve(build(spy, provider)).unwrap() == expected
    assert spy.calls == []
    assert provider.opened == []


def test_accumulate_absent_returns_the_same_seed_object() -> None:
    seed: list[int] = []
    assert resolve(accumulate(None, lambda a, b: a, initial=seed)).unwrap() is seed
