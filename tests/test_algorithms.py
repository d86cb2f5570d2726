import dataclasses

import pytest

from cursor_algorithms import Algorithms, Select, SelectOptions

from fakes import CountingCursor, RecordingProvider, Spy, is_even, resolve


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def algo(provider: RecordingProvider) -> Algorithms:
    return Algorithms(provider)


def test_factory_routes_through_bound_provider(algo: Algorithms, provider: RecordingProvider) -> None:
    cursor = [1, 2, 3]
    assert resolve(algo.transform(cursor).callback(lambda x: x * 2)).unwrap() == [2, 4, 6]
    assert provider.opened == [cursor]


def test_factory_surface(algo: Algorithms) -> None:
    seen: list[int] = []

    assert resolve(algo.for_each([1, 2]).callback(seen.append)).unwrap() is None
    assert seen == [1, 2]
    assert resolve(algo.accumulate([1, 2, 3]).callback(0, lambda a, b: a + b)).unwrap() == 6
    assert resolve(algo.collect([1, 2, 3, 4]).where(is_even)).unwrap() == [2, 4]
    assert resolve(algo.any_of([1, 3, 5, 4]).where(is_even)).unwrap() is True
    assert resolve(algo.all_of([2, 4, 5, 6]).where(is_even)).unwrap() is False
    assert resolve(algo.none_of([1, 3, 5]).where(is_even)).unwrap() is True
    assert resolve(algo.find([1, 2, 3]).where(lambda x: x > 1)).unwrap() == 2
    assert resolve(algo.find_first([9, 8])).unwrap() == 9


def test_factory_absent_cursor(algo: Algorithms, provider: RecordingProvider) -> None:
    assert resolve(algo.none_of(None).where(is_even)).unwrap() is False
    assert resolve(algo.find_first(None)).unwrap() is None
    assert resolve(algo.select(None, 3).where(is_even).project(str)).unwrap() == []
    assert provider.opened == []


def test_select_builder(algo: Algorithms) -> None:
    cursor = CountingCursor([1, 2, 3, 4, 5])
    predicate = Spy(is_even)

    result = resolve(algo.select(cursor, 2).where(predicate).project(lambda x: x * 10))

    assert result.unwrap() == [20, 40]
    assert predicate.seen == [1, 2, 3, 4]


def test_select_builder_pre_project(algo: Algorithms) -> None:
    query = algo.select([1, 2, 3, 4], 2).pre_project(True).where(lambda v: v > 15)
    assert resolve(query.project(lambda x: x * 10)).unwrap() == [20, 30]


def test_select_builder_is_immutable(algo: Algorithms) -> None:
    base = algo.select(None, 2)
    filtered = base.where(is_even)
    projected = filtered.pre_project()

    assert base.options == SelectOptions()
    assert filtered.options.predicate is is_even
    assert filtered.options.pre_project is False
    assert projected.options.pre_project is True
    with pytest.raises(dataclasses.FrozenInstanceError):
        base.count = 5  # type: ignore[misc]


def test_select_template_reused_across_cursors(algo: Algorithms) -> None:
    template = algo.select(None, 1).where(is_even)

    first = resolve(template.with_cursor([1, 2, 4]).project(lambda x: -x)).unwrap()
    second = resolve(template.with_cursor([3, 6]).project(lambda x: -x)).unwrap()

    assert first == [-2]
    assert second == [-6]


def test_select_explicit_options_override_configured(algo: Algorithms) -> None:
    query = algo.select([1, 2, 3, 4], 5).where(is_even)
    result = resolve(query.project(lambda x: x, SelectOptions(predicate=lambda x: x > 2)))

    assert result.unwrap() == [3, 4]


def test_select_count_validated_at_construction(algo: Algorithms) -> None:
    with pytest.raises(TypeError):
        algo.select([1], 1.5)  # type: ignore[arg-type]
    assert isinstance(algo.select([1], 0), Select)


def test_algorithms_rejects_provider_without_elements() -> None:
    with pytest.raises(TypeError):
        Algorithms(object())  # type: ignore[arg-type]


def test_default_algorithms_work_over_plain_lists() -> None:
    assert resolve(Algorithms().transform([1]).callback(str)).unwrap() == ["1"]
