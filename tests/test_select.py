import pytest

from cursor_algorithms import SelectOptions, select

from fakes import CountingCursor, RecordingProvider, Spy, is_even, resolve


def test_select_filters_then_projects() -> None:
    cursor = CountingCursor([1, 2, 3, 4, 5])
    predicate = Spy(is_even)
    projection = Spy(lambda x: x * 10)

    result = resolve(select(cursor, projection, count=2, options=SelectOptions(predicate=predicate)))

    assert result.unwrap() == [20, 40]
    assert predicate.seen == [1, 2, 3, 4]
    assert projection.seen == [2, 4]
    assert cursor.pulled == 4


def test_select_pre_project_filters_projected_values() -> None:
    predicate = Spy(lambda v: v > 15)
    options = SelectOptions(predicate=predicate, pre_project=True)

    result = resolve(select([1, 2, 3, 4], lambda x: x * 10, count=2, options=options))

    assert result.unwrap() == [20, 30]
    assert predicate.seen == [10, 20, 30]


def test_select_pre_project_over_three_matches() -> None:
    options = SelectOptions(predicate=lambda v: v > 15, pre_project=True)
    result = resolve(select([1, 2, 3, 4], lambda x: x * 10, count=3, options=options))

    assert result.unwrap() == [20, 30, 40]


def test_select_pre_project_skips_leading_misses() -> None:
    options = SelectOptions(predicate=lambda v: v > 25, pre_project=True)
    result = resolve(select([1, 2, 3, 4], lambda x: x * 10, count=2, options=options))

    assert result.unwrap() == [30, 40]


def test_select_default_predicate_takes_first_count() -> None:
    cursor = CountingCursor(["a", "b", "c"])
    result = resolve(select(cursor, str.upper, count=2))

    assert result.unwrap() == ["A", "B"]
    assert cursor.pulled == 2


def test_select_returns_fewer_when_cursor_runs_out() -> None:
    assert resolve(select([1, 2, 3], lambda x: x, count=10)).unwrap() == [1, 2, 3]


@pytest.mark.parametrize("count", [0, -1])
def test_select_non_positive_count_evaluates_nothing(count: int) -> None:
    provider = RecordingProvider()
    cursor = CountingCursor([1, 2, 3])
    predicate = Spy(lambda x: True)
    projection = Spy(lambda x: x)

    result = resolve(
        select(cursor, projection, count=count, options=SelectOptions(predicate=predicate), provider=provider)
    )

    assert result.unwrap() == []
    assert provider.opened == [cursor]
    assert predicate.calls == []
    assert projection.calls == []
    # the bound is met before evaluation, but one element is still consumed
    assert cursor.pulled == 1


def test_select_rejects_non_int_count() -> None:
    with pytest.raises(TypeError):
        select([1], lambda x: x, count="2")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        select([1], lambda x: x, count=True)


def test_select_options_validation() -> None:
    with pytest.raises(TypeError):
        SelectOptions(predicate="not callable")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        SelectOptions(pre_project=1)  # type: ignore[arg-type]


def test_select_rejects_non_callable_projection() -> None:
    with pytest.raises(TypeError):
        select([1], None, count=1)  # type: ignore[arg-type]
