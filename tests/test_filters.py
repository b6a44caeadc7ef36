import pytest

from collectionkit.core.errors import UndecidedFilteringError
from collectionkit.core.filters import (
    FilteringStrategy,
    filter_conservatively,
    filter_elements,
    filter_expeditively,
    filter_strict,
    filter_with_strategies,
)


def even(n):
    return n % 2 == 0


def small(n):
    return True if n < 3 else None


def not_four(n):
    return False if n == 4 else None


def test_decided_elements():
    assert filter_strict([0, 2, 4], even) == [0, 2, 4]
    assert filter_strict([1, 3], even) == []


def test_explicit_raises_on_silence():
    with pytest.raises(UndecidedFilteringError):
        filter_strict([5], small)


def test_explicit_raises_on_conflict():
    with pytest.raises(UndecidedFilteringError):
        filter_strict([2], small, not_four, lambda n: n != 2)


def test_conservative_keeps_undecided():
    assert filter_conservatively([1, 2, 3, 4, 5], small, not_four) == [1, 2, 3, 5]


def test_expeditive_rejects_undecided():
    assert filter_expeditively([1, 2, 3, 4, 5], small, not_four) == [1, 2]


def test_mixed_strategies():
    # 2 is conflictual (small keeps it, the lambda rejects it), 3 uninformative
    result = filter_with_strategies(
        [2, 3],
        FilteringStrategy.CONSERVATIVE,
        FilteringStrategy.EXPEDITIVE,
        small,
        lambda n: False if n == 2 else None,
    )
    assert result == [3]


def test_custom_decider_sees_supporters_and_rejectors():
    seen = []

    def decider(element, supporters, rejectors):
        seen.append((element, len(supporters), len(rejectors)))
        return element == 1

    assert filter_elements([1, 4, 7], small, not_four, decider=decider) == [1]
    # 1 and 4 are decided by one side; 7 has no opinion at all
    assert seen == [(7, 0, 0)]


def test_strategy_from_string():
    assert filter_with_strategies([9], "conservative", "explicit", small) == [9]
