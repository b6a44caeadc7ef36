"""Tri-state filters and the strategies deciding undecided elements.

A filter tells whether an element should be kept (``True``), rejected
(``False``) or has no opinion (``None``).  An element is undecided when no
filter has an opinion, or when some filters keep it while others reject it;
a decider then settles the case.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from .errors import UndecidedFilteringError

T = TypeVar("T")

Filter = Callable[[T], Optional[bool]]
Decider = Callable[[T, Sequence[Filter], Sequence[Filter]], bool]


class FilteringStrategy(str, Enum):
    """Simple ways of settling an undecided element."""
    CONSERVATIVE = "conservative"
    EXPEDITIVE = "expeditive"
    EXPLICIT = "explicit"


def _decide(strategy: FilteringStrategy, element, supporters, rejectors) -> bool:
    if strategy is FilteringStrategy.CONSERVATIVE:
        return True
    if strategy is FilteringStrategy.EXPEDITIVE:
        return False
    if strategy is FilteringStrategy.EXPLICIT:
        raise UndecidedFilteringError(
            f"The filtering of {element!r} is undecided: "
            f"supporters {list(supporters)} VS rejectors {list(rejectors)}"
        )
    raise ValueError(f"Unmanaged strategy: {strategy!r}")


def strategy_decider(
    uninformative: FilteringStrategy, conflictual: FilteringStrategy
) -> Decider:
    """Build a decider applying ``uninformative`` when no filter has an
    opinion and ``conflictual`` when supporters and rejectors disagree."""
    uninformative = FilteringStrategy(uninformative)
    conflictual = FilteringStrategy(conflictual)

    def decider(element, supporters, rejectors) -> bool:
        if not supporters and not rejectors:
            return _decide(uninformative, element, supporters, rejectors)
        if supporters and rejectors:
            return _decide(conflictual, element, supporters, rejectors)
        raise ValueError(
            f"Not an undecided case: supporters {list(supporters)}, rejectors {list(rejectors)}"
        )

    return decider


def filter_elements(elements: Iterable[T], *filters: Filter, decider: Decider) -> List[T]:
    """Keep the elements supported by the filters, asking ``decider`` when
    the filters do not settle it."""
    kept = []
    for element in elements:
        supporters = []
        rejectors = []
        for flt in filters:
            answer = flt(element)
            if answer is None:
                continue
            (supporters if answer else rejectors).append(flt)
        if bool(supporters) == bool(rejectors):
            supported = decider(element, supporters, rejectors)
        else:
            supported = bool(supporters)
        if supported:
            kept.append(element)
    return kept


def filter_with_strategies(
    elements: Iterable[T],
    uninformative: FilteringStrategy,
    conflictual: FilteringStrategy,
    *filters: Filter,
) -> List[T]:
    return filter_elements(elements, *filters, decider=strategy_decider(uninformative, conflictual))


def filter_strict(elements: Iterable[T], *filters: Filter) -> List[T]:
    """Raise on any undecided element."""
    return filter_with_strategies(
        elements, FilteringStrategy.EXPLICIT, FilteringStrategy.EXPLICIT, *filters
    )


def filter_conservatively(elements: Iterable[T], *filters: Filter) -> List[T]:
    """Keep every undecided element."""
    return filter_with_strategies(
        elements, FilteringStrategy.CONSERVATIVE, FilteringStrategy.CONSERVATIVE, *filters
    )


def filter_expeditively(elements: Iterable[T], *filters: Filter) -> List[T]:
    """Reject every undecided element."""
    return filter_with_strategies(
        elements, FilteringStrategy.EXPEDITIVE, FilteringStrategy.EXPEDITIVE, *filters
    )
