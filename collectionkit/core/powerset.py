"""Lazy enumeration of the subsets of a set.

A countdown integer encodes the next subset as a bit pattern over the
elements, bit ``i`` standing for the ``i``-th element.  The walk starts from
the full set (all bits set) and descends by pattern value.  The empty set is
only produced when ``include_empty`` is requested; the count and the
membership test follow the same choice.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, FrozenSet, Iterable, Iterator, Optional, Tuple, TypeVar

from .domains import make_domain
from .errors import ExhaustedError
from .sizes import power_set_size

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PowerSetIterator(Iterator[FrozenSet[T]]):
    """Produce every subset of ``elements``, from the full set downwards."""

    def __init__(self, elements: Iterable[T], include_empty: bool = False):
        self._elements: Tuple[T, ...] = make_domain(elements)
        self._include_empty = include_empty
        self._total: Optional[int] = None
        self._countdown: Optional[int] = None
        self._count = 0

    @property
    def elements(self) -> Tuple[T, ...]:
        return self._elements

    @property
    def include_empty(self) -> bool:
        return self._include_empty

    def amount_of_possible_subsets(self) -> int:
        if self._total is None:
            self._total = power_set_size(len(self._elements), self._include_empty)
        return self._total

    def amount_generated_so_far(self) -> int:
        return self._count

    def is_possible_subset(self, candidate: AbstractSet[T]) -> bool:
        if not candidate and not self._include_empty:
            return False
        return all(element in self._elements for element in candidate)

    def has_next(self) -> bool:
        if self._countdown is None:
            self._countdown = self.amount_of_possible_subsets()
        return self._countdown > 0

    def next_ordered(self) -> Tuple[T, ...]:
        """Like :meth:`next` but keep the elements in their original order."""
        if not self.has_next():
            raise ExhaustedError(
                f"all {self.amount_of_possible_subsets()} subsets already generated"
            )
        pattern = self._countdown if not self._include_empty else self._countdown - 1
        subset = tuple(
            element for i, element in enumerate(self._elements) if pattern >> i & 1
        )
        self._countdown -= 1
        self._count += 1
        if not self.has_next():
            logger.debug("exhausted after %d subsets", self._count)
        return subset

    def next(self) -> FrozenSet[T]:
        return frozenset(self.next_ordered())

    def ordered_subsets(self) -> Iterator[Tuple[T, ...]]:
        """Continue the enumeration with subsets as ordered tuples."""
        while self.has_next():
            yield self.next_ordered()

    def __iter__(self) -> "PowerSetIterator[T]":
        return self

    def __next__(self) -> FrozenSet[T]:
        try:
            return self.next()
        except ExhaustedError:
            raise StopIteration from None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(elements={len(self._elements)}, "
            f"generated={self._count}/{self.amount_of_possible_subsets()})"
        )
