"""Lazy enumeration of the Cartesian product of slot domains.

The enumerator behaves like an odometer: the rightmost slot advances on every
step and, when it wraps around, carries one step to the slot on its left.
Combinations therefore come out in the order of the mixed-radix numbers
``0 .. total - 1``, the leftmost slot being the most significant digit::

    >>> it = CartesianIterator([1, 2], ["a", "b"])
    >>> list(it)
    [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')]

Each call to :meth:`CartesianIterator.next` returns a new tuple, so produced
combinations can be kept without copying.
"""

from __future__ import annotations

import logging
from typing import Collection, Hashable, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .domains import build_domains, domains_from_values
from .errors import ExhaustedError
from .model import Combination, Configuration, Domain, Value
from .sizes import product_size

logger = logging.getLogger(__name__)


class CartesianIterator(Iterator[Combination]):
    """Produce every combination taking one value from each domain."""

    def __init__(self, *collections: Iterable[Value], allow_empty: bool = False):
        domains = domains_from_values(*collections, allow_empty=allow_empty)
        self._setup(domains, tuple(range(len(domains))))

    @classmethod
    def from_mappings(
        cls,
        candidates: Mapping[Hashable, Collection[Value]],
        observed: Optional[Mapping[Hashable, Value]] = None,
        considered: Optional[Iterable[Hashable]] = None,
        allow_empty: bool = False,
    ) -> "CartesianIterator":
        """Enumerate the values of ``considered`` objects.

        See :func:`~collectionkit.core.domains.build_domains` for how the
        candidates and observed values are combined.
        """
        objects = tuple(candidates.keys() if considered is None else considered)
        domains = build_domains(candidates, observed, objects, allow_empty)
        iterator = cls.__new__(cls)
        iterator._setup(domains, objects)
        return iterator

    def _setup(self, domains: Tuple[Domain, ...], objects: Tuple[Hashable, ...]) -> None:
        self._domains = domains
        self._objects = objects
        self._cursors: List[int] = []
        self._last: Combination = ()
        self._count = 0
        self._total: Optional[int] = None

    @property
    def domains(self) -> Tuple[Domain, ...]:
        return self._domains

    @property
    def objects(self) -> Tuple[Hashable, ...]:
        """Objects bound to the slots, or slot positions for flat domains."""
        return self._objects

    def amount_of_possible_combinations(self) -> int:
        if self._total is None:
            self._total = product_size(self._domains)
        return self._total

    def amount_generated_so_far(self) -> int:
        return self._count

    def is_possible_combination(self, candidate: Sequence[Value]) -> bool:
        """Whether each value of ``candidate`` belongs to its slot domain."""
        if len(candidate) != len(self._domains):
            return False
        return all(value in domain for value, domain in zip(candidate, self._domains))

    def has_next(self) -> bool:
        return self._count < self.amount_of_possible_combinations()

    def next(self) -> Combination:
        if not self.has_next():
            raise ExhaustedError(
                f"all {self.amount_of_possible_combinations()} combinations already generated"
            )
        if self._count == 0:
            self._cursors = [0] * len(self._domains)
            self._last = tuple(domain[0] for domain in self._domains)
        else:
            self._last = self._increment()
        self._count += 1
        if not self.has_next():
            logger.debug("exhausted after %d combinations", self._count)
        return self._last

    def _increment(self) -> Combination:
        values = list(self._last)
        position = len(self._domains) - 1
        while True:
            domain = self._domains[position]
            cursor = self._cursors[position] + 1
            if cursor < len(domain):
                self._cursors[position] = cursor
                values[position] = domain[cursor]
                return tuple(values)
            # wrap and carry to the left
            self._cursors[position] = 0
            values[position] = domain[0]
            position -= 1

    def configurations(self) -> Iterator[Configuration]:
        """Continue the enumeration, binding each combination to its objects."""
        while self.has_next():
            yield Configuration(self._objects, self.next())

    def __iter__(self) -> "CartesianIterator":
        return self

    def __next__(self) -> Combination:
        try:
            return self.next()
        except ExhaustedError:
            raise StopIteration from None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(slots={len(self._domains)}, "
            f"generated={self._count}/{self.amount_of_possible_combinations()})"
        )
