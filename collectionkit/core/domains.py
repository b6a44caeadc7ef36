"""Construction of the per-slot value domains bounding an enumeration.

A domain is an ordered tuple of distinct values.  Slots are either given
directly as flat collections, or built from a mapping of objects to their
candidate values, optionally narrowed by values observed on some of the
objects.
"""

from __future__ import annotations

import logging
from typing import Collection, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple

from .errors import EmptyDomainError
from .model import Domain, Value

logger = logging.getLogger(__name__)


def make_domain(values: Iterable[Value]) -> Domain:
    """Collapse duplicates while keeping the first-seen order."""
    return tuple(dict.fromkeys(values))


def domains_from_values(*collections: Iterable[Value], allow_empty: bool = False) -> Tuple[Domain, ...]:
    """One domain per collection, in the order given."""
    domains = tuple(make_domain(values) for values in collections)
    for position, domain in enumerate(domains):
        if not domain and not allow_empty:
            raise EmptyDomainError(position)
    return domains


def build_domains(
    candidates: Mapping[Hashable, Collection[Value]],
    observed: Optional[Mapping[Hashable, Value]] = None,
    considered: Optional[Iterable[Hashable]] = None,
    allow_empty: bool = False,
) -> Tuple[Domain, ...]:
    """Build the domains of ``considered`` objects, in that order.

    An observed value replaces the candidates of its object with a singleton.
    Candidates and observations about objects which are not considered are
    ignored.  When ``considered`` is omitted, every key of ``candidates`` is
    considered.
    """
    observed = observed or {}
    pattern = list(candidates.keys() if considered is None else considered)
    index: Dict[Hashable, int] = {}
    for position, obj in enumerate(pattern):
        index.setdefault(obj, position)
    slots: List[Optional[Domain]] = [None] * len(pattern)

    for obj, value in observed.items():
        position = index.get(obj)
        if position is not None and slots[position] is None:
            slots[position] = (value,)

    for obj, values in candidates.items():
        position = index.get(obj)
        if position is not None and slots[position] is None:
            slots[position] = make_domain(values)

    domains = []
    for position, domain in enumerate(slots):
        if not domain:
            if not allow_empty:
                raise EmptyDomainError(position, pattern[position])
            domain = ()
        domains.append(domain)

    logger.debug(
        "built %d domains (%d observed) for %r", len(domains),
        sum(1 for obj in observed if obj in index), pattern,
    )
    return tuple(domains)
