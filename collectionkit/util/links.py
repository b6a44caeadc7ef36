"""Helpers on chains of links."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Mapping, TypeVar

from ..core.errors import ChainLoopError

T = TypeVar("T", bound=Hashable)


def reduce_to_direct_links(links: Mapping[T, T], keep_intermediaries: bool = False) -> Dict[T, T]:
    """Turn chains ``A -> B -> ... -> Z`` into direct links ``A -> Z``.

    Each (key, value) of ``links`` is one step of a chain.  The result maps the
    start of every chain to its last element; with ``keep_intermediaries``
    every key of ``links`` is mapped to the end of its chain.  A chain ending
    in a loop raises :class:`ChainLoopError`.
    """
    keys = set(links)
    values = set(links.values())
    intermediaries = keys & values
    ends = values - intermediaries

    reduced: Dict[T, T] = {}
    known = reduced if keep_intermediaries else {}
    for source in links:
        if source in intermediaries:
            continue
        target = links[source]
        if target in known:
            reduced[source] = known[target]
            continue
        chain: List[T] = []
        while target not in ends:
            chain.append(target)
            target = links[target]
            if target in chain:
                raise ChainLoopError(chain[chain.index(target):])
        for intermediary in chain:
            known[intermediary] = target
        reduced[source] = target
    return reduced


def recursive_flatten(
    items: Iterable[T],
    should_flatten: Callable[[T], bool],
    expand: Callable[[T], Iterable[T]],
) -> Iterator[T]:
    """Lazily replace every item matching ``should_flatten`` by its expansion,
    applying the same treatment to the expanded items."""
    for item in items:
        if should_flatten(item):
            yield from recursive_flatten(expand(item), should_flatten, expand)
        else:
            yield item
