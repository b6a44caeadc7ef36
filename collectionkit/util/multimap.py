"""Maps binding each key to a collection of values.

A :class:`MultiMap` is a proper mapping from a key to its *collection* of
values, with helpers to work on single (key, value) couples.  Because it is a
mapping of collections, it can be given directly as the candidate map of
:func:`collectionkit.core.domains.build_domains`.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Collection, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class MultiMap(MutableMapping, Generic[K, V]):
    """Base class; subclasses choose the collection holding the values."""

    def __init__(self, other: Optional[MutableMapping] = None):
        self._inner: Dict[K, Collection[V]] = {}
        if other is not None:
            for key, values in other.items():
                self.add_all(key, values)

    def _new_container(self) -> Collection[V]:
        raise NotImplementedError

    def _insert(self, container, value: V) -> bool:
        raise NotImplementedError

    def _discard(self, container, value: V) -> bool:
        raise NotImplementedError

    def _container_for(self, key: K) -> Collection[V]:
        if key not in self._inner:
            self._inner[key] = self._new_container()
        return self._inner[key]

    def add(self, key: K, value: V) -> bool:
        """Map ``value`` to ``key`` next to the values already there.

        Return whether the map changed.
        """
        return self._insert(self._container_for(key), value)

    def add_all(self, key: K, values: Iterable[V]) -> bool:
        container = self._container_for(key)
        changed = False
        for value in values:
            changed |= self._insert(container, value)
        return changed

    def remove(self, key: K, value: V) -> bool:
        """Unmap one value from ``key``; return whether the map changed."""
        container = self._inner.get(key)
        if container is None:
            return False
        return self._discard(container, value)

    def remove_all(self, key: K, values: Iterable[V]) -> bool:
        container = self._inner.get(key)
        if container is None:
            return False
        changed = False
        for value in values:
            changed |= self._discard(container, value)
        return changed

    def replace_all(self, key: K, values: Iterable[V]) -> Optional[Collection[V]]:
        """Replace the values of ``key``, returning the previous collection."""
        previous = self._inner.get(key)
        self._inner[key] = self._new_container()
        self.add_all(key, values)
        return previous

    def get_all(self, key: K) -> Optional[Collection[V]]:
        return self._inner.get(key)

    def contains_couple(self, key: K, value: V) -> bool:
        return key in self._inner and value in self._inner[key]

    def couples(self) -> Iterator[Tuple[K, V]]:
        for key, values in self._inner.items():
            for value in values:
                yield key, value

    def __getitem__(self, key: K) -> Collection[V]:
        return self._inner[key]

    def __setitem__(self, key: K, values: Iterable[V]) -> None:
        self.replace_all(key, values)

    def __delitem__(self, key: K) -> None:
        del self._inner[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


class HashMultiMap(MultiMap[K, V]):
    """At most one copy of each (key, value) couple."""

    def _new_container(self) -> Set[V]:
        return set()

    def _insert(self, container: Set[V], value: V) -> bool:
        if value in container:
            return False
        container.add(value)
        return True

    def _discard(self, container: Set[V], value: V) -> bool:
        if value not in container:
            return False
        container.remove(value)
        return True


class ListMultiMap(MultiMap[K, V]):
    """Repeated couples are all kept; each removal drops one copy.

    ``remove_all`` drops every copy of the values it is given.
    """

    def _new_container(self) -> List[V]:
        return []

    def _insert(self, container: List[V], value: V) -> bool:
        container.append(value)
        return True

    def _discard(self, container: List[V], value: V) -> bool:
        try:
            container.remove(value)
        except ValueError:
            return False
        return True

    def remove_all(self, key: K, values: Iterable[V]) -> bool:
        container = self._inner.get(key)
        if container is None:
            return False
        dropped = list(values)
        kept = [value for value in container if value not in dropped]
        changed = len(kept) != len(container)
        container[:] = kept
        return changed
