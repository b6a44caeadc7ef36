"""Bidirectional map: every key maps to one value and back."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Dict, Generic, Hashable, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class ReflexiveMap(MutableMapping, Generic[K, V]):
    """Insertion-ordered one-to-one mapping with a live reversed view.

    Assigning a value already held by another key moves it, so each value
    is mapped from a single key at any time.
    """

    def __init__(self, other=None):
        self._forward: Dict[K, V] = {}
        self._backward: Dict[V, K] = {}
        self._reversed = ReflexiveMap._view(self._backward, self._forward, self)
        if other is not None:
            self.update(other)

    @classmethod
    def _view(cls, forward, backward, reversed_map) -> "ReflexiveMap":
        view = cls.__new__(cls)
        view._forward = forward
        view._backward = backward
        view._reversed = reversed_map
        return view

    def reverse(self) -> "ReflexiveMap[V, K]":
        """The same data seen from the values; changes show on both sides."""
        return self._reversed

    def value_for(self, key: K) -> Optional[V]:
        return self._forward.get(key)

    def key_for(self, value: V) -> Optional[K]:
        return self._backward.get(value)

    def __getitem__(self, key: K) -> V:
        return self._forward[key]

    def __setitem__(self, key: K, value: V) -> None:
        if key in self._forward:
            del self._backward[self._forward[key]]
        if value in self._backward:
            del self._forward[self._backward[value]]
        self._forward[key] = value
        self._backward[value] = key

    def __delitem__(self, key: K) -> None:
        value = self._forward.pop(key)
        del self._backward[value]

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._forward!r})"
