from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterator, Mapping, Sequence, Tuple

Value = Hashable
Domain = Tuple[Value, ...]
Combination = Tuple[Value, ...]


@dataclass(frozen=True)
class Configuration:
    """Immutable binding of each considered object to one value."""
    objects: Tuple[Hashable, ...]
    values: Combination

    def __post_init__(self) -> None:
        if len(self.objects) != len(self.values):
            raise ValueError(
                f"{len(self.objects)} objects but {len(self.values)} values"
            )

    @classmethod
    def bind(cls, objects: Sequence[Hashable], values: Sequence[Value]) -> "Configuration":
        return cls(tuple(objects), tuple(values))

    def value(self, obj: Hashable) -> Value:
        try:
            return self.values[self.objects.index(obj)]
        except ValueError:
            raise KeyError(obj) from None

    def as_dict(self) -> Mapping[Hashable, Value]:
        return dict(zip(self.objects, self.values))

    def __iter__(self) -> Iterator[Tuple[Hashable, Value]]:
        return iter(zip(self.objects, self.values))
