from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from collectionkit.core.cartesian import CartesianIterator
from collectionkit.core.errors import ProblemFileError
from collectionkit.core.powerset import PowerSetIterator


@dataclass
class Problem:
    """An enumeration described in a YAML file.

    Either ``candidates`` (Cartesian product, optionally narrowed by
    ``observed`` and restricted to ``slots``) or ``elements`` (power set) is
    given.
    """
    candidates: Dict[Any, List[Any]] = field(default_factory=dict)
    observed: Dict[Any, Any] = field(default_factory=dict)
    slots: List[Any] | None = None
    elements: List[Any] | None = None
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_power_set(self) -> bool:
        return self.elements is not None

    @property
    def allow_empty(self) -> bool:
        return bool(self.options.get("allow_empty", False))

    @property
    def include_empty(self) -> bool:
        return bool(self.options.get("include_empty", False))

    def enumerator(self) -> Union[CartesianIterator, PowerSetIterator]:
        if self.is_power_set:
            return PowerSetIterator(self.elements, include_empty=self.include_empty)
        return CartesianIterator.from_mappings(
            self.candidates, self.observed, self.slots, allow_empty=self.allow_empty
        )


def _expect(value: Any, kind: type, name: str) -> Any:
    if not isinstance(value, kind):
        raise ProblemFileError(f"'{name}' must be a {kind.__name__}, got {type(value).__name__}")
    return value


def _expect_hashable(values: List[Any], name: str) -> List[Any]:
    for value in values:
        try:
            hash(value)
        except TypeError:
            raise ProblemFileError(f"'{name}' entries must be scalars, got {value!r}") from None
    return values


def parse_problem(data: Any) -> Problem:
    """Build a Problem from the already decoded YAML document."""
    data = _expect(data, dict, "problem")
    has_candidates = "candidates" in data
    has_elements = "elements" in data
    if has_candidates == has_elements:
        raise ProblemFileError("a problem needs exactly one of 'candidates' or 'elements'")

    options = dict(_expect(data.get("options") or {}, dict, "options"))
    if has_elements:
        elements = list(_expect(data["elements"] or [], list, "elements"))
        return Problem(elements=_expect_hashable(elements, "elements"), options=options)

    candidates = {}
    for obj, values in _expect(data["candidates"] or {}, dict, "candidates").items():
        values = list(_expect(values if values is not None else [], list, f"candidates.{obj}"))
        candidates[obj] = _expect_hashable(values, f"candidates.{obj}")
    observed = dict(_expect(data.get("observed") or {}, dict, "observed"))
    _expect_hashable(list(observed.values()), "observed")
    slots = data.get("slots")
    if slots is not None:
        slots = _expect_hashable(list(_expect(slots, list, "slots")), "slots")
    return Problem(candidates=candidates, observed=observed, slots=slots, options=options)


def load_problem(path: str | Path) -> Problem:
    """Load a YAML problem description into a Problem object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ProblemFileError(f"{path}: invalid YAML: {exc}") from exc
    return parse_problem(data)
