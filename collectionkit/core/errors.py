"""Exceptions raised by collectionkit."""

from __future__ import annotations

from typing import Any, Hashable, Sequence


class CollectionKitError(Exception):
    """Base class for every error raised by this package."""


class EmptyDomainError(CollectionKitError, ValueError):
    """A slot has no admissible value and empty domains were not allowed."""

    def __init__(self, position: int, obj: Any = None):
        self.position = position
        self.obj = obj
        if obj is None:
            msg = f"Slot {position} has no potential value"
        else:
            msg = f"Slot {position} ({obj!r}) has no potential value"
        super().__init__(msg)


class ExhaustedError(CollectionKitError, LookupError):
    """``next()`` was called on an enumerator with nothing left to produce."""


class UndecidedFilteringError(CollectionKitError):
    """No decision can be taken for an element given its filters."""


class ChainLoopError(CollectionKitError, ValueError):
    """A chain of links ends in a loop."""

    def __init__(self, loop: Sequence[Hashable]):
        self.loop = list(loop)
        super().__init__(f"There is a loop at the end of the chains containing {self.loop}")


class ProblemFileError(CollectionKitError, ValueError):
    """A problem file cannot be turned into an enumeration problem."""
