"""Human ordering of strings: case-insensitive, numbers compared as numbers.

``"file2"`` sorts before ``"file10"``, ``"File"`` and ``"file"`` are equal,
and decimal or exponent notations (``"2.4"``, ``"1E4"``) are compared by value.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional

_CHUNK = re.compile(r"[^0-9]+|[0-9]+(?:[.,][0-9]+)?(?:E-?[0-9]+)?")


class ChunkKind(str, Enum):
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True)
class Chunk:
    """A run of digits or of non-digits taken from a string."""
    kind: ChunkKind
    text: str
    number: Optional[Decimal] = None

    @classmethod
    def parse(cls, raw: str) -> "Chunk":
        if raw[0] in "0123456789":
            return cls(ChunkKind.NUMBER, raw, Decimal(raw.replace(",", ".")))
        return cls(ChunkKind.TEXT, raw.strip())


def chunks(string: str) -> Iterator[Chunk]:
    for match in _CHUNK.finditer(string):
        yield Chunk.parse(match.group())


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _compare_chunks(c1: Chunk, c2: Chunk) -> int:
    if c1.kind is ChunkKind.TEXT and c2.kind is ChunkKind.TEXT:
        return _sign(c1.text.lower(), c2.text.lower())
    if c1.kind is ChunkKind.NUMBER and c2.kind is ChunkKind.NUMBER:
        return _sign(c1.number, c2.number)
    return _sign(c1.text, c2.text)


def natural_compare(a: Any, b: Any, key: Callable[[Any], str] = str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, with or after ``b``."""
    chunks1 = list(chunks(key(a)))
    chunks2 = list(chunks(key(b)))
    for c1, c2 in zip(chunks1, chunks2):
        result = _compare_chunks(c1, c2)
        if result:
            return result
    if len(chunks1) > len(chunks2):
        return _sign(chunks1[len(chunks2)].text, "")
    if len(chunks1) < len(chunks2):
        return _sign("", chunks2[len(chunks1)].text)
    return 0


def natural_key(key: Callable[[Any], str] = str):
    """Sort key applying :func:`natural_compare` to ``key(item)``."""
    return functools.cmp_to_key(lambda a, b: natural_compare(a, b, key))


def natural_sorted(items: Iterable[Any], key: Callable[[Any], str] = str, reverse: bool = False) -> List[Any]:
    return sorted(items, key=natural_key(key), reverse=reverse)
