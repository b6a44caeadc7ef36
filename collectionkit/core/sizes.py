"""Closed-form sizes of the enumerations, never computed by enumerating."""

from __future__ import annotations

from typing import Iterable, Sized


def product_size(domains: Iterable[Sized]) -> int:
    """Number of combinations picking one value per domain.

    An empty list of domains has exactly one combination, the empty one.
    """
    total = 1
    for domain in domains:
        total *= len(domain)
    return total


def power_set_size(n: int, include_empty: bool = False) -> int:
    """Number of subsets of an ``n``-element set."""
    if n < 0:
        raise ValueError(f"negative set size: {n}")
    total = 1 << n
    return total if include_empty else total - 1
