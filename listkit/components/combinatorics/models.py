"""
Combinatorics component input/output models.

Outputs reuse ``ListOutput`` and ``ListValidationError`` from the list
utils component so both components report errors the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# --- Input Models ---


@dataclass(frozen=True)
class SelectInput:
    """Input for random draws (``random_select``, ``random_permutation``)."""

    operation: str
    items: list[Any]
    count: int | None = None


@dataclass(frozen=True)
class LottoInput:
    """Input for drawing ``count`` distinct numbers from ``1..maximum``."""

    count: int
    maximum: int


@dataclass(frozen=True)
class CombineInput:
    """Input for ``size``-element combinations."""

    items: list[Any]
    size: int


@dataclass(frozen=True)
class GroupInput:
    """Input for partitioning into disjoint groups of the given sizes."""

    items: list[Any]
    sizes: tuple[int, ...]


@dataclass(frozen=True)
class SortInput:
    """Input for sorting sublists (``length_sort``, ``length_frequency_sort``)."""

    operation: str
    lists: list[list[Any]]
