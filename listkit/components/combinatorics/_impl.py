"""
Combinatorics functions (P23-P28) - selection, combinations, grouping, sorting.

Key behaviors:
- Inputs are flattened first, like the positional list functions
- Random draws go through a RandomPort so callers control seeding
- Combinations and groups keep the input order of the chosen elements
- Both length sorts are stable
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations as _index_combinations
from typing import Any

from listkit.components.list_utils._impl import (
    DEFAULT_CONFIG,
    ListConfig,
    flatten,
    range_of,
    require_between,
    require_int,
)
from listkit.components.list_utils.models import InvalidArgumentError

from .ports import RandomPort

# --- Random Selection (P23-P25) ---


def random_select(
    items: Sequence[Any],
    count: int,
    *,
    random: RandomPort,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """P23: ``count`` elements drawn from distinct positions."""
    flat = flatten(items, config=config)
    count = require_between(count, 0, len(flat), "count")
    positions = random.sample(range(len(flat)), count)
    return [flat[position] for position in positions]


def lotto_select(count: int, maximum: int, *, random: RandomPort) -> list[int]:
    """P24: ``count`` distinct numbers from ``1..maximum``."""
    maximum = require_int(maximum, "maximum")
    if maximum < 1:
        raise InvalidArgumentError(
            "out_of_range",
            f"maximum must be at least 1, got {maximum}",
            field="maximum",
        )
    count = require_between(count, 0, maximum, "count")
    return list(random.sample(range_of(1, maximum), count))


def random_permutation(
    items: Sequence[Any],
    *,
    random: RandomPort,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """P25: every element once, in random order."""
    flat = flatten(items, config=config)
    return random_select(flat, len(flat), random=random, config=config)


# --- Combinations (P26-P27) ---


def combinations(
    items: Sequence[Any],
    size: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[list[Any]]:
    """
    P26: all ``size``-element combinations.

    Chosen by position, so equal elements at different positions give
    distinct combinations. Ordered lexicographically by position.
    """
    flat = flatten(items, config=config)
    size = require_between(size, 0, len(flat), "size")
    return [list(chosen) for chosen in _index_combinations(flat, size)]


def _partitions(pool: list[Any], sizes: Sequence[int]) -> list[list[list[Any]]]:
    if not sizes:
        return [[]]

    first, rest = sizes[0], sizes[1:]
    result: list[list[list[Any]]] = []
    for chosen in _index_combinations(range(len(pool)), first):
        picked = set(chosen)
        head = [pool[index] for index in chosen]
        remaining = [element for index, element in enumerate(pool) if index not in picked]
        for tail in _partitions(remaining, rest):
            result.append([head, *tail])
    return result


def group(
    items: Sequence[Any],
    sizes: Sequence[int],
    *,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[list[list[Any]]]:
    """
    P27: every way to split the elements into disjoint groups of ``sizes``.

    The group sizes must add up to the number of elements.

    Raises:
        InvalidArgumentError: ``negative_count`` for a negative size,
            ``size_mismatch`` when the sizes do not cover the list exactly.
    """
    flat = flatten(items, config=config)
    checked = [require_int(size, "sizes") for size in sizes]
    if any(size < 0 for size in checked):
        raise InvalidArgumentError(
            "negative_count",
            f"Group sizes must not be negative, got {checked}",
            field="sizes",
        )
    if sum(checked) != len(flat):
        raise InvalidArgumentError(
            "size_mismatch",
            f"Group sizes {checked} add up to {sum(checked)}, list has {len(flat)} elements",
            field="sizes",
        )
    return _partitions(flat, checked)


# --- Sorting (P28) ---


def _require_sublists(lists: Sequence[Any]) -> None:
    for member in lists:
        if not isinstance(member, list):
            raise InvalidArgumentError(
                "not_a_list",
                f"Expected a list of lists, found member {member!r}",
                field="lists",
            )


def length_sort(lists: Sequence[list[Any]]) -> list[list[Any]]:
    """P28a: sublists ordered by length, shortest first."""
    _require_sublists(lists)
    return sorted(lists, key=len)


def length_frequency_sort(lists: Sequence[list[Any]]) -> list[list[Any]]:
    """P28b: sublists ordered by how often their length occurs, rarest first."""
    _require_sublists(lists)
    frequency = Counter(len(member) for member in lists)
    return sorted(lists, key=lambda member: frequency[len(member)])
