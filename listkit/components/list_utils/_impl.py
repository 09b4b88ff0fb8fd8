"""
List functions (P01-P22) - pure transformations over nested lists.

Key behaviors:
- Only ``list`` instances are sublists; every other value is an element
- Positions are 1-based
- Inputs are never mutated; every call builds a new list
- Flatten walks iteratively, so deep nesting never hits the recursion limit
- Argument misuse raises InvalidArgumentError; absence returns None
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .models import Found, InvalidArgumentError, Run
from .ports import EqualityPort

# --- Equality ---


class ValueEquality:
    """Structural equality: ``is`` or ``==``, the check list ``==`` makes."""

    def equals(self, left: Any, right: Any) -> bool:
        return left is right or bool(left == right)


class IdentityEquality:
    """Reference equality (``is``)."""

    def equals(self, left: Any, right: Any) -> bool:
        return left is right


EQUALITY_MODES: dict[str, type[ValueEquality] | type[IdentityEquality]] = {
    "value": ValueEquality,
    "identity": IdentityEquality,
}


def equality_for(mode: str) -> EqualityPort:
    """Build the equality port for a configured mode name."""
    try:
        return EQUALITY_MODES[mode]()
    except KeyError:
        raise InvalidArgumentError(
            "unknown_equality_mode",
            f"Unknown equality mode {mode!r}; expected one of {sorted(EQUALITY_MODES)}",
            field="equality_mode",
        ) from None


# --- Configuration ---


@dataclass(frozen=True)
class ListConfig:
    """List function configuration from rules."""

    equality_mode: str = "value"
    max_depth: int | None = None
    detect_cycles: bool = True

    def equality(self) -> EqualityPort:
        return equality_for(self.equality_mode)


DEFAULT_CONFIG = ListConfig()


# --- Argument Checks ---


def require_int(value: Any, field: str) -> int:
    """Reject anything that is not a plain int (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            "not_an_integer",
            f"{field} must be an integer, got {value!r}",
            field=field,
        )
    return value


def require_between(value: Any, low: int, high: int, field: str) -> int:
    value = require_int(value, field)
    if not low <= value <= high:
        raise InvalidArgumentError(
            "out_of_range",
            f"{field} must be between {low} and {high}, got {value}",
            field=field,
        )
    return value


def _resolve_equality(equality: EqualityPort | None, config: ListConfig) -> EqualityPort:
    return equality if equality is not None else config.equality()


# --- Lookups (P01-P04) ---


def last(items: Sequence[Any]) -> Found | None:
    """P01: the final element, or None for an empty list."""
    if not items:
        return None
    return Found(items[-1])


def last_two(items: Sequence[Any]) -> list[Any]:
    """P02: the final two elements in order (fewer if the list is shorter)."""
    return list(items[-2:])


def element_at(items: Sequence[Any], position: int) -> Found | None:
    """
    P03: the element at a 1-based position.

    Positions outside ``[1, len(items)]`` are absence, not an error.
    """
    position = require_int(position, "position")
    if 1 <= position <= len(items):
        return Found(items[position - 1])
    return None


def length(items: Sequence[Any]) -> int:
    """P04: number of top-level members."""
    return len(items)


def reverse(items: Sequence[Any]) -> list[Any]:
    """P05: top-level order reversed; sublists are left as they are."""
    return list(items[::-1])


def is_palindrome(
    items: Sequence[Any],
    *,
    equality: EqualityPort | None = None,
    config: ListConfig = DEFAULT_CONFIG,
) -> bool:
    """P06: True if the list reads the same forward and backward."""
    eq = _resolve_equality(equality, config)
    last_index = len(items) - 1
    return all(
        eq.equals(items[i], items[last_index - i]) for i in range((len(items) + 1) // 2)
    )


# --- Flattening (P07) ---


def flatten(items: Sequence[Any], *, config: ListConfig = DEFAULT_CONFIG) -> list[Any]:
    """
    P07: replace every sublist by its elements, recursively.

    Walks pre-order, depth-first, left-to-right with an explicit stack of
    iterators. The lists on the current path are tracked by identity so a list
    that contains itself is rejected instead of looping forever.

    Raises:
        InvalidArgumentError: ``cyclic_list`` for a self-containing list,
            ``max_depth_exceeded`` when nesting is deeper than configured.
    """
    out: list[Any] = []
    stack = [iter(items)]
    path = [id(items)]
    on_path = {id(items)}

    while stack:
        for member in stack[-1]:
            if not isinstance(member, list):
                out.append(member)
                continue

            if config.detect_cycles and id(member) in on_path:
                raise InvalidArgumentError(
                    "cyclic_list",
                    "List contains itself and cannot be flattened",
                    field="items",
                )
            if config.max_depth is not None and len(stack) > config.max_depth:
                raise InvalidArgumentError(
                    "max_depth_exceeded",
                    f"Nesting deeper than the allowed {config.max_depth} levels",
                    field="items",
                )

            stack.append(iter(member))
            path.append(id(member))
            on_path.add(id(member))
            break
        else:
            stack.pop()
            on_path.discard(path.pop())

    return out


# --- Runs (P08-P13) ---


def compress(
    items: Sequence[Any],
    *,
    equality: EqualityPort | None = None,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """P08: drop every element equal to its immediate predecessor."""
    flat = flatten(items, config=config)
    eq = _resolve_equality(equality, config)
    return [
        element
        for index, element in enumerate(flat)
        if index == 0 or not eq.equals(element, flat[index - 1])
    ]


def pack(
    items: Sequence[Any],
    *,
    equality: EqualityPort | None = None,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[list[Any]]:
    """P09: partition into maximal runs of consecutive equal elements."""
    flat = flatten(items, config=config)
    eq = _resolve_equality(equality, config)

    runs: list[list[Any]] = []
    for index, element in enumerate(flat):
        if index > 0 and eq.equals(element, flat[index - 1]):
            runs[-1].append(element)
        else:
            runs.append([element])
    return runs


def encode(
    items: Sequence[Any],
    *,
    equality: EqualityPort | None = None,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Run]:
    """P10: run-length encoding as ``Run(count, element)`` pairs."""
    return [Run(len(run), run[0]) for run in pack(items, equality=equality, config=config)]


def _entry(count: int, element: Any) -> Any:
    if count == 1 and not isinstance(element, Run):
        return element
    return Run(count, element)


def encode_modified(
    items: Sequence[Any],
    *,
    equality: EqualityPort | None = None,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """
    P11: like ``encode``, but runs of one are emitted as the bare element.

    A run of one ``Run`` element keeps its wrapper, otherwise ``decode`` would
    read the element as a pair.
    """
    return [_entry(len(run), run[0]) for run in pack(items, equality=equality, config=config)]


def decode(entries: Sequence[Any]) -> list[Any]:
    """
    P12: expand a (modified) run-length encoding.

    ``Run`` entries expand to ``count`` copies; any other entry is a single
    bare element.
    """
    out: list[Any] = []
    for entry in entries:
        if isinstance(entry, Run):
            out.extend([entry.element] * entry.count)
        else:
            out.append(entry)
    return out


def encode_direct(
    items: Sequence[Any],
    *,
    equality: EqualityPort | None = None,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """
    P13: the ``encode_modified`` result in one pass.

    Counts runs with a running (element, count) accumulator instead of
    building the packed sublists first.
    """
    flat = flatten(items, config=config)
    eq = _resolve_equality(equality, config)

    out: list[Any] = []
    current: Any = None
    count = 0
    for index, element in enumerate(flat):
        if count and eq.equals(element, flat[index - 1]):
            count += 1
            continue
        if count:
            out.append(_entry(count, current))
        current, count = element, 1
    if count:
        out.append(_entry(count, current))
    return out


# --- Replication (P14-P16) ---


def replicate(items: Sequence[Any], times: int) -> list[Any]:
    """P15: each element ``times`` times in a row. Zero gives an empty list."""
    times = require_int(times, "times")
    if times < 0:
        raise InvalidArgumentError(
            "negative_count",
            f"times must not be negative, got {times}",
            field="times",
        )
    return [element for element in items for _ in range(times)]


def duplicate(items: Sequence[Any]) -> list[Any]:
    """P14: each element twice in a row."""
    return replicate(items, 2)


def drop(items: Sequence[Any], every: int, *, config: ListConfig = DEFAULT_CONFIG) -> list[Any]:
    """P16: remove every element whose 1-based position is a multiple of ``every``."""
    every = require_int(every, "every")
    if every < 1:
        raise InvalidArgumentError(
            "non_positive_step",
            f"every must be at least 1, got {every}",
            field="every",
        )
    flat = flatten(items, config=config)
    return [element for position, element in enumerate(flat, start=1) if position % every]


# --- Positional (P17-P21) ---


def split(
    items: Sequence[Any],
    count: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
) -> tuple[list[Any], list[Any]]:
    """P17: the first ``count`` elements and the rest."""
    flat = flatten(items, config=config)
    count = require_between(count, 0, len(flat), "count")
    return flat[:count], flat[count:]


def slice_of(
    items: Sequence[Any],
    start: int,
    end: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """P18: the inclusive 1-based range ``[start, end]``."""
    flat = flatten(items, config=config)
    end = require_between(end, 1, len(flat), "end")
    start = require_between(start, 1, end, "start")
    return flat[start - 1 : end]


def rotate(items: Sequence[Any], places: int, *, config: ListConfig = DEFAULT_CONFIG) -> list[Any]:
    """
    P19: rotate left by ``places``.

    Negative values rotate right; the split point is ``places mod len``.
    """
    places = require_int(places, "places")
    flat = flatten(items, config=config)
    if not flat:
        return []
    first, second = split(flat, places % len(flat), config=config)
    return second + first


def remove_at(
    items: Sequence[Any],
    position: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """P20: drop the element at ``position``; out of range leaves the list as is."""
    position = require_int(position, "position")
    flat = flatten(items, config=config)
    return [element for index, element in enumerate(flat, start=1) if index != position]


def insert_at(
    element: Any,
    items: Sequence[Any],
    position: int,
    *,
    config: ListConfig = DEFAULT_CONFIG,
) -> list[Any]:
    """P21: insert ``element`` before ``position``; ``len + 1`` appends."""
    flat = flatten(items, config=config)
    position = require_between(position, 1, len(flat) + 1, "position")
    return flat[: position - 1] + [element] + flat[position - 1 :]


def range_of(start: int, finish: int) -> list[int]:
    """P22: inclusive integers from ``start`` to ``finish``, ascending or descending."""
    start = require_int(start, "start")
    finish = require_int(finish, "finish")
    step = 1 if finish >= start else -1
    return list(range(start, finish + step, step))
