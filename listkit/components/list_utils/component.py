"""
ListUtils component - list lookups, transformations and run-length coding.

Wraps the pure functions in ``_impl`` behind typed inputs and outputs.
Argument misuse comes back as ``ListValidationError`` entries with
``success=False``; absence comes back as ``found=False``.

Invariants:
- I1: Inputs are never mutated
- I2: flatten is pre-order and order preserving
- I3: Runs are maximal and concatenate back to the flattened input
- I4: element_at and remove_at are lenient about out-of-range positions
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from . import _impl
from ._impl import DEFAULT_CONFIG, ListConfig
from .models import (
    DecodeInput,
    ElementOutput,
    InsertInput,
    InvalidArgumentError,
    ListOutput,
    ListValidationError,
    LookupInput,
    MeasureInput,
    MeasureOutput,
    RangeInput,
    SliceInput,
    SplitInput,
    SplitOutput,
    TransformInput,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)

# Transformations keyed by operation name. The callable receives the items,
# the optional integer argument and the active config.
_TRANSFORMS: dict[str, Callable[[list[Any], int | None, ListConfig], list[Any]]] = {
    "last_two": lambda items, _, config: _impl.last_two(items),
    "reverse": lambda items, _, config: _impl.reverse(items),
    "flatten": lambda items, _, config: _impl.flatten(items, config=config),
    "compress": lambda items, _, config: _impl.compress(items, config=config),
    "pack": lambda items, _, config: _impl.pack(items, config=config),
    "encode": lambda items, _, config: _impl.encode(items, config=config),
    "encode_modified": lambda items, _, config: _impl.encode_modified(items, config=config),
    "encode_direct": lambda items, _, config: _impl.encode_direct(items, config=config),
    "duplicate": lambda items, _, config: _impl.duplicate(items),
    "replicate": lambda items, arg, config: _impl.replicate(items, arg),  # type: ignore[arg-type]
    "drop": lambda items, arg, config: _impl.drop(  # type: ignore[arg-type]
        items, arg, config=config
    ),
    "rotate": lambda items, arg, config: _impl.rotate(  # type: ignore[arg-type]
        items, arg, config=config
    ),
    "remove_at": lambda items, arg, config: _impl.remove_at(  # type: ignore[arg-type]
        items, arg, config=config
    ),
}

TRANSFORM_OPERATIONS = frozenset(_TRANSFORMS)
LOOKUP_OPERATIONS = frozenset({"last", "element_at"})
MEASURE_OPERATIONS = frozenset({"length", "is_palindrome"})


def build_config(rules: RulesPort | None) -> ListConfig:
    """Build list config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return ListConfig(
        equality_mode=rules.get_equality_mode(),
        max_depth=rules.get_max_depth(),
        detect_cycles=rules.get_detect_cycles(),
    )


def convert_error(exc: InvalidArgumentError) -> list[ListValidationError]:
    """Convert a raised argument error to component errors."""
    logger.warning("Rejected list operation argument: %s (%s)", exc, exc.code)
    return [ListValidationError(code=exc.code, message=str(exc), field=exc.field)]


def _unknown_operation(operation: str, known: frozenset[str]) -> ValueError:
    return ValueError(f"Unknown operation: {operation!r} (expected one of {sorted(known)})")


# --- Component Entry Points ---


def run_lookup(inp: LookupInput, *, rules: RulesPort | None = None) -> ElementOutput:
    """
    Look up a single element (``last`` or ``element_at``).

    Args:
        inp: Input naming the operation, the list and the optional position.
        rules: Optional rules port for configuration.

    Returns:
        ElementOutput with ``found=False`` when there is no such element.
    """
    if inp.operation not in LOOKUP_OPERATIONS:
        raise _unknown_operation(inp.operation, LOOKUP_OPERATIONS)
    logger.debug("Running lookup %s", inp.operation)

    try:
        if inp.operation == "last":
            hit = _impl.last(inp.items)
        else:
            hit = _impl.element_at(inp.items, inp.position)  # type: ignore[arg-type]
    except InvalidArgumentError as e:
        return ElementOutput(found=False, errors=convert_error(e), success=False)

    if hit is None:
        return ElementOutput(found=False)
    return ElementOutput(found=True, element=hit.value)


def run_measure(inp: MeasureInput, *, rules: RulesPort | None = None) -> MeasureOutput:
    """Compute ``length`` or ``is_palindrome`` for a list."""
    if inp.operation not in MEASURE_OPERATIONS:
        raise _unknown_operation(inp.operation, MEASURE_OPERATIONS)
    logger.debug("Running measure %s", inp.operation)

    if inp.operation == "length":
        return MeasureOutput(value=_impl.length(inp.items))

    config = build_config(rules)
    try:
        value = _impl.is_palindrome(inp.items, config=config)
    except InvalidArgumentError as e:
        return MeasureOutput(value=None, errors=convert_error(e), success=False)
    return MeasureOutput(value=value)


def run_transform(inp: TransformInput, *, rules: RulesPort | None = None) -> ListOutput:
    """
    Apply a list-to-list transformation.

    Args:
        inp: Input naming the operation, the list and its integer argument.
        rules: Optional rules port for configuration.

    Returns:
        ListOutput with the new list, or errors if the argument was rejected.
    """
    handler = _TRANSFORMS.get(inp.operation)
    if handler is None:
        raise _unknown_operation(inp.operation, TRANSFORM_OPERATIONS)
    logger.debug("Running transform %s", inp.operation)

    config = build_config(rules)
    try:
        items = handler(inp.items, inp.argument, config)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run_decode(inp: DecodeInput, *, rules: RulesPort | None = None) -> ListOutput:
    """Expand a run-length encoding back into a flat list."""
    return ListOutput(items=_impl.decode(inp.entries))


def run_split(inp: SplitInput, *, rules: RulesPort | None = None) -> SplitOutput:
    """Split a flattened list after ``count`` elements."""
    config = build_config(rules)
    try:
        first, second = _impl.split(inp.items, inp.count, config=config)
    except InvalidArgumentError as e:
        return SplitOutput(first=None, second=None, errors=convert_error(e), success=False)
    return SplitOutput(first=first, second=second)


def run_slice(inp: SliceInput, *, rules: RulesPort | None = None) -> ListOutput:
    """Extract the inclusive 1-based range ``[start, end]``."""
    config = build_config(rules)
    try:
        items = _impl.slice_of(inp.items, inp.start, inp.end, config=config)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run_insert(inp: InsertInput, *, rules: RulesPort | None = None) -> ListOutput:
    """Insert an element before a 1-based position."""
    config = build_config(rules)
    try:
        items = _impl.insert_at(inp.element, inp.items, inp.position, config=config)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run_range(inp: RangeInput, *, rules: RulesPort | None = None) -> ListOutput:
    """Generate the inclusive integer range between two bounds."""
    try:
        items = _impl.range_of(inp.start, inp.finish)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run(
    inp: LookupInput
    | MeasureInput
    | TransformInput
    | DecodeInput
    | SplitInput
    | SliceInput
    | InsertInput
    | RangeInput,
    *,
    rules: RulesPort | None = None,
) -> ElementOutput | MeasureOutput | ListOutput | SplitOutput:
    """
    Main entry point for the list utils component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        rules: Optional rules port for configuration.

    Returns:
        Appropriate output object based on input type.
    """
    if isinstance(inp, LookupInput):
        return run_lookup(inp, rules=rules)
    elif isinstance(inp, MeasureInput):
        return run_measure(inp, rules=rules)
    elif isinstance(inp, TransformInput):
        return run_transform(inp, rules=rules)
    elif isinstance(inp, DecodeInput):
        return run_decode(inp, rules=rules)
    elif isinstance(inp, SplitInput):
        return run_split(inp, rules=rules)
    elif isinstance(inp, SliceInput):
        return run_slice(inp, rules=rules)
    elif isinstance(inp, InsertInput):
        return run_insert(inp, rules=rules)
    elif isinstance(inp, RangeInput):
        return run_range(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
