"""
Combinatorics component - random selection, combinations, grouping and sorting.

Invariants:
- I1: Random draws never repeat a position
- I2: Every group partition covers the flattened input exactly once
- I3: Length sorts are stable
"""

from __future__ import annotations

import logging

from listkit.adapters.random_source import SeededRandom
from listkit.components.list_utils._impl import DEFAULT_CONFIG, ListConfig
from listkit.components.list_utils.component import convert_error
from listkit.components.list_utils.models import InvalidArgumentError, ListOutput

from . import _impl
from .models import CombineInput, GroupInput, LottoInput, SelectInput, SortInput
from .ports import RandomPort, RulesPort

logger = logging.getLogger(__name__)

SELECT_OPERATIONS = frozenset({"random_select", "random_permutation"})
SORT_OPERATIONS = frozenset({"length_sort", "length_frequency_sort"})


def _build_config(rules: RulesPort | None) -> ListConfig:
    """Build flatten config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return ListConfig(
        max_depth=rules.get_max_depth(),
        detect_cycles=rules.get_detect_cycles(),
    )


def _resolve_random(random: RandomPort | None, rules: RulesPort | None) -> RandomPort:
    if random is not None:
        return random
    seed = rules.get_random_seed() if rules is not None else None
    return SeededRandom(seed)


# --- Component Entry Points ---


def run_select(
    inp: SelectInput,
    *,
    random: RandomPort | None = None,
    rules: RulesPort | None = None,
) -> ListOutput:
    """
    Draw elements at random (``random_select`` or ``random_permutation``).

    Args:
        inp: Input naming the operation, the list and the draw count.
        random: Optional random source; defaults to one seeded from rules.
        rules: Optional rules port for configuration.

    Returns:
        ListOutput with the drawn elements.
    """
    if inp.operation not in SELECT_OPERATIONS:
        raise ValueError(f"Unknown operation: {inp.operation!r}")
    logger.debug("Running select %s", inp.operation)

    config = _build_config(rules)
    source = _resolve_random(random, rules)
    try:
        if inp.operation == "random_select":
            items = _impl.random_select(
                inp.items,
                inp.count,  # type: ignore[arg-type]
                random=source,
                config=config,
            )
        else:
            items = _impl.random_permutation(inp.items, random=source, config=config)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run_lotto(
    inp: LottoInput,
    *,
    random: RandomPort | None = None,
    rules: RulesPort | None = None,
) -> ListOutput:
    """Draw ``count`` distinct numbers from ``1..maximum``."""
    source = _resolve_random(random, rules)
    try:
        items = _impl.lotto_select(inp.count, inp.maximum, random=source)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run_combine(inp: CombineInput, *, rules: RulesPort | None = None) -> ListOutput:
    """List every ``size``-element combination."""
    config = _build_config(rules)
    try:
        items = _impl.combinations(inp.items, inp.size, config=config)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run_group(inp: GroupInput, *, rules: RulesPort | None = None) -> ListOutput:
    """List every partition into disjoint groups of the requested sizes."""
    config = _build_config(rules)
    try:
        items = _impl.group(inp.items, inp.sizes, config=config)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run_sort(inp: SortInput, *, rules: RulesPort | None = None) -> ListOutput:
    """Sort sublists by length or by length frequency."""
    if inp.operation not in SORT_OPERATIONS:
        raise ValueError(f"Unknown operation: {inp.operation!r}")

    try:
        if inp.operation == "length_sort":
            items = _impl.length_sort(inp.lists)
        else:
            items = _impl.length_frequency_sort(inp.lists)
    except InvalidArgumentError as e:
        return ListOutput(items=None, errors=convert_error(e), success=False)
    return ListOutput(items=items)


def run(
    inp: SelectInput | LottoInput | CombineInput | GroupInput | SortInput,
    *,
    random: RandomPort | None = None,
    rules: RulesPort | None = None,
) -> ListOutput:
    """
    Main entry point for the combinatorics component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SelectInput):
        return run_select(inp, random=random, rules=rules)
    elif isinstance(inp, LottoInput):
        return run_lotto(inp, random=random, rules=rules)
    elif isinstance(inp, CombineInput):
        return run_combine(inp, rules=rules)
    elif isinstance(inp, GroupInput):
        return run_group(inp, rules=rules)
    elif isinstance(inp, SortInput):
        return run_sort(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
