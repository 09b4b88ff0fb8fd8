"""
Combinatorics component - random selection, combinations and sorting (P23-P28).
"""

from ._impl import (
    combinations,
    group,
    length_frequency_sort,
    length_sort,
    lotto_select,
    random_permutation,
    random_select,
)
from .component import (
    run,
    run_combine,
    run_group,
    run_lotto,
    run_select,
    run_sort,
)
from .models import (
    CombineInput,
    GroupInput,
    LottoInput,
    SelectInput,
    SortInput,
)
from .ports import RandomPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_combine",
    "run_group",
    "run_lotto",
    "run_select",
    "run_sort",
    # Input models
    "CombineInput",
    "GroupInput",
    "LottoInput",
    "SelectInput",
    "SortInput",
    # Ports
    "RandomPort",
    "RulesPort",
    # Pure functions
    "combinations",
    "group",
    "length_frequency_sort",
    "length_sort",
    "lotto_select",
    "random_permutation",
    "random_select",
]
