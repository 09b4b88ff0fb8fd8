"""
Combinatorics component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class RandomPort(Protocol):
    """Source of randomness for the selection functions."""

    def sample(self, population: Sequence[Any], k: int) -> list[Any]:
        """Draw ``k`` members of ``population`` without replacement."""
        ...


class RulesPort(Protocol):
    """Port for accessing combinatorics rules configuration."""

    def get_max_depth(self) -> int | None:
        """Get the maximum nesting depth flatten accepts."""
        ...

    def get_detect_cycles(self) -> bool:
        """Get whether flatten rejects self-containing lists."""
        ...

    def get_random_seed(self) -> int | None:
        """Get the seed for the default random source, or None for unseeded."""
        ...
