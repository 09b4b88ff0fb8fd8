"""
ListUtils component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class EqualityPort(Protocol):
    """Element equality used by runs, compression and palindrome checks."""

    def equals(self, left: Any, right: Any) -> bool:
        """Return True if the two elements count as equal."""
        ...


class RulesPort(Protocol):
    """Port for accessing list rules configuration."""

    def get_equality_mode(self) -> str:
        """Get the equality mode ("value" or "identity")."""
        ...

    def get_max_depth(self) -> int | None:
        """Get the maximum nesting depth flatten accepts, or None for unbounded."""
        ...

    def get_detect_cycles(self) -> bool:
        """Get whether flatten rejects self-containing lists."""
        ...
