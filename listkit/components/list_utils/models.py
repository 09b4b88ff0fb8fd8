"""
ListUtils component input/output models.

Holds the value types shared by the pure functions (Run, Found), the
argument error raised on caller misuse, and the frozen input/output models
used by the component entry points.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Error Types ---


class InvalidArgumentError(ValueError):
    """
    Raised when a parameter violates an operation's precondition.

    Absence (an empty list for ``last``, an out-of-range ``element_at``) is
    never reported this way.
    """

    def __init__(self, code: str, message: str, field: str | None = None) -> None:
        self.code = code
        self.field = field
        super().__init__(message)


@dataclass(frozen=True)
class ListValidationError:
    """List operation validation error."""

    code: str
    message: str
    field: str | None = None


# --- Value Types ---


@dataclass(frozen=True)
class Run:
    """A run-length pair: ``count`` consecutive copies of ``element``."""

    count: int
    element: Any

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidArgumentError(
                "not_an_integer",
                f"Run count must be an integer, got {self.count!r}",
                field="count",
            )
        if self.count < 1:
            raise InvalidArgumentError(
                "out_of_range",
                f"Run count must be positive, got {self.count}",
                field="count",
            )


@dataclass(frozen=True)
class Found:
    """A lookup hit. Lookups return None when there is no such element."""

    value: Any


# --- Input Models ---


@dataclass(frozen=True)
class LookupInput:
    """Input for single-element lookups (``last``, ``element_at``)."""

    operation: str
    items: list[Any]
    position: int | None = None


@dataclass(frozen=True)
class MeasureInput:
    """Input for scalar queries (``length``, ``is_palindrome``)."""

    operation: str
    items: list[Any]


@dataclass(frozen=True)
class TransformInput:
    """
    Input for list-to-list transformations.

    ``argument`` carries the integer parameter of operations that take one
    (``replicate``, ``drop``, ``rotate``, ``remove_at``).
    """

    operation: str
    items: list[Any]
    argument: int | None = None


@dataclass(frozen=True)
class DecodeInput:
    """Input for run-length decoding."""

    entries: list[Any]


@dataclass(frozen=True)
class SplitInput:
    """Input for splitting a list in two."""

    items: list[Any]
    count: int


@dataclass(frozen=True)
class SliceInput:
    """Input for extracting an inclusive 1-based slice."""

    items: list[Any]
    start: int
    end: int


@dataclass(frozen=True)
class InsertInput:
    """Input for inserting an element at a 1-based position."""

    element: Any
    items: list[Any]
    position: int


@dataclass(frozen=True)
class RangeInput:
    """Input for generating an inclusive integer range."""

    start: int
    finish: int


# --- Output Models ---


@dataclass(frozen=True)
class ElementOutput:
    """Output for a lookup. ``found`` distinguishes absence from a None element."""

    found: bool
    element: Any = None
    errors: list[ListValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class MeasureOutput:
    """Output for scalar queries."""

    value: int | bool | None
    errors: list[ListValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ListOutput:
    """Output containing a freshly built list."""

    items: list[Any] | None
    errors: list[ListValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class SplitOutput:
    """Output for split: the leading and trailing parts."""

    first: list[Any] | None
    second: list[Any] | None
    errors: list[ListValidationError] = field(default_factory=list)
    success: bool = True
