"""
ListUtils component - pure list functions (P01-P22).
"""

from ._impl import (
    DEFAULT_CONFIG,
    IdentityEquality,
    ListConfig,
    ValueEquality,
    compress,
    decode,
    drop,
    duplicate,
    element_at,
    encode,
    encode_direct,
    encode_modified,
    equality_for,
    flatten,
    insert_at,
    is_palindrome,
    last,
    last_two,
    length,
    pack,
    range_of,
    remove_at,
    replicate,
    reverse,
    rotate,
    slice_of,
    split,
)
from .component import (
    build_config,
    run,
    run_decode,
    run_insert,
    run_lookup,
    run_measure,
    run_range,
    run_slice,
    run_split,
    run_transform,
)
from .models import (
    DecodeInput,
    ElementOutput,
    Found,
    InsertInput,
    InvalidArgumentError,
    ListOutput,
    ListValidationError,
    LookupInput,
    MeasureInput,
    MeasureOutput,
    RangeInput,
    Run,
    SliceInput,
    SplitInput,
    SplitOutput,
    TransformInput,
)
from .ports import EqualityPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_decode",
    "run_insert",
    "run_lookup",
    "run_measure",
    "run_range",
    "run_slice",
    "run_split",
    "run_transform",
    "build_config",
    # Input models
    "DecodeInput",
    "InsertInput",
    "LookupInput",
    "MeasureInput",
    "RangeInput",
    "SliceInput",
    "SplitInput",
    "TransformInput",
    # Output models
    "ElementOutput",
    "ListOutput",
    "ListValidationError",
    "MeasureOutput",
    "SplitOutput",
    # Value types and errors
    "Found",
    "InvalidArgumentError",
    "Run",
    # Ports
    "EqualityPort",
    "RulesPort",
    # Configuration
    "DEFAULT_CONFIG",
    "IdentityEquality",
    "ListConfig",
    "ValueEquality",
    "equality_for",
    # Pure functions
    "compress",
    "decode",
    "drop",
    "duplicate",
    "element_at",
    "encode",
    "encode_direct",
    "encode_modified",
    "flatten",
    "insert_at",
    "is_palindrome",
    "last",
    "last_two",
    "length",
    "pack",
    "range_of",
    "remove_at",
    "replicate",
    "reverse",
    "rotate",
    "slice_of",
    "split",
]
