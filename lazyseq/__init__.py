"""
Lazy, pull-based sequence combinators.

Wrap any iterator, iterable or array-like object into a Seq and chain
transformations without materializing intermediate results.

Architecture:
- Free combinators over cursors (*_cursor functions) in transform/, collection/
- Fluent sugar: Seq methods delegating to them
- Chain of responsibility builder in control/
"""

# Core types
from ._types import ArrayLike, Cursor, Indexed, Predicate, Selector, SortKey, Source

# Errors
from ._errors import ChainExhaustedError, InvalidSourceError

# Internal helpers (for custom combinators)
from . import _helpers

# Lift helpers (sources into cursors)
from . import lift
from .lift import adapt, try_adapt

# Construction
from .generate import CountRange

# Fluent sequence
from .sequence import (
    Seq,
    count,
    empty,
    entries_of,
    keys_of,
    randoms,
    repeat,
    seq,
    values_of,
    zip_seq,
)

# Transformations (generic layer)
from .transform import (
    append_cursor,
    chunk_cursor,
    chunk_with_cursor,
    compact_cursor,
    concat_cursor,
    default_if_empty_cursor,
    drop_cursor,
    drop_while_cursor,
    filter_cursor,
    flat_map_cursor,
    flatten_cursor,
    interleave_cursor,
    interpose_cursor,
    interpose_with_cursor,
    loop_cursor,
    map_cursor,
    prepend_cursor,
    prepend_many_cursor,
    replace_at_cursor,
    splice_cursor,
    take_cursor,
    take_last_cursor,
    take_while_cursor,
    unique_cursor,
    unzip_cursors,
    with_each_cursor,
)

# Aggregators
from .collection import (
    at,
    collect,
    count_items,
    first,
    fold,
    group_by,
    last,
    to_list,
    to_map,
    to_set,
    to_sorted_by,
    total,
    uniqueness,
)

# Chain of responsibility
from .control import Chain, build_chain

__all__ = (
    # Types
    "ArrayLike",
    "Cursor",
    "Indexed",
    "Predicate",
    "Selector",
    "SortKey",
    "Source",
    # Errors
    "ChainExhaustedError",
    "InvalidSourceError",
    # Modules
    "_helpers",
    "lift",
    # Lift
    "adapt",
    "try_adapt",
    # Construction
    "CountRange",
    "Seq",
    "count",
    "empty",
    "entries_of",
    "keys_of",
    "randoms",
    "repeat",
    "seq",
    "values_of",
    "zip_seq",
    # Transformations
    "append_cursor",
    "chunk_cursor",
    "chunk_with_cursor",
    "compact_cursor",
    "concat_cursor",
    "default_if_empty_cursor",
    "drop_cursor",
    "drop_while_cursor",
    "filter_cursor",
    "flat_map_cursor",
    "flatten_cursor",
    "interleave_cursor",
    "interpose_cursor",
    "interpose_with_cursor",
    "loop_cursor",
    "map_cursor",
    "prepend_cursor",
    "prepend_many_cursor",
    "replace_at_cursor",
    "splice_cursor",
    "take_cursor",
    "take_last_cursor",
    "take_while_cursor",
    "unique_cursor",
    "unzip_cursors",
    "with_each_cursor",
    # Aggregators
    "at",
    "collect",
    "count_items",
    "first",
    "fold",
    "group_by",
    "last",
    "to_list",
    "to_map",
    "to_set",
    "to_sorted_by",
    "total",
    "uniqueness",
    # Chain of responsibility
    "Chain",
    "build_chain",
)
