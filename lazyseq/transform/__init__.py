from .element import (
    compact_cursor,
    filter_cursor,
    flat_map_cursor,
    flatten_cursor,
    map_cursor,
    unique_cursor,
    with_each_cursor,
)
from .slicing import (
    drop_cursor,
    drop_while_cursor,
    replace_at_cursor,
    splice_cursor,
    take_cursor,
    take_last_cursor,
    take_while_cursor,
)
from .structure import (
    append_cursor,
    chunk_cursor,
    chunk_with_cursor,
    concat_cursor,
    default_if_empty_cursor,
    interleave_cursor,
    interpose_cursor,
    interpose_with_cursor,
    loop_cursor,
    prepend_cursor,
    prepend_many_cursor,
    unzip_cursors,
)

__all__ = (
    # Element-wise
    "compact_cursor",
    "filter_cursor",
    "flat_map_cursor",
    "flatten_cursor",
    "map_cursor",
    "unique_cursor",
    "with_each_cursor",
    # Slicing
    "drop_cursor",
    "drop_while_cursor",
    "replace_at_cursor",
    "splice_cursor",
    "take_cursor",
    "take_last_cursor",
    "take_while_cursor",
    # Structure
    "append_cursor",
    "chunk_cursor",
    "chunk_with_cursor",
    "concat_cursor",
    "default_if_empty_cursor",
    "interleave_cursor",
    "interpose_cursor",
    "interpose_with_cursor",
    "loop_cursor",
    "prepend_cursor",
    "prepend_many_cursor",
    "unzip_cursors",
)
