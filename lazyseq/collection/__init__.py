from .fold import collect, fold
from .group import group_by, to_map, to_set, uniqueness
from .materialize import at, count_items, first, last, to_list, total
from .sort import to_sorted_by

__all__ = (
    # Materialize
    "at",
    "count_items",
    "first",
    "last",
    "to_list",
    "total",
    # Group
    "group_by",
    "to_map",
    "to_set",
    "uniqueness",
    # Fold
    "collect",
    "fold",
    # Sort
    "to_sorted_by",
)
