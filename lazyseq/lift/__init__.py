"""
Lift helpers: getting values into the sequence world.

    from lazyseq import lift as L

    cursor = L.adapt([1, 2, 3])
    result = L.try_adapt(42)          # Error(InvalidSourceError(...))
    keys = L.up.from_keys({"a": 1})

Architecture:
- L.up.*  - sources into cursors (adapter)
"""

from __future__ import annotations

from . import up as up_ns
from .up import adapt, from_entries, from_indexable, from_keys, from_values, try_adapt

# L.up.* namespace alias
up = up_ns

__all__ = (
    "up",
    "adapt",
    "from_entries",
    "from_indexable",
    "from_keys",
    "from_values",
    "try_adapt",
)
