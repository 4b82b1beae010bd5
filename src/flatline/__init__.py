"""
Flatline: small async and functional primitives.

Provides right-to-left composition, ordered grouping, and a concurrent
map that preserves input order and fails fast.

Usage:
    from flatline import flow_right, group_by, concurrent_map

    # Right-to-left composition
    shout = flow_right(lambda s: s + "!", str.upper)

    # Ordered buckets by field name or key function
    by_state = group_by(users, "state")

    # Concurrent map, results in input order
    contents = await concurrent_map(paths, read_file)
"""

from .compose import flow_right
from .group import group_by
from .concurrent_map import concurrent_map

__version__ = "0.1.0"
__all__ = [
    "flow_right",
    "group_by",
    "concurrent_map",
]
