"""
Ordered grouping of a collection by key.
"""

from __future__ import annotations
from collections.abc import Hashable, Mapping
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")

Selector = Callable[[T], Hashable] | str


def _field(name: str) -> Callable[[Any], str]:
    def select(element: Any) -> str:
        if isinstance(element, Mapping):
            value = element[name]
        else:
            value = getattr(element, name)
        return str(value)
    return select


def group_by(collection: Iterable[T], selector: Selector) -> dict[Hashable, list[T]]:
    """
    Partition a collection into buckets keyed by selector.

    A string selector names a field, read by item access on mappings and
    by attribute access otherwise; its value is stringified to form the
    key. A callable selector's return value is used as the key as-is.

    Keys appear in first-occurrence order and each bucket keeps input
    order. A selector error propagates and no partial result is returned.

    Example:
        users = [{"state": "NJ"}, {"state": "NY"}, {"state": "NJ"}]
        group_by(users, "state")
        # {"NJ": [users[0], users[2]], "NY": [users[1]]}
    """
    if isinstance(selector, str):
        key_of = _field(selector)
    elif callable(selector):
        key_of = selector
    else:
        raise TypeError(
            f"selector must be a field name or a callable, got {type(selector).__name__}"
        )

    buckets: dict[Hashable, list[T]] = {}
    for element in collection:
        buckets.setdefault(key_of(element), []).append(element)
    return buckets
