"""
Right-to-left function composition.
"""

from __future__ import annotations
from typing import Any, Callable


def flow_right(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Compose functions right to left.

    The rightmost function receives every argument the composed function
    is called with; each function to its left receives the previous
    return value as its only argument. The leftmost result is returned.

    Example:
        add3 = flow_right(lambda n: n + 2, lambda n: n + 1)
        add3(0)  # 3

        triple_max = flow_right(lambda n: n * 3, max)
        triple_max(6, 5, 10, 2)  # 30

    Raises:
        TypeError: If no functions are given or one is not callable.
    """
    if not fns:
        raise TypeError("flow_right() requires at least one function")
    for position, fn in enumerate(fns):
        if not callable(fn):
            raise TypeError(
                f"flow_right() argument {position} is not callable: {fn!r}"
            )

    first, *rest = reversed(fns)

    def composed(*args: Any, **kwargs: Any) -> Any:
        result = first(*args, **kwargs)
        for fn in rest:
            result = fn(result)
        return result

    return composed
