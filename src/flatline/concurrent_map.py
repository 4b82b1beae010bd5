"""
Concurrent, order-preserving map over possibly-pending values.

Fans every element out onto the event loop at once and fans the results
back in by slot index. Built on completion callbacks alone, without
gather, wait or task groups.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Awaitable, Iterable
import asyncio
import functools
import inspect
import logging

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


def concurrent_map(
    collection: Iterable[T | Awaitable[T]],
    iterator: Callable[[T], U | Awaitable[U]],
) -> asyncio.Future[list[U]]:
    """
    Map iterator over collection concurrently, keeping input order.

    Must be called from inside a running event loop. Every element is
    started before this returns; awaitable elements are resolved first and
    the iterator is called with their values. The iterator may return a
    plain value or an awaitable.

    The returned future resolves to a list aligned with the input, or
    fails with the first exception observed in time. Work still in flight
    after that is not cancelled: it runs to completion and its outcome is
    discarded.

    Example:
        async def read_upper(path: str) -> str:
            text = await asyncio.to_thread(Path(path).read_text)
            return text.upper()

        contents = await concurrent_map(["a.txt", "b.txt"], read_upper)
    """
    loop = asyncio.get_running_loop()
    items = list(collection)
    result: asyncio.Future[list[U]] = loop.create_future()

    if not items:
        result.set_result([])
        return result

    slots: list[U | None] = [None] * len(items)
    outstanding = len(items)
    logger.debug("concurrent_map: fanning out %d elements", len(items))

    def fail(index: int, exc: BaseException) -> None:
        if result.done():
            logger.debug(
                "concurrent_map: discarding failure at index %d after settlement: %r",
                index, exc,
            )
            return
        if isinstance(exc, StopIteration):
            # Futures refuse StopIteration; wrap it the way Task does.
            wrapped = RuntimeError(f"iterator raised StopIteration at index {index}")
            wrapped.__cause__ = exc
            exc = wrapped
        result.set_exception(exc)

    def settle(index: int, value: U) -> None:
        nonlocal outstanding
        if result.done():
            return
        slots[index] = value
        outstanding -= 1
        if outstanding == 0:
            result.set_result(slots)

    def apply(index: int, element: T) -> None:
        try:
            value = iterator(element)
        except Exception as exc:
            fail(index, exc)
            return
        if inspect.isawaitable(value):
            follow(index, value, then=settle)
        else:
            settle(index, value)

    def on_done(
        index: int,
        then: Callable[[int, object], None],
        future: asyncio.Future,
    ) -> None:
        if future.cancelled():
            if not result.done():
                result.cancel()
            return
        exc = future.exception()
        if exc is not None:
            fail(index, exc)
            return
        then(index, future.result())

    def follow(
        index: int,
        awaitable: Awaitable[object],
        then: Callable[[int, object], None],
    ) -> None:
        future = asyncio.ensure_future(awaitable)
        future.add_done_callback(functools.partial(on_done, index, then))

    for index, element in enumerate(items):
        if inspect.isawaitable(element):
            follow(index, element, then=apply)
        else:
            loop.call_soon(apply, index, element)

    return result
