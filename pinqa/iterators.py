"""
standalone async combinators.

every combinator here takes one upstream sequence, owns it exclusively and
returns a new async iterator. argument checks happen when the combinator is
built; the upstream is not touched until the first pull.
"""
from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from datetime import timedelta
from operator import itemgetter
from .types import *

logger = logging.getLogger(__name__)


# --- sequence helpers ---

def as_async_iterable(source: Source[T]) -> AsyncIterable[T]:
    """return source as an async iterable, adapting plain iterables lazily"""
    if hasattr(source, '__aiter__'):
        return source
    if hasattr(source, '__iter__'):
        return _from_sync(source)
    raise TypeError(f"'{type(source).__name__}' object is neither iterable nor async iterable")


async def _from_sync(iterable: Iterable[T]) -> AsyncIterator[T]:
    for item in iterable:
        yield item


def key_selector_of(key: Union[KeySelector[T, K], Any]) -> KeySelector[T, K]:
    """turn a field name into a selector; callables are returned unchanged"""
    if callable(key):
        return key
    get_item = itemgetter(key)

    def select(item):
        if isinstance(item, Mapping) or not isinstance(key, str):
            return get_item(item)
        return getattr(item, key)
    return select


def _to_seconds(min_millis: Union[float, timedelta]) -> float:
    if isinstance(min_millis, timedelta):
        return min_millis.total_seconds()
    return min_millis / 1000.0


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")


# --- per-item combinators ---

async def map_iterator(source: Source[T], selector: Selector[T, U]) -> AsyncIterator[U]:
    """apply selector to every item"""
    async for item in as_async_iterable(source):
        yield selector(item)


async def filter_iterator(source: Source[T], predicate: Predicate[T]) -> AsyncIterator[T]:
    """deliver only the items satisfying predicate"""
    async for item in as_async_iterable(source):
        if predicate(item):
            yield item


async def flat_map_iterator(source: Source[T], selector: Selector[T, Iterable[U]]) -> AsyncIterator[U]:
    """project each item to an iterable and flatten the results"""
    async for item in as_async_iterable(source):
        for inner in selector(item):
            yield inner


def take_iterator(source: Source[T], count: int) -> AsyncIterator[T]:
    """deliver at most count items, then stop pulling"""
    _check_count(count)
    return _take(as_async_iterable(source), count)


async def _take(source: AsyncIterable[T], count: int) -> AsyncIterator[T]:
    if count == 0:
        return
    taken = 0
    async for item in source:
        yield item
        taken += 1
        if taken >= count:
            return


def skip_iterator(source: Source[T], count: int) -> AsyncIterator[T]:
    """drop the first count items"""
    _check_count(count)
    return _skip(as_async_iterable(source), count)


async def _skip(source: AsyncIterable[T], count: int) -> AsyncIterator[T]:
    skipped = 0
    async for item in source:
        if skipped < count:
            skipped += 1
            continue
        yield item


async def take_while_iterator(source: Source[T], predicate: Predicate[T]) -> AsyncIterator[T]:
    async for item in as_async_iterable(source):
        if not predicate(item):
            return
        yield item


async def skip_while_iterator(source: Source[T], predicate: Predicate[T]) -> AsyncIterator[T]:
    skipping = True
    async for item in as_async_iterable(source):
        if skipping and predicate(item):
            continue
        skipping = False
        yield item


# --- bundling combinators ---

def batch_iterator(source: Source[T], size: int) -> AsyncIterator[List[T]]:
    """
    bundles consecutive items into lists of `size`. the last batch may be
    shorter; an empty source yields no batches at all.
    """
    if size <= 0:
        raise ValueError("batch size must be positive")
    return _batch(as_async_iterable(source), size)


async def _batch(source: AsyncIterable[T], size: int) -> AsyncIterator[List[T]]:
    buffer: List[T] = []
    async for item in source:
        buffer.append(item)
        if len(buffer) == size:
            logger.debug("emitting batch of %d", size)
            yield buffer
            buffer = []
    if buffer:
        logger.debug("emitting final batch of %d", len(buffer))
        yield buffer


def group_iterator(source: Source[T], key: Union[KeySelector[T, K], Any]) -> AsyncIterator[Group[K, T]]:
    """
    groups consecutive items that share a key. the source must already be
    ordered by that key: a key that shows up again later opens a new group,
    groups are never merged.

    key may be a selector function or a field name looked up on each item.
    """
    return _group(as_async_iterable(source), key_selector_of(key))


async def _group(source: AsyncIterable[T], key_selector: KeySelector[T, K]) -> AsyncIterator[Group[K, T]]:
    current: Optional[Group[K, T]] = None
    async for item in source:
        item_key = key_selector(item)
        if current is not None and item_key == current.key:
            current.group.append(item)
            continue
        if current is not None:
            logger.debug("emitting group %r with %d items", current.key, len(current))
            yield current
        current = Group(item_key, [item])
    if current is not None:
        logger.debug("emitting group %r with %d items", current.key, len(current))
        yield current


# --- pacing ---

def interval_iterator(source: Source[T], min_millis: Union[float, timedelta], *,
                      clock: Callable[[], float] = time.monotonic,
                      sleep: Callable[[float], Any] = asyncio.sleep) -> AsyncIterable[T]:
    """
    keeps at least `min_millis` between successive deliveries.

    time spent waiting on the upstream counts toward the interval, so a slow
    source is never delayed any further. the first item goes out as soon as
    it is available. a zero interval returns the source untouched.
    """
    seconds = _to_seconds(min_millis)
    if not seconds >= 0:
        raise ValueError("interval must be a non-negative number")
    if seconds == 0:
        return as_async_iterable(source)
    return _interval(as_async_iterable(source), seconds, clock, sleep)


async def _interval(source: AsyncIterable[T], seconds: float,
                    clock: Callable[[], float], sleep: Callable[[float], Any]) -> AsyncIterator[T]:
    last_delivery: Optional[float] = None
    async for item in source:
        if last_delivery is not None:
            remaining = seconds - (clock() - last_delivery)
            if remaining > 0:
                logger.debug("interval: waiting %.4fs before next item", remaining)
                await sleep(remaining)
        last_delivery = clock()
        yield item
