from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .iterators import as_async_iterable

# --- chaining operations ---
from .extensions.core import _CoreOperations
from .extensions.grouping import _GroupingOperations
from .extensions.timing import _TimingOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IAsyncEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _consume(self) -> AsyncIterable[T]:
        """hand over the underlying sequence, invalidating this enumerable"""
        pass

# --- base enumerable implementation ---

class _BaseAsyncEnumerable(IAsyncEnumerable[T]):
    def __init__(self, source: Source[T]):
        """wrap a sequence; nothing is pulled from it here"""
        self._source = as_async_iterable(source)
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise EnumerableConsumedError()

    def _consume(self) -> AsyncIterable[T]:
        self._ensure_usable()
        self._consumed = True
        return self._source

    def _chain(self, build: Callable[[AsyncIterable[T]], AsyncIterable[U]]) -> 'AsyncEnumerable[U]':
        """derive a new enumerable from this one's sequence.
        build raises on bad arguments before this enumerable is consumed."""
        self._ensure_usable()
        derived = build(self._source)
        self._consumed = True
        return AsyncEnumerable(derived)

    async def _get_data(self) -> List[T]:
        """drain the whole sequence into a list"""
        return [item async for item in self._consume()]

    def __aiter__(self) -> AsyncIterator[T]:
        return aiter(self._consume())

# --- main enumerable class ---

class AsyncEnumerable(
    _BaseAsyncEnumerable[T],
    _CoreOperations[T],
    _GroupingOperations[T],
    _TimingOperations[T]
):
    """a fluent, chainable wrapper over an async sequence."""
    def __init__(self, source: Source[T]):
        super().__init__(source)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    async def collect(self) -> List[T]:
        """drain the sequence into a list. never call this on an infinite source."""
        return await self._get_data()

    def iterable(self) -> AsyncIterator[T]:
        """the underlying sequence for manual `async for`, not pre-drained"""
        return aiter(self._consume())

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "pending"
        return f"AsyncEnumerable({state})"
