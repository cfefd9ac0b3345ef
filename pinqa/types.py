from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, AsyncIterator, AsyncIterable,
    Any, Optional, Union, Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]

# anything a pipeline can start from
Source = Union[AsyncIterable[T], Iterable[T]]


class EnumerableConsumedError(RuntimeError):
    """raised when an async enumerable is used again after it was consumed."""

    def __init__(self, message: str = "async enumerable has already been consumed"):
        super().__init__(message)


class Group(Generic[K, T]):
    """a run of consecutive items sharing the same key"""

    def __init__(self, key: K, group: List[T]):
        self.key = key
        self.group = group

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.key == other.key and self.group == other.group

    def __len__(self) -> int:
        return len(self.group)

    def __repr__(self) -> str:
        return f"Group(key={self.key!r}, group={self.group!r})"
