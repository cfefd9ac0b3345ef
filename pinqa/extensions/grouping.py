from __future__ import annotations
import typing
from ..types import *
from ..iterators import batch_iterator, group_iterator

if typing.TYPE_CHECKING:
    from ..enumerable import AsyncEnumerable

class _GroupingOperations(Generic[T]):
    def batch(self: 'AsyncEnumerable[T]', size: int) -> 'AsyncEnumerable[List[T]]':
        """
        split into lists of `size` consecutive elements. the last batch may be
        smaller. raises ValueError right away if size is not positive.
        """
        return self._chain(lambda source: batch_iterator(source, size))

    def group(self: 'AsyncEnumerable[T]', key: Union[KeySelector[T, K], Any]) -> 'AsyncEnumerable[Group[K, T]]':
        """
        group consecutive elements with the same key into Group(key, group).
        expects the sequence to be sorted by that key already; `key` is either
        a selector or the name of a field on each element.
        """
        return self._chain(lambda source: group_iterator(source, key))
