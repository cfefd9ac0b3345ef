from __future__ import annotations
import typing
from ..types import *
from ..iterators import (
    map_iterator, filter_iterator, flat_map_iterator, take_iterator, skip_iterator,
    take_while_iterator, skip_while_iterator
)

if typing.TYPE_CHECKING:
    from ..enumerable import AsyncEnumerable

class _CoreOperations(Generic[T]):
    def map(self: 'AsyncEnumerable[T]', selector: Selector[T, U]) -> 'AsyncEnumerable[U]':
        """project each element to a new form"""
        return self._chain(lambda source: map_iterator(source, selector))

    def filter(self: 'AsyncEnumerable[T]', predicate: Predicate[T]) -> 'AsyncEnumerable[T]':
        """keep only the elements satisfying a predicate"""
        return self._chain(lambda source: filter_iterator(source, predicate))

    def flat_map(self: 'AsyncEnumerable[T]', selector: Selector[T, Iterable[U]]) -> 'AsyncEnumerable[U]':
        """project each element to an iterable and flatten"""
        return self._chain(lambda source: flat_map_iterator(source, selector))

    def take(self: 'AsyncEnumerable[T]', count: int) -> 'AsyncEnumerable[T]':
        """take the first 'count' elements; safe on infinite sources"""
        return self._chain(lambda source: take_iterator(source, count))

    def skip(self: 'AsyncEnumerable[T]', count: int) -> 'AsyncEnumerable[T]':
        """skip the first 'count' elements"""
        return self._chain(lambda source: skip_iterator(source, count))

    def take_while(self: 'AsyncEnumerable[T]', predicate: Predicate[T]) -> 'AsyncEnumerable[T]':
        """take elements while predicate is true"""
        return self._chain(lambda source: take_while_iterator(source, predicate))

    def skip_while(self: 'AsyncEnumerable[T]', predicate: Predicate[T]) -> 'AsyncEnumerable[T]':
        """skip elements while predicate is true"""
        return self._chain(lambda source: skip_while_iterator(source, predicate))

    def of_type(self: 'AsyncEnumerable[T]', type_filter: Type[U]) -> 'AsyncEnumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.filter(lambda item: isinstance(item, type_filter))
