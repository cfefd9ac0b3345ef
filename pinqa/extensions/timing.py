from __future__ import annotations
import typing
from datetime import timedelta
from ..types import *
from ..iterators import interval_iterator

if typing.TYPE_CHECKING:
    from ..enumerable import AsyncEnumerable

class _TimingOperations(Generic[T]):
    def interval(self: 'AsyncEnumerable[T]', min_millis: Union[float, timedelta]) -> 'AsyncEnumerable[T]':
        """
        ensure at least `min_millis` milliseconds (or a timedelta) pass between
        deliveries. time the upstream already took counts toward the wait.
        """
        return self._chain(lambda source: interval_iterator(source, min_millis))
