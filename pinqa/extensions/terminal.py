from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import AsyncEnumerable

_MISSING = object()

class TerminalAccessor(Generic[T]):
    """awaitable operations that drain the sequence. each one consumes the enumerable."""

    def __init__(self, enumerable_instance: 'AsyncEnumerable[T]'):
        self._enumerable = enumerable_instance

    async def list(self) -> List[T]:
        """convert to list"""
        return await self._enumerable._get_data()

    async def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(await self._enumerable._get_data())

    async def set(self) -> Set[T]:
        """convert to set"""
        return set(await self._enumerable._get_data())

    async def dict(self, key_selector: KeySelector[T, K],
                   value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in await self._enumerable._get_data()}

    async def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(await self._enumerable._get_data())

    async def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(await self._enumerable._get_data())

    async def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        total = 0
        async for item in self._enumerable._consume():
            if predicate is None or predicate(item):
                total += 1
        return total

    async def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition; stops at the first hit"""
        async for item in self._enumerable._consume():
            if predicate is None or predicate(item):
                return True
        return False

    async def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition; stops at the first miss"""
        async for item in self._enumerable._consume():
            if not predicate(item):
                return False
        return True

    async def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        found = await self._first(predicate)
        if found is _MISSING:
            if predicate is None: raise ValueError("sequence contains no elements")
            raise ValueError("no element satisfies the condition")
        return found

    async def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                               default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        found = await self._first(predicate)
        return default if found is _MISSING else found

    async def _first(self, predicate: Optional[Predicate[T]]) -> Any:
        async for item in self._enumerable._consume():
            if predicate is None or predicate(item):
                return item
        return _MISSING

    async def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence, folding as items arrive"""
        result = seed
        has_value = seed is not None
        async for item in self._enumerable._consume():
            if has_value:
                result = accumulator(result, item)
            else:
                result, has_value = item, True
        if not has_value: raise ValueError("cannot aggregate empty sequence without seed")
        return result
