import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import AsyncEnumerable

def from_async(source: AsyncIterable[T]) -> 'AsyncEnumerable[T]':
    """wrap an async iterable, e.g. an async generator"""
    from .enumerable import AsyncEnumerable
    return AsyncEnumerable(source)

def from_iterable(data: Iterable[T]) -> 'AsyncEnumerable[T]':
    """create async enumerable from a plain iterable"""
    from .enumerable import AsyncEnumerable
    return AsyncEnumerable(data)

def from_range(start: int, count: int) -> 'AsyncEnumerable[int]':
    """create async enumerable from range"""
    from .enumerable import AsyncEnumerable
    return AsyncEnumerable(range(start, start + count))

def repeat(item: T, count: int) -> 'AsyncEnumerable[T]':
    """create async enumerable with repeated item"""
    from .enumerable import AsyncEnumerable
    return AsyncEnumerable(item for _ in range(count))

def empty() -> 'AsyncEnumerable[Any]':
    """create empty async enumerable"""
    from .enumerable import AsyncEnumerable
    return AsyncEnumerable(())

def generate(generator_func: Callable[[], T], count: int) -> 'AsyncEnumerable[T]':
    """generate sequence using a function, called once per pulled item"""
    from .enumerable import AsyncEnumerable
    return AsyncEnumerable(generator_func() for _ in range(count))

# --- aliases ---
iterator = from_async
pinqa = from_async
A = from_async
P = from_iterable
p = from_iterable
