r"""
'    __________.___ _______   ________      _____
'    \______   \   |\      \  \_____  \    /  _  \
'     |     ___/   |/   |   \  /  / \  \  /  /_\  \
'     |    |   |   /    |    \/   \_/.  \/    |    \
'     |____|   |___\____|__  /\_____\ \_/\____|__  /
'                          \/        \__>        \/
"""

# expose the main class
from .enumerable import AsyncEnumerable

# expose the factory functions
from .factories import (
    from_async,
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    iterator,
    pinqa,
    A,
    P,
    p
)

# expose the standalone combinators
from .iterators import (
    map_iterator,
    filter_iterator,
    batch_iterator,
    group_iterator,
    interval_iterator
)

# expose supporting data classes
from .types import (
    Group,
    EnumerableConsumedError
)

# define what `import *` does
__all__ = [
    "AsyncEnumerable",
    "from_async",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "iterator",
    "pinqa",
    "A",
    "P",
    "p",
    "map_iterator",
    "filter_iterator",
    "batch_iterator",
    "group_iterator",
    "interval_iterator",
    "Group",
    "EnumerableConsumedError"
]
