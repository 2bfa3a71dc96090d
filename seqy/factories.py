import typing
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create sequence from iterable"""
    from .sequence import Sequence
    return Sequence(data)

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence of 'count' consecutive ints from 'start'"""
    from .sequence import Sequence
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return Sequence(range(start, start + count))

def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with repeated item"""
    from .sequence import Sequence
    return Sequence([item] * count)

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence()

# --- aliases ---
seqy = from_iterable
S = from_iterable
