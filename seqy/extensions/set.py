from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class SetAccessor(Generic[T]):
    """
    comparer-driven equality and set-like operations.
    every operation takes an optional comparer(a, b) -> bool and falls back
    to ==. comparers need not be symmetric; the argument order used by each
    operation is documented on it. matching is pairwise, never hash-based.
    """
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def equals(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> bool:
        """
        positional equality: same length and comparer(self[i], other[i]) for every i.
        """
        compare = _comparer_or_default(comparer)
        self_data = self._sequence._get_data()
        other_data = list(other)
        if len(self_data) != len(other_data): return False
        return all(compare(a, b) for a, b in zip(self_data, other_data))

    def distinct(self, comparer: Optional[Comparer[T]] = None) -> 'Sequence[T]':
        """
        first occurrences only. an item is kept when comparer(item, kept) is
        false for every item kept so far. o(n^2).
        """
        from ..sequence import Sequence
        return Sequence(_distinct(self._sequence._get_data(), _comparer_or_default(comparer)))

    def intersect(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Sequence[T]':
        """
        items of this sequence for which comparer(item, other_item) holds for some
        other_item. keeps this sequence's order and its duplicates.
        """
        from ..sequence import Sequence
        compare = _comparer_or_default(comparer)
        other_data = list(other)
        return Sequence([item for item in self._sequence._get_data()
                         if any(compare(item, other_item) for other_item in other_data)])

    def union(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Sequence[T]':
        """this sequence followed by other, then distinct over the combination."""
        from ..sequence import Sequence
        combined = chain(self._sequence._get_data(), other)
        return Sequence(_distinct(combined, _comparer_or_default(comparer)))

    def concat(self, other: Iterable[T]) -> 'Sequence[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..sequence import Sequence
        return Sequence(self._sequence._get_data() + list(other))


def _distinct(items: Iterable[T], compare: Comparer[T]) -> List[T]:
    result = []
    for item in items:
        if not any(compare(item, kept) for kept in result):
            result.append(item)
    return result


def _comparer_or_default(comparer: Optional[Comparer[T]]) -> Comparer[T]:
    # a callable object may be falsy, so only None selects ==
    return comparer if comparer is not None else default_comparer
