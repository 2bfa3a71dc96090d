from __future__ import annotations
import typing
from itertools import zip_longest
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class ZipAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Sequence[V]':
        """zip two sequences with a result selector, stopping at the shorter one"""
        from ..sequence import Sequence
        return Sequence([result_selector(t, u) for t, u in zip(self._sequence._get_data(), other)])

    def tuple_zip(self, other: Iterable[U]) -> 'Sequence[Tuple[Optional[T], Optional[U]]]':
        """
        pair elements up to the longer sequence's length.
        the missing side of the tail is None.
        """
        from ..sequence import Sequence
        return Sequence(list(zip_longest(self._sequence._get_data(), other, fillvalue=None)))
