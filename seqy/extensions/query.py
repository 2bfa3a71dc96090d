from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class QueryAccessor(Generic[T]):
    """predicate searches: existence, first/last lookups and counting."""
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def exists(self, predicate: Predicate[T]) -> bool:
        """check if any element satisfies the predicate; stops at the first match"""
        return any(predicate(x) for x in self._sequence._get_data())

    def true_for_all(self, predicate: Predicate[T]) -> bool:
        """check if every element satisfies the predicate; true when empty"""
        return all(predicate(x) for x in self._sequence._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements satisfying the predicate, or all elements"""
        if predicate is None: return len(self._sequence._get_data())
        return sum(1 for x in self._sequence._get_data() if predicate(x))

    def find_first(self, predicate: Predicate[T]) -> Optional[T]:
        """first matching element, or None"""
        for item in self._sequence._get_data():
            if predicate(item): return item
        return None

    def find_first_index(self, predicate: Predicate[T]) -> int:
        """index of the first matching element, or -1"""
        for index, item in enumerate(self._sequence._get_data()):
            if predicate(item): return index
        return -1

    def find_last(self, predicate: Predicate[T]) -> Optional[T]:
        """last matching element, or None"""
        index = self.find_last_index(predicate)
        return self._sequence._get_data()[index] if index >= 0 else None

    def find_last_index(self, predicate: Predicate[T]) -> int:
        """index of the last matching element, or -1. scans from the end"""
        data = self._sequence._get_data()
        for index in range(len(data) - 1, -1, -1):
            if predicate(data[index]): return index
        return -1
