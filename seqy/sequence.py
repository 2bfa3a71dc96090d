from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .errors import IndexOutOfRangeError

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.query import QueryAccessor
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, data: Iterable[T] = ()):
        """init with any iterable; it is materialized immediately"""
        self._items: List[T] = list(data)

    def _get_data(self) -> List[T]:
        """the backing list. accessors read it, only remove_matching writes it"""
        return self._items

    def _replace_data(self, data: List[T]) -> None:
        # slice assignment keeps the same list object for anyone holding _get_data()
        self._items[:] = data

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Sequence(self._items[index])
        length = len(self._items)
        if not -length <= index < length:
            raise IndexOutOfRangeError(index, length)
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _BaseSequence):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    # mutable container
    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """an eager, linq-inspired query surface over an ordered in-memory list."""
    def __init__(self, data: Iterable[T] = ()):
        super().__init__(data)
        # --- initialize accessors ---
        self.query = QueryAccessor(self)
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)
