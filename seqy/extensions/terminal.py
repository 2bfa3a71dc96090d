from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class TerminalAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to a new list"""
        return list(self._sequence._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence._get_data())

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence._get_data(), dtype=dtype)

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._sequence._get_data())

    def map_reduce(self, mapper: Selector[T, U], reducer: Reducer[U]) -> Optional[U]:
        """
        maps every element, then folds left starting from the first mapped value.
        returns None for an empty sequence.
        """
        data = self._sequence._get_data()
        if not data: return None
        return reduce(lambda acc, item: reducer(acc, mapper(item)), data[1:], mapper(data[0]))
