from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Type
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], bool]
Reducer = Callable[[U, U], U]
Action = Callable[[T], Any]

Number = Union[int, float]

# accepted spellings for the numeric result kind of an aggregation
NUMERIC_KINDS: Dict[Any, type] = {
    int: np.int64,
    'int': np.int64,
    'int64': np.int64,
    np.int64: np.int64,
    float: np.float64,
    'float': np.float64,
    'float64': np.float64,
    np.float64: np.float64,
    'float32': np.float32,
    np.float32: np.float32,
}


def default_comparer(left: Any, right: Any) -> bool:
    """plain value equality, used when no comparer is supplied"""
    return left == right
