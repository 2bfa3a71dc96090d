from __future__ import annotations
import typing
import logging
import numpy as np
from ..types import *
from ..errors import InvalidCastError, DivisionByZeroError

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)

NumericKind = Union[type, str]

_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


class StatsAccessor(Generic[T]):
    """
    numeric aggregation with per-kind semantics.

    every method takes an optional selector and an optional kind (int, float
    or 'float32'; see NUMERIC_KINDS). when kind is omitted it is inferred:
    all-integral values aggregate as int, anything else as float, and an
    empty sequence as float.

    - int: exact sums, average truncates toward zero and raises
      DivisionByZeroError when empty, min/max start from the int64 extremes.
    - float / float32: ieee-754 throughout, so an empty average is nan and
      min/max start from +inf / -inf.

    min and max of an empty sequence return their starting extreme instead of
    raising. results are native python scalars.
    """
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def _get_values(self, selector: Optional[Selector[T, Number]] = None) -> List[Number]:
        """helper to extract numeric values for statistical operations."""
        values = self._sequence.select(selector).to.list() if selector else self._sequence.to.list()
        if values and not all(_is_number(x) for x in values):
            raise TypeError("sequence contains non-numeric types for statistical operation.")
        return values

    def _resolve_kind(self, values: List[Number], kind: Optional[NumericKind]) -> type:
        if kind is None:
            dtype = np.int64 if values and all(_is_integral(x) for x in values) else np.float64
            logger.debug("inferred numeric kind %s for %d values", dtype.__name__, len(values))
            return dtype
        try:
            return NUMERIC_KINDS[kind]
        except (KeyError, TypeError):
            raise TypeError(f"unsupported numeric kind: {kind!r}") from None

    def _get_array(self, selector: Optional[Selector[T, Number]],
                   kind: Optional[NumericKind]) -> np.ndarray:
        values = self._get_values(selector)
        dtype = self._resolve_kind(values, kind)
        if np.issubdtype(dtype, np.integer):
            for index, value in enumerate(values):
                if not _is_integral(value):
                    raise InvalidCastError(
                        f"element at index {index} of type '{type(value).__name__}' "
                        f"is not integral; integer aggregation requires whole numbers",
                        index, type(value), int)
                if not _INT64_MIN <= value <= _INT64_MAX:
                    raise InvalidCastError(
                        f"element at index {index} ({value}) is outside the int64 range; "
                        f"use kind=float to aggregate it",
                        index, type(value), int)
        return np.asarray(values, dtype=dtype)

    def sum(self, selector: Optional[Selector[T, Number]] = None,
            kind: Optional[NumericKind] = None) -> Number:
        """calc sum"""
        arr = self._get_array(selector, kind)
        if np.issubdtype(arr.dtype, np.integer):
            # python ints, so the sum cannot wrap around
            return sum(arr.tolist())
        return np.sum(arr, dtype=arr.dtype).item()

    def average(self, selector: Optional[Selector[T, Number]] = None,
                kind: Optional[NumericKind] = None) -> Number:
        """calc average"""
        arr = self._get_array(selector, kind)
        count = len(arr)
        if np.issubdtype(arr.dtype, np.integer):
            if count == 0:
                raise DivisionByZeroError("cannot calculate integer average of empty sequence")
            total = sum(arr.tolist())
            quotient = abs(total) // count
            return quotient if total >= 0 else -quotient
        dtype = arr.dtype.type
        with np.errstate(divide='ignore', invalid='ignore'):
            return (np.sum(arr, dtype=dtype) / dtype(count)).item()

    def min(self, selector: Optional[Selector[T, Number]] = None,
            kind: Optional[NumericKind] = None) -> Number:
        """find minimum value; the kind's largest value when empty"""
        arr = self._get_array(selector, kind)
        return np.min(arr, initial=_upper_extreme(arr.dtype)).item()

    def max(self, selector: Optional[Selector[T, Number]] = None,
            kind: Optional[NumericKind] = None) -> Number:
        """find maximum value; the kind's smallest value when empty"""
        arr = self._get_array(selector, kind)
        return np.max(arr, initial=_lower_extreme(arr.dtype)).item()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating))


def _is_integral(value: Any) -> bool:
    return isinstance(value, (int, np.integer))


def _upper_extreme(dtype: np.dtype) -> Number:
    if np.issubdtype(dtype, np.integer): return np.iinfo(dtype).max
    return np.inf


def _lower_extreme(dtype: np.dtype) -> Number:
    if np.issubdtype(dtype, np.integer): return np.iinfo(dtype).min
    return -np.inf
