from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class JoinAccessor(Generic[T]):
    """
    key-equality joins. keys are compared with == in a nested loop, so they
    only need to support equality, not hashing. o(|outer| x |inner|).
    """
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V]) -> 'Sequence[V]':
        """inner join; results are ordered outer-major, inner-minor"""
        from ..sequence import Sequence
        return Sequence([result_selector(outer_item, inner_item)
                         for outer_item, inner_item, _ in
                         _matching_pairs(self._sequence._get_data(), list(inner),
                                         outer_key_selector, inner_key_selector)])

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, U], V]) -> Dict[K, 'Sequence[V]']:
        """
        same pairing as join, but results are collected under their shared key.
        keys appear in first-matched order. the key must be hashable.
        """
        from ..sequence import Sequence
        groups: Dict[K, List[V]] = {}
        for outer_item, inner_item, key in _matching_pairs(self._sequence._get_data(), list(inner),
                                                           outer_key_selector, inner_key_selector):
            groups.setdefault(key, []).append(result_selector(outer_item, inner_item))
        return {key: Sequence(items) for key, items in groups.items()}


def _matching_pairs(outer: List[T], inner: List[U],
                    outer_key_selector: KeySelector[T, K],
                    inner_key_selector: KeySelector[U, K]) -> Iterator[Tuple[T, U, K]]:
    # inner keys are computed once rather than per outer item
    inner_keyed = [(inner_key_selector(inner_item), inner_item) for inner_item in inner]
    for outer_item in outer:
        outer_key = outer_key_selector(outer_item)
        for inner_key, inner_item in inner_keyed:
            if outer_key == inner_key:
                yield outer_item, inner_item, outer_key
