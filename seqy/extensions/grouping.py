from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class GroupingAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, 'Sequence[T]']:
        """
        group elements by a key. keys appear in first-seen order and each
        group keeps the input order of its elements.
        """
        from ..sequence import Sequence
        groups: Dict[K, List[T]] = {}
        for item in self._sequence._get_data():
            groups.setdefault(key_selector(item), []).append(item)
        return {key: Sequence(items) for key, items in groups.items()}
