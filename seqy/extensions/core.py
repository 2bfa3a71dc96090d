from __future__ import annotations
import typing
import logging
from ..types import *
from ..errors import InvalidCastError

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


class _CoreOperations(Generic[T]):
    # --- transformation ---

    def select(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..sequence import Sequence
        return Sequence([selector(x) for x in self._get_data()])

    def cast(self: 'Sequence[T]', target_type: Type[R],
             converter: Optional[Callable[[T], R]] = None) -> 'Sequence[R]':
        """
        checked conversion of every element to target_type.
        without a converter each element must already be an instance of target_type.
        with a converter, its TypeError/ValueError is reported as an InvalidCastError.
        nothing is returned unless every element converts.
        """
        from ..sequence import Sequence
        result = []
        for index, item in enumerate(self._get_data()):
            if converter is None:
                if not isinstance(item, target_type):
                    logger.debug("cast failed at index %d: %s -> %s", index, type(item).__name__, target_type)
                    raise InvalidCastError(
                        f"element at index {index} of type '{type(item).__name__}' "
                        f"cannot be cast to {_type_name(target_type)}",
                        index, type(item), target_type)
                result.append(item)
                continue
            try:
                result.append(converter(item))
            except (TypeError, ValueError) as e:
                logger.debug("converter failed at index %d: %s", index, e)
                raise InvalidCastError(
                    f"element at index {index} of type '{type(item).__name__}' "
                    f"cannot be converted to {_type_name(target_type)}: {e}",
                    index, type(item), target_type) from e
        return Sequence(result)

    def of_type(self: 'Sequence[T]', target_type: Type[R]) -> 'Sequence[R]':
        """keep only elements that are instances of target_type; never raises"""
        from ..sequence import Sequence
        return Sequence([x for x in self._get_data() if isinstance(x, target_type)])

    def for_each(self: 'Sequence[T]', action: Action[T]) -> 'Sequence[T]':
        """
        runs action on each element in order, for side-effects.
        returns this sequence to allow chaining.
        """
        for item in self._get_data():
            action(item)
        return self

    # --- removal ---

    def remove_matching(self: 'Sequence[T]', predicate: Predicate[T]) -> None:
        """
        removes, in place, every element for which predicate is true.
        kept elements stay in their relative order. the caller must hold
        exclusive access to the sequence for the duration of the call.
        """
        data = self._get_data()
        kept = [x for x in data if not predicate(x)]
        removed = len(data) - len(kept)
        self._replace_data(kept)
        logger.debug("remove_matching dropped %d of %d elements", removed, removed + len(kept))

    # --- pagination ---

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """drop the first 'count' elements"""
        from ..sequence import Sequence
        data = self._get_data()
        if count >= len(data): return Sequence()
        if count <= 0: return Sequence(data)
        return Sequence(data[count:])

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """keep the first 'count' elements"""
        from ..sequence import Sequence
        data = self._get_data()
        if count >= len(data): return Sequence(data)
        if count <= 0: return Sequence()
        return Sequence(data[:count])

    def last(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """
        keep the final 'count' elements.
        defined as skip(len - count), so count >= len gives everything and
        count <= 0 gives nothing.
        """
        return self.skip(len(self._get_data()) - count)

    def skip_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """skip elements while predicate is true, return the rest"""
        from ..sequence import Sequence
        for index, item in enumerate(self._get_data()):
            if not predicate(item):
                return self.skip(index)
        return Sequence()

    def take_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """take elements while predicate is true"""
        from ..sequence import Sequence
        for index, item in enumerate(self._get_data()):
            if not predicate(item):
                return self.take(index)
        return Sequence(self._get_data())


def _type_name(target_type: Any) -> str:
    if isinstance(target_type, tuple):
        return " | ".join(_type_name(t) for t in target_type)
    return f"'{getattr(target_type, '__name__', target_type)}'"
