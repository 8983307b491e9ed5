from __future__ import annotations
import typing
import pandas as pd
from ..types import *
from ..comparators import natural_order

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

_MISSING = object()


def _extreme(items: Iterable[T], is_better: Callable[[T, T], bool]) -> Any:
    """single pass search for the best element. returns _MISSING when empty."""
    best = _MISSING
    for item in items:
        if best is _MISSING or is_better(item, best):
            best = item
    return best


def _fill(generator: ArrayGenerator, data: List[T]) -> MutableSequence[T]:
    """store data into the container supplied by generator(size)"""
    size = len(data)
    container = generator(size)
    if container is None:
        raise TypeError("array generator returned None")
    if len(container) < size:
        raise ValueError(f"array generator returned a container of length {len(container)}, expected {size}")
    for index, item in enumerate(data):
        container[index] = item
    return container


class _TerminalOperations(Generic[T]):
    """terminal operations shared by every sequence. each one consumes the sequence."""

    _optional_type: Type[OptionalValue] = OptionalValue

    def count(self: 'Sequence[T]') -> int:
        """count elements"""
        return sum(1 for _ in self._begin_terminal('count'))

    def max(self: 'Sequence[T]', comparator: Optional[Comparator[T]] = None) -> OptionalValue[T]:
        """
        find the element the comparator ranks highest, natural order when none is given.
        when several elements tie, which of them is returned is unspecified.
        """
        cmp = comparator if comparator is not None else natural_order()
        best = _extreme(self._begin_terminal('max'), lambda item, current: cmp(item, current) > 0)
        return self._optional_type.empty() if best is _MISSING else self._optional_type.of(best)

    def min(self: 'Sequence[T]', comparator: Optional[Comparator[T]] = None) -> OptionalValue[T]:
        """find the element the comparator ranks lowest, natural order when none is given"""
        cmp = comparator if comparator is not None else natural_order()
        best = _extreme(self._begin_terminal('min'), lambda item, current: cmp(item, current) < 0)
        return self._optional_type.empty() if best is _MISSING else self._optional_type.of(best)

    def for_each(self: 'Sequence[T]', action: Consumer[T]) -> None:
        """call action once per element, in source order"""
        for item in self._begin_terminal('for_each'):
            action(item)

    def for_each_ordered(self: 'Sequence[T]', action: Consumer[T]) -> None:
        """same as for_each; sequences are always sequential"""
        self.for_each(action)

    def all_match(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition, stopping at the first miss"""
        return all(predicate(x) for x in self._begin_terminal('all_match'))

    def any_match(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check if any element satisfies condition, stopping at the first hit"""
        return any(predicate(x) for x in self._begin_terminal('any_match'))

    def none_match(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check that no element satisfies condition, stopping at the first hit"""
        return not any(predicate(x) for x in self._begin_terminal('none_match'))

    def to_array(self: 'Sequence[T]', generator: Optional[ArrayGenerator] = None) -> MutableSequence[T]:
        """
        materialize the elements into a new container.
        without a generator the result is a fresh list; with one, generator(size)
        supplies the container and elements are stored at indexes 0..size-1.
        """
        data = list(self._begin_terminal('to_array'))
        if generator is None: return self._materialize(data)
        return _fill(generator, data)

    def to_list(self: 'Sequence[T]') -> List[T]:
        """convert to list"""
        return list(self._begin_terminal('to_list'))

    def to_pandas(self: 'Sequence[T]', name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        data = list(self._begin_terminal('to_pandas'))
        return pd.Series(self._materialize(data), name=name, dtype=self._pandas_dtype)

    # --- hooks overridden by the numeric variants ---

    _pandas_dtype: Optional[Any] = None

    def _materialize(self, data: List[T]) -> MutableSequence[T]:
        return data
