from __future__ import annotations
import typing
import numpy as np
from ..types import *
from ..config import get_config

if typing.TYPE_CHECKING:
    from ..sequence import Sequence, NumericSequence


class _NumericOperations(Generic[T]):
    """
    operations specific to the int, float and long sequences.
    natural numeric ordering replaces the comparator, results come back as
    the variant's own optional type and arrays keep the variant's dtype.
    """

    _dtype: Any = None

    def max(self: 'NumericSequence') -> OptionalValue:
        """find the largest element"""
        return self._numeric_extreme('max', np.max, max)

    def min(self: 'NumericSequence') -> OptionalValue:
        """find the smallest element"""
        return self._numeric_extreme('min', np.min, min)

    def boxed(self: 'NumericSequence') -> 'Sequence':
        """hand the elements over to a generic sequence. this sequence is consumed."""
        from ..sequence import Sequence
        items = self._begin_terminal('boxed')
        return Sequence(lambda: items)

    def _numeric_extreme(self: 'NumericSequence', operation: str,
                         numpy_func: Callable, python_func: Callable) -> OptionalValue:
        data = list(self._begin_terminal(operation))
        if not data: return self._optional_type.empty()
        if get_config().use_numpy:
            value = numpy_func(np.asarray(data, dtype=self._dtype)).item()
        else:
            value = self._python_extreme(data, python_func)
        return self._optional_type.of(value)

    def _python_extreme(self, data: List[T], python_func: Callable) -> T:
        return python_func(data)

    def _materialize(self, data: List[T]) -> np.ndarray:
        return np.asarray(data, dtype=self._dtype)

    @property
    def _pandas_dtype(self) -> Any:
        return self._dtype
