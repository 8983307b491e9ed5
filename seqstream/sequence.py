from __future__ import annotations

import logging
import math
import numbers
import numpy as np
from abc import ABC, abstractmethod
from .types import *
from .errors import StateError

# --- terminal operations ---
from .extensions.terminal import _TerminalOperations
from .extensions.numeric import _NumericOperations

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _traverse(self) -> Iterator[T]:
        """iterate the underlying source once"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, data_func: DataFunc[T]):
        """init with a function that returns the source when called"""
        self._data_func = data_func
        self._state = SequenceState.OPEN
        self._close_handlers: List[Callable[[], None]] = []
        self._handlers_run = False

    @property
    def state(self) -> SequenceState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._state is SequenceState.CLOSED

    def _traverse(self) -> Iterator[T]:
        return iter(self._data_func())

    def _ensure_open(self, operation: str) -> None:
        if self._state is SequenceState.CLOSED:
            logger.debug(f"{type(self).__name__}.{operation} called on a closed sequence")
            raise StateError()

    def _begin_terminal(self, operation: str) -> Iterator[T]:
        """
        the single entry point of every terminal operation: fails on a closed
        sequence, otherwise closes it and hands back an iterator over the source.
        the sequence stays closed even if the traversal later fails.
        """
        self._ensure_open(operation)
        self._state = SequenceState.CLOSED
        logger.debug(f"{type(self).__name__}.{operation}: open -> closed")
        return self._traverse()

    def on_close(self, handler: Callable[[], None]) -> '_BaseSequence[T]':
        """register a handler that close() runs"""
        self._ensure_open('on_close')
        self._close_handlers.append(handler)
        return self

    def close(self) -> None:
        """
        close without traversing. closing twice is allowed; handlers run once,
        in registration order. the first handler error propagates after all
        handlers have run.
        """
        self._state = SequenceState.CLOSED
        if self._handlers_run: return
        self._handlers_run = True
        first_error: Optional[BaseException] = None
        for handler in self._close_handlers:
            try:
                handler()
            except Exception as e:
                logger.debug(f"close handler failed: {e}")
                if first_error is None: first_error = e
        if first_error is not None: raise first_error

    def __enter__(self) -> '_BaseSequence[T]':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state.value})"

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _TerminalOperations[T]
):
    """a one-shot sequence over an ordered source, consumed by a single terminal operation."""
    pass

# --- numeric sequences ---

class NumericSequence(
    _BaseSequence[T],
    _NumericOperations[T],
    _TerminalOperations[T]
):
    """base for the int, float and long variants. elements are validated as they are traversed."""

    def _traverse(self) -> Iterator[T]:
        for item in self._data_func():
            yield self._validate(item)

    @abstractmethod
    def _validate(self, item: Any) -> T:
        """check one element and return it in the variant's python type"""
        pass


def _as_integer(item: Any, kind: str) -> int:
    # bool is an int subclass but never a number here
    if isinstance(item, (bool, np.bool_)) or not isinstance(item, numbers.Integral):
        raise TypeError(f"{kind} sequence contains a non-integer element: {item!r}")
    return int(item)


class IntSequence(NumericSequence[int]):
    """sequence of signed 32-bit integers"""
    _dtype = np.int32
    _optional_type = OptionalInt
    _bounds = (-2 ** 31, 2 ** 31 - 1)

    def _validate(self, item: Any) -> int:
        value = _as_integer(item, 'int')
        low, high = self._bounds
        if not low <= value <= high:
            raise ValueError(f"value {value} is outside the int range [{low}, {high}]")
        return value


class LongSequence(NumericSequence[int]):
    """sequence of signed 64-bit integers"""
    _dtype = np.int64
    _optional_type = OptionalLong
    _bounds = (-2 ** 63, 2 ** 63 - 1)

    def _validate(self, item: Any) -> int:
        value = _as_integer(item, 'long')
        low, high = self._bounds
        if not low <= value <= high:
            raise ValueError(f"value {value} is outside the long range [{low}, {high}]")
        return value


class FloatSequence(NumericSequence[float]):
    """sequence of double precision floats. integers are widened."""
    _dtype = np.float64
    _optional_type = OptionalFloat

    def _validate(self, item: Any) -> float:
        if isinstance(item, (bool, np.bool_)) or not isinstance(item, numbers.Real):
            raise TypeError(f"float sequence contains a non-numeric element: {item!r}")
        try:
            return float(item)
        except OverflowError:
            raise ValueError(f"value {item} is outside the float range")

    def _python_extreme(self, data: List[float], python_func: Callable) -> float:
        # a NaN anywhere wins, as with numpy
        if any(math.isnan(x) for x in data): return math.nan
        # -0.0 sorts below 0.0, as with numpy
        return python_func(data, key=lambda x: (x, math.copysign(1.0, x)))
