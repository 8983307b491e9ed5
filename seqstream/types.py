import math
from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Type, MutableSequence
)

from .errors import NoSuchElementError

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Predicate = Callable[[T], bool]
Consumer = Callable[[T], None]
KeySelector = Callable[[T], K]
Comparator = Callable[[T, T], int]
Supplier = Callable[[], T]
ArrayGenerator = Callable[[int], MutableSequence[Any]]
DataFunc = Callable[[], Iterable[T]]


class SequenceState(Enum):
    """lifecycle of a sequence. a sequence only ever moves from open to closed."""
    OPEN = 'open'
    CLOSED = 'closed'


class OptionalValue(Generic[T]):
    """
    a container holding zero or one value, returned by max/min.
    an empty optional and a present one are told apart by is_present(),
    never by comparing the value against None.
    """

    __slots__ = ('_value', '_present')

    def __init__(self, value: Optional[T] = None, present: bool = False):
        self._value = value
        self._present = present

    @classmethod
    def empty(cls) -> 'OptionalValue[T]':
        return cls()

    @classmethod
    def of(cls, value: T) -> 'OptionalValue[T]':
        if value is None: raise ValueError("optional value cannot be None")
        return cls(cls._coerce(value), True)

    @classmethod
    def of_nullable(cls, value: Optional[T]) -> 'OptionalValue[T]':
        return cls.empty() if value is None else cls.of(value)

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return value

    def is_present(self) -> bool: return self._present

    def is_empty(self) -> bool: return not self._present

    def get(self) -> T:
        """get the value, raising NoSuchElementError when empty"""
        if not self._present: raise NoSuchElementError("no value present")
        return self._value

    def or_else(self, other: T) -> T:
        return self._value if self._present else other

    def or_else_get(self, supplier: Supplier[T]) -> T:
        return self._value if self._present else supplier()

    def or_else_raise(self, error_factory: Optional[Callable[[], BaseException]] = None) -> T:
        if self._present: return self._value
        if error_factory is None: raise NoSuchElementError("no value present")
        raise error_factory()

    def if_present(self, action: Consumer[T]) -> None:
        if self._present: action(self._value)

    def __bool__(self) -> bool:
        return self._present

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OptionalValue) or type(self) is not type(other):
            return NotImplemented
        if not self._present or not other._present:
            return self._present == other._present
        return self._values_equal(self._value, other._value)

    def _values_equal(self, a: Any, b: Any) -> bool:
        return a == b

    def __hash__(self) -> int:
        try:
            return hash((type(self).__name__, self._present, self._value))
        except TypeError:
            # unhashable values (lists, dicts) fall back to a hash that ignores the value
            return hash((type(self).__name__, self._present))

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}({self._value!r})" if self._present else f"{name}.empty"


# --- numeric optionals ---

class OptionalInt(OptionalValue[int]):
    """optional result of an int sequence"""
    __slots__ = ()

    @classmethod
    def _coerce(cls, value: Any) -> int:
        return int(value)


class OptionalLong(OptionalValue[int]):
    """optional result of a long sequence"""
    __slots__ = ()

    @classmethod
    def _coerce(cls, value: Any) -> int:
        return int(value)


class OptionalFloat(OptionalValue[float]):
    """optional result of a float sequence. NaN compares equal to NaN here."""
    __slots__ = ()

    @classmethod
    def _coerce(cls, value: Any) -> float:
        return float(value)

    def _values_equal(self, a: float, b: float) -> bool:
        if math.isnan(a) and math.isnan(b): return True
        return a == b

    def __hash__(self) -> int:
        # all NaNs must share a hash since they compare equal above
        if self._present and math.isnan(self._value):
            return hash((type(self).__name__, True, 'nan'))
        return super().__hash__()
