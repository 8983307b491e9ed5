import typing
from collections.abc import Mapping, Set as AbstractSet
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence, IntSequence, FloatSequence, LongSequence


def _check_ordered(source: Any) -> None:
    """only ordered sources are accepted; sets and mappings have no traversal order to keep"""
    if isinstance(source, (AbstractSet, Mapping)):
        raise TypeError(f"source must be ordered, got {type(source).__name__}")
    if not isinstance(source, Iterable):
        raise TypeError(f"source must be iterable, got {type(source).__name__}")


def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create a sequence over an ordered iterable. the source is read when a terminal operation runs."""
    from .sequence import Sequence
    _check_ordered(data)
    return Sequence(lambda: data)


def of(*items: T) -> 'Sequence[T]':
    """create a sequence of the given items"""
    return from_iterable(items)


def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence(lambda: [])


def of_ints(data: Iterable[int]) -> 'IntSequence':
    """create an int sequence over an ordered source"""
    from .sequence import IntSequence
    _check_ordered(data)
    return IntSequence(lambda: data)


def of_longs(data: Iterable[int]) -> 'LongSequence':
    """create a long sequence over an ordered source"""
    from .sequence import LongSequence
    _check_ordered(data)
    return LongSequence(lambda: data)


def of_floats(data: Iterable[float]) -> 'FloatSequence':
    """create a float sequence over an ordered source"""
    from .sequence import FloatSequence
    _check_ordered(data)
    return FloatSequence(lambda: data)


def int_range(start: int, stop: int) -> 'IntSequence':
    """ints from start (inclusive) to stop (exclusive)"""
    return of_ints(range(start, stop))


def long_range(start: int, stop: int) -> 'LongSequence':
    """longs from start (inclusive) to stop (exclusive)"""
    return of_longs(range(start, stop))

# --- aliases ---
seq = from_iterable
S = from_iterable
