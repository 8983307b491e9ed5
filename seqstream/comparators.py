from .types import *


def natural_order() -> Comparator[Any]:
    """comparator using the elements' own < and > operators"""
    def compare(a, b) -> int:
        if a < b: return -1
        if a > b: return 1
        return 0
    return compare


def reverse_order(comparator: Optional[Comparator[T]] = None) -> Comparator[T]:
    """invert a comparator (natural order when none is given)"""
    base = comparator if comparator is not None else natural_order()
    return lambda a, b: base(b, a)


def comparing(key_selector: KeySelector[T, K], key_comparator: Optional[Comparator[K]] = None) -> Comparator[T]:
    """compare elements by an extracted key"""
    key_cmp = key_comparator if key_comparator is not None else natural_order()
    return lambda a, b: key_cmp(key_selector(a), key_selector(b))
