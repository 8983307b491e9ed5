"""
walkthrough of the terminal operations.

  python -m seqstream.demo
  python -m seqstream.demo --verbose --no-numpy
"""
import argparse
import logging
from typing import List, Optional

from . import of, of_ints, of_floats, from_iterable, StateError
from .comparators import natural_order
from .config import configure_logging, override

logger = logging.getLogger(__name__)


def _section(title: str) -> None:
    print(f"\n=== {title} ===")


def run_walkthrough() -> None:
    _section("count")
    numbers = [-50, 20, 12, 4, -9]
    print(f"{numbers} -> count() = {of_ints(numbers).count()}")

    _section("max / min")
    numbers = [12, 55, 37, 9]
    print(f"{numbers} -> max() = {of_ints(numbers).max()}")
    print(f"{numbers} -> min() = {of_ints(numbers).min()}")
    words = ['pear', 'fig', 'banana']
    print(f"{words} -> max(natural_order()) = {of(*words).max(natural_order())}")
    print(f"[] (float) -> max() = {of_floats([]).max()}")

    _section("for_each")
    of('a', 'b', 'c').for_each(lambda item: print(f"  visited {item}"))

    _section("all_match / any_match / none_match")
    numbers = [22, 55, 37, 19]
    print(f"{numbers} all odd?  {of_ints(numbers).all_match(lambda n: n % 2 == 1)}")
    print(f"{numbers} any odd?  {of_ints(numbers).any_match(lambda n: n % 2 == 1)}")
    print(f"{numbers} none > 60? {of_ints(numbers).none_match(lambda n: n > 60)}")

    _section("to_array")
    source = ['x', 'y', 'z']
    array = from_iterable(source).to_array()
    array[0] = 'changed'
    print(f"source after mutating the array: {source}")
    sized = from_iterable(source).to_array(lambda size: [None] * size)
    print(f"with a generator: {sized}")
    print(f"int array: {of_ints([3, 1, 2]).to_array()!r}")

    _section("reuse")
    sequence = of(1, 2, 3)
    sequence.count()
    try:
        sequence.count()
    except StateError as e:
        print(f"second terminal operation failed: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='seqstream terminal operation walkthrough')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    parser.add_argument('--no-numpy', action='store_true', help='Use pure python numeric max/min')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging(logging.DEBUG)
    with override(use_numpy=not args.no_numpy):
        logger.info(f"numpy acceleration: {not args.no_numpy}")
        run_walkthrough()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
