import argparse
import time
import traceback
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple, Type, Union

Raisable = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


class _Case(NamedTuple):
    description: str
    func: Callable[[], Any]


class _Outcome(NamedTuple):
    description: str
    error: Optional[str]

    @property
    def passed(self) -> bool:
        return self.error is None


# cases registered by @test since the last run()
_pending: List[_Case] = []

_GREEN, _RED, _GREY, _BLUE, _RESET = '\033[92m', '\033[91m', '\033[90m', '\033[94m', '\033[0m'


class SuiteAssertionError(AssertionError):
    """an assertion failure, as opposed to an unexpected error inside a test."""
    pass


def test(description: str) -> Callable:
    """register the decorated function as a test case. the function itself is returned untouched."""
    def register(func: Callable) -> Callable:
        _pending.append(_Case(description, func))
        return func
    return register


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(expected: Raisable, func: Callable[[], Any], message: Optional[str] = None) -> BaseException:
    """call func and require it to raise expected. returns the raised error for further checks."""
    wanted = ' or '.join(e.__name__ for e in expected) if isinstance(expected, tuple) else expected.__name__
    try:
        func()
    except expected as e:
        return e
    except Exception as e:
        raise SuiteAssertionError(message or f"expected {wanted}, got {type(e).__name__}: {e}")
    raise SuiteAssertionError(message or f"expected {wanted}, nothing was raised")


def _execute(case: _Case, verbose_errors: bool) -> _Outcome:
    try:
        case.func()
    except SuiteAssertionError as e:
        return _Outcome(case.description, f"assertion failed: {e}")
    except Exception as e:
        if verbose_errors:
            traceback.print_exc()
        return _Outcome(case.description, f"{type(e).__name__}: {e}")
    return _Outcome(case.description, None)


def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """run every pending case, print a report and return True when all of them passed."""
    cases = list(_pending)
    # a run consumes its cases so separate suites in one process stay separate
    _pending.clear()

    print(f"\n{_BLUE}{title}{_RESET}")
    started = time.perf_counter()
    outcomes = []
    for case in cases:
        outcome = _execute(case, verbose_errors)
        outcomes.append(outcome)
        if outcome.passed:
            print(f"  {_GREEN}ok{_RESET}    {outcome.description}")
        else:
            print(f"  {_RED}FAIL{_RESET}  {outcome.description}\n        {_GREY}{outcome.error}{_RESET}")

    elapsed_ms = (time.perf_counter() - started) * 1000
    failures = sum(1 for o in outcomes if not o.passed)
    color = _GREEN if failures == 0 else _RED
    print(f"\n{color}{len(outcomes) - failures}/{len(outcomes)} passed in {elapsed_ms:.2f}ms{_RESET}\n")
    return failures == 0


def main(title: str, argv: Optional[Sequence[str]] = None) -> None:
    """command line entry for a test module: run its cases and exit non-zero on failure."""
    parser = argparse.ArgumentParser(description=title)
    parser.add_argument('--verbose', action='store_true', help='print tracebacks of unexpected errors')
    args = parser.parse_args(argv)
    raise SystemExit(0 if run(title=title, verbose_errors=args.verbose) else 1)
