import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type, Tuple, Union

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by assert_that so failures read differently from crashes."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """registers a function as a test case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        _suite_state['tests'].append({'func': wrapper, 'description': description})
        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(expected: Union[Type[BaseException], Tuple[Type[BaseException], ...]],
                  func: Callable, *args, **kwargs) -> BaseException:
    """calls func and returns the raised error; fails unless it is an instance of expected."""
    try:
        func(*args, **kwargs)
    except expected as e:
        return e
    raise TestAssertionError(f"expected {_names(expected)} to be raised")


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report and returns true if everything passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None

        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': error is None, 'description': description, 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {description}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    passed = _print_summary(start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return passed


def main(title: str) -> None:
    """entry point for `python -m seqy_tests.<module>`; exit status reflects the run."""
    sys.exit(0 if run(title) else 1)


def _names(expected) -> str:
    if isinstance(expected, tuple):
        return " or ".join(e.__name__ for e in expected)
    return expected.__name__


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
