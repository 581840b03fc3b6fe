"""SmartUnit - marker-driven test discovery and execution with dependency injection."""

from .adapter import EXECUTOR_URI, TestAdapter
from .assertions import (
    AssertionFailedError,
    assert_raises,
    assert_raises_async,
    assert_that,
    assert_that_async,
)
from .injection import AssertionSet
from .testing import (
    Callback,
    RunResult,
    Runner,
    TestCaseDescriptor,
    TestResult,
    TestStatus,
    assertion,
    assertion_set,
    discover,
    skip,
)
from .version import __version__


__all__ = [
    # Markers
    "assertion",
    "assertion_set",
    "skip",
    "Callback",
    "AssertionSet",
    # Assertions
    "AssertionFailedError",
    "assert_that",
    "assert_that_async",
    "assert_raises",
    "assert_raises_async",
    # Engine
    "EXECUTOR_URI",
    "TestAdapter",
    "TestCaseDescriptor",
    "Runner",
    "RunResult",
    "TestResult",
    "TestStatus",
    "discover",
    "__version__",
]
