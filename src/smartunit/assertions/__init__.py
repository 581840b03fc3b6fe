from smartunit.assertions._base import AssertionFailedError, AssertionResult
from smartunit.assertions.expect import (
    assert_raises,
    assert_raises_async,
    assert_that,
    assert_that_async,
)

__all__ = [
    "AssertionFailedError",
    "AssertionResult",
    "assert_raises",
    "assert_raises_async",
    "assert_that",
    "assert_that_async",
]
