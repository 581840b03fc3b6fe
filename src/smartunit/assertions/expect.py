"""Assertion helpers that return their subject on success.

``assert_raises`` and ``assert_raises_async`` pass only when the declared
exception kind is raised; any other exception propagates unchanged and a
missing exception fails the assertion.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from smartunit.assertions._base import AssertionFailedError, AssertionResult, _truncate

T = TypeVar("T")

ExceptionKinds = type[BaseException] | tuple[type[BaseException], ...]


def _kind_name(expected: ExceptionKinds) -> str:
    if isinstance(expected, tuple):
        return " | ".join(kind.__name__ for kind in expected)
    return expected.__name__


def _fail(name: str, obj: Any, message: str, expected: ExceptionKinds | None = None) -> AssertionFailedError:
    return AssertionFailedError(
        AssertionResult(
            assertion_name=name,
            passed=False,
            subject=_truncate(obj),
            expected_exception=_kind_name(expected) if expected is not None else None,
            message=message,
        )
    )


def assert_that(obj: T, predicate: Callable[[T], bool]) -> T:
    if predicate(obj):
        return obj
    raise _fail("assert_that", obj, f"predicate rejected {_truncate(obj)}")


async def assert_that_async(obj: T, predicate: Callable[[T], Awaitable[bool]]) -> T:
    if await predicate(obj):
        return obj
    raise _fail("assert_that_async", obj, f"predicate rejected {_truncate(obj)}")


def assert_raises(obj: T, expected: ExceptionKinds, action: Callable[[T], Any]) -> T:
    """Return ``obj`` if ``action(obj)`` raises ``expected``."""
    try:
        action(obj)
    except expected:
        return obj
    raise _fail("assert_raises", obj, f"{_kind_name(expected)} was not raised", expected)


async def assert_raises_async(obj: T, expected: ExceptionKinds, action: Callable[[T], Awaitable[Any]]) -> T:
    """Return ``obj`` if awaiting ``action(obj)`` raises ``expected``."""
    try:
        await action(obj)
    except expected:
        return obj
    raise _fail("assert_raises_async", obj, f"{_kind_name(expected)} was not raised", expected)


__all__ = ["assert_raises", "assert_raises_async", "assert_that", "assert_that_async"]
