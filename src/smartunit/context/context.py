from __future__ import annotations

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from smartunit.testing.case import TestCaseDescriptor


TEST_CONTEXT: ContextVar[TestContext | None] = ContextVar("test_context", default=None)
THEORY_CONTEXT: ContextVar[TheoryScope | None] = ContextVar("theory_context", default=None)


@dataclass(frozen=True, slots=True)
class TestContext:
    """Execution context for the test case currently being run.

    Attributes
    ----------
    case
        Descriptor of the running test case.
    nested
        True when the case is a nested test routed through its parent.
    """

    __test__ = False

    case: TestCaseDescriptor
    nested: bool = False


@dataclass(slots=True)
class TheoryScope:
    """Nested test functions created while a parent member runs.

    Attributes
    ----------
    target
        ``__qualname__`` of the nested test the scope was opened for.
    captured
        Nested functions decorated inside the parent, keyed by ``__qualname__``.
    """

    target: str
    captured: dict[str, Callable[..., Any]] = field(default_factory=dict)

    def capture(self, fn: Callable[..., Any]) -> None:
        self.captured[fn.__qualname__] = fn

    def lookup(self) -> Callable[..., Any] | None:
        return self.captured.get(self.target)


def current_test() -> TestContext | None:
    """Return the context of the running test, if any."""
    return TEST_CONTEXT.get()


@contextmanager
def test_context_scope(ctx: TestContext) -> Iterator[None]:
    token = TEST_CONTEXT.set(ctx)
    try:
        yield
    finally:
        TEST_CONTEXT.reset(token)


@contextmanager
def theory_context_scope(scope: TheoryScope) -> Iterator[TheoryScope]:
    token = THEORY_CONTEXT.set(scope)
    try:
        yield scope
    finally:
        THEORY_CONTEXT.reset(token)
