"""Base reporter protocol: the host side of discovery and execution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from smartunit.testing.case import TestCaseDescriptor
    from smartunit.testing.runner import RunResult, TestResult


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    All methods are async to support I/O-bound reporters (sockets, file output, etc.).
    Sync reporters can implement these as regular methods that don't await anything.
    """

    async def on_test_discovered(self, case: TestCaseDescriptor) -> None:
        """Called once per discovered test case, in discovery order."""
        ...

    async def on_collection_complete(self, cases: list[TestCaseDescriptor]) -> None:
        """Called after discovery of all sources completes."""
        ...

    async def on_no_tests_found(self) -> None:
        """Called when discovery finds no tests."""
        ...

    async def on_test_start(self, case: TestCaseDescriptor) -> None:
        """Called before a case is invoked. Not called for skipped cases."""
        ...

    async def on_test_complete(self, result: TestResult) -> None:
        """Called after each case completes or is skipped."""
        ...

    async def on_run_cancelled(self, remaining: int) -> None:
        """Called when cancellation stops a run with ``remaining`` cases not started."""
        ...

    async def on_run_complete(self, run_result: RunResult) -> None:
        """Called after the run finishes or is cancelled."""
        ...
