"""Rich console reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from smartunit.reports.base import Reporter
from smartunit.testing.runner import RunState, TestStatus

if TYPE_CHECKING:
    from smartunit.testing.case import TestCaseDescriptor
    from smartunit.testing.runner import RunResult, TestResult


_STATUS_STYLE = {
    TestStatus.PASSED: ("green", "PASSED"),
    TestStatus.FAILED: ("red", "FAILED"),
    TestStatus.SKIPPED: ("yellow", "SKIPPED"),
}


class ConsoleReporter(Reporter):
    """Prints discovery listings, per-test lines, failures, and a summary.

    ``verbosity`` below 0 prints only the summary; 0 prints one character per
    test; above 0 prints one line per test with its duration.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity
        self._failures: list[TestResult] = []

    async def on_test_discovered(self, case: TestCaseDescriptor) -> None:
        if self.verbosity >= 0:
            self.console.print(f"{escape(case.id)}  [dim]{escape(case.display_name)}[/dim]")

    async def on_collection_complete(self, cases: list[TestCaseDescriptor]) -> None:
        self.console.print(f"[bold]Discovered {len(cases)} test case(s)[/bold]")

    async def on_no_tests_found(self) -> None:
        self.console.print("[yellow]No tests found.[/yellow]")

    async def on_test_start(self, case: TestCaseDescriptor) -> None:
        return None

    async def on_test_complete(self, result: TestResult) -> None:
        if result.status is TestStatus.FAILED:
            self._failures.append(result)
        style, label = _STATUS_STYLE[result.status]
        if self.verbosity > 0:
            ms = result.duration.total_seconds() * 1000
            line = f"[{style}]{label}[/{style}] {escape(result.display_name)} [dim]({ms:.1f}ms)[/dim]"
            if result.status is TestStatus.SKIPPED and result.skip_reason:
                line += f" [dim]- {escape(result.skip_reason)}[/dim]"
            self.console.print(line)
        elif self.verbosity == 0:
            self.console.print(f"[{style}]{label[0]}[/{style}]", end="")

    async def on_run_cancelled(self, remaining: int) -> None:
        self.console.print(f"\n[yellow]Run cancelled: {remaining} test(s) not started[/yellow]")

    async def on_run_complete(self, run_result: RunResult) -> None:
        if self.verbosity == 0:
            self.console.print()
        for result in self._failures:
            self.console.rule(f"[red]{escape(result.display_name)}[/red]")
            self.console.print(f"[dim]{escape(result.case.id)}[/dim]")
            if result.error_traceback:
                self.console.print(escape(result.error_traceback), highlight=False)

        parts = [f"[green]{run_result.passed} passed[/green]"]
        if run_result.failed:
            parts.append(f"[red]{run_result.failed} failed[/red]")
        if run_result.skipped:
            parts.append(f"[yellow]{run_result.skipped} skipped[/yellow]")
        summary = ", ".join(parts)
        if run_result.state is RunState.CANCELLED:
            summary += ", [yellow]cancelled[/yellow]"
        self.console.print(f"{summary} in {run_result.total_duration_ms / 1000:.2f}s")
