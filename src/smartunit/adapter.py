"""Host platform adapter: discovery and execution requests from a test host."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from smartunit.injection import DependencyResolver, StandInFactory
from smartunit.reports.base import Reporter
from smartunit.testing.case import TestCaseDescriptor
from smartunit.testing.discovery import TestCatalog, expand_sources
from smartunit.testing.invoker import Invoker
from smartunit.testing.runner import Runner, RunResult, RunState
from smartunit.testing.scanner import ModuleLoader

logger = logging.getLogger(__name__)

EXECUTOR_URI = "executor://SmartUnitExecutor"
FILE_EXTENSIONS = (".py",)


class TestAdapter:
    """Entry point a test host drives.

    Each discovery or run request gets its own catalog, so sources are loaded
    once per request and nothing is shared across runs.
    """

    __test__ = False

    def __init__(self, *, root: Path | None = None, stand_ins: StandInFactory | None = None) -> None:
        self.root = root
        self.stand_ins = stand_ins
        self._active: Runner | None = None
        self._cancel_requested = False

    def _catalog(self) -> TestCatalog:
        return TestCatalog(ModuleLoader(self.root))

    async def discover_tests(
        self,
        sources: Iterable[str | Path],
        reporters: Sequence[Reporter] = (),
    ) -> list[TestCaseDescriptor]:
        cases = self._catalog().discover(expand_sources(sources, self.root))
        for case in cases:
            for reporter in reporters:
                await reporter.on_test_discovered(case)
        for reporter in reporters:
            if cases:
                await reporter.on_collection_complete(cases)
            else:
                await reporter.on_no_tests_found()
        return cases

    async def run_tests(
        self,
        cases: Sequence[TestCaseDescriptor],
        reporters: Sequence[Reporter] = (),
    ) -> RunResult:
        return await self._run(self._catalog(), cases, reporters)

    async def run_sources(
        self,
        sources: Iterable[str | Path],
        reporters: Sequence[Reporter] = (),
        *,
        select: Callable[[TestCaseDescriptor], bool] | None = None,
    ) -> RunResult:
        """Discover and run in one request, optionally keeping only ``select``ed cases."""
        catalog = self._catalog()
        cases = catalog.discover(expand_sources(sources, self.root))
        if select is not None:
            cases = [case for case in cases if select(case)]
        if not cases:
            for reporter in reporters:
                await reporter.on_no_tests_found()
            return RunResult(state=RunState.COMPLETED)
        return await self._run(catalog, cases, reporters)

    def cancel(self) -> None:
        """Stop the active run at the next case boundary, and any later run."""
        self._cancel_requested = True
        if self._active is not None:
            self._active.cancel()

    async def _run(
        self,
        catalog: TestCatalog,
        cases: Sequence[TestCaseDescriptor],
        reporters: Sequence[Reporter],
    ) -> RunResult:
        invoker = Invoker(DependencyResolver(self.stand_ins))
        runner = Runner(catalog, invoker=invoker, reporters=reporters)
        if self._cancel_requested:
            runner.cancel()
        self._active = runner
        try:
            logger.info("running %d test case(s)", len(cases))
            return await runner.run(cases)
        finally:
            self._active = None


__all__ = ["EXECUTOR_URI", "FILE_EXTENSIONS", "TestAdapter"]
