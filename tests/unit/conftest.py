"""Shared fixtures for unit tests."""

from pathlib import Path

import pytest

from smartunit.reports.base import Reporter
from smartunit.testing.discovery import TestCatalog

SAMPLES = Path(__file__).parent / "samples"


class NullReporter(Reporter):
    """Silent reporter for testing."""

    async def on_test_discovered(self, case) -> None:
        pass

    async def on_no_tests_found(self) -> None:
        pass

    async def on_collection_complete(self, cases) -> None:
        pass

    async def on_test_start(self, case) -> None:
        pass

    async def on_test_complete(self, result) -> None:
        pass

    async def on_run_cancelled(self, remaining: int) -> None:
        pass

    async def on_run_complete(self, run_result) -> None:
        pass


class RecordingReporter(Reporter):
    """Records every hook call as ``(hook, payload)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def names(self, hook: str) -> list[object]:
        return [payload for name, payload in self.events if name == hook]

    async def on_test_discovered(self, case) -> None:
        self.events.append(("discovered", case))

    async def on_no_tests_found(self) -> None:
        self.events.append(("no_tests", None))

    async def on_collection_complete(self, cases) -> None:
        self.events.append(("collection_complete", list(cases)))

    async def on_test_start(self, case) -> None:
        self.events.append(("start", case))

    async def on_test_complete(self, result) -> None:
        self.events.append(("complete", result))

    async def on_run_cancelled(self, remaining: int) -> None:
        self.events.append(("cancelled", remaining))

    async def on_run_complete(self, run_result) -> None:
        self.events.append(("run_complete", run_result))


@pytest.fixture
def null_reporter() -> NullReporter:
    """Provide a silent reporter for tests."""
    return NullReporter()


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def samples_dir() -> Path:
    return SAMPLES


@pytest.fixture
def basic_source() -> str:
    return str(SAMPLES / "smartunit_sample_basic.py")


@pytest.fixture
def services_source() -> str:
    return str(SAMPLES / "smartunit_sample_services.py")


@pytest.fixture
def theory_source() -> str:
    return str(SAMPLES / "smartunit_sample_theory.py")


@pytest.fixture
def edge_source() -> str:
    return str(SAMPLES / "smartunit_sample_edge.py")


@pytest.fixture
def broken_source() -> str:
    return str(SAMPLES / "smartunit_sample_broken.py")


@pytest.fixture
def catalog() -> TestCatalog:
    """A fresh catalog, so every test loads its own copy of the samples."""
    return TestCatalog()
