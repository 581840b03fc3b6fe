"""Reporting: the host-facing channel for discovery and results."""

from smartunit.reports.base import Reporter
from smartunit.reports.console import ConsoleReporter
from smartunit.reports.registry import REPORTERS, ReporterRegistry, reporter

REPORTERS.register(ConsoleReporter)
REPORTERS.register(ConsoleReporter, name="console")

__all__ = [
    "REPORTERS",
    "ConsoleReporter",
    "Reporter",
    "ReporterRegistry",
    "reporter",
]
