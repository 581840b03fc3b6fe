"""CLI module for the smartunit test runner."""

from __future__ import annotations

import argparse
import asyncio
import signal
import sys
from collections.abc import Callable, Sequence

from rich.console import Console

from smartunit.adapter import TestAdapter
from smartunit.config import SmartUnitConfig, load_config
from smartunit.logging import configure_logging
from smartunit.reports import REPORTERS, ConsoleReporter, Reporter
from smartunit.testing.case import TestCaseDescriptor

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

COMMANDS = ("discover", "run")


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for smartunit CLI."""
    config = load_config()
    parser = _build_parser()
    args_in = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(_with_addopts(args_in, config.addopts))

    if args.command is None:
        parser.print_help()
        raise SystemExit(EXIT_OK)

    verbosity = _resolve_verbosity(args, config)
    configure_logging(verbosity)

    try:
        reporters = _resolve_reporters(args, config, verbosity=verbosity)
    except (ValueError, TypeError, ImportError) as exc:
        Console(stderr=True).print(f"[red]{exc}[/red]")
        raise SystemExit(EXIT_USAGE) from exc

    paths = _resolve_paths(args, config)
    if args.command == "discover":
        exit_code = asyncio.run(_discover(paths, reporters))
    else:
        exit_code = asyncio.run(_run(paths, reporters, args.keyword))
    raise SystemExit(exit_code)


def _with_addopts(args_in: list[str], addopts: list[str]) -> list[str]:
    """Insert configured options right after the subcommand they apply to."""
    if addopts and args_in and args_in[0] in COMMANDS:
        return [args_in[0], *addopts, *args_in[1:]]
    return args_in


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smartunit", description="SmartUnit test runner")
    subparsers = parser.add_subparsers(dest="command")

    discover_parser = subparsers.add_parser("discover", help="List test cases")
    run_parser = subparsers.add_parser("run", help="Run test cases")
    run_parser.add_argument(
        "-k",
        "--keyword",
        help="Only run cases whose id or display name contains this text",
    )

    for p in (discover_parser, run_parser):
        p.add_argument("paths", nargs="*", help="Test files, directories, or module names")
        p.add_argument(
            "--reporter",
            dest="reporters",
            action="append",
            help="Reporter name or import path (repeatable)",
        )
        p.add_argument("-q", "--quiet", action="count", default=0, help="Reduce output")
        p.add_argument("-v", "--verbose", action="count", default=0, help="Increase output")

    return parser


def _resolve_paths(args: argparse.Namespace, config: SmartUnitConfig) -> list[str]:
    return args.paths or config.test_paths


def _resolve_verbosity(args: argparse.Namespace, config: SmartUnitConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_reporters(
    args: argparse.Namespace,
    config: SmartUnitConfig,
    *,
    verbosity: int,
) -> list[Reporter]:
    """CLI reporters replace configured ones; the console reporter is the default."""
    names = args.reporters or config.reporters
    if not names:
        return [ConsoleReporter(verbosity=verbosity)]
    reporters: list[Reporter] = []
    for name in names:
        cls = REPORTERS.get(name)
        options = dict(config.reporter_options.get(name, {}))
        if issubclass(cls, ConsoleReporter):
            options.setdefault("verbosity", verbosity)
        reporters.append(cls(**options))
    return reporters


def keyword_matcher(keyword: str | None) -> Callable[[TestCaseDescriptor], bool] | None:
    if not keyword:
        return None
    return lambda case: keyword in case.id or keyword in case.display_name


async def _discover(paths: list[str], reporters: list[Reporter]) -> int:
    cases = await TestAdapter().discover_tests(paths, reporters)
    return EXIT_OK if cases else EXIT_USAGE


async def _run(paths: list[str], reporters: list[Reporter], keyword: str | None) -> int:
    adapter = TestAdapter()
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, adapter.cancel)
    except (NotImplementedError, RuntimeError):
        pass  # no signal handlers on this platform/loop

    try:
        run_result = await adapter.run_sources(paths, reporters, select=keyword_matcher(keyword))
    finally:
        try:
            loop.remove_signal_handler(signal.SIGINT)
        except (NotImplementedError, RuntimeError):
            pass

    if run_result.total == 0:
        return EXIT_USAGE
    return EXIT_OK if run_result.failed == 0 else EXIT_FAILED


__all__ = ["keyword_matcher", "main"]
