"""Test discovery and execution.

Provides marker-driven discovery, dependency resolution through assertion
sets, and sequential execution of sync and async tests.
"""

from .case import TestCaseDescriptor, build_test_case, build_test_cases
from .discovery import TestCatalog, discover, expand_sources
from .identity import NestedTestIdentity
from .invoker import InvocationOutcome, Invoker, invoke
from .markers import Callback, assertion, assertion_set, skip
from .runner import RunResult, RunState, Runner, TestResult, TestStatus
from .scanner import MemberKind, MetadataScanner, ModuleLoader, TestMember
from .theory import TheoryExpander


__all__ = [
    "Callback",
    "InvocationOutcome",
    "Invoker",
    "MemberKind",
    "MetadataScanner",
    "ModuleLoader",
    "NestedTestIdentity",
    "RunResult",
    "RunState",
    "Runner",
    "TestCaseDescriptor",
    "TestCatalog",
    "TestMember",
    "TestResult",
    "TestStatus",
    "TheoryExpander",
    "assertion",
    "assertion_set",
    "build_test_case",
    "build_test_cases",
    "discover",
    "expand_sources",
    "invoke",
    "skip",
]
