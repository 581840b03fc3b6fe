"""Test case descriptors exchanged with the host platform.

This module provides:

- :class:`TestCaseDescriptor`, the immutable, addressable unit produced by
  discovery and handed back for execution.
- :func:`build_test_case`, which maps a scanned member to a descriptor
  without instantiating anything.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, computed_field

from smartunit.testing.scanner import TestMember


class TestCaseDescriptor(BaseModel):
    """A single discovered test case.

    Parameters
    ----------
    source:
        The test source the case was discovered in.
    type_name:
        Qualified name of the declaring type, or the module name for
        module-level functions.
    member_name:
        Raw member name; ``parent.<locals>.local`` for nested tests.
    display_name:
        Human-readable name. Not unique, never used for lookup.
    skipped / skip_reason:
        Whether the member carries a skip marker, and its reason.
    file_path / line_number:
        Source location, when known.
    """

    __test__ = False

    model_config = ConfigDict(frozen=True)

    source: str
    type_name: str
    member_name: str
    display_name: str
    skipped: bool = False
    skip_reason: str | None = None
    file_path: str | None = None
    line_number: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return f"{self.type_name}.{self.member_name}"


def _display_name(member: TestMember) -> str:
    if member.assertion is not None and member.assertion.name:
        return member.assertion.name
    nested = member.nested
    if nested is not None:
        return nested.display_name
    return member.raw_name


def build_test_case(member: TestMember) -> TestCaseDescriptor:
    return TestCaseDescriptor(
        source=member.source,
        type_name=member.owner_name,
        member_name=member.raw_name,
        display_name=_display_name(member),
        skipped=member.skip is not None,
        skip_reason=member.skip.reason if member.skip else None,
        file_path=member.file_path,
        line_number=member.line_number,
    )


def build_test_cases(members: Iterable[TestMember]) -> list[TestCaseDescriptor]:
    return [build_test_case(member) for member in members]


__all__ = ["TestCaseDescriptor", "build_test_case", "build_test_cases"]
