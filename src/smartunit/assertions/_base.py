"""Assertion result type and the error raised when an assertion fails."""

from typing import Any

from pydantic import BaseModel


def _truncate(value: Any, max_len: int = 30) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


class AssertionResult(BaseModel):
    """Result of evaluating an assertion helper.

    Attributes:
    ----------
    assertion_name : str
        Name of the helper that was evaluated
    passed : bool
        Whether the assertion passed
    subject : str | None
        Truncated repr of the value under test
    expected_exception : str | None
        Name of the exception kind the helper expected, if any
    message : str | None
        Optional message explaining the result
    """

    assertion_name: str
    passed: bool
    subject: str | None = None
    expected_exception: str | None = None
    message: str | None = None


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult."""

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        message = f"{result.assertion_name} failed"
        if result.message:
            message += f": {result.message}"
        super().__init__(message)
