"""Exception types raised by the smartunit engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SmartUnitError(Exception):
    """Base class for engine errors."""


class ModuleLoadError(SmartUnitError):
    """Raised when a test source cannot be imported."""

    def __init__(self, source: str | Path, cause: BaseException | None = None) -> None:
        self.source = str(source)
        self.cause = cause
        message = f"Could not load test source: {self.source}"
        if cause is not None:
            message += f" ({type(cause).__name__}: {cause})"
        super().__init__(message)


class TestNotFoundError(SmartUnitError, LookupError):
    """Raised when a test case no longer maps to a member of its source."""

    __test__ = False

    def __init__(self, test_id: str, source: str) -> None:
        self.test_id = test_id
        self.source = source
        super().__init__(f"{test_id} was not found in {source}")


class MissingRegistrationError(SmartUnitError, LookupError):
    """Raised by ``resolve_required`` for a service that was never registered."""

    def __init__(self, service: Any) -> None:
        self.service = service
        name = getattr(service, "__qualname__", repr(service))
        super().__init__(f"No registration for {name}")


class CallbackSignatureError(SmartUnitError, TypeError):
    """Raised when a nested test cannot be bound to the parent's callback parameter."""


class NestedTestUnavailableError(SmartUnitError):
    """Raised when a callback is called but its nested test cannot be materialized."""


__all__ = [
    "CallbackSignatureError",
    "MissingRegistrationError",
    "ModuleLoadError",
    "NestedTestUnavailableError",
    "SmartUnitError",
    "TestNotFoundError",
]
