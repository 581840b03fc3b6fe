"""Inert stand-ins for interface-typed parameters nothing was registered for."""

from __future__ import annotations

import inspect
from typing import Any, Protocol
from unittest.mock import create_autospec

from typing_extensions import is_protocol


def is_interface(annotation: Any) -> bool:
    """True for protocol classes and abstract classes."""
    if not inspect.isclass(annotation):
        return False
    return is_protocol(annotation) or inspect.isabstract(annotation)


class StandInFactory(Protocol):
    """Produces a behaviorally inert implementation of an interface."""

    def create(self, interface: type) -> Any: ...


class AutospecStandInFactory:
    """Stand-ins built with :func:`unittest.mock.create_autospec`.

    Every method of the interface exists on the stand-in and returns a mock;
    coroutine methods return awaitables.
    """

    def create(self, interface: type) -> Any:
        return create_autospec(interface, instance=True)


__all__ = ["AutospecStandInFactory", "StandInFactory", "is_interface"]
