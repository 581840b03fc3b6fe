"""Named reporters that ``--reporter`` and ``[tool.smartunit] reporters`` refer to."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from smartunit.reports.base import Reporter


R = TypeVar("R", bound="type[Reporter]")


class ReporterRegistry:
    """Maps short names to reporter classes.

    A name that is not registered is treated as an import path,
    ``package.module:Class`` or ``package.module.Class``.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[Reporter]] = {}

    def register(self, cls: R | None = None, *, name: str | None = None) -> Any:
        """Register under ``name`` (default: the class name); usable as a decorator."""

        def decorator(cls: R) -> R:
            self._classes[name or cls.__name__] = cls
            return cls

        return decorator(cls) if cls is not None else decorator

    def names(self) -> list[str]:
        return sorted(self._classes)

    def get(self, name: str) -> type[Reporter]:
        if name in self._classes:
            return self._classes[name]
        if ":" in name or "." in name:
            return _import_reporter(name)
        msg = f"Unknown reporter: {name}. Available: {', '.join(self.names())}"
        raise ValueError(msg)


def _import_reporter(path: str) -> type[Reporter]:
    from smartunit.reports.base import Reporter

    separator = ":" if ":" in path else "."
    module_name, _, class_name = path.rpartition(separator)
    if not module_name or not class_name:
        msg = f"Invalid reporter import path: {path}"
        raise ValueError(msg)

    cls = getattr(importlib.import_module(module_name), class_name, None)
    if cls is None:
        msg = f"{module_name} has no attribute {class_name}"
        raise ValueError(msg)
    if not isinstance(cls, type) or not issubclass(cls, Reporter):
        msg = f"{path} is not a Reporter subclass"
        raise TypeError(msg)
    return cls


REPORTERS = ReporterRegistry()
reporter = REPORTERS.register


__all__ = ["REPORTERS", "ReporterRegistry", "reporter"]
