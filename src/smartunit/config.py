"""Project configuration from ``[tool.smartunit]`` in pyproject.toml."""

from __future__ import annotations

import logging
import shlex
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"


@dataclass
class SmartUnitConfig:
    test_paths: list[str] = field(default_factory=lambda: ["."])
    verbosity: int = 0
    reporters: list[str] = field(default_factory=list)
    reporter_options: dict[str, dict[str, Any]] = field(default_factory=dict)
    addopts: list[str] = field(default_factory=list)


DEFAULT_CONFIG = SmartUnitConfig()


def find_project_root(start: Path | None = None) -> Path:
    """Nearest directory at or above ``start`` holding a pyproject.toml, else ``start``."""
    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / PYPROJECT).is_file():
            return directory
    return start


def _string_list(value: Any, key: str) -> list[str]:
    if isinstance(value, str):
        return shlex.split(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    msg = f"[tool.smartunit] {key} must be a string or a list of strings"
    raise ValueError(msg)


def parse_config(data: dict[str, Any]) -> SmartUnitConfig:
    config = SmartUnitConfig()
    if "test_paths" in data:
        config.test_paths = _string_list(data["test_paths"], "test_paths")
    if "verbosity" in data:
        config.verbosity = int(data["verbosity"])
    if "reporters" in data:
        config.reporters = _string_list(data["reporters"], "reporters")
    if "reporter_options" in data:
        config.reporter_options = {str(k): dict(v) for k, v in data["reporter_options"].items()}
    if "addopts" in data:
        config.addopts = _string_list(data["addopts"], "addopts")
    unknown = set(data) - {"test_paths", "verbosity", "reporters", "reporter_options", "addopts"}
    if unknown:
        logger.warning("ignoring unknown [tool.smartunit] keys: %s", ", ".join(sorted(unknown)))
    return config


def load_config(start: Path | None = None) -> SmartUnitConfig:
    pyproject = find_project_root(start) / PYPROJECT
    if not pyproject.is_file():
        return SmartUnitConfig()
    with pyproject.open("rb") as fh:
        data = tomllib.load(fh)
    return parse_config(data.get("tool", {}).get("smartunit", {}))


__all__ = ["DEFAULT_CONFIG", "SmartUnitConfig", "find_project_root", "load_config", "parse_config"]
