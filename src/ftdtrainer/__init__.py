"""ftdtrainer: appliance onboarding practice session engine."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .session import PracticeSession

__all__ = ["PracticeSession", "__version__"]


def _source_version() -> str | None:
    """Read [project].version from a source checkout's pyproject.toml."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if not pyproject.exists():
        return None
    with pyproject.open("rb") as handle:
        data = tomllib.load(handle)
    project = data.get("project", {})
    if project.get("name") != "ftdtrainer":
        return None
    return project.get("version")


_checkout_version = _source_version()
if _checkout_version is not None:
    __version__ = _checkout_version
else:
    try:
        __version__ = version("ftdtrainer")
    except PackageNotFoundError:
        __version__ = "0+unknown"
