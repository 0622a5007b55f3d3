import tomllib
from pathlib import Path

import ftdtrainer


def test_package_version_matches_pyproject() -> None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with pyproject.open("rb") as handle:
        expected = tomllib.load(handle)["project"]["version"]
    assert ftdtrainer.__version__ == expected


def test_package_exports_session() -> None:
    assert "PracticeSession" in ftdtrainer.__all__
