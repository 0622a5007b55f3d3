from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ftdtrainer.content_loader import load_lessons  # noqa: E402
from ftdtrainer.models import Lesson  # noqa: E402
from ftdtrainer.session import PracticeSession  # noqa: E402


@pytest.fixture(scope="session")
def lessons() -> dict[str, Lesson]:
    """Bundled lesson catalog, loaded once."""
    return load_lessons()


@pytest.fixture
def session(lessons: dict[str, Lesson]) -> PracticeSession:
    """Fresh practice session at default settings."""
    return PracticeSession(lessons=lessons)
