"""Load the declarative lesson catalog from bundled JSON resources."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from .models import Lesson

logger = logging.getLogger(__name__)

CONTENT_PACKAGE = "ftdtrainer.content"
CATALOG_FILE = "lessons.json"
ALL_TABS = ("Overview", "Analysis", "Policies", "Devices", "Objects", "Integration", "System")


def _lesson_from_dict(raw: dict[str, Any]) -> Lesson:
    """Build a lesson from raw JSON content."""
    lesson_id = str(raw.get("id", "")).strip()
    if not lesson_id:
        raise ValueError("Lesson is missing an id.")

    title = str(raw.get("title", "")).strip()
    if not title:
        raise ValueError(f"Lesson '{lesson_id}' has no title.")

    steps = tuple(str(item).strip() for item in raw.get("steps", []) if str(item).strip())
    if not steps:
        raise ValueError(f"Lesson '{lesson_id}' has no steps.")

    tabs = tuple(str(item).strip() for item in raw.get("tabs", []))
    unknown = [tab for tab in tabs if tab not in ALL_TABS]
    if unknown:
        raise ValueError(f"Lesson '{lesson_id}' lists unknown tabs: {', '.join(unknown)}")

    return Lesson(
        id=lesson_id,
        title=title,
        label=str(raw.get("label", "")).strip() or f"Practice: {title}",
        steps=steps,
        hints=tuple(str(item) for item in raw.get("hints", [])),
        tabs=tabs or ALL_TABS,
    )


def _catalog_from_dict(raw: dict[str, Any]) -> dict[str, Lesson]:
    """Build an ordered id -> lesson mapping, rejecting duplicate ids."""
    lessons: dict[str, Lesson] = {}
    for item in raw.get("lessons", []):
        lesson = _lesson_from_dict(item)
        if lesson.id in lessons:
            raise ValueError(f"Duplicate lesson id: {lesson.id}")
        lessons[lesson.id] = lesson
    if not lessons:
        raise ValueError("Lesson catalog is empty.")
    return lessons


def load_lessons() -> dict[str, Lesson]:
    """Load the bundled lesson catalog."""
    entry = resources.files(CONTENT_PACKAGE).joinpath(CATALOG_FILE)
    lessons = _catalog_from_dict(json.loads(entry.read_text(encoding="utf-8-sig")))
    logger.info("Loaded %d lesson(s) from bundled catalog", len(lessons))
    return lessons


def load_lessons_from_file(path: Path) -> dict[str, Lesson]:
    """Load a lesson catalog from a file for tests/tools."""
    lessons = _catalog_from_dict(json.loads(path.read_text(encoding="utf-8-sig")))
    logger.info("Loaded %d lesson(s) from %s", len(lessons), path)
    return lessons
