import json
from pathlib import Path

import pytest

from ftdtrainer.content_loader import ALL_TABS, load_lessons, load_lessons_from_file


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "lessons.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_bundled_catalog_topics_in_order() -> None:
    lessons = load_lessons()
    assert list(lessons) == ["onboard", "acp", "nat", "s2s"]
    for lesson in lessons.values():
        assert len(lesson.steps) == 3
        assert set(lesson.tabs) <= set(ALL_TABS)


def test_onboard_lesson_steps() -> None:
    onboard = load_lessons()["onboard"]
    assert onboard.label == "Practice: Onboard"
    assert onboard.steps[2] == "Add device in FMC and Approve"
    assert onboard.hints


def test_defaults_for_optional_fields(tmp_path: Path) -> None:
    path = _write(tmp_path, {"lessons": [{"id": "x", "title": "X", "steps": ["one"]}]})
    lesson = load_lessons_from_file(path)["x"]
    assert lesson.label == "Practice: X"
    assert lesson.tabs == ALL_TABS
    assert lesson.hints == ()


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"lessons": []}, "empty"),
        ({"lessons": [{"title": "X", "steps": ["a"]}]}, "missing an id"),
        ({"lessons": [{"id": "x", "steps": ["a"]}]}, "no title"),
        ({"lessons": [{"id": "x", "title": "X", "steps": [" "]}]}, "no steps"),
        ({"lessons": [{"id": "x", "title": "X", "steps": ["a"], "tabs": ["Nope"]}]}, "unknown tabs"),
        (
            {"lessons": [{"id": "x", "title": "X", "steps": ["a"]}, {"id": "x", "title": "Y", "steps": ["b"]}]},
            "Duplicate lesson id",
        ),
    ],
)
def test_invalid_catalog_raises(tmp_path: Path, payload: object, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        load_lessons_from_file(_write(tmp_path, payload))
