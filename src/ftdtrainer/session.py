"""Practice session state, intent reducers, and the session controller."""

from __future__ import annotations

import logging
from dataclasses import replace

from . import echo, interpreter, progress, registry
from .config import SessionConfig
from .content_loader import ALL_TABS, load_lessons
from .models import ConsoleMode, EchoAction, Interpretation, Lesson, SessionState

logger = logging.getLogger(__name__)


def initial_state(lessons: dict[str, Lesson], config: SessionConfig) -> SessionState:
    """Return the documented starting snapshot for a session."""
    lesson = lessons.get(config.default_topic)
    if lesson is None:
        raise ValueError(f"Unknown default topic: {config.default_topic}")
    return SessionState(
        topic=lesson.id,
        steps=progress.initial_steps(len(lesson.steps)),
        devices=registry.reset(),
        transcript=(),
        echo_enabled=config.echo_enabled,
        console_mode=config.console_mode,
        relevant_controls_only=config.relevant_controls_only,
    )


def _apply_interpretation(transcript: tuple[str, ...], result: Interpretation) -> tuple[str, ...]:
    """Merge one interpretation into the transcript."""
    if result.clear_transcript:
        return ()
    if result.echo_line is None:
        return transcript
    return transcript + (result.echo_line,) + result.output_lines


def reduce_select_topic(state: SessionState, lessons: dict[str, Lesson], topic: str) -> SessionState:
    """Switch lesson topic; steps restart for the new topic."""
    lesson = lessons.get(topic)
    if lesson is None or lesson.id == state.topic:
        return state
    return replace(state, topic=lesson.id, steps=progress.initial_steps(len(lesson.steps)))


def reduce_toggle_step(state: SessionState, index: int) -> SessionState:
    return replace(state, steps=progress.toggle_step(state.steps, index))


def reduce_reset_steps(state: SessionState) -> SessionState:
    return replace(state, steps=progress.reset(state.steps))


def reduce_add_device(state: SessionState, address: str, registration_key: str) -> SessionState:
    """Add a device; with echo on, the pairing command lands in the transcript."""
    devices = registry.add_device(state.devices, address, registration_key)
    if devices is state.devices:
        return state
    added = devices[-1]
    transcript = state.transcript
    if state.echo_enabled:
        command = interpreter.manager_add_command(added.address, added.registration_key)
        transcript = _apply_interpretation(transcript, interpreter.interpret(command))
    return replace(state, devices=devices, transcript=transcript)


def reduce_assign_licenses(state: SessionState, licenses: tuple[str, ...]) -> SessionState:
    return replace(state, devices=registry.assign_licenses(state.devices, licenses))


def reduce_approve_device(state: SessionState, address: str) -> SessionState:
    devices = registry.approve(state.devices, address)
    if devices is state.devices:
        return state
    return replace(state, devices=devices)


def reduce_set_console_mode(state: SessionState, mode: ConsoleMode) -> SessionState:
    return replace(state, console_mode=mode)


def reduce_toggle_echo(state: SessionState) -> SessionState:
    return replace(state, echo_enabled=not state.echo_enabled)


def reduce_toggle_control_scope(state: SessionState) -> SessionState:
    return replace(state, relevant_controls_only=not state.relevant_controls_only)


def reduce_submit_command(state: SessionState, text: str) -> SessionState:
    """Run one typed command against the transcript."""
    result = interpreter.interpret(text)
    if not result.clear_transcript and result.echo_line is None:
        return state
    return replace(state, transcript=_apply_interpretation(state.transcript, result))


def reduce_trigger_action(state: SessionState, action: EchoAction) -> SessionState:
    lines = echo.emit(action, state.echo_enabled)
    if not lines:
        return state
    return replace(state, transcript=state.transcript + lines)


class PracticeSession:
    """Single-user practice session; every intent returns a fresh snapshot."""

    def __init__(self, lessons: dict[str, Lesson] | None = None, config: SessionConfig | None = None) -> None:
        """Initialize session from a lesson catalog and defaults."""
        self.lessons = lessons if lessons is not None else load_lessons()
        self.config = config if config is not None else SessionConfig()
        self._state = initial_state(self.lessons, self.config)

    @property
    def state(self) -> SessionState:
        """Current snapshot."""
        return self._state

    @property
    def lesson(self) -> Lesson:
        """Lesson for the selected topic."""
        return self.lessons[self._state.topic]

    def progress(self) -> int:
        """Return the number of completed steps."""
        return progress.progress(self._state.steps)

    def is_ready(self) -> bool:
        """Return whether every step of the current lesson is complete."""
        return progress.is_ready(self._state.steps)

    def visible_tabs(self) -> tuple[str, ...]:
        """Return console tabs to show for the current control scope."""
        if self._state.relevant_controls_only:
            return self.lesson.tabs
        return ALL_TABS

    def select_topic(self, topic: str) -> SessionState:
        if topic not in self.lessons:
            logger.debug("select_topic ignored unknown topic %r", topic)
        return self._commit("select_topic", reduce_select_topic(self._state, self.lessons, topic))

    def toggle_step(self, index: int) -> SessionState:
        return self._commit("toggle_step", reduce_toggle_step(self._state, index))

    def reset_steps(self) -> SessionState:
        return self._commit("reset_steps", reduce_reset_steps(self._state))

    def reset_session(self) -> SessionState:
        """Restore every field to the initial snapshot in one step."""
        return self._commit("reset_session", initial_state(self.lessons, self.config))

    def add_device(self, address: str, registration_key: str) -> SessionState:
        new_state = reduce_add_device(self._state, address, registration_key)
        if new_state is self._state:
            logger.debug("add_device ignored address=%r", address)
        return self._commit("add_device", new_state)

    def assign_licenses(self) -> SessionState:
        return self._commit("assign_licenses", reduce_assign_licenses(self._state, self.config.licenses))

    def approve_device(self, address: str) -> SessionState:
        new_state = reduce_approve_device(self._state, address)
        if new_state is self._state:
            logger.debug("approve_device ignored address=%r", address)
        return self._commit("approve_device", new_state)

    def set_console_mode(self, mode: ConsoleMode | str) -> SessionState:
        """Switch between the graphical and command-line console."""
        try:
            target = ConsoleMode(mode.upper() if isinstance(mode, str) else mode)
        except ValueError:
            logger.debug("set_console_mode ignored unknown mode %r", mode)
            return self._state
        return self._commit("set_console_mode", reduce_set_console_mode(self._state, target))

    def toggle_echo(self) -> SessionState:
        return self._commit("toggle_echo", reduce_toggle_echo(self._state))

    def toggle_control_scope(self) -> SessionState:
        return self._commit("toggle_control_scope", reduce_toggle_control_scope(self._state))

    def submit_command(self, text: str) -> SessionState:
        return self._commit("submit_command", reduce_submit_command(self._state, text))

    def run_quick_command(self, text: str) -> SessionState:
        """Same as ``submit_command``; used by canned shortcut buttons."""
        return self.submit_command(text)

    def trigger_action(self, action: EchoAction | str) -> SessionState:
        """Perform a graphical configuration action that may echo to the CLI."""
        try:
            kind = EchoAction(action)
        except ValueError:
            logger.debug("trigger_action ignored unknown action %r", action)
            return self._state
        return self._commit("trigger_action", reduce_trigger_action(self._state, kind))

    def _commit(self, intent: str, new_state: SessionState) -> SessionState:
        """Store and return the snapshot produced by one intent."""
        logger.debug(
            "%s -> topic=%s devices=%d transcript=%d",
            intent,
            new_state.topic,
            len(new_state.devices),
            len(new_state.transcript),
        )
        self._state = new_state
        return new_state
