"""Lesson step completion tracking."""

from __future__ import annotations


def initial_steps(count: int) -> tuple[bool, ...]:
    """Return ``count`` incomplete steps."""
    return (False,) * count


def toggle_step(steps: tuple[bool, ...], index: int) -> tuple[bool, ...]:
    """Flip exactly one step.

    Raises:
        IndexError: if ``index`` is outside the step sequence. Negative
            indices are rejected rather than counted from the end.
    """
    if not 0 <= index < len(steps):
        raise IndexError(f"Step index {index} out of range for {len(steps)} steps.")
    return steps[:index] + (not steps[index],) + steps[index + 1 :]


def progress(steps: tuple[bool, ...]) -> int:
    """Return how many steps are complete."""
    return sum(1 for done in steps if done)


def is_ready(steps: tuple[bool, ...]) -> bool:
    """Return whether every step is complete."""
    return bool(steps) and all(steps)


def reset(steps: tuple[bool, ...]) -> tuple[bool, ...]:
    """Mark every step incomplete, keeping the sequence length."""
    return initial_steps(len(steps))
