"""Session defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .models import ConsoleMode


@dataclass(frozen=True)
class SessionConfig:
    """Initial values a practice session starts from and resets to."""

    default_topic: str = "onboard"
    default_address: str = "192.168.1.10"
    default_registration_key: str = "REGKEY123"
    licenses: tuple[str, ...] = ("Threat", "URL")
    echo_enabled: bool = False
    console_mode: ConsoleMode = ConsoleMode.GUI
    relevant_controls_only: bool = True
