"""Core domain models for the appliance onboarding practice session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LifecycleState(str, Enum):
    """Onboarding lifecycle of one appliance record."""

    PENDING = "Pending"
    REGISTERED = "Registered"
    APPROVED = "Approved"


class ConsoleMode(str, Enum):
    """Which console the practice surface is showing."""

    GUI = "GUI"
    CLI = "CLI"


class EchoAction(str, Enum):
    """Graphical actions that may be mirrored into the CLI transcript."""

    ADD_NAT_RULE = "add-nat-rule"
    CREATE_VPN = "create-vpn"
    APPLY_POLICY = "apply-policy"


@dataclass(frozen=True)
class DeviceRecord:
    """One appliance undergoing onboarding."""

    address: str
    registration_key: str
    licenses: tuple[str, ...] = ()
    lifecycle_state: LifecycleState = LifecycleState.PENDING


@dataclass(frozen=True)
class Interpretation:
    """Result of interpreting one console command."""

    echo_line: str | None = None
    output_lines: tuple[str, ...] = ()
    clear_transcript: bool = False


@dataclass(frozen=True)
class Lesson:
    """One lesson topic with its ordered steps."""

    id: str
    title: str
    label: str
    steps: tuple[str, ...]
    hints: tuple[str, ...]
    tabs: tuple[str, ...]


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of everything a view renders."""

    topic: str
    steps: tuple[bool, ...]
    devices: tuple[DeviceRecord, ...] = ()
    transcript: tuple[str, ...] = ()
    echo_enabled: bool = False
    console_mode: ConsoleMode = ConsoleMode.GUI
    relevant_controls_only: bool = True
