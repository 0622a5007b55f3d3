"""Deterministic mock responses for the appliance diagnostic CLI."""

from __future__ import annotations

from enum import Enum

from .models import Interpretation

PROMPT = "# "

VERSION_BANNER = "\n".join(
    [
        "FTD 7.3.0 (mock build)  Model: FTDv",
        "Manager: FMC (mock)",
        "Licenses: Threat, URL",
    ]
)

INTERFACE_TABLE = "\n".join(
    [
        "Interface    IP-Address      Status",
        "inside       192.168.1.1     up",
        "outside      203.0.113.10    up",
        "management   192.168.1.10    up",
    ]
)

PING_TEMPLATE = "\n".join(
    [
        "Type escape sequence to abort.",
        "Sending 5, 100-byte ICMP Echos to {destination}, timeout is 2 seconds:",
        "!!!!!",
        "Success rate is 100 percent (5/5), round-trip min/avg/max = 1/2/4 ms",
    ]
)

MANAGER_ADDED = "Manager added. Awaiting approval in FMC..."

UNRECOGNIZED = "% Invalid input detected at '^' marker."

QUICK_COMMANDS = ("show version", "show interfaces", "ping 8.8.8.8", "clear")


class CommandKind(Enum):
    """Closed set of recognized command shapes."""

    SHOW_VERSION = "show version"
    SHOW_INTERFACES = "show interfaces"
    PING = "ping"
    CLEAR = "clear"
    MANAGER_ADD = "configure manager add"
    UNRECOGNIZED = "unrecognized"


def classify(text: str) -> CommandKind:
    """Map trimmed command text to its command kind."""
    lowered = text.lower()
    if lowered == "show version":
        return CommandKind.SHOW_VERSION
    if lowered in {"show interface", "show interfaces"}:
        return CommandKind.SHOW_INTERFACES
    if lowered == "clear":
        return CommandKind.CLEAR
    if lowered.startswith("ping ") and text[5:].strip():
        return CommandKind.PING
    tokens = lowered.split()
    if len(tokens) >= 5 and tokens[:3] == ["configure", "manager", "add"]:
        return CommandKind.MANAGER_ADD
    return CommandKind.UNRECOGNIZED


def manager_add_command(address: str, registration_key: str) -> str:
    """Build the pairing command issued by the graphical add-device action."""
    return f"configure manager add {address} {registration_key}"


def interpret(raw_input: str) -> Interpretation:
    """Interpret one command line into echo and output lines.

    Whitespace-only input yields an empty interpretation. ``clear`` only
    requests a transcript truncation. Everything else echoes the trimmed
    command behind the prompt, followed by its response.
    """
    text = raw_input.strip()
    if not text:
        return Interpretation()

    kind = classify(text)
    if kind is CommandKind.CLEAR:
        return Interpretation(clear_transcript=True)

    return Interpretation(echo_line=PROMPT + text, output_lines=(_response(kind, text),))


def _response(kind: CommandKind, text: str) -> str:
    """Return the canned response for a non-clear command."""
    if kind is CommandKind.SHOW_VERSION:
        return VERSION_BANNER
    if kind is CommandKind.SHOW_INTERFACES:
        return INTERFACE_TABLE
    if kind is CommandKind.PING:
        return PING_TEMPLATE.format(destination=text[5:].strip())
    if kind is CommandKind.MANAGER_ADD:
        return MANAGER_ADDED
    return UNRECOGNIZED
