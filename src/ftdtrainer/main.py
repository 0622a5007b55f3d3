"""CLI entrypoint for the appliance onboarding practice simulator."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from .config import SessionConfig
from .content_loader import load_lessons
from .interpreter import QUICK_COMMANDS
from .models import ConsoleMode, DeviceRecord, EchoAction, Lesson, LifecycleState
from .session import PracticeSession

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
MENU_QUIT_COMMANDS = {"q"}
MENU_BACK_COMMANDS = {"b"}
CLI_BACK_COMMANDS = {":gui", ":back", ":b"}
FLOW_EXIT_COMMANDS = {":quit", ":exit", ":q"}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
ACTION_LABELS = {
    EchoAction.ADD_NAT_RULE: "Add NAT rule",
    EchoAction.CREATE_VPN: "Create site-to-site VPN",
    EchoAction.APPLY_POLICY: "Apply access policy",
}


class QuitApp(Exception):
    """Signal immediate app exit from nested menu flows."""


def _session(lessons: dict[str, Lesson] | None, config: SessionConfig) -> PracticeSession:
    """Create an in-memory practice session."""
    return PracticeSession(lessons=lessons, config=config)


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    lessons = load_lessons()
    parser = argparse.ArgumentParser(prog="ftdtrainer", description="Appliance onboarding practice")
    parser.add_argument("command", nargs="?", default="play", choices=["play"])
    parser.add_argument("--topic", default=SessionConfig.default_topic, choices=list(lessons))
    parser.add_argument("--echo", action="store_true", help="mirror GUI actions into the CLI transcript")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS)
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = SessionConfig(default_topic=args.topic, echo_enabled=args.echo)
    return play_shell(config=config, lessons=lessons)


def play_shell(
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    config: SessionConfig | None = None,
    lessons: dict[str, Lesson] | None = None,
) -> int:
    """Run persistent menu-driven shell."""
    session = _session(lessons, config or SessionConfig())
    try:
        while True:
            if session.state.console_mode is ConsoleMode.CLI:
                _cli_flow(session, input_fn, print_fn)
                continue

            state = session.state
            total = len(state.steps)
            print_fn("\n=== FMC GUI ===")
            ready = "  [Ready]" if session.is_ready() else ""
            print_fn(f"{session.lesson.label}  {session.progress()}/{total} done{ready}")
            print_fn(f"Tabs: {' | '.join(session.visible_tabs())}")
            _device_table(state.devices, print_fn)
            print_fn("1) Select practice")
            print_fn("2) Toggle step")
            print_fn("3) Reset steps")
            print_fn("4) Reset state")
            print_fn("5) Add device")
            print_fn("6) Assign licenses")
            print_fn("7) Approve device")
            print_fn("8) Configuration actions")
            print_fn("c) Switch to CLI")
            print_fn(f"e) Echo to CLI: {'on' if state.echo_enabled else 'off'}")
            print_fn(f"t) {'Contextual Tabs Only' if state.relevant_controls_only else 'All Tabs'}")
            print_fn("h) Hints")
            print_fn("q) Quit")
            choice = input_fn("Choose: ").strip().lower()

            if choice == "1":
                _select_topic_flow(session, input_fn, print_fn)
            elif choice == "2":
                _toggle_step_flow(session, input_fn, print_fn)
            elif choice == "3":
                session.reset_steps()
                print_fn("Steps reset.")
            elif choice == "4":
                session.reset_session()
                print_fn("Session reset.")
            elif choice == "5":
                _add_device_flow(session, input_fn, print_fn)
            elif choice == "6":
                session.assign_licenses()
                print_fn(f"Licenses assigned: {', '.join(session.config.licenses)}")
            elif choice == "7":
                _approve_flow(session, input_fn, print_fn)
            elif choice == "8":
                _actions_flow(session, input_fn, print_fn)
            elif choice == "c":
                session.set_console_mode(ConsoleMode.CLI)
            elif choice == "e":
                session.toggle_echo()
            elif choice == "t":
                session.toggle_control_scope()
            elif choice == "h":
                _hints_flow(session, print_fn)
            elif choice in MENU_QUIT_COMMANDS:
                return 0
            else:
                print_fn("Invalid choice.")
    except QuitApp:
        return 0


def _device_table(devices: tuple[DeviceRecord, ...], print_fn: PrintFn) -> None:
    """Print the device registration table."""
    if not devices:
        print_fn("No devices yet.")
        return
    rows = [
        (device.address, device.registration_key, ", ".join(device.licenses) or "-", device.lifecycle_state.value)
        for device in devices
    ]
    ip_width = max(len("IP"), max(len(row[0]) for row in rows))
    key_width = max(len("Reg Key"), max(len(row[1]) for row in rows))
    license_width = max(len("Licenses"), max(len(row[2]) for row in rows))
    header = f"{'IP':<{ip_width}} {'Reg Key':<{key_width}} {'Licenses':<{license_width}} State"
    print_fn(header)
    print_fn("-" * len(header))
    for row in rows:
        print_fn(f"{row[0]:<{ip_width}} {row[1]:<{key_width}} {row[2]:<{license_width}} {row[3]}")


def _choose_index(input_fn: InputFn, print_fn: PrintFn, prompt: str, count: int) -> int | None:
    """Read a 1-based menu choice and return its 0-based index."""
    choice = input_fn(prompt).strip().lower()
    if choice in MENU_BACK_COMMANDS:
        return None
    if choice in MENU_QUIT_COMMANDS:
        raise QuitApp()
    if not choice.isdigit():
        print_fn("Invalid choice.")
        return None
    index = int(choice) - 1
    if not (0 <= index < count):
        print_fn("Invalid choice.")
        return None
    return index


def _select_topic_flow(session: PracticeSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Pick the lesson topic."""
    lessons = list(session.lessons.values())
    print_fn("\n=== Practice Selector ===")
    for idx, lesson in enumerate(lessons, start=1):
        marker = "*" if lesson.id == session.state.topic else " "
        print_fn(f"{idx}){marker}{lesson.title}")
    print_fn("b) Back")
    print_fn("q) Quit")
    index = _choose_index(input_fn, print_fn, "Choose practice: ", len(lessons))
    if index is None:
        return
    session.select_topic(lessons[index].id)


def _toggle_step_flow(session: PracticeSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Mark one step done or undone."""
    print_fn(f"\n=== {session.lesson.title} ===")
    for idx, (title, done) in enumerate(zip(session.lesson.steps, session.state.steps), start=1):
        print_fn(f"{idx}) [{'x' if done else ' '}] Step {idx}: {title}")
    print_fn("b) Back")
    print_fn("q) Quit")
    index = _choose_index(input_fn, print_fn, "Toggle step: ", len(session.state.steps))
    if index is None:
        return
    session.toggle_step(index)


def _add_device_flow(session: PracticeSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Collect form values and add a device."""
    defaults = session.config
    address = input_fn(f"FTD Mgmt IP [{defaults.default_address}]: ").strip() or defaults.default_address
    key = input_fn(f"Registration Key [{defaults.default_registration_key}]: ").strip()
    key = key or defaults.default_registration_key
    before = len(session.state.devices)
    state = session.add_device(address, key)
    if len(state.devices) == before:
        print_fn(f"Device {address} is already registered.")
        return
    print_fn("Awaiting device registration...")


def _approve_flow(session: PracticeSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Approve one device that is not approved yet."""
    waiting = [device for device in session.state.devices if device.lifecycle_state is not LifecycleState.APPROVED]
    if not waiting:
        print_fn("No devices awaiting approval.")
        return
    print_fn("\n=== Approve Device ===")
    for idx, device in enumerate(waiting, start=1):
        print_fn(f"{idx}) {device.address} ({device.lifecycle_state.value})")
    print_fn("b) Back")
    print_fn("q) Quit")
    index = _choose_index(input_fn, print_fn, "Approve: ", len(waiting))
    if index is None:
        return
    session.approve_device(waiting[index].address)
    print_fn(f"Approved {waiting[index].address}.")


def _actions_flow(session: PracticeSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Run a graphical configuration action."""
    actions = list(ACTION_LABELS)
    print_fn("\n=== Configuration Actions ===")
    for idx, action in enumerate(actions, start=1):
        print_fn(f"{idx}) {ACTION_LABELS[action]}")
    print_fn("b) Back")
    print_fn("q) Quit")
    index = _choose_index(input_fn, print_fn, "Choose action: ", len(actions))
    if index is None:
        return
    session.trigger_action(actions[index])
    suffix = " Mirrored to CLI transcript." if session.state.echo_enabled else ""
    print_fn(f"{ACTION_LABELS[actions[index]]}: done.{suffix}")


def _hints_flow(session: PracticeSession, print_fn: PrintFn) -> None:
    """Print hint lines for the selected lesson."""
    print_fn("\nHints:")
    if not session.lesson.hints:
        print_fn("- Guidance for this practice will appear here.")
        return
    for hint in session.lesson.hints:
        print_fn(f"- {hint}")


def _cli_flow(session: PracticeSession, input_fn: InputFn, print_fn: PrintFn) -> None:
    """Run the diagnostic CLI until the user returns to the GUI."""
    print_fn("\n=== FTD Diagnostic CLI ===")
    print_fn("Type :gui to return to the GUI, :q to quit.")
    quick = ", ".join(f":{idx} {command}" for idx, command in enumerate(QUICK_COMMANDS, start=1))
    print_fn(f"Quick commands: {quick}")
    for line in session.state.transcript:
        print_fn(line)

    while True:
        text = input_fn("> ").strip()
        lowered = text.lower()
        if lowered in CLI_BACK_COMMANDS:
            session.set_console_mode(ConsoleMode.GUI)
            return
        if lowered in FLOW_EXIT_COMMANDS:
            raise QuitApp()

        before = len(session.state.transcript)
        if lowered.startswith(":") and lowered[1:].isdigit():
            index = int(lowered[1:]) - 1
            if not (0 <= index < len(QUICK_COMMANDS)):
                print_fn("Invalid choice.")
                continue
            transcript = session.run_quick_command(QUICK_COMMANDS[index]).transcript
            new_lines = transcript[before:]
        else:
            transcript = session.submit_command(text).transcript
            # Typed commands are already on screen; skip the echoed prompt line.
            new_lines = transcript[before + 1 :]

        for line in new_lines:
            print_fn(line)


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
