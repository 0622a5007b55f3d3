from ftdtrainer import echo
from ftdtrainer.interpreter import PROMPT
from ftdtrainer.models import EchoAction


def test_emit_silent_when_echo_disabled() -> None:
    for action in EchoAction:
        assert echo.emit(action, echo_enabled=False) == ()


def test_emit_returns_sequence_for_every_action() -> None:
    for action in EchoAction:
        lines = echo.emit(action, echo_enabled=True)
        assert lines
        assert all(line.startswith(PROMPT) for line in lines)


def test_nat_sequence_mentions_nat() -> None:
    lines = echo.emit(EchoAction.ADD_NAT_RULE, echo_enabled=True)
    assert any("nat (inside,outside)" in line for line in lines)
