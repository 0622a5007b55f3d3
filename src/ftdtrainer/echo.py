"""Mirror graphical console actions into the CLI transcript."""

from __future__ import annotations

from .interpreter import PROMPT
from .models import EchoAction

ACTION_SEQUENCES: dict[EchoAction, tuple[str, ...]] = {
    EchoAction.ADD_NAT_RULE: (
        PROMPT + "object network INSIDE-NET",
        PROMPT + " subnet 192.168.1.0 255.255.255.0",
        PROMPT + " nat (inside,outside) dynamic interface",
    ),
    EchoAction.CREATE_VPN: (
        PROMPT + "crypto ikev2 policy 10",
        PROMPT + " encryption aes-256",
        PROMPT + " integrity sha256",
        PROMPT + "tunnel-group 203.0.113.2 type ipsec-l2l",
    ),
    EchoAction.APPLY_POLICY: (
        PROMPT + "access-list ACP-INSIDE extended permit tcp any any eq 443",
        PROMPT + "access-group ACP-INSIDE in interface inside",
    ),
}


def emit(action: EchoAction, echo_enabled: bool) -> tuple[str, ...]:
    """Return the transcript lines for ``action``, or nothing when echo is off."""
    if not echo_enabled:
        return ()
    return ACTION_SEQUENCES[action]
