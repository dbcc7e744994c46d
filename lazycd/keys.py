"""Keyboard command surface: key tokens bound to session events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .session import BrowserSession, SessionEvent


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single session event."""

    combos: tuple[str, ...]
    event: SessionEvent


KEY_BINDINGS: tuple[KeyComboBinding, ...] = (
    KeyComboBinding(("j", "DOWN"), SessionEvent.MOVE_DOWN),
    KeyComboBinding(("k", "UP"), SessionEvent.MOVE_UP),
    KeyComboBinding((" ",), SessionEvent.TOGGLE_EXPAND),
    KeyComboBinding(("ENTER_CR", "ENTER_LF"), SessionEvent.COMMIT),
    KeyComboBinding(("q",), SessionEvent.QUIT),
)

KEY_HINT = "j/k move  space expand  enter cd  q quit"


def event_for_key(key: str, bindings: tuple[KeyComboBinding, ...] = KEY_BINDINGS) -> SessionEvent | None:
    """Return the event bound to ``key``; unbound keys map to ``None``."""
    for binding in bindings:
        if key in binding.combos:
            return binding.event
    return None


class KeyComboRegistry:
    """Small key-dispatch table mapping key tokens to handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool]] = {}

    def register(self, combos: tuple[str, ...], handler: Callable[[], bool]) -> KeyComboRegistry:
        """Register ``handler`` for every token in ``combos`` and return ``self``."""
        for combo in combos:
            self._handlers[combo] = handler
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke the handler bound to ``key``; ``None`` means the key is ignored."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


def build_key_registry(
    session: BrowserSession,
    bindings: tuple[KeyComboBinding, ...] = KEY_BINDINGS,
) -> KeyComboRegistry:
    """Bind each key combo to ``session.handle_event`` for its event."""
    registry = KeyComboRegistry()
    for binding in bindings:
        event = binding.event
        registry.register(binding.combos, lambda event=event: session.handle_event(event))
    return registry
