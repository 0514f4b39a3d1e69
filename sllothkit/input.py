"""Keyboard and mouse state tracking fed by window events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Hashable

from .vector_algebra import Vector2

__all__ = ["Event", "EventType", "InputManager", "MouseButton"]


class EventType(Enum):
    """Kinds of window events the input manager understands."""

    CLOSED = auto()
    RESIZED = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()


class MouseButton(IntEnum):
    """Mouse buttons."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    XBUTTON1 = 3
    XBUTTON2 = 4


@dataclass(frozen=True)
class Event:
    """A window event.

    ``key`` is set for key events, ``button`` for mouse button events and
    ``position`` (the mouse position relative to the window) for mouse moves
    and resizes.
    """

    type: EventType
    key: Hashable | None = None
    button: MouseButton | None = None
    position: Vector2 | None = None


class InputManager:
    """Tracks which keys and mouse buttons are held, went down or came up.

    "Down" and "up" flags last until the next call to :meth:`update`, which is
    meant to run once per frame after the events were handled; "pressed"
    flags last while the key or button is held.
    """

    def __init__(self) -> None:
        self._keys_down: set[Hashable] = set()
        self._keys_up: set[Hashable] = set()
        self._keys_pressed: set[Hashable] = set()
        self._mouse_down: set[MouseButton] = set()
        self._mouse_up: set[MouseButton] = set()
        self._mouse_pressed: set[MouseButton] = set()
        self._mouse_position = Vector2(0, 0)

    def init(self) -> None:
        """Forget every key and button state and reset the mouse position."""
        for states in (
            self._keys_down,
            self._keys_up,
            self._keys_pressed,
            self._mouse_down,
            self._mouse_up,
            self._mouse_pressed,
        ):
            states.clear()
        self._mouse_position = Vector2(0, 0)

    def update(self) -> None:
        """End the frame: clear the one-frame down and up flags."""
        self._keys_down.clear()
        self._keys_up.clear()
        self._mouse_down.clear()
        self._mouse_up.clear()

    def handle_event(self, event: Event) -> None:
        """Record the effect of one window event."""
        kind = event.type
        if kind is EventType.KEY_PRESSED:
            self._keys_down.add(event.key)
            self._keys_pressed.add(event.key)
        elif kind is EventType.KEY_RELEASED:
            self._keys_up.add(event.key)
            self._keys_pressed.discard(event.key)
        elif kind is EventType.MOUSE_BUTTON_PRESSED:
            self._mouse_down.add(event.button)
            self._mouse_pressed.add(event.button)
        elif kind is EventType.MOUSE_BUTTON_RELEASED:
            self._mouse_up.add(event.button)
            self._mouse_pressed.discard(event.button)
        elif kind in (EventType.RESIZED, EventType.MOUSE_MOVED):
            if event.position is not None:
                self._mouse_position = event.position

    def key_pressed(self, key: Hashable) -> bool:
        """True while the key is held."""
        return key in self._keys_pressed

    def key_down(self, key: Hashable) -> bool:
        """True in the frame the key went down."""
        return key in self._keys_down

    def key_up(self, key: Hashable) -> bool:
        """True in the frame the key was released."""
        return key in self._keys_up

    def mouse_pressed(self, button: MouseButton) -> bool:
        """True while the mouse button is held."""
        return button in self._mouse_pressed

    def mouse_down(self, button: MouseButton) -> bool:
        """True in the frame the mouse button went down."""
        return button in self._mouse_down

    def mouse_up(self, button: MouseButton) -> bool:
        """True in the frame the mouse button was released."""
        return button in self._mouse_up

    @property
    def mouse_position(self) -> Vector2:
        """Last known mouse position relative to the window."""
        return self._mouse_position