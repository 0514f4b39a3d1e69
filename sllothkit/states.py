"""Game states and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["GameState", "GameStateManager"]


class GameState(ABC):
    """One screen of the game, such as a menu or the gameplay itself."""

    closed: bool = False

    @abstractmethod
    def init(self, window: Any) -> None:
        """Prepare the state for drawing into the given window."""

    @abstractmethod
    def exit(self) -> None:
        """Release what the state holds when it is left."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the state by the elapsed time in seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the state."""

    def has_closed(self) -> bool:
        """True once the state asked to be closed."""
        return self.closed


class GameStateManager:
    """Holds named states and runs the current one."""

    def __init__(self) -> None:
        self._states: dict[str, GameState] = {}
        self._current: GameState | None = None
        self._use_gamepad = False

    def register(self, name: str, state: GameState) -> None:
        """Register a state under a name, replacing any earlier one."""
        self._states[name] = state

    def set_state(self, name: str, window: Any) -> None:
        """Switch to the named state; the old one is exited, the new one initialised.

        Switching to the state that is already current does nothing.
        """
        try:
            state = self._states[name]
        except KeyError:
            raise KeyError(f"no state registered as {name!r}") from None
        if state is self._current:
            return
        if self._current is not None:
            self._current.exit()
        self._current = state
        state.init(window)

    def _require_current(self) -> GameState:
        if self._current is None:
            raise RuntimeError("no current state")
        return self._current

    def update(self, delta_time: float) -> None:
        """Update the current state."""
        self._require_current().update(delta_time)

    def render(self) -> None:
        """Render the current state."""
        self._require_current().render()

    @property
    def current_state(self) -> GameState | None:
        """The state being run, or None before the first switch."""
        return self._current

    def toggle_gamepad_use(self) -> None:
        """Switch gamepad control on or off."""
        self._use_gamepad = not self._use_gamepad

    @property
    def gamepad_use(self) -> bool:
        """True when the gamepad is to be used instead of the keyboard."""
        return self._use_gamepad