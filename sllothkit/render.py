"""Draws render components in order of their layer number."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

__all__ = ["RenderComponent", "RenderManager"]


@runtime_checkable
class RenderComponent(Protocol):
    """What the render manager expects of a drawable component."""

    layer_nr: int

    def draw(self) -> None: ...


class RenderManager:
    """Keeps the components to draw and draws them lowest layer first."""

    def __init__(self) -> None:
        self._layers: list[RenderComponent] = []

    def render(self) -> None:
        """Sort the components by layer number and draw each of them."""
        self._layers.sort(key=lambda component: component.layer_nr)
        for component in self._layers:
            component.draw()

    def add_to_layers(self, render_component: RenderComponent) -> None:
        """Add one component to draw."""
        self._layers.append(render_component)

    def reset_layers(self, render_components: Iterable[RenderComponent]) -> None:
        """Replace all components to draw with the given ones."""
        self._layers = list(render_components)

    @property
    def layers(self) -> list[RenderComponent]:
        """The components to draw; changes to this list affect the manager."""
        return self._layers