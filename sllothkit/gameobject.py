"""Game objects as named containers of components."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

__all__ = ["Component", "GameObject"]


@runtime_checkable
class Component(Protocol):
    """What a game object expects of its components."""

    component_id: str

    def init(self) -> None: ...

    def update(self, delta_time: float) -> None: ...


T = TypeVar("T")


class GameObject:
    """An identified object whose behaviour lives in its components."""

    def __init__(self, id: str) -> None:
        self.id = id
        self.components: list[Component] = []

    def __repr__(self) -> str:
        return f"GameObject({self.id!r}, components={len(self.components)})"

    def add_component(self, component: Component) -> None:
        """Append a component; components run in the order they were added."""
        self.components.append(component)

    def update(self, delta_time: float) -> None:
        """Update every component with the elapsed time."""
        for component in self.components:
            component.update(delta_time)

    def init(self) -> None:
        """Initialise every component."""
        for component in self.components:
            component.init()

    def get_components_of_type(self, component_type: type[T]) -> list[T]:
        """All components that are instances of the given type, in order."""
        return [c for c in self.components if isinstance(c, component_type)]

    def get_component(self, component_id: str) -> Component | None:
        """The first component with the given id, or None."""
        return next(
            (c for c in self.components if c.component_id == component_id), None
        )