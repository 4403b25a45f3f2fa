"""Container for the components and connections of a circuit."""

from __future__ import annotations

from .components import Component, Edge


class Circuit:
    """A digital circuit: its components and the edges between them."""

    def __init__(self) -> None:
        self.components: list[Component] = []
        self.edges: list[Edge] = []
        self._by_id: dict[str, Component] = {}

    def add_component(self, component: Component) -> None:
        """Add a component; a later one with the same id wins on lookup."""
        self.components.append(component)
        self._by_id[component.id] = component

    def get_component(self, id: str) -> Component | None:
        return self._by_id.get(id)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)