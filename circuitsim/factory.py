"""Creation of components by cloning registered prototypes."""

from __future__ import annotations

from .components import (
    ANDGate,
    Component,
    Input,
    NANDGate,
    NORGate,
    NOTGate,
    ORGate,
    Probe,
    XORGate,
)


class ComponentFactory:
    """Makes components from prototypes registered under a key."""

    def __init__(self) -> None:
        self._prototypes: dict[str, Component] = {}

    def register_prototype(self, key: str, prototype: Component) -> None:
        self._prototypes[key] = prototype

    def create_component(self, key: str, id: str) -> Component:
        """Clone the prototype for ``key``, give it ``id`` and a low output."""
        try:
            prototype = self._prototypes[key]
        except KeyError:
            raise ValueError(f"Prototype not found for key: {key}") from None
        component = prototype.clone()
        component.id = id
        component.output_value = False
        return component


def default_factory() -> ComponentFactory:
    """Return a factory that knows every node type of the circuit format."""
    factory = ComponentFactory()
    factory.register_prototype("AND", ANDGate("prototype"))
    factory.register_prototype("OR", ORGate("prototype"))
    factory.register_prototype("NOT", NOTGate("prototype"))
    factory.register_prototype("NAND", NANDGate("prototype"))
    factory.register_prototype("NOR", NORGate("prototype"))
    factory.register_prototype("XOR", XORGate("prototype"))
    factory.register_prototype("INPUT", Input("prototype"))
    factory.register_prototype("PROBE", Probe("prototype"))
    factory.register_prototype("INPUT_HIGH", Input("prototype"))
    factory.register_prototype("INPUT_LOW", Input("prototype"))
    return factory