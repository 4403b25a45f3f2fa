"""Circuit elements: inputs, probes, logic gates and the edges between them."""

from __future__ import annotations

import copy
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ComponentType(enum.Enum):
    """Broad category of a circuit element."""

    LOGIC_GATE = "logic_gate"
    INPUT = "input"
    PROBE = "probe"


class ComponentObserver(ABC):
    """Something that wants to hear when a component's output changes."""

    @abstractmethod
    def update(self, subject: Component) -> None:
        """React to a change of ``subject``'s output value."""


class Component(ABC):
    """Base class for every element of a circuit."""

    component_type: ComponentType

    def __init__(self, id: str, propagation_delay: int = 0) -> None:
        self.id = id
        self.propagation_delay = propagation_delay
        self._output_value = False
        self._observers: list[ComponentObserver] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"

    @property
    def output_value(self) -> bool:
        """Current output; observers are notified when it changes."""
        return self._output_value

    @output_value.setter
    def output_value(self, value: bool) -> None:
        old = self._output_value
        self._output_value = bool(value)
        if old != self._output_value:
            self.notify_observers()

    @property
    def observers(self) -> tuple[ComponentObserver, ...]:
        return tuple(self._observers)

    @abstractmethod
    def calculate_output(self) -> bool:
        """Compute the value this component would output now."""

    def clone(self) -> Component:
        """Return a copy of this component with its own observer list."""
        duplicate = copy.copy(self)
        duplicate._observers = list(self._observers)
        return duplicate

    def add_observer(self, observer: ComponentObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: ComponentObserver) -> None:
        """Remove the first registration of ``observer``, if any."""
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self)


class LogicGate(Component):
    """A component whose output is a function of its input components."""

    component_type = ComponentType.LOGIC_GATE

    def __init__(self, id: str, propagation_delay: int = 1) -> None:
        super().__init__(id, propagation_delay)
        self._inputs: list[Component] = []

    @property
    def inputs(self) -> tuple[Component, ...]:
        return tuple(self._inputs)

    @property
    def input_count(self) -> int:
        return len(self._inputs)

    def add_input(self, component: Component) -> None:
        self._inputs.append(component)

    def get_input(self, index: int) -> Component | None:
        """Return the input at ``index``, or None when out of range."""
        if 0 <= index < len(self._inputs):
            return self._inputs[index]
        return None

    def clone(self) -> LogicGate:
        duplicate = super().clone()
        duplicate._inputs = list(self._inputs)
        return duplicate

    def _input_values(self):
        return (component.output_value for component in self._inputs)


class ANDGate(LogicGate):
    """True only when every input is true."""

    def calculate_output(self) -> bool:
        return all(self._input_values())


class ORGate(LogicGate):
    """True when at least one input is true."""

    def calculate_output(self) -> bool:
        return any(self._input_values())


class NOTGate(LogicGate):
    """Inverts its first input; false when it has none."""

    def calculate_output(self) -> bool:
        if not self._inputs:
            return False
        return not self._inputs[0].output_value


class NANDGate(LogicGate):
    """False only when every input is true."""

    def calculate_output(self) -> bool:
        return not all(self._input_values())


class NORGate(LogicGate):
    """True only when every input is false."""

    def calculate_output(self) -> bool:
        return not any(self._input_values())


class XORGate(LogicGate):
    """True when an odd number of inputs is true."""

    def calculate_output(self) -> bool:
        return sum(self._input_values()) % 2 == 1


class Input(Component):
    """An external signal source with no propagation delay."""

    component_type = ComponentType.INPUT

    def __init__(self, id: str) -> None:
        super().__init__(id, 0)

    def set_value(self, value: bool) -> None:
        self.output_value = value

    def calculate_output(self) -> bool:
        return self.output_value


class Probe(Component, ComponentObserver):
    """Records the output value of the component it observes."""

    component_type = ComponentType.PROBE

    def __init__(self, id: str) -> None:
        super().__init__(id, 0)
        self.recorded_value = False
        self.observed_component: Component | None = None

    def calculate_output(self) -> bool:
        return self.recorded_value

    def update(self, subject: Component) -> None:
        if subject is self.observed_component:
            self.recorded_value = subject.output_value

    def observe_component(self, component: Component | None) -> None:
        """Stop observing the current component and start on ``component``."""
        if self.observed_component is not None:
            self.observed_component.remove_observer(self)
        self.observed_component = component
        if component is not None:
            component.add_observer(self)


@dataclass(frozen=True)
class Edge:
    """A connection from a source component's output to a target component."""

    source: Component
    target: Component