"""
The eight canonical circuits offered by the command line front end.

Every template is a single series or parallel chain of two or three ideal
elements. `build_circuit()` turns a template plus element values into a
`Network` evaluated at a given frequency.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from .components import Component, Resistor, Inductor, Capacitor
from .network import Network, Topology

__all__ = ["CircuitTemplate", "Circuit", "build_circuit"]

logger = logging.getLogger(__name__)


class CircuitTemplate(Enum):
    PARALLEL_RLC = (1, "Parallel RLC circuit", Topology.PARALLEL, "RCL")
    SERIES_RLC = (2, "Series RLC circuit", Topology.SERIES, "RCL")
    SERIES_RL = (3, "RL in Series", Topology.SERIES, "RL")
    PARALLEL_RL = (4, "RL in Parallel", Topology.PARALLEL, "RL")
    SERIES_RC = (5, "RC in Series", Topology.SERIES, "RC")
    PARALLEL_RC = (6, "RC in Parallel", Topology.PARALLEL, "RC")
    SERIES_LC = (7, "LC in Series", Topology.SERIES, "LC")
    PARALLEL_LC = (8, "LC in Parallel", Topology.PARALLEL, "LC")

    def __init__(self, number: int, label: str, topology: Topology, elements: str) -> None:
        self.number = number
        self.label = label
        self.topology = topology
        self.elements = elements

    @classmethod
    def from_number(cls, number: int) -> CircuitTemplate:
        """Looks up a template by its menu number (1..8)."""
        for template in cls:
            if template.number == number:
                return template
        raise KeyError(f"No circuit template with number {number}.")

    def __str__(self) -> str:
        return f"{self.number}. {self.label}"


@dataclass(frozen=True)
class Circuit:
    """
    A template together with the network built from it.

    Attributes
    ----------
    template: CircuitTemplate
        The template the network was built from.
    network: Network
        The network holding references to `components`.
    components: tuple[Component, ...]
        The components in template order. The circuit owns them.
    """
    template: CircuitTemplate
    network: Network
    components: tuple[Component, ...]

    @property
    def frequency(self) -> float:
        return self.network.get_frequency()


def _make_element(
    letter: str,
    resistance: float | None,
    capacitance: float | None,
    inductance: float | None
) -> Component:
    if letter == "R":
        if resistance is None:
            raise ValueError("This circuit needs a resistance value.")
        return Resistor(resistance)
    if letter == "C":
        if capacitance is None:
            raise ValueError("This circuit needs a capacitance value.")
        return Capacitor(capacitance)
    if letter == "L":
        if inductance is None:
            raise ValueError("This circuit needs an inductance value.")
        return Inductor(inductance)
    raise ValueError(f"Unknown element '{letter}'.")


def build_circuit(
    template: CircuitTemplate,
    frequency: float,
    resistance: float | None = None,
    capacitance: float | None = None,
    inductance: float | None = None
) -> Circuit:
    """
    Builds and evaluates the circuit described by `template`.

    Parameters
    ----------
    template: CircuitTemplate
        Which of the canonical circuits to build.
    frequency: float
        Frequency (Hz) at which the network is evaluated.
    resistance: float, optional
        Resistance (ohm). Required if the template contains a resistor.
    capacitance: float, optional
        Capacitance (F). Required if the template contains a capacitor.
    inductance: float, optional
        Inductance (H). Required if the template contains an inductor.

    Returns
    -------
    Circuit

    Raises
    ------
    ValueError
        If a value needed by the template is missing.
    """
    components = tuple(
        _make_element(letter, resistance, capacitance, inductance)
        for letter in template.elements
    )
    network = Network(template.topology)
    for comp in components:
        # members join already evaluated at the target frequency
        comp.set_frequency(frequency)
        if template.topology is Topology.SERIES:
            network.add_in_series(comp)
        else:
            network.add_in_parallel(comp)
    network.set_frequency(frequency)
    logger.info("Built %s: %s at %g Hz", template.label, network, frequency)
    return Circuit(template=template, network=network, components=components)
