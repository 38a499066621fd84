"""
rlcnet: complex impedance of components connected in series or in parallel.
"""
import logging

from .misc import Impedance, j2pif
from .components import (
    Component,
    Resistor,
    Inductor,
    Capacitor,
    Diode,
    Transistor,
    format_value,
)
from .network import Network, Topology, series_impedance, parallel_impedance
from .templates import CircuitTemplate, Circuit, build_circuit
from .report import diagram, format_report

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Impedance",
    "j2pif",
    "Component",
    "Resistor",
    "Inductor",
    "Capacitor",
    "Diode",
    "Transistor",
    "format_value",
    "Network",
    "Topology",
    "series_impedance",
    "parallel_impedance",
    "CircuitTemplate",
    "Circuit",
    "build_circuit",
    "diagram",
    "format_report",
]
