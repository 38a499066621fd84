from .base import Component
from .elements import Resistor, Inductor, Capacitor
from .semiconductors import Diode, Transistor
from .formatting import format_value

__all__ = [
    "Component",
    "Resistor",
    "Inductor",
    "Capacitor",
    "Diode",
    "Transistor",
    "format_value",
]
