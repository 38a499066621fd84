from __future__ import annotations
import math

from .base import Component
from .formatting import format_value

__all__ = ["Resistor", "Inductor", "Capacitor"]


class Resistor(Component):
    """Ideal resistor, Z = R at every frequency."""
    type_name = "Resistor"
    symbol = "R"

    def __init__(self, R: float) -> None:
        self._R = float(R)  # ohm
        super().__init__()

    @property
    def R(self) -> float:
        return self._R

    def Z(self, s: complex) -> complex:
        return complex(self._R)

    def __str__(self) -> str:
        return f"R={format_value(self._R, 'Ω')}"

    def __repr__(self) -> str:
        return f"Resistor(R={self._R})"


class Inductor(Component):
    """Ideal inductor, Z = j·ω·L."""
    type_name = "Inductor"
    symbol = "L"

    def __init__(self, L: float) -> None:
        self._L = float(L)  # henry
        super().__init__()

    @property
    def L(self) -> float:
        return self._L

    def Z(self, s: complex) -> complex:
        return s * self._L

    def get_phase_difference(self) -> float:
        return math.pi / 2

    def __str__(self) -> str:
        return f"L={format_value(self._L, 'H')}"

    def __repr__(self) -> str:
        return f"Inductor(L={self._L})"


class Capacitor(Component):
    """
    Ideal capacitor, Z = -j / (ω·C).

    At f = 0 the capacitor is a DC open circuit and its impedance is
    `complex("inf")`. The phase is always -π/2, also at f = 0.
    """
    type_name = "Capacitor"
    symbol = "C"

    def __init__(self, C: float) -> None:
        self._C = float(C)  # farad
        super().__init__()

    @property
    def C(self) -> float:
        return self._C

    def Z(self, s: complex) -> complex:
        sC = s * self._C
        if sC == 0:
            # Z = 1 / (sC) -> infinite at s=0 (DC open circuit) or C=0
            return complex("inf")
        return 1 / sC

    def get_phase_difference(self) -> float:
        return -math.pi / 2

    def __str__(self) -> str:
        return f"C={format_value(self._C, 'F')}"

    def __repr__(self) -> str:
        return f"Capacitor(C={self._C})"
