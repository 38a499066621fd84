"""
Small-signal models of the two semiconductor devices.

Both are linearised around a DC operating point, so they can be combined with
the passive elements like any other impedance.
"""
from __future__ import annotations
import logging
import math

from .base import Component
from .formatting import format_value

__all__ = ["Diode", "Transistor"]

logger = logging.getLogger(__name__)


class Diode(Component):
    """
    Diode junction around its DC bias point.

    With τ = R·C and d(s) = 1 + s·τ:

        Z(s) = R / d(s) + (Is·R/C) / (s·C·d(s))

    The first term is the parallel RC roll-off of the junction, the second a
    frequency dependent term scaled by the saturation current.

    Parameters
    ----------
    C: float
        Junction capacitance (F).
    R: float
        Series resistance (ohm).
    Is: float
        Saturation current (A).
    """
    type_name = "Diode"
    symbol = "D"

    def __init__(self, C: float, R: float, Is: float) -> None:
        self._C = float(C)
        self._R = float(R)
        self._Is = float(Is)
        super().__init__()

    @property
    def C(self) -> float:
        return self._C

    @property
    def R(self) -> float:
        return self._R

    @property
    def Is(self) -> float:
        return self._Is

    @property
    def tau(self) -> float:
        return self._R * self._C

    def Z(self, s: complex) -> complex:
        denom = 1 + s * self.tau
        sCd = s * self._C * denom
        if self._C == 0 or denom == 0 or sCd == 0:
            return complex("inf")
        k = self._Is * self._R / self._C
        return self._R / denom + k / sCd

    def __str__(self) -> str:
        return (
            f"D(C={format_value(self._C, 'F')}, R={format_value(self._R, 'Ω')}, "
            f"Is={format_value(self._Is, 'A')})"
        )

    def __repr__(self) -> str:
        return f"Diode(C={self._C}, R={self._R}, Is={self._Is})"


class Transistor(Component):
    """
    Transistor characterised at its DC operating point only.

    The impedance is the output resistance V_ce / I_c. It does not depend on
    frequency: `set_frequency()` is ignored and `get_frequency()` is always 0.
    A zero collector current gives an open circuit (infinite impedance, signed
    like V_ce), or NaN when V_ce is 0 as well.
    """
    type_name = "Transistor"
    symbol = "Q"

    def __init__(
        self,
        I_c: float,
        I_b: float,
        I_e: float,
        V_ce: float,
        V_be: float
    ) -> None:
        self._I_c = float(I_c)
        self._I_b = float(I_b)
        self._I_e = float(I_e)
        self._V_ce = float(V_ce)
        self._V_be = float(V_be)
        super().__init__()

    @property
    def I_c(self) -> float:
        return self._I_c

    @property
    def I_b(self) -> float:
        return self._I_b

    @property
    def I_e(self) -> float:
        return self._I_e

    @property
    def V_ce(self) -> float:
        return self._V_ce

    @property
    def V_be(self) -> float:
        return self._V_be

    def Z(self, s: complex) -> complex:
        if self._I_c == 0:
            if self._V_ce == 0:
                return complex("nan")
            return complex(math.copysign(math.inf, self._V_ce))
        return complex(self._V_ce / self._I_c)

    def set_frequency(self, f: float) -> None:
        logger.debug("Transistor: ignoring f=%g Hz, impedance is fixed at DC", f)

    def get_frequency(self) -> float:
        return 0.0

    def get_phase_difference(self) -> float:
        return 0.0

    def __str__(self) -> str:
        return (
            f"Q(Ic={format_value(self._I_c, 'A')}, "
            f"Vce={format_value(self._V_ce, 'V')})"
        )

    def __repr__(self) -> str:
        return (
            f"Transistor(I_c={self._I_c}, I_b={self._I_b}, I_e={self._I_e}, "
            f"V_ce={self._V_ce}, V_be={self._V_be})"
        )
