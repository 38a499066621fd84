from __future__ import annotations
import cmath

from dataclasses import dataclass

__all__ = ["Impedance"]


@dataclass(frozen=True)
class Impedance:
    """
    Wrapper class around a complex number that represents the impedance of
    a component or of a whole network.

    Attributes
    ----------
    value: complex
        The complex number that represents an impedance.
    """
    value: complex

    @property
    def R(self) -> float:
        return self.value.real

    @property
    def X(self) -> float:
        return self.value.imag

    @property
    def is_finite(self) -> bool:
        return cmath.isfinite(self.value)

    @property
    def is_inductive(self) -> bool:
        return self.X > 0.0

    @property
    def is_capacitive(self) -> bool:
        return self.X < 0.0

    @property
    def character(self) -> str:
        """Short label used in reports: inductive, capacitive or resistive."""
        if not self.is_finite:
            return "open"
        if self.is_inductive:
            return "inductive"
        if self.is_capacitive:
            return "capacitive"
        return "resistive"
