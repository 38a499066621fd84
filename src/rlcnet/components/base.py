from __future__ import annotations
from abc import ABC, abstractmethod
import cmath
import logging
from typing import Iterable, TYPE_CHECKING

import numpy as np

from ..misc.phasor import j2pif

if TYPE_CHECKING:
    from ..network.network import Network

__all__ = ["Component"]

logger = logging.getLogger(__name__)


class Component(ABC):
    """
    Abstract base for the two-terminal components of a network.

    A component keeps the frequency (Hz) it was last set to and the complex
    impedance at that frequency. The impedance is recomputed every time
    `set_frequency()` is called; the getters never recompute anything.

    Subclasses implement `Z(s)`, the impedance in the Laplace domain for
    complex frequency s. For sinusoidal steady-state s = j·2π·f.
    """
    type_name: str = "Component"
    symbol: str = "X"  # letter used in circuit diagrams

    def __init__(self) -> None:
        self._frequency: float = 0.0
        self._impedance: complex = self.Z(0j)

    @abstractmethod
    def Z(self, s: complex) -> complex:
        raise NotImplementedError

    def Y(self, s: complex) -> complex:
        """
        Admittance Y(s) = 1 / Z(s). A short circuit (Z = 0) has infinite
        admittance, an open circuit (Z = inf) has zero admittance.
        """
        z = self.Z(s)
        if z == 0:
            return complex("inf")
        if cmath.isinf(z):
            return 0j
        return 1 / z

    def Z_f(self, f_hz: float) -> complex:
        return self.Z(j2pif(f_hz))

    def Y_f(self, f_hz: float) -> complex:
        return self.Y(j2pif(f_hz))

    def set_frequency(self, f: float) -> None:
        """Sets the frequency (Hz) and recomputes the stored impedance."""
        self._frequency = float(f)
        self._impedance = self.Z_f(self._frequency)
        logger.debug(
            "%s: f=%g Hz -> Z=%s", self.get_type(), self._frequency, self._impedance
        )

    def get_frequency(self) -> float:
        return self._frequency

    def get_impedance(self) -> complex:
        return self._impedance

    def get_impedance_magnitude(self) -> float:
        return abs(self._impedance)

    def get_phase_difference(self) -> float:
        """Angle of the stored impedance in radians."""
        return cmath.phase(self._impedance)

    def get_type(self) -> str:
        return self.type_name

    @property
    def frequency(self) -> float:
        return self.get_frequency()

    @property
    def impedance(self) -> complex:
        return self.get_impedance()

    def impedance_sweep(self, frequencies: Iterable[float]) -> np.ndarray:
        """
        Returns Z(j·2π·f) for every frequency in `frequencies` as a complex
        array of the same shape. The stored frequency and impedance are left
        untouched.
        """
        f = np.asarray(frequencies, dtype=float)
        z = np.array([self.Z_f(fi) for fi in f.ravel()], dtype=complex)
        return z.reshape(f.shape)

    def __add__(self, other: Component) -> Network:
        """Connects two components in series: R + L."""
        from ..network.network import Network, Topology
        if not isinstance(other, Component):
            return NotImplemented
        return Network(Topology.SERIES, [self, other])

    def __or__(self, other: Component) -> Network:
        """Connects two components in parallel: R | C."""
        from ..network.network import Network, Topology
        if not isinstance(other, Component):
            return NotImplemented
        return Network(Topology.PARALLEL, [self, other])
