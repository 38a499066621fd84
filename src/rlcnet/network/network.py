from __future__ import annotations
import cmath
import logging
from enum import Enum
from typing import Iterable, Iterator, Sequence

import numpy as np

from ..components.base import Component

__all__ = ["Topology", "Network", "series_impedance", "parallel_impedance"]

logger = logging.getLogger(__name__)


class Topology(Enum):
    SERIES = "series"
    PARALLEL = "parallel"

    @property
    def symbol(self) -> str:
        return " + " if self is Topology.SERIES else " || "


def series_impedance(impedances: Iterable[complex]) -> complex:
    """Z = Z1 + Z2 + ... + Zn. An empty chain is a short (0 ohm)."""
    return sum(impedances, 0j)


def parallel_impedance(impedances: Iterable[complex]) -> complex:
    """
    Z = 1 / (1/Z1 + 1/Z2 + ... + 1/Zn).

    A short (Z = 0) in parallel dominates and the result is 0. Open branches
    (Z = inf) carry no admittance. If the total admittance is zero (no
    members, or only open branches) the result is an open circuit
    `complex("inf")`.
    """
    y_total = 0j
    for z in impedances:
        if z == 0:
            return 0j  # short in parallel dominates
        if cmath.isinf(z):
            continue
        y_total += 1 / z
    if y_total == 0:
        return complex("inf")
    return 1 / y_total


_RULES = {
    Topology.SERIES: series_impedance,
    Topology.PARALLEL: parallel_impedance,
}


class Network:
    """
    Two-terminal network of components that are all connected either in
    series or in parallel.

    The network does not own its components: it keeps references to them in
    insertion order and reads their stored impedance. The total impedance is
    recomputed by every mutating call (`add_in_series()`,
    `add_in_parallel()`, `set_frequency()`, `update_impedance()`); if a member
    is changed elsewhere, call `update_impedance()` to refresh the total.

    Parameters
    ----------
    topology: Topology, optional
        How the members are combined. If None, the first call to
        `add_in_series()` or `add_in_parallel()` fixes it.
    components: Sequence[Component], optional
        Initial members. Requires `topology`.
    """
    def __init__(
        self,
        topology: Topology | None = None,
        components: Sequence[Component] = ()
    ) -> None:
        if components and topology is None:
            raise ValueError("A topology is required when components are given.")
        self._topology = topology
        self._components: list[Component] = list(components)
        self._frequency: float = 0.0
        self._total_impedance: complex = 0j
        self.update_impedance()

    @property
    def topology(self) -> Topology | None:
        return self._topology

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def _add(self, component: Component, topology: Topology) -> None:
        if not isinstance(component, Component):
            raise TypeError(f"Expected a Component, got {type(component).__name__}.")
        if self._topology is None:
            self._topology = topology
        elif self._topology is not topology:
            raise ValueError(
                f"Cannot add a component in {topology.value} to a "
                f"{self._topology.value} network."
            )
        self._components.append(component)
        self.update_impedance()

    def add_in_series(self, component: Component) -> None:
        """Appends `component` and recomputes Z = sum(Zi)."""
        self._add(component, Topology.SERIES)

    def add_in_parallel(self, component: Component) -> None:
        """Appends `component` and recomputes Z = 1 / sum(1/Zi)."""
        self._add(component, Topology.PARALLEL)

    def set_frequency(self, f: float, propagate: bool = True) -> None:
        """
        Sets the frequency (Hz) of the network and recomputes the total
        impedance.

        Parameters
        ----------
        f: float
            Frequency in Hz.
        propagate: bool, default True
            Also set the frequency of every member. If False, the members are
            expected to have been set by the caller already.
        """
        self._frequency = float(f)
        if propagate:
            for comp in self._components:
                comp.set_frequency(self._frequency)
        self.update_impedance()

    def get_frequency(self) -> float:
        return self._frequency

    def update_impedance(self) -> None:
        """Recomputes the total impedance from the members' stored impedance."""
        rule = _RULES[self._topology or Topology.SERIES]
        self._total_impedance = rule(c.get_impedance() for c in self._components)
        logger.debug(
            "Network(%s, n=%d): Z=%s",
            self._topology.value if self._topology else "empty",
            len(self._components),
            self._total_impedance
        )
        if self._components and not cmath.isfinite(self._total_impedance):
            logger.warning(
                "Total impedance at f=%g Hz is not finite: %s",
                self._frequency, self._total_impedance
            )

    def get_circuit_impedance(self) -> complex:
        return self._total_impedance

    def get_total_impedance_magnitude(self) -> float:
        return abs(self._total_impedance)

    def get_phase_difference(self) -> float:
        return cmath.phase(self._total_impedance)

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def total_impedance(self) -> complex:
        return self._total_impedance

    def impedance_sweep(self, frequencies: Iterable[float]) -> np.ndarray:
        """
        Returns the total impedance at every frequency in `frequencies` as a
        complex array of the same shape. Neither the network nor its members
        change state.
        """
        f = np.asarray(frequencies, dtype=float)
        rule = _RULES[self._topology or Topology.SERIES]
        z = np.array(
            [rule(c.Z_f(fi) for c in self._components) for fi in f.ravel()],
            dtype=complex
        )
        return z.reshape(f.shape)

    def _extended(self, other: Component, topology: Topology) -> Network:
        if self._topology is not None and self._topology is not topology:
            raise ValueError(
                f"Cannot extend a {self._topology.value} network in {topology.value}."
            )
        nw = Network(topology, self._components + [other])
        nw.set_frequency(self._frequency, propagate=False)
        return nw

    def __add__(self, other: Component) -> Network:
        if not isinstance(other, Component):
            return NotImplemented
        return self._extended(other, Topology.SERIES)

    def __or__(self, other: Component) -> Network:
        if not isinstance(other, Component):
            return NotImplemented
        return self._extended(other, Topology.PARALLEL)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __str__(self) -> str:
        if not self._components:
            return "()"
        sym = (self._topology or Topology.SERIES).symbol
        inner = sym.join(str(c) for c in self._components)
        return f"({inner})"

    def __repr__(self) -> str:
        return f"Network({self._topology}, {self._components!r})"
