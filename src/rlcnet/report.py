"""
Text rendering of a network: ASCII circuit diagram and the impedance report.
"""
from __future__ import annotations

from .misc.impedance import Impedance
from .network import Network, Topology

__all__ = ["diagram", "format_report"]

_WIRE = "-----"


def diagram(network: Network) -> str:
    """
    Returns an ASCII drawing of the network.

    A series chain is drawn as one loop::

        +-----R-----C-----L-----+
        |                       |
        +-----------------------+

    A parallel combination as stacked rungs::

        +-----R-----+
        |           |
        +-----C-----+
    """
    symbols = [c.symbol for c in network]
    if not symbols:
        return ""
    if network.topology is Topology.PARALLEL:
        rungs = [f"+{_WIRE}{sym}{_WIRE}+" for sym in symbols]
        spacer = "|" + " " * (len(rungs[0]) - 2) + "|"
        return f"\n{spacer}\n".join(rungs)

    top = "+" + "".join(_WIRE + sym for sym in symbols) + _WIRE + "+"
    inner = len(top) - 2
    return "\n".join([top, "|" + " " * inner + "|", "+" + "-" * inner + "+"])


def format_report(network: Network) -> str:
    """
    Renders the total impedance of `network` and the impedance of every
    member. Values are printed as computed; an open circuit shows as `inf`.
    """
    z = Impedance(network.get_circuit_impedance())
    lines: list[str] = [
        f"Total Impedance Magnitude at {network.get_frequency():g}Hz: "
        f"{network.get_total_impedance_magnitude():g} Ohms",
        f"Total Phase Difference: {network.get_phase_difference():g} rad",
        f"Total Impedance: {z.R:g} {'-' if z.X < 0 else '+'} j{abs(z.X):g} Ohms ({z.character})",
        "",
        "Component Impedances and Phase Shifts:",
    ]
    for comp in network:
        lines.append(f"Type: {comp.get_type()}")
        lines.append(f"Impedance Magnitude: {comp.get_impedance_magnitude():g} Ohms")
        lines.append(f"Phase Shift: {comp.get_phase_difference():g} rad")
        lines.append("")
    lines.append("Circuit Diagram:")
    lines.append(diagram(network))
    return "\n".join(lines)
