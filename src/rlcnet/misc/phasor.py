from __future__ import annotations
import math

__all__ = ["j2pif"]


def j2pif(f_hz: float) -> complex:
    """Laplace variable s = j·2π·f for sinusoidal steady-state at f_hz."""
    return 1j * 2 * math.pi * f_hz
