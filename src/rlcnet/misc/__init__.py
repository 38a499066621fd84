from .phasor import j2pif
from .impedance import Impedance

__all__ = ["j2pif", "Impedance"]
