from .network import Topology, Network, series_impedance, parallel_impedance

__all__ = ["Topology", "Network", "series_impedance", "parallel_impedance"]
