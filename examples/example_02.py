"""
Impedance of a series LC circuit around its resonance frequency. At
f0 = 1 / (2π·sqrt(LC)) the reactances of the inductor and the capacitor cancel.
"""
import math

import numpy as np

from rlcnet import Inductor, Capacitor


def main():
    L = Inductor(1e-3)
    C = Capacitor(1e-6)
    nw = L + C

    f0 = 1 / (2 * math.pi * math.sqrt(L.L * C.C))
    print(f"f0 = {f0:.6g} Hz")

    freqs = np.linspace(0.5 * f0, 1.5 * f0, 11)
    for f, z in zip(freqs, nw.impedance_sweep(freqs)):
        print(f"f = {f:10.2f} Hz   |Z| = {abs(z):10.4f} Ohm")


if __name__ == "__main__":
    main()
