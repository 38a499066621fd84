from rlcnet import Resistor, Inductor, Network, Topology


def main():
    R = Resistor(100.0)
    L = Inductor(10e-3)

    nw = Network(Topology.SERIES)
    nw.add_in_series(R)
    nw.add_in_series(L)
    nw.set_frequency(60.0)

    print(nw)
    print("Z(jw) =", nw.get_circuit_impedance())
    print("|Z| =", nw.get_total_impedance_magnitude())
    print("phi =", nw.get_phase_difference(), "rad")


if __name__ == "__main__":
    main()
