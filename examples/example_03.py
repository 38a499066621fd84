from rlcnet import Diode, Transistor, Resistor, format_report


def main():
    D = Diode(C=5e-12, R=25.0, Is=1e-12)
    Q = Transistor(I_c=2e-3, I_b=20e-6, I_e=2.02e-3, V_ce=5.0, V_be=0.7)
    R = Resistor(1e3)

    nw = R | D | Q
    nw.set_frequency(1e6)

    print(format_report(nw))


if __name__ == "__main__":
    main()
