"""Tests for series and parallel networks."""

import cmath
import math

import numpy as np
import pytest

from rlcnet import (
    Capacitor,
    Inductor,
    Network,
    Resistor,
    Topology,
    Transistor,
    parallel_impedance,
    series_impedance,
)


def _series(*components, f=None):
    nw = Network()
    for c in components:
        nw.add_in_series(c)
    if f is not None:
        nw.set_frequency(f)
    return nw


def _parallel(*components, f=None):
    nw = Network()
    for c in components:
        nw.add_in_parallel(c)
    if f is not None:
        nw.set_frequency(f)
    return nw


def test_rl_series_at_60hz():
    nw = _series(Resistor(100.0), Inductor(0.01), f=60.0)

    z = nw.get_circuit_impedance()
    assert z.real == pytest.approx(100.0)
    assert z.imag == pytest.approx(2 * math.pi * 60 * 0.01)
    assert z.imag == pytest.approx(3.77, abs=1e-2)
    assert nw.get_total_impedance_magnitude() == pytest.approx(100.07, abs=1e-2)
    assert nw.get_phase_difference() == pytest.approx(0.0377, abs=1e-4)
    assert nw.topology is Topology.SERIES


def test_rc_parallel_is_dominated_by_smaller_branch():
    c = Capacitor(100e-6)
    nw = _parallel(Resistor(50.0), c, f=1000.0)

    assert c.get_impedance_magnitude() == pytest.approx(1.59, abs=1e-2)
    assert c.get_phase_difference() == -math.pi / 2
    assert nw.get_total_impedance_magnitude() < c.get_impedance_magnitude()
    assert nw.get_phase_difference() < 0.0


def test_series_lc_resonance_cancels_reactance():
    L, C = 1e-3, 1e-6
    f0 = 1 / (2 * math.pi * math.sqrt(L * C))
    assert f0 == pytest.approx(5032.9, abs=0.1)

    nw = _series(Inductor(L), Capacitor(C), f=f0)
    assert nw.get_total_impedance_magnitude() == pytest.approx(0.0, abs=1e-9)


def test_series_is_associative_and_order_independent():
    a, b, c = Resistor(33.0), Inductor(2e-3), Capacitor(4.7e-6)
    total = _series(a, b, c, f=1e3).get_circuit_impedance()
    za, zb, zc = a.get_impedance(), b.get_impedance(), c.get_impedance()

    assert total == pytest.approx((za + zb) + zc)
    assert total == pytest.approx(za + (zb + zc))
    assert _series(c, a, b, f=1e3).get_circuit_impedance() == pytest.approx(total)


def test_parallel_of_equal_impedances_halves():
    nw = _parallel(Resistor(100.0), Resistor(100.0), f=50.0)
    assert nw.get_circuit_impedance() == pytest.approx(50.0)

    l1, l2 = Inductor(1e-3), Inductor(1e-3)
    nw = _parallel(l1, l2, f=1e3)
    assert nw.get_circuit_impedance() == pytest.approx(l1.get_impedance() / 2)
    assert nw.get_phase_difference() == pytest.approx(math.pi / 2)


def test_parallel_short_dominates():
    nw = _parallel(Resistor(0.0), Resistor(10.0), f=1.0)
    assert nw.get_circuit_impedance() == 0j

    nw = _parallel(Resistor(0.0), Resistor(0.0), f=1.0)
    assert nw.get_circuit_impedance() == 0j


def test_parallel_of_open_circuits_is_open():
    nw = _parallel(Capacitor(1e-6), Capacitor(2e-6), f=0.0)
    assert math.isinf(nw.get_total_impedance_magnitude())


def test_parallel_ignores_open_branch():
    nw = _parallel(Resistor(10.0), Capacitor(1e-6), f=0.0)
    assert nw.get_circuit_impedance() == pytest.approx(10.0)


def test_empty_networks():
    assert Network(Topology.SERIES).get_circuit_impedance() == 0j
    assert cmath.isinf(Network(Topology.PARALLEL).get_circuit_impedance())
    assert len(Network()) == 0


def test_mixing_topologies_is_rejected():
    nw = Network()
    nw.add_in_series(Resistor(1.0))
    with pytest.raises(ValueError):
        nw.add_in_parallel(Resistor(2.0))
    assert len(nw) == 1


def test_components_require_topology():
    with pytest.raises(ValueError):
        Network(components=[Resistor(1.0)])


def test_only_components_can_be_added():
    with pytest.raises(TypeError):
        Network().add_in_series(10.0)


def test_total_is_stale_until_recomputed():
    r = Resistor(10.0)
    ind = Inductor(1e-3)
    nw = _series(r, ind, f=100.0)
    z_before = nw.get_circuit_impedance()

    ind.set_frequency(1e4)
    assert nw.get_circuit_impedance() == z_before

    nw.update_impedance()
    assert nw.get_circuit_impedance() == pytest.approx(10.0 + ind.get_impedance())


def test_set_frequency_propagates_to_members():
    r, c = Resistor(10.0), Capacitor(1e-6)
    nw = _parallel(r, c)
    nw.set_frequency(2e3)
    assert nw.get_frequency() == 2e3
    assert r.get_frequency() == 2e3
    assert c.get_frequency() == 2e3


def test_set_frequency_without_propagation():
    ind = Inductor(1e-3)
    ind.set_frequency(50.0)
    nw = _series(Resistor(10.0), ind)

    nw.set_frequency(1e3, propagate=False)
    assert nw.get_frequency() == 1e3
    assert ind.get_frequency() == 50.0
    assert nw.get_circuit_impedance() == pytest.approx(10.0 + ind.Z_f(50.0))


def test_members_are_shared_not_copied():
    r = Resistor(10.0)
    nw = _series(r)
    assert nw.components[0] is r
    assert list(nw) == [r]


def test_transistor_in_series_with_resistor():
    q = Transistor(I_c=1e-3, I_b=10e-6, I_e=1.01e-3, V_ce=2.0, V_be=0.65)
    nw = _series(Resistor(500.0), q, f=1e5)
    assert nw.get_circuit_impedance() == pytest.approx(2500.0)
    assert nw.get_phase_difference() == pytest.approx(0.0)


def test_operators_build_networks():
    r, ind, c = Resistor(10.0), Inductor(1e-3), Capacitor(1e-6)

    nw = r + ind
    assert isinstance(nw, Network)
    assert nw.topology is Topology.SERIES
    assert (nw + c).components == (r, ind, c)
    assert len(nw) == 2

    nw = r | c
    assert nw.topology is Topology.PARALLEL
    with pytest.raises(ValueError):
        nw + ind

    with pytest.raises(TypeError):
        r + 1.0


def test_impedance_sweep_matches_pointwise_evaluation():
    r, ind, c = Resistor(10.0), Inductor(1e-3), Capacitor(1e-6)
    nw = _parallel(r, ind, c, f=50.0)
    z_before = nw.get_circuit_impedance()

    freqs = np.logspace(1, 5, 9)
    z = nw.impedance_sweep(freqs)

    expected = [parallel_impedance([r.Z_f(f), ind.Z_f(f), c.Z_f(f)]) for f in freqs]
    assert np.allclose(z, expected)
    assert nw.get_circuit_impedance() == z_before
    assert nw.get_frequency() == 50.0


def test_combination_rules():
    assert series_impedance([1 + 1j, 2 - 3j]) == 3 - 2j
    assert series_impedance([]) == 0j
    assert parallel_impedance([4.0, 4.0]) == pytest.approx(2.0)
    assert cmath.isinf(parallel_impedance([]))


def test_str():
    nw = Resistor(100.0) + Inductor(10e-3)
    assert str(nw) == "(R=100Ω + L=10mH)"
    assert str(Resistor(100.0) | Capacitor(1e-6)) == "(R=100Ω || C=1µF)"
