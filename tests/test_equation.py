from dataclasses import replace

import numpy as np
import pytest

from cubiceos.common.exceptions import InvalidInput
from cubiceos.eos.impl.classify import Classification
from cubiceos.eos.impl.equation import StateInput, attraction, build, covolume, solve_eos
from cubiceos.eos.impl.parameter_sets import ParameterSet
from cubiceos.eos.interfaces import evaluate, evaluate_all

# n-butane at its 350 K saturation pressure, bar / cm^3 / K
NBUTANE = StateInput(T=350.0, P=9.4573, Tc=425.1, Pc=37.96, R=83.14, omega=0.2)
REDUCED_CRITICAL = StateInput(T=1.0, P=1.0, Tc=1.0, Pc=1.0, R=1.0)


def test_vdw_coefficients_at_reduced_critical_point():
    c = build(ParameterSet.VDW, REDUCED_CRITICAL)
    assert c.a == 27.0 / 64.0
    assert c.b == 0.125
    assert c.polynomial == (1.0, -1.125, 0.421875, -0.052734375)
    assert c.reduced_temperature == 1.0
    assert c.v_ideal == 1.0


def test_rk_attraction_and_covolume():
    c = build(ParameterSet.RK, NBUTANE)
    assert abs(c.b - 80.66653) / 80.66653 < 1e-6
    assert abs(c.a - 1.54953054e7) / 1.54953054e7 < 1e-5
    assert abs(c.alpha - 1.10207596) < 1e-7
    assert c.f == -c.v_ideal


@pytest.mark.parametrize(
    "field, name",
    [
        ("T", "temperature"),
        ("P", "pressure"),
        ("Tc", "critical temperature"),
        ("Pc", "critical pressure"),
        ("R", "gas constant"),
    ],
)
@pytest.mark.parametrize("bad", [0.0, -1.0])
def test_non_positive_input_names_the_field(field, name, bad):
    state = replace(NBUTANE, **{field: bad})
    with pytest.raises(InvalidInput) as excinfo:
        build(ParameterSet.PR, state)
    assert excinfo.value.field == name
    assert name in str(excinfo.value)


def test_first_invalid_field_is_reported():
    state = StateInput(T=-5.0, P=0.0, Tc=0.0, Pc=-1.0, R=0.0)
    with pytest.raises(InvalidInput) as excinfo:
        solve_eos(ParameterSet.VDW, state)
    assert excinfo.value.field == "temperature"

    state = replace(NBUTANE, Pc=0.0, R=-1.0)
    with pytest.raises(InvalidInput) as excinfo:
        solve_eos(ParameterSet.VDW, state)
    assert excinfo.value.field == "critical pressure"


def test_negative_acentric_factor_is_accepted():
    roots, _ = solve_eos(ParameterSet.SRK, replace(NBUTANE, omega=-0.2))
    assert len(roots) == 3


@pytest.mark.parametrize("ps", list(ParameterSet))
@pytest.mark.parametrize(
    "state",
    [
        NBUTANE,
        replace(NBUTANE, T=600.0, P=50.0),
        replace(NBUTANE, T=250.0, P=0.5),
    ],
)
def test_roots_satisfy_eos_cubic(ps, state):
    roots, c = solve_eos(ps, state)
    assert len(roots) == 3
    for r in roots:
        terms = [abs(c.e * r ** 3), abs(c.f * r ** 2), abs(c.g * r), abs(c.h)]
        value = np.polyval(c.polynomial, r)
        assert abs(value) <= 1e-9 * sum(terms)


def test_rk_nbutane_regression():
    res = evaluate(ParameterSet.RK, replace(NBUTANE, omega=0.0))
    assert res.classification is Classification.TWO_PHASE
    assert all(abs(r.imag) < 1e-9 for r in res.roots)
    assert abs(res.liquid - 133.3317) / 133.3317 < 1e-4
    assert abs(res.unstable - 387.8701) / 387.8701 < 1e-4
    assert abs(res.vapor - 2555.6806) / 2555.6806 < 1e-4
    assert res.liquid > res.b


def test_supercritical_state_is_single_phase():
    res = evaluate(ParameterSet.PR, replace(NBUTANE, T=600.0, P=50.0))
    assert res.classification is Classification.SINGLE_PHASE
    assert res.single > res.b
    assert res.liquid is None and res.vapor is None


def test_vdw_critical_point():
    res = evaluate(ParameterSet.VDW, REDUCED_CRITICAL)
    assert res.classification is Classification.CRITICAL
    assert res.critical == 0.375
    assert list(res.volumes) == ["critical"]


@pytest.mark.parametrize("ps", list(ParameterSet))
def test_evaluate_is_deterministic(ps):
    assert evaluate(ps, NBUTANE) == evaluate(ps, NBUTANE)


def test_evaluate_reports_invalid_input_as_error_result():
    res = evaluate(ParameterSet.RK, replace(NBUTANE, P=0.0))
    assert res.classification is Classification.ERROR
    assert "pressure" in res.error
    assert res.roots is None
    assert res.volumes == {}
    assert abs(res.b - 80.66653) / 80.66653 < 1e-6
    assert res.a is not None


def test_evaluate_error_without_coefficients():
    res = evaluate(ParameterSet.SRK, replace(NBUTANE, Tc=0.0))
    assert res.classification is Classification.ERROR
    assert "critical temperature" in res.error
    assert res.a is None and res.b is None


def test_evaluate_all_runs_every_parameter_set():
    results = evaluate_all(NBUTANE)
    assert [r.parameter_set for r in results] == list(ParameterSet)
    assert all(r.classification is not Classification.ERROR for r in results)


@pytest.mark.parametrize(
    "field, name",
    [("T", "temperature"), ("P", "pressure"), ("Tc", "critical temperature"), ("Pc", "critical pressure"), ("R", "gas constant")],
)
@pytest.mark.parametrize("bad", [float("inf"), float("nan")])
def test_non_finite_input_names_the_field(field, name, bad):
    state = replace(NBUTANE, **{field: bad})
    with pytest.raises(InvalidInput) as excinfo:
        build(ParameterSet.RK, state)
    assert excinfo.value.field == name
    res = evaluate(ParameterSet.RK, state)
    assert res.classification is Classification.ERROR
    assert name in res.error


@pytest.mark.parametrize("ps", list(ParameterSet))
def test_error_result_reports_same_a_and_b_as_build(ps):
    c = build(ps, NBUTANE)
    res = evaluate(ps, replace(NBUTANE, P=-1.0))
    assert res.classification is Classification.ERROR
    assert res.a == c.a
    assert res.b == c.b
    assert attraction(ps, NBUTANE) == c.a
    assert covolume(ps, NBUTANE) == c.b
