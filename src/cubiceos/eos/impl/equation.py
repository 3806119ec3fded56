"""Assemble the generic cubic in molar volume and hand it to the solver.

The generic two-parameter cubic EOS

    P = R T / (V - b) - a(T) / ((V + epsilon b)(V + sigma b))

is rearranged into ``e V^3 + f V^2 + g V + h = 0`` with ``e = 1``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from cubiceos.common.exceptions import InvalidInput

from .parameter_sets import ParameterSet, alpha, shape_constants
from .solve import RootSet, solve_cubic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateInput:
    """Temperature, pressure and substance data for one solve.

    Units only need to be consistent with ``R``; e.g. K, bar and
    ``R = 83.14`` bar cm^3/(mol K) give volumes in cm^3/mol.
    """

    T: float
    P: float
    Tc: float
    Pc: float
    R: float
    omega: float = 0.0

    def validate(self) -> None:
        for name, value in (
            ("temperature", self.T),
            ("pressure", self.P),
            ("critical temperature", self.Tc),
            ("critical pressure", self.Pc),
            ("gas constant", self.R),
        ):
            if not (math.isfinite(value) and value > 0):
                raise InvalidInput(name, value)

    @property
    def reduced_temperature(self) -> float:
        return self.T / self.Tc

    @property
    def v_ideal(self) -> float:
        return self.R * self.T / self.P


@dataclass(frozen=True)
class EquationCoefficients:
    a: float
    b: float
    e: float
    f: float
    g: float
    h: float
    reduced_temperature: float
    alpha: float
    v_ideal: float

    @property
    def polynomial(self) -> Tuple[float, float, float, float]:
        return (self.e, self.f, self.g, self.h)


def attraction(parameter_set: ParameterSet, state: StateInput, alpha_val: Optional[float] = None) -> float:
    """``a = Psi alpha R^2 Tc^2 / Pc``."""

    if alpha_val is None:
        alpha_val = alpha(parameter_set, state.reduced_temperature, state.omega)
    return shape_constants(parameter_set).Psi * alpha_val * state.R ** 2 * state.Tc ** 2 / state.Pc


def covolume(parameter_set: ParameterSet, state: StateInput) -> float:
    """``b = Omega R Tc / Pc``."""

    return shape_constants(parameter_set).Omega * state.R * state.Tc / state.Pc


def build(parameter_set: ParameterSet, state: StateInput) -> EquationCoefficients:
    state.validate()

    sigma, epsilon, _, _ = shape_constants(parameter_set)
    Tr = state.reduced_temperature
    alpha_val = alpha(parameter_set, Tr, state.omega)

    a = attraction(parameter_set, state, alpha_val)
    b = covolume(parameter_set, state)

    v_ig = state.v_ideal
    x = sigma + epsilon
    y = sigma * epsilon

    e = 1.0
    f = b * (x - 1.0) - v_ig
    g = b * ((y - x) * b - x * v_ig) + a / state.P
    h = -y * b * b * (b + v_ig) - a * b / state.P

    coeffs = EquationCoefficients(
        a=a, b=b, e=e, f=f, g=g, h=h, reduced_temperature=Tr, alpha=alpha_val, v_ideal=v_ig
    )
    logger.debug("%s: Tr=%g alpha=%g a=%g b=%g", parameter_set.label, Tr, alpha_val, a, b)
    return coeffs


def solve_eos(parameter_set: ParameterSet, state: StateInput) -> Tuple[RootSet, EquationCoefficients]:
    """Return the three molar-volume roots and the coefficients they came from."""

    coeffs = build(parameter_set, state)
    roots = solve_cubic(*coeffs.polynomial)
    return roots, coeffs
