"""Substance models of the generic cubic EOS.

Each model contributes a temperature-dependent attraction correction
``alpha(Tr, omega)`` and four dimensionless constants ``(sigma, epsilon,
Omega, Psi)``. The numbers are the usual textbook correlations and are kept
to their published precision.
"""

from __future__ import annotations

from enum import Enum
from math import sqrt
from typing import Dict, NamedTuple


class ShapeConstants(NamedTuple):
    sigma: float
    epsilon: float
    Omega: float
    Psi: float


class ParameterSet(Enum):
    VDW = "vdw"
    RK = "rk"
    SRK = "srk"
    PR = "pr"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def uses_acentric_factor(self) -> bool:
        return self in (ParameterSet.SRK, ParameterSet.PR)

    def alpha(self, reduced_temperature: float, omega: float = 0.0) -> float:
        return alpha(self, reduced_temperature, omega)

    def shape_constants(self) -> ShapeConstants:
        return shape_constants(self)

    @classmethod
    def from_name(cls, name: str) -> "ParameterSet":
        key = " ".join(name.strip().lower().replace("_", " ").replace("-", " ").split())
        try:
            return _ALIASES[key]
        except KeyError:
            raise KeyError(f"EOS '{name}' not registered") from None


_LABELS = {
    ParameterSet.VDW: "van der Waals",
    ParameterSet.RK: "Redlich-Kwong",
    ParameterSet.SRK: "Soave-Redlich-Kwong",
    ParameterSet.PR: "Peng-Robinson",
}

_ALIASES: Dict[str, ParameterSet] = {
    "vdw": ParameterSet.VDW,
    "van der waals": ParameterSet.VDW,
    "rk": ParameterSet.RK,
    "redlich kwong": ParameterSet.RK,
    "srk": ParameterSet.SRK,
    "soave redlich kwong": ParameterSet.SRK,
    "pr": ParameterSet.PR,
    "peng robinson": ParameterSet.PR,
}

_SHAPE = {
    ParameterSet.VDW: ShapeConstants(0.0, 0.0, 1.0 / 8.0, 27.0 / 64.0),
    ParameterSet.RK: ShapeConstants(1.0, 0.0, 0.08664, 0.42728),
    ParameterSet.SRK: ShapeConstants(1.0, 0.0, 0.08664, 0.42728),
    ParameterSet.PR: ShapeConstants(1.0 + sqrt(2.0), 1.0 - sqrt(2.0), 0.07780, 0.45724),
}


def srk_m(omega: float) -> float:
    return 0.480 + 1.574 * omega - 0.716 * omega * omega


def pr_kappa(omega: float) -> float:
    return 0.37464 + 1.54226 * omega - 0.26992 * omega * omega


def alpha(parameter_set: ParameterSet, reduced_temperature: float, omega: float = 0.0) -> float:
    """Dimensionless attraction correction at ``Tr = T/Tc``."""

    if parameter_set is ParameterSet.VDW:
        return 1.0
    if parameter_set is ParameterSet.RK:
        return 1.0 / sqrt(reduced_temperature)
    if parameter_set is ParameterSet.SRK:
        return (1.0 + srk_m(omega) * (1.0 - sqrt(reduced_temperature))) ** 2
    if parameter_set is ParameterSet.PR:
        return (1.0 + pr_kappa(omega) * (1.0 - sqrt(reduced_temperature))) ** 2
    raise ValueError(f"Unknown parameter set {parameter_set!r}")


def shape_constants(parameter_set: ParameterSet) -> ShapeConstants:
    """Return ``(sigma, epsilon, Omega, Psi)`` for ``parameter_set``."""

    try:
        return _SHAPE[parameter_set]
    except KeyError:
        raise ValueError(f"Unknown parameter set {parameter_set!r}") from None
