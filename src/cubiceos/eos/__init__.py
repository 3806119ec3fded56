"""Convenience exports for the cubic EOS core."""

from .impl.classify import CRITICAL_TOL, IMAG_TOL, Classification, ClassifiedResult, classify
from .impl.equation import EquationCoefficients, StateInput, build, solve_eos
from .impl.loader import load_case_from_json
from .impl.parameter_sets import ParameterSet, ShapeConstants, alpha, shape_constants
from .impl.solve import RootSet, cubic_residuals, solve_cubic
from .interfaces import evaluate, evaluate_all

__all__ = [
    "CRITICAL_TOL",
    "IMAG_TOL",
    "Classification",
    "ClassifiedResult",
    "EquationCoefficients",
    "ParameterSet",
    "RootSet",
    "ShapeConstants",
    "StateInput",
    "alpha",
    "build",
    "classify",
    "cubic_residuals",
    "evaluate",
    "evaluate_all",
    "load_case_from_json",
    "shape_constants",
    "solve_cubic",
    "solve_eos",
]
