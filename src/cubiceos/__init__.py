"""Molar-volume roots of cubic equations of state and their phase interpretation."""

from .eos import (
    Classification,
    ClassifiedResult,
    ParameterSet,
    StateInput,
    evaluate,
    evaluate_all,
    solve_cubic,
    solve_eos,
)

__all__ = [
    "Classification",
    "ClassifiedResult",
    "ParameterSet",
    "StateInput",
    "evaluate",
    "evaluate_all",
    "solve_cubic",
    "solve_eos",
]
