"""Single entry point that front-ends call to solve and interpret a cubic EOS."""

from __future__ import annotations

import logging
import math
from typing import List

from cubiceos.common.exceptions import InvalidEquation, InvalidInput

from .impl.classify import Classification, ClassifiedResult, classify
from .impl.equation import StateInput, attraction, covolume, solve_eos
from .impl.parameter_sets import ParameterSet

logger = logging.getLogger(__name__)


def _attraction_and_covolume(parameter_set: ParameterSet, state: StateInput):
    if not all(math.isfinite(v) and v > 0 for v in (state.Tc, state.Pc, state.R)):
        return None, None
    b = covolume(parameter_set, state)
    try:
        a = attraction(parameter_set, state)
    except (ValueError, ZeroDivisionError):
        a = None
    return a, b


def evaluate(parameter_set: ParameterSet, state: StateInput) -> ClassifiedResult:
    """Solve ``state`` with ``parameter_set`` and classify the roots.

    Invalid input and degenerate equations come back as an ``error``
    classification carrying the message instead of raising.
    """

    try:
        roots, coeffs = solve_eos(parameter_set, state)
    except (InvalidInput, InvalidEquation) as exc:
        logger.warning("%s: %s", parameter_set.label, exc)
        a, b = _attraction_and_covolume(parameter_set, state)
        return ClassifiedResult(
            classification=Classification.ERROR,
            a=a,
            b=b,
            error=str(exc),
            parameter_set=parameter_set,
        )
    return classify(roots, coeffs.b, a=coeffs.a, parameter_set=parameter_set)


def evaluate_all(state: StateInput) -> List[ClassifiedResult]:
    return [evaluate(ps, state) for ps in ParameterSet]
