"""Interpret cubic EOS roots as phase volumes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .parameter_sets import ParameterSet

logger = logging.getLogger(__name__)

# |imag| below this is solver noise on a real root
IMAG_TOL = 1e-9
# sorted admissible roots closer than this coincide (critical point)
CRITICAL_TOL = 1e-6


class Classification(str, Enum):
    SINGLE_PHASE = "single-phase"
    TWO_PHASE = "two-phase"
    CRITICAL = "critical"
    NONE = "none"
    ERROR = "error"


@dataclass(frozen=True)
class ClassifiedResult:
    """Read-only outcome of one solve.

    ``volumes`` maps slot names (``liquid``/``unstable``/``vapor``, ``single``,
    ``critical`` or the neutral ``low``/``high`` pair) to molar volumes.
    """

    classification: Classification
    volumes: Dict[str, float] = field(default_factory=dict)
    a: Optional[float] = None
    b: Optional[float] = None
    roots: Optional[tuple] = None
    error: Optional[str] = None
    parameter_set: Optional[ParameterSet] = None

    def __hash__(self) -> int:
        return hash(
            (self.classification, tuple(self.volumes.items()), self.a, self.b, self.roots, self.error, self.parameter_set)
        )

    @property
    def liquid(self) -> Optional[float]:
        return self.volumes.get("liquid")

    @property
    def unstable(self) -> Optional[float]:
        return self.volumes.get("unstable")

    @property
    def vapor(self) -> Optional[float]:
        return self.volumes.get("vapor")

    @property
    def single(self) -> Optional[float]:
        return self.volumes.get("single")

    @property
    def critical(self) -> Optional[float]:
        return self.volumes.get("critical")

    def to_dict(self) -> Dict[str, object]:
        return {
            "model": self.parameter_set.label if self.parameter_set is not None else None,
            "classification": self.classification.value,
            "volumes": dict(self.volumes),
            "a": self.a,
            "b": self.b,
            "error": self.error,
        }


def admissible_volumes(roots: Sequence[complex], b: float) -> List[float]:
    """Real, positive roots above the co-volume ``b``, ascending."""

    reals = [r.real for r in roots if abs(r.imag) < IMAG_TOL]
    return sorted(v for v in reals if v > 0 and v > b)


def classify(
    roots: Sequence[complex],
    b: float,
    a: Optional[float] = None,
    parameter_set: Optional[ParameterSet] = None,
) -> ClassifiedResult:
    vols = admissible_volumes(roots, b)

    if len(vols) == 0:
        kind, named = Classification.NONE, {}
    elif len(vols) == 1:
        kind, named = Classification.SINGLE_PHASE, {"single": vols[0]}
    elif len(vols) == 2:
        # no liquid/vapor assignment for a lone pair of roots
        kind, named = Classification.TWO_PHASE, {"low": vols[0], "high": vols[1]}
    elif abs(vols[0] - vols[1]) < CRITICAL_TOL and abs(vols[1] - vols[2]) < CRITICAL_TOL:
        kind, named = Classification.CRITICAL, {"critical": vols[0]}
    else:
        kind, named = Classification.TWO_PHASE, {"liquid": vols[0], "unstable": vols[1], "vapor": vols[2]}

    logger.debug("classified %d admissible root(s) as %s", len(vols), kind.value)
    return ClassifiedResult(
        classification=kind,
        volumes=named,
        a=a,
        b=b,
        roots=tuple(complex(r) for r in roots),
        parameter_set=parameter_set,
    )
