"""Closed-form solver for ``a x^3 + b x^2 + c x + d = 0``."""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from cubiceos.common.exceptions import InvalidEquation

logger = logging.getLogger(__name__)

RootSet = Tuple[complex, complex, complex]

# primitive cube roots of unity
_OMEGA = complex(-0.5, math.sqrt(3.0) / 2.0)
_OMEGA2 = _OMEGA.conjugate()


def solve_cubic(a: float, b: float, c: float, d: float) -> RootSet:
    """Return the three (possibly complex) roots of the cubic.

    The polynomial is reduced to the depressed form ``y^3 + p y + q = 0``.
    A non-negative discriminant is handled with Cardano's radicals (one real
    root plus a conjugate pair, or a repeated real root at zero); a negative
    discriminant means three distinct real roots and uses the trigonometric
    form. Roots are returned in solver order, not sorted.
    """

    if a == 0:
        raise InvalidEquation("equation provided is not cubic (a = 0)")

    b /= a
    c /= a
    d /= a

    p = c - b * b / 3.0
    q = 2.0 * b ** 3 / 27.0 - b * c / 3.0 + d
    delta = q * q / 4.0 + p ** 3 / 27.0
    shift = b / 3.0

    if delta >= 0.0:
        sqrt_delta = math.sqrt(delta)
        u = float(np.cbrt(-q / 2.0 + sqrt_delta))
        v = float(np.cbrt(-q / 2.0 - sqrt_delta))
        ys = (
            complex(u + v, 0.0),
            u * _OMEGA + v * _OMEGA2,
            u * _OMEGA2 + v * _OMEGA,
        )
        branch = "cardano"
    else:
        r = math.sqrt(-p ** 3 / 27.0)
        phi = math.acos(max(-1.0, min(1.0, -q / (2.0 * r))))
        t = 2.0 * float(np.cbrt(r))
        ys = tuple(complex(t * math.cos((phi + 2.0 * math.pi * k) / 3.0), 0.0) for k in range(3))
        branch = "trigonometric"

    roots = (ys[0] - shift, ys[1] - shift, ys[2] - shift)
    logger.debug("cubic p=%g q=%g delta=%g branch=%s roots=%s", p, q, delta, branch, roots)
    return roots


def cubic_residuals(coeffs: Sequence[float], roots: Sequence[complex]) -> np.ndarray:
    """Evaluate the cubic with ``coeffs`` (highest power first) at each root."""

    return np.polyval(np.asarray(coeffs, dtype=float), np.asarray(roots, dtype=complex))
