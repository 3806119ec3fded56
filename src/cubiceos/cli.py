"""``eos-cli``: solve a cubic EOS from flags or a JSON case file and print the phases."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from cubiceos.common.exceptions import MissingCaseData

from .eos.impl.classify import Classification, ClassifiedResult
from .eos.impl.equation import StateInput
from .eos.impl.loader import load_case_from_json
from .eos.impl.parameter_sets import ParameterSet
from .eos.interfaces import evaluate, evaluate_all

_EOS_CHOICES = ["all"] + [ps.value for ps in ParameterSet]


def format_result(result: ClassifiedResult) -> List[str]:
    kind = result.classification
    if kind is Classification.ERROR:
        lines = [f"Error: {result.error}"]
    elif kind is Classification.NONE:
        lines = ["No physically meaningful (positive) roots found"]
    elif kind is Classification.SINGLE_PHASE:
        lines = [f"Single phase solution (no phase split): V = {result.single:.4f}"]
    elif kind is Classification.CRITICAL:
        lines = [f"Critical point: Vc = {result.critical:.4f}"]
    elif "low" in result.volumes:
        lines = [f"Two positive roots: V1 = {result.volumes['low']:.4f}, V2 = {result.volumes['high']:.4f}"]
    else:
        lines = [
            f"liquid phase Vsat : {result.liquid:.4f}",
            f"unstable root     : {result.unstable:.4f}",
            f"vapour phase Vsat : {result.vapor:.4f}",
        ]

    if result.a is not None and result.b is not None:
        lines.append(f"a(T) = {result.a:.4f}, b = {result.b:.4f}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="eos-cli",
        description="Solve cubic equations of state for molar volume.",
    )
    ap.add_argument("--eos", choices=_EOS_CHOICES, default=None, help="parameter set (default: all)")
    ap.add_argument("--case", help="JSON case file with {model, params}")
    ap.add_argument("--T", type=float, help="absolute temperature")
    ap.add_argument("--P", type=float, help="pressure")
    ap.add_argument("--Tc", type=float, help="critical temperature")
    ap.add_argument("--Pc", type=float, help="critical pressure")
    ap.add_argument("--R", type=float, help="universal gas constant")
    ap.add_argument("--omega", type=float, help="acentric factor (SRK/PR)")
    ap.add_argument("--json", action="store_true", help="print results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def _resolve_inputs(args: argparse.Namespace):
    parameter_set: Optional[ParameterSet] = None
    base = {"T": 1.0, "P": 1.0, "Tc": 1.0, "Pc": 1.0, "R": 1.0, "omega": 0.0}
    if args.case:
        parameter_set, state = load_case_from_json(args.case)
        base.update(T=state.T, P=state.P, Tc=state.Tc, Pc=state.Pc, R=state.R, omega=state.omega)
    for key in base:
        value = getattr(args, key)
        if value is not None:
            base[key] = value
    if args.eos is not None:
        parameter_set = None if args.eos == "all" else ParameterSet(args.eos)
    return parameter_set, StateInput(**base)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        parameter_set, state = _resolve_inputs(args)
    except (OSError, ValueError, KeyError, MissingCaseData) as exc:
        print(f"eos-cli: cannot load case: {exc}", file=sys.stderr)
        return 1

    if parameter_set is None:
        results = evaluate_all(state)
    else:
        results = [evaluate(parameter_set, state)]

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return 0

    for result in results:
        print(f"[{result.parameter_set.label}]")
        for line in format_result(result):
            print("  " + line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
