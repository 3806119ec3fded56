import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from cubiceos.common.exceptions import MissingCaseData

from ..utils.units import assert_unit, gas_constant
from .equation import StateInput
from .parameter_sets import ParameterSet

_REQUIRED = ("T", "P", "Tc", "Pc")


def state_from_params(params: Dict[str, Any]) -> StateInput:
    missing = [k for k in _REQUIRED if k not in params]
    if missing:
        raise MissingCaseData(f"Case is missing required quantities: {', '.join(missing)}")

    if "R" in params:
        R = float(params["R"])
    elif "R_unit" in params:
        R = gas_constant(params["R_unit"])
    else:
        raise MissingCaseData("Case needs either 'R' or a known 'R_unit'")

    # 温度必须是绝对温度
    if "T_unit" in params:
        assert_unit(params["T_unit"], "K", "T")
    if "Tc_unit" in params:
        assert_unit(params["Tc_unit"], "K", "Tc")
    if "P_unit" in params and "Pc_unit" in params:
        assert_unit(params["Pc_unit"], params["P_unit"], "Pc")

    return StateInput(
        T=float(params["T"]),
        P=float(params["P"]),
        Tc=float(params["Tc"]),
        Pc=float(params["Pc"]),
        R=R,
        omega=float(params.get("omega", 0.0)),
    )


def load_case_from_json(json_path: str) -> Tuple[Optional[ParameterSet], StateInput]:
    """Read a case file; a ``model`` of ``"all"`` returns ``None`` as the parameter set."""

    p = Path(json_path)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise MissingCaseData(f"Case file {p} must hold a JSON object, got {type(data).__name__}")
    # 兼容两种结构：{model, params} 和 {model, T, P, ...}
    params = data.get("params", data)
    if not isinstance(params, dict):
        raise MissingCaseData(f"'params' in {p} must be a JSON object")
    if "model" not in data:
        raise MissingCaseData(f"Case file {p} does not name a 'model'")
    model = str(data["model"])
    parameter_set = None if model.strip().lower() == "all" else ParameterSet.from_name(model)
    return parameter_set, state_from_params(params)
