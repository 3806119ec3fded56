GAS_CONSTANT = {
    "J/(mol*K)": 8.314462618,
    "m3*Pa/(mol*K)": 8.314462618,
    "bar*cm3/(mol*K)": 83.14462618,
    "L*bar/(mol*K)": 0.08314462618,
    "cm3*atm/(mol*K)": 82.05736608,
    "L*atm/(mol*K)": 0.08205736608,
}  # 单位字符串 -> R


def gas_constant(unit: str) -> float:
    key = unit.replace(" ", "").replace("·", "*")
    if key not in GAS_CONSTANT:
        raise ValueError(f"Unknown gas constant unit '{unit}'; expected one of {sorted(GAS_CONSTANT)}")
    return GAS_CONSTANT[key]


def assert_unit(actual: str, expected: str, what: str):
    if actual != expected:
        raise ValueError(f"Unit mismatch for {what}: got '{actual}', expected '{expected}'")
