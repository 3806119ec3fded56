from pathlib import Path

from cubiceos.cli import format_result
from cubiceos.eos import evaluate_all, load_case_from_json

CASE = Path(__file__).resolve().parents[1] / "data" / "cases" / "nbutane_all_models.json"

def main():
    _, state = load_case_from_json(str(CASE))
    for res in evaluate_all(state):
        print(f"[{res.parameter_set.label}] T={state.T} K, P={state.P} bar -> {res.classification.value}")
        for line in format_result(res):
            print("  " + line)

if __name__ == "__main__":
    main()
