from cubiceos.cli import format_result
from cubiceos.eos import ParameterSet, StateInput, evaluate

def main():
    # n-butane, 350 K, 9.4573 bar；R 取 bar·cm^3/(mol·K)
    state = StateInput(T=350.0, P=9.4573, Tc=425.1, Pc=37.96, R=83.14)
    res = evaluate(ParameterSet.RK, state)
    print(f"[Redlich-Kwong] {res.classification.value}")
    for line in format_result(res):
        print("  " + line)

if __name__ == "__main__":
    main()
