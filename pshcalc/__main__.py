from __future__ import annotations

HELP = """pshcalc: exhaustive enumeration of finite monoids, semigroups, categories and presheaves

Common commands:
  python -m pshcalc.count_monoids --n 3
  python -m pshcalc.count_semigroups --n 3
  python -m pshcalc.composable_triples --m 4 --o 2 --cross_check
  python -m pshcalc.monoid_acts --n 3 --max_sections 4
  python -m pshcalc.sweep --config configs/sweep.yaml

"""

def main() -> None:
    print(HELP)

if __name__ == "__main__":
    main()
