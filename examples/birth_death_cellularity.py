"""Cellularity of the smallest birth-death ideal.

birth_death_ideal(1, 1) has ten variables and four pure-difference
generators. The script reports its cell variables, or the variable that
witnesses non-cellularity together with the cellular components.

Run:
    python examples/birth_death_cellularity.py
"""

from __future__ import annotations

from binomial_decomposition import birth_death_ideal, cellular_decomposition_macaulay, is_cellular


def main() -> None:
    I = birth_death_ideal(1, 1)
    print("ring:", I.ring)
    for g in I.as_exprs():
        print("  ", g)

    cell = is_cellular(I)
    names = [str(I.ring.symbols[i]) for i in cell.variables]
    if cell.cellular:
        print("cellular with cell variables", names)
        return

    print("not cellular, witness", names[0])
    parts = cellular_decomposition_macaulay(I)
    print(f"{len(parts)} cellular components:")
    for J in parts:
        print("  ", J)


if __name__ == "__main__":
    main()
