"""Cellular and primary decomposition of a small binomial ideal.

The ideal I = (x - y, x^3 - 1, z*y^2 - z) is not cellular: z is a zero
divisor modulo I without being nilpotent. This script splits I into
cellular components and then computes its primary decomposition over the
cyclotomic field Q(zeta_3).

Run:
    python examples/primary_decomposition_example.py
"""

from __future__ import annotations

import logging

from binomial_decomposition import (
    binomial_primary_decomposition,
    cellular_decomposition,
    is_cellular,
    noncellular_example_ideal,
)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    I = noncellular_example_ideal()
    print("I =", I)

    cell = is_cellular(I)
    witness = I.ring.symbols[cell.variables[0]]
    print(f"cellular: {cell.cellular} (witness variable {witness})")

    print("\nCellular components:")
    for J in cellular_decomposition(I):
        print("  ", J)

    print("\nPrimary decomposition:")
    for Q, P in binomial_primary_decomposition(I):
        print(f"   {Q}  over {Q.ring.field}")
        print(f"      associated prime {P}")


if __name__ == "__main__":
    main()
