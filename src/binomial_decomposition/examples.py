from __future__ import annotations

from .ideals import Ideal, polynomial_ring


def cellular_example_ideal() -> Ideal:
    """A cellular ideal in six variables with embedded components.

    I = (x5*(x1^3 - x2^3), x6*(x3 - x4), x5^2, x6^2, x5*x6)

    Cell variables: x1, x2, x3, x4. Its hull is (x5, x6) and it has five
    associated primes, three of which differ by a cube root of unity.
    """
    R, (x1, x2, x3, x4, x5, x6) = polynomial_ring(6)
    return Ideal(R, (x5 * (x1**3 - x2**3), x6 * (x3 - x4), x5**2, x6**2, x5 * x6))


def noncellular_example_ideal() -> Ideal:
    """I = (x - y, x^3 - 1, z*y^2 - z) in Q[x, y, z].

    ``z`` is a zero divisor that is not nilpotent, so ``I`` is not cellular.
    Its cellular components are (x - 1, y - 1) and I + (z).
    """
    R, (x, y, z) = polynomial_ring(["x", "y", "z"])
    return Ideal(R, (x - y, x**3 - 1, z * y**2 - z))


def unital_example_ideal() -> Ideal:
    """I = (x^2 - y^3, z^2): a pure difference and a monomial."""
    R, (x, y, z) = polynomial_ring(["x", "y", "z"])
    return Ideal(R, (x**2 - y**3, z**2))


def birth_death_ideal(m: int, n: int) -> Ideal:
    """Binomial ideal of a two-dimensional birth-death process.

    The variables come in four blocks, in this order:
    U (m+1 x n), R (m x n+1), D (m+1 x m), L (m+1 x n+1), named like
    ``U_i_j`` with 1-based indices. For each ``1 <= i <= m`` and
    ``1 <= j <= n`` there are four generators::

        U[i,j]*R[i,j+1]   - R[i,j]*U[i+1,j]
        D[i,j]*R[i,j]     - R[i,j+1]*D[i+1,j]
        D[i+1,j]*L[i+1,j] - L[i+1,j+1]*D[i,j]
        U[i+1,j]*L[i+1,j+1] - L[i+1,j]*U[i,j]

    The D block has ``m`` columns, so ``n <= m`` is required.
    """
    if m < 1 or n < 1:
        raise ValueError("m and n must be positive.")
    if n > m:
        raise ValueError("birth_death_ideal requires n <= m.")

    blocks = (("U", m + 1, n), ("R", m, n + 1), ("D", m + 1, m), ("L", m + 1, n + 1))
    names = [
        f"{label}_{i}_{j}"
        for label, rows, cols in blocks
        for i in range(1, rows + 1)
        for j in range(1, cols + 1)
    ]
    ring, gens = polynomial_ring(names)
    var = dict(zip(names, gens))

    def U(i, j):
        return var[f"U_{i}_{j}"]

    def R(i, j):
        return var[f"R_{i}_{j}"]

    def D(i, j):
        return var[f"D_{i}_{j}"]

    def L(i, j):
        return var[f"L_{i}_{j}"]

    polys = []
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            polys.append(U(i, j) * R(i, j + 1) - R(i, j) * U(i + 1, j))
            polys.append(D(i, j) * R(i, j) - R(i, j + 1) * D(i + 1, j))
            polys.append(D(i + 1, j) * L(i + 1, j) - L(i + 1, j + 1) * D(i, j))
            polys.append(U(i + 1, j) * L(i + 1, j + 1) - L(i + 1, j) * U(i, j))
    return Ideal(ring, tuple(polys))
