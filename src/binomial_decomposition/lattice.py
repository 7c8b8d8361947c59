from __future__ import annotations

"""Exact integer-lattice linear algebra.

Lattices are given by generating rows. Matrices are accepted either as SymPy
matrices or as sequences of integer rows; results are returned as lists of
Python ``int`` rows.

The row echelon form computed here carries its unimodular transform, which
is what exact left-solving and the transport of character values need. The
canonical form used for lattice equality and for lattice saturation is
SymPy's Hermite normal form.
"""

from typing import Any, List, Optional, Sequence, Tuple

import sympy as sp
from sympy.matrices.normalforms import hermite_normal_form
from sympy.core.intfunc import igcdex

from .errors import InternalInvariantError

Rows = List[List[int]]


def as_rows(A: Any) -> Rows:
    """Convert a SymPy matrix or nested sequence into integer rows."""
    if isinstance(A, sp.MatrixBase):
        return [[int(A[i, j]) for j in range(A.cols)] for i in range(A.rows)]
    return [[int(x) for x in row] for row in A]


def ncols_of(A: Any) -> Optional[int]:
    if isinstance(A, sp.MatrixBase):
        return A.cols
    rows = list(A)
    return len(rows[0]) if rows else None


def echelon_form(A: Any, ncols: Optional[int] = None) -> Tuple[Rows, Rows, int]:
    """Row Hermite normal form with transform.

    Parameters
    ----------
    A:
        Integer matrix (rows generate the lattice).
    ncols:
        Number of columns; only needed when ``A`` has no rows.

    Returns
    -------
    (H, U, rank)
        ``U`` is unimodular with ``U*A == H``. The first ``rank`` rows of ``H``
        are a basis of the row lattice in echelon form with positive pivots
        and reduced entries above each pivot; the remaining rows are zero and
        the matching rows of ``U`` span the left kernel of ``A``.
    """
    H = as_rows(A)
    m = len(H)
    n = ncols if ncols is not None else (len(H[0]) if H else 0)
    U = [[int(i == j) for j in range(m)] for i in range(m)]

    r = 0
    for col in range(n):
        if r == m:
            break
        for i in range(r + 1, m):
            b = H[i][col]
            if b == 0:
                continue
            a = H[r][col]
            s, t, g = igcdex(a, b)
            ag, bg = a // g, b // g
            for M in (H, U):
                top, low = M[r], M[i]
                M[r] = [s * x + t * y for x, y in zip(top, low)]
                M[i] = [-bg * x + ag * y for x, y in zip(top, low)]
        pivot = H[r][col]
        if pivot == 0:
            continue
        if pivot < 0:
            H[r] = [-x for x in H[r]]
            U[r] = [-x for x in U[r]]
            pivot = -pivot
        for i in range(r):
            q = H[i][col] // pivot
            if q:
                H[i] = [x - q * y for x, y in zip(H[i], H[r])]
                U[i] = [x - q * y for x, y in zip(U[i], U[r])]
        r += 1
    return H, U, r


def lattice_rank(A: Any, ncols: Optional[int] = None) -> int:
    return echelon_form(A, ncols)[2]


def is_zero_lattice(A: Any) -> bool:
    return all(x == 0 for row in as_rows(A) for x in row)


def hnf(A: Any) -> Rows:
    """Canonical basis of the row lattice of ``A`` (zero rows dropped).

    SymPy normalises the column lattice, so the row lattice is handled
    through the transpose.
    """
    rows = as_rows(A)
    if is_zero_lattice(rows):
        return []
    W = hermite_normal_form(sp.Matrix(rows).T).T
    return as_rows(W)


def have_same_span(A: Any, B: Any) -> bool:
    """True iff the rows of ``A`` and ``B`` generate the same lattice."""
    nA, nB = ncols_of(A), ncols_of(B)
    if nA is not None and nB is not None and nA != nB:
        raise ValueError(f"column mismatch: {nA} != {nB}.")
    return hnf(A) == hnf(B)


def solve_left(A: Any, u: Sequence[int], ncols: Optional[int] = None) -> Optional[List[int]]:
    """Integral ``s`` with ``s * A == u``, or ``None`` if ``u`` is not in the lattice."""
    u = [int(x) for x in u]
    H, U, r = echelon_form(A, ncols if ncols is not None else len(u))
    m = len(H)
    residual = list(u)
    coeffs = []
    for k in range(r):
        row = H[k]
        c = next(j for j, x in enumerate(row) if x)
        q, rem = divmod(residual[c], row[c])
        if rem:
            return None
        coeffs.append(q)
        if q:
            residual = [x - q * y for x, y in zip(residual, row)]
    if any(residual):
        return None
    s = [0] * m
    for q, transform in zip(coeffs, U):
        if q:
            s = [x + q * y for x, y in zip(s, transform)]
    return s


def saturation_basis(B: Any) -> Tuple[Rows, Rows, int]:
    """Basis of the saturation of the lattice spanned by the independent rows ``B``.

    Let ``W`` be the Hermite normal form of the column lattice of ``B`` and
    ``d = |det W|``. With ``adj = d * W**-1`` (an integer matrix, ``adj*W == d*Id``)
    the rows of ``S = adj * B / d`` are a basis of ``(Q*B) & Z^n``.

    Returns
    -------
    (S, adj, d)
    """
    rows = as_rows(B)
    k = len(rows)
    if k == 0:
        return [], [], 1
    W = hermite_normal_form(sp.Matrix(rows))
    if W.shape != (k, k):
        raise ValueError("saturation_basis requires linearly independent rows.")
    d = abs(int(W.det()))
    adj_m = W.inv() * d
    adj = as_rows(adj_m)
    S = []
    for i in range(k):
        combo = [sum(adj[i][j] * rows[j][c] for j in range(k)) for c in range(len(rows[0]))]
        if any(x % d for x in combo):
            raise InternalInvariantError("saturation basis is not integral.")
        S.append([x // d for x in combo])
    return S, adj, d
