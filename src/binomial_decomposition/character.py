from __future__ import annotations

"""Partial characters on sublattices of Z^n.

A partial character is a group homomorphism from a lattice ``L`` in ``Z^n``
into the multiplicative group of a field. It is stored by a generating
matrix ``A`` (rows generate ``L``), the images ``b`` of those rows, and the
set ``D`` of cell variables the lattice lives on.

Public API:
- PartialCharacter, partial_character
- have_same_domain
- saturations
"""

from dataclasses import dataclass
from itertools import product
from typing import Any, FrozenSet, Iterable, List, Sequence, Tuple
import logging

import sympy as sp

from .field import CharacterValue, evaluate_product
from .lattice import (
    as_rows,
    echelon_form,
    have_same_span,
    hnf,
    is_zero_lattice,
    lattice_rank,
    saturation_basis,
    solve_left,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PartialCharacter:
    """The triple ``(A, b, D)``.

    Parameters
    ----------
    A:
        Integer matrix whose rows generate the lattice.
    b:
        One `CharacterValue` per row of ``A``.
    D:
        Indices of the cell variables the lattice is supported on.
    """

    A: sp.ImmutableMatrix
    b: Tuple[CharacterValue, ...]
    D: FrozenSet[int] = frozenset()

    def __post_init__(self) -> None:
        A = sp.ImmutableMatrix(self.A)
        b = tuple(v if isinstance(v, CharacterValue) else CharacterValue.from_rational(v) for v in self.b)
        if A.rows != len(b):
            raise ValueError(f"{A.rows} lattice generators but {len(b)} values.")
        if any(not x.is_integer for x in A):
            raise ValueError("lattice generators must be integer vectors.")
        object.__setattr__(self, "A", A)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "D", frozenset(int(i) for i in self.D))

    @property
    def nvars(self) -> int:
        return self.A.cols

    @property
    def rank(self) -> int:
        return lattice_rank(self.A, self.nvars)

    def rows(self) -> List[List[int]]:
        return as_rows(self.A)

    def __call__(self, u: Any) -> CharacterValue:
        """Evaluate the character on the lattice vector ``u``.

        Raises
        ------
        ValueError
            If ``u`` does not lie in the lattice.
        """
        if isinstance(u, sp.MatrixBase):
            if u.rows != 1:
                raise ValueError("expected a single row vector.")
            u = list(u)
        u = [int(x) for x in u]
        if len(u) != self.nvars:
            raise ValueError(f"expected a vector of length {self.nvars}, got {len(u)}.")
        s = solve_left(self.rows(), u, self.nvars)
        if s is None:
            raise ValueError(f"{u} is not in the lattice of the character.")
        return evaluate_product(self.b, s)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialCharacter):
            return NotImplemented
        if self is other:
            return True
        if not have_same_domain(self, other):
            return False
        return all(self(row) == other(row) for row in self.rows())

    def __hash__(self) -> int:
        return hash(tuple(map(tuple, hnf(self.A))))

    def __repr__(self) -> str:
        values = ", ".join(str(v) for v in self.b)
        return f"PartialCharacter(A={self.rows()}, b=[{values}], D={sorted(self.D)})"


def partial_character(
    A: Any, values: Sequence[Any], variables: Iterable[int] = ()
) -> PartialCharacter:
    """Build a `PartialCharacter`; plain rationals are accepted as values."""
    return PartialCharacter(sp.ImmutableMatrix(A), tuple(values), frozenset(variables))


def have_same_domain(P: PartialCharacter, Q: PartialCharacter) -> bool:
    """True iff both characters are defined on the same lattice."""
    return P.nvars == Q.nvars and have_same_span(P.A, Q.A)


def _basis_values(L: PartialCharacter) -> Tuple[List[List[int]], List[CharacterValue]]:
    """A lattice basis of ``L`` and the values of ``L`` on it."""
    H, U, r = echelon_form(L.A, L.nvars)
    return H[:r], [evaluate_product(L.b, U[k]) for k in range(r)]


def saturations(L: PartialCharacter) -> List[PartialCharacter]:
    """All extensions of ``L`` to the saturation of its lattice.

    The values on the saturated basis are determined up to roots of unity:
    with ``adj * W == d * Id`` for the Hermite form ``W``, each new basis
    vector ``s_k`` satisfies ``(d/g) * s_k = sum_j (adj[k][j]/g) * basis_j``
    where ``g = gcd(d, adj[k])``. Every combination of the resulting roots
    is checked against the values of ``L`` on its original generators and
    rejected combinations are dropped.
    """
    if is_zero_lattice(L.A):
        return [L]

    basis, beta = _basis_values(L)
    S, adj, d = saturation_basis(basis)

    candidates: List[List[CharacterValue]] = []
    for row in adj:
        g = sp.igcd(d, *row)
        mu = evaluate_product(beta, [a // g for a in row])
        candidates.append(mu.roots(d // g))

    result: List[PartialCharacter] = []
    for values in product(*candidates):
        P = PartialCharacter(sp.ImmutableMatrix(S), tuple(values), L.D)
        if all(P(row) == v for row, v in zip(L.rows(), L.b)):
            result.append(P)
        else:
            logger.info("discarding saturation candidate %s", [str(v) for v in values])
    logger.debug("%d saturations of index %d lattice", len(result), d)
    return result
