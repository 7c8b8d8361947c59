from __future__ import annotations

"""Conversion between partial characters and binomial ideals.

For a partial character ``P`` on a lattice ``L`` the ideal

    I_+(P) = (x^{u+} - P(u) * x^{u-} : u in L)

is generated by the binomials of a lattice basis, saturated by all
variables. Conversely a cellular binomial ideal determines a partial
character on its cell variables through the exponent differences of the
Groebner basis of its elimination ideal.
"""

from typing import Iterable, Optional, Sequence
import logging

import sympy as sp

from .cellular import is_cellular
from .character import PartialCharacter
from .classify import is_binomial
from .errors import InternalInvariantError, NotBinomialError, NotCellularError, NotUnitalError
from .field import ONE, evaluate_product
from .fourti2 import FourTi2, GroebnerOracle, MarkovOracle, default_markov_oracle, grevlex_cost_matrix
from .ideals import Ideal, PolynomialRing, eliminate, saturate_by_variables
from .lattice import echelon_form, is_zero_lattice, solve_left

logger = logging.getLogger(__name__)


def make_binomials(P: PartialCharacter, R: PolynomialRing) -> Ideal:
    """The ideal of the binomials ``x^{u+} - P(u) x^{u-}``, ``u`` a row of ``P.A``.

    This is in general strictly smaller than ``I_+(P)``.
    """
    _check_ring(P, R)
    return Ideal(
        R, tuple(R.binomial(u, R.field.element(v)) for u, v in zip(P.rows(), P.b))
    )


def binomial_exponents_to_ideal(R: PolynomialRing, rows: Iterable[Sequence[int]]) -> Ideal:
    """The ideal of the pure differences ``x^{u+} - x^{u-}``."""
    return Ideal(R, tuple(R.binomial(u) for u in rows))


def _check_ring(P: PartialCharacter, R: PolynomialRing) -> None:
    if P.nvars != R.nvars:
        raise ValueError(f"character on Z^{P.nvars} does not fit a ring in {R.nvars} variables.")


def ideal_from_character(
    P: PartialCharacter, R: PolynomialRing, oracle: Optional[MarkovOracle] = None
) -> Ideal:
    """The binomial ideal ``I_+(P)`` in ``R``.

    Parameters
    ----------
    P:
        The partial character.
    R:
        Target ring; its coefficient field must contain the values of ``P``.
    oracle:
        Lattice-basis oracle used when all values are 1. Defaults to
        `default_markov_oracle`.
    """
    _check_ring(P, R)
    n = R.nvars
    if is_zero_lattice(P.A):
        return Ideal.zero_ideal(R)

    if P.A.rows == n and P.A == sp.eye(n):
        return make_binomials(P, R)

    if all(v.is_one() for v in P.b):
        oracle = oracle if oracle is not None else default_markov_oracle()
        return binomial_exponents_to_ideal(R, oracle.markov_basis(P.rows()))

    support = [i for i in range(n) if any(P.A[:, i])]
    return saturate_by_variables(make_binomials(P, R), support)


def partial_character_from_ideal(I: Ideal, R: Optional[PolynomialRing] = None) -> PartialCharacter:
    """The partial character of a cellular binomial ideal.

    The lattice is returned in echelon form without zero rows; the values
    are the character's values on those rows.

    Raises
    ------
    NotBinomialError, NotCellularError
        If ``I`` is not binomial or not cellular.
    """
    if R is not None and R.symbols != I.ring.symbols:
        raise ValueError(f"{I} does not live in {R}.")
    R = I.ring
    n = R.nvars
    if not is_binomial(I):
        raise NotBinomialError("partial_character_from_ideal needs a binomial ideal.")
    cell = is_cellular(I)
    if not cell.cellular:
        raise NotCellularError("partial_character_from_ideal needs a cellular ideal.")

    delta = cell.variables
    if not delta:
        return PartialCharacter(sp.zeros(1, n), (ONE,), frozenset())
    J = eliminate(I, [i for i in range(n) if i not in delta])
    if J.is_zero():
        return PartialCharacter(sp.zeros(1, n), (ONE,), frozenset(delta))

    vectors = []
    images = []
    for t in J.groebner_basis():
        if len(t) != 2:
            raise InternalInvariantError(f"{t} in the elimination ideal is not a binomial.")
        (lead, _), (tail, c) = t.terms()
        u = [a - b for a, b in zip(lead, tail)]
        if solve_left(vectors, u, n) is None:
            vectors.append(u)
            images.append(R.field.value(-c))

    H, U, r = echelon_form(vectors, n)
    logger.debug("lattice of rank %d on cell variables %s", r, delta)
    values = tuple(evaluate_product(images, U[k]) for k in range(r))
    return PartialCharacter(sp.Matrix(H[:r]), values, frozenset(delta))


def lattice_groebner_basis(I: Ideal, oracle: Optional[GroebnerOracle] = None) -> Ideal:
    """Groebner basis (grevlex) of a lattice ideal via the oracle's Groebner mode.

    ``I`` must be generated by pure differences of monomials and be
    saturated, i.e. a lattice ideal; its generators span the lattice.
    """
    R = I.ring
    rows = []
    for g in I.gens:
        coeffs = g.coeffs()
        if len(coeffs) != 2 or coeffs[0] + coeffs[1]:
            raise NotUnitalError(f"{g.as_expr()} is not a pure difference of monomials.")
        (lead, _), (tail, _) = g.terms()
        rows.append([a - b for a, b in zip(lead, tail)])
    if not rows:
        return I
    oracle = oracle if oracle is not None else FourTi2.from_settings()
    return binomial_exponents_to_ideal(R, oracle.groebner_basis(rows, grevlex_cost_matrix(R.nvars)))
