"""Binomial and unital tests for polynomials and ideals."""

from __future__ import annotations

from typing import Any, Iterable

import sympy as sp
from sympy.polys.rings import PolyElement

from .ideals import Ideal


def _term_count(f: Any) -> int:
    if isinstance(f, PolyElement):
        return len(f)
    expr = sp.expand(sp.sympify(f))
    if expr == 0:
        return 0
    return len(sp.Add.make_args(expr))


def _all_binomial(polys: Iterable[PolyElement]) -> bool:
    return all(len(p) <= 2 for p in polys)


def _all_unital(polys: Iterable[PolyElement]) -> bool:
    for p in polys:
        if len(p) > 2:
            return False
        if len(p) == 2:
            c1, c2 = p.coeffs()
            if c1 + c2:
                return False
    return True


def is_binomial(f: Any) -> bool:
    """True iff ``f`` has at most two terms, or, for an ideal, is generated by such.

    For an `Ideal` the given generators are checked first; a negative answer
    there is not conclusive, so the reduced Groebner basis decides.
    """
    if isinstance(f, Ideal):
        return _all_binomial(f.gens) or _all_binomial(f.groebner_basis())
    return _term_count(f) <= 2


def is_unital(I: Ideal) -> bool:
    """True iff ``I`` is generated by monomials and pure differences ``x^u - x^v``.

    The zero ideal is not unital.
    """
    if I.is_zero():
        return False
    return _all_unital(I.gens) or _all_unital(I.groebner_basis())
