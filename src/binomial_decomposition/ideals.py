from __future__ import annotations

"""Polynomial ideals over cyclotomic fields.

All ideal computations stay inside SymPy's sparse polynomial rings
(``sympy.polys.rings``) and its Buchberger/F5B Groebner engine
(``sympy.polys.groebnertools``). Everything is exact.

Public API:
- PolynomialRing, polynomial_ring
- Ideal
- eliminate, intersect, quotient, saturation, saturation_with_index,
  saturate_by_variables, leading_ideal

Notes
-----
- Variables are addressed by their 0-based index in the ring.
- Ideals are immutable. Every operation builds a new ideal; the reduced
  Groebner basis (degree reverse lexicographic) is computed lazily and
  cached on the instance.
- Elimination uses a block order (``ProductOrder`` of two grevlex blocks) on
  an auxiliary ring whose first block holds the variables to eliminate.
  Intersection, quotient and saturation reduce to elimination of one extra
  variable ``t``.
"""

from dataclasses import dataclass
from functools import cached_property, lru_cache
from operator import itemgetter
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union
import logging

import sympy as sp
from sympy.polys.groebnertools import groebner
from sympy.polys.orderings import ProductOrder, grevlex
from sympy.polys.rings import PolyElement, PolyRing

from .config import get_settings
from .field import CyclotomicField, common_field, field_of_domain

logger = logging.getLogger(__name__)

Monomial = Tuple[int, ...]
TermDict = Dict[Monomial, Any]


@lru_cache(maxsize=None)
def _block_order(k: int) -> ProductOrder:
    """Elimination order for the first ``k`` variables."""
    return ProductOrder(
        (grevlex, itemgetter(slice(None, k))),
        (grevlex, itemgetter(slice(k, None))),
    )


@dataclass(frozen=True)
class PolynomialRing:
    """``K[x_0, ..., x_{n-1}]`` with ``K`` a cyclotomic field."""

    symbols: Tuple[sp.Symbol, ...]
    field: CyclotomicField = CyclotomicField(1)

    def __post_init__(self) -> None:
        syms = tuple(sp.Symbol(s) if isinstance(s, str) else s for s in self.symbols)
        if len(set(syms)) != len(syms):
            raise ValueError("ring symbols must be distinct.")
        object.__setattr__(self, "symbols", syms)

    @property
    def poly_ring(self) -> PolyRing:
        return PolyRing(self.symbols, self.field.domain, grevlex)

    @property
    def domain(self):
        return self.field.domain

    @property
    def nvars(self) -> int:
        return len(self.symbols)

    @property
    def gens(self) -> Tuple[PolyElement, ...]:
        return tuple(self.poly_ring.gens)

    @property
    def one(self) -> PolyElement:
        return self.poly_ring.one

    @property
    def zero(self) -> PolyElement:
        return self.poly_ring.zero

    def monomial(self, exponents: Sequence[int]) -> PolyElement:
        exps = tuple(int(e) for e in exponents)
        if len(exps) != self.nvars or any(e < 0 for e in exps):
            raise ValueError(f"invalid exponent vector {exps}.")
        return self.poly_ring.term_new(exps, self.domain.one)

    def binomial(self, u: Sequence[int], coefficient: Any = None) -> PolyElement:
        """``x^{u+} - c * x^{u-}`` for an integer vector ``u`` (``c`` defaults to 1)."""
        u = [int(e) for e in u]
        plus = self.monomial([max(e, 0) for e in u])
        minus = self.monomial([max(-e, 0) for e in u])
        if coefficient is None:
            return plus - minus
        return plus - minus * coefficient

    def extend(self, field: CyclotomicField) -> "PolynomialRing":
        return PolynomialRing(self.symbols, field)

    def __call__(self, f: Any) -> PolyElement:
        """Convert ``f`` (ring element, SymPy expression or number) into this ring."""
        P = self.poly_ring
        if isinstance(f, PolyElement):
            if f.ring == P:
                return f
            if tuple(f.ring.symbols) != self.symbols:
                raise ValueError(f"{f} does not belong to a ring in {self.symbols}.")
            source = field_of_domain(f.ring.domain)
            return P.from_dict({m: source.embed(c, self.field) for m, c in f.items()})
        expr = sp.sympify(f)
        extra = expr.free_symbols - set(self.symbols)
        if extra:
            raise ValueError(f"{expr} involves symbols outside the ring: {sorted(map(str, extra))}.")
        if expr.free_symbols:
            return P.from_expr(expr)
        return P.ground_new(P.domain.from_sympy(expr))

    def __str__(self) -> str:
        return f"{self.field}[{', '.join(map(str, self.symbols))}]"


def polynomial_ring(
    variables: Union[int, Sequence[Union[str, sp.Symbol]]],
    field: Optional[CyclotomicField] = None,
) -> Tuple[PolynomialRing, Tuple[PolyElement, ...]]:
    """Create a ring and return it together with its generators.

    ``polynomial_ring(3)`` uses the names ``x1, x2, x3``.
    """
    if isinstance(variables, int):
        names = [f"x{i + 1}" for i in range(variables)]
    else:
        names = list(variables)
    R = PolynomialRing(tuple(names), field or CyclotomicField(1))
    return R, R.gens


@dataclass(frozen=True, eq=False)
class Ideal:
    """A finitely generated ideal of a `PolynomialRing`.

    Generators may be ring elements or SymPy expressions. Zero generators are
    dropped; the empty generating set is the zero ideal.
    """

    ring: PolynomialRing
    gens: Tuple[PolyElement, ...] = ()

    def __post_init__(self) -> None:
        converted = tuple(g for g in (self.ring(f) for f in self.gens) if g)
        object.__setattr__(self, "gens", converted)

    @classmethod
    def unit(cls, ring: PolynomialRing) -> "Ideal":
        return cls(ring, (ring.one,))

    @classmethod
    def zero_ideal(cls, ring: PolynomialRing) -> "Ideal":
        return cls(ring, ())

    @cached_property
    def _groebner(self) -> Tuple[PolyElement, ...]:
        if not self.gens:
            return ()
        G = groebner(list(self.gens), self.ring.poly_ring, method=get_settings().groebner_method)
        return tuple(G)

    def groebner_basis(self) -> Tuple[PolyElement, ...]:
        """Reduced, monic Groebner basis (grevlex)."""
        return self._groebner

    def reduce(self, f: Any) -> PolyElement:
        """Normal form of ``f`` modulo the Groebner basis."""
        f = self.ring(f)
        G = self.groebner_basis()
        return f.rem(list(G)) if G and f else f

    def contains(self, f: Any) -> bool:
        return not self.reduce(f)

    def __contains__(self, f: Any) -> bool:
        return self.contains(f)

    def is_zero(self) -> bool:
        return not self.gens

    def is_one(self) -> bool:
        return any(g.is_ground for g in self.groebner_basis())

    def issubset(self, other: "Ideal") -> bool:
        first, second = _align(self, other)
        return all(second.contains(g) for g in first.gens)

    def __le__(self, other: "Ideal") -> bool:
        return self.issubset(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ideal):
            return NotImplemented
        if self is other:
            return True
        first, second = _align(self, other)
        # reduced Groebner bases are unique
        return set(first.groebner_basis()) == set(second.groebner_basis())

    def __hash__(self) -> int:
        return hash((self.ring.symbols, frozenset(g.LM for g in self.groebner_basis())))

    def __add__(self, other: Any) -> "Ideal":
        if isinstance(other, Ideal):
            first, second = _align(self, other)
            return Ideal(first.ring, first.gens + second.gens)
        if isinstance(other, (list, tuple)):
            return Ideal(self.ring, self.gens + tuple(other))
        return Ideal(self.ring, self.gens + (other,))

    def extend(self, field: CyclotomicField) -> "Ideal":
        """The extension of this ideal to coefficients in ``field``."""
        if field == self.ring.field:
            return self
        return Ideal(self.ring.extend(field), self.gens)

    def as_exprs(self) -> List[sp.Expr]:
        return [g.as_expr() for g in self.gens]

    def __repr__(self) -> str:
        if not self.gens:
            return "Ideal(0)"
        return f"Ideal({', '.join(str(e) for e in self.as_exprs())})"


IdealOrPoly = Union[Ideal, Any]


def _align(I: Ideal, J: Ideal) -> Tuple[Ideal, Ideal]:
    """Bring two ideals in the same variables over a common coefficient field."""
    if I.ring == J.ring:
        return I, J
    if I.ring.symbols != J.ring.symbols:
        raise ValueError(f"ideals live in different rings: {I.ring} and {J.ring}.")
    K = common_field(I.ring.field, J.ring.field)
    return I.extend(K), J.extend(K)


def _as_generators(I: Ideal, J: IdealOrPoly) -> Tuple[PolyElement, ...]:
    if isinstance(J, Ideal):
        return _align(I, J)[1].gens
    return tuple(g for g in (I.ring(J),) if g)


def _elimination_basis(
    domain, symbols: Sequence[sp.Symbol], k: int, polys: Iterable[TermDict]
) -> List[TermDict]:
    """Reduced Groebner basis elements free of the first ``k`` of ``symbols``."""
    E = PolyRing(tuple(symbols), domain, _block_order(k))
    seq = [p for p in (E.from_dict(terms) for terms in polys) if p]
    if not seq:
        return []
    G = groebner(seq, E, method=get_settings().groebner_method)
    return [dict(g) for g in G if not any(g.LM[:k])]


def _eliminate_auxiliary(R: PolynomialRing, polys: Iterable[TermDict]) -> Ideal:
    """Eliminate ``t`` from polynomials in ``K[t, x]`` (``t`` exponent first)."""
    symbols = (sp.Dummy("t"),) + R.symbols
    G = _elimination_basis(R.domain, symbols, 1, polys)
    return Ideal(R, tuple(R.poly_ring.from_dict({m[1:]: c for m, c in g.items()}) for g in G))


def _times_t_power(f: PolyElement, e: int, sign: int = 1) -> TermDict:
    return {(e,) + m: c if sign > 0 else -c for m, c in f.items()}


def eliminate(I: Ideal, variables: Iterable[int]) -> Ideal:
    """``I`` intersected with the subring in the variables not listed."""
    R = I.ring
    drop = sorted(set(int(i) for i in variables))
    if not drop:
        return I
    if drop[0] < 0 or drop[-1] >= R.nvars:
        raise ValueError(f"variable index out of range: {drop}.")
    keep = [i for i in range(R.nvars) if i not in drop]
    perm = drop + keep
    position = {i: pos for pos, i in enumerate(perm)}

    symbols = [R.symbols[i] for i in perm]
    polys = [{tuple(m[i] for i in perm): c for m, c in g.items()} for g in I.gens]
    G = _elimination_basis(R.domain, symbols, len(drop), polys)
    back = [
        R.poly_ring.from_dict({tuple(m[position[i]] for i in range(R.nvars)): c for m, c in g.items()})
        for g in G
    ]
    return Ideal(R, tuple(back))


def intersect(I: Ideal, J: Ideal) -> Ideal:
    """``I & J``, computed as ``(t*I + (1 - t)*J) & K[x]``."""
    I, J = _align(I, J)
    R = I.ring
    if I.is_zero() or J.is_zero():
        return Ideal.zero_ideal(R)
    if I.is_one():
        return J
    if J.is_one():
        return I

    polys = [_times_t_power(f, 1) for f in I.gens]
    for g in J.gens:
        terms = _times_t_power(g, 0)
        terms.update(_times_t_power(g, 1, sign=-1))
        polys.append(terms)
    return _eliminate_auxiliary(R, polys)


def quotient(I: Ideal, J: IdealOrPoly) -> Ideal:
    """The colon ideal ``I : J``."""
    R = I.ring
    gens = _as_generators(I, J)
    if not gens:
        return Ideal.unit(R)
    result: Optional[Ideal] = None
    for f in gens:
        if I.is_zero():
            colon = I
        else:
            meet = intersect(I, Ideal(R, (f,)))
            colon = Ideal(R, tuple(g.exquo(f) for g in meet.gens))
        result = colon if result is None else intersect(result, colon)
    return result


def saturation(I: Ideal, J: IdealOrPoly) -> Ideal:
    """The saturation ``I : J^infinity``."""
    R = I.ring
    gens = _as_generators(I, J)
    if not gens:
        return Ideal.unit(R)
    result: Optional[Ideal] = None
    for f in gens:
        sat = _saturate_by_element(I, f)
        result = sat if result is None else intersect(result, sat)
    return result


def _saturate_by_element(I: Ideal, f: PolyElement) -> Ideal:
    R = I.ring
    if I.is_zero() or f.is_ground:
        return I
    # I + (1 - t*f)
    polys = [_times_t_power(g, 0) for g in I.gens]
    aux = {(0,) * (R.nvars + 1): R.domain.one}
    aux.update(_times_t_power(f, 1, sign=-1))
    polys.append(aux)
    return _eliminate_auxiliary(R, polys)


def saturation_with_index(I: Ideal, J: IdealOrPoly) -> Tuple[Ideal, int]:
    """Return ``(I : J^infinity, k)`` with ``k`` minimal such that ``I : J^k`` is saturated."""
    S = saturation(I, J)
    if S.issubset(I):
        return I, 0
    k = 0
    Q = I
    while True:
        Q = quotient(Q, J)
        k += 1
        if S.issubset(Q):
            logger.debug("saturation reached at exponent %d", k)
            return S, k


def saturate_by_variables(I: Ideal, indices: Iterable[int]) -> Ideal:
    """Saturate successively by each variable ``x_i``, ``i`` in ``indices``."""
    R = I.ring
    for i in indices:
        I = saturation(I, R.gens[i])
    return I


def leading_ideal(I: Ideal) -> Ideal:
    """Monomial ideal of the leading terms of ``I`` (grevlex)."""
    R = I.ring
    return Ideal(R, tuple(R.monomial(g.LM) for g in I.groebner_basis()))
