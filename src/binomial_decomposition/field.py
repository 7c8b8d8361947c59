from __future__ import annotations

"""Exact field arithmetic for character values.

Character values are numbers ``r * exp(2*pi*i*t)`` where ``t`` is a rational
angle and ``r`` is the positive square root of a rational. This module
represents such numbers exactly (`CharacterValue`) and provides the
cyclotomic coefficient fields ``Q(zeta_n)`` in which the associated primes
live (`CyclotomicField`), built on SymPy's algebraic number fields.

Notes
-----
Every such value lies in a cyclotomic field: ``sqrt(p)`` is a Gauss sum in
``Q(zeta_p)`` for ``p = 1 (mod 4)``, in ``Q(zeta_4p)`` for ``p = 3 (mod 4)``
and ``sqrt(2) = zeta_8 + zeta_8**7``. Roots whose modulus squared is not a
rational (e.g. a cube root of 2) are not representable and raise
`ValueError`.
"""

from dataclasses import dataclass
from functools import lru_cache, reduce
from typing import Any, Dict, Iterable, List, Optional, Sequence

import sympy as sp
from sympy.polys.domains import QQ


@dataclass(frozen=True)
class CharacterValue:
    """The nonzero complex number ``modulus * exp(2*pi*i*angle)``.

    ``modulus`` is a positive real whose square is rational, kept in SymPy's
    canonical ``q*sqrt(s)`` form; ``angle`` is a rational reduced into
    ``[0, 1)``. Instances are immutable, hashable and compare by value.
    """

    modulus: sp.Expr = sp.Integer(1)
    angle: sp.Rational = sp.Integer(0)

    def __post_init__(self) -> None:
        modulus = sp.sympify(self.modulus)
        angle = sp.Rational(self.angle)
        norm = modulus**2
        if not (norm.is_Rational and modulus.is_positive):
            raise ValueError(f"modulus must be the positive square root of a rational, got {modulus}.")
        object.__setattr__(self, "modulus", sp.sqrt(norm))
        object.__setattr__(self, "angle", angle % 1)

    @classmethod
    def from_rational(cls, q: Any) -> "CharacterValue":
        """Encode a nonzero rational number."""
        q = sp.Rational(q)
        if q == 0:
            raise ValueError("0 is not a character value.")
        if q > 0:
            return cls(q, 0)
        return cls(-q, sp.Rational(1, 2))

    @classmethod
    def root_of_unity(cls, k: int, n: int) -> "CharacterValue":
        """``exp(2*pi*i*k/n)``."""
        return cls(1, sp.Rational(k, n))

    def __mul__(self, other: "CharacterValue") -> "CharacterValue":
        if not isinstance(other, CharacterValue):
            return NotImplemented
        return CharacterValue(self.modulus * other.modulus, self.angle + other.angle)

    def __truediv__(self, other: "CharacterValue") -> "CharacterValue":
        if not isinstance(other, CharacterValue):
            return NotImplemented
        return CharacterValue(self.modulus / other.modulus, self.angle - other.angle)

    def __pow__(self, n: Any) -> "CharacterValue":
        n = sp.Rational(n)
        if n.q != 1:
            raise ValueError(f"exponent {n} is not an integer.")
        return CharacterValue(self.modulus**n, self.angle * n)

    def is_one(self) -> bool:
        return self.modulus == 1 and self.angle == 0

    @property
    def order(self) -> int:
        """Denominator of the angle (the order of the unit part)."""
        return int(self.angle.q)

    @property
    def radicand(self) -> int:
        """Squarefree ``s`` with ``modulus == q * sqrt(s)`` for a rational ``q``."""
        return _squarefree_part(self.modulus**2)

    @property
    def conductor(self) -> int:
        """Smallest ``n`` such that ``Q(zeta_n)`` contains this value."""
        return _minimal_order(int(sp.ilcm(self.order, _sqrt_conductor(self.radicand))))

    def roots(self, d: int) -> List["CharacterValue"]:
        """All ``d``-th roots of this value.

        Raises
        ------
        ValueError
            If the squared modulus is not the ``d``-th power of a rational,
            i.e. the roots do not have the form ``sqrt(q) * zeta``.
        """
        d = int(d)
        if d < 1:
            raise ValueError(f"root degree must be positive, got {d}.")
        norm = self.modulus**2
        num, exact_num = sp.integer_nthroot(int(norm.p), d)
        den, exact_den = sp.integer_nthroot(int(norm.q), d)
        if not (exact_num and exact_den):
            raise ValueError(f"{self.modulus} has no {d}-th root whose square is rational.")
        r = sp.sqrt(sp.Rational(num, den))
        return [CharacterValue(r, (self.angle + k) / d) for k in range(d)]

    def to_sympy(self) -> sp.Expr:
        return self.modulus * sp.exp(2 * sp.pi * sp.I * self.angle)

    def __str__(self) -> str:
        if self.angle == 0:
            return str(self.modulus)
        if self.angle == sp.Rational(1, 2):
            return str(-self.modulus)
        unit = f"exp(2*pi*I*{self.angle})"
        return unit if self.modulus == 1 else f"{self.modulus}*{unit}"


ONE = CharacterValue()
MINUS_ONE = CharacterValue.from_rational(-1)


def _squarefree_part(q: sp.Rational) -> int:
    # sqrt(p/q) == sqrt(p*q) / q
    n = int(q.p) * int(q.q)
    s = 1
    for p, e in sp.factorint(n).items():
        if e % 2:
            s *= p
    return s


def _sqrt_conductor(s: int) -> int:
    n = 1
    for p in sp.factorint(s):
        if p == 2:
            n = sp.ilcm(n, 8)
        elif p % 4 == 1:
            n = sp.ilcm(n, p)
        else:
            n = sp.ilcm(n, 4 * p)
    return int(n)


def evaluate_product(values: Sequence[CharacterValue], exponents: Sequence[Any]) -> CharacterValue:
    """Evaluate the factored product ``prod(values[i] ** exponents[i])``.

    Exponents must be integral.
    """
    if len(values) != len(exponents):
        raise ValueError("values and exponents must have the same length.")
    result = ONE
    for value, e in zip(values, exponents):
        e = sp.Rational(e)
        if e.q != 1:
            raise ValueError(f"exponent {e} is not an integer.")
        if e:
            result = result * value**e
    return result


def _minimal_order(n: int) -> int:
    # Q(zeta_n) == Q(zeta_{n/2}) when n = 2 (mod 4)
    return n // 2 if n % 4 == 2 else n


_orders_by_domain: Dict[Any, int] = {}


@lru_cache(maxsize=None)
def _cyclotomic_domain(order: int):
    domain = QQ if order == 1 else QQ.cyclotomic_field(order)
    _orders_by_domain[domain] = order
    return domain


@dataclass(frozen=True)
class CyclotomicField:
    """The coefficient field ``Q(zeta_order)``; order 1 is ``Q`` itself."""

    order: int = 1

    def __post_init__(self) -> None:
        order = int(self.order)
        if order < 1:
            raise ValueError(f"order must be positive, got {order}.")
        object.__setattr__(self, "order", _minimal_order(order))

    @property
    def domain(self):
        """The SymPy domain (``QQ`` or an algebraic field)."""
        return _cyclotomic_domain(self.order)

    @property
    def zeta(self):
        """The generator ``exp(2*pi*i/order)`` as a domain element."""
        K = self.domain
        return K.one if self.order == 1 else K.unit

    def contains(self, value: CharacterValue) -> bool:
        return self.order % value.conductor == 0

    def element(self, value: CharacterValue):
        """Encode ``value`` as an element of this field."""
        if not self.contains(value):
            raise ValueError(f"{value} does not lie in {self}.")
        K = self.domain
        N = self.order
        s = value.radicand
        q = K.from_sympy(sp.sqrt(value.modulus**2 / s))
        if s != 1:
            q = q * self.square_root(s)
        t = value.angle
        if (t * N).q == 1:
            return q * self.zeta ** (int(t * N) % N)
        # N odd: -1 is not a power of zeta
        shifted = (t - sp.Rational(1, 2)) * N
        return -(q * self.zeta ** (int(shifted) % N))

    def square_root(self, s: int):
        """``sqrt(s)`` for a positive squarefree ``s``, as a product of Gauss sums."""
        K = self.domain
        N = self.order
        result = K.one
        for p in sp.factorint(s):
            if N % _sqrt_conductor(p):
                raise ValueError(f"sqrt({p}) does not lie in {self}.")
            if p == 2:
                z8 = self.zeta ** (N // 8)
                root = z8 + z8**7
            else:
                zp = self.zeta ** (N // p)
                gauss = K.zero
                for a in range(1, p):
                    if sp.legendre_symbol(a, p) == 1:
                        gauss = gauss + zp**a
                    else:
                        gauss = gauss - zp**a
                # the Gauss sum is sqrt(p) or i*sqrt(p)
                root = gauss if p % 4 == 1 else -(self.zeta ** (N // 4)) * gauss
            result = result * root
        return result

    def _rational_times_unit(self, c) -> Optional[CharacterValue]:
        K = self.domain
        zeta_inv = self.zeta ** (self.order - 1)
        x = c
        for k in range(self.order):
            if x.is_ground:
                q = K.dom.to_sympy(x.LC())
                return CharacterValue.from_rational(q) * CharacterValue.root_of_unity(k, self.order)
            x = x * zeta_inv
        return None

    def value(self, c) -> CharacterValue:
        """Decode a field element of the form ``sqrt(q) * zeta**k``."""
        K = self.domain
        if not c:
            raise ValueError("0 is not a character value.")
        if self.order == 1:
            return CharacterValue.from_rational(K.to_sympy(c))
        v = self._rational_times_unit(c)
        if v is not None:
            return v
        square = self._rational_times_unit(c * c)
        if square is not None:
            root = CharacterValue(sp.sqrt(square.modulus), square.angle / 2)
            for candidate in (root, root * MINUS_ONE):
                if self.contains(candidate) and self.element(candidate) == c:
                    return candidate
        raise ValueError(f"{K.to_sympy(c)} is not a square root of a rational times a root of unity.")

    def embed(self, c, target: "CyclotomicField"):
        """Map ``c`` along the inclusion ``Q(zeta_n) -> Q(zeta_m)``."""
        if target.order % self.order:
            raise ValueError(f"{self} is not a subfield of {target}.")
        if target.order == self.order:
            return c
        T = target.domain
        if self.order == 1:
            return T.convert(c, QQ)
        z = target.zeta ** (target.order // self.order)
        result = T.zero
        for coeff in c.to_list():
            result = result * z + T.convert(coeff, QQ)
        return result

    def __str__(self) -> str:
        return "QQ" if self.order == 1 else f"QQ(zeta_{self.order})"


def common_field(*fields: CyclotomicField) -> CyclotomicField:
    """Smallest cyclotomic field containing all ``fields``."""
    return CyclotomicField(reduce(sp.ilcm, (f.order for f in fields), 1))


def field_for_values(values: Iterable[CharacterValue]) -> CyclotomicField:
    """Smallest cyclotomic field containing all ``values``."""
    return CyclotomicField(reduce(sp.ilcm, (v.conductor for v in values), 1))


def field_of_domain(domain) -> CyclotomicField:
    """The `CyclotomicField` whose SymPy domain is ``domain``."""
    if domain.is_QQ:
        return CyclotomicField(1)
    try:
        return CyclotomicField(_orders_by_domain[domain])
    except KeyError:
        raise ValueError(f"{domain} is not a cyclotomic field of this package.") from None
