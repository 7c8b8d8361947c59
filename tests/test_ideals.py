import pytest
import sympy as sp

from binomial_decomposition import (
    CharacterValue,
    CyclotomicField,
    Ideal,
    PolynomialRing,
    eliminate,
    intersect,
    leading_ideal,
    polynomial_ring,
    quotient,
    saturate_by_variables,
    saturation,
    saturation_with_index,
)


def test_ring_construction_and_conversion():
    R, (x, y, z) = polynomial_ring(["x", "y", "z"])
    assert R.nvars == 3
    assert str(R) == "QQ[x, y, z]"
    X, Y, Z = sp.symbols("x y z")
    assert R(X**2 - Y) == x**2 - y
    assert R(3) == 3 * R.one
    assert R.binomial([2, -1, 0]) == x**2 - y
    assert R.monomial([0, 1, 2]) == y * z**2
    with pytest.raises(ValueError):
        R(sp.Symbol("w"))
    with pytest.raises(ValueError):
        PolynomialRing(("x", "x"))
    with pytest.raises(ValueError):
        R.monomial([1, -1, 0])


def test_default_variable_names():
    R, gens = polynomial_ring(4)
    assert [str(s) for s in R.symbols] == ["x1", "x2", "x3", "x4"]
    assert len(gens) == 4


def test_extension_lifts_coefficients():
    R, (x, y) = polynomial_ring(["x", "y"])
    K = CyclotomicField(3)
    S = R.extend(K)
    f = S(x - 2 * y)
    assert f.ring == S.poly_ring
    w = K.element(CharacterValue.root_of_unity(1, 3))
    g = S.binomial([1, -1], w)
    assert len(g) == 2


def test_membership_equality_and_zero_generators():
    R, (x, y) = polynomial_ring(["x", "y"])
    I = Ideal(R, (x**2 - y**2, x - y, 0))
    assert len(I.gens) == 2
    assert I == Ideal(R, (x - y,))
    assert x**3 - y**3 in I
    assert x not in I
    assert Ideal.zero_ideal(R).is_zero()
    assert Ideal.unit(R).is_one()
    assert Ideal(R, (x - y,)) <= Ideal(R, (x, y))
    assert hash(I) == hash(Ideal(R, (x - y,)))


def test_equality_across_coefficient_fields():
    R, (x, y) = polynomial_ring(["x", "y"])
    I = Ideal(R, (x - y,))
    assert I == I.extend(CyclotomicField(4))
    assert I.extend(CyclotomicField(4)).ring.field.order == 4


def test_sum_of_ideals_and_polynomials():
    R, (x, y) = polynomial_ring(["x", "y"])
    I = Ideal(R, (x,))
    assert (I + y) == Ideal(R, (x, y))
    assert (I + [y**2]) == Ideal(R, (x, y**2))
    assert (I + Ideal(R, (y,))) == Ideal(R, (x, y))


def test_elimination():
    R, (x, y, z) = polynomial_ring(["x", "y", "z"])
    I = Ideal(R, (x - y, y - z**2))
    J = eliminate(I, [1])
    assert J == Ideal(R, (x - z**2,))
    assert eliminate(I, []) is I
    with pytest.raises(ValueError):
        eliminate(I, [5])


def test_intersection():
    R, (x, y) = polynomial_ring(["x", "y"])
    I = Ideal(R, (x,))
    J = Ideal(R, (y,))
    assert intersect(I, J) == Ideal(R, (x * y,))
    assert intersect(I, Ideal.unit(R)) is I
    assert intersect(I, Ideal.zero_ideal(R)).is_zero()


def test_quotient_and_saturation():
    R, (x, y) = polynomial_ring(["x", "y"])
    I = Ideal(R, (x**3 * y, x * (y - 1)))
    assert quotient(I, x) == Ideal(R, (x**2 * y, y - 1))
    assert saturation(I, x) == Ideal(R, (y, y - 1))
    assert saturation(I, x).is_one()
    assert quotient(I, Ideal.zero_ideal(R)).is_one()


def test_saturation_with_index():
    R, (x, y) = polynomial_ring(["x", "y"])
    I = Ideal(R, (x**2 * y,))
    S, k = saturation_with_index(I, x)
    assert S == Ideal(R, (y,))
    assert k == 2

    prime = Ideal(R, (x - y,))
    S, k = saturation_with_index(prime, x)
    assert S is prime
    assert k == 0


def test_saturate_by_variables_and_leading_ideal():
    R, (x, y, z) = polynomial_ring(["x", "y", "z"])
    I = Ideal(R, (x * z - y * z, z**2))
    assert saturate_by_variables(I, [2]).is_one()
    assert saturate_by_variables(I, [0, 1]) == I
    assert leading_ideal(Ideal(R, (x**2 - y,))) == Ideal(R, (x**2,))
