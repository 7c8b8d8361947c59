import pytest
import sympy as sp

from binomial_decomposition import CharacterValue, CyclotomicField, common_field, evaluate_product, field_for_values
from binomial_decomposition.field import field_of_domain


def test_rationals_encode_sign_as_half_turn():
    v = CharacterValue.from_rational(-3)
    assert v.modulus == 3
    assert v.angle == sp.Rational(1, 2)
    assert v.order == 2
    assert str(v) == "-3"
    with pytest.raises(ValueError):
        CharacterValue.from_rational(0)


def test_arithmetic_and_angle_reduction():
    w = CharacterValue.root_of_unity(1, 3)
    assert (w**3).is_one()
    assert w * w == CharacterValue.root_of_unity(2, 3)
    assert (w / w).is_one()
    assert w**-1 == CharacterValue.root_of_unity(2, 3)
    assert CharacterValue(2, sp.Rational(5, 4)).angle == sp.Rational(1, 4)
    with pytest.raises(ValueError):
        w ** sp.Rational(1, 2)


def test_roots_of_minus_one_and_of_perfect_powers():
    square_roots = CharacterValue.from_rational(-1).roots(2)
    assert {r.angle for r in square_roots} == {sp.Rational(1, 4), sp.Rational(3, 4)}
    assert all((r**2) == CharacterValue.from_rational(-1) for r in square_roots)

    cube_roots = CharacterValue.from_rational(sp.Rational(8, 27)).roots(3)
    assert len(cube_roots) == 3
    assert all(r.modulus == sp.Rational(2, 3) for r in cube_roots)

    with pytest.raises(ValueError):
        CharacterValue.from_rational(2).roots(3)


def test_square_roots_of_non_squares():
    roots = CharacterValue.from_rational(2).roots(2)
    assert {r.to_sympy() for r in roots} == {sp.sqrt(2), -sp.sqrt(2)}
    assert all(r**2 == CharacterValue.from_rational(2) for r in roots)

    # the fourth roots of 4 are the square roots of +-2
    fourth = CharacterValue.from_rational(4).roots(4)
    assert all(r.modulus == sp.sqrt(2) for r in fourth)
    assert CharacterValue(sp.sqrt(8)).modulus == 2 * sp.sqrt(2)
    assert CharacterValue(sp.sqrt(sp.Rational(2, 3))).radicand == 6
    with pytest.raises(ValueError):
        CharacterValue(sp.cbrt(2))


def test_conductor_of_square_roots():
    assert CharacterValue(sp.sqrt(2)).conductor == 8
    assert CharacterValue(sp.sqrt(5)).conductor == 5
    assert CharacterValue(sp.sqrt(3)).conductor == 12
    assert CharacterValue(sp.sqrt(6), sp.Rational(1, 2)).conductor == 24
    assert field_for_values([CharacterValue(sp.sqrt(5)), CharacterValue.root_of_unity(1, 3)]) == CyclotomicField(15)
    assert not CyclotomicField(4).contains(CharacterValue(sp.sqrt(2)))


def test_square_roots_are_encoded_as_gauss_sums():
    for s, n in [(2, 8), (3, 12), (5, 5), (7, 28), (10, 40)]:
        K = CyclotomicField(n)
        root = K.square_root(s)
        assert root * root == K.domain.from_sympy(sp.Integer(s))
        assert K.value(root) == CharacterValue(sp.sqrt(s))
        assert abs(complex(sp.N(K.domain.to_sympy(root))) - s**0.5) < 1e-9
    with pytest.raises(ValueError):
        CyclotomicField(4).square_root(2)


def test_element_and_value_with_square_roots():
    K = CyclotomicField(24)
    for v in [
        CharacterValue(sp.sqrt(2)),
        CharacterValue(sp.sqrt(2), sp.Rational(1, 2)),
        CharacterValue(sp.sqrt(6) / 4, sp.Rational(1, 8)),
        CharacterValue(sp.sqrt(3), sp.Rational(5, 6)),
    ]:
        assert K.value(K.element(v)) == v


def test_evaluate_product_requires_integer_exponents():
    a = CharacterValue.from_rational(2)
    b = CharacterValue.from_rational(-1)
    assert evaluate_product([a, b], [3, 1]) == CharacterValue.from_rational(-8)
    assert evaluate_product([a, b], [-1, 0]) == CharacterValue.from_rational(sp.Rational(1, 2))
    with pytest.raises(ValueError):
        evaluate_product([a], [sp.Rational(1, 2)])
    with pytest.raises(ValueError):
        evaluate_product([a], [1, 2])


def test_field_orders_are_normalised():
    assert CyclotomicField(2) == CyclotomicField(1)
    assert CyclotomicField(6) == CyclotomicField(3)
    assert CyclotomicField(4).order == 4
    assert str(CyclotomicField(1)) == "QQ"
    assert str(CyclotomicField(3)) == "QQ(zeta_3)"
    assert common_field(CyclotomicField(3), CyclotomicField(4)).order == 12


def test_field_for_values_and_membership():
    values = [CharacterValue.from_rational(-1), CharacterValue.root_of_unity(1, 3)]
    K = field_for_values(values)
    assert K == CyclotomicField(3)
    assert all(K.contains(v) for v in values)
    assert not CyclotomicField(1).contains(CharacterValue.root_of_unity(1, 4))


def test_element_and_value_are_inverse():
    K = CyclotomicField(3)
    for v in [
        CharacterValue.from_rational(5),
        CharacterValue.from_rational(-2),
        CharacterValue.root_of_unity(1, 3),
        CharacterValue(sp.Rational(1, 2), sp.Rational(1, 6)),
    ]:
        assert K.value(K.element(v)) == v
    with pytest.raises(ValueError):
        CyclotomicField(1).element(CharacterValue.root_of_unity(1, 3))


def test_embedding_preserves_values():
    K3 = CyclotomicField(3)
    K12 = CyclotomicField(12)
    w = CharacterValue.root_of_unity(2, 3)
    assert K12.value(K3.embed(K3.element(w), K12)) == w

    q = CharacterValue.from_rational(-7)
    Q = CyclotomicField(1)
    assert K3.value(Q.embed(Q.element(q), K3)) == q

    with pytest.raises(ValueError):
        CyclotomicField(4).embed(CyclotomicField(4).zeta, K3)


def test_field_of_domain_round_trip():
    assert field_of_domain(CyclotomicField(5).domain) == CyclotomicField(5)
    assert field_of_domain(CyclotomicField(1).domain) == CyclotomicField(1)


def test_conversion_to_sympy_numbers():
    assert CharacterValue.from_rational(-2).to_sympy() == -2
    assert CharacterValue.root_of_unity(1, 4).to_sympy() == sp.I
