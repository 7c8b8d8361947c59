import sympy as sp

from binomial_decomposition import Ideal, is_binomial, is_unital, polynomial_ring, unital_example_ideal


def test_polynomials_with_at_most_two_terms_are_binomial():
    x, y = sp.symbols("x y")
    assert is_binomial(x**2 - 3 * y)
    assert is_binomial(x)
    assert is_binomial(0)
    assert not is_binomial(x + y + 1)
    R, (a, b) = polynomial_ring(["a", "b"])
    assert is_binomial(a * b - 1)
    assert not is_binomial(a + b + 1)


def test_binomiality_is_decided_by_the_groebner_basis():
    R, (x, y) = polynomial_ring(["x", "y"])
    # a trinomial generator, but the ideal is (x - 1, y - 1)
    I = Ideal(R, (x + y - 2, x - y, y**2 - 1))
    assert is_binomial(I)
    assert not is_binomial(Ideal(R, (x + y + 1,)))


def test_unital_ideals():
    R, (x, y) = polynomial_ring(["x", "y"])
    assert is_unital(unital_example_ideal())
    assert is_unital(Ideal(R, (x**2, x - y)))
    assert not is_unital(Ideal(R, (x - 2 * y,)))
    assert not is_unital(Ideal.zero_ideal(R))


def test_binomial_generators_give_a_binomial_groebner_basis():
    R, (x, y, z) = polynomial_ring(["x", "y", "z"])
    I = Ideal(R, (x**2 - y * z, y**2 - 3 * x * z, z**3))
    assert is_binomial(I)
    assert all(is_binomial(g) for g in I.groebner_basis())
    J = Ideal(R, (x * y - z**2, x**3))
    assert is_unital(J)
    assert is_unital(Ideal(R, J.groebner_basis()))
