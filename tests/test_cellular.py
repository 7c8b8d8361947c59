import pytest

from binomial_decomposition import (
    Ideal,
    NotBinomialError,
    NotProperError,
    cellular_decomposition,
    cellular_decomposition_macaulay,
    cellular_example_ideal,
    intersect,
    is_cellular,
    noncellular_example_ideal,
    polynomial_ring,
)


def _intersection(ideals):
    result = ideals[0]
    for I in ideals[1:]:
        result = intersect(result, I)
    return result


def test_cellular_example_has_four_cell_variables():
    result = is_cellular(cellular_example_ideal())
    assert result.cellular
    assert result.variables == (0, 1, 2, 3)
    assert result.proper


def test_noncellular_example_is_witnessed_by_z():
    result = is_cellular(noncellular_example_ideal())
    assert not result.cellular
    assert result.variables == (2,)


def test_boundary_ideals():
    R, (x, y) = polynomial_ring(["x", "y"])
    assert is_cellular(Ideal.zero_ideal(R)) == (True, (0, 1), True)
    unit = is_cellular(Ideal.unit(R))
    assert not unit.cellular
    assert unit.variables == ()
    assert not unit.proper
    with pytest.raises(NotBinomialError):
        is_cellular(Ideal(R, (x + y + 1, x**2)))


def test_monomial_ideal_has_no_cell_variables():
    R, (x, y) = polynomial_ring(["x", "y"])
    assert is_cellular(Ideal(R, (x**2, y))) == (True, (), True)


def test_recursive_decomposition_of_the_noncellular_example():
    I = noncellular_example_ideal()
    R = I.ring
    x, y, z = R.gens
    parts = cellular_decomposition(I)
    assert len(parts) == 2
    assert parts[0] == Ideal(R, (x - 1, y - 1))
    assert parts[1] == I + z
    assert all(is_cellular(P).cellular for P in parts)
    assert _intersection(parts) == I


def test_macaulay_decomposition_agrees_with_recursive_one():
    I = noncellular_example_ideal()
    R = I.ring
    x, y, z = R.gens
    parts = cellular_decomposition_macaulay(I)
    assert len(parts) == 2
    expected = [Ideal(R, (x - 1, y - 1)), I + z]
    assert all(any(P == E for P in parts) for E in expected)
    assert _intersection(parts) == I


def test_cellular_ideal_is_its_own_decomposition():
    I = cellular_example_ideal()
    assert cellular_decomposition(I) == [I]
    assert cellular_decomposition_macaulay(I) == [I]


def test_decomposition_preconditions():
    R, (x, y) = polynomial_ring(["x", "y"])
    with pytest.raises(NotProperError):
        cellular_decomposition(Ideal.unit(R))
    with pytest.raises(NotProperError):
        cellular_decomposition_macaulay(Ideal.unit(R))
    with pytest.raises(NotBinomialError):
        cellular_decomposition(Ideal(R, (x + y + 1, x**2)))
    zero = Ideal.zero_ideal(R)
    assert cellular_decomposition(zero) == [zero]


def test_decomposition_of_a_monomial_times_binomial():
    R, (x, y) = polynomial_ring(["x", "y"])
    I = Ideal(R, (x * (x - y),))
    parts = cellular_decomposition_macaulay(I)
    assert _intersection(parts) == I
    assert all(is_cellular(P).cellular for P in parts)
