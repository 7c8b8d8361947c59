import pytest

from binomial_decomposition import (
    Ideal,
    NotCellularError,
    cellular_example_ideal,
    cellular_hull,
    cellular_standard_monomials,
    noncellular_example_ideal,
    polynomial_ring,
    witness_monomials,
)


def test_standard_monomials_of_the_cellular_example():
    I = cellular_example_ideal()
    R = I.ring
    x5, x6 = R.gens[4], R.gens[5]
    assert set(cellular_standard_monomials(I)) == {R.one, x5, x6}


def test_no_nilpotent_variables_means_only_one():
    R, (x, y) = polynomial_ring(["x", "y"])
    assert cellular_standard_monomials(Ideal(R, (x - y,))) == [R.one]


def test_witnesses_and_hull_of_the_cellular_example():
    I = cellular_example_ideal()
    R = I.ring
    x5, x6 = R.gens[4], R.gens[5]
    assert set(witness_monomials(I)) == {x5, x6}
    assert cellular_hull(I) == Ideal(R, (x5, x6))


def test_hull_of_an_unmixed_ideal_is_itself():
    R, (x, y, z) = polynomial_ring(["x", "y", "z"])
    I = Ideal(R, (x**2 - y**2, z**2))
    assert witness_monomials(I) == []
    assert cellular_hull(I) is I


def test_non_cellular_input_is_rejected():
    with pytest.raises(NotCellularError):
        cellular_standard_monomials(noncellular_example_ideal())
    with pytest.raises(NotCellularError):
        cellular_hull(noncellular_example_ideal())
