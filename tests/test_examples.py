import pytest

from binomial_decomposition import (
    birth_death_ideal,
    cellular_example_ideal,
    is_binomial,
    is_unital,
    noncellular_example_ideal,
    unital_example_ideal,
)


def test_built_in_ideals_are_unital():
    for I in (cellular_example_ideal(), noncellular_example_ideal(), unital_example_ideal()):
        assert is_binomial(I)
        assert is_unital(I)


def test_birth_death_variable_blocks():
    I = birth_death_ideal(1, 1)
    names = [str(s) for s in I.ring.symbols]
    assert names == [
        "U_1_1", "U_2_1",
        "R_1_1", "R_1_2",
        "D_1_1", "D_2_1",
        "L_1_1", "L_1_2", "L_2_1", "L_2_2",
    ]
    assert len(I.gens) == 4
    assert is_unital(I)


def test_birth_death_generator_count():
    I = birth_death_ideal(2, 2)
    # U 3x2, R 2x3, D 3x2, L 3x3
    assert I.ring.nvars == 6 + 6 + 6 + 9
    assert len(I.gens) == 4 * 2 * 2


def test_birth_death_rejects_wide_grids():
    with pytest.raises(ValueError):
        birth_death_ideal(1, 2)
    with pytest.raises(ValueError):
        birth_death_ideal(0, 1)
