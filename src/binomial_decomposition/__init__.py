"""Top-level package API for binomial_decomposition.

This package decomposes binomial ideals over the rationals: it tests
cellularity, computes cellular decompositions, associates partial
characters on integer lattices to cellular ideals, and uses their
saturations to obtain associated primes and primary decompositions over
cyclotomic fields. All arithmetic is exact (SymPy).

Public API:
- PolynomialRing, polynomial_ring, Ideal and the ideal operations
- CharacterValue, CyclotomicField
- is_binomial, is_unital
- is_cellular, cellular_decomposition, cellular_decomposition_macaulay
- PartialCharacter, partial_character, saturations
- ideal_from_character, partial_character_from_ideal
- cellular_standard_monomials, witness_monomials, cellular_hull
- associated primes and primary decompositions
- 4ti2 and in-process lattice-basis oracles
- Built-in example ideals
"""

from .config import Settings, get_settings
from .errors import (
    BinomialDecompositionError,
    InternalInvariantError,
    NotBinomialError,
    NotCellularError,
    NotProperError,
    NotUnitalError,
    OracleError,
)
from .field import CharacterValue, CyclotomicField, common_field, evaluate_product, field_for_values
from .ideals import (
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
from .classify import is_binomial, is_unital
from .redundancy import drop_redundant_components, inclusion_minimal_ideals, remove_redundancy
from .cellular import (
    CellularityResult,
    cellular_decomposition,
    cellular_decomposition_macaulay,
    is_cellular,
)
from .character import PartialCharacter, have_same_domain, partial_character, saturations
from .fourti2 import FourTi2, SaturationOracle, default_markov_oracle
from .character_ideals import (
    binomial_exponents_to_ideal,
    ideal_from_character,
    lattice_groebner_basis,
    make_binomials,
    partial_character_from_ideal,
)
from .hull import cellular_hull, cellular_standard_monomials, witness_monomials
from .primary import (
    binomial_associated_primes,
    binomial_primary_decomposition,
    cellular_associated_primes,
    cellular_minimal_associated_primes,
    cellular_primary_decomposition,
)
from .examples import (
    birth_death_ideal,
    cellular_example_ideal,
    noncellular_example_ideal,
    unital_example_ideal,
)

__all__ = [
    "Settings",
    "get_settings",
    "BinomialDecompositionError",
    "InternalInvariantError",
    "NotBinomialError",
    "NotCellularError",
    "NotProperError",
    "NotUnitalError",
    "OracleError",
    "CharacterValue",
    "CyclotomicField",
    "common_field",
    "evaluate_product",
    "field_for_values",
    "Ideal",
    "PolynomialRing",
    "polynomial_ring",
    "eliminate",
    "intersect",
    "leading_ideal",
    "quotient",
    "saturate_by_variables",
    "saturation",
    "saturation_with_index",
    "is_binomial",
    "is_unital",
    "drop_redundant_components",
    "inclusion_minimal_ideals",
    "remove_redundancy",
    "CellularityResult",
    "is_cellular",
    "cellular_decomposition",
    "cellular_decomposition_macaulay",
    "PartialCharacter",
    "partial_character",
    "have_same_domain",
    "saturations",
    "FourTi2",
    "SaturationOracle",
    "default_markov_oracle",
    "binomial_exponents_to_ideal",
    "ideal_from_character",
    "lattice_groebner_basis",
    "make_binomials",
    "partial_character_from_ideal",
    "cellular_standard_monomials",
    "witness_monomials",
    "cellular_hull",
    "binomial_associated_primes",
    "binomial_primary_decomposition",
    "cellular_associated_primes",
    "cellular_minimal_associated_primes",
    "cellular_primary_decomposition",
    "birth_death_ideal",
    "cellular_example_ideal",
    "noncellular_example_ideal",
    "unital_example_ideal",
]
