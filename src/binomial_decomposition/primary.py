from __future__ import annotations

"""Associated primes and binomial primary decomposition.

The primes of a cellular binomial ideal come from the saturations of the
partial characters of its colon ideals ``I : m``, ``m`` a standard monomial;
they are defined over the smallest cyclotomic field containing the values
of those saturations. A general binomial ideal is first split into
cellular components.

All functions require unital ideals (generated by monomials and pure
differences), which is the class closed under these constructions over
``Q``.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from .cellular import CellularityResult, cellular_decomposition_macaulay, is_cellular
from .character import PartialCharacter, saturations
from .character_ideals import ideal_from_character, partial_character_from_ideal
from .classify import is_binomial, is_unital
from .errors import NotBinomialError, NotCellularError, NotProperError, NotUnitalError
from .field import common_field, field_for_values
from .hull import cellular_hull, cellular_standard_monomials
from .ideals import Ideal, PolynomialRing, eliminate, quotient, saturate_by_variables
from .redundancy import remove_redundancy

logger = logging.getLogger(__name__)

PrimaryPair = Tuple[Ideal, Ideal]


def _unital_cellular(I: Ideal) -> CellularityResult:
    if not is_unital(I):
        raise NotUnitalError(f"{I} is not a unital ideal.")
    cell = is_cellular(I)
    if not cell.cellular:
        raise NotCellularError(f"{I} is not cellular.")
    return cell


def _target_ring(I: Ideal, characters: Sequence[PartialCharacter], ring: Optional[PolynomialRing]) -> PolynomialRing:
    if ring is not None:
        if ring.symbols != I.ring.symbols:
            raise ValueError(f"{ring} does not match the variables of {I}.")
        return ring
    values = [v for P in characters for v in P.b]
    return I.ring.extend(common_field(I.ring.field, field_for_values(values)))


def _primes_from(
    characters: Iterable[PartialCharacter], ring: PolynomialRing, complement: Sequence[int]
) -> List[Ideal]:
    nilpotent = [ring.gens[i] for i in complement]
    return [ideal_from_character(P, ring) + nilpotent for P in characters]


def _unique(ideals: Iterable[Ideal]) -> List[Ideal]:
    result: List[Ideal] = []
    for I in ideals:
        if not any(I == J for J in result):
            result.append(I)
    return result


def cellular_associated_primes(I: Ideal, ring: Optional[PolynomialRing] = None) -> List[Ideal]:
    """Associated primes of a unital cellular ideal.

    Parameters
    ----------
    I:
        Cellular unital binomial ideal.
    ring:
        Ring for the result. Defaults to the ring of ``I`` extended by the
        roots of unity the primes need.
    """
    if I.is_zero():
        return [Ideal.zero_ideal(ring or I.ring)]
    cell = _unital_cellular(I)
    complement = [i for i in range(I.ring.nvars) if i not in cell.variables]

    characters: List[PartialCharacter] = []
    for m in cellular_standard_monomials(I):
        characters.extend(saturations(partial_character_from_ideal(quotient(I, m))))

    target = _target_ring(I, characters, ring)
    primes = _unique(_primes_from(characters, target, complement))
    logger.debug("%d associated primes over %s", len(primes), target.field)
    return primes


def cellular_minimal_associated_primes(I: Ideal, ring: Optional[PolynomialRing] = None) -> List[Ideal]:
    """Minimal associated primes of a unital cellular ideal.

    They correspond to the saturations of the character of ``I`` itself.
    """
    if I.is_zero():
        return [Ideal.zero_ideal(ring or I.ring)]
    cell = _unital_cellular(I)
    complement = [i for i in range(I.ring.nvars) if i not in cell.variables]
    characters = saturations(partial_character_from_ideal(I))
    target = _target_ring(I, characters, ring)
    return _primes_from(characters, target, complement)


def cellular_primary_decomposition(I: Ideal, ring: Optional[PolynomialRing] = None) -> List[PrimaryPair]:
    """Primary decomposition of a unital cellular ideal.

    Returns
    -------
    list of (primary component, associated prime)
    """
    if I.is_zero():
        zero = Ideal.zero_ideal(ring or I.ring)
        return [(zero, zero)]
    cell = _unital_cellular(I)
    primes = cellular_associated_primes(I, ring)
    target = primes[0].ring
    lifted = I.extend(target.field)
    complement = [i for i in range(I.ring.nvars) if i not in cell.variables]

    result: List[PrimaryPair] = []
    for P in primes:
        part = eliminate(P, complement) if complement else P
        component = saturate_by_variables(lifted + part, cell.variables)
        result.append((cellular_hull(component), P))
    return result


def binomial_primary_decomposition(I: Ideal) -> List[PrimaryPair]:
    """Primary decomposition of a binomial ideal.

    Components are computed cell by cell, brought to a common cyclotomic
    field and pruned to the inclusion-minimal primary components.

    Raises
    ------
    NotProperError
        If ``I`` is the whole ring.
    NotBinomialError, NotUnitalError
        If ``I`` or one of its cellular components is outside the supported class.
    """
    if I.is_zero():
        zero = Ideal.zero_ideal(I.ring)
        return [(zero, zero)]
    if I.is_one():
        raise NotProperError("the whole ring has no primary decomposition.")
    if not is_binomial(I):
        raise NotBinomialError(f"{I} is not binomial.")

    pairs: List[PrimaryPair] = []
    for J in cellular_decomposition_macaulay(I):
        pairs.extend(cellular_primary_decomposition(J))

    K = common_field(*(Q.ring.field for Q, _ in pairs))
    pairs = [(Q.extend(K), P.extend(K)) for Q, P in pairs]
    return remove_redundancy(pairs)


def binomial_associated_primes(I: Ideal) -> List[Ideal]:
    """Associated primes of a unital binomial ideal."""
    if not is_unital(I):
        raise NotUnitalError(f"{I} is not a unital ideal.")
    if is_cellular(I).cellular:
        return cellular_associated_primes(I)
    return _unique(P for _, P in binomial_primary_decomposition(I))
