"""Standard monomials, witness monomials and the hull of a cellular ideal."""

from __future__ import annotations

from functools import reduce
from itertools import product
from operator import mul
from typing import List
import logging

from sympy.polys.rings import PolyElement

from .cellular import CellularityResult, is_cellular
from .character_ideals import partial_character_from_ideal
from .errors import NotCellularError
from .ideals import Ideal, eliminate, leading_ideal, quotient

logger = logging.getLogger(__name__)


def _cellular_or_raise(I: Ideal) -> CellularityResult:
    cell = is_cellular(I)
    if not cell.cellular:
        raise NotCellularError(f"{I} is not cellular.")
    return cell


def cellular_standard_monomials(I: Ideal) -> List[PolyElement]:
    """Monomials in the non-cell variables that are standard modulo ``I``.

    Each non-cell variable is nilpotent modulo ``I``, so its powers outside
    ``I`` form a finite chain. The standard monomials are the products of
    chain elements that avoid the leading ideal of ``I`` intersected with
    the non-cell variables.
    """
    cell = _cellular_or_raise(I)
    R = I.ring
    if len(cell.variables) == R.nvars:
        return [R.one]
    complement = [i for i in range(R.nvars) if i not in cell.variables]
    J = eliminate(I, cell.variables)

    chains = []
    for i in complement:
        x = R.gens[i]
        chain = [R.one]
        power = x
        while power not in I:
            chain.append(power)
            power = power * x
        chains.append(chain)

    lead = leading_ideal(J)
    monomials = (reduce(mul, combo, R.one) for combo in product(*chains))
    return [m for m in monomials if m not in lead]


def witness_monomials(I: Ideal) -> List[PolyElement]:
    """Standard monomials ``m`` whose colon ideal ``I : m`` has a lattice of larger rank.

    They generate the monomial part of the embedded components of ``I``.
    """
    _cellular_or_raise(I)
    rank = partial_character_from_ideal(I).rank
    witnesses = []
    for m in cellular_standard_monomials(I):
        if partial_character_from_ideal(quotient(I, m)).rank > rank:
            witnesses.append(m)
    logger.debug("%d witness monomials", len(witnesses))
    return witnesses


def cellular_hull(I: Ideal) -> Ideal:
    """Intersection of the minimal primary components of the cellular ideal ``I``."""
    witnesses = witness_monomials(I)
    if not witnesses:
        return I
    return Ideal(I.ring, (I + witnesses).groebner_basis())
