from __future__ import annotations

"""Cellularity test and cellular decompositions of binomial ideals.

A binomial ideal ``I`` is *cellular* when every variable is either a
nonzerodivisor or nilpotent modulo ``I``. The nonzerodivisors are the cell
variables. Two decomposition strategies are provided:

- `cellular_decomposition`: recursive split along a witness variable.
- `cellular_decomposition_macaulay`: breadth-first worklist over the
  variables with a running intersection that stops the search as soon as
  the collected components already cut out ``I``.
"""

from collections import deque
from typing import FrozenSet, List, NamedTuple, Tuple
import logging

from .classify import is_binomial
from .errors import InternalInvariantError, NotBinomialError, NotProperError
from .ideals import Ideal, intersect, quotient, saturate_by_variables, saturation, saturation_with_index
from .redundancy import drop_redundant_components, inclusion_minimal_ideals

logger = logging.getLogger(__name__)


class CellularityResult(NamedTuple):
    """Outcome of `is_cellular`.

    Attributes
    ----------
    cellular:
        Whether the ideal is cellular.
    variables:
        The cell variables (0-based) if cellular, otherwise a one-element
        tuple holding a witness variable of non-cellularity.
    proper:
        False iff the ideal is the whole ring (then ``cellular`` is False and
        ``variables`` is empty).
    """

    cellular: bool
    variables: Tuple[int, ...]
    proper: bool = True


def is_cellular(I: Ideal) -> CellularityResult:
    """Decide cellularity of a binomial ideal.

    Raises
    ------
    NotBinomialError
        If ``I`` is not binomial.
    InternalInvariantError
        If ``I`` is not cellular but no witness variable is found.
    """
    if I.is_one():
        return CellularityResult(False, (), proper=False)
    if not is_binomial(I):
        raise NotBinomialError("is_cellular is only defined for binomial ideals.")
    return _is_cellular(I)


def _is_cellular(I: Ideal) -> CellularityResult:
    R = I.ring
    if I.is_zero():
        return CellularityResult(True, tuple(range(R.nvars)))

    delta = tuple(i for i in range(R.nvars) if not saturation(I, R.gens[i]).is_one())
    J = saturate_by_variables(I, delta)
    if J.issubset(I):
        return CellularityResult(True, delta)

    for i in delta:
        if not quotient(I, R.gens[i]).issubset(I):
            logger.debug("variable %s witnesses non-cellularity", R.symbols[i])
            return CellularityResult(False, (i,))
    raise InternalInvariantError("non-cellular ideal without a witness variable.")


def _check_decomposable(I: Ideal) -> None:
    if I.is_one():
        raise NotProperError("cannot decompose the whole ring.")
    if not is_binomial(I):
        raise NotBinomialError("cellular decompositions require a binomial ideal.")


def cellular_decomposition(I: Ideal) -> List[Ideal]:
    """Cellular decomposition by recursive splitting.

    The components intersect to ``I``. A component already implied by the
    components found before it is dropped.
    """
    if I.is_zero():
        return [I]
    _check_decomposable(I)
    return _cellular_decomposition(I)


def _cellular_decomposition(I: Ideal) -> List[Ideal]:
    result = _is_cellular(I)
    if result.cellular:
        return [I]
    R = I.ring
    v = result.variables[0]
    I1, k = saturation_with_index(I, R.gens[v])
    I2 = I + R.gens[v] ** k
    logger.debug("splitting along %s with exponent %d", R.symbols[v], k)

    kept, running = drop_redundant_components(_cellular_decomposition(I1))
    more, _ = drop_redundant_components(_cellular_decomposition(I2), running)
    return kept + more


class _Task(NamedTuple):
    saturated_by: FrozenSet[int]
    remaining: Tuple[int, ...]
    ideal: Ideal


def cellular_decomposition_macaulay(I: Ideal) -> List[Ideal]:
    """Cellular decomposition by a breadth-first worklist over the variables.

    Each task records the variables already inverted (``saturated_by``), the
    variables still to be decided and the current ideal. The search stops as
    soon as the running intersection of the finished components lies in
    ``I``. The result is inclusion-minimal.
    """
    if I.is_zero():
        return [I]
    _check_decomposable(I)

    R = I.ring
    running = Ideal.unit(R)
    components: List[Ideal] = []
    todo = deque([_Task(frozenset(), tuple(range(R.nvars)), I)])

    while todo:
        task = todo.popleft()
        if running.issubset(task.ideal):
            continue
        if not task.remaining:
            components.append(task.ideal)
            running = intersect(running, task.ideal)
            logger.debug("cellular component %d found", len(components))
            if running.issubset(I):
                break
            continue

        v, rest = task.remaining[0], task.remaining[1:]
        x = R.gens[v]
        J, k = saturation_with_index(task.ideal, x)
        if k > 0:
            J2 = saturate_by_variables(task.ideal + x**k, sorted(task.saturated_by))
            if not J2.is_one():
                todo.append(_Task(task.saturated_by, rest, J2))
        if not J.is_one():
            todo.append(_Task(task.saturated_by | {v}, rest, J))

    return inclusion_minimal_ideals(components)
