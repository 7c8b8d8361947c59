from __future__ import annotations

"""Lattice-basis oracles.

The character-to-ideal bridge needs generators of lattice ideals
``I_L = (x^{u+} - x^{u-} : u in L)``. They are requested from an injectable
oracle object with a single operation, ``markov_basis(lattice)``, returning
integer vectors ``u`` such that the binomials ``x^{u+} - x^{u-}`` generate
``I_L``.

Two implementations are provided:

- `FourTi2` runs the external `4ti2 <https://4ti2.github.io>`_ programs
  ``markov`` and ``groebner`` in a scoped temporary directory.
- `SaturationOracle` computes the same ideal in-process by saturating the
  lattice binomials by all variables.

File format
-----------
4ti2 exchanges matrices as a header line ``rows cols`` followed by one line
of space separated integers per row. Input is written to
``<project>.lat`` (and ``<project>.cost``); output is read from
``<project>.mar`` or ``<project>.gro``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Protocol, Sequence, Tuple
import io
import logging
import shutil
import subprocess
import tempfile

import numpy as np

from .config import Settings, get_settings
from .errors import InternalInvariantError, OracleError
from .ideals import Ideal, polynomial_ring, saturate_by_variables
from .lattice import as_rows

logger = logging.getLogger(__name__)

MARKOV_NAMES = ("markov", "4ti2-markov")
GROEBNER_NAMES = ("groebner", "4ti2-groebner")


class MarkovOracle(Protocol):
    """Anything that can produce a generating set of a lattice ideal."""

    def markov_basis(self, lattice: Any) -> List[List[int]]:
        ...


class GroebnerOracle(Protocol):
    """Anything that can produce a lattice Groebner basis for a cost matrix."""

    def groebner_basis(self, lattice: Any, cost: Any) -> List[List[int]]:
        ...


def grevlex_cost_matrix(n: int) -> List[List[int]]:
    """Weight matrix of the degree reverse lexicographic order on ``n`` variables."""
    rows = [[1] * n]
    for k in range(n - 1, 0, -1):
        rows.append([-int(j == k) for j in range(n)])
    return rows


def write_matrix(path: Path, rows: Sequence[Sequence[int]], ncols: Optional[int] = None) -> None:
    """Write ``rows`` in the 4ti2 matrix format."""
    rows = as_rows(rows)
    if ncols is None:
        if not rows:
            raise ValueError("ncols is required for a matrix without rows.")
        ncols = len(rows[0])
    data = np.array(rows, dtype=np.int64).reshape(len(rows), ncols)
    np.savetxt(path, data, fmt="%d", delimiter=" ", header=f"{len(rows)} {ncols}", comments="")


def read_matrix(path: Path) -> List[List[int]]:
    """Read a matrix in the 4ti2 format.

    Raises
    ------
    OracleError
        If the file is missing or does not match its header.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            header = fh.readline().split()
            body = fh.read()
    except OSError as exc:
        raise OracleError(f"cannot read 4ti2 output {path}: {exc}") from exc

    if len(header) != 2:
        raise OracleError(f"malformed 4ti2 header in {path}: {header!r}")
    try:
        nrows, ncols = int(header[0]), int(header[1])
    except ValueError:
        raise OracleError(f"malformed 4ti2 header in {path}: {header!r}") from None
    if nrows == 0:
        return []

    try:
        data = np.loadtxt(io.StringIO(body), dtype=np.int64, ndmin=2)
    except ValueError as exc:
        raise OracleError(f"malformed 4ti2 matrix in {path}: {exc}") from exc
    if data.shape != (nrows, ncols):
        raise OracleError(
            f"4ti2 matrix in {path} has shape {data.shape}, header says {(nrows, ncols)}."
        )
    return [[int(x) for x in row] for row in data]


def _which(explicit: Optional[str], names: Tuple[str, ...]) -> Optional[str]:
    if explicit:
        return explicit
    for name in names:
        path = shutil.which(name)
        if path:
            return path
    return None


@dataclass(frozen=True)
class FourTi2:
    """Out-of-process oracle backed by the 4ti2 executables.

    Every call works in its own temporary directory, which is removed on
    every exit path.
    """

    markov_executable: Optional[str] = None
    groebner_executable: Optional[str] = None
    timeout: Optional[float] = None
    project: str = "lattice"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FourTi2":
        settings = settings or get_settings()
        return cls(
            markov_executable=settings.fourti2_markov,
            groebner_executable=settings.fourti2_groebner,
            timeout=settings.oracle_timeout,
        )

    def available(self) -> bool:
        return _which(self.markov_executable, MARKOV_NAMES) is not None

    def markov_basis(self, lattice: Any) -> List[List[int]]:
        """Markov basis of the lattice spanned by the rows of ``lattice``."""
        rows = as_rows(lattice)
        exe = _which(self.markov_executable, MARKOV_NAMES)
        if exe is None:
            raise OracleError(f"4ti2 markov executable not found (tried {MARKOV_NAMES}).")
        with tempfile.TemporaryDirectory(prefix="binomial-4ti2-") as tmp:
            base = Path(tmp) / self.project
            write_matrix(base.with_suffix(".lat"), rows)
            self._run(exe, base)
            return read_matrix(base.with_suffix(".mar"))

    def groebner_basis(self, lattice: Any, cost: Any) -> List[List[int]]:
        """Lattice Groebner basis of the rows of ``lattice`` for the cost matrix ``cost``."""
        rows = as_rows(lattice)
        exe = _which(self.groebner_executable, GROEBNER_NAMES)
        if exe is None:
            raise OracleError(f"4ti2 groebner executable not found (tried {GROEBNER_NAMES}).")
        with tempfile.TemporaryDirectory(prefix="binomial-4ti2-") as tmp:
            base = Path(tmp) / self.project
            write_matrix(base.with_suffix(".lat"), rows)
            write_matrix(base.with_suffix(".cost"), as_rows(cost))
            self._run(exe, base)
            return read_matrix(base.with_suffix(".gro"))

    def _run(self, executable: str, base: Path) -> None:
        logger.info("running %s on %s", executable, base.name)
        try:
            proc = subprocess.run(
                [executable, "-q", str(base)],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise OracleError(f"could not run {executable}: {exc}") from exc
        if proc.returncode != 0:
            out = proc.stdout.decode("utf-8", errors="replace")
            err = proc.stderr.decode("utf-8", errors="replace")
            raise OracleError(
                f"{executable} exited with code {proc.returncode}.\nSTDERR:\n{err}\nSTDOUT:\n{out}"
            )


@dataclass(frozen=True)
class SaturationOracle:
    """In-process oracle: ``I_L`` as the saturation of the lattice binomials.

    The reduced Groebner basis of the saturated ideal is a grevlex lattice
    Groebner basis, so only the grevlex cost matrix is supported in
    `groebner_basis`. `markov_basis` thins it to an irredundant generating
    set.
    """

    def _lattice_ideal(self, rows: List[List[int]]) -> Tuple[Ideal, List[Any]]:
        n = len(rows[0])
        R, _ = polynomial_ring(n)
        I = saturate_by_variables(Ideal(R, tuple(R.binomial(u) for u in rows)), range(n))
        gens = list(I.groebner_basis())
        for g in gens:
            if len(g) != 2:
                raise InternalInvariantError(f"lattice ideal contains the non-binomial {g}.")
        return I, gens

    @staticmethod
    def _exponents(gens: List[Any]) -> List[List[int]]:
        basis = []
        for g in gens:
            (lead, _), (tail, _) = g.terms()
            basis.append([a - b for a, b in zip(lead, tail)])
        return basis

    def markov_basis(self, lattice: Any) -> List[List[int]]:
        rows = as_rows(lattice)
        if not rows:
            return []
        I, gens = self._lattice_ideal(rows)
        # drop generators lying in the ideal of the others
        for g in reversed(list(gens)):
            rest = [h for h in gens if h is not g]
            if rest and Ideal(I.ring, tuple(rest)).contains(g):
                gens = rest
        return self._exponents(gens)

    def groebner_basis(self, lattice: Any, cost: Any) -> List[List[int]]:
        rows = as_rows(lattice)
        if not rows:
            return []
        if as_rows(cost) != grevlex_cost_matrix(len(rows[0])):
            raise ValueError("the saturation oracle only supports the grevlex cost matrix.")
        return self._exponents(self._lattice_ideal(rows)[1])


def default_markov_oracle(settings: Optional[Settings] = None) -> MarkovOracle:
    """The oracle selected by ``settings.markov_backend``."""
    settings = settings or get_settings()
    if settings.markov_backend == "saturation":
        return SaturationOracle()
    fourti2 = FourTi2.from_settings(settings)
    if settings.markov_backend == "4ti2" or fourti2.available():
        return fourti2
    logger.info("4ti2 not found, falling back to the saturation oracle")
    return SaturationOracle()
