from __future__ import annotations

"""Runtime settings for the decomposition engine.

Settings are read once from the environment and are immutable afterwards.
Every function that consults them also accepts an explicit override, so the
process-wide defaults never need to be mutated.

Environment variables
---------------------
BINOMIAL_MARKOV_BACKEND
    ``auto`` (default), ``4ti2`` or ``saturation``.
BINOMIAL_4TI2_MARKOV, BINOMIAL_4TI2_GROEBNER
    Explicit paths of the 4ti2 ``markov`` and ``groebner`` executables.
BINOMIAL_GROEBNER_METHOD
    ``buchberger`` (default) or ``f5b``.
BINOMIAL_ORACLE_TIMEOUT
    Timeout in seconds for a single 4ti2 run. Unset means wait forever.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional
import os


MARKOV_BACKENDS = ("auto", "4ti2", "saturation")
GROEBNER_METHODS = ("buchberger", "f5b")


@dataclass(frozen=True)
class Settings:
    """Immutable configuration record."""

    markov_backend: str = "auto"
    fourti2_markov: Optional[str] = None
    fourti2_groebner: Optional[str] = None
    groebner_method: str = "buchberger"
    oracle_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if self.markov_backend not in MARKOV_BACKENDS:
            raise ValueError(
                f"markov_backend must be one of {MARKOV_BACKENDS}, got {self.markov_backend!r}."
            )
        if self.groebner_method not in GROEBNER_METHODS:
            raise ValueError(
                f"groebner_method must be one of {GROEBNER_METHODS}, got {self.groebner_method!r}."
            )
        if self.oracle_timeout is not None and self.oracle_timeout <= 0:
            raise ValueError("oracle_timeout must be positive.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ

        timeout_raw = env.get("BINOMIAL_ORACLE_TIMEOUT", "").strip()
        if timeout_raw:
            try:
                timeout: Optional[float] = float(timeout_raw)
            except ValueError:
                raise ValueError(
                    f"BINOMIAL_ORACLE_TIMEOUT must be a number, got {timeout_raw!r}."
                ) from None
        else:
            timeout = None

        return cls(
            markov_backend=env.get("BINOMIAL_MARKOV_BACKEND", "auto").strip().lower() or "auto",
            fourti2_markov=env.get("BINOMIAL_4TI2_MARKOV") or None,
            fourti2_groebner=env.get("BINOMIAL_4TI2_GROEBNER") or None,
            groebner_method=env.get("BINOMIAL_GROEBNER_METHOD", "buchberger").strip().lower()
            or "buchberger",
            oracle_timeout=timeout,
        )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    return Settings.from_env()
