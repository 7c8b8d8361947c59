"""Exception types raised by the decomposition engine.

Precondition violations derive from :class:`ValueError`, failures that
signal a bug or a broken external tool derive from :class:`RuntimeError`.
"""


class BinomialDecompositionError(Exception):
    """Base class for all errors raised by this package."""


class NotBinomialError(BinomialDecompositionError, ValueError):
    """The input ideal is not generated by binomials."""


class NotUnitalError(BinomialDecompositionError, ValueError):
    """The input ideal is not generated by pure differences and monomials."""


class NotCellularError(BinomialDecompositionError, ValueError):
    """The input ideal is not cellular."""


class NotProperError(BinomialDecompositionError, ValueError):
    """The input ideal is the whole ring."""


class InternalInvariantError(BinomialDecompositionError, RuntimeError):
    """An algorithmic invariant was violated. This indicates a bug."""


class OracleError(BinomialDecompositionError, RuntimeError):
    """The external lattice-basis solver failed or produced unreadable output."""
