"""Shared utilities for the decomposition pipeline.

This module provides common helpers used across the package:
- Tolerance constant for floating point comparisons
- Nonzero-pattern helpers for coefficient matrices
- Rational conversion for exact reduction
- Logging setup for scripts and demos
"""

from __future__ import annotations

import logging
from fractions import Fraction

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Tolerance constant for floating point comparisons
# =============================================================================
FLOAT_TOL = 1e-12


# =============================================================================
# Logging
# =============================================================================
DEFAULT_LOGGER_NAME = "crn_incidence"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    *,
    fmt: str = DEFAULT_LOG_FORMAT,
    force: bool = False,
) -> logging.Logger:
    """Configure root logging for command-line use; the library itself never calls this."""
    logging.basicConfig(level=level, format=fmt, force=force)
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(level)
    return logger


# =============================================================================
# Nonzero patterns
# =============================================================================
def nonzero_mask(
    A: NDArray[np.float64],
    *,
    tol: float = FLOAT_TOL,
) -> NDArray[np.bool_]:
    """Boolean mask of entries with |a| > tol."""
    return np.abs(np.asarray(A, dtype=float)) > tol


def nonzero_positions(
    v: NDArray[np.float64],
    *,
    tol: float = FLOAT_TOL,
) -> list[int]:
    """Positions of the nonzero entries of a vector, in increasing order."""
    return np.flatnonzero(nonzero_mask(v, tol=tol)).tolist()


# =============================================================================
# Rational conversion
# =============================================================================
def to_fraction_matrix(A: NDArray[np.float64], max_den: int = 10_000) -> list[list[Fraction]]:
    out: list[list[Fraction]] = []
    for row in np.asarray(A, dtype=float):
        out.append([Fraction(float(x)).limit_denominator(max_den) for x in row])
    return out
