"""Linear combinations of basis reactions.

Every non-basis row R[k] of the reaction matrix is written as
  R[k] = sum_j c[k, j] * basis[j]
by solving basis^T c_k = R[k]^T in the least-squares sense. For the
incidence structure of a CRN the coefficients are small integers, so the
default pass rounds them to clean floating round-off; the unrounded pass
keeps the raw solution and is used as a fallback.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import lstsq

from .rref import BasisSelection


def solve_linear_combinations(
    R: NDArray[np.float64],
    basis: BasisSelection,
    *,
    rounded: bool = True,
) -> NDArray[np.float64]:
    """Return the (r, |basis|) linear-combination matrix.

    Rows of basis reactions are all zero: they are not expressed through
    the other basis vectors.

    Args:
        R: (r, n) reaction matrix
        basis: basis rows selected from R
        rounded: round coefficients to the nearest integer

    Returns:
        linear-combination matrix
    """
    R = np.asarray(R, dtype=float)
    r = R.shape[0]
    combo = np.zeros((r, basis.rank))

    in_basis = set(basis.indices)
    targets = [k for k in range(r) if k not in in_basis]
    if not targets or basis.rank == 0:
        return combo

    # one solve for all right-hand sides: (n, rank) @ (rank, len(targets)) ~ (n, len(targets))
    coeffs, *_ = lstsq(basis.rows.T, R[targets, :].T)
    combo[targets, :] = coeffs.T

    return round_combination(combo) if rounded else combo


def round_combination(combination: NDArray[np.float64]) -> NDArray[np.float64]:
    """Round coefficients to the nearest integer (ties to even)."""
    out = np.rint(np.asarray(combination, dtype=float))
    out[out == 0] = 0.0  # drop -0.0
    return out


def residual_norms(
    R: NDArray[np.float64],
    basis: BasisSelection,
    combination: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Per-reaction 2-norm of R[k] - c_k @ basis for the non-basis rows (0 for basis rows)."""
    R = np.asarray(R, dtype=float)
    res = np.linalg.norm(R - combination @ basis.rows, axis=1)
    res[basis.indices] = 0.0
    return res
