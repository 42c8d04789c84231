"""Row reduction and basis extraction.

Given the reaction matrix R (r x n, one row per pseudo-reaction), a basis of
its row space is read off the reduced row echelon form of R^T: the pivot
columns of rref(R^T) are the indices of linearly independent rows of R.

Two reductions share the RowReduction contract:
- rref():       Gauss-Jordan with partial pivoting in floating point
- rref_exact(): exact rational reduction via sympy

Callers only depend on (rank, pivots, reduced).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .utils import to_fraction_matrix


@dataclass(frozen=True)
class RowReduction:
    rank: int
    pivots: tuple[int, ...]   # pivot columns, increasing
    reduced: np.ndarray       # reduced row echelon form, same shape as input


@dataclass(frozen=True)
class BasisSelection:
    """Basis of the row space of R.

    reaction_nums are 1-based pseudo-reaction numbers in increasing order;
    rows[i] is R[reaction_nums[i] - 1].
    """

    reaction_nums: tuple[int, ...]
    rows: np.ndarray  # (rank, n)

    @property
    def rank(self) -> int:
        return len(self.reaction_nums)

    @property
    def indices(self) -> list[int]:
        """0-based row indices into R."""
        return [k - 1 for k in self.reaction_nums]


def default_tolerance(A: NDArray[np.float64]) -> float:
    """max(m, n) * eps * ||A||_inf, the usual rref pivot threshold."""
    A = np.asarray(A, dtype=float)
    if A.size == 0:
        return 0.0
    return max(A.shape) * np.finfo(float).eps * float(np.linalg.norm(A, np.inf))


def rref(A: NDArray[np.float64], *, tol: float | None = None) -> RowReduction:
    """Reduced row echelon form with partial pivoting.

    Args:
        A: (m, n) matrix (not modified)
        tol: entries with |a| <= tol are treated as zero when choosing pivots;
            default_tolerance(A) if None

    Returns:
        RowReduction
    """
    A = np.array(A, dtype=float)
    if A.ndim != 2:
        raise ValueError("rref expects a 2D matrix")
    m, n = A.shape
    if tol is None:
        tol = default_tolerance(A)

    pivots: list[int] = []
    i = 0
    for j in range(n):
        if i >= m:
            break

        # partial pivoting: largest magnitude in column j at or below row i
        k = i + int(np.argmax(np.abs(A[i:, j])))
        if abs(A[k, j]) <= tol:
            A[i:, j] = 0.0
            continue

        pivots.append(j)
        if k != i:
            A[[i, k], j:] = A[[k, i], j:]
        A[i, j:] = A[i, j:] / A[i, j]

        others = np.arange(m) != i
        A[others, j:] -= np.outer(A[others, j], A[i, j:])
        i += 1

    return RowReduction(rank=len(pivots), pivots=tuple(pivots), reduced=A)


def rref_exact(A: NDArray[np.float64], *, max_den: int = 10_000) -> RowReduction:
    """Exact rational rref via sympy.

    Entries are converted with Fraction.limit_denominator(max_den); for the
    integer matrices of this package the conversion is exact.
    """
    import sympy as sp

    A = np.asarray(A, dtype=float)
    if A.ndim != 2:
        raise ValueError("rref_exact expects a 2D matrix")
    m, n = A.shape
    if m == 0 or n == 0:
        return RowReduction(rank=0, pivots=(), reduced=np.zeros((m, n)))

    fr = to_fraction_matrix(A, max_den=max_den)
    M = sp.Matrix([[sp.Rational(x.numerator, x.denominator) for x in row] for row in fr])
    R, pivots = M.rref()
    reduced = np.array(R.tolist(), dtype=float).reshape(m, n)
    return RowReduction(rank=len(pivots), pivots=tuple(int(p) for p in pivots), reduced=reduced)


def basis_reactions(
    R: NDArray[np.float64],
    *,
    method: str = "float",
    tol: float | None = None,
    max_den: int = 10_000,
) -> BasisSelection:
    """Select a basis of the row space of R from its own rows.

    Args:
        R: (r, n) reaction matrix
        method: "float" (partial pivoting) or "exact" (sympy rational rref)
        tol: pivot tolerance for method="float"
        max_den: denominator bound for method="exact"

    Returns:
        BasisSelection with pivot rows in increasing order
    """
    R = np.asarray(R, dtype=float)
    if method == "float":
        red = rref(R.T, tol=tol)
    elif method == "exact":
        red = rref_exact(R.T, max_den=max_den)
    else:
        raise ValueError(f"unknown reduction method {method!r}; expected 'float' or 'exact'")

    idx = list(red.pivots)
    rows = R[idx, :] if idx else np.zeros((0, R.shape[1]))
    return BasisSelection(reaction_nums=tuple(p + 1 for p in idx), rows=rows)
