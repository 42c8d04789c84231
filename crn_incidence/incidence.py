"""Incidence matrix I_a and reaction matrix R = I_a^T.

I_a is (complexes x pseudo-reactions): column k holds -1 at the reactant
complex row and +1 at the product complex row of pseudo-reaction k.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from .complexes import ComplexEncoding

logger = logging.getLogger(__name__)


def incidence_matrix(encoding: ComplexEncoding) -> NDArray[np.float64]:
    """Build I_a from a complex encoding.

    Writes happen reactant first, product second. For a self-loop both
    writes land on the same cell and the product's +1 is what remains.
    """
    n, r = encoding.n_complexes, encoding.n_reactions
    I_a = np.zeros((n, r))

    cols = np.arange(r)
    I_a[encoding.reactant_index, cols] = -1.0
    I_a[encoding.product_index, cols] = 1.0

    loops = encoding.self_loops()
    if loops:
        logger.warning(
            "self-loop pseudo-reaction(s) %s: reactant and product complex coincide, "
            "incidence column keeps only the product entry",
            ", ".join(f"R{k + 1}" for k in loops),
        )
    return I_a


def reaction_matrix(I_a: NDArray[np.float64]) -> NDArray[np.float64]:
    """R = I_a^T; row k is the incidence vector of pseudo-reaction k."""
    return np.asarray(I_a, dtype=float).T.copy()
