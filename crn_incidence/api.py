"""Public API for the incidence independent decomposition pipeline.

Standardized input:
- Network record: identifier + reactions (reactant/product complexes, reversibility)

Workflow (Hernandez et al. 2022, MATCH Commun Math Comput Chem 87(2):367-396):
1) species index
2) complexes and pseudo-reactions (reversible -> forward + reverse)
3) incidence matrix I_a and reaction matrix R = I_a^T
4) basis of the row space of R (pivot rows of rref(R^T))
5) non-basis rows as linear combinations of the basis
6) graph G on the basis reactions, edges from co-occurring coefficients
7) connected components of G -> partitions (with one unrounded fallback)

This module defines:
- DecompositionResult dataclass
- incidence_independent_decomposition() entrypoint
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from .combination import residual_norms, solve_linear_combinations
from .complexes import ComplexEncoding, collect_species, encode_complexes
from .graph import reaction_label
from .incidence import incidence_matrix, reaction_matrix
from .network import Network
from .partition import Outcome, decompose_combinations
from .rref import basis_reactions
from .utils import FLOAT_TOL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecompositionResult:
    network: Network                          # input network with species attached
    encoding: ComplexEncoding
    incidence_matrix: NDArray[np.float64]     # (n complexes, r)
    reaction_matrix: NDArray[np.float64]      # (r, n complexes)
    basis_reaction_nums: tuple[int, ...]      # 1-based
    linear_combination: NDArray[np.float64]   # (r, |basis|) matrix behind the partitions
    graph: nx.Graph
    partitions: tuple[tuple[int, ...], ...]   # 1-based reaction numbers, component order
    outcome: Outcome
    used_fallback: bool
    missing: tuple[int, ...]
    message: str

    @property
    def species(self) -> tuple[str, ...]:
        return self.encoding.species

    @property
    def n_reactions(self) -> int:
        return self.encoding.n_reactions

    @property
    def n_partitions(self) -> int:
        return len(self.partitions)

    @property
    def has_decomposition(self) -> bool:
        return self.outcome is not Outcome.NO_DECOMPOSITION

    @property
    def complete(self) -> bool:
        """False only when the partitions failed to cover every reaction."""
        return self.outcome is not Outcome.INCOMPLETE

    def partition_labels(self) -> list[list[str]]:
        return [[reaction_label(k) for k in p] for p in self.partitions]


def _message(network_id: str, outcome: Outcome, n_parts: int, missing: tuple[int, ...]) -> str:
    if outcome is Outcome.NO_DECOMPOSITION:
        return f"{network_id} has no nontrivial incidence independent decomposition."
    msg = f"{network_id} has an incidence independent decomposition into {n_parts} subnetworks."
    if outcome is Outcome.INCOMPLETE:
        msg += " Warning: reaction(s) " + ", ".join(reaction_label(k) for k in missing) + " are not assigned."
    return msg


def incidence_independent_decomposition(
    network: Network,
    *,
    method: str = "float",
    tol: float | None = None,
    nonzero_tol: float = FLOAT_TOL,
) -> DecompositionResult:
    """Compute the finest nontrivial incidence independent decomposition.

    Args:
        network: validated network record
        method: row reduction for the basis, "float" (partial pivoting) or "exact" (sympy)
        tol: pivot tolerance for method="float" (default: max(shape) * eps * ||R||_inf)
        nonzero_tol: |c| above which a combination coefficient counts as nonzero

    Returns:
        DecompositionResult; outcome is NO_DECOMPOSITION when G has fewer than
        two connected components, INCOMPLETE when some reaction stayed unassigned
        after the unrounded fallback, DECOMPOSED otherwise.
    """
    species = collect_species(network.reactions)
    encoding = encode_complexes(network.reactions, species)
    logger.debug(
        "%s: %d species, %d complexes, %d pseudo-reactions",
        network.id, encoding.n_species, encoding.n_complexes, encoding.n_reactions,
    )

    I_a = incidence_matrix(encoding)
    R = reaction_matrix(I_a)

    basis = basis_reactions(R, method=method, tol=tol)
    raw = solve_linear_combinations(R, basis, rounded=False)
    if basis.rank:
        logger.debug(
            "%s: basis %s, max combination residual %.3g",
            network.id,
            ", ".join(reaction_label(k) for k in basis.reaction_nums),
            float(residual_norms(R, basis, raw).max(initial=0.0)),
        )

    part = decompose_combinations(basis.reaction_nums, raw, nonzero_tol=nonzero_tol)
    message = _message(network.id, part.outcome, len(part.partitions), part.missing)
    if part.outcome is Outcome.INCOMPLETE:
        logger.warning(message)
    else:
        logger.info(message)

    return DecompositionResult(
        network=network.with_species(species),
        encoding=encoding,
        incidence_matrix=I_a,
        reaction_matrix=R,
        basis_reaction_nums=basis.reaction_nums,
        linear_combination=part.linear_combination,
        graph=part.graph,
        partitions=part.partitions,
        outcome=part.outcome,
        used_fallback=part.used_fallback,
        missing=part.missing,
        message=message,
    )
