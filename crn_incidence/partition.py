"""Partition assignment from the connected components of the reaction graph.

Each connected component of G becomes one subnetwork:
- the component's basis reactions seed the partition
- every reaction whose combination uses one of those basis reactions joins it

The partitions must cover every pseudo-reaction. If rounding the
coefficients lost a reaction, the whole graph/component/partition step is
redone once from the unrounded combination matrix. A result that is still
incomplete is returned as-is and flagged.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Sequence

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from .combination import round_combination
from .graph import build_reaction_graph, component_numbers
from .utils import FLOAT_TOL, nonzero_mask

logger = logging.getLogger(__name__)


class Outcome(str, enum.Enum):
    NO_DECOMPOSITION = "no_decomposition"
    DECOMPOSED = "decomposed"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class PartitionOutcome:
    outcome: Outcome
    graph: nx.Graph
    components: tuple[int, ...]                  # component number per basis reaction
    partitions: tuple[tuple[int, ...], ...]      # 1-based reaction numbers
    linear_combination: np.ndarray               # matrix the partitions were built from
    used_fallback: bool
    missing: tuple[int, ...]

    @property
    def n_components(self) -> int:
        return max(self.components, default=0)


def assign_partitions(
    basis_reaction_nums: Sequence[int],
    components: Sequence[int],
    linear_combination: NDArray[np.float64],
    *,
    nonzero_tol: float = FLOAT_TOL,
) -> tuple[tuple[int, ...], ...]:
    """Build one partition per component.

    Args:
        basis_reaction_nums: 1-based basis reaction numbers (column order of linear_combination)
        components: 1-based component number of each basis reaction
        linear_combination: (r, |basis|) coefficient matrix

    Returns:
        partitions in component order, each a sorted tuple of reaction numbers
    """
    used = nonzero_mask(linear_combination, tol=nonzero_tol)
    n_parts = max(components, default=0)
    members: list[set[int]] = [set() for _ in range(n_parts)]

    for col, (k, c) in enumerate(zip(basis_reaction_nums, components)):
        part = members[c - 1]
        part.add(int(k))
        # non-basis reactions only inherit membership, they never recruit others
        part.update(int(i) + 1 for i in np.flatnonzero(used[:, col]))

    return tuple(tuple(sorted(p)) for p in members)


def missing_reactions(partitions: Sequence[Sequence[int]], n_reactions: int) -> tuple[int, ...]:
    covered = set()
    for p in partitions:
        covered.update(p)
    return tuple(k for k in range(1, n_reactions + 1) if k not in covered)


def _partition_pass(
    basis_reaction_nums: Sequence[int],
    linear_combination: NDArray[np.float64],
    *,
    nonzero_tol: float,
    used_fallback: bool,
) -> PartitionOutcome:
    G = build_reaction_graph(basis_reaction_nums, linear_combination, nonzero_tol=nonzero_tol)
    comps = tuple(component_numbers(G))
    n_comp = max(comps, default=0)
    logger.debug(
        "reaction graph: %d vertices, %d edges, %d components%s",
        G.number_of_nodes(), G.number_of_edges(), n_comp,
        " (unrounded)" if used_fallback else "",
    )

    if n_comp < 2:
        return PartitionOutcome(
            outcome=Outcome.NO_DECOMPOSITION,
            graph=G,
            components=comps,
            partitions=(),
            linear_combination=linear_combination,
            used_fallback=used_fallback,
            missing=(),
        )

    parts = assign_partitions(basis_reaction_nums, comps, linear_combination, nonzero_tol=nonzero_tol)
    missing = missing_reactions(parts, linear_combination.shape[0])
    return PartitionOutcome(
        outcome=Outcome.INCOMPLETE if missing else Outcome.DECOMPOSED,
        graph=G,
        components=comps,
        partitions=parts,
        linear_combination=linear_combination,
        used_fallback=used_fallback,
        missing=missing,
    )


def decompose_combinations(
    basis_reaction_nums: Sequence[int],
    raw_combination: NDArray[np.float64],
    *,
    nonzero_tol: float = FLOAT_TOL,
) -> PartitionOutcome:
    """Graph -> components -> partitions, with the single unrounded fallback.

    Args:
        basis_reaction_nums: 1-based basis reaction numbers
        raw_combination: unrounded (r, |basis|) combination matrix
        nonzero_tol: |c| above which a coefficient counts as used

    Returns:
        PartitionOutcome
    """
    raw = np.asarray(raw_combination, dtype=float)
    rounded = round_combination(raw)

    first = _partition_pass(basis_reaction_nums, rounded, nonzero_tol=nonzero_tol, used_fallback=False)
    if first.outcome is not Outcome.INCOMPLETE:
        return first

    logger.info(
        "rounded combinations leave reaction(s) %s unassigned; recomputing from unrounded coefficients",
        ", ".join(f"R{k}" for k in first.missing),
    )
    second = _partition_pass(basis_reaction_nums, raw, nonzero_tol=nonzero_tol, used_fallback=True)
    if second.outcome is Outcome.INCOMPLETE:
        logger.warning(
            "partitions are incomplete after the unrounded fallback; missing %s",
            ", ".join(f"R{k}" for k in second.missing),
        )
    return second
