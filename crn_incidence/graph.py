"""Reaction graph G over the basis reactions.

Vertices are the basis reactions, labelled "R<k>" with k the 1-based
pseudo-reaction number. Two basis reactions are joined when both carry a
nonzero coefficient in the linear combination of some other reaction. A
combination touching p basis vectors contributes all p*(p-1)/2 pairs (a
clique, not a path).
"""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from .utils import FLOAT_TOL, nonzero_positions


def reaction_label(k: int) -> str:
    return f"R{k}"


def combination_edges(
    linear_combination: NDArray[np.float64],
    *,
    nonzero_tol: float = FLOAT_TOL,
) -> list[tuple[int, int]]:
    """Unique basis-column pairs (i < j) that co-occur in some combination row."""
    edges: set[tuple[int, int]] = set()
    for row in np.asarray(linear_combination, dtype=float):
        cols = nonzero_positions(row, tol=nonzero_tol)
        if len(cols) < 2:
            continue
        edges.update(combinations(cols, 2))
    return sorted(edges)


def build_reaction_graph(
    basis_reaction_nums: Sequence[int],
    linear_combination: NDArray[np.float64],
    *,
    nonzero_tol: float = FLOAT_TOL,
) -> nx.Graph:
    """Build G from the basis and the linear-combination matrix.

    Nodes are added in basis order and carry the attribute reaction=k.
    """
    G = nx.Graph()
    for k in basis_reaction_nums:
        G.add_node(reaction_label(k), reaction=int(k))

    for i, j in combination_edges(linear_combination, nonzero_tol=nonzero_tol):
        G.add_edge(
            reaction_label(basis_reaction_nums[i]),
            reaction_label(basis_reaction_nums[j]),
        )
    return G


def component_numbers(G: nx.Graph) -> list[int]:
    """1-based connected-component number of each node, in node order.

    Components are numbered in order of their first node, so the component
    of the first basis reaction is always 1.
    """
    number: dict[str, int] = {}
    for c, comp in enumerate(nx.connected_components(G), start=1):
        for node in comp:
            number[node] = c
    return [number[node] for node in G.nodes]
