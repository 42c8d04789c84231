"""Plain-text rendering of a decomposition result."""

from __future__ import annotations

from typing import Sequence

from .api import DecompositionResult
from .graph import reaction_label


def format_partition(partition: Sequence[int]) -> str:
    """Comma-joined reaction labels, e.g. "R1, R3, R5"."""
    return ", ".join(reaction_label(k) for k in partition)


def format_decomposition(result: DecompositionResult) -> str:
    """Render the subnetworks as

        Incidence Independent Decomposition - <id>

        N1: R1, R2
        N2: R3, R4

    or the no-decomposition message.
    """
    if not result.has_decomposition:
        return result.message

    lines = [f"Incidence Independent Decomposition - {result.network.id}", ""]
    for i, p in enumerate(result.partitions, start=1):
        lines.append(f"N{i}: {format_partition(p)}")
    if not result.complete:
        lines.append("")
        lines.append("Unassigned: " + format_partition(result.missing))
    return "\n".join(lines)


def format_reactions(result: DecompositionResult) -> str:
    """List the pseudo-reactions with their numbers, e.g. "R2: B -> A"."""
    species = result.species
    complexes = result.encoding.complexes

    def side(row: int) -> str:
        terms = []
        for name, c in zip(species, complexes[row]):
            if c:
                terms.append(name if c == 1 else f"{c:g} {name}")
        return " + ".join(terms) if terms else "0"

    lines = []
    for k, (a, b) in enumerate(zip(result.encoding.reactant_index, result.encoding.product_index), start=1):
        lines.append(f"{reaction_label(k)}: {side(a)} -> {side(b)}")
    return "\n".join(lines)
