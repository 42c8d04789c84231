"""Species index and complex encoding.

Every reversible source reaction rho is expanded into two pseudo-reactions:
  rho+  reactant -> product
  rho-  product -> reactant   (placed right after rho+)

From here on every reaction-indexed structure counts pseudo-reactions. The
bookkeeping arrays map pseudo-reaction index -> source index and sign, so a
column of the stoichiometric matrix satisfies
  N[:, k] = pseudo_sign[k] * (product - reactant)(source pseudo_to_source[k])

Complexes (reactant and product vectors over the species index) are
deduplicated into one table; identical vectors share one complex index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .network import Reaction


def collect_species(reactions: Sequence[Reaction]) -> tuple[str, ...]:
    """Return the sorted, duplicate-free species index of a reaction list."""
    names: set[str] = set()
    for rxn in reactions:
        names.update(name for name, _ in rxn.reactants)
        names.update(name for name, _ in rxn.products)
    return tuple(sorted(names))


@dataclass(frozen=True)
class ComplexEncoding:
    """Deduplicated complexes and the pseudo-reactions between them.

    Shapes (m species, n complexes, r pseudo-reactions):
      complexes:             (n, m)  one row per distinct complex
      reactant_index:        (r,)    complex row of each reactant
      product_index:         (r,)    complex row of each product
      pseudo_to_source:      (r,)    source reaction index (0-based)
      pseudo_sign:           (r,)    +1 forward, -1 reverse
      stoichiometric_matrix: (m, r)  product minus reactant
    """

    species: tuple[str, ...]
    complexes: np.ndarray
    reactant_index: np.ndarray
    product_index: np.ndarray
    pseudo_to_source: np.ndarray
    pseudo_sign: np.ndarray
    stoichiometric_matrix: np.ndarray

    @property
    def n_species(self) -> int:
        return len(self.species)

    @property
    def n_complexes(self) -> int:
        return int(self.complexes.shape[0])

    @property
    def n_reactions(self) -> int:
        return int(self.reactant_index.shape[0])

    def self_loops(self) -> list[int]:
        """Pseudo-reaction indices (0-based) whose reactant and product complex coincide."""
        return np.flatnonzero(self.reactant_index == self.product_index).tolist()


def _complex_vector(pairs, position: dict[str, int], m: int) -> NDArray[np.float64]:
    v = np.zeros(m)
    for name, coeff in pairs:
        v[position[name]] = coeff
    return v


def encode_complexes(
    reactions: Sequence[Reaction],
    species: Sequence[str] | None = None,
) -> ComplexEncoding:
    """Build the complex table and pseudo-reaction bookkeeping.

    Args:
        reactions: source reactions
        species: species index; collected from the reactions if None

    Returns:
        ComplexEncoding
    """
    if species is None:
        species = collect_species(reactions)
    species = tuple(species)
    position = {name: i for i, name in enumerate(species)}
    m = len(species)
    r = sum(2 if rxn.reversible else 1 for rxn in reactions)

    reactant_vecs = np.zeros((r, m))
    product_vecs = np.zeros((r, m))
    pseudo_to_source = np.zeros(r, dtype=int)
    pseudo_sign = np.zeros(r, dtype=int)

    k = 0
    for rho, rxn in enumerate(reactions):
        y = _complex_vector(rxn.reactants, position, m)
        y_prime = _complex_vector(rxn.products, position, m)

        # Always include forward (rho+)
        reactant_vecs[k], product_vecs[k] = y, y_prime
        pseudo_to_source[k], pseudo_sign[k] = rho, +1
        k += 1

        # Reverse only if reversible
        if rxn.reversible:
            reactant_vecs[k], product_vecs[k] = y_prime, y
            pseudo_to_source[k], pseudo_sign[k] = rho, -1
            k += 1

    if r == 0:
        complexes = np.zeros((0, m))
        inverse = np.zeros(0, dtype=int)
    else:
        # rows sorted lexicographically; inverse[k] is the complex row of stacked vector k
        complexes, inverse = np.unique(
            np.vstack([reactant_vecs, product_vecs]), axis=0, return_inverse=True
        )
        inverse = np.asarray(inverse, dtype=int).reshape(-1)

    return ComplexEncoding(
        species=species,
        complexes=complexes,
        reactant_index=inverse[:r],
        product_index=inverse[r:],
        pseudo_to_source=pseudo_to_source,
        pseudo_sign=pseudo_sign,
        stoichiometric_matrix=(product_vecs - reactant_vecs).T,
    )
