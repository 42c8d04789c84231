"""Incidence independent decomposition of chemical reaction networks.

Core contract:
- inputs: a Network record (reactions with reactant/product complexes and a reversibility flag)
- workflow: species -> complexes -> incidence matrix -> basis -> linear combinations
  -> reaction graph -> connected components -> partitions

Reference: Hernandez B, Amistas D, De la Cruz R, Fontanil L, de los Reyes V A,
Mendoza E (2022) Independent, incidence independent and weakly reversible
decompositions of chemical reaction networks. MATCH Commun Math Comput Chem
87(2):367-396.
"""

from .errors import CRNIncidenceError, InvalidNetworkError
from .network import Network, Reaction
from .partition import Outcome
from .api import DecompositionResult, incidence_independent_decomposition
from .report import format_decomposition, format_partition

__all__ = [
    "CRNIncidenceError",
    "InvalidNetworkError",
    "Network",
    "Reaction",
    "Outcome",
    "DecompositionResult",
    "incidence_independent_decomposition",
    "format_decomposition",
    "format_partition",
]
