"""Structured CRN input records.

A network is an identifier plus a list of reactions. Each reaction has a
reactant complex and a product complex, written as (species, stoichiometry)
pairs, and a reversibility flag:

  Reaction(reactants=[("A", 1), ("B", 2)], products=[("C", 1)], reversible=True)

is the reversible reaction A + 2B <-> C. Mappings are accepted as well:

  Reaction({"A": 1, "B": 2}, {"C": 1}, reversible=True)

Records validate themselves on construction and raise InvalidNetworkError
before any matrix is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Iterable, Mapping, Union

from .errors import InvalidNetworkError

ComplexSpec = Union[Mapping[str, float], Iterable[tuple[str, float]]]


def _normalize_complex(spec: ComplexSpec, side: str) -> tuple[tuple[str, float], ...]:
    items = spec.items() if isinstance(spec, Mapping) else spec

    out: list[tuple[str, float]] = []
    seen: set[str] = set()
    for pair in items:
        try:
            name, coeff = pair
        except (TypeError, ValueError) as e:
            raise InvalidNetworkError(
                f"{side} entries must be (species, stoichiometry) pairs", context={"entry": pair}
            ) from e

        if not isinstance(name, str) or not name:
            raise InvalidNetworkError(
                f"{side} species names must be non-empty strings", context={"species": name}
            )
        # bool is a Real subclass; True would silently mean 1
        if isinstance(coeff, bool) or not isinstance(coeff, Real) or not coeff > 0:
            raise InvalidNetworkError(
                f"stoichiometry of {name!r} must be a positive number",
                context={"side": side, "species": name, "stoichiometry": coeff},
            )
        if name in seen:
            raise InvalidNetworkError(
                f"species {name!r} is listed twice in the same {side} complex",
                context={"side": side, "species": name},
            )
        seen.add(name)
        out.append((name, float(coeff)))

    return tuple(out)


@dataclass(frozen=True)
class Reaction:
    """One source reaction: reactant complex -> product complex."""

    reactants: ComplexSpec = ()
    products: ComplexSpec = ()
    reversible: bool = False

    def __post_init__(self):
        reactants = _normalize_complex(self.reactants, "reactant")
        products = _normalize_complex(self.products, "product")
        if not reactants and not products:
            raise InvalidNetworkError("reaction has neither reactant nor product species")
        object.__setattr__(self, "reactants", reactants)
        object.__setattr__(self, "products", products)
        object.__setattr__(self, "reversible", bool(self.reversible))

    @property
    def species(self) -> tuple[str, ...]:
        """Species referenced by this reaction, reactants first."""
        names = [name for name, _ in self.reactants]
        names += [name for name, _ in self.products if name not in names]
        return tuple(names)

    def __str__(self) -> str:
        def side(pairs):
            if not pairs:
                return "0"
            return " + ".join(name if c == 1 else f"{c:g} {name}" for name, c in pairs)

        arrow = "<->" if self.reversible else "->"
        return f"{side(self.reactants)} {arrow} {side(self.products)}"


@dataclass(frozen=True)
class Network:
    """A CRN record: identifier, reactions and (once derived) the species list."""

    id: str
    reactions: tuple[Reaction, ...] = ()
    species: tuple[str, ...] | None = field(default=None)

    def __post_init__(self):
        if not isinstance(self.id, str):
            raise InvalidNetworkError("network id must be a string", context={"id": self.id})
        reactions = tuple(self.reactions)
        for rxn in reactions:
            if not isinstance(rxn, Reaction):
                raise InvalidNetworkError(
                    f"network {self.id!r} contains a non-Reaction entry",
                    context={"entry": rxn},
                )
        object.__setattr__(self, "reactions", reactions)
        if self.species is not None:
            object.__setattr__(self, "species", tuple(self.species))

    @property
    def n_source_reactions(self) -> int:
        return len(self.reactions)

    @property
    def n_pseudo_reactions(self) -> int:
        """Reaction count after expanding each reversible reaction into two."""
        return sum(2 if rxn.reversible else 1 for rxn in self.reactions)

    def with_species(self, species: Iterable[str]) -> "Network":
        return replace(self, species=tuple(species))
