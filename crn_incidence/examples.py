"""Small example networks.

Pseudo-reaction numbering (used in partitions and graph labels) follows the
reaction order, with the reverse of a reversible reaction right after its
forward direction.
"""

from __future__ import annotations

from .network import Network, Reaction


def reversible_pair_network() -> Network:
    """A <-> B: one basis reaction, no decomposition."""
    return Network("reversible_pair", [Reaction({"A": 1}, {"B": 1}, reversible=True)])


def disjoint_reactions_network() -> Network:
    """A -> B, C -> D: two unrelated reactions."""
    return Network(
        "disjoint_reactions",
        [
            Reaction({"A": 1}, {"B": 1}),
            Reaction({"C": 1}, {"D": 1}),
        ],
    )


def two_cycles_network() -> Network:
    """A -> B -> A and C -> D -> C."""
    return Network(
        "two_cycles",
        [
            Reaction({"A": 1}, {"B": 1}),
            Reaction({"B": 1}, {"A": 1}),
            Reaction({"C": 1}, {"D": 1}),
            Reaction({"D": 1}, {"C": 1}),
        ],
    )


def triangle_network() -> Network:
    """A -> B, B -> C, A -> C: R3 = R1 + R2 ties R1 and R2 together."""
    return Network(
        "triangle",
        [
            Reaction({"A": 1}, {"B": 1}),
            Reaction({"B": 1}, {"C": 1}),
            Reaction({"A": 1}, {"C": 1}),
        ],
    )


def triangle_with_exchange_network() -> Network:
    """Triangle A -> B -> C <- A plus an exchange D <-> E.

    Decomposes into {R1, R2, R3} and {R4, R5}.
    """
    return Network(
        "triangle_with_exchange",
        [
            Reaction({"A": 1}, {"B": 1}),
            Reaction({"B": 1}, {"C": 1}),
            Reaction({"A": 1}, {"C": 1}),
            Reaction({"D": 1}, {"E": 1}, reversible=True),
        ],
    )


def self_assembly_network() -> Network:
    """Fuel-driven self-assembly:

      1) F + 2 X1 <-> X2 + W
      2) X1 + X2 <-> X3
      3) X3 <-> 3 X1

    Each reversible pair forms its own subnetwork: {R1, R2}, {R3, R4}, {R5, R6}.
    """
    return Network(
        "self_assembly",
        [
            Reaction({"F": 1, "X1": 2}, {"X2": 1, "W": 1}, reversible=True),
            Reaction({"X1": 1, "X2": 1}, {"X3": 1}, reversible=True),
            Reaction({"X3": 1}, {"X1": 3}, reversible=True),
        ],
    )


def cycle_with_branch_network() -> Network:
    """Cycle A -> B -> C -> A, a branch C -> D and an inflow 0 -> E.

    The cycle's closing reaction R3 = -(R1 + R2) joins R1 and R2; the
    branch and the inflow stay on their own: {R1, R2, R3}, {R4}, {R5}.
    """
    return Network(
        "cycle_with_branch",
        [
            Reaction({"A": 1}, {"B": 1}),
            Reaction({"B": 1}, {"C": 1}),
            Reaction({"C": 1}, {"A": 1}),
            Reaction({"C": 1}, {"D": 1}),
            Reaction((), {"E": 1}),
        ],
    )
