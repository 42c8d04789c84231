"""Test partition assignment and the unrounded fallback."""

from __future__ import annotations

import logging

import numpy as np

from crn_incidence.partition import Outcome, assign_partitions, decompose_combinations, missing_reactions


def test_assign_partitions_two_cycles():
    combo = np.array([
        [0, 0],
        [-1, 0],
        [0, 0],
        [0, -1],
    ], dtype=float)
    parts = assign_partitions((1, 3), (1, 2), combo)
    assert parts == ((1, 2), (3, 4))


def test_assign_partitions_merges_component_members():
    # basis R1, R2 joined by R3; R4 alone; R5 = -R4
    combo = np.array([
        [0, 0, 0],
        [0, 0, 0],
        [1, 1, 0],
        [0, 0, 0],
        [0, 0, -1],
    ], dtype=float)
    parts = assign_partitions((1, 2, 4), (1, 1, 2), combo)
    assert parts == ((1, 2, 3), (4, 5))


def test_missing_reactions():
    assert missing_reactions(((1, 2), (4,)), 4) == (3,)
    assert missing_reactions(((1, 2), (3, 4)), 4) == ()
    assert missing_reactions((), 0) == ()


def test_no_decomposition_without_fallback():
    out = decompose_combinations((1,), np.array([[0.0], [-1.0]]))
    assert out.outcome is Outcome.NO_DECOMPOSITION
    assert out.partitions == ()
    assert not out.used_fallback
    assert out.n_components == 1


def test_decomposed_first_pass():
    raw = np.array([
        [0.0, 0.0],
        [-1.0 + 1e-15, 0.0],
        [0.0, 0.0],
        [0.0, -1.0],
    ])
    out = decompose_combinations((1, 3), raw)
    assert out.outcome is Outcome.DECOMPOSED
    assert out.partitions == ((1, 2), (3, 4))
    assert not out.used_fallback
    assert out.missing == ()
    # partitions are built from the rounded matrix
    assert out.linear_combination[1, 0] == -1.0


def test_fallback_recovers_rounded_away_reaction(caplog):
    raw = np.array([
        [0.0, 0.0],
        [0.0, 0.0],
        [0.4, 0.0],
    ])
    with caplog.at_level(logging.INFO, logger="crn_incidence"):
        out = decompose_combinations((1, 2), raw)

    assert out.outcome is Outcome.DECOMPOSED
    assert out.used_fallback
    assert out.partitions == ((1, 3), (2,))
    assert np.array_equal(out.linear_combination, raw)
    assert "R3" in caplog.text


def test_fallback_can_end_without_decomposition():
    # rounding hides the edge R1-R2 that the unrounded coefficients reveal
    raw = np.array([
        [0.0, 0.0],
        [0.0, 0.0],
        [0.4, 0.3],
    ])
    out = decompose_combinations((1, 2), raw)
    assert out.outcome is Outcome.NO_DECOMPOSITION
    assert out.used_fallback
    assert out.graph.has_edge("R1", "R2")


def test_fallback_rebuilds_graph_from_scratch():
    raw = np.array([
        [0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0],
        [0.0, 0.0, 0.3],
    ])
    out = decompose_combinations((1, 2, 3), raw)
    assert out.used_fallback
    assert out.graph.number_of_edges() == 0
    assert out.partitions == ((1,), (2,), (3, 4))


def test_still_incomplete_is_flagged(caplog):
    raw = np.zeros((3, 2))
    with caplog.at_level(logging.WARNING, logger="crn_incidence"):
        out = decompose_combinations((1, 2), raw)

    assert out.outcome is Outcome.INCOMPLETE
    assert out.used_fallback
    assert out.partitions == ((1,), (2,))
    assert out.missing == (3,)
    assert "incomplete" in caplog.text
