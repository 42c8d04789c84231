"""Test linear combinations of basis reactions."""

from __future__ import annotations

import numpy as np

from crn_incidence import examples
from crn_incidence.combination import residual_norms, round_combination, solve_linear_combinations
from crn_incidence.complexes import encode_complexes
from crn_incidence.incidence import incidence_matrix, reaction_matrix
from crn_incidence.rref import BasisSelection, basis_reactions


def _R(network):
    enc = encode_complexes(network.reactions)
    return reaction_matrix(incidence_matrix(enc))


def test_triangle_combination():
    R = _R(examples.triangle_network())
    basis = basis_reactions(R)
    assert basis.reaction_nums == (1, 2)

    combo = solve_linear_combinations(R, basis)
    assert combo.shape == (3, 2)
    # A -> C = (A -> B) + (B -> C)
    assert np.array_equal(combo[2], [1.0, 1.0])
    # basis rows are not expressed through the basis
    assert np.array_equal(combo[:2], np.zeros((2, 2)))


def test_combinations_reconstruct_reactions():
    for build in (
        examples.self_assembly_network,
        examples.triangle_with_exchange_network,
        examples.cycle_with_branch_network,
    ):
        R = _R(build())
        basis = basis_reactions(R)
        combo = solve_linear_combinations(R, basis)
        assert np.allclose(residual_norms(R, basis, combo), 0.0)

        non_basis = [k for k in range(R.shape[0]) if k not in basis.indices]
        assert np.allclose(combo[non_basis] @ basis.rows, R[non_basis])


def test_unrounded_close_to_rounded():
    R = _R(examples.triangle_with_exchange_network())
    basis = basis_reactions(R)
    raw = solve_linear_combinations(R, basis, rounded=False)
    rounded = solve_linear_combinations(R, basis)
    assert np.allclose(raw, rounded, atol=1e-9)
    assert np.array_equal(rounded[4], [0.0, 0.0, -1.0])


def test_alternative_basis():
    R = _R(examples.two_cycles_network())
    basis = BasisSelection(reaction_nums=(2, 4), rows=R[[1, 3], :])
    combo = solve_linear_combinations(R, basis)
    assert np.array_equal(combo, np.array([[-1, 0], [0, 0], [0, -1], [0, 0]], dtype=float))


def test_empty_basis():
    R = np.zeros((2, 3))
    basis = BasisSelection(reaction_nums=(), rows=np.zeros((0, 3)))
    combo = solve_linear_combinations(R, basis)
    assert combo.shape == (2, 0)


def test_round_combination():
    out = round_combination(np.array([[0.4, -0.6], [-0.2, 2.5]]))
    assert np.array_equal(out, np.array([[0.0, -1.0], [0.0, 2.0]]))
    assert not np.any(np.signbit(out[out == 0]))
