"""Test species collection, complex encoding and the incidence matrix."""

from __future__ import annotations

import logging

import numpy as np

from crn_incidence import examples
from crn_incidence.complexes import collect_species, encode_complexes
from crn_incidence.incidence import incidence_matrix, reaction_matrix
from crn_incidence.network import Network, Reaction


def test_species_sorted_and_unique():
    net = examples.self_assembly_network()
    assert collect_species(net.reactions) == ("F", "W", "X1", "X2", "X3")


def test_species_empty():
    assert collect_species([]) == ()


def test_reversible_pair_encoding():
    net = examples.reversible_pair_network()
    enc = encode_complexes(net.reactions)

    assert enc.species == ("A", "B")
    # complexes sorted lexicographically: B = [0, 1] before A = [1, 0]
    assert np.array_equal(enc.complexes, np.array([[0.0, 1.0], [1.0, 0.0]]))
    assert enc.reactant_index.tolist() == [1, 0]
    assert enc.product_index.tolist() == [0, 1]
    assert enc.pseudo_to_source.tolist() == [0, 0]
    assert enc.pseudo_sign.tolist() == [1, -1]
    assert np.array_equal(enc.stoichiometric_matrix, np.array([[-1.0, 1.0], [1.0, -1.0]]))


def test_split_bookkeeping():
    net = Network(
        "mixed",
        [
            Reaction({"A": 1}, {"B": 1}, reversible=True),
            Reaction({"B": 1}, {"C": 1}),
            Reaction({"C": 1}, {"A": 1}, reversible=True),
        ],
    )
    enc = encode_complexes(net.reactions)
    assert enc.n_reactions == 5
    assert enc.pseudo_to_source.tolist() == [0, 0, 1, 2, 2]
    assert enc.pseudo_sign.tolist() == [1, -1, 1, 1, -1]

    N = enc.stoichiometric_matrix
    assert np.allclose(N[:, 1], -N[:, 0])
    assert np.allclose(N[:, 4], -N[:, 3])


def test_complexes_deduplicated():
    net = examples.triangle_network()
    enc = encode_complexes(net.reactions)
    # A, B, C each appear as reactant and product of several reactions
    assert enc.n_complexes == 3
    assert enc.reactant_index[0] == enc.reactant_index[2]  # A
    assert enc.product_index[1] == enc.product_index[2]    # C


def test_stoichiometric_matrix_matches_complexes_times_incidence():
    for build in (examples.self_assembly_network, examples.cycle_with_branch_network):
        enc = encode_complexes(build().reactions)
        I_a = incidence_matrix(enc)
        assert np.allclose(enc.complexes.T @ I_a, enc.stoichiometric_matrix)


def test_incidence_columns():
    enc = encode_complexes(examples.triangle_with_exchange_network().reactions)
    I_a = incidence_matrix(enc)
    assert I_a.shape == (enc.n_complexes, enc.n_reactions)
    for k in range(enc.n_reactions):
        col = I_a[:, k]
        assert col[enc.reactant_index[k]] == -1
        assert col[enc.product_index[k]] == 1
        assert np.count_nonzero(col) == 2
    assert np.allclose(I_a.sum(axis=0), 0.0)


def test_self_loop_column_keeps_product_entry(caplog):
    net = Network(
        "loop",
        [
            Reaction({"A": 1}, {"B": 1}),
            Reaction({"E": 2}, {"E": 2}),
        ],
    )
    enc = encode_complexes(net.reactions)
    assert enc.self_loops() == [1]

    with caplog.at_level(logging.WARNING, logger="crn_incidence"):
        I_a = incidence_matrix(enc)

    col = I_a[:, 1]
    assert np.count_nonzero(col) == 1
    assert col[enc.product_index[1]] == 1
    assert "R2" in caplog.text


def test_reaction_matrix_is_transpose():
    enc = encode_complexes(examples.two_cycles_network().reactions)
    I_a = incidence_matrix(enc)
    R = reaction_matrix(I_a)
    assert np.array_equal(R, I_a.T)
    R[0, 0] = 99.0
    assert I_a[0, 0] != 99.0


def test_empty_network_encoding():
    enc = encode_complexes([])
    assert enc.n_reactions == 0
    assert enc.n_complexes == 0
    assert incidence_matrix(enc).shape == (0, 0)
