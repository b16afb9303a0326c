"""Tests for treecanon.keys module."""
from fractions import Fraction

import pytest

from treecanon.keys.symmetry import SymmetryKey, SymmetryMode, symmetry_key
from treecanon.keys.aggregate import WeightTable
from treecanon.encode.planar import encode_planar
from treecanon.canon.labeled import canonicalize_labeled
from treecanon.config.settings import TraversalLimits
from treecanon.errors import StructuralError, StructuralLimitExceeded
from treecanon.tree.model import leaf, node

T1 = node("+", [leaf("x"), leaf("y")])
T2 = node("+", [leaf("y"), leaf("x")])
TXX = node("+", [leaf("x"), leaf("x")])


# --- symmetry_key dispatch ---

def test_end_to_end_scenario():
    assert symmetry_key(T1, SymmetryMode.PLANAR).key != symmetry_key(T2, SymmetryMode.PLANAR).key
    assert (
        symmetry_key(T1, SymmetryMode.SYMMETRIC_AGG).key
        == symmetry_key(T2, SymmetryMode.SYMMETRIC_AGG).key
    )
    for mode in SymmetryMode:
        assert symmetry_key(T1, mode).aut == 1
        assert symmetry_key(T2, mode).aut == 1


def test_planar_mode_uses_planar_encoding():
    sk = symmetry_key(TXX, SymmetryMode.PLANAR)
    assert sk == SymmetryKey(encode_planar(TXX), 1, SymmetryMode.PLANAR)


def test_symmetric_modes_share_computation():
    agg = symmetry_key(TXX, SymmetryMode.SYMMETRIC_AGG)
    orbit = symmetry_key(TXX, SymmetryMode.SYMMETRIC_ORBIT)
    code, aut = canonicalize_labeled(TXX)
    assert (agg.key, agg.aut) == (code, aut) == (orbit.key, orbit.aut)
    assert aut == 2


def test_mode_from_string():
    assert symmetry_key(T1, "planar").mode is SymmetryMode.PLANAR
    assert symmetry_key(T1, "symmetric-agg").mode is SymmetryMode.SYMMETRIC_AGG
    assert symmetry_key(T1, "symmetric-orbit").mode is SymmetryMode.SYMMETRIC_ORBIT


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        symmetry_key(T1, "fuzzy")


def test_key_deterministic():
    for mode in SymmetryMode:
        assert symmetry_key(T1, mode) == symmetry_key(T1, mode)


def test_custom_show():
    t1 = node(1, [leaf(2), leaf(3)])
    t2 = node(1, [leaf(3), leaf(2)])
    show = lambda n: format(n, "b")  # noqa: E731
    assert symmetry_key(t1, "symmetric-agg", show=show).key == "(1:1|2:102:11)"
    assert symmetry_key(t1, "symmetric-agg", show=show) == symmetry_key(t2, "symmetric-agg", show=show)


def test_int_and_str_labels_get_different_keys():
    for mode in SymmetryMode:
        a = symmetry_key(node("+", [leaf(1)]), mode)
        b = symmetry_key(node("+", [leaf("1")]), mode)
        assert a.key != b.key


def test_symmetry_key_rejects_cycle():
    class Cyclic:
        def __init__(self):
            self.label = "c"
            self.children = [leaf("x"), self]

    for mode in SymmetryMode:
        with pytest.raises(StructuralError):
            symmetry_key(Cyclic(), mode)


def test_symmetry_key_node_limit():
    t = node("r", [leaf(i) for i in range(10)])
    for mode in SymmetryMode:
        with pytest.raises(StructuralLimitExceeded):
            symmetry_key(t, mode, limits=TraversalLimits(max_nodes=10))
        assert symmetry_key(t, mode, limits=TraversalLimits(max_nodes=11)).mode is mode


# --- WeightTable ---

def test_weight_table_planar_keeps_orders_apart():
    table = WeightTable(SymmetryMode.PLANAR)
    table.add(T1)
    table.add(T2)
    assert len(table) == 2
    assert table.total() == 2


def test_weight_table_agg_merges_without_division():
    table = WeightTable("symmetric-agg")
    k1 = table.add(T1)
    table.add(T2)
    table.add(TXX, 3)
    table.add(TXX, 3)
    assert table[k1.key] == 2
    assert table[symmetry_key(TXX, "symmetric-agg").key] == 6


def test_weight_table_orbit_divides_by_aut():
    table = WeightTable(SymmetryMode.SYMMETRIC_ORBIT)
    sk = table.add(TXX)
    assert table[sk.key] == Fraction(1, 2)
    table.add(TXX)
    assert table[sk.key] == 1


def test_weight_table_orbit_counts_star_embeddings():
    # All 3! labelings of the children of a star fall into one orbit.
    table = WeightTable(SymmetryMode.SYMMETRIC_ORBIT)
    star = node("r", [leaf("x"), leaf("x"), leaf("x")])
    for _ in range(6):
        table.add(star)
    assert list(table.items()) == [(symmetry_key(star, "symmetric-orbit").key, 1)]


def test_weight_table_add_key():
    table = WeightTable(SymmetryMode.SYMMETRIC_ORBIT)
    sk = symmetry_key(TXX, SymmetryMode.SYMMETRIC_ORBIT)
    table.add_key(sk, 4)
    assert table[sk.key] == 2
    assert sk.key in table
    assert list(table) == [sk.key]


def test_weight_table_rejects_mode_mismatch():
    table = WeightTable(SymmetryMode.SYMMETRIC_ORBIT)
    with pytest.raises(ValueError):
        table.add_key(symmetry_key(TXX, SymmetryMode.SYMMETRIC_AGG))


def test_weight_table_empty_total():
    assert WeightTable("planar").total() == 0
