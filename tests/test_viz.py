"""Tests for treecanon.viz module."""
import matplotlib

matplotlib.use("Agg")

from treecanon.keys.symmetry import SymmetryMode  # noqa: E402
from treecanon.tree.convert import ltree_to_nx  # noqa: E402
from treecanon.tree.model import leaf, node  # noqa: E402
from treecanon.viz.layouts import layered_tree_layout  # noqa: E402
from treecanon.viz.draw import draw_tree_pair  # noqa: E402


# --- layout ---

def test_layout_layers_and_centering():
    G = ltree_to_nx(node("r", [leaf("a"), node("b", [leaf("c"), leaf("d")])]))
    pos = layered_tree_layout(G)
    assert pos[0][1] == 0.0
    assert pos[1] == (0.0, -1.0)
    assert pos[3] == (1.0, -2.0)
    assert pos[4] == (2.0, -2.0)
    assert pos[2] == (1.5, -1.0)
    assert pos[0][0] == 0.75


def test_layout_single_node():
    assert layered_tree_layout(ltree_to_nx(leaf("x"))) == {0: (0.0, -0.0)}


# --- drawing ---

def test_draw_tree_pair_saves_png(tmp_path):
    t1 = node("+", [leaf("x"), leaf("y")])
    t2 = node("+", [leaf("y"), leaf("x")])
    out = tmp_path / "pair.png"
    keyA, keyB = draw_tree_pair(t1, t2, mode=SymmetryMode.SYMMETRIC_AGG, save_path=str(out))
    assert out.exists()
    assert keyA.key == keyB.key


def test_draw_tree_pair_too_large(tmp_path):
    big = node("r", [leaf("x") for _ in range(30)])
    out = tmp_path / "big.png"
    keyA, _ = draw_tree_pair(big, leaf("x"), mode="planar", max_nodes_to_draw=10, save_path=str(out))
    assert out.exists()
    assert keyA.aut == 1
