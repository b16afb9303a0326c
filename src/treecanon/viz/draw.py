from __future__ import annotations

import logging

import networkx as nx
import matplotlib.pyplot as plt

from treecanon.keys.symmetry import SymmetryMode, symmetry_key
from treecanon.tree.convert import ltree_to_nx
from .layouts import layered_tree_layout

logger = logging.getLogger(__name__)


def _short(key: str, width: int) -> str:
    return key if len(key) <= width else key[: width - 3] + "..."


def draw_tree_pair(
    treeA,
    treeB,
    *,
    mode: SymmetryMode | str = SymmetryMode.SYMMETRIC_AGG,
    node_size: int = 500,
    max_nodes_to_draw: int = 200,
    key_width: int = 60,
    save_path: str | None = None,
):
    """
    Draw two labeled trees side by side, titled with their keys under *mode*.

    If save_path is set, saves a PNG there and closes the figure; otherwise
    shows it.  Returns the two SymmetryKeys.
    """
    keyA = symmetry_key(treeA, mode)
    keyB = symmetry_key(treeB, mode)
    if keyA.key == keyB.key:
        logger.debug("trees share %s key (aut=%d)", keyA.mode.value, keyA.aut)

    fig, axes = plt.subplots(1, 2, figsize=(12, 6))
    for ax, tree, sk, name in zip(axes, (treeA, treeB), (keyA, keyB), ("A", "B")):
        ax.set_axis_off()
        ax.set_title(f"{name}: {_short(sk.key, key_width)}\n|Aut|={sk.aut}", fontsize=9)

        G = ltree_to_nx(tree)
        if G.number_of_nodes() > max_nodes_to_draw:
            ax.text(
                0.5,
                0.5,
                f"Too large to draw\n(|V|={G.number_of_nodes()})",
                ha="center",
                va="center",
                transform=ax.transAxes,
            )
            continue

        labels = {v: ("" if d["label"] is None else str(d["label"])) for v, d in G.nodes(data=True)}
        nx.draw_networkx(
            G,
            pos=layered_tree_layout(G),
            ax=ax,
            labels=labels,
            node_size=node_size,
            arrows=False,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()

    return keyA, keyB
