from __future__ import annotations

from typing import Any, Hashable, Optional

import networkx as nx

from treecanon.config.settings import TraversalLimits
from treecanon.errors import StructuralError
from treecanon.tree.model import LTree
from treecanon.tree.traverse import check_tree


def ltree_to_nx(
    tree: LTree,
    *,
    limits: TraversalLimits | None = None,
) -> nx.DiGraph:
    """
    Convert an LTree into a NetworkX DiGraph (edges point parent -> child).

    Nodes are integers 0..n-1 in preorder.  Node attributes:
      label: the node label (None if absent)
      order: position among its siblings (root has order 0)
    The root id is stored in G.graph["root"] (always 0).

    Physically shared subtrees are expanded, so the result is always an
    arborescence.
    """
    # Validates shape (cycles, ceilings) before the unchecked walk below.
    check_tree(tree, limits=limits)

    G = nx.DiGraph(root=0)
    next_id = 0
    stack: list[tuple[Any, Optional[int], int]] = [(tree, None, 0)]
    while stack:
        t, parent, order = stack.pop()
        v = next_id
        next_id += 1
        G.add_node(v, label=t.label, order=order)
        if parent is not None:
            G.add_edge(parent, v)
        kids = tuple(t.children)
        for i in range(len(kids) - 1, -1, -1):
            stack.append((kids[i], v, i))
    return G


def _infer_root(G: nx.DiGraph) -> Hashable:
    roots = [v for v, d in G.in_degree() if d == 0]
    if len(roots) != 1:
        raise StructuralError(f"Expected exactly one root, found {len(roots)}.")
    return roots[0]


def ltree_from_nx(
    G: nx.DiGraph,
    root: Hashable | None = None,
    *,
    label_attr: str = "label",
    order_attr: str = "order",
) -> LTree:
    """
    Build an LTree from a directed rooted tree (edges parent -> child).

    root: defaults to G.graph["root"] if present, else the unique node of
          in-degree 0.
    Children are ordered by their *order_attr* attribute when every child
    carries one, otherwise by sorted node id.

    Raises StructuralError if G is not an arborescence, or if children
    without an order attribute have mutually incomparable node ids.
    """
    if G.number_of_nodes() == 0:
        raise StructuralError("Cannot build a tree from an empty graph.")
    if not nx.is_arborescence(G):
        raise StructuralError("Graph is not an arborescence (rooted directed tree).")

    if root is None:
        root = G.graph.get("root")
        if root is None or root not in G:
            root = _infer_root(G)
    elif G.in_degree(root) != 0:
        raise StructuralError(f"Node {root!r} is not the root of G.")

    def ordered_children(v: Hashable) -> list:
        kids = list(G.successors(v))
        if kids and all(order_attr in G.nodes[c] for c in kids):
            return sorted(kids, key=lambda c: G.nodes[c][order_attr])
        try:
            return sorted(kids)
        except TypeError:
            raise StructuralError(
                f"Children of node {v!r} have no {order_attr!r} attribute and their "
                "node ids are not mutually comparable. Add an order attribute to "
                "every child or use comparable node ids."
            ) from None

    # Post-order over the arborescence; networkx yields children before parents.
    built: dict[Hashable, LTree] = {}
    for v in nx.dfs_postorder_nodes(G, source=root):
        kids = tuple(built.pop(c) for c in ordered_children(v))
        built[v] = LTree(G.nodes[v].get(label_attr), kids)
    return built[root]
