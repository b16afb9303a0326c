from __future__ import annotations

import networkx as nx


def layered_tree_layout(G: nx.DiGraph, root=None, *, sibling_order: str = "order") -> dict:
    """
    Positions for a rooted tree drawn top-down:
      - y = -depth
      - leaves get consecutive x slots in left-to-right sibling order
      - an internal node sits at the mean x of its children

    G must be an arborescence (edges parent -> child), as produced by
    ltree_to_nx().
    """
    if G.number_of_nodes() == 0:
        return {}
    if root is None:
        root = G.graph.get("root")
        if root is None:
            root = next(v for v, d in G.in_degree() if d == 0)

    def kids(v):
        return sorted(G.successors(v), key=lambda c: G.nodes[c].get(sibling_order, c))

    depth = {root: 0}
    for parent, child in nx.bfs_edges(G, root):
        depth[child] = depth[parent] + 1

    x: dict = {}
    next_slot = 0
    stack = [(root, False)]
    while stack:
        v, done = stack.pop()
        cs = kids(v)
        if not cs:
            x[v] = float(next_slot)
            next_slot += 1
            continue
        if done:
            x[v] = sum(x[c] for c in cs) / len(cs)
            continue
        stack.append((v, True))
        for c in reversed(cs):
            stack.append((c, False))

    return {v: (x[v], -float(depth[v])) for v in G.nodes()}
