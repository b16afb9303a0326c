"""
Aggregate the admissible cuts of a random labeled tree by symmetry key.

An admissible cut removes a set of child edges with at most one cut on any
root-to-leaf path; it splits the tree into a pruned forest and a trunk.
Each (forest, trunk) term is packed into one tree and keyed in the chosen
mode, and its weight is summed in a WeightTable.

Usage:
    python cut_weights.py [--nodes N] [--labels ab] [--seed S]
                          [--mode {planar,symmetric-agg,symmetric-orbit,all}]
                          [--verbose] [--log-json]

Requires the treecanon package.
"""

from __future__ import annotations

import argparse
import logging
import random
from itertools import product
from typing import Iterator, List, Tuple

from treecanon import LTree, SymmetryMode, WeightTable, node, pretty, symmetry_key
from treecanon.config.logging import configure_logging

logger = logging.getLogger("treecanon.examples.cut_weights")


def random_tree(rng: random.Random, n_nodes: int, labels: str) -> LTree:
    lab = [rng.choice(labels) for _ in range(n_nodes)]
    kids: List[List[int]] = [[] for _ in range(n_nodes)]
    for v in range(1, n_nodes):
        kids[rng.randrange(v)].append(v)

    def build(v: int) -> LTree:
        return node(lab[v], [build(c) for c in kids[v]])

    return build(0)


def admissible_cuts(tr: LTree) -> Iterator[Tuple[List[LTree], LTree]]:
    """Yield (pruned forest, trunk) for every admissible cut, the empty cut included."""
    per_child = []
    for c in tr.children:
        options: list = [([c], None)]
        options.extend(admissible_cuts(c))
        per_child.append(options)

    for choice in product(*per_child):
        forest: List[LTree] = []
        kept: List[LTree] = []
        for pruned, trunk in choice:
            forest.extend(pruned)
            if trunk is not None:
                kept.append(trunk)
        yield forest, LTree(tr.label, tuple(kept))


def run_mode(tree: LTree, mode: SymmetryMode) -> WeightTable:
    table = WeightTable(mode)
    n_terms = 0
    for forest, trunk in admissible_cuts(tree):
        n_terms += 1
        # Sibling order under "forest" only matters in planar mode.
        table.add(node("cut", [node("forest", forest), node("trunk", [trunk])]))
    logger.debug("mode=%s terms=%d distinct=%d", mode.value, n_terms, len(table))

    print(f"\n== {mode.value}: {n_terms} terms, {len(table)} distinct keys, total weight {table.total()}")
    for key, weight in sorted(table.items())[:20]:
        print(f"  {weight!s:>8}  {key}")
    if len(table) > 20:
        print(f"  ... ({len(table) - 20} more)")
    return table


def main() -> None:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--nodes", type=int, default=6)
    ap.add_argument("--labels", type=str, default="ab")
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument(
        "--mode",
        choices=[m.value for m in SymmetryMode] + ["all"],
        default="all",
    )
    ap.add_argument("--verbose", action="store_true")
    ap.add_argument("--log-json", action="store_true")
    args = ap.parse_args()

    configure_logging(verbose=args.verbose, log_json=args.log_json)

    rng = random.Random(args.seed)
    tree = random_tree(rng, args.nodes, args.labels)
    print("Tree:", pretty(tree))
    print("Canonical:", symmetry_key(tree, SymmetryMode.SYMMETRIC_AGG).key)

    modes = list(SymmetryMode) if args.mode == "all" else [SymmetryMode(args.mode)]
    for mode in modes:
        run_mode(tree, mode)


if __name__ == "__main__":
    main()
