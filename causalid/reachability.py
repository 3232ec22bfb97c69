"""
Reachability Kernel: ancestor, descendant and path queries over a CausalGraph.

Every query is a single networkx traversal of the graph's DiGraph, O(n + |E|)
even on graphs with heavily reconvergent paths.

Results are plain sets, recomputed on every call. Their iteration order is
not meaningful.
"""

from typing import Iterable, Set, TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from causalid.causal_graph import CausalGraph


def ancestors(g: "CausalGraph", v: str) -> Set[str]:
    """All variables with a directed path into `v`, excluding `v`."""
    g.index_of(v)
    return set(nx.ancestors(g.dag, v))


def descendants(g: "CausalGraph", v: str) -> Set[str]:
    """All variables reachable from `v` along directed edges, excluding `v`."""
    g.index_of(v)
    return set(nx.descendants(g.dag, v))


def markov_blanket(g: "CausalGraph", v: str) -> Set[str]:
    """Parents, children and co-parents of `v`, excluding `v`."""
    blanket = set(g.parents(v))
    for child in g.children(v):
        blanket.add(child)
        blanket |= g.parents(child)
    blanket.discard(v)
    return blanket


def ancestral_subgraph(g: "CausalGraph", nodes) -> "CausalGraph":
    """
    Induced subgraph on `nodes` together with all of their ancestors.

    Variable order and latent marks are inherited from `g`.
    """
    keep = set(g.resolve(nodes))
    for name in list(keep):
        keep |= nx.ancestors(g.dag, name)
    return g.subgraph(keep)


def has_directed_path(
    g: "CausalGraph",
    source: str,
    target: str,
    avoiding: Iterable[str] = (),
) -> bool:
    """
    Whether a directed path source -> ... -> target exists whose interior
    avoids every variable in `avoiding`.

    A variable is trivially connected to itself.
    """
    g.resolve((source, target))
    if source == target:
        return True
    blocked = g.resolve(avoiding) - {source, target}
    return nx.has_path(nx.restricted_view(g.dag, blocked, []), source, target)
