"""
D-Separation Engine: conditional independence read off a DAG.

Mathematical formulation (moralization, Lauritzen et al. 1990):

    X ⊥ Y | Z holds in every distribution Markov to G iff X and Y are
    separated by Z in the moral graph of the ancestral subgraph:

        1. G_A = G[X ∪ Y ∪ Z ∪ An(X ∪ Y ∪ Z)]
        2. G_M = moral(G_A): marry every pair of parents that share a
           child, then drop all edge directions.
        3. X ⊥ Y | Z  <=>  every undirected path X ~ Y in G_M meets Z.

    Marrying parents is what makes colliders behave correctly: in A -> C <- B
    the moral edge A - B only exists when C (or a descendant of C) is in the
    ancestral set, i.e. when we condition on the collider.
"""

import itertools
import logging
from typing import FrozenSet, List, Optional, Set, Tuple

import networkx as nx

from causalid.causal_graph import CausalGraph
from causalid.errors import OverlappingSetsError
from causalid.reachability import ancestral_subgraph

logger = logging.getLogger(__name__)


def moralize(g: CausalGraph) -> nx.Graph:
    """
    Undirected moral graph of `g`: every pair of co-parents married, all
    directions dropped. Returns a new, modifiable nx.Graph.
    """
    return nx.moral_graph(g.dag)


def check_disjoint(*sets: FrozenSet[str]):
    """Raise OverlappingSetsError unless the given sets are pairwise disjoint."""
    overlap: Set[str] = set()
    for a, b in itertools.combinations(sets, 2):
        overlap |= a & b
    if overlap:
        raise OverlappingSetsError(overlap)


def d_separated(g: CausalGraph, X, Y, Z=()) -> bool:
    """
    Test whether X and Y are d-separated given Z.

    Args:
        g: Causal graph.
        X, Y: A variable name or an iterable of names.
        Z: Conditioning set (name or iterable), empty by default.

    Returns:
        True if the graph entails X ⊥ Y | Z.

    Raises:
        UnknownVariableError: If any name is absent from g.
        OverlappingSetsError: If X, Y and Z are not pairwise disjoint.
    """
    xs, ys, zs = g.resolve(X), g.resolve(Y), g.resolve(Z)
    check_disjoint(xs, ys, zs)
    if not xs or not ys:
        return True

    moral = moralize(ancestral_subgraph(g, xs | ys | zs))
    moral.remove_nodes_from(zs)

    reached: Set[str] = set()
    for x in xs:
        if x not in reached:
            reached |= nx.node_connected_component(moral, x)
    return not (reached & ys)


def minimal_d_separator(
    g: CausalGraph,
    x: str,
    y: str,
    max_size: Optional[int] = None,
) -> Optional[FrozenSet[str]]:
    """
    Find the smallest set of observed variables that d-separates x and y.

    Sets are tried by increasing size, in variable order within a size.
    The search is exponential in `max_size`; leave it None only on small
    graphs.

    Returns:
        The separator, or None if no observed set up to `max_size` works
        (always None for adjacent variables).
    """
    g.resolve((x, y))
    if x == y or g.has_edge(x, y) or g.has_edge(y, x):
        return None

    pool = [v for v in g.observed if v not in (x, y)]
    limit = len(pool) if max_size is None else min(max_size, len(pool))
    for size in range(limit + 1):
        for combo in itertools.combinations(pool, size):
            if d_separated(g, x, y, combo):
                return frozenset(combo)
    return None


def implied_independencies(
    g: CausalGraph,
    max_conditioning_size: Optional[int] = 2,
) -> List[Tuple[str, str, FrozenSet[str]]]:
    """
    Testable implications of the graph: for every pair of observed,
    non-adjacent variables, the smallest observed conditioning set that
    separates them.

    Returns:
        List of (x, y, Z) with x before y in variable order.
    """
    results = []
    for x, y in itertools.combinations(g.observed, 2):
        separator = minimal_d_separator(g, x, y, max_conditioning_size)
        if separator is not None:
            results.append((x, y, separator))
        else:
            logger.debug("No separator for (%s, %s) up to size %s", x, y, max_conditioning_size)
    return results
