"""
Causal Graph: an immutable directed acyclic graph over named variables.

Representation:

    Variables are stored once, in a fixed order that defines their index.
    Edges live in a networkx DiGraph keyed by variable name; an edge
    (i, j) means variable i directly causes variable j. Adjacency is
    sparse, so a graph with n variables and |E| edges costs O(n + |E|)
    memory and every traversal runs in O(n + |E|).

    A learned or ground-truth weight matrix W (W_ij != 0 means i -> j) can
    be read in directly through `CausalGraph.from_adjacency`.

Acyclicity:

    Enforced on every mutation, never by periodic validation. Before adding
    i -> j we check whether j already reaches i; if so the edge would close
    a cycle and CycleViolationError is raised.

Immutability:

    Every operation returns a new graph and the underlying DiGraph is
    frozen. Graphs compare and hash structurally, so they can be shared
    freely between threads or used as dict keys.
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Sequence, Tuple

import networkx as nx
import numpy as np

from causalid.errors import CycleViolationError, DuplicateVariableError, UnknownVariableError

logger = logging.getLogger(__name__)


def _check_acyclic(dag: nx.DiGraph, source: str, target: str):
    """Raise CycleViolationError if source -> target would close a cycle in dag."""
    if source == target or nx.has_path(dag, target, source):
        logger.debug("Refused edge %s -> %s: would close a cycle", source, target)
        raise CycleViolationError(source, target)


class CausalGraph:
    """Immutable DAG over named variables, backed by a frozen networkx DiGraph."""

    def __init__(self, variables: Sequence[str], latent: Iterable[str] = ()):
        """
        Args:
            variables: Unique variable names. Their order defines the index.
            latent: Names of unobserved variables. They take part in every
                structural query but are never proposed as adjustment or
                mediator candidates.
        """
        variables = tuple(variables)
        dag = nx.DiGraph()
        dag.add_nodes_from(variables)
        self._init(variables, dag, latent)

    def _init(self, variables: Tuple[str, ...], dag: nx.DiGraph, latent: Iterable[str]):
        index: Dict[str, int] = {}
        for i, name in enumerate(variables):
            if name in index:
                raise DuplicateVariableError(name)
            index[name] = i

        latent = frozenset(latent)
        for name in latent:
            if name not in index:
                raise UnknownVariableError(name)

        self._variables = variables
        self._index = index
        self._latent = latent
        self._dag = nx.freeze(dag)

    @classmethod
    def _wrap(
        cls,
        variables: Sequence[str],
        dag: nx.DiGraph,
        latent: Iterable[str] = (),
    ) -> "CausalGraph":
        """Build around `dag` without a cycle check. Takes ownership of `dag`."""
        graph = cls.__new__(cls)
        graph._init(tuple(variables), dag, latent)
        return graph

    def _copy_dag(self) -> nx.DiGraph:
        dag = nx.DiGraph()
        dag.add_nodes_from(self._variables)
        dag.add_edges_from(self._dag.edges)
        return dag

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(
        cls,
        variables: Sequence[str],
        edges: Iterable[Tuple[str, str]],
        latent: Iterable[str] = (),
    ) -> "CausalGraph":
        """
        Build a graph from a variable list and (source, target) pairs.

        Edges are inserted into one working DiGraph with the same cycle
        check as `add_edge`, so building costs O(|E|) path queries rather
        than one graph copy per edge.
        """
        graph = cls(variables, latent=latent)
        dag = graph._copy_dag()
        for source, target in edges:
            graph.index_of(source)
            graph.index_of(target)
            if dag.has_edge(source, target):
                continue
            _check_acyclic(dag, source, target)
            dag.add_edge(source, target)
        return cls._wrap(graph._variables, dag, graph._latent)

    @classmethod
    def from_adjacency(
        cls,
        variables: Sequence[str],
        matrix,
        threshold: float = 0.0,
        latent: Iterable[str] = (),
    ) -> "CausalGraph":
        """
        Build a graph from a (weighted) adjacency matrix.

        Args:
            variables: Variable names, one per row/column.
            matrix: Array-like of shape (n, n); matrix[i, j] is the weight
                of i -> j, e.g. a learned or ground-truth weight matrix.
            threshold: Entries with |w| > threshold become edges. Use 0.5
                on edge probabilities, 0.0 on signed structural weights.
            latent: Names of unobserved variables.

        Raises:
            ValueError: If the matrix shape does not match the variables.
            CycleViolationError: If the thresholded matrix has a self-loop
                or a directed cycle. The reported edge lies on the cycle.
        """
        variables = tuple(variables)
        weights = np.asarray(matrix, dtype=float)
        n = len(variables)
        if weights.shape != (n, n):
            raise ValueError(
                f"Adjacency shape {weights.shape} does not match {n} variables"
            )
        rows, cols = np.nonzero(np.abs(weights) > threshold)

        dag = nx.DiGraph()
        dag.add_nodes_from(variables)
        dag.add_edges_from((variables[i], variables[j]) for i, j in zip(rows, cols))
        graph = cls._wrap(variables, dag, latent)

        try:
            cycle = nx.find_cycle(graph._dag)
        except nx.NetworkXNoCycle:
            return graph
        source, target = cycle[0][:2]
        raise CycleViolationError(source, target)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CausalGraph":
        """Inverse of `to_dict`."""
        return cls.from_edges(
            data["variables"],
            [tuple(edge) for edge in data.get("edges", [])],
            latent=data.get("latent", ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Edge-list description, safe to dump as JSON."""
        return {
            "variables": list(self._variables),
            "edges": [list(edge) for edge in self.edges()],
            "latent": sorted(self._latent),
        }

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def variables(self) -> Tuple[str, ...]:
        return self._variables

    @property
    def latent(self) -> FrozenSet[str]:
        return self._latent

    @property
    def observed(self) -> Tuple[str, ...]:
        """Non-latent variables, in index order."""
        return tuple(v for v in self._variables if v not in self._latent)

    @property
    def dag(self) -> nx.DiGraph:
        """The frozen networkx DiGraph holding the edges. Copy before modifying."""
        return self._dag

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise UnknownVariableError(name) from None

    def resolve(self, nodes) -> FrozenSet[str]:
        """
        Normalize a single name or an iterable of names into a frozenset,
        checking that every name is in the graph.
        """
        if isinstance(nodes, str):
            nodes = (nodes,)
        names = frozenset(nodes)
        for name in names:
            if name not in self._index:
                raise UnknownVariableError(name)
        return names

    def parents(self, v: str) -> FrozenSet[str]:
        self.index_of(v)
        return frozenset(self._dag.predecessors(v))

    def children(self, v: str) -> FrozenSet[str]:
        self.index_of(v)
        return frozenset(self._dag.successors(v))

    def has_edge(self, source: str, target: str) -> bool:
        self.index_of(source)
        self.index_of(target)
        return self._dag.has_edge(source, target)

    def edges(self) -> List[Tuple[str, str]]:
        """All edges as (source, target), in row-major index order."""
        index = self._index
        return sorted(self._dag.edges, key=lambda e: (index[e[0]], index[e[1]]))

    @property
    def num_edges(self) -> int:
        return self._dag.number_of_edges()

    def to_adjacency(self, dtype=int) -> np.ndarray:
        """Dense adjacency matrix in variable order; a fresh, writable array."""
        return nx.to_numpy_array(self._dag, nodelist=list(self._variables), dtype=dtype)

    # ------------------------------------------------------------------
    # Mutation (returns new graphs)
    # ------------------------------------------------------------------

    def add_edge(self, source: str, target: str) -> "CausalGraph":
        """
        Return a graph with source -> target added.

        Raises:
            UnknownVariableError: If either endpoint is absent.
            CycleViolationError: If target is already an ancestor of source
                (or source == target). This graph is unchanged.
        """
        if self.has_edge(source, target):
            return self
        _check_acyclic(self._dag, source, target)
        dag = self._copy_dag()
        dag.add_edge(source, target)
        return self._wrap(self._variables, dag, self._latent)

    def remove_edge(self, source: str, target: str) -> "CausalGraph":
        """Return a graph without source -> target; unchanged if the edge is absent."""
        if not self.has_edge(source, target):
            return self
        dag = self._copy_dag()
        dag.remove_edge(source, target)
        return self._wrap(self._variables, dag, self._latent)

    def remove_incoming_edges(self, nodes) -> "CausalGraph":
        """Return a graph with every edge into `nodes` deleted."""
        cut = list(self._dag.in_edges(self.resolve(nodes)))
        if not cut:
            return self
        dag = self._copy_dag()
        dag.remove_edges_from(cut)
        return self._wrap(self._variables, dag, self._latent)

    def remove_outgoing_edges(self, nodes) -> "CausalGraph":
        """Return a graph with every edge out of `nodes` deleted."""
        cut = list(self._dag.out_edges(self.resolve(nodes)))
        if not cut:
            return self
        dag = self._copy_dag()
        dag.remove_edges_from(cut)
        return self._wrap(self._variables, dag, self._latent)

    def subgraph(self, nodes: Iterable[str]) -> "CausalGraph":
        """Induced subgraph on `nodes`, keeping this graph's variable order."""
        names = self.resolve(list(nodes))
        variables = [v for v in self._variables if v in names]
        dag = nx.DiGraph()
        dag.add_nodes_from(variables)
        dag.add_edges_from((u, v) for u, v in self._dag.out_edges(variables) if v in names)
        return self._wrap(variables, dag, self._latent & names)

    def reversed(self) -> "CausalGraph":
        """The same variables with every edge flipped."""
        return self._wrap(self._variables, self._dag.reverse(copy=True), self._latent)

    # ------------------------------------------------------------------
    # Ordering and summaries
    # ------------------------------------------------------------------

    def topological_order(self) -> List[str]:
        """
        Variables ordered parents-before-children.

        Ties are broken by index, so the order is deterministic. Structural
        equations can be evaluated in this order.
        """
        return list(nx.lexicographical_topological_sort(self._dag, key=self._index.__getitem__))

    def get_graph_stats(self) -> dict:
        """Return interpretable statistics about the graph."""
        n = len(self._variables)
        edges = self.num_edges
        in_degree = [self._dag.in_degree(v) for v in self._variables]
        out_degree = [self._dag.out_degree(v) for v in self._variables]
        return {
            "variables": n,
            "edges": edges,
            "density": round(edges / (n * (n - 1)), 4) if n > 1 else 0.0,
            "roots": [v for v, d in zip(self._variables, in_degree) if d == 0],
            "sinks": [v for v, d in zip(self._variables, out_degree) if d == 0],
            "latent": sorted(self._latent),
            "max_in_degree": max(in_degree, default=0),
            "max_out_degree": max(out_degree, default=0),
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __contains__(self, name) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CausalGraph):
            return NotImplemented
        return (
            self._variables == other._variables
            and self._latent == other._latent
            and set(self._dag.edges) == set(other._dag.edges)
        )

    def __hash__(self) -> int:
        return hash((self._variables, self._latent, frozenset(self._dag.edges)))

    def __repr__(self) -> str:
        return f"CausalGraph(variables={len(self._variables)}, edges={self.num_edges})"
