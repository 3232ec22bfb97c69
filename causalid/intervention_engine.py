"""
Intervention Engine: Pearl's do-operator as graph surgery.

Mathematical formulation:

    An intervention do(X = x) replaces the structural equation of X by the
    constant x. Graphically this is mutilation: every edge into X is
    deleted, all other edges are kept.

        G_{\\bar{X}} = (V, E \\ {(v, X) : v ∈ V})

    The assigned value x rides alongside the mutilated graph for downstream
    structural-equation evaluators; it never changes topology. Intervening
    on X a second time therefore yields the same graph.

Counterfactual support:

    The three-step abduction -> action -> prediction procedure is carried
    out by an external evaluator. This module supplies the structural half:
        Action:      intervene / intervene_all (the mutilated graph)
        Prediction:  evaluation_order (parents before children)
        Twin worlds: twin_network (factual and counterfactual copies that
                     share their latent background variables)
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from causalid.causal_graph import CausalGraph
from causalid.config import IdentificationConfig
from causalid.identification import IdentificationResult, identify_effect


@dataclass(frozen=True)
class MutilatedGraph:
    """A graph after do(...), with the assigned values and the original graph."""
    graph: CausalGraph
    source: CausalGraph
    interventions: Dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def targets(self) -> FrozenSet[str]:
        return frozenset(self.interventions)

    def removed_edges(self) -> List[Tuple[str, str]]:
        """Edges of the source graph cut by the intervention."""
        kept = set(self.graph.edges())
        return [e for e in self.source.edges() if e not in kept]


GraphLike = Union[CausalGraph, MutilatedGraph]


def intervene_all(g: GraphLike, assignments: Mapping[str, Any]) -> MutilatedGraph:
    """
    Simultaneous do(X_1 = x_1, ..., X_k = x_k).

    Args:
        g: A causal graph, or a MutilatedGraph to compose with; earlier
            assignments to the same variable are overwritten.
        assignments: Variable name -> assigned value.

    Raises:
        UnknownVariableError: If a target is absent from the graph.
    """
    if isinstance(g, MutilatedGraph):
        base, source, values = g.graph, g.source, dict(g.interventions)
    else:
        base, source, values = g, g, {}

    targets = base.resolve(assignments.keys())
    mutilated = base.remove_incoming_edges(targets)
    values.update(assignments)
    return MutilatedGraph(graph=mutilated, source=source, interventions=values)


def intervene(g: GraphLike, X: str, x: Any = None) -> MutilatedGraph:
    """do(X = x): a new graph with every edge into X removed. g is not modified."""
    return intervene_all(g, {X: x})


def twin_network(g: CausalGraph, suffix: str = "'") -> CausalGraph:
    """
    Twin network for counterfactual reasoning.

    Every observed variable V gets a counterfactual copy V' (name + suffix)
    and every edge between observed variables is mirrored among the copies.
    Latent variables are not copied: they feed both worlds, which is what
    ties the factual and counterfactual worlds together.

    Raises:
        DuplicateVariableError: If a copy's name is already taken.
    """
    twin = {v: v + suffix for v in g.observed}
    edges = g.edges()
    for source, target in g.edges():
        if target not in twin:
            continue
        edges.append((twin.get(source, source), twin[target]))

    variables = list(g.variables) + [twin[v] for v in g.observed]
    return CausalGraph.from_edges(variables, edges, latent=g.latent)


class InterventionEngine:
    """Pearl's do-operator and adjustment-set search over a fixed causal graph."""

    def __init__(self, graph: CausalGraph, config: Optional[IdentificationConfig] = None):
        """
        Args:
            graph: The causal graph. Never modified.
            config: Search configuration for identification queries.
        """
        self.graph = graph
        self.config = config or IdentificationConfig()

    def intervene(self, X: str, x: Any = None) -> MutilatedGraph:
        return intervene(self.graph, X, x)

    def intervene_all(self, assignments: Mapping[str, Any]) -> MutilatedGraph:
        return intervene_all(self.graph, assignments)

    def identify(self, X, Y, candidate_sets=None, frontdoor_candidates=None) -> IdentificationResult:
        """identify_effect on this engine's graph and configuration."""
        return identify_effect(
            self.graph, X, Y,
            candidate_sets=candidate_sets,
            frontdoor_candidates=frontdoor_candidates,
            config=self.config,
        )

    def search_adjustment_set(self, X, Y) -> Optional[FrozenSet[str]]:
        """
        Smallest backdoor adjustment set within the configured size bound,
        or None if there is none.
        """
        config = dataclasses.replace(self.config, try_frontdoor=False)
        result = identify_effect(self.graph, X, Y, config=config)
        return result.adjustment_set if result.identifiable else None

    def evaluation_order(self, mutilated: Optional[MutilatedGraph] = None) -> List[str]:
        """
        Order in which structural equations must be evaluated: parents
        before children, on the mutilated graph if one is given.
        """
        graph = mutilated.graph if mutilated is not None else self.graph
        return graph.topological_order()

    def counterfactual_network(self) -> CausalGraph:
        return twin_network(self.graph)
