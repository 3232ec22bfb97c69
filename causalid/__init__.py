"""
causalid: Causal identification over directed acyclic graphs

Decides, from the structure of a hypothesized causal DAG alone, whether and
how the effect of one variable on another can be estimated from
observational data. Answers d-separation queries, checks the backdoor and
frontdoor criteria, searches for minimal adjustment sets and performs graph
surgery for do-interventions.

Architecture:
    CausalGraph -> reachability -> d_separation -> identification -> InterventionEngine
"""

from causalid.causal_graph import CausalGraph
from causalid.config import IdentificationConfig
from causalid.d_separation import d_separated, implied_independencies, minimal_d_separator, moralize
from causalid.errors import (
    CausalGraphError,
    CycleViolationError,
    DuplicateVariableError,
    InvalidAdjustmentSetError,
    OverlappingSetsError,
    UnknownVariableError,
)
from causalid.identification import (
    IdentificationResult,
    IdentificationStrategy,
    adjustment_formula,
    backdoor_criterion,
    candidate_adjustment_sets,
    candidate_mediator_sets,
    frontdoor_criterion,
    identify_effect,
)
from causalid.intervention_engine import (
    InterventionEngine,
    MutilatedGraph,
    intervene,
    intervene_all,
    twin_network,
)
from causalid.reachability import (
    ancestors,
    ancestral_subgraph,
    descendants,
    has_directed_path,
    markov_blanket,
)

__version__ = "0.1.0"
__all__ = [
    "CausalGraph",
    "IdentificationConfig",
    "InterventionEngine",
    "MutilatedGraph",
    "IdentificationResult",
    "IdentificationStrategy",
    "ancestors",
    "descendants",
    "markov_blanket",
    "ancestral_subgraph",
    "has_directed_path",
    "d_separated",
    "moralize",
    "minimal_d_separator",
    "implied_independencies",
    "backdoor_criterion",
    "frontdoor_criterion",
    "identify_effect",
    "adjustment_formula",
    "candidate_adjustment_sets",
    "candidate_mediator_sets",
    "intervene",
    "intervene_all",
    "twin_network",
    "CausalGraphError",
    "UnknownVariableError",
    "DuplicateVariableError",
    "CycleViolationError",
    "OverlappingSetsError",
    "InvalidAdjustmentSetError",
]
