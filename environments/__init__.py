"""
Reference causal graphs with known structure, for examples, tests and the
evaluation report.
"""

from typing import Callable, Dict, List

from causalid import CausalGraph
from environments import clinical_dag, confounded_dag, deployment_dag, textbook_dags

GRAPHS: Dict[str, Callable[[], CausalGraph]] = {
    "deployment": deployment_dag.build_graph,
    "clinical": clinical_dag.build_graph,
    "confounded": confounded_dag.build_graph,
    "unconfounded": textbook_dags.unconfounded,
    "collider": textbook_dags.collider,
    "confounded_chain": textbook_dags.confounded,
    "mediated": textbook_dags.mediated,
    "frontdoor": textbook_dags.frontdoor,
    "m_bias": textbook_dags.m_bias,
}


def available_graphs() -> List[str]:
    return sorted(GRAPHS)


def load_graph(name: str) -> CausalGraph:
    """Build a reference graph by name."""
    try:
        builder = GRAPHS[name]
    except KeyError:
        raise ValueError(
            f"Unknown graph: {name!r}. Available: {available_graphs()}"
        ) from None
    return builder()
