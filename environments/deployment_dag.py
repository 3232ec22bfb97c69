"""
Software Deployment causal graph.

Domain: Software Deployment System
    Variables:
        0. code_complexity     - Complexity of the change being deployed
        1. test_coverage       - Fraction of code covered by tests
        2. deploy_load         - Current system load at deployment time
        3. rollback_readiness  - How prepared the rollback procedure is
        4. error_rate          - Post-deployment error rate (EFFECT)
        5. latency_impact      - Change in system latency (EFFECT)
        6. user_impact         - Impact on user experience (EFFECT)
        7. resource_usage      - Change in compute/memory usage (EFFECT)

    Causal graph (known):
        code_complexity → error_rate
        code_complexity → latency_impact
        code_complexity → resource_usage
        test_coverage → error_rate (protective)
        deploy_load → latency_impact
        deploy_load → error_rate
        rollback_readiness → user_impact (protective)
        error_rate → user_impact
        latency_impact → user_impact
        resource_usage → latency_impact

    Identification notes:
        The controllable inputs are roots, so their effects need no
        adjustment. error_rate → user_impact is confounded through
        code_complexity and deploy_load, both of which also reach
        user_impact via latency_impact; {latency_impact} alone closes every
        backdoor path and is the minimal adjustment set.
"""

import numpy as np

from causalid import CausalGraph


# Causal variable indices
CODE_COMPLEXITY = 0
TEST_COVERAGE = 1
DEPLOY_LOAD = 2
ROLLBACK_READINESS = 3
ERROR_RATE = 4
LATENCY_IMPACT = 5
USER_IMPACT = 6
RESOURCE_USAGE = 7

NUM_VARIABLES = 8

VARIABLES = [
    "code_complexity",
    "test_coverage",
    "deploy_load",
    "rollback_readiness",
    "error_rate",
    "latency_impact",
    "user_impact",
    "resource_usage",
]

# Ground-truth structural weights; W_ij != 0 means i -> j.
ADJACENCY = np.zeros((NUM_VARIABLES, NUM_VARIABLES))
ADJACENCY[CODE_COMPLEXITY, ERROR_RATE] = 0.6
ADJACENCY[CODE_COMPLEXITY, LATENCY_IMPACT] = 0.3
ADJACENCY[CODE_COMPLEXITY, RESOURCE_USAGE] = 0.4
ADJACENCY[TEST_COVERAGE, ERROR_RATE] = -0.5  # protective
ADJACENCY[DEPLOY_LOAD, LATENCY_IMPACT] = 0.5
ADJACENCY[DEPLOY_LOAD, ERROR_RATE] = 0.3
ADJACENCY[ROLLBACK_READINESS, USER_IMPACT] = -0.4  # protective
ADJACENCY[ERROR_RATE, USER_IMPACT] = 0.7
ADJACENCY[LATENCY_IMPACT, USER_IMPACT] = 0.5
ADJACENCY[RESOURCE_USAGE, LATENCY_IMPACT] = 0.3


def build_graph() -> CausalGraph:
    """The deployment DAG, read from the signed weight matrix."""
    return CausalGraph.from_adjacency(VARIABLES, ADJACENCY)
