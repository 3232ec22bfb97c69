"""
Confounded causal graph.

Third domain, built to exercise identification under competing paths and
confounders (neutral variable names, no semantic leakage).

Domain: Abstract Confounded System
    Variables:
        0. alpha        - Abstract controllable input A (Controllable)
        1. beta         - Abstract controllable input B (Controllable)
        2. gamma        - Abstract controllable input C (Controllable)
        3. delta_var    - Abstract controllable input D (Controllable)
        4. epsilon_var  - Intermediate effect variable (EFFECT)
        5. zeta         - Intermediate effect variable (EFFECT)
        6. eta          - Intermediate effect variable (EFFECT)
        7. theta        - Final outcome variable (EFFECT)

    Causal graph (known):
        alpha       -> epsilon_var  (+0.5)   # alpha has competing paths
        alpha       -> zeta         (-0.4)   # positive via epsilon, negative via zeta
        beta        -> epsilon_var  (-0.3)
        beta        -> eta          (+0.6)
        gamma       -> zeta         (+0.5)
        gamma       -> eta          (-0.3)
        epsilon_var -> theta        (+0.7)
        zeta        -> theta        (-0.5)
        eta         -> theta        (+0.4)
        delta_var   -> theta        (-0.3, protective but weak)

    Identification notes:
        - epsilon_var -> theta has two backdoor paths, through alpha/zeta and
          through beta/eta; no single variable blocks both, the minimal set
          is {alpha, beta}.
        - zeta and eta are colliders between gamma and its neighbours:
          alpha ⊥ gamma marginally, but not given zeta.
        - Simpson's paradox: beta looks protective observationally through
          eta, while intervening on beta also moves epsilon_var.
"""

import numpy as np

from causalid import CausalGraph


# Causal variable indices
ALPHA = 0
BETA = 1
GAMMA = 2
DELTA_VAR = 3
EPSILON_VAR = 4
ZETA = 5
ETA = 6
THETA = 7

NUM_VARIABLES = 8

VARIABLES = [
    "alpha",
    "beta",
    "gamma",
    "delta_var",
    "epsilon_var",
    "zeta",
    "eta",
    "theta",
]

ADJACENCY = np.zeros((NUM_VARIABLES, NUM_VARIABLES))
ADJACENCY[ALPHA, EPSILON_VAR] = 0.5
ADJACENCY[ALPHA, ZETA] = -0.4
ADJACENCY[BETA, EPSILON_VAR] = -0.3
ADJACENCY[BETA, ETA] = 0.6
ADJACENCY[GAMMA, ZETA] = 0.5
ADJACENCY[GAMMA, ETA] = -0.3
ADJACENCY[EPSILON_VAR, THETA] = 0.7
ADJACENCY[ZETA, THETA] = -0.5
ADJACENCY[ETA, THETA] = 0.4
ADJACENCY[DELTA_VAR, THETA] = -0.3  # protective but weak


def build_graph() -> CausalGraph:
    return CausalGraph.from_adjacency(VARIABLES, ADJACENCY)
