"""
Clinical Treatment causal graph.

Domain: Clinical Treatment System
    Variables:
        0. drug_dosage           - Medication dose level (Controllable)
        1. treatment_intensity   - Aggressiveness of treatment protocol (Controllable)
        2. monitoring_frequency  - How often patient vitals are checked (Controllable)
        3. activity_restriction  - How much physical activity is restricted (Controllable)
        4. adverse_events        - Side effects and complications (EFFECT)
        5. recovery_rate         - How fast patient improves (EFFECT)
        6. organ_stress          - Load on major organs (EFFECT)
        7. care_cost             - Resource consumption (EFFECT)

    Causal graph (known):
        drug_dosage         -> adverse_events    (+0.5)
        drug_dosage         -> recovery_rate     (+0.4)
        drug_dosage         -> organ_stress      (+0.6)
        treatment_intensity -> recovery_rate     (+0.5)
        treatment_intensity -> adverse_events    (+0.3)
        monitoring_freq     -> adverse_events    (-0.4, protective)
        activity_restrict   -> recovery_rate     (-0.3)
        adverse_events      -> organ_stress      (+0.5)
        organ_stress        -> recovery_rate     (-0.4)
        adverse_events      -> care_cost         (+0.6)

    Identification notes:
        adverse_events -> recovery_rate is confounded by both drug_dosage
        and treatment_intensity; the minimal backdoor set is
        {drug_dosage, treatment_intensity}. care_cost is a descendant of
        adverse_events and must never be adjusted for.
"""

import numpy as np

from causalid import CausalGraph


# Causal variable indices
DRUG_DOSAGE = 0
TREATMENT_INTENSITY = 1
MONITORING_FREQUENCY = 2
ACTIVITY_RESTRICTION = 3
ADVERSE_EVENTS = 4
RECOVERY_RATE = 5
ORGAN_STRESS = 6
CARE_COST = 7

NUM_VARIABLES = 8

VARIABLES = [
    "drug_dosage",
    "treatment_intensity",
    "monitoring_frequency",
    "activity_restriction",
    "adverse_events",
    "recovery_rate",
    "organ_stress",
    "care_cost",
]

ADJACENCY = np.zeros((NUM_VARIABLES, NUM_VARIABLES))
ADJACENCY[DRUG_DOSAGE, ADVERSE_EVENTS] = 0.5
ADJACENCY[DRUG_DOSAGE, RECOVERY_RATE] = 0.4
ADJACENCY[DRUG_DOSAGE, ORGAN_STRESS] = 0.6
ADJACENCY[TREATMENT_INTENSITY, RECOVERY_RATE] = 0.5
ADJACENCY[TREATMENT_INTENSITY, ADVERSE_EVENTS] = 0.3
ADJACENCY[MONITORING_FREQUENCY, ADVERSE_EVENTS] = -0.4  # protective
ADJACENCY[ACTIVITY_RESTRICTION, RECOVERY_RATE] = -0.3
ADJACENCY[ADVERSE_EVENTS, ORGAN_STRESS] = 0.5
ADJACENCY[ORGAN_STRESS, RECOVERY_RATE] = -0.4
ADJACENCY[ADVERSE_EVENTS, CARE_COST] = 0.6


def build_graph() -> CausalGraph:
    return CausalGraph.from_adjacency(VARIABLES, ADJACENCY)
