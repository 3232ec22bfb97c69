"""
causalid Evaluation Report.

Loads a causal graph (a named reference graph or a JSON edge list) and prints
its structure, the identification verdict for a treatment/outcome pair, the
mutilated graph under do(treatment), Markov blankets and the independencies
the graph implies.

Usage:
    python evaluate.py
    python evaluate.py --graph clinical --treatment adverse_events --outcome recovery_rate
    python evaluate.py --edges my_graph.json --treatment X --outcome Y --max_size 4

The JSON edge list has the shape produced by CausalGraph.to_dict():
    {"variables": ["X", "Y", "C"], "edges": [["C", "X"], ["C", "Y"], ["X", "Y"]],
     "latent": []}
"""

import argparse
import json
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from causalid import (
    CausalGraph,
    IdentificationConfig,
    IdentificationStrategy,
    InterventionEngine,
    implied_independencies,
    markov_blanket,
)
from environments import available_graphs, load_graph


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Causal identification report")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--graph", type=str, default="deployment",
                        help=f"Reference graph: {', '.join(available_graphs())}")
    source.add_argument("--edges", type=str, default=None,
                        help="Path to a JSON edge list (overrides --graph)")
    parser.add_argument("--treatment", type=str, default=None)
    parser.add_argument("--outcome", type=str, default=None)
    parser.add_argument("--max_size", type=int, default=3,
                        help="Largest adjustment set to enumerate")
    parser.add_argument("--exhaustive", action="store_true",
                        help="Enumerate every subset (exponential)")
    parser.add_argument("--no_frontdoor", action="store_true")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar over candidate sets")
    parser.add_argument("--independencies", type=int, default=1,
                        help="Max conditioning size when listing implied independencies")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def load(args) -> CausalGraph:
    if args.edges:
        with open(args.edges) as f:
            return CausalGraph.from_dict(json.load(f))
    return load_graph(args.graph)


def graph_summary(graph: CausalGraph):
    print("\n" + "=" * 60)
    print("GRAPH")
    print("=" * 60)
    for k, v in graph.get_graph_stats().items():
        print(f"  {k}: {v}")
    print("\n  Edges:")
    for source, target in graph.edges():
        print(f"    {source} -> {target}")
    print(f"\n  Topological order: {' -> '.join(graph.topological_order())}")


def identification_report(engine: InterventionEngine, treatment: str, outcome: str):
    print("\n" + "=" * 60)
    print(f"IDENTIFICATION: P({outcome} | do({treatment}))")
    print("=" * 60)
    result = engine.identify(treatment, outcome)
    print(f"  Strategy:     {result.strategy.value}")
    print(f"  Identifiable: {result.identifiable}")
    if result.identifiable:
        label = "Mediators" if result.strategy is IdentificationStrategy.FRONTDOOR else "Adjust for"
        print(f"  {label}:   {sorted(result.adjustment_set) or '{}'}")
    return result


def intervention_report(engine: InterventionEngine, treatment: str):
    print("\n" + "=" * 60)
    print(f"INTERVENTION: do({treatment})")
    print("=" * 60)
    mutilated = engine.intervene(treatment)
    removed = mutilated.removed_edges()
    if removed:
        print("  Removed edges:")
        for source, target in removed:
            print(f"    {source} -> {target}")
    else:
        print(f"  {treatment} has no parents; graph unchanged")
    print(f"  Evaluation order: {' -> '.join(engine.evaluation_order(mutilated))}")
    return mutilated


def blanket_report(graph: CausalGraph):
    print("\n" + "=" * 60)
    print("MARKOV BLANKETS")
    print("=" * 60)
    for v in graph.variables:
        print(f"  {v:<22} {sorted(markov_blanket(graph, v))}")


def independence_report(graph: CausalGraph, max_size: int):
    print("\n" + "=" * 60)
    print(f"IMPLIED INDEPENDENCIES (|Z| <= {max_size})")
    print("=" * 60)
    found = implied_independencies(graph, max_size)
    for x, y, z in found:
        given = f" | {', '.join(sorted(z))}" if z else ""
        print(f"  {x} _||_ {y}{given}")
    if not found:
        print("  (none)")
    return found


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    graph = load(args)
    config = IdentificationConfig(
        max_adjustment_size=args.max_size,
        exhaustive=args.exhaustive,
        try_frontdoor=not args.no_frontdoor,
        show_progress=args.progress,
    )
    engine = InterventionEngine(graph, config)

    print(f"Loaded {graph!r}")
    graph_summary(graph)

    if args.treatment and args.outcome:
        identification_report(engine, args.treatment, args.outcome)
        intervention_report(engine, args.treatment)
    elif args.graph == "deployment" and not args.edges:
        identification_report(engine, "error_rate", "user_impact")
        intervention_report(engine, "error_rate")
    else:
        print("\n  (identification skipped: pass --treatment and --outcome)")

    blanket_report(graph)
    independence_report(graph, args.independencies)


if __name__ == "__main__":
    main()
