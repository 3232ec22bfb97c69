"""Tests for the immutable graph store."""

import networkx as nx
import numpy as np
import pytest

from causalid import (
    CausalGraph,
    CycleViolationError,
    DuplicateVariableError,
    UnknownVariableError,
)


class TestConstruction:

    def test_variables_keep_order(self):
        g = CausalGraph(["b", "a", "c"])
        assert g.variables == ("b", "a", "c")
        assert g.index_of("a") == 1
        assert len(g) == 3
        assert g.num_edges == 0

    def test_duplicate_names_rejected(self):
        with pytest.raises(DuplicateVariableError):
            CausalGraph(["X", "Y", "X"])

    def test_unknown_latent_rejected(self):
        with pytest.raises(UnknownVariableError):
            CausalGraph(["X", "Y"], latent=["U"])

    def test_from_edges(self, diamond):
        assert diamond.num_edges == 5
        assert diamond.has_edge("A", "B")
        assert not diamond.has_edge("B", "A")

    def test_from_adjacency_thresholds_weights(self):
        weights = np.array([
            [0.0, 0.8, -0.6],
            [0.0, 0.0, 0.2],
            [0.0, 0.0, 0.0],
        ])
        g = CausalGraph.from_adjacency(["X", "M", "Y"], weights, threshold=0.5)
        assert g.edges() == [("X", "M"), ("X", "Y")]

    def test_from_adjacency_rejects_cycle(self):
        weights = np.array([
            [0, 1, 0],
            [0, 0, 1],
            [1, 0, 0],
        ])
        with pytest.raises(CycleViolationError):
            CausalGraph.from_adjacency(["A", "B", "C"], weights)

    def test_from_adjacency_cycle_downstream_of_sink(self):
        # C hangs off the A <-> B cycle; the reported edge must lie on the cycle.
        weights = np.array([
            [0, 1, 1],
            [1, 0, 0],
            [0, 0, 0],
        ])
        with pytest.raises(CycleViolationError) as exc:
            CausalGraph.from_adjacency(["A", "B", "C"], weights)
        assert {exc.value.source, exc.value.target} == {"A", "B"}

    def test_from_adjacency_rejects_self_loop(self):
        with pytest.raises(CycleViolationError):
            CausalGraph.from_adjacency(["A", "B"], np.eye(2))

    def test_from_adjacency_shape_mismatch(self):
        with pytest.raises(ValueError):
            CausalGraph.from_adjacency(["A", "B"], np.zeros((3, 3)))

    def test_dict_round_trip(self, frontdoor):
        assert CausalGraph.from_dict(frontdoor.to_dict()) == frontdoor


class TestMutation:

    def test_add_edge_returns_new_graph(self):
        g = CausalGraph(["X", "Y"])
        g2 = g.add_edge("X", "Y")
        assert g2.has_edge("X", "Y")
        assert not g.has_edge("X", "Y")

    def test_add_existing_edge_is_noop(self, diamond):
        assert diamond.add_edge("A", "B") is diamond

    def test_add_edge_unknown_endpoint(self, diamond):
        with pytest.raises(UnknownVariableError):
            diamond.add_edge("A", "Z")
        with pytest.raises(UnknownVariableError):
            diamond.add_edge("Z", "A")

    def test_cycle_rejected_and_graph_unchanged(self, diamond):
        before = diamond.edges()
        with pytest.raises(CycleViolationError):
            diamond.add_edge("E", "A")
        assert diamond.edges() == before

    def test_self_loop_rejected(self, diamond):
        with pytest.raises(CycleViolationError):
            diamond.add_edge("B", "B")

    def test_remove_absent_edge_is_noop(self, diamond):
        assert diamond.remove_edge("A", "E") is diamond

    def test_remove_edge(self, diamond):
        g = diamond.remove_edge("D", "E")
        assert not g.has_edge("D", "E")
        assert diamond.has_edge("D", "E")

    def test_remove_incoming_and_outgoing(self, diamond):
        no_in = diamond.remove_incoming_edges("D")
        assert no_in.parents("D") == frozenset()
        assert no_in.children("D") == {"E"}

        no_out = diamond.remove_outgoing_edges(["A", "D"])
        assert no_out.children("A") == frozenset()
        assert no_out.children("D") == frozenset()
        assert no_out.parents("D") == {"B", "C"}

    def test_underlying_graph_is_frozen(self, diamond):
        copy = diamond.to_adjacency()
        copy[0, 0] = 1
        assert not diamond.has_edge("A", "A")
        with pytest.raises(nx.NetworkXError):
            diamond.dag.add_edge("E", "A")
        assert diamond.num_edges == 5

    def test_mutation_leaves_source_dag_untouched(self, diamond):
        grown = diamond.add_edge("A", "E")
        assert grown.dag is not diamond.dag
        assert not diamond.dag.has_edge("A", "E")


class TestQueries:

    def test_parents_children(self, diamond):
        assert diamond.parents("D") == {"B", "C"}
        assert diamond.children("A") == {"B", "C"}
        with pytest.raises(UnknownVariableError):
            diamond.parents("Q")

    def test_subgraph_keeps_order_and_latent(self, frontdoor):
        sub = frontdoor.subgraph(["Y", "U", "X"])
        assert sub.variables == ("U", "X", "Y")
        assert sub.latent == {"U"}
        assert sub.edges() == [("U", "X"), ("U", "Y")]

    def test_reversed(self, diamond):
        rev = diamond.reversed()
        assert set(rev.edges()) == {(t, s) for s, t in diamond.edges()}

    def test_topological_order(self, diamond):
        order = diamond.topological_order()
        assert order == ["A", "B", "C", "D", "E"]
        position = {v: i for i, v in enumerate(order)}
        for s, t in diamond.edges():
            assert position[s] < position[t]

    def test_topological_order_breaks_ties_by_index(self):
        g = CausalGraph.from_edges(["c", "b", "a"], [("a", "b")])
        assert g.topological_order() == ["c", "a", "b"]

    def test_equality_and_hash(self, diamond):
        same = CausalGraph.from_edges(
            ["A", "B", "C", "D", "E"],
            [("D", "E"), ("C", "D"), ("B", "D"), ("A", "C"), ("A", "B")],
        )
        assert same == diamond
        assert hash(same) == hash(diamond)
        assert diamond.remove_edge("D", "E") != diamond

    def test_graph_stats(self, diamond):
        stats = diamond.get_graph_stats()
        assert stats["variables"] == 5
        assert stats["edges"] == 5
        assert stats["roots"] == ["A"]
        assert stats["sinks"] == ["E"]
        assert stats["max_in_degree"] == 2
        assert stats["density"] == 0.25

    def test_observed_excludes_latent(self, frontdoor):
        assert frontdoor.observed == ("X", "M", "Y")

    def test_resolve(self, diamond):
        assert diamond.resolve("A") == {"A"}
        assert diamond.resolve(["A", "B", "A"]) == {"A", "B"}
        with pytest.raises(UnknownVariableError):
            diamond.resolve(["A", "nope"])


class TestScale:

    def test_from_edges_on_thousands_of_variables(self):
        n = 3000
        names = [f"v{i}" for i in range(n)]
        edges = [(names[i], names[i + k]) for i in range(n) for k in (1, 2) if i + k < n]
        g = CausalGraph.from_edges(names, edges)
        assert len(g) == n
        assert g.num_edges == 2 * n - 3
        assert g.parents("v2999") == {"v2997", "v2998"}
        assert CausalGraph.from_dict(g.to_dict()) == g

    def test_add_edge_on_large_graph_checks_cycles(self):
        n = 3000
        names = [f"v{i}" for i in range(n)]
        g = CausalGraph.from_edges(names, zip(names, names[1:]))
        with pytest.raises(CycleViolationError):
            g.add_edge("v2999", "v0")
        assert g.add_edge("v0", "v2999").has_edge("v0", "v2999")
