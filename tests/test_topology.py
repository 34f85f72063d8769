"""
Tests for Topology Analysis
===========================

Bridge connection detection and multi-source entrance depths. NetworkX is
used as an independent oracle on generated and spliced graphs.
"""

import random

import networkx as nx
import pytest

from bitesized.core.definitions import Connection, DungeonGraph, Room, RoomType, edge_key
from bitesized.evaluation.topology import (
    compute_depths_in,
    compute_entrance_depths,
    find_bridge_connections,
    find_bridge_connections_in,
)
from bitesized.generation.generator import BiteSizedGenerator
from bitesized.utils.graph_utils import attach_dungeon, replace_room_with_dungeon


def links(*pairs):
    return [Connection(a, b) for a, b in pairs]


def make_graph(room_ids, pairs, entrances=()):
    rooms = tuple(
        Room(id=r, label=r, room_type=RoomType.EMPTY, entrance=r in entrances)
        for r in room_ids
    )
    return DungeonGraph(rooms=rooms, connections=tuple(links(*pairs)))


def nx_bridges(graph):
    return {edge_key(a, b) for a, b in nx.bridges(graph.to_networkx())}


def nx_depths(graph, roots):
    G = graph.to_networkx()
    best = {}
    for root in roots:
        for node, dist in nx.single_source_shortest_path_length(G, root).items():
            best[node] = min(dist, best.get(node, dist))
    return best


class TestBridgeDetection:
    """A connection is a bridge iff removing it disconnects its endpoints."""

    def test_square_with_pendant(self):
        """Only the pendant edge of a square-plus-one is a bridge."""
        rooms = ["a", "b", "c", "d", "e"]
        pairs = [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a"), ("d", "e")]
        bridges = find_bridge_connections(rooms, links(*pairs))
        assert bridges == {edge_key("d", "e")}

    def test_path_is_all_bridges(self):
        """Every edge of a path is a bridge."""
        pairs = [("a", "b"), ("b", "c"), ("c", "d")]
        bridges = find_bridge_connections("abcd", links(*pairs))
        assert bridges == {edge_key(*p) for p in pairs}

    def test_self_loop_never_bridge(self):
        """A self-loop is ignored."""
        bridges = find_bridge_connections(["a", "b"], links(("a", "a"), ("a", "b")))
        assert bridges == {edge_key("a", "b")}

    def test_parallel_connections_are_not_bridges(self):
        """Two stored connections between the same pair back each other up."""
        bridges = find_bridge_connections(["a", "b"], links(("a", "b"), ("b", "a")))
        assert bridges == set()

    def test_unknown_endpoints_ignored(self):
        """Connections to rooms outside the set are skipped."""
        bridges = find_bridge_connections(["a", "b"], links(("a", "b"), ("b", "x")))
        assert bridges == {edge_key("a", "b")}

    def test_empty(self):
        assert find_bridge_connections([], []) == set()

    @pytest.mark.parametrize("seed", range(20))
    def test_matches_networkx_on_spliced_graphs(self, seed):
        """Same answer as nx.bridges after random attach/explode edits."""
        rng = random.Random(seed)
        generator = BiteSizedGenerator(seed=seed)
        graph = generator.generate()
        for _ in range(3):
            room = rng.choice(graph.rooms)
            if rng.random() < 0.5:
                graph = attach_dungeon(graph, room.id, generator)
            else:
                graph = replace_room_with_dungeon(graph, room.id, generator).graph
        assert find_bridge_connections_in(graph) == nx_bridges(graph)


class TestEntranceDepths:
    """Multi-source BFS from all entrances at once."""

    def test_minimum_over_entrances(self):
        """A room 1 step from P1 and 3 steps from P2 has depth 1."""
        graph = make_graph(
            ["p1", "x", "y", "z", "p2"],
            [("p1", "x"), ("x", "y"), ("y", "z"), ("z", "p2")],
            entrances=("p1", "p2"),
        )
        depths = compute_depths_in(graph)
        assert depths == {"p1": 0, "x": 1, "y": 2, "z": 1, "p2": 0}

    def test_entrance_order_irrelevant(self):
        """Listing entrances in a different order gives the same depths."""
        rooms = ["p1", "x", "y", "z", "p2"]
        conns = links(("p1", "x"), ("x", "y"), ("y", "z"), ("z", "p2"))
        forward = compute_entrance_depths(rooms, conns, ["p1", "p2"])
        backward = compute_entrance_depths(rooms, conns, ["p2", "p1"])
        assert forward == backward

    def test_unreachable_rooms_unlabeled(self):
        """Rooms in another component have no depth (not 0)."""
        graph = make_graph(["a", "b", "c", "d"], [("a", "b"), ("c", "d")], entrances=("a",))
        depths = compute_depths_in(graph)
        assert depths == {"a": 0, "b": 1}
        assert "c" not in depths and "d" not in depths

    def test_no_entrances_uses_first_room(self):
        """With no entrance the first room is the root."""
        graph = make_graph(["m", "n", "o"], [("m", "n"), ("n", "o")])
        assert compute_depths_in(graph) == {"m": 0, "n": 1, "o": 2}

    def test_unknown_entrance_ids_ignored(self):
        """Entrances that are not rooms fall back to the first room."""
        depths = compute_entrance_depths(["m", "n"], links(("m", "n")), ["ghost"])
        assert depths == {"m": 0, "n": 1}

    def test_empty_graph(self):
        assert compute_entrance_depths([], [], []) == {}

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_networkx(self, seed):
        """Agrees with per-root shortest paths minimised over roots."""
        generator = BiteSizedGenerator(seed=seed)
        graph = generator.generate()
        graph = attach_dungeon(graph, graph.rooms[1].id, generator)
        roots = graph.entrance_ids()
        assert compute_depths_in(graph) == nx_depths(graph, roots)
