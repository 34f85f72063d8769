"""
Tests for Graph View Layout Hints
=================================
"""

from bitesized.core.definitions import Connection, ConnectionType, DungeonGraph, Room, RoomType
from bitesized.visualization.layout_hints import (
    LayoutHintConfig,
    LayoutMode,
    compute_layout_hints,
    orient_for_tree,
)


def square_with_pendant():
    rooms = tuple(
        Room(r, r.upper(), RoomType.EMPTY, entrance=(r == "a")) for r in "abcde"
    )
    connections = (
        Connection("a", "b"),
        Connection("b", "c"),
        Connection("c", "d"),
        Connection("d", "a", ConnectionType.SECRET, clue_room_id="a"),
        Connection("e", "d", ConnectionType.TRAPPED),
    )
    return DungeonGraph(rooms=rooms, connections=connections)


class TestForceHints:

    def test_bridge_links_are_short_and_stiff(self):
        """Pendant edge gets bridge distance/strength, square edges the defaults."""
        hints = compute_layout_hints(square_with_pendant(), LayoutMode.FORCE)
        config = LayoutHintConfig()
        by_pair = {(h.source, h.target): h for h in hints.links}

        pendant = by_pair[("e", "d")]
        assert pendant.is_bridge
        assert pendant.distance == config.bridge_link_distance
        assert pendant.strength == config.bridge_link_strength
        assert pendant.label == "Trap"

        for pair in [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")]:
            assert not by_pair[pair].is_bridge
            assert by_pair[pair].distance == config.link_distance
            assert by_pair[pair].strength == config.link_strength

        assert hints.charge_strength == config.charge_strength

    def test_custom_config(self):
        """Config values flow into the hints."""
        config = LayoutHintConfig(link_distance=50.0, charge_strength=-10.0)
        hints = compute_layout_hints(square_with_pendant(), "force", config)
        assert hints.charge_strength == -10.0
        assert {h.distance for h in hints.links if not h.is_bridge} == {50.0}


class TestTreeHints:

    def test_links_point_away_from_entrance(self):
        """Each link runs from shallower to deeper room."""
        hints = compute_layout_hints(square_with_pendant(), LayoutMode.TREE)
        depths = hints.depths
        assert depths == {"a": 0, "b": 1, "d": 1, "c": 2, "e": 2}
        for link in hints.links:
            assert depths[link.source] <= depths[link.target]
        assert hints.bridges == frozenset()
        assert hints.level_distance == LayoutHintConfig().tree_level_distance

    def test_tie_broken_by_id(self):
        """Equal depths orient from the smaller id."""
        assert orient_for_tree(Connection("z", "m"), {"z": 2, "m": 2}) == ("m", "z")
        assert orient_for_tree(Connection("z", "m"), {}) == ("m", "z")

    def test_preserves_metadata(self):
        """Secret link keeps its clue room after orientation."""
        hints = compute_layout_hints(square_with_pendant(), LayoutMode.TREE)
        secret = [h for h in hints.links if h.connection_type is ConnectionType.SECRET]
        assert len(secret) == 1
        assert (secret[0].source, secret[0].target) == ("a", "d")
        assert secret[0].clue_room_id == "a"

    def test_empty_graph(self):
        hints = compute_layout_hints(DungeonGraph(), LayoutMode.TREE)
        assert hints.links == [] and hints.depths == {}
