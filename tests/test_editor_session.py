"""
Tests for the Editor Session
============================
"""

from bitesized.core.definitions import ConnectionType, edge_key
from bitesized.pipeline.editor_session import EditorSession


class TestSelection:

    def test_starts_with_fresh_unit(self):
        session = EditorSession(seed=1)
        assert len(session.graph.rooms) == 6
        assert session.selected_room_id is None
        assert session.selected_connection is None

    def test_unknown_room_not_selected(self):
        session = EditorSession(seed=1)
        session.select_room("ghost")
        assert session.selected_room_id is None

    def test_connection_selection_is_unordered(self):
        session = EditorSession(seed=2)
        link = session.graph.connections[0]
        session.select_connection(link.target, link.source)
        assert session.selected_connection == link.key
        session.select_connection(None)
        assert session.selected_connection is None


class TestEdits:

    def test_new_dungeon_clears_selection(self):
        session = EditorSession(seed=3)
        session.select_room(session.graph.rooms[0].id)
        old_ids = set(session.graph.room_ids())
        session.new_dungeon(layout_index=2)
        assert session.selected_room_id is None
        assert not old_ids & set(session.graph.room_ids())

    def test_attach_clears_room_selection(self):
        session = EditorSession(seed=4)
        target = session.graph.rooms[0].id
        session.select_room(target)
        session.attach_dungeon(target)
        assert len(session.graph.rooms) == 12
        assert session.selected_room_id is None

    def test_replace_selects_bridge(self):
        session = EditorSession(seed=5)
        target = session.graph.rooms[3].id
        session.select_room(target)
        bridge = session.replace_with_dungeon(target)
        assert session.selected_room_id == bridge
        assert session.graph.has_room(bridge)
        assert not session.graph.has_room(target)

    def test_replace_drops_stale_connection_selection(self):
        session = EditorSession(seed=6)
        link = session.graph.connections[0]
        session.select_connection(link.source, link.target)
        session.replace_with_dungeon(link.source)
        assert session.selected_connection is None

    def test_field_edits(self):
        session = EditorSession(seed=7)
        a, b = session.graph.rooms[0].id, session.graph.rooms[1].id
        session.update_room(a, label="Gatehouse", content="Portcullis.")
        assert session.graph.get_room(a).label == "Gatehouse"

        existing = session.graph.connections[0]
        session.update_connection(
            existing.target, existing.source,
            connection_type=ConnectionType.SECRET, clue_room_id=a,
        )
        assert session.graph.find_connection(*existing.key).clue_room_id == a

        before = len(session.graph.connections)
        session.add_connection(a, b, ConnectionType.CLOSED)
        if edge_key(a, b) in {c.key for c in session.graph.connections[:before]}:
            assert len(session.graph.connections) == before
        else:
            assert len(session.graph.connections) == before + 1
