"""
Tests for the Command Line Entry Point
======================================
"""

import json

import pytest

from bitesized import generate as generate_module
from bitesized.generate import build_parser, main


class TestMain:

    def test_json_output(self, capsys):
        assert main(["--seed", "3", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["rooms"]) == 6
        assert len(data["connections"]) == 6

    def test_grow(self, capsys):
        """One attach (+6) and one explode (+5) give 17 rooms."""
        assert main(["--seed", "3", "--attach", "1", "--explode", "1", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["rooms"]) == 17

    def test_markdown_to_stdout(self, capsys):
        main(["--seed", "8", "--title", "Sunken Vault"])
        out = capsys.readouterr().out
        assert out.startswith("# Sunken Vault")
        assert out.count("\n### ") == 6

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "vault.md"
        assert main(["--seed", "8", "--output", str(target), "--image", "vault.png"]) == 0
        text = target.read_text(encoding="utf-8")
        assert "![Dungeon map](vault.png)" in text
        assert str(target) in capsys.readouterr().out

    def test_same_seed_same_structure(self, capsys):
        main(["--seed", "21", "--layout", "5", "--json"])
        first = json.loads(capsys.readouterr().out)
        main(["--seed", "21", "--layout", "5", "--json"])
        second = json.loads(capsys.readouterr().out)
        assert [r["room_type"] for r in first["rooms"]] == [r["room_type"] for r in second["rooms"]]

    def test_negative_count_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--attach", "-1"])
        assert excinfo.value.code == 2

    def test_layout_out_of_range_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--layout", "99"])

    def test_growth_draws_from_session_generator(self, monkeypatch, capsys):
        """Room picks for attach/explode come from the session generator's rng."""
        seen = []
        real_grow = generate_module.grow_dungeon

        def spy(session, attach, explode, rng):
            seen.append(rng is session.generator.rng)
            return real_grow(session, attach, explode, rng)

        monkeypatch.setattr(generate_module, "grow_dungeon", spy)
        main(["--seed", "4", "--attach", "2", "--json"])
        capsys.readouterr()
        assert seen == [True]

    def test_grown_dungeon_replays_from_seed(self, capsys):
        args = ["--seed", "13", "--attach", "2", "--explode", "1", "--json"]
        main(args)
        first = json.loads(capsys.readouterr().out)
        main(args)
        second = json.loads(capsys.readouterr().out)
        assert [r["room_type"] for r in first["rooms"]] == [r["room_type"] for r in second["rooms"]]
        assert [r["label"] for r in first["rooms"]] == [r["label"] for r in second["rooms"]]
