"""Test the command-line front end: config loading, path parsing, saving and play."""

import io
import json

import pytest
from pydantic import ValidationError

from src.main import load_config, main, parse_path, play, save_puzzle
from src.puzzle import Cell
from src.session import Session


def format_path(cells):
    return " ".join(f"{c.row},{c.col}" for c in cells)


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("language: Yoruba\ngrid_size: 10\nseed: 42\nhint_count: 1\n", encoding="utf-8")

        config = load_config(str(path))
        assert config.language == "Yoruba"
        assert config.grid_size == 10
        assert config.seed == 42
        assert config.hint_count == 1

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)).grid_size == 15

    def test_word_file(self, tmp_path):
        (tmp_path / "animals.txt").write_text("Cat\ndog\n", encoding="utf-8")
        path = tmp_path / "config.yaml"
        path.write_text("language: English\nword_file: animals.txt\n", encoding="utf-8")

        assert load_config(str(path)).words == ["cat", "dog"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("grid_size: 0\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(str(path))

    @pytest.mark.parametrize("text", ["- a\n- b\n", "hello\n", "42\n"])
    def test_non_mapping_config(self, tmp_path, text):
        """A list or bare scalar at the top level is rejected with a clear error."""
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(str(path))

    def test_non_mapping_config_exits_cleanly(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["word-hunt", str(path)])

        with pytest.raises(SystemExit) as exc:
            main()

        assert exc.value.code == 1
        assert "Error loading config" in capsys.readouterr().err


class TestParsePath:
    """Test parsing typed selections."""

    def test_pairs(self):
        assert parse_path("0,0 0,1 0,2") == [Cell(0, 0), Cell(0, 1), Cell(0, 2)]

    def test_spacing(self):
        assert parse_path(" 3, 4   5 ,6 ") == [Cell(3, 4), Cell(5, 6)]

    def test_negative_kept(self):
        """Out-of-range cells are left for the validator to reject."""
        assert parse_path("0,-1 0,0") == [Cell(0, -1), Cell(0, 0)]

    @pytest.mark.parametrize("line", ["", "hello", "0,0 x", "1 2"])
    def test_invalid(self, line):
        with pytest.raises(ValueError, match="Invalid selection"):
            parse_path(line)


class TestSavePuzzle:
    """Test writing puzzles to JSON."""

    def test_round_trip_fields(self, tmp_path):
        session = Session.create(words=["cat", "dog"], grid_size=6, seed=5)
        path = tmp_path / "out" / "puzzle.json"

        save_puzzle(session, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["config"]["grid_size"] == 6
        assert len(data["puzzle"]["grid"]) == 6
        assert set(data["puzzle"]["placements"]) == set(session.words_to_find)
        for word, cells in data["puzzle"]["placements"].items():
            assert "".join(data["puzzle"]["grid"][r][c] for r, c in cells) == word
        assert data["state"]["found_words"] == []


class TestPlay:
    """Test the interactive loop over text streams."""

    def test_find_only_word(self):
        session = Session.create(words=["cat"], grid_size=5, alphabet="xyz", seed=1)
        cells = session.puzzle.placements["cat"]
        stdin = io.StringIO(f"0,0\n{format_path(cells[::-1])}\n")
        out = io.StringIO()

        play(session, stdin, out)

        output = out.getvalue()
        assert "Select at least two letters." in output
        assert "Congratulations! You found all the words!" in output
        assert session.found_words == {"cat"}

    def test_hint_and_quit(self):
        session = Session.create(words=["cat"], grid_size=5, alphabet="xyz", seed=2)
        stdin = io.StringIO("hint\nquit\n0,0 0,1\n")
        out = io.StringIO()

        play(session, stdin, out)

        assert "Hint: The word 'CAT' is flashing!" in out.getvalue()
        assert session.hints_remaining == 2
        assert session.found_words == set()

    def test_bad_input_and_new_puzzle(self):
        session = Session.create(words=["cat"], grid_size=5, alphabet="xyz", seed=3)
        stdin = io.StringIO("banana\nnew Klingon\nnew English\nq\n")
        out = io.StringIO()

        play(session, stdin, out)

        output = out.getvalue()
        assert "Error: Invalid selection" in output
        assert "Error:" in output.split("Invalid selection", 1)[1]
        assert "Find all the hidden English words!" in output
        assert session.config.language == "English"
