"""
chip8fmt command-line tests, driven through main(argv).
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io
import json
import logging

import pytest
import chip8fmt


UNFORMATTED = "loop: JP loop\n  CLS\n"
FORMATTED = "loop:   JP loop\n        CLS\n"


@pytest.fixture
def asm_file(tmp_path):
    path = tmp_path / "game.c8s"
    path.write_text(UNFORMATTED, encoding="utf-8")
    return path


class TestFormat:
    def test_stdout(self, asm_file, capsys):
        assert chip8fmt.main([str(asm_file)]) == 0
        assert capsys.readouterr().out == FORMATTED
        assert asm_file.read_text(encoding="utf-8") == UNFORMATTED

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("CLS\n"))
        assert chip8fmt.main([]) == 0
        assert capsys.readouterr().out == "        CLS\n"

    def test_in_place(self, asm_file):
        assert chip8fmt.main(["-i", str(asm_file)]) == 0
        assert asm_file.read_text(encoding="utf-8") == FORMATTED

    def test_in_place_stdin_rejected(self):
        assert chip8fmt.main(["-i", "-"]) == 1

    def test_column(self, asm_file, capsys):
        assert chip8fmt.main(["--column", "4", str(asm_file)]) == 0
        assert capsys.readouterr().out == "loop: JP loop\n    CLS\n"

    def test_bad_column(self, asm_file):
        assert chip8fmt.main(["--column", "-2", str(asm_file)]) == 1

    def test_missing_file(self, tmp_path):
        assert chip8fmt.main([str(tmp_path / "nope.c8s")]) == 1

    def test_undecodable_file_skipped(self, tmp_path, capsys):
        first = tmp_path / "a.c8s"
        bad = tmp_path / "b.c8s"
        last = tmp_path / "c.c8s"
        first.write_text(UNFORMATTED, encoding="utf-8")
        bad.write_bytes(b"\xff\xfe CLS\n")
        last.write_text(UNFORMATTED, encoding="utf-8")
        assert chip8fmt.main(["-i", str(first), str(bad), str(last)]) == 1
        assert first.read_text(encoding="utf-8") == FORMATTED
        assert last.read_text(encoding="utf-8") == FORMATTED
        assert bad.read_bytes() == b"\xff\xfe CLS\n"
        assert "Cannot read" in capsys.readouterr().err

    def test_undecodable_file_check(self, tmp_path):
        bad = tmp_path / "bad.c8s"
        bad.write_bytes(b"\xff")
        assert chip8fmt.main(["--check", str(bad)]) == 1


class TestCheck:
    def test_would_reformat(self, asm_file, capsys):
        assert chip8fmt.main(["--check", str(asm_file)]) == 1
        assert "would reformat" in capsys.readouterr().out

    def test_already_formatted(self, tmp_path, capsys):
        path = tmp_path / "ok.c8s"
        path.write_text(FORMATTED, encoding="utf-8")
        assert chip8fmt.main(["--check", str(path)]) == 0
        assert capsys.readouterr().out == ""


class TestTokens:
    def test_txt(self, asm_file, capsys):
        assert chip8fmt.main(["--tokens", str(asm_file)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert lines[0].endswith("loop")
        assert "label" in lines[0]
        assert "operation" in lines[1]

    def test_json(self, asm_file, capsys):
        assert chip8fmt.main(["--tokens", "--format", "json", str(asm_file)]) == 0
        docs = json.loads(capsys.readouterr().out)
        assert len(docs) == 1
        data = docs[0]
        assert data["file"] == str(asm_file)
        assert [t["type"] for t in data["tokens"]] == [
            "label", "operation", "identifier", "operation",
        ]
        assert data["tokens"][1] == {
            "type": "operation", "value": "JP", "line": 1, "start": 6, "end": 8,
        }

    def test_json_several_files(self, asm_file, tmp_path, capsys):
        other = tmp_path / "other.c8s"
        other.write_text("RET\n", encoding="utf-8")
        assert chip8fmt.main(["--tokens", "--format", "json", str(asm_file), str(other)]) == 0
        docs = json.loads(capsys.readouterr().out)
        assert [d["file"] for d in docs] == [str(asm_file), str(other)]
        assert docs[1]["tokens"] == [
            {"type": "operation", "value": "RET", "line": 1, "start": 0, "end": 3},
        ]


class TestHighlight:
    def test_plain_output_when_not_a_terminal(self, asm_file, capsys):
        assert chip8fmt.main(["--highlight", str(asm_file)]) == 0
        assert capsys.readouterr().out == UNFORMATTED


class TestLogging:
    def test_log_file(self, asm_file, tmp_path):
        log_path = tmp_path / "logs" / "chip8fmt.log"
        assert chip8fmt.main(["-v", "-i", "--log-file", str(log_path), str(asm_file)]) == 0
        logging.getLogger("chip8_mode").handlers[-1].flush()
        content = log_path.read_text(encoding="utf-8")
        assert "Reformatted" in content
        assert " | INFO    | " in content

    def test_modes_exclusive(self, asm_file):
        with pytest.raises(SystemExit):
            chip8fmt.main(["--check", "--tokens", str(asm_file)])
