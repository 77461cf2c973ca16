"""Tests for the command-line interface.

WHY: The CLI is the quickest way to check an encoding by hand. Output
must be stable enough to grep, and bad input must exit non-zero with a
readable message rather than a traceback.

HOW: Calls main() with explicit argv and captures stdout/stderr with
capsys. Error paths are checked via SystemExit codes.

RULES:
- Results on stdout, errors and status on stderr
- File I/O uses tmp_path
"""

import json

import pytest

from codepoint_codec.cli import build_parser, main


class TestParser:

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_inspect_defaults(self):
        args = build_parser().parse_args(["inspect", "abc"])
        assert args.text == "abc"
        assert args.format == "plain_text"
        assert args.output is None


class TestEncodeCommand:

    def test_bmp_and_supplementary(self, capsys):
        main(["encode", "U+0041", "0x1F600"])
        out = capsys.readouterr().out
        assert out == "U+0041\t0x0041\nU+1F600\t0xD83D 0xDE00\n"

    def test_decimal(self, capsys):
        main(["encode", "65536"])
        assert capsys.readouterr().out == "U+10000\t0xD800 0xDC00\n"

    def test_surrogate_scalar_exits_1(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "U+D800"])
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_out_of_range_exits_1(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "0x110000"])
        assert excinfo.value.code == 1
        assert "0x110000" in capsys.readouterr().err


class TestDecodeCommand:

    def test_walks_sequence(self, capsys):
        main(["decode", "0041", "D83D", "DE00", "20AC"])
        out = capsys.readouterr().out
        assert out == "0\tU+0041\n1\tU+1F600\n3\tU+20AC\n"

    def test_unpaired_high(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", "D83D", "0041"])
        assert excinfo.value.code == 1
        assert "Unpaired high surrogate" in capsys.readouterr().err

    def test_unpaired_low(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", "DE00"])
        assert excinfo.value.code == 1
        assert "Unpaired low surrogate" in capsys.readouterr().err

    def test_unit_too_wide(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", "1F600"])
        assert excinfo.value.code == 1
        assert "16 bits" in capsys.readouterr().err


class TestInspectCommand:

    def test_text_plain(self, capsys, sample_text):
        main(["inspect", sample_text])
        out = capsys.readouterr().out
        assert "2\tU+1F600\t0xD83D 0xDE00\t1" in out

    def test_units_json(self, capsys, sample_units):
        tokens = ["{:04X}".format(u) for u in sample_units]
        main(["inspect", "--format", "json", "--units"] + tokens)
        doc = json.loads(capsys.readouterr().out)
        assert doc["source"] == "units"
        assert doc["scalar_count"] == 5

    def test_file_input(self, capsys, tmp_path, sample_text):
        path = tmp_path / "sample.txt"
        path.write_text(sample_text, encoding="utf-8")
        main(["inspect", "--file", str(path), "--format", "json"])
        captured = capsys.readouterr()
        assert json.loads(captured.out)["unit_count"] == 7
        assert "Reading" in captured.err

    def test_output_file(self, capsys, tmp_path, sample_text):
        target = tmp_path / "report.json"
        main(["inspect", sample_text, "--format", "json", "--output", str(target)])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert json.loads(target.read_text(encoding="utf-8"))["scalar_count"] == 5
        assert "Saved" in captured.err

    def test_unknown_format(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["inspect", "abc", "--format", "xml"])
        assert excinfo.value.code == 1
        assert "Unknown format" in capsys.readouterr().err

    def test_no_source(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["inspect"])
        assert excinfo.value.code == 1
        assert "exactly one" in capsys.readouterr().err

    def test_two_sources(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["inspect", "abc", "--units", "0041"])
        assert excinfo.value.code == 1

    def test_missing_file(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["inspect", "--file", str(tmp_path / "missing.txt")])
        assert excinfo.value.code == 1

    def test_malformed_units(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["inspect", "--units", "0041", "DC00"])
        assert excinfo.value.code == 1
        assert "index 1" in capsys.readouterr().err


class TestLogLevel:

    def test_invalid_log_level_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--log-level", "chatty", "encode", "65"])
        assert excinfo.value.code == 2
        assert "Unknown log level" in capsys.readouterr().err

    def test_valid_log_level(self, capsys):
        main(["--log-level", "debug", "encode", "65"])
        assert capsys.readouterr().out == "U+0041\t0x0041\n"
