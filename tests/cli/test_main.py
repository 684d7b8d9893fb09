"""Test CLI main module"""

import pytest
import subprocess
import sys
from pathlib import Path
from strtab.cli.main import read_strings, transpile_strings
from strtab.core.config import EmitterConfig
from strtab.core.diagnostics import FatalError
from strtab.core.emission_logger import EmissionLogger
from strtab.core.printer_language import PrinterLanguage

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _run_cli(*args):
    return subprocess.run(
        [sys.executable, "-m", "strtab.cli.main", *[str(a) for a in args]],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
    )


class TestReadStrings:
    """Test suite for input reading"""

    def test_text_file(self, tmp_path):
        """Test one string per line, blank lines skipped"""
        path = tmp_path / "names.txt"
        path.write_text("ADD32rr\n\nSUB32rr\nADD32rr\n")
        assert read_strings(path) == ["ADD32rr", "SUB32rr", "ADD32rr"]

    def test_text_file_splits_on_newline_only(self, tmp_path):
        """Test form feeds and CRLF endings inside a text file"""
        path = tmp_path / "names.txt"
        path.write_bytes(b"a\x0cb\r\nc d\n")
        assert read_strings(path) == ["a\x0cb", "c d"]

    def test_yaml_file(self, tmp_path):
        """Test YAML list input"""
        path = tmp_path / "names.yaml"
        path.write_text('- foo\n- ""\n- "tab\\there"\n')
        assert read_strings(path) == ["foo", "", "tab\there"]

    def test_yaml_not_a_list(self, tmp_path):
        """Test YAML mapping input is rejected"""
        path = tmp_path / "names.yml"
        path.write_text("foo: bar\n")
        with pytest.raises(ValueError, match="list of strings"):
            read_strings(path)

    def test_missing_file(self, tmp_path):
        """Test that missing file raises error"""
        with pytest.raises(FileNotFoundError):
            read_strings(tmp_path / "nonexistent.txt")


class TestTranspileStrings:
    """Test suite for transpile_strings"""

    def test_definition(self, tmp_path):
        """Test generated definition for deduplicated input"""
        path = tmp_path / "names.txt"
        path.write_text("foo\nbar\nfoo\n")

        results = transpile_strings(path, EmitterConfig(table_name="Names"))

        assert '//      0 "foo"' in results['definition']
        assert '//      4 "bar"' in results['definition']
        assert 'static const char Names[] =\n    "foo\\000bar\\000";' in results['definition']
        assert results['header'] is None

    def test_header(self, tmp_path):
        """Test header generation"""
        path = tmp_path / "names.txt"
        path.write_text("foo\n")

        results = transpile_strings(path, EmitterConfig(table_name="Names", emit_header=True))
        assert "constexpr unsigned NamesSize = 4;" in results['header']

    def test_logger_statistics(self, tmp_path):
        """Test interning statistics reach the logger"""
        path = tmp_path / "names.txt"
        path.write_text("foo\nfoo\nfoo\n")
        logger = EmissionLogger()

        transpile_strings(path, logger=logger)
        summary = logger.get_summary()
        assert summary["strings_added"] == 1
        assert summary["strings_reused"] == 2

    def test_unsupported_language(self, tmp_path):
        """Test fatal error for languages without emitter"""
        path = tmp_path / "names.txt"
        path.write_text("foo\n")

        with pytest.raises(FatalError):
            transpile_strings(path, EmitterConfig(language=PrinterLanguage.CAPSTONE_C))


class TestCliMain:
    """Test suite for CLI main"""

    def test_generates_inc_file(self, tmp_path):
        """Test default run writes <input>.inc"""
        path = tmp_path / "instr-names.txt"
        path.write_text("foo\nbar\n")

        result = _run_cli(path)

        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        output = (tmp_path / "instr-names.inc").read_text()
        assert "static const char instr_names[] =" in output

    def test_header_and_output_name(self, tmp_path):
        """Test --header and -o"""
        path = tmp_path / "names.txt"
        path.write_text("foo\n")
        out_base = tmp_path / "build" / "Names"

        result = _run_cli(path, "-o", out_base, "--header", "--set", "table_name=Names", "--verbose")

        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        assert (tmp_path / "build" / "Names.inc").is_file()
        header = (tmp_path / "build" / "Names.hpp").read_text()
        assert "extern const char Names[];" in header
        assert "=== String Table Summary ===" in result.stdout

    def test_config_file(self, tmp_path):
        """Test --config with char array output"""
        path = tmp_path / "names.txt"
        path.write_text("ab\n")
        config = tmp_path / "strtab.yaml"
        config.write_text("strtab:\n  table_name: Chars\n  char_array: true\n")

        result = _run_cli(path, "--config", config, "--no-zero")

        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        output = (tmp_path / "names.inc").read_text()
        assert "static const char Chars[] = {\n  'a', 'b',\n};" in output

    def test_missing_input(self, tmp_path):
        """Test missing input file exits with error"""
        result = _run_cli(tmp_path / "missing.txt")
        assert result.returncode == 1
        assert "Input file not found" in result.stderr

    def test_closing_paren_char_array(self, tmp_path):
        """Test char array precondition failure is reported"""
        path = tmp_path / "names.txt"
        path.write_text("f(x)\n")

        result = _run_cli(path, "--char-array")
        assert result.returncode == 1
        assert "closing parens" in result.stderr

    def test_unsupported_language(self, tmp_path):
        """Test fatal note for languages without emitter"""
        path = tmp_path / "names.txt"
        path.write_text("foo\n")

        result = _run_cli(path, "--set", "language=capstone_c")
        assert result.returncode == 1
        assert "No StringToOffsetTable method defined" in result.stderr
        assert not (tmp_path / "names.inc").exists()
