"""Tests for C++ literal escaping"""

import pytest
from strtab.core.escaping import escape_char, is_printable, unescape, write_escaped


class TestWriteEscaped:
    """Test suite for write_escaped"""

    def test_printable_unchanged(self):
        """Test printable ASCII passes through"""
        assert write_escaped(b"Hello, World! ~{}") == "Hello, World! ~{}"

    def test_simple_escapes(self):
        """Test single-character escapes"""
        assert write_escaped(b"\\") == "\\\\"
        assert write_escaped(b"\t") == "\\t"
        assert write_escaped(b"\n") == "\\n"
        assert write_escaped(b'"') == '\\"'

    def test_single_quote_unchanged(self):
        """Test single quote needs no escape in string literals"""
        assert write_escaped(b"'") == "'"

    def test_octal_escapes(self):
        """Test non-printable bytes use 3-digit octal"""
        assert write_escaped(b"\0") == "\\000"
        assert write_escaped(b"\r") == "\\015"
        assert write_escaped(b"\x7f") == "\\177"
        assert write_escaped(b"\xff") == "\\377"

    def test_octal_followed_by_digit(self):
        """Test digits after an octal escape are kept as-is"""
        assert write_escaped(b"\x001") == "\\0001"

    def test_accepts_bytearray(self):
        """Test bytearray input"""
        assert write_escaped(bytearray(b"a\0")) == "a\\000"

    def test_utf8_bytes(self):
        """Test multi-byte UTF-8 sequences are escaped bytewise"""
        assert write_escaped("é".encode("utf-8")) == "\\303\\251"


class TestEscapeChar:
    """Test suite for escape_char"""

    def test_single_quote(self):
        """Test single quote is escaped for char literals"""
        assert escape_char(ord("'")) == "\\'"

    def test_same_as_string_escape(self):
        """Test other bytes match write_escaped"""
        for byte in (0, ord("a"), ord("\\"), ord('"'), 0x80):
            assert escape_char(byte) == write_escaped(bytes([byte]))


class TestUnescape:
    """Test suite for unescape"""

    def test_reverses_all_bytes(self):
        """Test every byte value survives escaping"""
        data = bytes(range(256))
        assert unescape(write_escaped(data)) == data

    def test_single_quote_escape(self):
        """Test char literal escape"""
        assert unescape("\\'") == b"'"

    def test_incomplete_escape(self):
        """Test trailing backslash"""
        with pytest.raises(ValueError, match="Incomplete"):
            unescape("abc\\")

    def test_bad_octal(self):
        """Test octal escape with non-octal digits"""
        with pytest.raises(ValueError, match="octal"):
            unescape("\\08")

    def test_unknown_escape(self):
        """Test escape not produced by write_escaped"""
        with pytest.raises(ValueError, match="Unknown escape"):
            unescape("\\q")

    def test_non_latin1(self):
        """Test characters outside a byte"""
        with pytest.raises(ValueError):
            unescape("€")


class TestIsPrintable:
    """Test suite for is_printable"""

    def test_bounds(self):
        """Test printable range edges"""
        assert is_printable(0x20)
        assert is_printable(0x7E)
        assert not is_printable(0x1F)
        assert not is_printable(0x7F)
