"""C++ literal escaping for generated string tables

Converts raw bytes into text that can be embedded between double quotes
(or single quotes for character literals) in generated C++ source.

Escape convention:
- Backslash, tab, newline and double quote use single-character escapes
- Printable ASCII (0x20-0x7E) passes through unchanged
- Every other byte becomes a 3-digit octal escape (e.g., NUL -> \\000)
"""

from typing import Dict, Union

BytesLike = Union[bytes, bytearray, memoryview]

_SIMPLE_ESCAPES: Dict[int, str] = {
    ord("\\"): "\\\\",
    ord("\t"): "\\t",
    ord("\n"): "\\n",
    ord('"'): '\\"',
}

_UNESCAPES: Dict[str, int] = {
    "\\": ord("\\"),
    "t": ord("\t"),
    "n": ord("\n"),
    '"': ord('"'),
    "'": ord("'"),
}


def _octal_escape(byte: int) -> str:
    return "\\" + format(byte, "03o")


def _build_translation_table() -> Dict[int, str]:
    table = {}
    for byte in range(256):
        if byte in _SIMPLE_ESCAPES:
            table[byte] = _SIMPLE_ESCAPES[byte]
        elif is_printable(byte):
            table[byte] = chr(byte)
        else:
            table[byte] = _octal_escape(byte)
    return table


def is_printable(byte: int) -> bool:
    """Check if a byte is printable ASCII (space through tilde)"""
    return 0x20 <= byte <= 0x7E


_TRANSLATION_TABLE = _build_translation_table()


def write_escaped(data: BytesLike) -> str:
    """Escape raw bytes for use inside a C++ string literal

    Args:
        data: Raw bytes to escape

    Returns:
        Escaped text without surrounding quotes

    Example:
        >>> write_escaped(b'foo\\0bar')
        'foo\\\\000bar'
    """
    return bytes(data).decode("latin1").translate(_TRANSLATION_TABLE)


def escape_char(byte: int) -> str:
    """Escape a single byte for use inside a C++ character literal

    Same convention as write_escaped, plus the single quote which would
    otherwise terminate the literal.
    """
    if byte == ord("'"):
        return "\\'"
    return _TRANSLATION_TABLE[byte]


def unescape(text: str) -> bytes:
    """Reverse write_escaped/escape_char

    Args:
        text: Escaped text without surrounding quotes

    Returns:
        The original raw bytes

    Raises:
        ValueError: If text contains an escape sequence not produced by
            write_escaped or a non-latin1 character
    """
    result = bytearray()
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char != "\\":
            if ord(char) > 0xFF:
                raise ValueError(f"Character {char!r} at {i} cannot appear in escaped text")
            result.append(ord(char))
            i += 1
            continue

        if i + 1 >= length:
            raise ValueError(f"Incomplete escape sequence at {i}")
        marker = text[i + 1]
        if marker.isdigit():
            digits = text[i + 1:i + 4]
            if len(digits) != 3 or any(d not in "01234567" for d in digits):
                raise ValueError(f"Expected 3 digit octal escape at {i}, got '\\{digits}'")
            result.append(int(digits, 8))
            i += 4
        elif marker in _UNESCAPES:
            result.append(_UNESCAPES[marker])
            i += 2
        else:
            raise ValueError(f"Unknown escape sequence '\\{marker}' at {i}")
    return bytes(result)
