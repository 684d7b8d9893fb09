"""String-to-offset table for generated C++ data

Uniques a bunch of NUL-terminated strings and keeps track of their offset
in one contiguous aggregate buffer. The buffer can then be emitted as a
single C++ string literal (or as a list of character literals) and every
string referenced by its offset into it.

Lifecycle:
1. Build: get_or_add_string_offset() for every string the generator needs
2. Emit: emit_string() or emit_char_array(), which seals the table
"""

import io
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from strtab.core.diagnostics import print_fatal_note
from strtab.core.emission_logger import EmissionKind, EmissionLogger, InternKind
from strtab.core.escaping import escape_char, write_escaped
from strtab.core.printer_language import PrinterLanguage

StringLike = Union[str, bytes, bytearray]

# A new literal fragment is started once a line holds more than this many
# printed characters.
LINE_WRAP_COLUMN = 70
# Character literals per line in char array output.
CHARS_PER_ROW = 15
LINE_INDENT = "    "


def _to_bytes(string: StringLike) -> bytes:
    if isinstance(string, str):
        return string.encode("utf-8")
    if isinstance(string, (bytes, bytearray)):
        return bytes(string)
    raise TypeError(f"Expected str or bytes, got {type(string).__name__}")


def split_escaped_tokens(escaped: str) -> Iterator[str]:
    """Split escaped text into printable tokens

    A token is one plain character, one single-character escape (e.g., \\n)
    or one complete 3-digit octal escape (e.g., \\000).

    Args:
        escaped: Output of write_escaped()

    Yields:
        Tokens in order

    Raises:
        ValueError: If an escape sequence is truncated or a numeric escape
            is not followed by 3 digits
    """
    i = 0
    end = len(escaped)
    while i < end:
        if escaped[i] != "\\":
            yield escaped[i]
            i += 1
            continue

        if i + 1 >= end:
            raise ValueError(f"Incomplete escape sequence at {i}")
        if escaped[i + 1].isdigit():
            if i + 3 >= end or not (escaped[i + 2].isdigit() and escaped[i + 3].isdigit()):
                raise ValueError(f"Expected 3 digit octal escape at {i}")
            yield escaped[i:i + 4]
            i += 4
        else:
            yield escaped[i:i + 2]
            i += 2


class StringToOffsetTable:
    """Uniques strings into one aggregate buffer addressed by offset"""

    def __init__(self, language: PrinterLanguage = PrinterLanguage.CPP,
                 logger: Optional[EmissionLogger] = None) -> None:
        """Initialize empty table

        Args:
            language: Output language used by emit_string()
            logger: Optional logger receiving intern/emission records
        """
        self.language = language
        self.logger = logger
        self._string_offset: Dict[bytes, int] = {}
        self._aggregate = bytearray()
        self._sealed = False

    def empty(self) -> bool:
        """Check if no string has been added yet"""
        return not self._string_offset

    def get_or_add_string_offset(self, string: StringLike, append_zero: bool = True) -> int:
        """Get the offset of a string, adding it to the aggregate if new

        The append_zero flag only matters the first time a content is seen;
        later calls return the recorded offset whatever the flag is.

        Args:
            string: String content (str is stored as UTF-8)
            append_zero: Terminate the string with a NUL byte

        Returns:
            Byte offset of the string inside the aggregate buffer

        Raises:
            RuntimeError: If the string is new and the table was already emitted
        """
        data = _to_bytes(string)
        offset = self._string_offset.get(data)
        if offset is not None:
            if self.logger:
                self.logger.log_intern(InternKind.REUSED, data, offset)
            return offset

        if self._sealed:
            raise RuntimeError("Cannot add strings to a StringToOffsetTable that was already emitted")

        offset = len(self._aggregate)
        self._string_offset[data] = offset
        self._aggregate += data
        if append_zero:
            self._aggregate.append(0)
        if self.logger:
            self.logger.log_intern(InternKind.ADDED, data, offset)
        return offset

    def get_or_add_string_offsets(self, strings: Iterable[StringLike], append_zero: bool = True) -> List[int]:
        """Get offsets for several strings, adding the new ones in order"""
        return [self.get_or_add_string_offset(s, append_zero) for s in strings]

    def emit_string(self, out: TextIO) -> None:
        """Emit the aggregate buffer in the table's printer language

        Args:
            out: Text stream receiving the output

        Raises:
            FatalError: If no emitter exists for the selected language
        """
        if self.language == PrinterLanguage.CPP:
            self.emit_string_cpp(out)
        else:
            print_fatal_note("No StringToOffsetTable method defined to emit the selected language.\n")

    def emit_string_cpp(self, out: TextIO) -> None:
        """Emit the aggregate buffer as adjacent C++ string literals

        Output example for "foo" and "bar":
                "foo\\000bar\\000"

        Escape sequences are never split across two literal fragments.
        """
        escaped = write_escaped(self._aggregate)

        parts = [LINE_INDENT, '"']
        chars_printed = 0
        for token in split_escaped_tokens(escaped):
            if chars_printed > LINE_WRAP_COLUMN:
                parts.append(f'"\n{LINE_INDENT}"')
                chars_printed = 0
            parts.append(token)
            chars_printed += len(token)
        parts.append('"')

        out.write("".join(parts))
        self._mark_emitted(EmissionKind.STRING_LITERAL)

    def emit_char_array(self, out: TextIO) -> None:
        """Emit the aggregate buffer as a list of C++ character literals

        Used for compilers limiting string literal length (MSVC caps them
        at 64K). Output is meant to sit between braces of an array
        initializer.

        Raises:
            ValueError: If the buffer contains ')'
        """
        if ord(")") in self._aggregate:
            raise ValueError("can't emit raw string with closing parens")

        parts = [" "]
        count = 0
        for byte in self._aggregate:
            parts.append(f" '{escape_char(byte)}',")
            count += 1
            if count >= CHARS_PER_ROW:
                parts.append("\n ")
                count = 0
        parts.append("\n")

        out.write("".join(parts))
        self._mark_emitted(EmissionKind.CHAR_ARRAY)

    def write_to_string(self, char_array: bool = False) -> str:
        """Emit the table into a string

        Args:
            char_array: Use emit_char_array() instead of emit_string()

        Returns:
            Emitted text
        """
        output = io.StringIO()
        if char_array:
            self.emit_char_array(output)
        else:
            self.emit_string(output)
        return output.getvalue()

    def _mark_emitted(self, kind: EmissionKind) -> None:
        self._sealed = True
        if self.logger:
            self.logger.log_emission(kind, len(self._aggregate), self.language.value)

    def is_sealed(self) -> bool:
        """Check if the table was emitted and accepts no new strings"""
        return self._sealed

    def size(self) -> int:
        """Get number of unique strings"""
        return len(self._string_offset)

    def __len__(self) -> int:
        return len(self._string_offset)

    def __contains__(self, string: StringLike) -> bool:
        return _to_bytes(string) in self._string_offset

    def offset_of(self, string: StringLike) -> Optional[int]:
        """Get offset of a string without adding it

        Returns:
            Offset if found, None otherwise
        """
        return self._string_offset.get(_to_bytes(string))

    def aggregate_size(self) -> int:
        """Get size of the aggregate buffer in bytes"""
        return len(self._aggregate)

    def aggregate_bytes(self) -> bytes:
        """Get a copy of the raw aggregate buffer"""
        return bytes(self._aggregate)

    def string_at(self, offset: int) -> bytes:
        """Read the string starting at offset, up to the next NUL

        Raises:
            IndexError: If offset is outside the aggregate buffer
        """
        if offset < 0 or offset >= len(self._aggregate):
            raise IndexError(f"Offset {offset} out of bounds (size: {len(self._aggregate)})")
        end = self._aggregate.find(0, offset)
        if end == -1:
            end = len(self._aggregate)
        return bytes(self._aggregate[offset:end])

    def items(self) -> List[Tuple[bytes, int]]:
        """Get (string, offset) pairs ordered by offset"""
        return sorted(self._string_offset.items(), key=lambda item: item[1])
