"""Naming scheme for generated string tables

Derives C++ identifiers for table arrays and their size constants:
- Tables: user-chosen name, mangled with _table suffix on keyword collision
- Size constants: <TableName>Size
- Default names from input files: sanitized file stem
"""

from pathlib import Path
import re


class NamingScheme:
    """Handles C++ identifier generation for string tables"""

    TABLE_SUFFIX = "_table"
    SIZE_SUFFIX = "Size"

    # C++ reserved keywords that need mangling
    CPP_KEYWORDS = {
        'alignas', 'alignof', 'and', 'and_eq', 'asm', 'auto', 'bitand', 'bitor',
        'bool', 'break', 'case', 'catch', 'char', 'char8_t',
        'char16_t', 'char32_t', 'class', 'compl', 'const', 'const_cast', 'consteval',
        'constexpr', 'constinit', 'continue', 'decltype', 'default', 'delete', 'do', 'double',
        'dynamic_cast', 'else', 'enum', 'explicit', 'export', 'extern',
        'false', 'float', 'for', 'friend', 'goto', 'if', 'inline', 'int',
        'long', 'mutable', 'namespace', 'new', 'noexcept',
        'not', 'not_eq', 'nullptr', 'operator', 'or', 'or_eq', 'private', 'protected',
        'public', 'register', 'reinterpret_cast', 'return', 'short', 'signed',
        'sizeof', 'static', 'static_assert', 'static_cast', 'struct', 'switch', 'template',
        'this', 'thread_local', 'throw', 'true', 'try', 'typedef', 'typeid',
        'typename', 'union', 'unsigned', 'using', 'virtual', 'void', 'volatile',
        'wchar_t', 'while', 'xor', 'xor_eq',
    }

    @staticmethod
    def is_valid_identifier(name: str) -> bool:
        """Check if a string is a valid C identifier

        Args:
            name: String to check

        Returns:
            True if valid C identifier
        """
        if not name or name[0].isdigit():
            return False
        return all((c.isascii() and c.isalnum()) or c == "_" for c in name)

    @staticmethod
    def table_name(name: str) -> str:
        """Validate a table name and mangle it if it is a C++ keyword

        Args:
            name: Requested array name

        Returns:
            Usable C++ identifier

        Raises:
            ValueError: If name is not a valid identifier
        """
        if not NamingScheme.is_valid_identifier(name):
            raise ValueError(f"Invalid table name '{name}': not a C++ identifier")
        if name in NamingScheme.CPP_KEYWORDS:
            return f"{name}{NamingScheme.TABLE_SUFFIX}"
        return name

    @staticmethod
    def size_constant_name(table_name: str) -> str:
        """Generate name of the constant holding a table's byte size

        Returns:
            C++ identifier (e.g., "InstrNamesSize")
        """
        return f"{NamingScheme.table_name(table_name)}{NamingScheme.SIZE_SUFFIX}"

    @staticmethod
    def name_from_path(path: Path) -> str:
        """Derive a table name from an input file name

        Args:
            path: Input file (e.g., "data/instr-names.txt")

        Returns:
            Identifier-safe name (e.g., "instr_names")
        """
        name = re.sub(r"[^0-9A-Za-z_]", "_", path.stem)
        name = re.sub(r"_{2,}", "_", name).strip("_")
        if not name:
            return "StringTable"
        if name[0].isdigit():
            name = f"_{name}"
        return NamingScheme.table_name(name)
