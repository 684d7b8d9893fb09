"""C++ definition generator for string tables

Wraps the text emitted by a StringToOffsetTable into a complete array
definition, plus an optional header declaring it.
"""

from typing import List, Optional

from strtab.core.config import EmitterConfig
from strtab.core.emission_logger import EmissionLogger
from strtab.core.escaping import write_escaped
from strtab.generators.naming import NamingScheme
from strtab.generators.string_table import StringToOffsetTable


class DefinitionGenerator:
    """Generates C++ definitions and headers for string tables"""

    def __init__(self, config: Optional[EmitterConfig] = None,
                 logger: Optional[EmissionLogger] = None) -> None:
        """Initialize definition generator

        Args:
            config: Emitter configuration (defaults if None)
            logger: Optional logger for warnings
        """
        self.config = config if config is not None else EmitterConfig()
        self.logger = logger
        self.naming = NamingScheme()

    def _namespace_parts(self) -> List[str]:
        if not self.config.namespace:
            return []
        parts = self.config.namespace.split("::")
        for part in parts:
            if not self.naming.is_valid_identifier(part):
                raise ValueError(f"Invalid namespace '{self.config.namespace}'")
        return parts

    def _wrap_namespace(self, body: List[str]) -> List[str]:
        parts = self._namespace_parts()
        if not parts:
            return body
        namespace = "::".join(parts)
        return [f"namespace {namespace} {{", ""] + body + ["", f"}} // end namespace {namespace}"]

    def generate_definition(self, table: StringToOffsetTable) -> str:
        """Generate the array definition for a table

        Args:
            table: Table whose strings are all added

        Returns:
            C++ source text

        Output example (string literal mode):
            static const char StringTable[] =
                "foo\\000bar\\000";
        """
        name = self.naming.table_name(self.config.table_name)
        linkage = "extern" if self.config.emit_header else "static"

        if table.empty() and self.logger:
            self.logger.log_warning(f"String table '{name}' is empty")

        body = []
        if self.config.char_array:
            body.append(f"{linkage} const char {name}[] = {{")
            if table.empty():
                # An array of unknown bound needs at least one element
                body.append("  '\\000',")
            else:
                body.append(table.write_to_string(char_array=True).rstrip("\n"))
            body.append("};")
        else:
            body.append(f"{linkage} const char {name}[] =")
            body.append(table.write_to_string() + ";")

        return "\n".join(self._wrap_namespace(body)) + "\n"

    def generate_offsets_comment(self, table: StringToOffsetTable) -> str:
        """Generate a comment listing each string with its offset

        Returns:
            One "// <offset> "<string>"" line per string, in offset order
        """
        lines = []
        for string, offset in table.items():
            lines.append(f'// {offset:>6} "{write_escaped(string)}"')
        return "\n".join(lines) + ("\n" if lines else "")

    def generate_header(self, table: StringToOffsetTable) -> str:
        """Generate a header declaring the table and its size

        Output example:
            #pragma once

            extern const char StringTable[];
            // Packed string data length in bytes. In string literal mode
            // sizeof(StringTable) is one more (the literal's own NUL).
            constexpr unsigned StringTableSize = 8;
        """
        name = self.naming.table_name(self.config.table_name)
        size_name = self.naming.size_constant_name(self.config.table_name)

        body = [
            f"extern const char {name}[];",
            "// Packed string data length in bytes. In string literal mode",
            f"// sizeof({name}) is one more (the literal's own NUL).",
            f"constexpr unsigned {size_name} = {table.aggregate_size()};",
        ]
        lines = ["#pragma once", ""] + self._wrap_namespace(body)
        return "\n".join(lines) + "\n"
