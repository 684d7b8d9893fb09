"""Emitter configuration for string table generation

Options can come from a YAML file and from CLI "key=value" overrides.

YAML layout:
    strtab:
      language: cpp
      table_name: InstrNameData
      append_zero: true
      char_array: false
      emit_header: true
      namespace: llvm
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

from strtab.core.printer_language import PrinterLanguage


_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Option '{key}' expects a boolean, got '{value}'")


@dataclass
class EmitterConfig:
    """Configuration for emitting a string table

    Attributes:
        language: Printer language of the emitted table
        table_name: C++ identifier of the generated array
        append_zero: Terminate each interned string with a NUL byte
        char_array: Emit character literals instead of one string literal
        emit_header: Also generate an extern declaration header
        namespace: C++ namespace wrapping the definition (empty = none)
    """
    language: PrinterLanguage = PrinterLanguage.CPP
    table_name: str = "StringTable"
    append_zero: bool = True
    char_array: bool = False
    emit_header: bool = False
    namespace: str = ""

    def set_option(self, key: str, value: Any) -> None:
        """Set a single option from its config name

        Args:
            key: Option name (e.g., "table_name")
            value: Raw value from YAML or CLI

        Raises:
            ValueError: If the option is unknown or the value is invalid
        """
        known = {f.name for f in fields(self)}
        if key not in known:
            raise ValueError(f"Unknown option '{key}' (expected one of: {', '.join(sorted(known))})")

        if key == "language":
            self.language = value if isinstance(value, PrinterLanguage) else PrinterLanguage.from_name(str(value))
        elif key in ("append_zero", "char_array", "emit_header"):
            setattr(self, key, _parse_bool(key, value))
        else:
            setattr(self, key, "" if value is None else str(value))

    def apply_overrides(self, specs: List[str]) -> None:
        """Apply CLI overrides

        Parses specs like: ["table_name=Names", "char_array=true"]
        Specs without '=' are skipped.

        Args:
            specs: List of "key=value" strings
        """
        for spec in specs:
            if '=' not in spec:
                continue
            key, value = spec.split('=', 1)
            self.set_option(key.strip(), value.strip())

    def load_from_yaml(self, path: Path) -> None:
        """Load options from a YAML config file

        A missing file or a document without a 'strtab' section leaves
        the current values untouched.

        Args:
            path: Path to YAML config file
        """
        if not path.exists():
            return

        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)

        if not config or 'strtab' not in config:
            return

        section = config.get('strtab') or {}
        if not isinstance(section, dict):
            raise ValueError(f"'strtab' section in {path} must be a mapping")
        for key, value in section.items():
            self.set_option(key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Get options as plain values (language by name)"""
        return {
            'language': self.language.value,
            'table_name': self.table_name,
            'append_zero': self.append_zero,
            'char_array': self.char_array,
            'emit_header': self.emit_header,
            'namespace': self.namespace,
        }

    @classmethod
    def from_yaml(cls, path: Path) -> "EmitterConfig":
        """Create a config from defaults updated by a YAML file"""
        config = cls()
        config.load_from_yaml(path)
        return config
