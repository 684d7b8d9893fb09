"""Printer languages for string table emission

Selects which output language a StringToOffsetTable emits. Only C++ source
is implemented; other members are reserved for future backends.
"""

from enum import Enum


class PrinterLanguage(Enum):
    """Output language of generated string tables"""

    CPP = "cpp"                  # static C++ string literal (default)
    CAPSTONE_C = "capstone_c"    # reserved, no emitter yet

    @classmethod
    def from_name(cls, name: str) -> "PrinterLanguage":
        """Look up a language by its config name

        Args:
            name: Language name (e.g., "cpp")

        Returns:
            Matching PrinterLanguage

        Raises:
            ValueError: If no language has this name
        """
        normalized = name.strip().lower()
        for language in cls:
            if language.value == normalized:
                return language
        known = ", ".join(language.value for language in cls)
        raise ValueError(f"Unknown printer language '{name}' (expected one of: {known})")
