"""Emission logger for string table generation

Tracks interning decisions (new strings vs. deduplicated hits) and
emitted tables, and provides summary statistics.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
from enum import Enum


class InternKind(Enum):
    """Outcome of an interning request"""
    ADDED = "added"
    REUSED = "reused"


class EmissionKind(Enum):
    """Emission strategy used for a table"""
    STRING_LITERAL = "string_literal"
    CHAR_ARRAY = "char_array"


@dataclass
class InternRecord:
    """Record of a single interning request"""
    kind: InternKind
    string: bytes
    offset: int


@dataclass
class EmissionRecord:
    """Record of a single emission"""
    kind: EmissionKind
    size: int
    language: Optional[str] = None


class EmissionLogger:
    """Logs interning and emission events and provides summaries"""

    def __init__(self) -> None:
        self.interned: List[InternRecord] = []
        self.emissions: List[EmissionRecord] = []
        self.warnings: List[str] = []

    def log_intern(self, kind: InternKind, string: bytes, offset: int) -> None:
        """Log an interning request

        Args:
            kind: Whether the string was appended or found
            string: Raw string content
            offset: Offset returned to the caller
        """
        self.interned.append(InternRecord(kind=kind, string=string, offset=offset))

    def log_emission(self, kind: EmissionKind, size: int, language: Optional[str] = None) -> None:
        """Log an emitted table

        Args:
            kind: Emission strategy
            size: Size of the raw aggregate buffer in bytes
            language: Printer language name (if applicable)
        """
        self.emissions.append(EmissionRecord(kind=kind, size=size, language=language))

    def log_warning(self, message: str) -> None:
        """Log a warning message"""
        self.warnings.append(message)

    def get_summary(self) -> Dict:
        """Get summary statistics

        Returns:
            Dictionary with interning and emission statistics
        """
        added = [r for r in self.interned if r.kind == InternKind.ADDED]
        reused = [r for r in self.interned if r.kind == InternKind.REUSED]

        emissions_by_kind: Dict[EmissionKind, int] = {}
        for emission in self.emissions:
            emissions_by_kind[emission.kind] = emissions_by_kind.get(emission.kind, 0) + 1

        return {
            "total_requests": len(self.interned),
            "strings_added": len(added),
            "strings_reused": len(reused),
            "bytes_saved": sum(len(r.string) for r in reused),
            "total_emissions": len(self.emissions),
            "emissions_by_kind": emissions_by_kind,
            "total_warnings": len(self.warnings),
        }

    def print_summary(self) -> str:
        """Generate formatted summary string

        Returns:
            Formatted summary as string
        """
        summary = self.get_summary()
        lines = []

        lines.append("=== String Table Summary ===")
        lines.append(f"Intern requests: {summary['total_requests']}")
        lines.append(f"  added: {summary['strings_added']}")
        lines.append(f"  reused: {summary['strings_reused']}")
        lines.append(f"Bytes saved by deduplication: {summary['bytes_saved']}")
        lines.append("")

        reused = self.get_reused_strings()
        if reused:
            lines.append("Reused details (top 10):")
            for string in reused[:10]:
                lines.append(f"  {string.decode('utf-8', errors='backslashreplace')!r}")
            lines.append("")

        lines.append(f"Emissions: {summary['total_emissions']}")
        for kind, count in summary['emissions_by_kind'].items():
            lines.append(f"  {kind.value}: {count}")
        for emission in self.emissions:
            if emission.language:
                lines.append(f"  {emission.kind.value} ({emission.language}): {emission.size} bytes")
            else:
                lines.append(f"  {emission.kind.value}: {emission.size} bytes")
        lines.append("")

        lines.append(f"Warnings: {summary['total_warnings']}")
        if self.warnings:
            lines.append("Warning details:")
            for warning in self.warnings:
                lines.append(f"  {warning}")

        return "\n".join(lines)

    def get_reused_strings(self) -> List[bytes]:
        """Get strings that hit an existing table entry, in request order"""
        return [r.string for r in self.interned if r.kind == InternKind.REUSED]

    def clear(self) -> None:
        """Clear all logs"""
        self.interned.clear()
        self.emissions.clear()
        self.warnings.clear()
