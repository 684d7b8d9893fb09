"""strtab.generators package

Generators producing C++ text for string tables.
"""

from .string_table import StringToOffsetTable
from .definition_generator import DefinitionGenerator
from .naming import NamingScheme

__all__ = [
    "StringToOffsetTable",
    "DefinitionGenerator",
    "NamingScheme",
]
