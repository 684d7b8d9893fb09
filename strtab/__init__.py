"""strtab - string-to-offset tables for generated C++ data"""

__version__ = "0.1.0"
