"""Main CLI entry point for the strtab string table generator"""

import sys
import argparse
import traceback
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from strtab.core.config import EmitterConfig
from strtab.core.diagnostics import FatalError
from strtab.core.emission_logger import EmissionLogger
from strtab.generators.definition_generator import DefinitionGenerator
from strtab.generators.naming import NamingScheme
from strtab.generators.string_table import StringToOffsetTable


YAML_SUFFIXES = {'.yaml', '.yml'}


def read_strings(input_file: Path) -> List[str]:
    """Read the strings to intern from an input file

    Text files hold one string per line (blank lines are skipped).
    YAML files hold a list of strings.

    Args:
        input_file: Path to input file

    Returns:
        Strings in file order (duplicates kept)

    Raises:
        FileNotFoundError: If input_file doesn't exist
        ValueError: If a YAML file is not a list of strings
    """
    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    if input_file.suffix.lower() in YAML_SUFFIXES:
        with open(input_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
            raise ValueError(f"{input_file} must contain a YAML list of strings")
        return data

    with open(input_file, 'r', encoding='utf-8') as f:
        # Only newlines separate strings; form feeds and other line breaks
        # recognized by str.splitlines() are string content.
        return [line for line in f.read().split("\n") if line]


def transpile_strings(
    input_file: Path,
    config: Optional[EmitterConfig] = None,
    logger: Optional[EmissionLogger] = None,
) -> Dict[str, Optional[str]]:
    """Build a string table from an input file and generate C++ for it

    Args:
        input_file: Input file path
        config: Emitter configuration (defaults if None)
        logger: Optional logger collecting interning statistics

    Returns:
        Dict with keys: 'definition', 'header'
        header is None unless config.emit_header is set

    Raises:
        FileNotFoundError: If input_file doesn't exist
        ValueError: If input or configuration is invalid
        FatalError: If the configured language has no emitter
    """
    if config is None:
        config = EmitterConfig()

    strings = read_strings(input_file)

    table = StringToOffsetTable(config.language, logger=logger)
    table.get_or_add_string_offsets(strings, append_zero=config.append_zero)

    generator = DefinitionGenerator(config, logger=logger)
    definition = generator.generate_offsets_comment(table) + generator.generate_definition(table)

    header = None
    if config.emit_header:
        header = generator.generate_header(table)

    return {
        'definition': definition,
        'header': header,
    }


def build_config(args: argparse.Namespace) -> EmitterConfig:
    """Merge config file, --set overrides and flags (in that order)"""
    config = EmitterConfig(table_name=NamingScheme.name_from_path(args.input))
    if args.config:
        if not args.config.exists():
            raise FileNotFoundError(f"Config file not found: {args.config}")
        config.load_from_yaml(args.config)
    config.apply_overrides(args.set or [])

    if args.header:
        config.emit_header = True
    if args.char_array:
        config.char_array = True
    if args.no_zero:
        config.append_zero = False
    return config


def main() -> None:
    """Main entry point for CLI"""
    parser = argparse.ArgumentParser(
        description='strtab - Pack strings into one C++ string table addressed by offset',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One string per line
  strtab names.txt

  # Custom output name, header with size constant
  strtab names.txt -o build/InstrNames --header

  # MSVC-friendly character array
  strtab names.yaml --char-array --set table_name=Names
        """
    )

    parser.add_argument('input', type=Path, help='Input file (.txt one string per line, or .yaml list)')
    parser.add_argument(
        '-o', '--output', type=Path,
        help='Output path without extension (default: input filename)'
    )
    parser.add_argument(
        '--config', type=Path,
        help='YAML config file with a "strtab" section'
    )
    parser.add_argument(
        '--set', action='append', metavar='KEY=VALUE',
        help='Override a config option (repeatable)'
    )
    parser.add_argument(
        '--header', action='store_true',
        help='Also generate a .hpp declaring the table'
    )
    parser.add_argument(
        '--char-array', action='store_true',
        help='Emit character literals instead of one string literal'
    )
    parser.add_argument(
        '--no-zero', action='store_true',
        help='Do not NUL-terminate interned strings'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args()

    input_file = Path(args.input)
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        sys.exit(1)

    output_base = args.output if args.output else input_file.with_suffix('')
    try:
        output_base.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Error: Cannot create output directory {output_base.parent}: {e}", file=sys.stderr)
        sys.exit(1)

    logger = EmissionLogger()
    try:
        config = build_config(args)
        results = transpile_strings(input_file, config, logger=logger)
    except (FileNotFoundError, ValueError, FatalError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        print(f"Error generating string table from {input_file}:", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)

    definition_file = output_base.with_name(f"{output_base.name}.inc")
    definition_file.write_text(results['definition'], encoding='utf-8')
    print(f"Generated: {definition_file}")

    if results['header']:
        header_file = output_base.with_name(f"{output_base.name}.hpp")
        header_file.write_text(results['header'], encoding='utf-8')
        print(f"Generated: {header_file}")

    if args.verbose:
        print("\n" + logger.print_summary())


if __name__ == "__main__":
    main()
