"""Command-line driver for the LUT compiler."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from lut.lut import LUT
from lut.lut_ast_printer import LutASTPrinter
from lut.lut_error import LutError
from lut.lut_transpiler import TranspileOptions


SOURCE_SUFFIX = ".lut"
BUILD_DIR_NAME = "build"


def setup_logging(verbose: bool) -> None:
    """Configure logging to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def output_path_for(input_path: Path, output_dir: Path | None, target_suffix: str) -> Path:
    """
    Work out where the compiled file goes.

    Args:
        input_path: Path of the `.lut` source
        output_dir: Explicit output directory, or None for a sibling `build` directory
        target_suffix: Suffix that replaces `.lut`

    Returns:
        Path of the output file
    """
    name = input_path.name
    if name.endswith(SOURCE_SUFFIX):
        name = name[:-len(SOURCE_SUFFIX)]

    directory = output_dir if output_dir is not None else input_path.parent / BUILD_DIR_NAME
    return directory / f"{name}{target_suffix}"


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog='lutc',
        description='Compile LUT source code',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compile to build/main.rs next to the source
  lutc main.lut

  # Print the result instead of writing a file
  lutc main.lut --stdout

  # Show the parsed tree
  lutc main.lut --dump-ast
"""
    )
    parser.add_argument(
        'input',
        help='Input file (must end in .lut)'
    )
    parser.add_argument(
        '-o', '--output-dir',
        help='Output directory (default: "build" next to the input file)'
    )
    parser.add_argument(
        '--stdout',
        action='store_true',
        help='Print the compiled code instead of writing it'
    )
    parser.add_argument(
        '--suffix',
        default='.rs',
        help='Suffix for the output file (default: .rs)'
    )
    parser.add_argument(
        '--dump-tokens',
        action='store_true',
        help='Print the token stream and stop'
    )
    parser.add_argument(
        '--dump-ast',
        action='store_true',
        help='Print the parsed tree and stop'
    )
    parser.add_argument(
        '--no-check',
        action='store_true',
        help='Skip the bracket balance check before parsing'
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=100,
        help='Maximum nesting depth of parentheses and function bodies (default: 100)'
    )
    parser.add_argument(
        '--function-keyword',
        default='fn',
        help='Keyword used for emitted functions (default: fn)'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=4,
        help='Number of spaces per indentation level (default: 4)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    """Main entry point for the LUT compiler CLI."""
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger("lutc")

    input_path = Path(args.input)
    if not input_path.name.endswith(SOURCE_SUFFIX):
        print(f"Error: file must end in '{SOURCE_SUFFIX}': {args.input}", file=sys.stderr)
        return 1

    if args.indent < 0:
        print("Error: --indent must not be negative", file=sys.stderr)
        return 1

    if args.max_depth < 1:
        print("Error: --max-depth must be at least 1", file=sys.stderr)
        return 1

    try:
        source_code = input_path.read_text(encoding='utf-8')

    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {args.input}: {e}", file=sys.stderr)
        return 1

    options = TranspileOptions(function_keyword=args.function_keyword, indent=" " * args.indent)
    compiler = LUT(options, check_syntax=not args.no_check, max_depth=args.max_depth)

    try:
        if args.dump_tokens:
            for token in compiler.tokenize(source_code):
                print(repr(token))

            return 0

        ast = compiler.parse(source_code)
        if args.dump_ast:
            print(LutASTPrinter().format(ast))
            return 0

        compiled_code = compiler.transpile(ast)

    except LutError as e:
        print(f"Error compiling {args.input}:\n{e}", file=sys.stderr)
        return 1

    if args.stdout:
        print(compiled_code, end='')
        return 0

    output_dir = Path(args.output_dir) if args.output_dir else None
    output_path = output_path_for(input_path, output_dir, args.suffix)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(compiled_code, encoding='utf-8')

    except OSError as e:
        print(f"Error: could not write {output_path}: {e}", file=sys.stderr)
        return 1

    logger.debug("wrote %s", output_path)
    print(f"Compiled code written to {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
