# -*- coding: utf-8 -*-
"""Location: ./mint_format/cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

MINT Command Line Interface.
This module converts between JSON and MINT from files or standard streams:
- JSON to MINT encoding and MINT to JSON decoding
- Mode detection from flags or file extensions
- Syntax validation of MINT documents
- Token statistics comparing both renderings

Defaults come from ``mint_format.config.settings`` (``MINT_*`` environment
variables); explicit flags override them.

Examples:
    >>> parser = create_parser()
    >>> args = parser.parse_args(["data.json", "--compact"])
    >>> args.input, args.compact, args.indent
    ('data.json', True, None)
    >>> detect_mode(parser.parse_args(["data.mint"]))
    'decode'
"""

# Standard
import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

# Third-Party
import orjson

# First-Party
from mint_format import __version__
from mint_format.config import configure_logging, settings
from mint_format.decoder import decode
from mint_format.encoder import encode
from mint_format.models import DecodeOptions, EncodeOptions
from mint_format.tokens import compare_texts
from mint_format.validator import validate

logger = logging.getLogger(__name__)

ENCODE = "encode"
DECODE = "decode"


class CLIError(Exception):
    """Base class for CLI-related errors."""


class InputNotFoundError(CLIError):
    """Raised when the input file does not exist."""


class InvalidInputError(CLIError):
    """Raised when the input cannot be parsed for the selected mode."""


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mint command.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(prog="mint", description="Convert between JSON and MINT, the token-efficient text format")

    parser.add_argument("--version", "-V", action="version", version=f"🌿 MINT Format v{__version__}")
    parser.add_argument("input", nargs="?", help="Input file path (default: stdin, also '-')")
    parser.add_argument("--output", "-o", help="Output file path (default: stdout)")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--encode", "-e", action="store_true", help="Force JSON to MINT conversion")
    mode.add_argument("--decode", "-d", action="store_true", help="Force MINT to JSON conversion")

    parser.add_argument("--compact", action="store_true", default=None, help="Replace status words with symbols (✓ ✗ ⏳ ⚠ ?)")
    parser.add_argument("--indent", type=int, help="Spaces per indentation level (default: 2)")
    parser.add_argument("--sort-keys", action="store_true", default=None, help="Sort object keys alphabetically")
    parser.add_argument("--strict", action=argparse.BooleanOptionalAction, default=None, help="Log skipped constructs as warnings when decoding")
    parser.add_argument("--stats", action="store_true", help="Show token count and savings on stderr")
    parser.add_argument("--validate", action="store_true", help="Validate MINT syntax instead of converting")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level (default: WARNING)")

    return parser


def read_input(path: Optional[str]) -> str:
    """Read the input document.

    Args:
        path: File path, ``-`` or None for stdin

    Returns:
        Input text

    Raises:
        InputNotFoundError: If the file does not exist
    """
    if not path or path == "-":
        return sys.stdin.read()

    input_file = Path(path)
    if not input_file.exists():
        raise InputNotFoundError(f"File not found: {path}")
    return input_file.read_text(encoding="utf-8")


def write_output(content: str, path: Optional[str]) -> None:
    """Write the converted document to a file or stdout.

    Args:
        content: Converted text
        path: Output file path, or None for stdout
    """
    if not path:
        sys.stdout.write(content if content.endswith("\n") else content + "\n")
        return

    output_file = Path(path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content + "\n", encoding="utf-8")
    print(f"🌿 Written to: {path}", file=sys.stderr)


def detect_mode(args: argparse.Namespace) -> str:
    """Choose between encoding and decoding.

    Explicit flags win, then the input extension, then the output extension.
    Encoding is the fallback.

    Args:
        args: Parsed command line arguments

    Returns:
        ``"encode"`` or ``"decode"``

    Examples:
        >>> parser = create_parser()
        >>> detect_mode(parser.parse_args(["-d", "data.json"]))
        'decode'
        >>> detect_mode(parser.parse_args(["-o", "out.json"]))
        'decode'
        >>> detect_mode(parser.parse_args(["notes.txt"]))
        'encode'
    """
    if args.encode:
        return ENCODE
    if args.decode:
        return DECODE

    if args.input and args.input != "-":
        suffix = Path(args.input).suffix.lower()
        if suffix == ".json":
            return ENCODE
        if suffix == ".mint":
            return DECODE

    if args.output:
        suffix = Path(args.output).suffix.lower()
        if suffix == ".mint":
            return ENCODE
        if suffix == ".json":
            return DECODE

    return ENCODE


def encode_options(args: argparse.Namespace) -> EncodeOptions:
    """Merge configured encoding defaults with explicit flags.

    Args:
        args: Parsed command line arguments

    Returns:
        Encoding options
    """
    overrides = {"indent": args.indent, "compact": args.compact, "sort_keys": args.sort_keys}
    return EncodeOptions.resolve(settings.encode_options(), **{k: v for k, v in overrides.items() if v is not None})


def decode_options(args: argparse.Namespace) -> DecodeOptions:
    """Merge configured decoding defaults with explicit flags.

    Args:
        args: Parsed command line arguments

    Returns:
        Decoding options
    """
    overrides = {"indent": args.indent, "strict": args.strict}
    return DecodeOptions.resolve(settings.decode_options(), **{k: v for k, v in overrides.items() if v is not None})


def convert(text: str, mode: str, args: argparse.Namespace) -> str:
    """Convert the input text in the selected direction.

    Args:
        text: Input document
        mode: ``"encode"`` or ``"decode"``
        args: Parsed command line arguments

    Returns:
        Converted document

    Raises:
        InvalidInputError: If JSON input cannot be parsed
    """
    if mode == ENCODE:
        try:
            data = orjson.loads(text)
        except orjson.JSONDecodeError as e:
            raise InvalidInputError(f"Invalid JSON input: {e}") from e
        return encode(data, encode_options(args))

    data = decode(text, decode_options(args))
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode()


def show_stats(source: str, result: str, mode: str) -> None:
    """Print token statistics for a conversion to stderr.

    Args:
        source: Input document
        result: Converted document
        mode: ``"encode"`` or ``"decode"``
    """
    json_text, mint_text = (source, result) if mode == ENCODE else (result, source)
    estimate = compare_texts(json_text, mint_text)

    print("\n🌿 ─── Token Statistics ───", file=sys.stderr)
    print(f"   JSON:    ~{estimate.json_tokens} tokens ({len(json_text)} chars)", file=sys.stderr)
    print(f"   MINT:    ~{estimate.mint_tokens} tokens ({len(mint_text)} chars)", file=sys.stderr)
    print(f"   Savings: ~{estimate.savings} tokens ({estimate.savings_percent}%)", file=sys.stderr)
    print("───────────────────────────\n", file=sys.stderr)


def validate_command(text: str, indent: int) -> int:
    """Validate a MINT document and report the result.

    Args:
        text: MINT document
        indent: Indentation unit

    Returns:
        Exit status: 0 when valid, 1 otherwise
    """
    result = validate(text, indent=indent)
    if result.valid:
        print("🌿 ✓ Valid MINT format")
        return 0

    print("❌ Invalid MINT format\n", file=sys.stderr)
    for error in result.errors:
        print(f"  Line {error.line}: {error.message}", file=sys.stderr)
        if error.context:
            print(f"    {error.context}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command line arguments (default: ``sys.argv[1:]``)

    Returns:
        Process exit status
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level or settings.log_level)
        text = read_input(args.input)

        if args.validate:
            return validate_command(text, args.indent or settings.indent)

        mode = detect_mode(args)
        logger.debug(f"Converting with mode={mode}")
        output = convert(text, mode, args)

        if args.stats:
            show_stats(text, output, mode)

        write_output(output, args.output)
        return 0
    except CLIError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError, OSError) as e:
        logger.debug(f"Conversion failed: {e}")
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n❌ Operation cancelled by user", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
