"""
Command Line Interface Module

Parses command-line arguments, reads piped input, and prints conversions.

Usage:
    ckconv 250m ft
    ckconv m 250 ft  in 3.5 cm
    echo "10 yards" | ckconv m
    ckconv --units imperial
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, List, Optional

from ckconv import __version__
from ckconv.config import Settings, apply_overrides, load_settings
from ckconv.conversion.convertapi import convert_triple
from ckconv.display.rendering import conversion_text, error_text, make_console, units_renderables
from ckconv.systems.systemapi import system_identifier
from ckconv.tokens.tokenapi import collect_tokens, normalize_tokens
from ckconv.utils.errors import ConfigError

logger = logging.getLogger(__name__)

PROG = "ckconv"


def non_negative_int(text: str) -> int:
    """argparse type for counts that cannot go below zero."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be zero or greater, got {value}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the converter."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=f"Creation Kit Unit Converter ({PROG}) v{__version__}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The input syntax can be in multiple different forms, such as:
  '<VALUE><UNIT> <OUTPUT_UNIT>' or '<VALUE> <UNIT> <OUTPUT_UNIT>'
Input can also be piped in; piped tokens come before the parameters.

Examples:
  ckconv 250m ft
  ckconv u 128 m  ft 6 u
  ckconv -qn 1mi km
  ckconv --units ck
        """
    )

    parser.add_argument(
        "parameters",
        nargs="*",
        metavar="<UNIT> <VALUE> <OUTPUT_UNIT>",
        help="Conversions to perform"
    )

    parser.add_argument(
        "-v", "--version",
        action="store_true",
        help="Show the current version number and exit"
    )

    parser.add_argument(
        "-f", "--full-name", "--full-names",
        dest="full_name",
        action="store_true",
        default=None,
        help="Use the full name instead of the official unit symbols when possible"
    )

    parser.add_argument(
        "-p", "--precision",
        type=non_negative_int,
        metavar="#",
        help="Digits of precision (digits after the decimal point with --fixed or --scientific)"
    )

    parser.add_argument(
        "-a", "--align-to",
        dest="align_to",
        type=non_negative_int,
        metavar="#",
        help="Align output to <#> character columns (ignored with --quiet)"
    )

    parser.add_argument(
        "-u", "--units", "--list-units",
        dest="units",
        nargs="?",
        const="",
        default=None,
        metavar="NAME",
        help="List recognized units; optionally only one system, or the system of a unit"
    )

    parser.add_argument(
        "-w", "--where",
        action="store_true",
        help=f"Print the location of the {PROG} executable"
    )

    parser.add_argument(
        "--config",
        help="Settings file (default: $CKCONV_CONFIG or ~/.config/ckconv/ckconv.yaml)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log diagnostics to stderr"
    )

    # Appearance
    appearance = parser.add_argument_group("appearance")

    appearance.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=None,
        help="Print only output values"
    )

    appearance.add_argument(
        "-n", "--no-color",
        dest="no_color",
        action="store_true",
        help="Don't use color escape sequences"
    )

    # Notation
    notation_group = parser.add_argument_group("notation")
    notation = notation_group.add_mutually_exclusive_group()

    notation.add_argument(
        "-F", "--fixed", "--standard",
        dest="notation",
        action="store_const",
        const="fixed",
        help="Force print numbers in fixed-point (standard) notation"
    )

    notation.add_argument(
        "-S", "--scientific", "--sci",
        dest="notation",
        action="store_const",
        const="scientific",
        help="Force print numbers in scientific notation"
    )

    notation.add_argument(
        "-H", "-X", "--hexadecimal", "--hex",
        dest="notation",
        action="store_const",
        const="hex",
        help="Print all numbers in hexadecimal"
    )

    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    """Settings file values overlaid with command-line flags.

    Raises:
        ConfigError: settings file is unreadable or invalid
    """
    settings = load_settings(args.config)
    return apply_overrides(
        settings,
        full_name=args.full_name,
        precision=args.precision,
        align_to=args.align_to,
        notation=args.notation,
        quiet=args.quiet,
        color=False if args.no_color else None,
    )


def configure_logging(debug: bool, stream: IO[str]) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        stream=stream,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_conversions(tokens: List[str], settings: Settings, out, err) -> int:
    """Convert every triple, reporting failures and moving on to the next one."""
    result = normalize_tokens(tokens)
    if not result.ok:
        err.print(error_text(str(result.error), settings, fatal=True))
        return 1

    triples = result.value
    if not triples:
        err.print(error_text("No valid conversions specified!", settings, fatal=True))
        return 1

    logger.debug(f"Processing {len(triples)} conversion(s)")
    for triple in triples:
        converted = convert_triple(triple)
        if converted.ok:
            out.print(conversion_text(converted.value, settings))
        else:
            logger.debug(f"Conversion {triple} failed: {converted.kind}")
            err.print(error_text(str(converted.error), settings))

    return 0


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> int:
    """Main entry point for CLI."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug, stderr)

    try:
        settings = build_settings(args)
    except ConfigError as e:
        make_console(Settings(color=not args.no_color), file=stderr).print(
            error_text(str(e), Settings(), fatal=True)
        )
        return 1

    out = make_console(settings, file=stdout)
    err = make_console(settings, file=stderr)

    if args.version:
        out.print(__version__ if settings.quiet else f"{PROG} v{__version__}")
        return 0

    if args.units is not None:
        system = system_identifier(args.units)
        if system is None:
            err.print(error_text(f"'{args.units}' is not a measurement system or unit", settings, fatal=True))
            return 1
        for renderable in units_renderables(system, settings):
            out.print(renderable)
        return 0

    if args.where:
        out.print(str(Path(sys.argv[0]).resolve().parent))
        return 0

    try:
        tokens = collect_tokens(args.parameters, stdin)
        return run_conversions(tokens, settings, out, err)
    except KeyboardInterrupt:
        err.print(error_text("Interrupted by user", settings, fatal=True))
        return 1


if __name__ == "__main__":
    sys.exit(main())
