"""Command-line interface for the code point codec.

WHY: When a string looks wrong, the fastest check is a terminal command:
what units does U+1F600 become, what scalar do D83D DE00 decode to, and
where are the surrogates in this text. The CLI exposes the codec for
exactly those questions.

HOW: argparse with three subcommands. ``encode`` and ``decode`` print
one line per scalar to stdout. ``inspect`` builds an InspectionReport
from text (argument or --file) or raw units (--units) and renders it
with a registered formatter, to stdout or to --output.

RULES:
- Results go to stdout; status messages and errors go to stderr
- Codec and parse errors print "Error: ..." and exit with status 1
- --format keys come from the FORMATTERS registry
- --log-level overrides CODEPOINT_LOG_LEVEL
- Python 3.9 compatible: no match/case, no X | Y unions at runtime
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from codepoint_codec.config import DEFAULT_FORMAT, LOG_FORMAT, load_log_level
from codepoint_codec.core.codec import encode_scalar
from codepoint_codec.core.errors import CodecError
from codepoint_codec.core.inspector import (
    format_scalar,
    format_unit,
    inspect_text,
    inspect_units,
)
from codepoint_codec.core.ir import InspectionReport
from codepoint_codec.core.units import iter_scalars, parse_scalar, parse_unit
from codepoint_codec.formatters import FORMATTERS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_encode(args: argparse.Namespace) -> None:
    """Print the code units of each scalar: ``U+1F600\\t0xD83D 0xDE00``."""
    for token in args.scalars:
        scalar = parse_scalar(token)
        units = encode_scalar(scalar)
        logger.debug("Encoded %s into %d unit(s)", format_scalar(scalar), len(units))
        print("{}\t{}".format(
            format_scalar(scalar),
            " ".join(format_unit(u) for u in units),
        ))


def _cmd_decode(args: argparse.Namespace) -> None:
    """Walk a unit sequence and print each scalar with its start index."""
    units = [parse_unit(token) for token in args.units]
    for index, scalar, consumed in iter_scalars(units):
        logger.debug("Decoded %d unit(s) at index %d", consumed, index)
        print("{}\t{}".format(index, format_scalar(scalar)))


def _load_inspect_report(args: argparse.Namespace) -> InspectionReport:
    """Build the report from exactly one of: text, --file, --units.

    RULES:
    - --units takes unit tokens (hex by default)
    - --file is read as UTF-8; a trailing newline is kept
    - Supplying none or more than one source is a usage error
    """
    sources = [
        args.text is not None,
        args.file is not None,
        args.units is not None,
    ]
    if sum(sources) != 1:
        raise ValueError("Give exactly one of TEXT, --file or --units")

    if args.units is not None:
        return inspect_units([parse_unit(token) for token in args.units])
    if args.file is not None:
        path = Path(args.file)
        _status("Reading {}".format(path))
        return inspect_text(path.read_text(encoding="utf-8"))
    return inspect_text(args.text)


def _cmd_inspect(args: argparse.Namespace) -> None:
    """Render an inspection report with the selected formatter."""
    if args.format not in FORMATTERS:
        raise ValueError("Unknown format '{}'. Available: {}".format(
            args.format, ", ".join(sorted(FORMATTERS)),
        ))

    report = _load_inspect_report(args)
    logger.info(
        "Inspected %d code unit(s), %d scalar(s)",
        report.unit_count,
        report.scalar_count,
    )

    formatter = FORMATTERS[args.format]()
    outputs = formatter.format(report)

    if args.output:
        path = Path(args.output)
        path.write_text("".join(o.content for o in outputs), encoding="utf-8")
        _status("Saved {} report to {}".format(formatter.name, path))
    else:
        for output in outputs:
            sys.stdout.write(output.content)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running commands.
    """
    parser = argparse.ArgumentParser(
        prog="codepoint_codec",
        description="Encode Unicode scalars into UTF-16 code units, decode "
                    "code units back into scalars, and inspect text.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: CODEPOINT_LOG_LEVEL or WARNING).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser(
        "encode",
        help="Encode scalars (U+1F600, 0x1F600 or decimal) into code units.",
    )
    encode.add_argument("scalars", nargs="+", metavar="SCALAR")
    encode.set_defaults(handler=_cmd_encode)

    decode = sub.add_parser(
        "decode",
        help="Decode a code unit sequence (hex, e.g. D83D DE00) into scalars.",
    )
    decode.add_argument("units", nargs="+", metavar="UNIT")
    decode.set_defaults(handler=_cmd_decode)

    inspect = sub.add_parser(
        "inspect",
        help="Show where each scalar starts and how it is encoded.",
    )
    inspect.add_argument("text", nargs="?", default=None, help="Text to inspect.")
    inspect.add_argument("--file", default=None, help="Read the text from a UTF-8 file.")
    inspect.add_argument(
        "--units",
        nargs="+",
        default=None,
        metavar="UNIT",
        help="Inspect raw code units instead of text.",
    )
    inspect.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help="Report format. Available: {} (default: %(default)s).".format(
            ", ".join(sorted(FORMATTERS.keys()))
        ),
    )
    inspect.add_argument(
        "--output",
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    inspect.set_defaults(handler=_cmd_inspect)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = load_log_level(args.log_level)
    except ValueError as e:
        parser.error(str(e))
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        args.handler(args)
    except CodecError as e:
        logger.debug("Codec rejected input: %s", e.kind)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    except (ValueError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
