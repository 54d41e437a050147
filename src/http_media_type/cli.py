#!/usr/bin/env python3
"""Command line tool for parsing and canonicalizing media types.

Each value is parsed and printed in canonical form, one per line. Values
come from the command line or, with none given (or ``-``), from stdin one
per line.
"""

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from .config import get_settings
from .exceptions import InvalidMediaType
from .media_type import MediaType
from .models import ParseOutcome
from .utils import setup_logging

logger = logging.getLogger(__name__)


def parse_values(values: Iterable[str]) -> List[ParseOutcome]:
    """Parse each value and record the outcome.

    :param values: Raw media type strings
    :type values: Iterable[str]
    :return: One outcome per value, in order
    :rtype: List[ParseOutcome]
    """
    outcomes = []
    for value in values:
        try:
            media_type = MediaType.from_string(value)
        except InvalidMediaType as e:
            logger.warning("Could not parse %r: %s", value, e.message)
            outcomes.append(ParseOutcome(input=value, error=e.to_dict()))
            continue
        logger.debug("Parsed %r as %s", value, media_type)
        outcomes.append(
            ParseOutcome(
                input=value,
                output=media_type.to_string(),
                media_type=media_type.to_model(),
            )
        )
    return outcomes


def _read_values(args: Sequence[str], stdin: TextIO) -> List[str]:
    if args and list(args) != ["-"]:
        return list(args)
    return [line.rstrip("\r\n") for line in stdin if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http-media-type",
        description="Parse media types and print them in canonical form",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="media type to parse; reads stdin when omitted or '-'",
    )
    parser.add_argument(
        "--json",
        dest="output_format",
        action="store_const",
        const="json",
        help="print a JSON array of parse outcomes",
    )
    parser.add_argument(
        "--essence",
        action="store_true",
        help="print only type/subtype",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the command line tool.

    :param argv: Arguments, defaults to ``sys.argv[1:]``
    :return: 0 if every value parsed, 1 otherwise
    :rtype: int

    Examples
    --------
    .. code-block:: bash

        http-media-type 'Text/HTML;Charset="utf-8"'
        printf 'text/plain\\n/html\\n' | http-media-type --json
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    settings = get_settings()
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level or settings.log_level)

    output_format = args.output_format or settings.output_format
    outcomes = parse_values(_read_values(args.values, stdin))

    if output_format == "json":
        payload = [outcome.model_dump(mode="json") for outcome in outcomes]
        stdout.write(json.dumps(payload, indent=settings.json_indent) + "\n")
    else:
        for outcome in outcomes:
            if outcome.ok:
                line = outcome.media_type.essence if args.essence else outcome.output
                stdout.write(f"{line}\n")
            else:
                stderr.write(f"{outcome.input!r}: {outcome.error['message']}\n")

    return 0 if all(outcome.ok for outcome in outcomes) else 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
