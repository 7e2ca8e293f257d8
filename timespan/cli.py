#!/usr/bin/env python3
"""
Command-line tools for spans.

Usage:
    timespan contains SPAN POINT [--kind time] [--template T] [--start-format F] [--end-format F] [--point-format F]
    timespan convert SPAN TO_TEMPLATE TO_START_FORMAT TO_END_FORMAT [--kind time] [--template T] ...
    timespan duration SPAN [--kind time] [--template T] [--start-format F] [--end-format F]

Exit status:
    contains exits 0 when the span contains the point and 1 when it does not.
    Any span or point that cannot be parsed exits with 2.

Environment Variables:
    TIMESPAN_LOG_LEVEL: Logging level (default: WARNING)
    TIMESPAN_DEFAULT_TEMPLATE: Template used when --template is omitted
    TIMESPAN_DEFAULT_TIME_FORMAT: Point format for time spans (default: %H:%M:%S)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from timespan.config import TimespanConfig, load_config
from timespan.errors import SpanError
from timespan.factory import SpanVariantFactory, SpanVariants
from timespan.span import Span

logger = logging.getLogger(__name__)

EXIT_CONTAINED = 0
EXIT_NOT_CONTAINED = 1
EXIT_PARSE_ERROR = 2


def default_format(variant: SpanVariants, config: TimespanConfig) -> str:
    """Return the point format used when none is given on the command line."""
    if variant == SpanVariants.DATE:
        return "%Y-%m-%d"
    if variant == SpanVariants.DATETIME:
        return "%Y-%m-%d %H:%M:%S"
    if variant == SpanVariants.ZONED_DATETIME:
        return "%Y-%m-%d %H:%M:%S%z"
    return config.default_time_format


def build_parser(config: TimespanConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timespan",
        description="Parse, check and convert time spans"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_span_arguments(subparser: argparse.ArgumentParser) -> None:
        subparser.add_argument("span", help="Span text, e.g. '09:00:00 - 17:00:00'")
        subparser.add_argument(
            "--kind",
            type=SpanVariants,
            default=SpanVariants.TIME,
            choices=list(SpanVariants),
            metavar="{" + ",".join(v.value for v in SpanVariants) + "}",
            help="Kind of points in the span (default: time)"
        )
        subparser.add_argument(
            "--template",
            default=config.default_template,
            help=f"Template the span text follows (default: {config.default_template!r})"
        )
        subparser.add_argument("--start-format", default=None, help="strptime pattern for the start")
        subparser.add_argument("--end-format", default=None, help="strptime pattern for the end")

    contains = subparsers.add_parser("contains", help="Check whether a span contains a point")
    add_span_arguments(contains)
    contains.add_argument("point", help="Point to look for")
    contains.add_argument("--point-format", default=None, help="strptime pattern for the point")

    convert = subparsers.add_parser("convert", help="Render a span with another template")
    add_span_arguments(convert)
    convert.add_argument("to_template", help="Output template, e.g. 'from {start} to {end}'")
    convert.add_argument("to_start_format", help="strftime pattern for the start")
    convert.add_argument("to_end_format", help="strftime pattern for the end")

    duration = subparsers.add_parser("duration", help="Print the duration of a span")
    add_span_arguments(duration)

    return parser


def _parse_span(args: argparse.Namespace, config: TimespanConfig) -> Span:
    span_cls = SpanVariantFactory.get_span_class(args.kind)
    fmt = default_format(args.kind, config)
    return span_cls.parse_from_str(
        args.span,
        args.template,
        args.start_format or fmt,
        args.end_format or fmt,
    )


def run_contains(args: argparse.Namespace, config: TimespanConfig) -> int:
    span = _parse_span(args, config)
    point_format = args.point_format or default_format(args.kind, config)
    try:
        point = span.point_kind.parse(args.point, point_format)
    except ValueError as e:
        raise SpanError(f"Could not parse point {args.point!r} with format {point_format!r}: {e}") from e

    contained = span.contains(point)
    verdict = "contains" if contained else "does not contain"
    print(f"{span} {verdict} {span.point_kind.format_default(point)}")
    return EXIT_CONTAINED if contained else EXIT_NOT_CONTAINED


def run_convert(args: argparse.Namespace, config: TimespanConfig) -> int:
    span = _parse_span(args, config)
    print(span.format(args.to_template, args.to_start_format, args.to_end_format).render())
    return 0


def run_duration(args: argparse.Namespace, config: TimespanConfig) -> int:
    span = _parse_span(args, config)
    print(f"duration for {span}: {span.duration()}")
    return 0


COMMANDS = {
    "contains": run_contains,
    "convert": run_convert,
    "duration": run_duration,
}


def main(argv: Sequence[str] | None = None) -> int:
    try:
        config = load_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_PARSE_ERROR
    logging.basicConfig(level=config.log_level_number, format="%(levelname)s\t%(name)s\t%(message)s")

    args = build_parser(config).parse_args(argv)
    logger.debug(f"Running {args.command} on {args.span!r} as {args.kind.value} span")

    try:
        return COMMANDS[args.command](args, config)
    except SpanError as e:
        logger.error(f"An error occurred: {e}")
        return EXIT_PARSE_ERROR


if __name__ == "__main__":
    sys.exit(main())
