import sys
import logging
from argparse import ArgumentParser, ArgumentTypeError

from dumpx.formatter import GROUP_SIZE, WIDTH, FormatOptions, HexFormatter
from dumpx.reader import iter_chunks, open_input
from dumpx.writer import open_output, write_lines

__version__ = "0.1.0"

logger = logging.getLogger("dumpx")


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise ArgumentTypeError(f"must be greater than 0, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise ArgumentTypeError(f"must not be negative, got {value}")
    return number


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="dumpx",
        description="Writes a file's contents in hexadecimal and ASCII.",
    )
    parser.add_argument("input", metavar="INPUT_FILE_PATH")
    parser.add_argument(
        "--output",
        "-o",
        metavar="OUTPUT_FILE_PATH",
        help="Write to a new file instead of stdout",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=_positive_int,
        default=WIDTH,
        help=f"Number of bytes per line (default: {WIDTH})",
    )
    parser.add_argument(
        "--group",
        "-g",
        type=_non_negative_int,
        default=GROUP_SIZE,
        help=f"Number of bytes per group, 0 to disable grouping (default: {GROUP_SIZE})",
    )
    parser.add_argument(
        "--uppercase",
        "-u",
        action="store_true",
        help="Use uppercase hex digits",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(
    input_path: str, output_path: str | None, options: FormatOptions
) -> int:
    formatter = HexFormatter(options)

    # Open the input first so a bad path never creates an output file
    with open_input(input_path) as stream:
        with open_output(output_path) as out:
            count = write_lines(out, formatter.dump_stream(iter_chunks(stream)))

    logger.debug("Wrote %d lines", count)
    return count


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    options = FormatOptions(
        width=args.width, group_size=args.group, uppercase=args.uppercase
    )

    try:
        run(args.input, args.output, options)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
