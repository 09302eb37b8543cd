import argparse
import sys
from typing import List

from rich.console import Console
from rich.markup import escape

from .config import ConverterConfig
from .converter import (
    DEFAULT_TO_BASES,
    convert_to_base_10,
    format_number,
    parse_target_base,
)
from .errors import NumConverterError
from .resolver import get_bases

console = Console()
err_console = Console(stderr=True)


def _sep_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError("separator must be a single character")
    if value.isalnum():
        raise argparse.ArgumentTypeError(f"separator cannot be a digit or letter: {value!r}")
    return value


def _pad_width(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pad width: {value!r}")
    if not 0 <= width <= 255:
        raise argparse.ArgumentTypeError("pad width must be between 0 and 255")
    return width


def _sep_length(value: str) -> int:
    try:
        length = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid separator length: {value!r}")
    if length < 0:
        raise argparse.ArgumentTypeError("separator length cannot be negative")
    return length


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="numconverter",
        description="A CLI number conversion utility",
    )
    parser.add_argument(
        "-p",
        "--pad",
        type=_pad_width,
        default=0,
        help="Pad the output with leading 0s",
    )
    parser.add_argument(
        "-l",
        "--sep-length",
        dest="sep_length",
        type=_sep_length,
        default=4,
        help="Put a spacer every N characters",
    )
    parser.add_argument(
        "--sep-char",
        dest="sep_char",
        type=_sep_char,
        default="_",
        help="Specify spacer char",
    )
    parser.add_argument(
        "--no-sep",
        dest="no_sep",
        action="store_true",
        help="Do not put spacers in the output",
    )
    parser.add_argument(
        "-f",
        "--from-base",
        dest="from_base",
        type=int,
        default=10,
        help="Input base (base_char takes precedence over this setting)",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Do not print output",
    )
    parser.add_argument(
        "--bare",
        action="store_true",
        help="Disable pretty print",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        action="count",
        default=0,
        help="Verbosity (more v's, more verbose)",
    )
    parser.add_argument(
        "from_base_char",
        help="Char representation of input base (b, o, d, h or x) [optional]",
    )
    parser.add_argument("from_num", nargs="?", help="Number to convert")
    parser.add_argument("to_bases", nargs="*", help="Bases to convert to")
    return parser.parse_args(argv)


def run(config: ConverterConfig) -> List[str]:
    """Convert the configured number, print one line per target base and return the printed lines."""
    if config.verbosity > 0:
        err_console.print(config)

    resolved = get_bases(
        config.from_base_char,
        config.from_num,
        config.from_base,
        config.to_bases,
    )
    to_bases = resolved.to_bases or list(DEFAULT_TO_BASES)

    num = convert_to_base_10(resolved.literal, resolved.base, config.sep_char)

    if config.verbosity > 1:
        err_console.print(
            f"[dim]resolved as {resolved.kind}: {escape(repr(resolved.literal))} in base "
            f"{resolved.base} -> {num}, target bases {escape(', '.join(to_bases))}[/dim]",
            highlight=False,
        )

    lines = []
    for target_base in to_bases:
        base = parse_target_base(target_base)
        out_str = format_number(num, base, config)
        if config.silent:
            continue
        line = out_str if config.bare else f"Base {base:02}: {out_str}"
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
        lines.append(line)
    return lines


def main(argv: List[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    config = ConverterConfig.from_args(args)
    try:
        run(config)
    except NumConverterError as e:
        err_console.print(f"[red]{e.label}:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
