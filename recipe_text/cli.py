"""Command line entry point: ``recipe-text <command> [FILE]``."""

import argparse
import logging
import sys

from recipe_text.parser.caption import caption_to_ingredient_lines
from recipe_text.parser.convert import convert_for_display
from recipe_text.parser.ingredients import parse_ingredient_line
from recipe_text.parser.pipeline import parse_caption
from recipe_text.parser.steps import caption_to_steps
from recipe_text.parser.title import extract_recipe_title

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _read(path: str) -> str:
    """Read a text file, or stdin when the path is "-"."""
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def _cmd_parse(args: argparse.Namespace) -> None:
    recipe = parse_caption(args.text)
    print(recipe.model_dump_json(indent=2))


def _cmd_ingredients(args: argparse.Namespace) -> None:
    for line in caption_to_ingredient_lines(args.text):
        print(line)


def _cmd_title(args: argparse.Namespace) -> None:
    print(extract_recipe_title(args.text))


def _cmd_steps(args: argparse.Namespace) -> None:
    for i, step in enumerate(caption_to_steps(args.text), start=1):
        print(f"{i}. {step}")


def _cmd_line(args: argparse.Namespace) -> None:
    for line in args.text.splitlines():
        if line.strip():
            print(parse_ingredient_line(line).model_dump_json())


def _cmd_convert(args: argparse.Namespace) -> None:
    shown = convert_for_display(args.qty, args.unit, args.to)
    print(f"{shown.qty:g} {shown.unit}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-text",
        description="Pull ingredients, a title and steps out of recipe captions",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    text_commands = [
        ("parse", _cmd_parse, "Full recipe as JSON"),
        ("ingredients", _cmd_ingredients, "Canonical ingredient lines"),
        ("title", _cmd_title, "Best recipe title"),
        ("steps", _cmd_steps, "Numbered steps"),
        ("line", _cmd_line, "Parse each input line as one ingredient (JSON lines)"),
    ]
    for name, handler, help_text in text_commands:
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument(
            "file",
            nargs="?",
            default="-",
            help="Input text file, or - for stdin (default)",
        )
        cmd.set_defaults(handler=handler)

    convert = sub.add_parser("convert", help="Convert a quantity for display")
    convert.add_argument("qty", type=float)
    convert.add_argument("unit")
    convert.add_argument("--to", choices=["us", "metric"], default="metric")
    convert.set_defaults(handler=_cmd_convert)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "file", None) is not None:
        try:
            args.text = _read(args.file)
        except (OSError, UnicodeDecodeError) as e:
            parser.error(f"can't read '{args.file}': {e}")
    _configure_logging(args.verbose)
    logger.debug("Running %s", args.command)
    args.handler(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
