"""CLI entrypoint for topowrite."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .builder import SchemaError
from .config import ConfigError
from .logging import LEVELS, configure_logging
from .pipeline import Pipeline
from .sorter import OrderingError
from .template import write_template

USAGE = "topowrite -i INPUTFILE -o OUTPUTFILE"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="topowrite",
        description=(
            "Assemble a LaTeX document from a project file, placing every "
            "item after the items it depends on."
        ),
    )
    parser.add_argument(
        "-i",
        "--input",
        default="",
        help="The input file to process.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="",
        help="The output file to write the result to.",
    )
    parser.add_argument(
        "-t",
        "--template",
        default="",
        help="Write an example input file to this path and exit.",
    )
    parser.add_argument(
        "-l",
        "--loglevel",
        choices=sorted(LEVELS, key=LEVELS.__getitem__),
        default="critical",
        help="The log level to use (default: critical).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Shorthand for --loglevel debug.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for topowrite."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(level=args.loglevel, verbose=args.verbose)

    if args.template:
        try:
            write_template(Path(args.template))
        except OSError as exc:
            parser.exit(1, f"Could not write template: {exc}\n")
        return

    if not args.input:
        print("You need to specify an input file.")
        print(USAGE)
        return
    if not args.output:
        print("You need to specify an output file.")
        print(USAGE)
        return

    input_path = Path(args.input)
    if not input_path.exists():
        print("The input file does not exist.")
        return

    pipeline = Pipeline(logger=logger.getChild("pipeline"))
    try:
        outcome = pipeline.run(input_path, Path(args.output))
    except (ConfigError, SchemaError, OrderingError) as exc:
        parser.exit(1, f"topowrite: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"topowrite: {exc}\nRun with --verbose for more details.\n")
    print(f"Document written to {_relativize(outcome.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
