import argparse
from dataclasses import dataclass
import shutil
import sys
import textwrap
from typing import Any, NoReturn

from argcomplete.completers import DirectoriesCompleter

from optimise.cmd.completions import PipelineFileCompleter
from optimise.cmd.configuration import DEFAULT_PIPELINE_FILE
from optimise.core.exit_codes import ExitCode
from optimise.core.verbosity import Verbosity, VerbosityParseError
from optimise.logutils import logger


@dataclass
class OptimiseNamespace:
    """Wrapper for the arguments parsed by argparse. Improves ergonomics when working
    with the arguments."""

    license: bool
    verbosity: Verbosity
    directory: str | None
    file: str | None
    list_steps: bool
    version: bool
    completions: bool


class OptimiseHelpFormatter(argparse.RawDescriptionHelpFormatter):
    formatting_width = 80

    def __init__(self, prog):
        terminal_cols, terminal_rows = shutil.get_terminal_size()
        self.formatting_width = min(terminal_cols, self.formatting_width)

        indent_increment = 2
        max_help_position = 24

        super().__init__(
            prog, indent_increment, max_help_position, self.formatting_width
        )

    def _fill_text(self, text, width, indent):
        return fill_help_text(text, width, indent)


def fill_help_text(text: str, width: int, indent: str) -> str:
    """Wrap each line on its own so that the description keeps its line breaks."""
    return "\n".join(
        textwrap.fill(line, width=width, initial_indent=indent, subsequent_indent=indent)
        if line.strip()
        else ""
        for line in text.splitlines()
    )


class OptimiseArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with the sysexits code for them instead of 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE, f"{self.prog}: error: {message}\n")


def verbosity_level(text: str) -> Verbosity:
    try:
        return Verbosity.parse(text)
    except VerbosityParseError as e:
        raise argparse.ArgumentTypeError(
            f"{e}; use 0-2 or one of "
            + ", ".join(level.label for level in Verbosity)
        ) from e


def create_argument_parser() -> OptimiseArgumentParser:
    logger.info("Creating argument parser")

    parser = OptimiseArgumentParser(
        prog="optimise",
        formatter_class=OptimiseHelpFormatter,
        description=f"""
Run a fixed sequence of quality gates one after the other and stop at the first one that fails.

Without a pipeline file, the Cargo project in the current directory is checked, fixed, formatted and linted. A pipeline file named {DEFAULT_PIPELINE_FILE} in the current directory replaces the built-in steps.

The exit status follows sysexits.h.
""",
    )

    parser._optionals.title = "OPTIONS"

    parser.add_argument(
        "-l",
        "--license",
        action="store_true",
        help="Show the license information and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        type=verbosity_level,
        default=Verbosity.MONOSYLLABIC,
        metavar="LEVEL",
        help="How much to report: 0/silent, 1/monosyllabic (default) or 2/chatty.",
    )

    # Use Any to get around type checking for argcomplete:

    arg: Any = parser.add_argument(
        "-C",
        "--directory",
        type=str,
        default=None,
        help="Change to the specified directory before doing anything else.",
    )
    arg.completer = DirectoriesCompleter()

    arg = parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=None,
        help=f"Read the steps from this pipeline file instead of {DEFAULT_PIPELINE_FILE}.",
    )
    arg.completer = PipelineFileCompleter()

    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_steps",
        help="List the configured steps and exit.",
    )

    # Meta arguments:
    meta_group = parser.add_argument_group("Meta arguments")
    meta_group.add_argument(
        "-V", "--version", action="store_true", help="Show version string and exit."
    )
    meta_group.add_argument(
        "--completions",
        action="store_true",
        help="Output instructions for how to set up shell completions via the shell's startup script.",
    )

    return parser
