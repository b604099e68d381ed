import argparse
from pathlib import Path
import shutil
import sys
import textwrap

from argcomplete.completers import FilesCompleter
from argcomplete.finders import CompletionFinder

from optimise.output.output import output_plain

# Options that should not be followed by anything else.
singular_options = {
    "--completions",
    "--help",
    "--license",
    "--list",
    "--version",
    "-V",
    "-h",
    "-l",
}


class PipelineFileCompleter(FilesCompleter):
    """Completes TOML files and directories that may contain them."""

    def __init__(self):
        super().__init__(allowednames=("toml",), directories=True)


class OptimiseCompletionFinder(CompletionFinder):
    """
    Override _get_completions to stop completing once an option that ends the command
    line has been given.
    """

    def _get_completions(
        self, comp_words, cword_prefix, cword_prequote, last_wordbreak_pos
    ) -> list[str]:
        if set(comp_words) & singular_options:
            return []

        return super()._get_completions(
            comp_words, cword_prefix, cword_prequote, last_wordbreak_pos
        )


def do_completion(parser: argparse.ArgumentParser):
    completer = OptimiseCompletionFinder()
    completer(parser)


def print_shell_completions():
    """
    Write a completion script next to the optimise executable and print how to load it
    from the shell's startup script.
    """
    import argcomplete.shell_integration

    optimise_bin = Path(sys.argv[0])
    optimise_completions = optimise_bin.resolve().parent / "_optimise_completions.sh"
    if not optimise_completions.exists():
        with open(optimise_completions, "w") as f:
            f.write(argcomplete.shell_integration.shellcode([str(optimise_bin.name)]))

    terminal_cols, _ = shutil.get_terminal_size()
    indent_string = "# "
    width = min(terminal_cols, 80) - len(indent_string)
    description = f"""\
        A shell completions script has been generated in {optimise_completions}. It
        will pick up the optimise that is in PATH. Add the following line to your
        shell's startup script to load completions:
    """
    output_plain(
        textwrap.indent(
            textwrap.fill(
                textwrap.dedent(description),
                width=width,
                break_long_words=False,
                break_on_hyphens=False,
            ),
            indent_string,
        )
    )
    output_plain(f"\nsource {optimise_completions}")
