from collections.abc import Sequence
import contextlib

from optimise.cmd.argument_parsing import OptimiseNamespace, create_argument_parser
from optimise.cmd.completions import do_completion, print_shell_completions
from optimise.cmd.configuration import ConfigurationError, load_steps
from optimise.cmd.license import print_license
from optimise.cmd.list_steps import print_steps
from optimise.core.application import Application
from optimise.core.exit_codes import ExitCode
from optimise.logutils import logger
from optimise.output.output import output_error, output_info
from optimise.system_helpers import Spawner, change_dir, spawn


def print_version():
    import importlib.metadata

    output_info(f"optimise {importlib.metadata.version('optimise')}")


def optimise(
    argv: Sequence[str] | None = None, *, spawner: Spawner = spawn
) -> ExitCode:
    """Entry point for the optimise command line interface."""
    parser = create_argument_parser()
    do_completion(parser)
    args = OptimiseNamespace(**vars(parser.parse_args(argv)))
    logger.info("Arguments: %s", args)

    if args.completions:
        print_shell_completions()
        return ExitCode.OK

    if args.license:
        print_license()
        return ExitCode.OK

    if args.version:
        print_version()
        return ExitCode.OK

    with contextlib.ExitStack() as stack:
        try:
            stack.enter_context(change_dir(args.directory))
        except OSError as e:
            output_error(f"Error: Could not enter directory '{args.directory}': {e}")
            return ExitCode.NOINPUT

        if args.directory:
            output_info(f"Entering directory '{args.directory}'")
        return run_in_directory(args, spawner)


def run_in_directory(args: OptimiseNamespace, spawner: Spawner) -> ExitCode:
    try:
        steps = load_steps(args.file, args.verbosity)
    except OSError as e:
        # Missing and unreadable files alike
        output_error(f"Error: Could not read pipeline file: {e}")
        return ExitCode.NOINPUT
    except ConfigurationError as e:
        output_error(f"Error: {e}")
        return ExitCode.CONFIG

    if args.list_steps:
        print_steps(steps)
        return ExitCode.OK

    logger.info("Running %d steps", len(steps))
    return Application.from_steps(steps, spawner=spawner).run()
