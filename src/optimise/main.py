"""
Runs a fixed sequence of quality gates and stops at the first one that fails.
"""

# PYTHON_ARGCOMPLETE_OK

import sys

from optimise.cmd.dispatcher import optimise
from optimise.core.exit_codes import ExitCode
from optimise.logutils import logger, setup_logging
from optimise.output.output import output_warning


def main() -> int:
    setup_logging()
    logger.info("Starting")
    try:
        return int(optimise())
    except KeyboardInterrupt:
        output_warning("Interrupted by user. Aborting.")
        return int(ExitCode.SOFTWARE)


if __name__ == "__main__":
    sys.exit(main())
