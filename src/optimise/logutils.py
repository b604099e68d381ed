import datetime
import logging
import os

from optimise.output.output import TerminalStyle as TS

DEBUG_ENVIRONMENT_VARIABLE = "DEBUG_OPTIMISE"
LOGGER_NAME = "optimise"


def __getattr__(name):
    if name == "logger":
        return logging.getLogger(LOGGER_NAME)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


class CustomLogFormatter(logging.Formatter):
    """
    One line per record: time, logger, level, source location and message, separated
    by bars. Colours are left out for log files.
    """

    COLORS = {
        "DEBUG": TS.Fg.BLUE,
        "INFO": TS.Fg.GREEN,
        "WARNING": TS.Fg.YELLOW,
        "ERROR": TS.Fg.RED,
        "CRITICAL": TS.Fg.RED + TS.BOLD,
    }

    location_width = 32

    def __init__(self, no_colors: bool = False):
        super().__init__()
        self.no_colors = no_colors

    def colored(self, s: str, color: str) -> str:
        if self.no_colors:
            return s
        return f"{color}{s}{TS.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        location = f"{record.filename}:{record.lineno}"
        fields = [
            self.colored(self.formatTime(record), TS.Fg.CYAN),
            self.colored(record.name, TS.Fg.MAGENTA),
            self.colored(
                f"{record.levelname:<8}", self.COLORS.get(record.levelname, "")
            ),
            self.colored(f"{location:<{self.location_width}}", TS.Fg.CYAN),
            record.getMessage(),
        ]
        return " | ".join(fields)


def debug_log_file_name() -> str:
    timestamp = datetime.datetime.now().strftime("%Y%m%d-%H%M%S")
    return f"optimise_debug_{timestamp}.log"


def add_handler(logger: logging.Logger, handler: logging.Handler, no_colors: bool):
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CustomLogFormatter(no_colors=no_colors))
    logger.addHandler(handler)


def setup_logging():
    """
    Configure the "optimise" logger from the DEBUG_OPTIMISE environment variable.

    Logging is disabled when the variable is empty or unset. Any other value logs to
    stderr; if the value contains "file" the log is also written to
    optimise_debug_<timestamp>.log in the working directory, and "silent" writes to
    the file only.
    """
    debug = os.environ.get(DEBUG_ENVIRONMENT_VARIABLE, "").lower()
    logger = logging.getLogger(LOGGER_NAME)

    if not debug:
        logger.disabled = True
        return

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    if "silent" not in debug:
        add_handler(logger, logging.StreamHandler(), no_colors=False)

    if "file" in debug or "silent" in debug:
        add_handler(
            logger, logging.FileHandler(debug_log_file_name()), no_colors=True
        )

    logger.debug("Debug logging enabled")
