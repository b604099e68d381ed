import sys

isatty = sys.stdout.isatty()


class TerminalStyle:
    """Terminal Text Styling"""

    RESET = "\033[0m" if isatty else ""
    BOLD = "\033[1m" if isatty else ""

    class Fg:
        """Foreground Text Color"""

        RED = "\033[31m" if isatty else ""
        GREEN = "\033[32m" if isatty else ""
        YELLOW = "\033[33m" if isatty else ""
        BLUE = "\033[34m" if isatty else ""
        MAGENTA = "\033[35m" if isatty else ""
        CYAN = "\033[36m" if isatty else ""
        WHITE = "\033[37m" if isatty else ""
        RESET = "\033[39m" if isatty else ""

        BRIGHT_RED = "\033[91m" if isatty else ""
        BRIGHT_YELLOW = "\033[93m" if isatty else ""
        BRIGHT_CYAN = "\033[96m" if isatty else ""


def output_info(s: str):
    print(f"{TerminalStyle.Fg.BRIGHT_CYAN}{s}{TerminalStyle.Fg.RESET}")


# Warnings and errors go to stderr.


def output_warning(s: str):
    print(
        f"{TerminalStyle.Fg.BRIGHT_YELLOW}{s}{TerminalStyle.Fg.RESET}",
        file=sys.stderr,
    )


def output_error(s: str):
    print(
        f"{TerminalStyle.Fg.BRIGHT_RED}{s}{TerminalStyle.Fg.RESET}",
        file=sys.stderr,
    )


def output_plain(s: str, *, end: str = "\n"):
    print(s, end=end)


def output_plain_error(s: str, *, end: str = "\n"):
    print(s, end=end, file=sys.stderr)
