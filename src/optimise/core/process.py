from collections.abc import Sequence

from optimise.core.exit_codes import ExitCode
from optimise.core.outcome import (
    Exited,
    LaunchFailed,
    Outcome,
    Signalled,
    UndecodableOutput,
)
from optimise.core.verbosity import Verbosity
from optimise.logutils import logger
from optimise.output.output import output_error, output_plain, output_plain_error
from optimise.system_helpers import Spawner, spawn, terminating_signal


class Process:
    """
    A process to be invoked, together with what it left behind once it has run.

    Attributes
    ----------
    application : str
        The program to call.
    arguments : list[str]
        The command line arguments to pass, in order.
    verbosity : Verbosity
        How much to write to the console:

        - SILENT: important error messages only
        - MONOSYLLABIC: important error messages and the command line
        - CHATTY: the command line and the entire output of the process
    exit : int
        Exit code of the last run. Zero until the process has run.
    stdout : str
        Everything the last run wrote to stdout.
    stderr : str
        Everything the last run wrote to stderr.
    """

    application: str
    arguments: list[str]
    verbosity: Verbosity
    exit: int
    stdout: str
    stderr: str

    def __init__(
        self,
        application: str,
        arguments: Sequence[str] = (),
        verbosity: Verbosity = Verbosity.MONOSYLLABIC,
        *,
        spawner: Spawner = spawn,
    ):
        self.application = application
        self.arguments = list(arguments)
        self.verbosity = verbosity
        self.spawner = spawner
        self.reset()

    def __str__(self) -> str:
        return " ".join(self.argv)

    def __repr__(self) -> str:
        return f"Process({self.application!r}, {self.arguments!r}, {self.verbosity.name})"

    @property
    def argv(self) -> list[str]:
        return [self.application, *self.arguments]

    def reset(self):
        """Forget the results of a previous run."""
        self.exit = 0
        self.stdout = ""
        self.stderr = ""

    def run(self) -> Outcome:
        """
        Spawn the process, wait for it to terminate and keep its exit code and output.

        With a verbosity above SILENT the command line is written to stdout before the
        process is started. With CHATTY, whatever the process wrote is echoed to the
        respective stream afterwards, unless it is empty.

        Returns
        -------
        Outcome
            LaunchFailed if the process could not be spawned, Signalled if it was
            terminated by a signal, UndecodableOutput if stderr or stdout is not UTF-8,
            and Exited if the process terminated by itself, whatever its exit code.
        """
        self.reset()

        if self.verbosity > Verbosity.SILENT:
            output_plain(str(self))

        logger.debug("Spawning %s", self.argv)
        try:
            result = self.spawner(self.argv)
        except OSError as e:
            logger.info("Could not launch %s: %s", self.application, e)
            return LaunchFailed(e)

        if (signal := terminating_signal(result.returncode)) is not None:
            logger.info("%s was killed by signal %d", self.application, signal)
            return Signalled(signal)

        self.exit = result.returncode

        try:
            self.stderr = result.stderr.decode("utf-8")
        except UnicodeDecodeError:
            return UndecodableOutput("stderr")
        try:
            self.stdout = result.stdout.decode("utf-8")
        except UnicodeDecodeError:
            return UndecodableOutput("stdout")

        if self.verbosity == Verbosity.CHATTY:
            if self.stdout:
                output_plain(self.stdout, end="")
            if self.stderr:
                output_plain_error(self.stderr, end="")

        logger.debug("%s exited with %d", self.application, self.exit)
        return Exited(self.exit)

    def success(self) -> bool:
        """By convention, exit code zero is success and anything else is a failure."""
        return self.exit == 0

    def failure(self, error: str | None) -> bool:
        """
        Whether the last run failed. If so, error is written to stderr, or the process'
        own stderr output if no error message is given.
        """
        failed = not self.success()

        if failed:
            if error is not None:
                output_error(error)
            else:
                output_plain_error(self.stderr, end="")

        return failed

    def handle(self, error: str | None, ret: ExitCode) -> ExitCode | None:
        """
        Run the process and decide whether the caller may carry on.

        Returns None if the process exited with code zero. If it could not be run
        properly, a diagnostic is written to stderr and the matching ExitCode is
        returned. If it ran but failed, error (or the process' stderr) is written and
        ret is returned.
        """
        match self.run():
            case LaunchFailed():
                output_error(f"Failed to launch '{self}'!")
                return ExitCode.UNAVAILABLE
            case Signalled():
                output_error(f"'{self}' was terminated unexpectedly by a signal!")
                return ExitCode.OSERR
            case UndecodableOutput():
                output_error(f"Failed to convert output of '{self}'!")
                return ExitCode.DATAERR
            case Exited():
                return ret if self.failure(error) else None
            case outcome:
                output_error(
                    f"Unknown exit status {outcome!r} originating from '{self}'!"
                )
                return ExitCode.CONFIG
