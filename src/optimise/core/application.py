from collections.abc import Sequence
from dataclasses import dataclass

from optimise.core.exit_codes import ExitCode
from optimise.core.process import Process
from optimise.core.verbosity import Verbosity
from optimise.logutils import logger
from optimise.output.output import output_error
from optimise.system_helpers import Spawner, spawn


@dataclass(frozen=True)
class Step:
    """One process to run as part of an Application."""

    program: str
    arguments: tuple[str, ...] = ()
    error_message: str | None = None  # shown instead of the process' stderr on failure
    exit_code: ExitCode = ExitCode.DATAERR  # returned if the process fails
    verbosity: Verbosity = Verbosity.MONOSYLLABIC


class Application:
    """
    Runs a fixed list of processes one after the other and stops at the first failure.

    The processes are described by parallel lists; index i of each list belongs to the
    i:th process.
    """

    applications: list[str]
    arguments: list[list[str]]
    error_messages: list[str | None]
    exit_codes: list[ExitCode]
    verbosities: list[Verbosity]

    def __init__(
        self,
        applications: Sequence[str],
        arguments: Sequence[Sequence[str]],
        error_messages: Sequence[str | None],
        exit_codes: Sequence[ExitCode],
        verbosities: Sequence[Verbosity],
        *,
        spawner: Spawner = spawn,
    ):
        self.applications = list(applications)
        self.arguments = [list(a) for a in arguments]
        self.error_messages = list(error_messages)
        self.exit_codes = list(exit_codes)
        self.verbosities = list(verbosities)
        self.spawner = spawner

    @classmethod
    def from_steps(
        cls, steps: Sequence[Step], *, spawner: Spawner = spawn
    ) -> "Application":
        return cls(
            [s.program for s in steps],
            [s.arguments for s in steps],
            [s.error_message for s in steps],
            [s.exit_code for s in steps],
            [s.verbosity for s in steps],
            spawner=spawner,
        )

    def is_uniform(self) -> bool:
        """Whether there is exactly one of each detail for every process."""
        count = len(self.applications)
        return all(
            len(details) == count
            for details in (
                self.arguments,
                self.error_messages,
                self.exit_codes,
                self.verbosities,
            )
        )

    def run(self) -> ExitCode:
        """
        Run the configured processes in order. Each process has to finish before the
        next one is spawned.

        If the process details are not of equal count, nothing is run and
        ExitCode.SOFTWARE is returned. If a process fails, its error message is written
        to stderr and the remaining processes are skipped; the return value is then the
        exit code configured for that process, or the code describing why it could not
        be run at all. ExitCode.OK is returned if all processes succeed.
        """
        if not self.is_uniform():
            output_error(
                "Internal error:  non-uniform count of process specification details!"
            )
            return ExitCode.SOFTWARE

        for i, application in enumerate(self.applications):
            process = Process(
                application,
                self.arguments[i],
                self.verbosities[i],
                spawner=self.spawner,
            )
            code = process.handle(self.error_messages[i], self.exit_codes[i])
            if code is not None:
                logger.info("Stopping at '%s' with %s", process, code.name)
                return code

        return ExitCode.OK
