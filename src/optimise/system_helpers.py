"""
System-near helper functions. Only import things from the standard library here; this
way these helpers can be used also for utility scripts.
"""

from collections.abc import Callable, Sequence
import contextlib
from dataclasses import dataclass
import os
import subprocess
from typing import TypeAlias


@dataclass(frozen=True)
class SpawnResult:
    """The raw result of a finished child process."""

    returncode: int
    """Return code as reported by subprocess; negative on POSIX if killed by a signal."""

    stdout: bytes
    stderr: bytes


Spawner: TypeAlias = Callable[[Sequence[str]], SpawnResult]
"""Runs an argument vector to completion. Raises OSError if it cannot be launched."""


def spawn(argv: Sequence[str]) -> SpawnResult:
    """
    Run argv as a child process without a shell, wait for it to terminate and return
    everything it wrote to stdout and stderr.

    Parameters
    ----------
    argv : Sequence[str]
        The program followed by its arguments. Passed as-is; nothing is split or
        expanded.

    Returns
    -------
    SpawnResult
        The return code and the undecoded output streams.

    Raises
    ------
    OSError
        If the program could not be started, e.g. FileNotFoundError or
        PermissionError.
    """
    process = subprocess.run(list(argv), capture_output=True)
    return SpawnResult(process.returncode, process.stdout, process.stderr)


def terminating_signal(returncode: int) -> int | None:
    """
    The number of the signal that killed a process, or None if it exited by itself.
    Only POSIX reports signals through the return code; elsewhere a negative return
    code is just an unusual exit status.
    """
    if os.name == "posix" and returncode < 0:
        return -returncode
    return None


@contextlib.contextmanager
def change_dir(dir: str | os.PathLike | None):
    old_dir = os.getcwd()
    try:
        if dir is not None:
            os.chdir(dir)
        yield
    finally:
        os.chdir(old_dir)
