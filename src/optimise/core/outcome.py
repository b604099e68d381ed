from dataclasses import dataclass
from typing import Literal, TypeAlias

Stream = Literal["stdout", "stderr"]


@dataclass(frozen=True)
class LaunchFailed:
    """The operating system could not start the program."""

    error: OSError


@dataclass(frozen=True)
class Signalled:
    """The process did not exit by itself but was terminated by a signal."""

    signal: int


@dataclass(frozen=True)
class UndecodableOutput:
    """The process wrote bytes to one of its streams that are not valid UTF-8."""

    stream: Stream


@dataclass(frozen=True)
class Exited:
    """The process exited with a status code. Zero or not, the run itself worked."""

    returncode: int


Outcome: TypeAlias = LaunchFailed | Signalled | UndecodableOutput | Exited
"""The result of spawning a process and waiting for it."""
