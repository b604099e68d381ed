from .core.application import Application, Step
from .core.exit_codes import ExitCode
from .core.outcome import Exited, LaunchFailed, Outcome, Signalled, UndecodableOutput
from .core.process import Process
from .core.verbosity import Verbosity, VerbosityParseError

__all__ = [
    "Application",
    "ExitCode",
    "Exited",
    "LaunchFailed",
    "Outcome",
    "Process",
    "Signalled",
    "Step",
    "UndecodableOutput",
    "Verbosity",
    "VerbosityParseError",
]
