import os
from pathlib import Path

import msgspec

from optimise.core.application import Step
from optimise.core.exit_codes import ExitCode
from optimise.core.verbosity import Verbosity
from optimise.logutils import logger

DEFAULT_PIPELINE_FILE = "Optimise.toml"

CARGO_METADATA_ERROR = "This is not a Cargo maintained Rust project"

CLIPPY_LINT_GROUPS = [
    "all",
    "cargo",
    "complexity",
    "correctness",
    "nursery",
    "perf",
    "pedantic",
    "suspicious",
    "style",
]


class ConfigurationError(Exception):
    """The pipeline file is malformed or describes steps that cannot be run."""


class StepEntry(msgspec.Struct, forbid_unknown_fields=True):
    """A [[steps]] table in the pipeline file."""

    program: str
    arguments: list[str] = msgspec.field(default_factory=list)
    error_message: str | None = None
    exit_code: str = "DataErr"
    # None follows the verbosity given on the command line
    verbosity: str | None = None


class PipelineFile(msgspec.Struct, forbid_unknown_fields=True):
    steps: list[StepEntry] = msgspec.field(default_factory=list)


def default_steps(verbosity: Verbosity) -> list[Step]:
    """
    The built-in pipeline for a Cargo project: make sure that there is a project at
    all, let Clippy fix what it can, format, check and finally lint strictly.
    """
    strict_lints: list[str] = []
    for group in CLIPPY_LINT_GROUPS:
        strict_lints += ["-D", f"clippy::{group}"]

    return [
        Step(
            "cargo",
            ("metadata",),
            error_message=CARGO_METADATA_ERROR,
            exit_code=ExitCode.USAGE,
            verbosity=verbosity.silent(),
        ),
        Step(
            "cargo",
            ("clippy", "--fix", "--allow-dirty", "--allow-staged"),
            verbosity=verbosity,
        ),
        Step("cargo", ("fmt",), verbosity=verbosity),
        Step("cargo", ("check",), verbosity=verbosity),
        Step("cargo", ("clippy", "--", *strict_lints), verbosity=verbosity),
    ]


def read_pipeline_file(path: str | os.PathLike) -> PipelineFile:
    """
    Decode a TOML pipeline file.

    Raises
    ------
    OSError
        If the file cannot be read.
    ConfigurationError
        If the file is not UTF-8 encoded TOML or does not have the expected structure.
    """
    logger.info("Reading pipeline file '%s'", path)
    with open(path, "rb") as f:
        data = f.read()
    try:
        return msgspec.toml.decode(data, type=PipelineFile)
    except (msgspec.ValidationError, msgspec.DecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Invalid pipeline file '{path}': {e}") from e


def steps_from_pipeline(pipeline: PipelineFile, verbosity: Verbosity) -> list[Step]:
    if not pipeline.steps:
        raise ConfigurationError("The pipeline file does not define any steps.")

    steps = []
    for i, entry in enumerate(pipeline.steps, start=1):
        try:
            exit_code = ExitCode.from_name(entry.exit_code)
            step_verbosity = (
                Verbosity.parse(entry.verbosity)
                if entry.verbosity is not None
                else verbosity
            )
        except ValueError as e:
            raise ConfigurationError(f"Step {i} ('{entry.program}'): {e}") from e

        steps.append(
            Step(
                entry.program,
                tuple(entry.arguments),
                error_message=entry.error_message,
                exit_code=exit_code,
                verbosity=step_verbosity,
            )
        )
    return steps


def find_pipeline_file(explicit: str | None) -> Path | None:
    """The file given on the command line, else the default file if it exists."""
    if explicit is not None:
        return Path(explicit)
    default = Path(DEFAULT_PIPELINE_FILE)
    return default if default.is_file() else None


def load_steps(explicit_file: str | None, verbosity: Verbosity) -> list[Step]:
    pipeline_file = find_pipeline_file(explicit_file)
    if pipeline_file is None:
        logger.info("No pipeline file, using the built-in Cargo pipeline")
        return default_steps(verbosity)
    return steps_from_pipeline(read_pipeline_file(pipeline_file), verbosity)
