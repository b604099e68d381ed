from collections.abc import Sequence
import sys

import pytest

from optimise.system_helpers import SpawnResult

SUCCESS = SpawnResult(0, b"", b"")


class RecordingSpawner:
    """
    Stands in for optimise.system_helpers.spawn. Records every argument vector it is
    given and answers with the result registered for the joined command line, or with
    a successful, silent result. A registered exception is raised instead.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.results: dict[str, SpawnResult | OSError] = {}

    def __call__(self, argv: Sequence[str]) -> SpawnResult:
        self.calls.append(list(argv))
        result = self.results.get(" ".join(argv), SUCCESS)
        if isinstance(result, OSError):
            raise result
        return result

    @property
    def commands(self) -> list[str]:
        return [" ".join(argv) for argv in self.calls]


@pytest.fixture
def spawner():
    return RecordingSpawner()


@pytest.fixture
def python():
    """The interpreter running the tests, for spawning well-behaved child processes."""
    return sys.executable
