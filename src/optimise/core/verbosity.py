from enum import IntEnum


class VerbosityParseError(ValueError):
    """The verbosity level cannot be deduced from the given text."""

    def __init__(self, text: str):
        super().__init__(f"the verbosity level cannot be deduced from '{text}'")
        self.text = text


class Verbosity(IntEnum):
    """
    How much a process reports while it runs.

    - SILENT: nothing but important error messages
    - MONOSYLLABIC: important error messages and the command line
    - CHATTY: the command line and the entire output of the process

    The levels are ordered so that a level can be compared against a fixed one, e.g.
    `verbosity > Verbosity.SILENT`. Enum members are immutable, so the transitions
    return the new level instead of changing it in place. Stepping beyond either end
    is not an error; the level just stays where it is.
    """

    SILENT = 0
    MONOSYLLABIC = 1
    CHATTY = 2

    def upgrade(self) -> "Verbosity":
        return Verbosity(min(self + 1, Verbosity.CHATTY))

    def downgrade(self) -> "Verbosity":
        return Verbosity(max(self - 1, Verbosity.SILENT))

    def silent(self) -> "Verbosity":
        return Verbosity.SILENT

    def monosyllabic(self) -> "Verbosity":
        return Verbosity.MONOSYLLABIC

    def chatty(self) -> "Verbosity":
        return Verbosity.CHATTY

    @property
    def label(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return f"verbosity level {self.value} ('{self.label}')"

    @classmethod
    def parse(cls, text: str) -> "Verbosity":
        """
        Accepts either the integer value or the case-insensitive name of a level.

        Raises
        ------
        VerbosityParseError
            If the text names no level.
        """
        normalised = text.strip().lower()
        for level in cls:
            if normalised in (str(level.value), level.label):
                return level
        raise VerbosityParseError(text)
