from enum import IntEnum


class ExitCode(IntEnum):
    """
    The exit codes from BSD's sysexits.h. The process exit status of optimise is always
    one of these.

    Like a subprocess return code, an ExitCode is truthy exactly when it signals success
    (OK, 0), so `if not code:` reads as "failed".
    """

    OK = 0
    USAGE = 64  # command line usage error
    DATAERR = 65  # data format error
    NOINPUT = 66  # cannot open input
    NOUSER = 67  # addressee unknown
    NOHOST = 68  # host name unknown
    UNAVAILABLE = 69  # service unavailable
    SOFTWARE = 70  # internal software error
    OSERR = 71  # system error (e.g., can't fork)
    OSFILE = 72  # critical OS file missing
    CANTCREAT = 73  # can't create (user) output file
    IOERR = 74  # input/output error
    TEMPFAIL = 75  # temp failure; user is invited to retry
    PROTOCOL = 76  # remote error in protocol
    NOPERM = 77  # permission denied
    CONFIG = 78  # configuration error

    def __bool__(self):
        return self == 0

    @classmethod
    def from_name(cls, name: str) -> "ExitCode":
        """Look up a member by its case-insensitive name, e.g. "DataErr"."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown exit code '{name}'") from None
