from optimise.cmd.list_steps import describe_step, print_steps
from optimise.core.application import Step
from optimise.core.exit_codes import ExitCode
from optimise.core.verbosity import Verbosity


def test_describe_step():
    step = Step("cargo", ("metadata",), "Not a project", ExitCode.USAGE, Verbosity.SILENT)
    lines = describe_step(1, step)
    assert "1. cargo metadata" in lines[0]
    assert lines[1] == "    fails with USAGE, silent: Not a project"


def test_describe_step_without_message():
    lines = describe_step(3, Step("cargo", ("fmt",)))
    assert lines[1] == "    fails with DATAERR, monosyllabic"


def test_print_steps_in_order(capsys):
    print_steps([Step("first"), Step("second", ("--flag",))])
    out = capsys.readouterr().out
    assert "Configured steps:" in out
    assert out.index("1. first") < out.index("2. second --flag")


def test_describe_step_keeps_long_message_on_one_line():
    message = "This message is far longer than any reasonable terminal is wide " * 3
    lines = describe_step(1, Step("make", error_message=message))
    assert len(lines) == 2
    assert lines[1].endswith(message)
