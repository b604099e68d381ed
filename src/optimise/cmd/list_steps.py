from optimise.core.application import Step
from optimise.output.output import TerminalStyle as TS, output_plain

HEADER = f"{TS.BOLD}Configured steps:{TS.RESET}"


def describe_step(index: int, step: Step) -> list[str]:
    command = " ".join([step.program, *step.arguments])
    details = f"fails with {step.exit_code.name}, {step.verbosity.label}"
    if step.error_message is not None:
        details += f": {step.error_message}"

    return [f"{TS.BOLD}{index}. {command}{TS.RESET}", f"    {details}"]


def print_steps(steps: list[Step]):
    """Prints the steps in the order in which they will run."""
    output = [HEADER, ""]
    for index, step in enumerate(steps, start=1):
        output += describe_step(index, step)
        output.append("")
    output_plain("\n".join(output))
