import shutil

import nox

if shutil.which("uv"):
    nox.options.default_venv_backend = "uv"

nox.options.error_on_external_run = True

python_versions = ["3.11", "3.12", "3.13"]


@nox.session(python=python_versions)
def tests(session):
    session.install(".[test]")
    session.run("pytest", "-vv")
    # The exit status is the sysexits code of the failed step: 64 (EX_USAGE) outside a
    # Cargo project.
    session.run("optimise", "--list", silent=True)
    session.run("optimise", "--license", silent=True)
    session.run("optimise", "--verbosity", "bogus", success_codes=[64], silent=True)


@nox.session(python=python_versions)
def examples(session):
    session.install(".")

    with session.chdir("examples/python_project"):
        session.run("optimise", "--list")
        session.run("optimise", "--verbosity", "chatty")

    with session.chdir("examples/failing_step"):
        session.run("optimise", success_codes=[65])
        session.run("optimise", "-v", "silent", success_codes=[65])
