"""Shared test fixtures for rnt-next.

Provides:
- make_config: Factory for ProjectConfig with sensible defaults
- settings: GeneratorSettings with the progress bar disabled
- fake_shell: ShellRunner stand-in that records commands
- cli_runner: Click CliRunner
- mock_node_tools: pytest-subprocess fixture pre-configured for npx/npm
"""

import itertools
from pathlib import Path

import pytest
from click.testing import CliRunner

from rnt_next.config import ProjectConfig, StylingApproach
from rnt_next.settings import GeneratorSettings
from rnt_next.shell import ShellCommandError


def all_configs(project_name="demo-app"):
    """Every combination of styling and the four boolean choices."""
    for styling, examples, tests, extras, backend in itertools.product(
        StylingApproach, (False, True), (False, True), (False, True), (False, True)
    ):
        yield ProjectConfig(
            project_name=project_name,
            styling=styling,
            include_examples=examples,
            install_tests=tests,
            install_extra_dependencies=extras,
            install_backend=backend,
        )


class FakeShell:
    """Records commands instead of running them.

    The scaffold command writes a package.json like create-next-app
    would. Commands starting with `fail_on` raise ShellCommandError.
    """

    def __init__(self, fail_on=None, returncode=1, create_package_json=True):
        self.commands = []
        self.fail_on = fail_on
        self.returncode = returncode
        self.create_package_json = create_package_json

    def run(self, command, cwd):
        command = list(command)
        self.commands.append((command, Path(cwd)))
        if self.fail_on and command[:len(self.fail_on)] == list(self.fail_on):
            raise ShellCommandError("boom", returncode=self.returncode)
        if self.create_package_json and "create-next-app" in " ".join(command):
            (Path(cwd) / "package.json").write_text("{}\n")


@pytest.fixture
def make_config():
    """Build a ProjectConfig; keyword arguments override the defaults."""
    def factory(**overrides):
        values = {
            "project_name": "demo-app",
            "styling": StylingApproach.TAILWIND,
        }
        values.update(overrides)
        return ProjectConfig(**values)
    return factory


@pytest.fixture
def settings():
    """Default settings without the tqdm bar."""
    return GeneratorSettings(show_progress=False)


@pytest.fixture
def fake_shell():
    return FakeShell()


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def mock_node_tools(fp):
    """Mock npx/npm using pytest-subprocess.

    create-next-app leaves a package.json in ./demo-app, so run the CLI
    for a project named demo-app from the test's working directory. Use
    `fp` directly for custom subprocess mocking in individual tests.
    """
    def scaffold(process):
        (Path.cwd() / "demo-app" / "package.json").write_text("{}\n")

    fp.register(["npx", "create-next-app@latest", fp.any()], callback=scaffold)
    fp.register(["npm", "install", fp.any()])
    fp.register(["npx", "prisma", "init"])
    fp.keep_last_process(True)
    return fp
