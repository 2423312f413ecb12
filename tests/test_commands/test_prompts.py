"""Tests for rnt_next.prompts module."""

from contextlib import ExitStack

import click
import pytest

from rnt_next.config import build_config
from rnt_next.prompts import PROMPT_DEFAULTS, ConfirmationDeclined, answers_table, ask_answers


@pytest.fixture
def answer(cli_runner):
    """Feed stdin to click prompts for the rest of the test."""
    with ExitStack() as stack:
        yield lambda text: stack.enter_context(cli_runner.isolation(input=text))


class TestAskAnswers:
    """Tests for ask_answers()."""

    def test_defaults(self, answer):
        answer("demo-app\n\n\n\n\n\n\n")
        answers = ask_answers()
        assert answers == {"project_name": "demo-app", **PROMPT_DEFAULTS}
        config = build_config(answers)
        assert config.include_examples and config.install_tests
        assert not config.install_backend

    def test_given_answers_are_not_asked(self, answer):
        answer("y\n")
        answers = ask_answers(
            project_name="demo-app",
            answers={
                "styling": "tailwind",
                "include_examples": False,
                "install_tests": False,
                "install_extra_dependencies": True,
                "install_backend": True,
            },
        )
        assert answers["install_backend"] is True
        assert answers["styling"] == "tailwind"

    def test_none_answers_are_asked(self, answer):
        answer("styled-components\nexamples\ny\ny\ny\ny\n")
        answers = ask_answers(project_name="demo-app", answers={"styling": None})
        assert answers["styling"] == "styled-components"
        assert answers["install_backend"] is True

    def test_declined(self, answer):
        answer("n\n")
        with pytest.raises(ConfirmationDeclined):
            ask_answers(project_name="demo-app", answers=dict(PROMPT_DEFAULTS))

    def test_declined_is_an_abort(self):
        assert issubclass(ConfirmationDeclined, click.Abort)


class TestAnswersTable:
    """Tests for answers_table()."""

    def test_rows(self):
        table = answers_table({"project_name": "demo-app", **PROMPT_DEFAULTS})
        assert table.row_count == 6
