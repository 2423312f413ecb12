"""Interactive questions that produce the raw answers for build_config()."""

from typing import Any, Dict, Mapping, Optional

import click
from rich.console import Console
from rich.table import Table

from rnt_next.config import StylingApproach, validate_project_name
from rnt_next.errors import ValidationError
from rnt_next.ui import THEME

console = Console(theme=THEME)

PROMPT_DEFAULTS: Dict[str, Any] = {
    "styling": StylingApproach.STYLED_COMPONENTS.value,
    "include_examples": True,
    "install_tests": True,
    "install_extra_dependencies": True,
    "install_backend": False,
}

QUESTIONS = {
    "install_tests": "Install test tooling (Jest + Testing Library)?",
    "install_extra_dependencies": "Install extra dependencies (framer-motion, formik, react-hot-toast, ...)?",
    "install_backend": "Add a backend (Prisma, JWT auth, API routes)?",
}

LABELS = {
    "project_name": "Project name",
    "styling": "CSS",
    "include_examples": "Project type",
    "install_tests": "Tests",
    "install_extra_dependencies": "Extra dependencies",
    "install_backend": "Backend",
}


class ConfirmationDeclined(click.Abort):
    """The user reviewed the answers and chose not to continue."""
    pass


def _project_name(value: str) -> str:
    try:
        return validate_project_name(value)
    except ValidationError as exc:
        raise click.BadParameter(exc.message)


def _describe(field: str, value: Any) -> str:
    if field == "styling":
        return StylingApproach.parse(value).label
    if field == "include_examples":
        return "With examples" if value else "Empty (minimal structure)"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def answers_table(answers: Mapping[str, Any]) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Option", style="text.dim")
    table.add_column("Value", style="title")
    for field, label in LABELS.items():
        if field in answers:
            table.add_row(label, _describe(field, answers[field]))
    return table


def ask_answers(
    project_name: Optional[str] = None,
    answers: Optional[Mapping[str, Any]] = None,
    defaults: Mapping[str, Any] = PROMPT_DEFAULTS,
) -> Dict[str, Any]:
    """Ask for every answer not already given, then confirm.

    Args:
        project_name: Name given on the command line (skips the question)
        answers: Answers already known, e.g. from CLI flags; None values
            are asked for
        defaults: Default offered for each question

    Returns:
        Raw answers for build_config()

    Raises:
        ConfirmationDeclined: If the user rejects the final review
        click.Abort: If the user interrupts a prompt
    """
    collected = {k: v for k, v in (answers or {}).items() if v is not None}

    if project_name is None:
        project_name = click.prompt("Project name", value_proc=_project_name)
    collected["project_name"] = project_name

    if "styling" not in collected:
        collected["styling"] = click.prompt(
            "CSS approach",
            type=click.Choice([approach.value for approach in StylingApproach]),
            default=defaults["styling"],
        )

    if "include_examples" not in collected:
        kind = click.prompt(
            "Project type",
            type=click.Choice(["examples", "empty"]),
            default="examples" if defaults["include_examples"] else "empty",
        )
        collected["include_examples"] = kind == "examples"

    for field, question in QUESTIONS.items():
        if field not in collected:
            collected[field] = click.confirm(question, default=defaults[field])

    console.print()
    console.print("[title]Review[/]")
    console.print(answers_table(collected))
    console.print()
    if not click.confirm("Create the project with these settings?", default=True):
        raise ConfirmationDeclined()
    return collected
