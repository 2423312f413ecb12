"""Main CLI entry point for rnt-next."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rnt_next import __version__
from rnt_next.config import ProjectConfig, StylingApproach, build_config, validate_project_name
from rnt_next.errors import GenerationError, RntNextError, ValidationError
from rnt_next.generator import GenerationSummary, ProjectGenerator, Stage
from rnt_next.plan import GenerationPlan
from rnt_next.prompts import PROMPT_DEFAULTS, ConfirmationDeclined, ask_answers
from rnt_next.settings import PACKAGE_MANAGERS, load_settings
from rnt_next.ui import THEME, Symbols

console = Console(theme=THEME)
logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130

STAGE_MESSAGES = {
    Stage.BASE_SCAFFOLDED: "Next.js base project created",
    Stage.DEPENDENCIES_INSTALLED: "Dependencies installed",
    Stage.DIRECTORIES_ENSURED: "Directories created",
    Stage.FILES_WRITTEN: "Files written",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, markup=False)],
        force=True,
    )


def _report_stage(stage: Stage) -> None:
    message = STAGE_MESSAGES.get(stage)
    if message:
        console.print(f"[success]{Symbols.COMPLETE}[/] {message}")


@click.command()
@click.argument("name", required=False)
@click.option(
    "--css",
    "styling",
    type=click.Choice([approach.value for approach in StylingApproach]),
    default=None,
    help="CSS approach",
)
@click.option("--examples/--empty", "include_examples", default=None, help="Include example pages and components")
@click.option("--tests/--no-tests", "install_tests", default=None, help="Install Jest and Testing Library")
@click.option("--extras/--no-extras", "install_extra_dependencies", default=None, help="Install extra UI dependencies")
@click.option("--backend/--no-backend", "install_backend", default=None, help="Add Prisma, JWT auth and API routes")
@click.option(
    "--package-manager",
    type=click.Choice(list(PACKAGE_MANAGERS)),
    default=None,
    help="Package manager used to install dependencies",
)
@click.option("--yes", "-y", is_flag=True, help="Accept defaults for anything not given, no prompts")
@click.option("--dry-run", is_flag=True, help="Show what would be generated and exit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: ~/.config/rnt-next/config.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs and the commands being run")
@click.version_option(version=__version__, prog_name="rnt-next")
def main(
    name: Optional[str],
    styling: Optional[str],
    include_examples: Optional[bool],
    install_tests: Optional[bool],
    install_extra_dependencies: Optional[bool],
    install_backend: Optional[bool],
    package_manager: Optional[str],
    yes: bool,
    dry_run: bool,
    config_path: Optional[Path],
    verbose: bool,
):
    """rnt-next - Create a Next.js project with batteries included.

    NAME is the project (and directory) name. Anything not given as an
    option is asked for interactively.

    \b
    Examples:
      rnt-next                                  Ask for everything
      rnt-next my-app --css tailwind --empty    Minimal Tailwind project
      rnt-next my-app -y --backend              Defaults plus backend
      rnt-next my-app -y --dry-run              Preview generated files
    """
    _configure_logging(verbose)

    flags = {
        "styling": styling,
        "include_examples": include_examples,
        "install_tests": install_tests,
        "install_extra_dependencies": install_extra_dependencies,
        "install_backend": install_backend,
    }
    if yes and name is None:
        raise click.UsageError("NAME is required with --yes")

    try:
        if name is not None:
            name = validate_project_name(name)
        settings = load_settings(config_path)
        if package_manager:
            settings.package_manager = package_manager
        logger.debug("Settings: %s", settings.to_dict())

        console.print(Panel.fit(
            f"[title]rnt-next[/] {__version__} - Next.js project generator",
            border_style="border",
        ))

        if yes:
            answers = _with_defaults(name, flags)
        else:
            answers = ask_answers(project_name=name, answers=flags)
        config = build_config(answers)

        generator = ProjectGenerator(
            config,
            parent_dir=Path.cwd(),
            settings=settings,
            on_stage=_report_stage,
        )

        if dry_run:
            if generator.target.exists():
                console.print(f"[warning]Warning:[/] {escape(str(generator.target))} already exists")
            _print_plan(config, generator.dry_run())
            return

        console.print(f"\nCreating [title]{escape(config.project_name)}[/] in {escape(str(generator.target))}\n")
        result = generator.run()
        console.print(f"\n[success]{Symbols.COMPLETE}[/] Project created at [title]{escape(str(result.target))}[/]")
        _print_summary(result.summary)

    except ConfirmationDeclined:
        console.print("[text.dim]Cancelled, nothing was created.[/]")
    except (click.Abort, KeyboardInterrupt):
        console.print(f"\n[error]{Symbols.FAILED}[/] Interrupted")
        raise SystemExit(EXIT_INTERRUPTED)
    except ValidationError as exc:
        console.print(f"[error]Invalid {escape(exc.field)}:[/] {escape(exc.message)}")
        raise SystemExit(1)
    except GenerationError as exc:
        console.print(f"[error]{Symbols.FAILED} Failed during {exc.stage}:[/] {escape(str(exc))}")
        if exc.stage not in ("pre-flight", "generation"):
            console.print("[text.dim]The partially generated project was left in place.[/]")
        raise SystemExit(1)
    except RntNextError as exc:
        console.print(f"[error]Error:[/] {escape(str(exc))}")
        raise SystemExit(1)


def _with_defaults(name: str, flags: Dict[str, Any]) -> Dict[str, Any]:
    answers: Dict[str, Any] = {"project_name": name}
    for field, default in PROMPT_DEFAULTS.items():
        value = flags.get(field)
        answers[field] = default if value is None else value
    return answers


# =============================================================================
# Output
# =============================================================================

def _print_plan(config: ProjectConfig, plan: GenerationPlan) -> None:
    """Show the directories, packages and files a run would produce."""
    console.print(f"\n[title]Dry run[/] for {escape(config.project_name)} ({config.styling.label})\n")

    table = Table(title="Dependencies", show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Packages", style="package")
    table.add_row("production", ", ".join(plan.production) or "-")
    table.add_row("development", ", ".join(plan.development) or "-")
    console.print(table)

    table = Table(title=f"Directories ({len(plan.directories)})", show_header=False)
    table.add_column("Path", style="path")
    for directory in plan.directories:
        table.add_row(directory + "/")
    console.print(table)

    table = Table(title=f"Files ({len(plan.files)})", show_header=True, header_style="bold")
    table.add_column("Path", style="path")
    table.add_column("Lines", justify="right", style="text.dim")
    for planned in plan.files:
        table.add_row(planned.relative_path, str(planned.content.count("\n")))
    console.print(table)


def _print_summary(summary: GenerationSummary) -> None:
    lines = [f"[title]{escape(summary.project_name)}[/] ({summary.styling})"]
    for feature in summary.features:
        lines.append(f"  [accent]{Symbols.DOT}[/] {feature}")
    lines.append("")
    lines.append("[bold]Next steps:[/]")
    for step in summary.next_steps:
        lines.append(f"  [text.dim]{Symbols.ARROW_RIGHT}[/] {escape(step)}")
    console.print(Panel("\n".join(lines), title="Done", border_style="border"))


if __name__ == "__main__":
    main()
