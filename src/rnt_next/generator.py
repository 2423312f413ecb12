"""Project generation pipeline.

A run walks a fixed sequence of stages:

    START -> BASE_SCAFFOLDED -> DEPENDENCIES_INSTALLED
          -> DIRECTORIES_ENSURED -> FILES_WRITTEN -> DONE

Any failure, an interrupt included, moves the generator to FAILED.
Stage failures raise the matching GenerationError. Nothing is retried
and nothing already on disk is rolled back; the target directory is
left as the failed stage found it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from filelock import FileLock, Timeout
from tqdm import tqdm

from rnt_next.config import ProjectConfig
from rnt_next.errors import (
    GenerationError,
    GenerationLockedError,
    InstallFailure,
    ScaffoldFailure,
    TargetExistsError,
    WriteFailure,
)
from rnt_next.fs import FileSystemWriter
from rnt_next.plan import GenerationPlan, build_plan
from rnt_next.settings import GeneratorSettings
from rnt_next.shell import ShellError, ShellRunner, format_command
from rnt_next.templates import TemplateCatalog

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    START = "start"
    BASE_SCAFFOLDED = "base_scaffolded"
    DEPENDENCIES_INSTALLED = "dependencies_installed"
    DIRECTORIES_ENSURED = "directories_ensured"
    FILES_WRITTEN = "files_written"
    DONE = "done"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (Stage.DONE, Stage.FAILED)


# Each stage may only be entered from the one before it
_NEXT_STAGE = {
    Stage.START: Stage.BASE_SCAFFOLDED,
    Stage.BASE_SCAFFOLDED: Stage.DEPENDENCIES_INSTALLED,
    Stage.DEPENDENCIES_INSTALLED: Stage.DIRECTORIES_ENSURED,
    Stage.DIRECTORIES_ENSURED: Stage.FILES_WRITTEN,
    Stage.FILES_WRITTEN: Stage.DONE,
}


# =============================================================================
# Summary
# =============================================================================

@dataclass(frozen=True)
class GenerationSummary:
    """What was generated and what the user should do next."""
    project_name: str
    directory_name: str
    styling: str
    features: Tuple[str, ...]
    next_steps: Tuple[str, ...]


def _dev_command(package_manager: str) -> str:
    if package_manager == "npm":
        return "npm run dev"
    return f"{package_manager} dev"


def build_summary(config: ProjectConfig, package_manager: str = "npm") -> GenerationSummary:
    """Summarize a configuration for the closing message."""
    features = []
    if config.include_examples:
        features.append("Example pages and components")
    if config.install_tests:
        features.append("Jest and Testing Library")
    if config.install_extra_dependencies:
        features.append("Extra UI dependencies")
    if config.install_backend:
        features.append("Backend (Prisma, JWT auth, API routes)")

    next_steps = [f"cd {config.directory_name}"]
    if config.install_backend:
        next_steps.append("Fill in DATABASE_URL and JWT_SECRET in .env")
        next_steps.append("npx prisma db push")
        next_steps.append("npx prisma generate")
    next_steps.append(_dev_command(package_manager))

    return GenerationSummary(
        project_name=config.project_name,
        directory_name=config.directory_name,
        styling=config.styling.label,
        features=tuple(features),
        next_steps=tuple(next_steps),
    )


@dataclass
class GenerationResult:
    target: Path
    plan: GenerationPlan
    summary: GenerationSummary


# =============================================================================
# Commands
# =============================================================================

def scaffold_command(config: ProjectConfig, settings: GeneratorSettings) -> List[str]:
    """create-next-app invocation, run inside the empty target directory."""
    command = [
        "npx", settings.scaffold_package, ".",
        "--typescript", "--eslint", "--app", "--src-dir",
        "--import-alias", settings.import_alias,
    ]
    command.append("--tailwind" if config.uses_tailwind else "--no-tailwind")
    if not config.include_examples:
        command.append("--empty")
    if settings.package_manager != "npm":
        command.append(f"--use-{settings.package_manager}")
    return command


def install_commands(config: ProjectConfig, plan: GenerationPlan, settings: GeneratorSettings) -> List[List[str]]:
    """Install commands for the plan; empty lists are skipped."""
    installer = settings.installer
    commands = []
    if plan.production:
        commands.append(installer.install_command(plan.production))
    if plan.development:
        commands.append(installer.install_command(plan.development, dev=True))
    if config.install_backend and settings.run_prisma_init:
        commands.append(["npx", "prisma", "init"])
    return commands


# =============================================================================
# Generator
# =============================================================================

class ProjectGenerator:
    """Generates one project from a validated ProjectConfig.

    Args:
        config: What to generate
        parent_dir: Directory the project folder is created in
        settings: Tool settings (defaults when omitted)
        shell: Runs external commands
        catalog: Template catalog (the process-wide one when omitted)
        on_stage: Called with every stage the generator enters
    """

    def __init__(
        self,
        config: ProjectConfig,
        parent_dir: Path,
        settings: Optional[GeneratorSettings] = None,
        shell: Optional[ShellRunner] = None,
        catalog: Optional[TemplateCatalog] = None,
        on_stage: Optional[Callable[[Stage], None]] = None,
    ):
        self.config = config
        self.parent_dir = Path(parent_dir)
        self.settings = settings or GeneratorSettings()
        self.shell = shell or ShellRunner(timeout=self.settings.command_timeout)
        self.catalog = catalog
        self.on_stage = on_stage
        self.stage = Stage.START
        self.writer = FileSystemWriter(self.target)

    @property
    def target(self) -> Path:
        return self.parent_dir / self.config.directory_name

    @property
    def lock_path(self) -> Path:
        return self.parent_dir / f".{self.config.directory_name}.lock"

    def dry_run(self) -> GenerationPlan:
        """Compute the plan without running commands or touching disk."""
        return build_plan(self.config, self.catalog)

    def run(self) -> GenerationResult:
        """Generate the project.

        Raises:
            TargetExistsError: If the target directory already exists
            GenerationLockedError: If another run holds the target's lock
            ScaffoldFailure: If create-next-app fails
            InstallFailure: If a dependency install fails
            WriteFailure: If a directory or file cannot be written
        """
        if self.stage.terminal:
            raise GenerationError(f"Generator already ran (stage: {self.stage.value})")

        # rendering is pure, so template errors surface before any side effect
        plan = build_plan(self.config, self.catalog)

        lock = FileLock(str(self.lock_path), timeout=0)
        try:
            lock.acquire()
        except Timeout as exc:
            self.stage = Stage.FAILED
            raise GenerationLockedError(
                f"Another rnt-next run is generating {self.target}"
            ) from exc

        try:
            self._preflight()
            self._scaffold()
            self._advance(Stage.BASE_SCAFFOLDED)
            self._install(plan)
            self._advance(Stage.DEPENDENCIES_INSTALLED)
            self._ensure_directories(plan)
            self._advance(Stage.DIRECTORIES_ENSURED)
            self._write_files(plan)
            self._advance(Stage.FILES_WRITTEN)
            result = GenerationResult(
                target=self.target,
                plan=plan,
                summary=build_summary(self.config, self.settings.package_manager),
            )
            self._advance(Stage.DONE)
            return result
        except BaseException:
            logger.debug("Generation failed during %s", self.stage.value)
            self.stage = Stage.FAILED
            raise
        finally:
            lock.release()
            self.lock_path.unlink(missing_ok=True)

    def _advance(self, stage: Stage) -> None:
        expected = _NEXT_STAGE.get(self.stage)
        if stage is not expected:
            raise GenerationError(
                f"Cannot move from {self.stage.value} to {stage.value}"
            )
        logger.debug("Stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage
        if self.on_stage is not None:
            self.on_stage(stage)

    # =========================================================================
    # Stages
    # =========================================================================

    def _preflight(self) -> None:
        if self.target.exists():
            raise TargetExistsError(f"{self.target} already exists")

    def _scaffold(self) -> None:
        try:
            self.target.mkdir(parents=True)
        except OSError as exc:
            raise ScaffoldFailure(f"Cannot create {self.target}: {exc}") from exc

        command = scaffold_command(self.config, self.settings)
        logger.info("Scaffolding with %s", format_command(command))
        try:
            self.shell.run(command, cwd=self.target)
        except ShellError as exc:
            raise ScaffoldFailure(f"create-next-app failed: {exc}") from exc

        if not (self.target / "package.json").is_file():
            raise ScaffoldFailure(
                f"create-next-app finished but {self.target / 'package.json'} is missing"
            )

    def _install(self, plan: GenerationPlan) -> None:
        for command in install_commands(self.config, plan, self.settings):
            logger.info("Installing with %s", format_command(command))
            try:
                self.shell.run(command, cwd=self.target)
            except ShellError as exc:
                raise InstallFailure(
                    f"{format_command(command)} failed: {exc}",
                    returncode=getattr(exc, "returncode", None),
                ) from exc

    def _ensure_directories(self, plan: GenerationPlan) -> None:
        for relative_path in plan.directories:
            try:
                self.writer.ensure_directory(relative_path)
            except OSError as exc:
                raise WriteFailure(
                    f"Cannot create directory {relative_path}: {exc}", path=relative_path
                ) from exc

    def _write_files(self, plan: GenerationPlan) -> None:
        with tqdm(
            plan.files,
            desc="Writing files",
            unit="file",
            bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt}",
            disable=not self.settings.show_progress,
        ) as files:
            for planned in files:
                try:
                    self.writer.write_file(planned.relative_path, planned.content)
                except OSError as exc:
                    raise WriteFailure(
                        f"Cannot write {planned.relative_path}: {exc}", path=planned.relative_path
                    ) from exc
