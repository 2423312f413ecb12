"""Everything a configuration produces, computed without side effects."""

from typing import List, NamedTuple, Optional, Tuple

from rnt_next.config import ProjectConfig
from rnt_next.dependencies import select_dependencies
from rnt_next.directories import plan_directories
from rnt_next.templates import TemplateCatalog, get_catalog


class PlannedFile(NamedTuple):
    relative_path: str
    content: str


class GenerationPlan(NamedTuple):
    """Directories, dependency lists and rendered files of one run."""

    directories: Tuple[str, ...]
    production: Tuple[str, ...]
    development: Tuple[str, ...]
    files: Tuple[PlannedFile, ...]

    def file_paths(self) -> List[str]:
        return [planned.relative_path for planned in self.files]


def render_files(config: ProjectConfig, catalog: Optional[TemplateCatalog] = None) -> Tuple[PlannedFile, ...]:
    """Render every applicable template, in catalog order."""
    if catalog is None:
        catalog = get_catalog()
    return tuple(
        PlannedFile(descriptor.relative_path, descriptor.render(config))
        for descriptor in catalog.applicable(config)
    )


def build_plan(config: ProjectConfig, catalog: Optional[TemplateCatalog] = None) -> GenerationPlan:
    dependencies = select_dependencies(config)
    return GenerationPlan(
        directories=tuple(plan_directories(config)),
        production=dependencies.production,
        development=dependencies.development,
        files=render_files(config, catalog),
    )
