"""Project configuration: the single immutable input of a generation run.

Raw answers come from the prompt collaborator or CLI flags as a plain
mapping. build_config() validates them once and returns a frozen
ProjectConfig that every planner and template reads.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from rnt_next.errors import ValidationError


# npm package name, optionally scoped (@scope/name)
PROJECT_NAME_PATTERN = re.compile(
    r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$"
)

# npm rejects longer names
MAX_PROJECT_NAME_LENGTH = 214

BOOLEAN_FIELDS = (
    "include_examples",
    "install_tests",
    "install_extra_dependencies",
    "install_backend",
)

KNOWN_FIELDS = ("project_name", "styling") + BOOLEAN_FIELDS

_TRUE_STRINGS = {"yes", "y", "true", "1"}
_FALSE_STRINGS = {"no", "n", "false", "0"}


class StylingApproach(str, Enum):
    """CSS approach of the generated project."""

    STYLED_COMPONENTS = "styled-components"
    TAILWIND = "tailwind"

    @property
    def label(self) -> str:
        return {
            StylingApproach.STYLED_COMPONENTS: "Styled Components",
            StylingApproach.TAILWIND: "Tailwind CSS",
        }[self]

    @classmethod
    def parse(cls, value: Any) -> "StylingApproach":
        """Accept the enum, its value or its prompt label (any case)."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValidationError("styling", f"expected a string, got {type(value).__name__}")
        wanted = value.strip().lower()
        for approach in cls:
            if wanted in (approach.value, approach.label.lower(), approach.name.lower()):
                return approach
        choices = ", ".join(a.value for a in cls)
        raise ValidationError("styling", f"unknown styling approach {value!r} (choose one of: {choices})")


@dataclass(frozen=True)
class ProjectConfig:
    """What the user asked for. Constructed once, read many times."""

    project_name: str
    styling: StylingApproach
    include_examples: bool = False
    install_tests: bool = False
    install_extra_dependencies: bool = False
    install_backend: bool = False

    @property
    def uses_styled_components(self) -> bool:
        return self.styling is StylingApproach.STYLED_COMPONENTS

    @property
    def uses_tailwind(self) -> bool:
        return self.styling is StylingApproach.TAILWIND

    @property
    def directory_name(self) -> str:
        """Folder created for the project (scope prefix dropped)."""
        return self.project_name.rsplit("/", 1)[-1]

    def to_dict(self) -> dict:
        return {
            "project_name": self.project_name,
            "styling": self.styling.value,
            "include_examples": self.include_examples,
            "install_tests": self.install_tests,
            "install_extra_dependencies": self.install_extra_dependencies,
            "install_backend": self.install_backend,
        }


def validate_project_name(name: Any) -> str:
    """Return the normalized project name or raise ValidationError."""
    if not isinstance(name, str):
        raise ValidationError("project_name", "a project name is required")

    name = name.strip()
    if not name:
        raise ValidationError("project_name", "must not be empty")
    if len(name) > MAX_PROJECT_NAME_LENGTH:
        raise ValidationError(
            "project_name", f"must be at most {MAX_PROJECT_NAME_LENGTH} characters"
        )
    if "\\" in name:
        raise ValidationError("project_name", "must not contain path separators")
    if name.startswith("."):
        raise ValidationError("project_name", "must not start with a dot")
    if not PROJECT_NAME_PATTERN.match(name):
        raise ValidationError(
            "project_name",
            f"{name!r} is not a valid package name (lowercase letters, digits, hyphens, optional @scope/)",
        )
    return name


def _parse_bool(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValidationError(field, f"expected yes/no, got {value!r}")


def build_config(answers: Mapping[str, Any]) -> ProjectConfig:
    """Validate raw answers into a ProjectConfig.

    Args:
        answers: Field name -> value, as produced by the prompt collaborator
            or the CLI. Boolean fields that are absent (or None) are False.

    Raises:
        ValidationError: naming the first offending field.
    """
    unknown = sorted(set(answers) - set(KNOWN_FIELDS))
    if unknown:
        raise ValidationError(unknown[0], "unknown configuration field")

    project_name = validate_project_name(answers.get("project_name"))

    styling = answers.get("styling")
    if styling is None:
        raise ValidationError("styling", "a styling approach is required")

    flags = {}
    for field in BOOLEAN_FIELDS:
        value = answers.get(field)
        flags[field] = False if value is None else _parse_bool(field, value)

    return ProjectConfig(
        project_name=project_name,
        styling=StylingApproach.parse(styling),
        **flags,
    )
