"""Directory planning for the generated project."""

from typing import Iterable, List

from rnt_next.config import ProjectConfig


BASE_DIRECTORIES = (
    ".vscode",
    "src",
    "src/components",
    "src/styles",
    "src/lib",
    "src/hooks",
    "src/utils",
    "src/redux",
    "src/redux/slices",
)

EXAMPLE_DIRECTORIES = (
    "src/app/(public)",
    "src/app/(private)",
    "src/components/ui/Button",
    "src/components/ui/ErrorMessage",
    "src/components/ui/MaskedInput",
    "src/components/ui/ModalWrapper",
    "src/components/ui/TypeWriter",
    "src/components/layout/header",
    "src/components/layout/footer",
)

TEST_DIRECTORIES = (
    "__tests__",
    "src/__tests__",
)

BACKEND_DIRECTORIES = (
    "prisma",
    "src/app/api/auth/login",
    "src/app/api/auth/logout",
    "src/app/api/auth/register",
    "src/app/api/auth/verify",
    "src/app/api/users",
)


def is_test_path(relative_path: str) -> bool:
    """True if a project-relative path lives under a test directory."""
    return any(
        relative_path == d or relative_path.startswith(d + "/")
        for d in TEST_DIRECTORIES
    )


def _append_with_parents(planned: List[str], paths: Iterable[str]) -> None:
    """Append paths, inserting missing ancestors first and skipping duplicates."""
    for path in paths:
        parts = path.strip("/").split("/")
        for depth in range(1, len(parts) + 1):
            candidate = "/".join(parts[:depth])
            if candidate not in planned:
                planned.append(candidate)


def plan_directories(config: ProjectConfig) -> List[str]:
    """Ordered directory list for a configuration.

    Parents always come before their children, so creating the paths one
    by one without recursive mkdir works.
    """
    planned: List[str] = []
    _append_with_parents(planned, BASE_DIRECTORIES)

    if config.include_examples:
        _append_with_parents(planned, EXAMPLE_DIRECTORIES)

    if config.install_tests:
        _append_with_parents(planned, TEST_DIRECTORIES)

    if config.install_backend:
        _append_with_parents(planned, BACKEND_DIRECTORIES)

    return planned
