"""npm dependency selection.

The lists are built additively from fixed bundles so identical
configurations always produce identical install commands.
"""

from typing import Iterable, List, NamedTuple, Tuple

from rnt_next.config import ProjectConfig


BASE_PRODUCTION = (
    "react-redux",
    "@reduxjs/toolkit",
    "immer",
    "redux",
    "clsx",
    "class-variance-authority",
    "lucide-react",
)

BASE_DEVELOPMENT = (
    "eslint-plugin-prettier",
    "prettier",
    "eslint-config-prettier",
)

STYLED_COMPONENTS_PRODUCTION = ("styled-components",)
STYLED_COMPONENTS_DEVELOPMENT = ("@types/styled-components",)

# Forms, validation, input masks, toasts, skeletons, animation, icons
EXTRA_PRODUCTION = (
    "formik",
    "yup",
    "imask",
    "react-imask",
    "react-hot-toast",
    "react-loading-skeleton",
    "framer-motion",
    "react-icons",
)

BACKEND_PRODUCTION = (
    "prisma",
    "@prisma/client",
    "jose",
    "bcryptjs",
    "cookie",
)
BACKEND_DEVELOPMENT = (
    "@types/bcryptjs",
    "@types/cookie",
)

TEST_DEVELOPMENT = (
    "jest",
    "@testing-library/react",
    "@testing-library/jest-dom",
    "@testing-library/user-event",
    "jest-environment-jsdom",
)


class Dependencies(NamedTuple):
    """Production and development package lists, in install order."""

    production: Tuple[str, ...]
    development: Tuple[str, ...]


def _add(target: List[str], packages: Iterable[str]) -> None:
    for package in packages:
        if package not in target:
            target.append(package)


def select_dependencies(config: ProjectConfig) -> Dependencies:
    """Compute the dependency lists for a configuration.

    Rules are applied in a fixed order (styling, extras, backend, tests);
    a package that is already listed is not added twice.
    """
    production: List[str] = []
    development: List[str] = []
    _add(production, BASE_PRODUCTION)
    _add(development, BASE_DEVELOPMENT)

    if config.uses_styled_components:
        _add(production, STYLED_COMPONENTS_PRODUCTION)
        _add(development, STYLED_COMPONENTS_DEVELOPMENT)

    if config.install_extra_dependencies:
        _add(production, EXTRA_PRODUCTION)

    if config.install_backend:
        _add(production, BACKEND_PRODUCTION)
        _add(development, BACKEND_DEVELOPMENT)

    if config.install_tests:
        _add(development, TEST_DEVELOPMENT)

    return Dependencies(tuple(production), tuple(development))
