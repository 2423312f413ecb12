"""Template catalog for rnt-next scaffolding.

Every generated file is one TemplateDescriptor: a project-relative
path, a render function and an applicability predicate. Both functions
read only the ProjectConfig, so the set of files a configuration
produces can be computed without touching disk.

Groups:
- config: editor, formatter and Next.js configuration
- state: Redux store, providers, theme and shared utils
- styling: styled-components or Tailwind specific files
- examples: example pages and UI components
- testing: Jest configuration and example tests
- backend: Prisma schema, auth helpers and API routes
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from rnt_next.config import ProjectConfig
from rnt_next.errors import RntNextError


Render = Callable[[ProjectConfig], str]
Predicate = Callable[[ProjectConfig], bool]


# =============================================================================
# Exceptions
# =============================================================================

class CatalogError(RntNextError):
    """The template catalog is misconfigured."""
    pass


class DuplicateTemplateError(CatalogError):
    """Two applicable templates target the same path."""

    def __init__(self, relative_path: str):
        super().__init__(
            f"More than one template applies to {relative_path!r}"
        )
        self.relative_path = relative_path


# =============================================================================
# Predicates
# =============================================================================

def always(config: ProjectConfig) -> bool:
    return True


def styled_components(config: ProjectConfig) -> bool:
    return config.uses_styled_components


def tailwind(config: ProjectConfig) -> bool:
    return config.uses_tailwind


def with_examples(config: ProjectConfig) -> bool:
    return config.include_examples


def with_tests(config: ProjectConfig) -> bool:
    return config.install_tests


def with_extras(config: ProjectConfig) -> bool:
    return config.install_extra_dependencies


def with_backend(config: ProjectConfig) -> bool:
    return config.install_backend


def all_of(*predicates: Predicate) -> Predicate:
    """Combine predicates; the result applies only if every one does."""
    def combined(config: ProjectConfig) -> bool:
        return all(predicate(config) for predicate in predicates)
    return combined


def negate(predicate: Predicate) -> Predicate:
    def inverted(config: ProjectConfig) -> bool:
        return not predicate(config)
    return inverted


# =============================================================================
# Descriptor and catalog
# =============================================================================

@dataclass(frozen=True)
class TemplateDescriptor:
    """One generated file."""

    relative_path: str
    render: Render
    when: Predicate = always

    def applies_to(self, config: ProjectConfig) -> bool:
        return bool(self.when(config))


class TemplateCatalog:
    """Ordered, enumerable collection of TemplateDescriptor entries.

    The catalog is filled once and then frozen; registering after that
    is an error.
    """

    def __init__(self, descriptors: Optional[Iterable[TemplateDescriptor]] = None):
        self._entries: List[TemplateDescriptor] = []
        self._frozen = False
        for descriptor in descriptors or ():
            self.register(descriptor)

    def register(self, descriptor: TemplateDescriptor) -> TemplateDescriptor:
        if self._frozen:
            raise CatalogError(
                f"Catalog is frozen, cannot register {descriptor.relative_path!r}"
            )
        if descriptor.relative_path.startswith("/") or ".." in descriptor.relative_path.split("/"):
            raise CatalogError(
                f"Template path must be project-relative: {descriptor.relative_path!r}"
            )
        self._entries.append(descriptor)
        return descriptor

    def template(self, relative_path: str, when: Predicate = always) -> Callable[[Render], Render]:
        """Decorator form of register()."""
        def decorator(render: Render) -> Render:
            self.register(TemplateDescriptor(relative_path, render, when))
            return render
        return decorator

    def freeze(self) -> "TemplateCatalog":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def entries(self) -> List[TemplateDescriptor]:
        return list(self._entries)

    def paths(self) -> List[str]:
        """Every distinct path any configuration may produce."""
        seen: Dict[str, None] = {}
        for descriptor in self._entries:
            seen.setdefault(descriptor.relative_path, None)
        return list(seen)

    def applicable(self, config: ProjectConfig) -> List[TemplateDescriptor]:
        """Descriptors that apply to config, in catalog order.

        Raises:
            DuplicateTemplateError: if two applicable descriptors share a path.
        """
        selected: List[TemplateDescriptor] = []
        claimed = set()
        for descriptor in self._entries:
            if not descriptor.applies_to(config):
                continue
            if descriptor.relative_path in claimed:
                raise DuplicateTemplateError(descriptor.relative_path)
            claimed.add(descriptor.relative_path)
            selected.append(descriptor)
        return selected

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)


_catalog: Optional[TemplateCatalog] = None


def build_catalog() -> TemplateCatalog:
    """Build a fresh, frozen catalog from every template group."""
    from rnt_next.templates.config import register_config_templates
    from rnt_next.templates.state import register_state_templates
    from rnt_next.templates.styling import register_styling_templates
    from rnt_next.templates.examples import register_example_templates
    from rnt_next.templates.testing import register_testing_templates
    from rnt_next.templates.backend import register_backend_templates

    catalog = TemplateCatalog()
    register_config_templates(catalog)
    register_state_templates(catalog)
    register_styling_templates(catalog)
    register_example_templates(catalog)
    register_testing_templates(catalog)
    register_backend_templates(catalog)
    return catalog.freeze()


def get_catalog() -> TemplateCatalog:
    """Process-wide catalog, built on first use."""
    global _catalog
    if _catalog is None:
        _catalog = build_catalog()
    return _catalog
