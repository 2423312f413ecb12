"""Tests for rnt_next.config module."""

import dataclasses

import pytest

from rnt_next.config import (
    MAX_PROJECT_NAME_LENGTH,
    ProjectConfig,
    StylingApproach,
    build_config,
    validate_project_name,
)
from rnt_next.errors import RntNextError, ValidationError


class TestStylingApproach:
    """Tests for StylingApproach.parse()."""

    @pytest.mark.parametrize("value", ["tailwind", "Tailwind CSS", "TAILWIND", " tailwind "])
    def test_parses_tailwind_spellings(self, value):
        assert StylingApproach.parse(value) is StylingApproach.TAILWIND

    @pytest.mark.parametrize("value", ["styled-components", "Styled Components", "styled_components"])
    def test_parses_styled_components_spellings(self, value):
        assert StylingApproach.parse(value) is StylingApproach.STYLED_COMPONENTS

    def test_returns_enum_unchanged(self):
        assert StylingApproach.parse(StylingApproach.TAILWIND) is StylingApproach.TAILWIND

    def test_rejects_unknown(self):
        with pytest.raises(ValidationError) as exc_info:
            StylingApproach.parse("sass")
        assert exc_info.value.field == "styling"

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            StylingApproach.parse(3)


class TestValidateProjectName:
    """Tests for validate_project_name()."""

    @pytest.mark.parametrize("name", ["demo-app", "app2", "@acme/web", "my.site", "a~b"])
    def test_accepts_valid_names(self, name):
        assert validate_project_name(name) == name

    def test_strips_whitespace(self):
        assert validate_project_name("  demo-app  ") == "demo-app"

    @pytest.mark.parametrize(
        "name",
        ["", "   ", "Demo", "my app", ".hidden", "a\\b", "_private", "@scope", "a/b/c"],
    )
    def test_rejects_invalid_names(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validate_project_name(name)
        assert exc_info.value.field == "project_name"

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError):
            validate_project_name("a" * (MAX_PROJECT_NAME_LENGTH + 1))

    def test_accepts_max_length(self):
        name = "a" * MAX_PROJECT_NAME_LENGTH
        assert validate_project_name(name) == name

    def test_rejects_missing(self):
        with pytest.raises(ValidationError):
            validate_project_name(None)


class TestBuildConfig:
    """Tests for build_config()."""

    def test_minimal_answers(self):
        config = build_config({"project_name": "demo-app", "styling": "tailwind"})
        assert config == ProjectConfig("demo-app", StylingApproach.TAILWIND)
        assert config.include_examples is False
        assert config.install_backend is False

    def test_all_answers(self):
        config = build_config({
            "project_name": "demo-app",
            "styling": "Styled Components",
            "include_examples": True,
            "install_tests": "yes",
            "install_extra_dependencies": "n",
            "install_backend": None,
        })
        assert config.uses_styled_components
        assert config.include_examples is True
        assert config.install_tests is True
        assert config.install_extra_dependencies is False
        assert config.install_backend is False

    def test_missing_styling(self):
        with pytest.raises(ValidationError) as exc_info:
            build_config({"project_name": "demo-app"})
        assert exc_info.value.field == "styling"

    def test_invalid_name_reported_first(self):
        with pytest.raises(ValidationError) as exc_info:
            build_config({"project_name": "Bad Name", "styling": "nope"})
        assert exc_info.value.field == "project_name"

    def test_unknown_field(self):
        with pytest.raises(ValidationError) as exc_info:
            build_config({"project_name": "demo-app", "styling": "tailwind", "use_sass": True})
        assert exc_info.value.field == "use_sass"

    def test_bad_boolean(self):
        with pytest.raises(ValidationError) as exc_info:
            build_config({"project_name": "demo-app", "styling": "tailwind", "install_tests": "maybe"})
        assert exc_info.value.field == "install_tests"

    def test_validation_error_is_rnt_next_error(self):
        with pytest.raises(RntNextError):
            build_config({})


class TestProjectConfig:
    """Tests for ProjectConfig."""

    def test_is_immutable(self, make_config):
        config = make_config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.install_backend = True

    def test_directory_name_drops_scope(self, make_config):
        assert make_config(project_name="@acme/web").directory_name == "web"
        assert make_config(project_name="demo-app").directory_name == "demo-app"

    def test_styling_helpers(self, make_config):
        tailwind = make_config(styling=StylingApproach.TAILWIND)
        styled = make_config(styling=StylingApproach.STYLED_COMPONENTS)
        assert tailwind.uses_tailwind and not tailwind.uses_styled_components
        assert styled.uses_styled_components and not styled.uses_tailwind

    def test_to_dict_round_trips_through_build_config(self, make_config):
        config = make_config(include_examples=True, install_backend=True)
        assert build_config(config.to_dict()) == config
