"""Tests for rnt_next.settings module."""

import json
import logging
from pathlib import Path

import pytest

from rnt_next.settings import (
    CONFIG_ENV_VAR,
    PACKAGE_MANAGER_ENV_VAR,
    GeneratorSettings,
    SettingsError,
    get_package_manager,
    load_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv(PACKAGE_MANAGER_ENV_VAR, raising=False)


class TestGeneratorSettings:
    """Tests for GeneratorSettings."""

    def test_defaults(self):
        settings = GeneratorSettings()
        assert settings.package_manager == "npm"
        assert settings.scaffold_package == "create-next-app@latest"
        assert settings.import_alias == "@/*"
        assert settings.run_prisma_init is True
        assert settings.command_timeout is None

    def test_from_dict_ignores_unknown_keys(self):
        settings = GeneratorSettings.from_dict({"package_manager": "pnpm", "colour": "blue"})
        assert settings.package_manager == "pnpm"

    def test_from_dict_accepts_numeric_timeout(self):
        assert GeneratorSettings.from_dict({"command_timeout": 90}).command_timeout == 90
        assert GeneratorSettings.from_dict({"command_timeout": None}).command_timeout is None

    def test_from_dict_rejects_string_flag(self):
        with pytest.raises(SettingsError, match="show_progress"):
            GeneratorSettings.from_dict({"show_progress": "false"})

    def test_to_dict_round_trip(self):
        settings = GeneratorSettings(package_manager="bun", command_timeout=120)
        assert GeneratorSettings.from_dict(settings.to_dict()) == settings


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "missing.json") == GeneratorSettings()

    def test_reads_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"package_manager": "yarn", "run_prisma_init": False}))
        settings = load_settings(path)
        assert settings.package_manager == "yarn"
        assert settings.run_prisma_init is False

    def test_corrupt_file_logs_warning(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="rnt_next.settings"):
            settings = load_settings(path)
        assert settings == GeneratorSettings()
        assert "Ignoring unreadable settings file" in caplog.text

    def test_non_object_json_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert load_settings(path) == GeneratorSettings()

    def test_non_utf8_file_gives_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"package_manager": "\xff"}')
        with caplog.at_level(logging.WARNING, logger="rnt_next.settings"):
            assert load_settings(path) == GeneratorSettings()
        assert "Ignoring unreadable settings file" in caplog.text

    def test_directory_instead_of_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.mkdir()
        assert load_settings(path) == GeneratorSettings()

    def test_permission_denied_gives_defaults(self, tmp_path, monkeypatch, caplog):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"package_manager": "yarn"}))

        def refuse(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "read_text", refuse)
        with caplog.at_level(logging.WARNING, logger="rnt_next.settings"):
            assert load_settings(path) == GeneratorSettings()
        assert "Permission denied" in caplog.text

    @pytest.mark.parametrize("data", [
        {"show_progress": "false"},
        {"run_prisma_init": 0},
        {"command_timeout": "30"},
        {"command_timeout": -1},
        {"command_timeout": True},
        {"package_manager": 3},
    ])
    def test_wrong_types_are_rejected(self, tmp_path, data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        with pytest.raises(SettingsError, match=next(iter(data))):
            load_settings(path)

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"package_manager": "pnpm"}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_settings().package_manager == "pnpm"

    def test_package_manager_override(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"package_manager": "yarn"}))
        monkeypatch.setenv(PACKAGE_MANAGER_ENV_VAR, "bun")
        assert load_settings(path).package_manager == "bun"

    def test_unknown_package_manager(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"package_manager": "pip"}))
        with pytest.raises(SettingsError):
            load_settings(path)


class TestPackageManager:
    """Tests for install commands."""

    def test_npm(self):
        npm = get_package_manager("npm")
        assert npm.install_command(["react", "clsx"]) == ["npm", "install", "react", "clsx", "--save"]
        assert npm.install_command(["jest"], dev=True) == ["npm", "install", "jest", "--save-dev"]

    def test_pnpm(self):
        pnpm = get_package_manager("pnpm")
        assert pnpm.install_command(["react"]) == ["pnpm", "add", "react"]
        assert pnpm.install_command(["jest"], dev=True) == ["pnpm", "add", "-D", "jest"]

    def test_unknown(self):
        with pytest.raises(SettingsError):
            get_package_manager("cargo")
