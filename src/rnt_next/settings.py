"""Generator settings (stored in ~/.config/rnt-next/config.json).

Settings tune how a project is generated, not what it contains: which
package manager installs dependencies, which create-next-app release
scaffolds the base, and so on. The ProjectConfig answers stay separate.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from rnt_next.errors import RntNextError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RNT_NEXT_CONFIG"
PACKAGE_MANAGER_ENV_VAR = "RNT_NEXT_PACKAGE_MANAGER"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "rnt-next" / "config.json"


class SettingsError(RntNextError):
    """Settings name something rnt-next cannot use."""
    pass


# =============================================================================
# Package managers
# =============================================================================

@dataclass(frozen=True)
class PackageManager:
    """Install commands of one package manager."""

    name: str
    add: Sequence[str]
    add_dev: Sequence[str]
    save_flag: Optional[str] = None
    save_dev_flag: Optional[str] = None

    def install_command(self, packages: Sequence[str], dev: bool = False) -> List[str]:
        command = list(self.add_dev if dev else self.add) + list(packages)
        flag = self.save_dev_flag if dev else self.save_flag
        if flag:
            command.append(flag)
        return command


PACKAGE_MANAGERS: Dict[str, PackageManager] = {
    "npm": PackageManager("npm", ["npm", "install"], ["npm", "install"], "--save", "--save-dev"),
    "pnpm": PackageManager("pnpm", ["pnpm", "add"], ["pnpm", "add", "-D"]),
    "yarn": PackageManager("yarn", ["yarn", "add"], ["yarn", "add", "--dev"]),
    "bun": PackageManager("bun", ["bun", "add"], ["bun", "add", "--dev"]),
}


def get_package_manager(name: str) -> PackageManager:
    try:
        return PACKAGE_MANAGERS[name]
    except KeyError:
        choices = ", ".join(PACKAGE_MANAGERS)
        raise SettingsError(
            f"Unknown package manager {name!r} (choose one of: {choices})"
        ) from None


# =============================================================================
# Settings Data Class
# =============================================================================

@dataclass
class GeneratorSettings:
    """Tunables for a generation run."""
    package_manager: str = "npm"
    scaffold_package: str = "create-next-app@latest"
    import_alias: str = "@/*"
    run_prisma_init: bool = True
    show_progress: bool = True
    command_timeout: Optional[float] = None  # seconds, None waits forever

    @property
    def installer(self) -> PackageManager:
        return get_package_manager(self.package_manager)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "GeneratorSettings":
        """Build settings from a parsed settings file.

        Raises:
            SettingsError: If a known key holds a value of the wrong type
        """
        values = {
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        }
        for key, value in values.items():
            _check_type(key, value)
        return cls(**values)


_BOOL_FIELDS = ("run_prisma_init", "show_progress")
_STR_FIELDS = ("package_manager", "scaffold_package", "import_alias")


def _check_type(key: str, value) -> None:
    if key in _BOOL_FIELDS:
        valid = isinstance(value, bool)
        expected = "true or false"
    elif key in _STR_FIELDS:
        valid = isinstance(value, str) and bool(value)
        expected = "a non-empty string"
    else:
        # command_timeout
        valid = value is None or (
            isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
        )
        expected = "a positive number of seconds or null"
    if not valid:
        raise SettingsError(f"Setting {key!r} must be {expected}, got {value!r}")


def _settings_path(path: Optional[Union[str, Path]]) -> Path:
    if path is not None:
        return Path(path)
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return DEFAULT_CONFIG_PATH


def load_settings(path: Optional[Union[str, Path]] = None) -> GeneratorSettings:
    """Load settings from path, $RNT_NEXT_CONFIG or the default location.

    A missing, unreadable or malformed file yields the defaults.

    Raises:
        SettingsError: If a setting has the wrong type or names an unknown
            package manager
    """
    config_file = _settings_path(path)
    settings = GeneratorSettings()

    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            settings = GeneratorSettings.from_dict(data)
        except (ValueError, OSError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", config_file, exc)
    else:
        logger.debug("No settings file at %s, using defaults", config_file)

    override = os.environ.get(PACKAGE_MANAGER_ENV_VAR)
    if override:
        settings.package_manager = override

    # validated here, before any command runs
    get_package_manager(settings.package_manager)
    return settings
