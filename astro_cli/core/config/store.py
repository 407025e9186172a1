"""Home and project configuration stores.

Configuration lives in two YAML files:

- ``~/.astro/config.yaml`` (home scope), created with defaults on first run
- ``<project>/.astro/config.yaml`` (project scope), optional

Reads prefer the project value when a project config is bound and sets the
key, then the home value, then the registered default. ``init_config`` builds
a ``ConfigContext`` once per process; everything that needs configuration
receives that context instead of reaching for module globals.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from astro_cli.core.exceptions import ConfigIOError, ProjectSearchError, ValidationError
from .astro_config import AstroConfig
from .project import find_dir_in_path, same_directory
from .settings import CFG, deep_merge, get_nested, set_nested

CONFIG_FILE_NAME = "config"
CONFIG_FILE_TYPE = "yaml"
CONFIG_FILE_NAME_WITH_EXT = f"{CONFIG_FILE_NAME}.{CONFIG_FILE_TYPE}"
CONFIG_DIR = ".astro"

CONFIG_DIR_MODE = 0o770
CONFIG_FILE_MODE = 0o600

HOME_ENV_VAR = "ASTRO_HOME"

PathLike = Union[str, Path]


def get_home_dir() -> Path:
    """User home directory, overridable with ``ASTRO_HOME``."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home()


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigStore:
    """Key-value store for one config scope, backed by a YAML file."""

    def __init__(self, scope: str, defaults: Optional[Dict[str, Any]] = None):
        self.scope = scope
        self.defaults: Dict[str, Any] = defaults or {}
        self.values: Dict[str, Any] = {}
        self.config_file: Optional[Path] = None
        # Set when the bound file could not be loaded; saving over it would drop its contents
        self.read_error: Optional[ConfigIOError] = None

    @property
    def bound(self) -> bool:
        """Whether the store is backed by a file."""
        return self.config_file is not None

    def read(self) -> None:
        """Load the backing file, replacing any values held in memory."""
        if self.config_file is None:
            raise ConfigIOError("reading", self.scope, "no config file set")

        try:
            self.values = self._load(self.config_file)
        except ConfigIOError as e:
            self.read_error = e
            raise

        self.read_error = None
        logger.debug(f"Loaded {self.scope} config from: {self.config_file}")

    def _load(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigIOError("reading", self.scope, str(e), path=str(path), cause=e) from e

        if not isinstance(data, dict):
            raise ConfigIOError(
                "reading", self.scope, f"{path} does not contain a mapping", path=str(path)
            )
        return data

    def save(self, file: Optional[Path] = None) -> None:
        """Write defaults and explicit values to ``file`` (or the bound file).

        Raises:
            ConfigIOError: If the bound file failed to load, or cannot be written
        """
        target = file or self.config_file
        if target is None:
            raise ConfigIOError("saving", self.scope, "no config file set")
        if file is None and self.read_error is not None:
            raise ConfigIOError(
                "saving", self.scope,
                f"refusing to overwrite {target}, fix the file first ({self.read_error.message})",
                path=str(target), cause=self.read_error,
            )

        try:
            with open(target, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False)
        except OSError as e:
            raise ConfigIOError("saving", self.scope, str(e), path=str(target), cause=e) from e

        logger.debug(f"Saved {self.scope} config to: {target}")

    def is_set(self, path: str) -> bool:
        """Whether ``path`` holds an explicit (non-default) value."""
        return get_nested(self.values, path) is not None

    def get(self, path: str) -> Any:
        value = get_nested(self.values, path)
        if value is None:
            value = get_nested(self.defaults, path)
        return value

    def get_string(self, path: str) -> str:
        return _to_string(self.get(path))

    def set(self, path: str, value: Any) -> None:
        set_nested(self.values, path, value)

    def to_dict(self) -> Dict[str, Any]:
        return deep_merge(self.defaults, self.values)

    def __repr__(self) -> str:
        return f"ConfigStore(scope={self.scope}, config_file={self.config_file})"


def create_config(store: ConfigStore, directory: PathLike, file: PathLike) -> None:
    """Create a config directory and file, then persist the store into it.

    The directory is created with mode 0770 and the file is tightened to 0600
    (owner read/write) before anything is written to it.

    Raises:
        ConfigIOError: If the directory or file cannot be created or written
    """
    directory = Path(directory)
    file = Path(file)

    try:
        directory.mkdir(mode=CONFIG_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIOError(
            "creating", store.scope, f"Error creating config directory: {e}", path=str(directory), cause=e
        ) from e

    try:
        file.touch(exist_ok=True)
        os.chmod(file, CONFIG_FILE_MODE)
    except OSError as e:
        raise ConfigIOError(
            "creating", store.scope, f"Error creating config file: {e}", path=str(file), cause=e
        ) from e

    store.save(file)
    store.config_file = file
    logger.debug(f"Created {store.scope} config at: {file}")


class ConfigContext:
    """Resolved home and project configuration for one CLI invocation."""

    def __init__(self, home_dir: Optional[PathLike] = None):
        self.home_dir = Path(home_dir) if home_dir is not None else get_home_dir()
        self.home = ConfigStore("home", defaults=CFG.defaults())
        self.project = ConfigStore("project")

    @property
    def home_config_path(self) -> Path:
        """Directory holding the home config file."""
        return self.home_dir / CONFIG_DIR

    @property
    def home_config_file(self) -> Path:
        return self.home_config_path / CONFIG_FILE_NAME_WITH_EXT

    def init_home(self) -> None:
        """Bind the home store, creating the file with defaults if needed."""
        if not self.home_config_file.exists():
            try:
                create_config(self.home, self.home_config_path, self.home_config_file)
            except ConfigIOError as e:
                logger.warning(str(e))
                return

        self.home.config_file = self.home_config_file
        try:
            self.home.read()
        except ConfigIOError as e:
            logger.warning(str(e))

    def init_project(self, cwd: Optional[PathLike] = None) -> None:
        """Bind the project store if a project config exists above ``cwd``."""
        config_path = self._find_project_config_dir(cwd)
        if config_path is None:
            return

        project_file = config_path / CONFIG_FILE_NAME_WITH_EXT
        if not project_file.exists():
            return

        self.project.config_file = project_file
        try:
            self.project.read()
        except ConfigIOError as e:
            logger.warning(str(e))

    def _find_project_config_dir(self, cwd: Optional[PathLike]) -> Optional[Path]:
        try:
            config_path = find_dir_in_path(CONFIG_DIR, Path(cwd) if cwd is not None else None)
        except ProjectSearchError as e:
            logger.warning(str(e))
            return None

        if config_path is None or same_directory(config_path, self.home_config_path):
            return None
        return config_path

    def create_project_config(self, project_path: PathLike) -> Path:
        """Create ``<project_path>/.astro/config.yaml`` and bind it.

        The new file starts empty; values of an enclosing project are not copied.

        Raises:
            ConfigIOError: If the file cannot be created
        """
        config_dir = Path(project_path) / CONFIG_DIR
        config_file = config_dir / CONFIG_FILE_NAME_WITH_EXT
        store = ConfigStore("project")
        create_config(store, config_dir, config_file)
        self.project = store
        return config_file

    def project_config_exists(self) -> bool:
        return self.project.bound

    def project_root(self, cwd: Optional[PathLike] = None) -> Optional[Path]:
        return project_root(cwd=cwd, home_dir=self.home_dir)

    def get_string(self, path: str) -> str:
        """Project value if set, else home value, else the registered default."""
        if self.project.bound and self.project.is_set(path):
            return self.project.get_string(path)
        return self.home.get_string(path)

    def get_home_string(self, path: str) -> str:
        return self.home.get_string(path)

    def get_project_string(self, path: str) -> str:
        return self.project.get_string(path)

    def set_home_string(self, path: str, value: str) -> None:
        self._validate_path(path)
        self.home.set(path, value)
        self.home.save()

    def set_project_string(self, path: str, value: str) -> None:
        self._validate_path(path)
        if not self.project.bound:
            raise ConfigIOError(
                "saving", "project", "no project config found, run `astro project init` first"
            )
        self.project.set(path, value)
        self.project.save()

    @staticmethod
    def _validate_path(path: str) -> None:
        if path not in CFG:
            raise ValidationError(
                "key", path, f"unknown config key, expected one of: {', '.join(CFG.paths())}"
            )

    @property
    def settings(self) -> AstroConfig:
        """Typed view of the merged configuration."""
        merged = deep_merge(self.home.to_dict(), self.project.values)
        try:
            return AstroConfig.from_values(merged)
        except PydanticValidationError as e:
            raise ValidationError("config", merged, str(e)) from e

    def api_url(self) -> str:
        """Fully qualified Houston API URL."""
        return self.settings.api_url


def init_config(home_dir: Optional[PathLike] = None, cwd: Optional[PathLike] = None) -> ConfigContext:
    """Initialize home and project configuration.

    Never raises: failures are logged and leave the affected store empty.
    """
    ctx = ConfigContext(home_dir)
    ctx.init_home()
    ctx.init_project(cwd)
    return ctx


def project_root(cwd: Optional[PathLike] = None, home_dir: Optional[PathLike] = None) -> Optional[Path]:
    """Return the nearest project root above ``cwd``, or None.

    The home config directory is never treated as a project marker.

    Raises:
        ProjectSearchError: If the directory walk fails
    """
    config_path = find_dir_in_path(CONFIG_DIR, Path(cwd) if cwd is not None else None)
    if config_path is None:
        return None

    home = Path(home_dir) if home_dir is not None else get_home_dir()
    if same_directory(config_path, home / CONFIG_DIR):
        return None
    return config_path.parent
