"""Registry of known configuration settings.

Each setting maps a logical name to the dotted path it is stored under in
``config.yaml`` together with its default. The registry is the single source
of truth for which keys ``astro config get/set`` accept.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional


@dataclass(frozen=True)
class ConfigSetting:
    """A single registered configuration key."""
    path: str
    required: bool = True
    default: str = ""

    @property
    def parts(self) -> list[str]:
        return self.path.split(".")


class SettingsRegistry:
    """Ordered, path-unique collection of ``ConfigSetting`` entries."""

    def __init__(self) -> None:
        self._by_name: Dict[str, ConfigSetting] = {}
        self._by_path: Dict[str, ConfigSetting] = {}

    def register(self, name: str, path: str, required: bool = True, default: str = "") -> ConfigSetting:
        if path in self._by_path:
            raise ValueError(f"Duplicate config path: {path}")
        if name in self._by_name:
            raise ValueError(f"Duplicate config setting name: {name}")

        setting = ConfigSetting(path=path, required=required, default=default)
        self._by_name[name] = setting
        self._by_path[path] = setting
        return setting

    def __getattr__(self, name: str) -> ConfigSetting:
        # Allows CFG.cloud_domain style access
        try:
            return self.__dict__["_by_name"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __iter__(self) -> Iterator[ConfigSetting]:
        return iter(self._by_path.values())

    def __len__(self) -> int:
        return len(self._by_path)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def get(self, path: str) -> Optional[ConfigSetting]:
        return self._by_path.get(path)

    def paths(self) -> list[str]:
        return list(self._by_path)

    def defaults(self) -> Dict[str, Any]:
        """Nested mapping of every non-empty default."""
        tree: Dict[str, Any] = {}
        for setting in self:
            if setting.default:
                set_nested(tree, setting.path, setting.default)
        return tree


def get_nested(tree: Dict[str, Any], path: str) -> Any:
    """Return the value at a dotted path, or None when any segment is missing."""
    current: Any = tree
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def set_nested(tree: Dict[str, Any], path: str, value: Any) -> None:
    """Set a value at a dotted path, creating intermediate mappings."""
    parts = path.split(".")
    current = tree
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = {}
            current[part] = child
        current = child
    current[parts[-1]] = value


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new mapping with ``override`` merged over ``base``."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


CFG = SettingsRegistry()
CFG.register("cloud_domain", "cloud.domain")
CFG.register("cloud_api_protocol", "cloud.api.protocol", default="https")
CFG.register("cloud_api_port", "cloud.api.port", default="443")
CFG.register("postgres_user", "postgres.user", default="postgres")
CFG.register("postgres_password", "postgres.password", default="postgres")
CFG.register("postgres_host", "postgres.host", default="postgres")
CFG.register("postgres_port", "postgres.port", default="5432")
CFG.register("registry_authority", "docker.registry.authority")
CFG.register("registry_user", "docker.registry.user", default="admin")
CFG.register("registry_password", "docker.registry.password", default="admin")
CFG.register("project_name", "project.name")
CFG.register("user_api_auth_token", "user.apiAuthToken")
