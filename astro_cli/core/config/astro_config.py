"""
Typed configuration model for the Astro CLI.

This module mirrors the settings registry as pydantic models so the rest of
the CLI reads ``config.cloud.api.port`` instead of looking up dotted strings.
Values come from the merged home/project stores; ``ASTRO_*`` environment
variables take precedence over both.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Section(BaseModel):
    # YAML happily turns `port: 443` into an int
    model_config = ConfigDict(coerce_numbers_to_str=True, extra='ignore')


class CloudAPIConfig(_Section):
    """Houston API endpoint settings."""

    protocol: Literal['http', 'https'] = Field(
        default='https',
        description="Scheme used to reach Houston"
    )

    port: int = Field(
        default=443,
        ge=1,
        le=65535,
        description="Houston API port"
    )


class CloudConfig(_Section):
    """Astronomer platform settings."""

    domain: str = Field(
        default='',
        description="Base domain of the Astronomer installation"
    )

    api: CloudAPIConfig = Field(default_factory=CloudAPIConfig)


class PostgresConfig(_Section):
    """Local development Postgres settings."""

    user: str = 'postgres'
    password: SecretStr = SecretStr('postgres')
    host: str = 'postgres'
    port: int = Field(default=5432, ge=1, le=65535)


class RegistryConfig(_Section):
    """Docker registry credentials."""

    authority: str = ''
    user: str = 'admin'
    password: SecretStr = SecretStr('admin')


class DockerConfig(_Section):
    registry: RegistryConfig = Field(default_factory=RegistryConfig)


class ProjectConfig(_Section):
    name: str = ''


class UserConfig(_Section):
    model_config = ConfigDict(coerce_numbers_to_str=True, extra='ignore', populate_by_name=True)

    api_auth_token: SecretStr = Field(
        default=SecretStr(''),
        alias='apiAuthToken',
        description="Token sent as the authorization header to Houston"
    )


class AstroConfig(BaseSettings):
    """
    Unified configuration for the Astro CLI.

    Configuration Sources (in order of precedence):
    1. Environment variables (ASTRO_*)
    2. Project config file (<project>/.astro/config.yaml)
    3. Home config file (~/.astro/config.yaml)
    4. Default values (lowest priority)

    Environment Variable Examples:
        ASTRO_CLOUD__DOMAIN=astronomer.example.com
        ASTRO_CLOUD__API__PORT=8871
        ASTRO_USER__API_AUTH_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_prefix='ASTRO_',
        env_nested_delimiter='__',
        case_sensitive=False,
        extra='ignore',
        env_file=None,
    )

    cloud: CloudConfig = Field(default_factory=CloudConfig)
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    docker: DockerConfig = Field(default_factory=DockerConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    user: UserConfig = Field(default_factory=UserConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # File values arrive as init kwargs; environment overrides them
        return env_settings, init_settings

    @classmethod
    def from_values(cls, values: dict[str, Any]) -> 'AstroConfig':
        """Build a config from the merged nested mapping of the stores."""
        return cls(**values)

    @property
    def api_url(self) -> str:
        """Fully qualified Houston GraphQL endpoint."""
        return f"{self.cloud.api.protocol}://houston.{self.cloud.domain}:{self.cloud.api.port}/v1"

    def get_missing_config(self) -> list[str]:
        """Settings that must be filled in before talking to Houston."""
        missing = []
        if not self.cloud.domain:
            missing.append('cloud.domain')
        return missing

    def __repr__(self) -> str:
        """String representation hiding sensitive information."""
        token_display = "***" if self.user.api_auth_token.get_secret_value() else None
        return (
            f"AstroConfig("
            f"cloud.domain={self.cloud.domain}, "
            f"cloud.api={self.cloud.api.protocol}:{self.cloud.api.port}, "
            f"project.name={self.project.name}, "
            f"user.apiAuthToken={token_display})"
        )
