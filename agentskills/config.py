"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). When no token is configured, the review tools fall back
to the token stored by the gh CLI.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

# Env var naming a config file; nothing is read from cwd implicitly
CONFIG_ENV = "AGENTSKILLS_CONFIG"


class ConfigError(Exception):
    """Raised when config or a secret file cannot be loaded."""

    pass


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        try:
            return Path(file_path).read_text().strip()
        except OSError as e:
            raise ConfigError(f"Cannot read {file_env_key} ({file_path}): {e}") from e
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    repository: str | None = Field(default=None, description="Target repo e.g. owner/repo; detected via gh if unset")
    timeout: int = Field(default=30, ge=1, description="HTTP timeout in seconds")


class ReviewConfig(BaseSettings):
    """Review comment fetcher settings."""

    model_config = SettingsConfigDict(env_prefix="REVIEW_", extra="ignore")

    bot_login: str = Field(default="coderabbitai[bot]", description="Author login of the review bot")
    page_size: int = Field(default=100, ge=1, le=100, description="Items per REST/GraphQL page")


class OAuthConfig(BaseSettings):
    """OAuth key generator settings."""

    model_config = SettingsConfigDict(env_prefix="OAUTH_", extra="ignore")

    kid: str = Field(default="key-1", description="Key id written into the JWK")
    env_var: str = Field(default="OAUTH_PRIVATE_KEY", description="Env variable name in the printed line")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="%(message)s", description="Log format")


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    review: ReviewConfig = Field(default_factory=ReviewConfig)
    oauth: OAuthConfig = Field(default_factory=OAuthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section {name!r} must be a mapping, got {type(value).__name__}")
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from a named YAML file (or $AGENTSKILLS_CONFIG) and environment.

    Without a named file only defaults plus env overrides are used; the
    working directory is never searched. Secrets: GITHUB_TOKEN or
    GITHUB_TOKEN_FILE. Raises ConfigError on unreadable or invalid config.
    """
    global _current_env

    _current_env = dict(os.environ)

    if config_path is None and _current_env.get(CONFIG_ENV):
        config_path = Path(_current_env[CONFIG_ENV])

    try:
        if config_path is None:
            return AppConfig()

        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
        raw = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"{config_path}: top level must be a mapping, got {type(raw).__name__}")
        raw = _substitute_env(raw)

        return AppConfig(
            github=GitHubConfig(**_section(raw, "github")),
            review=ReviewConfig(**_section(raw, "review")),
            oauth=OAuthConfig(**_section(raw, "oauth")),
            logging=LoggingConfig(**_section(raw, "logging")),
        )
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Invalid config: {e}") from e
