"""Tests for agentskills.config (YAML + env loading)."""

from pathlib import Path

import pytest

from agentskills.config import AppConfig, ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "GITHUB_TOKEN",
        "GITHUB_TOKEN_FILE",
        "GITHUB_REPOSITORY",
        "GITHUB_API_URL",
        "REVIEW_BOT_LOGIN",
        "REVIEW_PAGE_SIZE",
        "LOGGING_LEVEL",
        "AGENTSKILLS_CONFIG",
    ):
        monkeypatch.delenv(key, raising=False)


def test_no_named_file_gives_defaults() -> None:
    """No config file named: defaults are used."""
    config = load_config()
    assert isinstance(config, AppConfig)
    assert config.github.api_url == "https://api.github.com"
    assert config.github.repository is None
    assert config.review.bot_login == "coderabbitai[bot]"
    assert config.review.page_size == 100
    assert config.oauth.kid == "key-1"
    assert config.oauth.env_var == "OAUTH_PRIVATE_KEY"
    assert config.logging.level == "INFO"
    assert config.github_token_resolved is None


def test_yaml_values_and_env_substitution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """YAML sections are loaded and ${VAR} is replaced from env."""
    monkeypatch.setenv("MY_TOKEN", "secret-from-env")
    path = tmp_path / "config.yaml"
    path.write_text(
        "github:\n"
        "  token: ${MY_TOKEN}\n"
        "  repository: acme/app\n"
        "review:\n"
        "  bot_login: reviewer[bot]\n"
        "  page_size: 50\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(path)
    assert config.github.token == "secret-from-env"
    assert config.github_token_resolved == "secret-from-env"
    assert config.github.repository == "acme/app"
    assert config.review.bot_login == "reviewer[bot]"
    assert config.review.page_size == 50
    assert config.logging.level == "DEBUG"


def test_token_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    config = load_config()
    assert config.github_token_resolved == "env-token"


def test_token_from_secret_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """GITHUB_TOKEN_FILE points at a Docker-style secret file."""
    secret = tmp_path / "token"
    secret.write_text("file-token\n")
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))
    config = load_config()
    assert config.github_token_resolved == "file-token"


def test_unresolved_placeholder_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A ${VAR} left unsubstituted is not used as a token."""
    path = tmp_path / "config.yaml"
    path.write_text("github:\n  token: ${NOT_SET_ANYWHERE}\n")
    monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
    config = load_config(path)
    assert config.github_token_resolved is None


def test_page_size_bounds(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("review:\n  page_size: 500\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_stray_cwd_config_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A config.yaml in the working directory is never read implicitly."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("review:\n  bot_login: someone-else\n")
    config = load_config()
    assert config.review.bot_login == "coderabbitai[bot]"


def test_config_from_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """AGENTSKILLS_CONFIG names the file when no path is passed."""
    path = tmp_path / "skills.yaml"
    path.write_text("review:\n  bot_login: reviewer[bot]\n")
    monkeypatch.setenv("AGENTSKILLS_CONFIG", str(path))
    assert load_config().review.bot_login == "reviewer[bot]"


def test_named_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "- item1\n- item2\n",
        "github: enabled\n",
        "github: [\n",
    ],
)
def test_malformed_file_raises_config_error(tmp_path: Path, content: str) -> None:
    """Non-mapping top level, non-mapping section, bad YAML: all ConfigError."""
    path = tmp_path / "config.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_token_file_raises_config_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN_FILE", str(tmp_path / "nope"))
    config = load_config()
    with pytest.raises(ConfigError, match="GITHUB_TOKEN_FILE"):
        config.github_token_resolved
