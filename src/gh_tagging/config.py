import tomllib
from dataclasses import dataclass
from pathlib import Path

import click

from gh_tagging.types import RepoProperties

DEFAULT_CONFIG_FILENAME = ".gh-tagging.toml"


@dataclass(frozen=True)
class TaggingConfig:
    """In-memory representation of `.gh-tagging.toml`.

    Example:
      [github]
      # Optional: GitHub Enterprise API root (defaults to https://api.github.com)
      host = "https://github.example.com/api/v3"
      username = "ci-bot"
      repo = "acme/widgets"
    """

    host: str | None
    username: str | None
    repo: str | None


def load_tagging_config(config_path: Path) -> TaggingConfig:
    """Load the config file if present; otherwise return empty defaults.

    Unknown keys are ignored. Secrets do not belong in this file; the
    password or token comes from the command line or GITHUB_TOKEN.
    """
    if not config_path.exists():
        return TaggingConfig(host=None, username=None, repo=None)

    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    github = data.get("github", {})
    return TaggingConfig(
        host=_optional_str(github.get("host")),
        username=_optional_str(github.get("username")),
        repo=_optional_str(github.get("repo")),
    )


def build_repo_properties(
    config: TaggingConfig,
    *,
    username: str | None,
    password: str | None,
    repo: str | None,
    tag: str,
    commit_hash: str,
    host: str | None,
    body: str,
) -> RepoProperties:
    """Merge command-line values over config file values.

    Merge rules:
    - Explicit values (flags or their environment variables) win
    - Config file values fill the gaps
    - host falls back to the public API when neither sets it

    Raises:
        click.UsageError: If username, password or repo is still missing
    """
    merged_username = username or config.username
    merged_repo = repo or config.repo
    merged_host = host or config.host

    missing = [
        name
        for name, value in (
            ("--username", merged_username),
            ("--password", password),
            ("--repo", merged_repo),
        )
        if not value
    ]
    if missing:
        raise click.UsageError(f"Missing required value(s): {', '.join(missing)}")

    assert merged_username is not None
    assert password is not None
    assert merged_repo is not None
    return RepoProperties(
        username=merged_username,
        password=password,
        repo=merged_repo,
        tag=tag,
        hash=commit_hash,
        host=merged_host,
        body=body,
    )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
