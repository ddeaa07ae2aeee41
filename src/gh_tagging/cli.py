"""Static CLI definition for gh-tagging."""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import click

from gh_tagging.config import DEFAULT_CONFIG_FILENAME, build_repo_properties, load_tagging_config
from gh_tagging.creator import create_tag
from gh_tagging.gateway.abc import GitHubTagGateway
from gh_tagging.gateway.real import RealGitHubTagGateway
from gh_tagging.validator import validate_tag

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


class TaggingContext:
    """Context object for gh-tagging CLI commands."""

    def __init__(self, github: GitHubTagGateway, config_path: Path) -> None:
        self.github = github
        self.config_path = config_path


pass_context = click.make_pass_decorator(TaggingContext)


def _repo_options(fn: Callable[..., None]) -> Callable[..., None]:
    """Options shared by every command that talks to a repository."""
    decorators = [
        click.option("--tag", required=True, help="Tag name"),
        click.option("--hash", "commit_hash", required=True, help="Expected commit sha"),
        click.option("--repo", help="Repository as owner/name"),
        click.option("--username", envvar="GITHUB_USERNAME", help="GitHub username"),
        click.option(
            "--password",
            envvar="GITHUB_TOKEN",
            help="GitHub password or token (default: $GITHUB_TOKEN)",
        ),
        click.option(
            "--host",
            envvar="GITHUB_API_URL",
            help="API base URL for GitHub Enterprise (default: https://api.github.com)",
        ),
        click.option("--json-output", "json_output", is_flag=True, help="Output as JSON"),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


@click.group(name="gh-tagging", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gh-tagging")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    help="Config file with [github] defaults",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Path) -> None:
    """Validate GitHub tags and create releases for missing ones."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = TaggingContext(github=RealGitHubTagGateway(), config_path=config_path)
    else:
        ctx.obj.config_path = config_path


@cli.command("validate")
@_repo_options
@pass_context
def validate_cmd(
    ctx: TaggingContext,
    tag: str,
    commit_hash: str,
    repo: str | None,
    username: str | None,
    password: str | None,
    host: str | None,
    json_output: bool,
) -> None:
    """Check whether a tag exists and points at the expected commit.

    Prints `matches`, `missing` or `unknown`. Exits 1 when the lookup was
    inconclusive (bad credentials, server error, wrong commit).
    """
    props = build_repo_properties(
        load_tagging_config(ctx.config_path),
        username=username,
        password=password,
        repo=repo,
        tag=tag,
        commit_hash=commit_hash,
        host=host,
        body="",
    )
    result = validate_tag(ctx.github, props)

    if json_output:
        click.echo(json.dumps(result._asdict()))
    elif result.tag_exists_with_provided_hash:
        click.echo("matches")
    elif result.tag_doesnt_exist:
        click.echo("missing")
    else:
        click.echo("unknown")

    if not result.tag_exists_with_provided_hash and not result.tag_doesnt_exist:
        raise SystemExit(1)


@cli.command("create")
@_repo_options
@click.option("--body", default="", help="Release body text")
@click.option(
    "--body-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the release body from a file",
)
@pass_context
def create_cmd(
    ctx: TaggingContext,
    tag: str,
    commit_hash: str,
    repo: str | None,
    username: str | None,
    password: str | None,
    host: str | None,
    json_output: bool,
    body: str,
    body_file: Path | None,
) -> None:
    """Create a release for a tag unless it already points at the expected commit."""
    if body and body_file is not None:
        raise click.UsageError("--body and --body-file are mutually exclusive")
    if body_file is not None:
        body = body_file.read_text(encoding="utf-8")

    props = build_repo_properties(
        load_tagging_config(ctx.config_path),
        username=username,
        password=password,
        repo=repo,
        tag=tag,
        commit_hash=commit_hash,
        host=host,
        body=body,
    )
    success = create_tag(ctx.github, props)

    if json_output:
        click.echo(json.dumps({"success": success, "tag": tag}))
    elif success:
        click.echo(f"Tag {tag} is at {commit_hash}")

    if not success:
        if not json_output:
            click.echo(f"Error: could not create release for tag {tag}", err=True)
        raise SystemExit(1)
