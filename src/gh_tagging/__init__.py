"""gh-tagging CLI entry point.

This package validates that a tag exists in a GitHub repository at an expected
commit and creates a release for it when it does not. See `gh-tagging --help`.
"""

from gh_tagging.cli import cli


def main() -> None:
    """CLI entry point used by the `gh-tagging` console script."""
    cli()
