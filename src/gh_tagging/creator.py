"""Create a GitHub release for a tag unless it already points at the right commit."""

import logging

from gh_tagging.gateway.abc import GitHubTagGateway, GitHubTransportError
from gh_tagging.schemas import ReleaseRequest, parse_bad_response, parse_release
from gh_tagging.types import RepoProperties
from gh_tagging.validator import validate_tag

logger = logging.getLogger(__name__)

ALREADY_EXISTS_CODE = "already_exists"


def build_release_request(props: RepoProperties) -> ReleaseRequest:
    """Release payload for props: named after the tag, never draft or prerelease."""
    return ReleaseRequest(
        tag_name=props.tag,
        target_commitish=props.hash,
        name=props.tag,
        body=props.body,
        prerelease=False,
        draft=False,
    )


def create_tag(github: GitHubTagGateway, props: RepoProperties) -> bool:
    """Ensure props.tag exists at props.hash, creating a release if needed.

    Returns True when the tag already points at props.hash (no release is
    created) or when GitHub answers the release request with 201 Created.
    Every other outcome returns False, including a rejection with the
    `already_exists` error code.
    """
    validation = validate_tag(github, props)
    if validation.tag_exists_with_provided_hash:
        logger.debug("Tag %s already exists in %s at %s", props.tag, props.repo, props.hash)
        return True

    release = build_release_request(props)
    try:
        response = github.create_release(props, release)
    except GitHubTransportError as e:
        logger.warning("Could not create release %s in %s: %s", props.tag, props.repo, e)
        return False

    if response.status_code == 201:
        created = parse_release(response.text)
        html_url = created.html_url if created is not None else None
        logger.info("Created release %s in %s (%s)", props.tag, props.repo, html_url or "no url")
        return True

    error = parse_bad_response(response.text)
    if error is not None and error.has_error_code(ALREADY_EXISTS_CODE):
        logger.warning("Release %s already exists in %s", props.tag, props.repo)
        return False

    message = error.message if error is not None and error.message else response.text
    logger.warning(
        "Creating release %s in %s failed with status %d: %s",
        props.tag,
        props.repo,
        response.status_code,
        message,
    )
    return False
