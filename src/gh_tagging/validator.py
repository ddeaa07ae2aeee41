"""Check whether a tag exists and points at the expected commit."""

import logging

from gh_tagging.gateway.abc import GitHubTagGateway, GitHubTransportError
from gh_tagging.schemas import TagRef, parse_tag_refs
from gh_tagging.types import RepoProperties, ValidationResult

logger = logging.getLogger(__name__)

TAG_MISSING = ValidationResult(tag_doesnt_exist=True, tag_exists_with_provided_hash=False)
TAG_MATCHES = ValidationResult(tag_doesnt_exist=False, tag_exists_with_provided_hash=True)
TAG_UNKNOWN = ValidationResult(tag_doesnt_exist=False, tag_exists_with_provided_hash=False)


def validate_tag(github: GitHubTagGateway, props: RepoProperties) -> ValidationResult:
    """Look up props.tag and compare its sha with props.hash.

    Returns:
        TAG_MISSING on 404 or when the body only names other refs,
        TAG_MATCHES on 200 with the expected sha, and
        TAG_UNKNOWN for everything else: a different sha, an unreadable body,
        any other status or a transport failure.
    """
    try:
        response = github.get_tag_ref(props)
    except GitHubTransportError as e:
        logger.warning("Could not look up tag %s in %s: %s", props.tag, props.repo, e)
        return TAG_UNKNOWN

    if response.status_code == 404:
        logger.debug("Tag %s not found in %s", props.tag, props.repo)
        return TAG_MISSING

    if response.status_code != 200:
        logger.warning(
            "Unexpected status %d looking up tag %s in %s",
            response.status_code,
            props.tag,
            props.repo,
        )
        return TAG_UNKNOWN

    parsed = parse_tag_refs(response.text)
    if parsed is None:
        logger.warning("Unreadable response body looking up tag %s in %s", props.tag, props.repo)
        return TAG_UNKNOWN

    if isinstance(parsed, list):
        ref = _find_exact_ref(parsed, props.tag)
    elif parsed.ref is None:
        # A bare object without a ref name is taken at its word
        ref = parsed
    else:
        ref = _find_exact_ref([parsed], props.tag)

    if ref is None:
        logger.debug("Tag %s not found in %s (other refs only)", props.tag, props.repo)
        return TAG_MISSING

    if ref.sha == props.hash:
        logger.debug("Tag %s in %s points at %s", props.tag, props.repo, props.hash)
        return TAG_MATCHES

    logger.warning(
        "Tag %s in %s points at %s, expected %s",
        props.tag,
        props.repo,
        ref.sha,
        props.hash,
    )
    return TAG_UNKNOWN


def _find_exact_ref(refs: list[TagRef], tag: str) -> TagRef | None:
    expected_ref = f"refs/tags/{tag}"
    for ref in refs:
        if ref.ref == expected_ref:
            return ref
    return None
