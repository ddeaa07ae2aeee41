"""Production implementation of the GitHub tag gateway."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError, version
from urllib.parse import quote

import httpx

from gh_tagging.gateway.abc import GitHubTagGateway, GitHubTransportError
from gh_tagging.schemas import ReleaseRequest
from gh_tagging.types import ApiResponse, RepoProperties

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github+json"


def _user_agent() -> str:
    try:
        return f"gh-tagging/{version('gh-tagging')}"
    except PackageNotFoundError:
        return "gh-tagging"


class RealGitHubTagGateway(GitHubTagGateway):
    """Production implementation using httpx with HTTP basic auth.

    A fresh client is opened per call unless one is injected. An injected
    client is owned by the caller and is never closed here.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    def get_tag_ref(self, props: RepoProperties) -> ApiResponse:
        # Tag names may contain #, ? or %
        tag = quote(props.tag, safe="/")
        url = f"{props.api_base_url}/repos/{props.repo}/git/refs/tags/{tag}"
        return self._request("GET", url, props)

    def create_release(self, props: RepoProperties, release: ReleaseRequest) -> ApiResponse:
        url = f"{props.api_base_url}/repos/{props.repo}/releases"
        return self._request("POST", url, props, payload=release.model_dump())

    def _request(
        self,
        method: str,
        url: str,
        props: RepoProperties,
        *,
        payload: dict[str, object] | None = None,
    ) -> ApiResponse:
        headers = {"Accept": GITHUB_ACCEPT, "User-Agent": _user_agent()}
        logger.debug("%s %s", method, url)
        try:
            with self._open_client() as client:
                response = client.request(
                    method,
                    url,
                    headers=headers,
                    auth=httpx.BasicAuth(props.username, props.password),
                    json=payload,
                )
        except httpx.HTTPError as e:
            raise GitHubTransportError(f"{method} {url} failed: {e}") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return ApiResponse(status_code=response.status_code, text=response.text)

    @contextmanager
    def _open_client(self) -> Iterator[httpx.Client]:
        if self._client is not None:
            yield self._client
            return
        with httpx.Client() as client:
            yield client
