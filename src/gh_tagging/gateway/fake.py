"""Fake GitHub tag gateway for testing."""

from gh_tagging.gateway.abc import GitHubTagGateway, GitHubTransportError
from gh_tagging.schemas import ReleaseRequest
from gh_tagging.types import ApiResponse, RepoProperties


class FakeGitHubTagGateway(GitHubTagGateway):
    """In-memory fake implementation of the tag and release endpoints.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        tag_ref_response: ApiResponse | None = None,
        create_release_response: ApiResponse | None = None,
        get_tag_ref_error: str | None = None,
        create_release_error: str | None = None,
    ) -> None:
        """Create FakeGitHubTagGateway with pre-configured state.

        Args:
            tag_ref_response: Returned by get_tag_ref() (default: 404, no tag)
            create_release_response: Returned by create_release() (default: 201)
            get_tag_ref_error: If set, get_tag_ref() raises GitHubTransportError
            create_release_error: If set, create_release() raises GitHubTransportError
        """
        self._tag_ref_response = tag_ref_response or ApiResponse(status_code=404)
        self._create_release_response = create_release_response or ApiResponse(status_code=201)
        self._get_tag_ref_error = get_tag_ref_error
        self._create_release_error = create_release_error
        self._get_tag_ref_calls: list[RepoProperties] = []
        self._create_release_calls: list[tuple[RepoProperties, ReleaseRequest]] = []

    def get_tag_ref(self, props: RepoProperties) -> ApiResponse:
        self._get_tag_ref_calls.append(props)
        if self._get_tag_ref_error is not None:
            raise GitHubTransportError(self._get_tag_ref_error)
        return self._tag_ref_response

    def create_release(self, props: RepoProperties, release: ReleaseRequest) -> ApiResponse:
        self._create_release_calls.append((props, release))
        if self._create_release_error is not None:
            raise GitHubTransportError(self._create_release_error)
        return self._create_release_response

    @property
    def get_tag_ref_calls(self) -> list[RepoProperties]:
        """Get the list of get_tag_ref() calls that were made."""
        return self._get_tag_ref_calls

    @property
    def create_release_calls(self) -> list[tuple[RepoProperties, ReleaseRequest]]:
        """Get the list of create_release() calls as (props, release) tuples."""
        return self._create_release_calls
