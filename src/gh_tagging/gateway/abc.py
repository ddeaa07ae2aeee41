"""Abstract base class for the GitHub tag and release endpoints."""

from abc import ABC, abstractmethod

from gh_tagging.schemas import ReleaseRequest
from gh_tagging.types import ApiResponse, RepoProperties


class GitHubTransportError(RuntimeError):
    """Request never produced an HTTP response (DNS, connect, timeout, ...)."""


class GitHubTagGateway(ABC):
    """Abstract interface for the two REST calls used by tag validation.

    All implementations (real and fake) must implement this interface.
    Implementations return whatever status GitHub answered with; interpreting
    it is left to the caller.
    """

    @abstractmethod
    def get_tag_ref(self, props: RepoProperties) -> ApiResponse:
        """Look up the tag reference named by props.tag.

        Args:
            props: Repository coordinates and credentials

        Returns:
            ApiResponse with the HTTP status and raw body

        Raises:
            GitHubTransportError: If no response was received
        """
        ...

    @abstractmethod
    def create_release(self, props: RepoProperties, release: ReleaseRequest) -> ApiResponse:
        """Create a release (and its tag, if missing) in props.repo.

        Args:
            props: Repository coordinates and credentials
            release: Release payload to send

        Returns:
            ApiResponse with the HTTP status and raw body

        Raises:
            GitHubTransportError: If no response was received
        """
        ...
