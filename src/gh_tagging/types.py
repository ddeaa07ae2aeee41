"""Type definitions for tag validation and release creation."""

from dataclasses import dataclass
from typing import NamedTuple

DEFAULT_API_HOST = "https://api.github.com"


@dataclass(frozen=True)
class RepoProperties:
    """Coordinates and credentials for a single tag operation.

    Constructed once per operation and never mutated.
    """

    username: str
    password: str  # password or personal access token
    repo: str  # "owner/name"
    tag: str
    hash: str  # expected commit sha
    host: str | None = None  # API base URL override, None or "" means api.github.com
    body: str = ""  # release body text

    @property
    def api_base_url(self) -> str:
        if not self.host:
            return DEFAULT_API_HOST
        return self.host.rstrip("/")


class ValidationResult(NamedTuple):
    """Outcome of a tag lookup.

    Both fields False means the lookup was indeterminate (auth failure,
    server error, network error or an unexpected body).
    """

    tag_doesnt_exist: bool
    tag_exists_with_provided_hash: bool


@dataclass(frozen=True)
class ApiResponse:
    """Raw status and body of a GitHub REST call."""

    status_code: int
    text: str = ""
