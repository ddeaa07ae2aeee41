"""Pydantic models for the GitHub refs and releases JSON payloads.

Success and error bodies differ in shape, so every response field is optional
and decoding never raises: a body that is not JSON or does not fit the model
decodes to None.
"""

import json

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class _ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class GitObject(_ResponseModel):
    """Object a git ref points at (a commit, or a tag object for annotated tags)."""

    sha: str | None = None
    type: str | None = None
    url: str | None = None


class TagRef(_ResponseModel):
    """Single entry from `GET /repos/{repo}/git/refs/tags/{tag}`."""

    ref: str | None = None
    object: GitObject | None = None

    @property
    def sha(self) -> str | None:
        if self.object is None:
            return None
        return self.object.sha


class GitHubError(_ResponseModel):
    """Entry of the `errors` list in a 4xx response body."""

    code: str | None = None
    resource: str | None = None
    field: str | None = None


class GitHubBadResponse(_ResponseModel):
    """Error body returned by the GitHub REST API."""

    message: str | None = None
    errors: list[GitHubError] = Field(default_factory=list)

    def has_error_code(self, code: str) -> bool:
        return any(error.code == code for error in self.errors)


class Release(_ResponseModel):
    """Subset of the release object returned on 201 Created."""

    id: int | None = None
    tag_name: str | None = None
    name: str | None = None
    html_url: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None


class ReleaseRequest(BaseModel):
    """Body of `POST /repos/{repo}/releases`."""

    model_config = ConfigDict(frozen=True)

    tag_name: str
    target_commitish: str
    name: str
    body: str = ""
    prerelease: bool = False
    draft: bool = False


def parse_tag_refs(text: str) -> TagRef | list[TagRef] | None:
    """Decode a refs lookup body.

    GitHub returns a single object for an exact match and a list when the
    requested name is only a prefix of existing refs.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None

    try:
        if isinstance(data, list):
            return [TagRef.model_validate(item) for item in data]
        return TagRef.model_validate(data)
    except ValidationError:
        return None


def parse_bad_response(text: str) -> GitHubBadResponse | None:
    try:
        return GitHubBadResponse.model_validate_json(text)
    except ValidationError:
        return None


def parse_release(text: str) -> Release | None:
    try:
        return Release.model_validate_json(text)
    except ValidationError:
        return None
