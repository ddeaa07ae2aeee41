"""Tests for response body decoding."""

import json

from gh_tagging.schemas import (
    GitHubBadResponse,
    TagRef,
    parse_bad_response,
    parse_release,
    parse_tag_refs,
)


class TestParseTagRefs:
    """Tests for parse_tag_refs."""

    def test_single_object(self) -> None:
        parsed = parse_tag_refs(json.dumps({"ref": "refs/tags/v1", "object": {"sha": "abc"}}))

        assert isinstance(parsed, TagRef)
        assert parsed.ref == "refs/tags/v1"
        assert parsed.sha == "abc"

    def test_list(self) -> None:
        parsed = parse_tag_refs(json.dumps([{"ref": "refs/tags/v1.0"}, {"ref": "refs/tags/v1.1"}]))

        assert isinstance(parsed, list)
        assert [r.ref for r in parsed] == ["refs/tags/v1.0", "refs/tags/v1.1"]

    def test_missing_object_has_no_sha(self) -> None:
        parsed = parse_tag_refs(json.dumps({"ref": "refs/tags/v1"}))

        assert isinstance(parsed, TagRef)
        assert parsed.sha is None

    def test_empty_text(self) -> None:
        assert parse_tag_refs("") is None

    def test_not_json(self) -> None:
        assert parse_tag_refs("Bad gateway") is None

    def test_wrong_shape(self) -> None:
        assert parse_tag_refs(json.dumps({"object": "not-an-object"})) is None

    def test_json_scalar(self) -> None:
        assert parse_tag_refs("42") is None


class TestParseBadResponse:
    """Tests for parse_bad_response."""

    def test_error_codes(self) -> None:
        body = json.dumps(
            {
                "message": "Validation Failed",
                "errors": [{"resource": "Release", "code": "already_exists", "field": "tag_name"}],
                "documentation_url": "https://docs.github.com/rest/releases/releases",
            }
        )

        parsed = parse_bad_response(body)

        assert parsed is not None
        assert parsed.message == "Validation Failed"
        assert parsed.has_error_code("already_exists")
        assert not parsed.has_error_code("invalid")

    def test_message_only(self) -> None:
        parsed = parse_bad_response(json.dumps({"message": "Bad credentials"}))

        assert parsed == GitHubBadResponse(message="Bad credentials", errors=[])

    def test_empty_text(self) -> None:
        assert parse_bad_response("") is None


class TestParseRelease:
    """Tests for parse_release."""

    def test_created_release(self) -> None:
        parsed = parse_release(
            json.dumps({"id": 7, "tag_name": "v1", "html_url": "https://github.com/o/r/releases/v1"})
        )

        assert parsed is not None
        assert parsed.id == 7
        assert parsed.html_url == "https://github.com/o/r/releases/v1"

    def test_empty_text(self) -> None:
        assert parse_release("") is None
