"""Tests for transport models."""

from typing import get_args

from apicall_sdk._internal.transport.models import HTTP_VERBS, ApiResponse, HttpVerb


class TestApiResponse:
    """Tests for ApiResponse."""

    def test_defaults(self):
        """Should default to no data, status 200 and no headers."""
        response = ApiResponse()
        assert response.data is None
        assert response.status_code == 200
        assert response.headers == {}

    def test_data_passes_through_untyped(self):
        """data should accept any shape without validation."""
        assert ApiResponse(data=[1, "two", {"three": 3}]).data == [1, "two", {"three": 3}]
        assert ApiResponse(data="plain text").data == "plain text"


class TestHttpVerb:
    """Tests for the verb literal."""

    def test_verbs_match_literal(self):
        """HTTP_VERBS should list exactly the literal's values."""
        assert set(HTTP_VERBS) == set(get_args(HttpVerb))
        assert set(HTTP_VERBS) == {"get", "post", "put", "delete", "patch"}
