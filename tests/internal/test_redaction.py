"""Tests for header redaction."""

from apicall_sdk._internal.redaction import REDACTED_VALUE, redact_headers


class TestRedactHeaders:
    """Tests for redact_headers function."""

    def test_redacts_authorization(self):
        """Should redact the Authorization header."""
        result = redact_headers({"Authorization": "Bearer abc", "Accept": "application/json"})
        assert result["Authorization"] == REDACTED_VALUE
        assert result["Accept"] == "application/json"

    def test_case_insensitive(self):
        """Should match keys regardless of case."""
        result = redact_headers({"AUTHORIZATION": "a", "authorization": "b", "Cookie": "c"})
        assert result == {
            "AUTHORIZATION": REDACTED_VALUE,
            "authorization": REDACTED_VALUE,
            "Cookie": REDACTED_VALUE,
        }

    def test_redacts_token_params(self):
        """Should redact token-like query params too."""
        result = redact_headers({"accessToken": "abc", "page": 2})
        assert result["accessToken"] == REDACTED_VALUE
        assert result["page"] == 2

    def test_does_not_mutate_input(self):
        """Should return a copy and leave the original untouched."""
        headers = {"Authorization": "Bearer abc"}
        redact_headers(headers)
        assert headers == {"Authorization": "Bearer abc"}

    def test_none_and_empty(self):
        """None and empty mappings should yield an empty dict."""
        assert redact_headers(None) == {}
        assert redact_headers({}) == {}

    def test_non_string_keys_pass_through(self):
        """Non-string keys are never treated as sensitive."""
        assert redact_headers({1: "one"}) == {1: "one"}
