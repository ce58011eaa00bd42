"""Tests for bearer-token helpers."""

from apicall_sdk._internal.dispatch.auth import (
    ACCESS_TOKEN_COOKIE,
    bearer_header,
    read_access_token,
)


class TestBearerHeader:
    """Tests for bearer_header."""

    def test_with_token(self):
        """Should prefix the token with Bearer."""
        assert bearer_header("abc") == {"Authorization": "Bearer abc"}

    def test_without_token(self):
        """Should render a missing token as the literal 'undefined'."""
        assert bearer_header(None) == {"Authorization": "Bearer undefined"}

    def test_empty_token_is_kept(self):
        """An empty token is not the same as a missing one."""
        assert bearer_header("") == {"Authorization": "Bearer "}

    def test_returns_single_entry(self):
        """Header mapping should contain only Authorization."""
        assert list(bearer_header("abc")) == ["Authorization"]


class TestReadAccessToken:
    """Tests for read_access_token."""

    def test_reads_access_token_cookie(self):
        """Should read the accessToken cookie."""
        assert ACCESS_TOKEN_COOKIE == "accessToken"
        assert read_access_token({"accessToken": "abc", "other": "x"}) == "abc"

    def test_missing_cookie(self):
        """Should return None when the cookie is absent."""
        assert read_access_token({"sessionid": "x"}) is None

    def test_no_cookie_store(self):
        """Should return None when there is no cookie store."""
        assert read_access_token(None) is None

    def test_custom_cookie_store(self):
        """Any object with a get method should work."""

        class Cookies:
            def get(self, key):
                return "from-store" if key == "accessToken" else None

        assert read_access_token(Cookies()) == "from-store"
