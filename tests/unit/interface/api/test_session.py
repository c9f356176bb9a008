"""Unit tests for session token extraction."""

from ngestream.interface.api.session import session_token


class TestSessionToken:
    """Tests for session_token."""

    def test_bearer_header(self):
        assert session_token("Bearer abc.def.ghi", None) == "abc.def.ghi"

    def test_header_wins_over_cookie(self):
        assert session_token("Bearer from-header", "from-cookie") == "from-header"

    def test_cookie_fallback(self):
        assert session_token(None, "from-cookie") == "from-cookie"

    def test_non_bearer_header_ignored(self):
        assert session_token("Basic dXNlcjpwYXNz", None) is None

    def test_empty_bearer_is_missing(self):
        assert session_token("Bearer ", None) is None
