"""Tests for the core error hierarchy."""

from unifai.core.errors import (
    APIError,
    ArgumentDecodeError,
    ConfigError,
    DecodeError,
    HTTPStatusError,
    InvalidToolCallError,
    ToolError,
    TransportError,
    UnifaiError,
    UnknownToolError,
)


class TestHierarchy:
    """All errors inherit from UnifaiError."""

    def test_api_errors(self):
        for err in (
            TransportError("refused"),
            HTTPStatusError(500, "boom"),
            DecodeError("bad json"),
        ):
            assert isinstance(err, APIError)
            assert isinstance(err, UnifaiError)

    def test_tool_errors(self):
        for err in (
            ArgumentDecodeError("bad args"),
            UnknownToolError("nope"),
            InvalidToolCallError("not a call"),
        ):
            assert isinstance(err, ToolError)
            assert isinstance(err, UnifaiError)

    def test_config_error(self):
        assert isinstance(ConfigError("bad config"), UnifaiError)

    def test_tool_errors_are_not_api_errors(self):
        assert not isinstance(UnknownToolError("x"), APIError)


class TestHTTPStatusError:
    def test_attributes(self):
        err = HTTPStatusError(404, "not found")
        assert err.status_code == 404
        assert err.body == "not found"

    def test_message_format(self):
        err = HTTPStatusError(404, "not found")
        assert str(err) == "HTTP error! status: 404, body: not found"

    def test_empty_body(self):
        err = HTTPStatusError(502, "")
        assert err.body == ""
        assert "502" in str(err)


class TestUnknownToolError:
    def test_name_attribute(self):
        err = UnknownToolError("does_not_exist")
        assert err.name == "does_not_exist"

    def test_message_format(self):
        assert str(UnknownToolError("foo")) == "unknown tool name: foo"
