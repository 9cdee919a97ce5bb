"""Tests for wren.errors — exception hierarchy and error messages."""

from wren.errors import (
    ConfigurationError,
    InvalidArgumentError,
    UriTemplateError,
    WrenError,
)


class TestHierarchy:
    def test_invalid_argument_is_wren_error(self) -> None:
        assert issubclass(InvalidArgumentError, WrenError)

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)

    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_uri_template_error_is_value_error(self) -> None:
        assert issubclass(UriTemplateError, WrenError)
        assert issubclass(UriTemplateError, ValueError)


class TestUriTemplateError:
    def test_attributes(self) -> None:
        err = UriTemplateError("/x/{", "unclosed '{' at offset 3")
        assert err.template == "/x/{"
        assert err.detail == "unclosed '{' at offset 3"

    def test_str(self) -> None:
        err = UriTemplateError("/x/{", "unclosed '{' at offset 3")
        assert str(err) == "Invalid URI template '/x/{': unclosed '{' at offset 3"
