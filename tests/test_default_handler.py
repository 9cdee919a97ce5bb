"""Tests for wren.templating.default — DefaultUriTemplateHandler."""

import httpx
import pytest

from wren.errors import UriTemplateError
from wren.templating.default import DefaultUriTemplateHandler
from wren.templating.root import RootUriTemplateHandler


@pytest.fixture
def handler() -> DefaultUriTemplateHandler:
    return DefaultUriTemplateHandler()


class TestExpand:
    def test_returns_httpx_url(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/users/{id}", {"id": 42})
        assert isinstance(url, httpx.URL)
        assert url == httpx.URL("https://example.com/users/42")

    def test_no_variables(self, handler: DefaultUriTemplateHandler) -> None:
        assert str(handler.expand("https://example.com/hello", {})) == "https://example.com/hello"

    def test_relative_template(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("/users/{id}", {"id": 1})
        assert url.path == "/users/1"
        assert url.is_relative_url

    def test_repeated_variable(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/{x}/{x}", {"x": "a"})
        assert url.path == "/a/a"

    def test_extra_variables_ignored(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/{x}", {"x": "a", "unused": "b"})
        assert url.path == "/a"

    def test_missing_variable(self, handler: DefaultUriTemplateHandler) -> None:
        with pytest.raises(UriTemplateError, match="missing value for variable 'id'"):
            handler.expand("/users/{id}", {})

    def test_pattern_ignored(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/users/{id:\\d+}", {"id": 5})
        assert url.path == "/users/5"

    def test_none_value_expands_empty(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/search?q={q}", {"q": None})
        assert str(url) == "https://example.com/search?q="


class TestEncoding:
    def test_reserved_characters_encoded(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/files/{name}", {"name": "a/b?c&d"})
        assert str(url) == "https://example.com/files/a%2Fb%3Fc%26d"

    def test_space_encoded(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/{q}", {"q": "hello world"})
        assert str(url) == "https://example.com/hello%20world"

    def test_literal_text_untouched(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand("https://example.com/a/b?x={x}&y=1", {"x": "v"})
        assert str(url) == "https://example.com/a/b?x=v&y=1"

    def test_encoding_disabled(self) -> None:
        handler = DefaultUriTemplateHandler(encode_values=False)
        url = handler.expand("https://example.com/files/{path}", {"path": "a/b"})
        assert url.path == "/files/a/b"
        assert handler.encode_values is False


class TestExpandPositional:
    def test_binds_in_order(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand_positional("https://example.com/{a}/{b}", ["one", 2])
        assert url.path == "/one/2"

    def test_repeated_name_reuses_value(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand_positional("https://example.com/{a}/{b}/{a}", ["x", "y"])
        assert url.path == "/x/y/x"

    def test_empty_values_no_variables(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand_positional("https://example.com/hello", [])
        assert str(url) == "https://example.com/hello"

    def test_surplus_values_ignored(self, handler: DefaultUriTemplateHandler) -> None:
        url = handler.expand_positional("https://example.com/{a}", ("x", "y", "z"))
        assert url.path == "/x"

    def test_too_few_values(self, handler: DefaultUriTemplateHandler) -> None:
        with pytest.raises(UriTemplateError, match="expected 2 positional values, got 1"):
            handler.expand_positional("/{a}/{b}", ["x"])


def test_repr() -> None:
    assert repr(DefaultUriTemplateHandler()) == "DefaultUriTemplateHandler(encode_values=True)"


class TestInvalidUrl:
    def test_invalid_port_raises_invalid_url(self, handler: DefaultUriTemplateHandler) -> None:
        with pytest.raises(httpx.InvalidURL):
            handler.expand("https://example.com:{port}/x", {"port": "bad"})

    def test_propagates_through_root_handler(self) -> None:
        root = RootUriTemplateHandler("https://example.com:bad", DefaultUriTemplateHandler())
        with pytest.raises(httpx.InvalidURL):
            root.expand("/x", {})
