"""HTTP clients with pluggable URI template expansion.

``RestClient`` and ``AsyncRestClient`` wrap ``httpx.Client`` and
``httpx.AsyncClient``. Every request target is a URI template that is
expanded through the client's ``uri_template_handler`` before the
request is sent. Swap the handler to change how templates resolve::

    client = RestClient()
    RootUriTemplateHandler.add_to(client, "https://api.example.com")
    response = client.get("/users/{id}", {"id": 7})
    # GET https://api.example.com/users/7

Variables may be a mapping (named) or a sequence (positional)::

    client.get("/users/{id}/posts/{slug}", [7, "hello"])
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

import httpx

from wren.errors import InvalidArgumentError
from wren.templating.default import DefaultUriTemplateHandler
from wren.templating.protocol import UriTemplateHandler

logger = logging.getLogger("wren.client")

# Named mapping, positional sequence, or nothing
TemplateVariables: TypeAlias = Mapping[str, object] | Sequence[object] | None


class _TemplateExpansion:
    """Template handler plumbing shared by the sync and async clients."""

    __slots__ = ("_uri_template_handler",)

    _uri_template_handler: UriTemplateHandler

    def _init_handler(self, handler: UriTemplateHandler | None) -> None:
        self.uri_template_handler = handler if handler is not None else DefaultUriTemplateHandler()

    @property
    def uri_template_handler(self) -> UriTemplateHandler:
        """The handler used to expand request templates."""
        return self._uri_template_handler

    @uri_template_handler.setter
    def uri_template_handler(self, handler: UriTemplateHandler) -> None:
        if handler is None:
            msg = "URI template handler must not be None"
            raise InvalidArgumentError(msg)
        self._uri_template_handler = handler

    def expand(self, template: str, variables: TemplateVariables = None) -> httpx.URL:
        """Expand *template* with named or positional *variables*.

        ``None`` counts as an empty mapping. Strings and bytes are
        rejected as variables since they are almost always a mistake.
        """
        if variables is None:
            return self._uri_template_handler.expand(template, {})
        if isinstance(variables, Mapping):
            return self._uri_template_handler.expand(template, variables)
        if isinstance(variables, Sequence) and not isinstance(variables, (str, bytes)):
            return self._uri_template_handler.expand_positional(template, variables)
        msg = f"URI variables must be a mapping or a sequence, got {type(variables).__name__}"
        raise InvalidArgumentError(msg)


class RestClient(_TemplateExpansion):
    """Synchronous template-aware HTTP client.

    Closing it closes the wrapped ``httpx.Client``, whether it was
    created here or passed in.
    """

    __slots__ = ("_client",)

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        uri_template_handler: UriTemplateHandler | None = None,
    ) -> None:
        self._client = client if client is not None else httpx.Client()
        self._init_handler(uri_template_handler)

    @property
    def http(self) -> httpx.Client:
        """The underlying httpx client."""
        return self._client

    def request(
        self,
        method: str,
        template: str,
        variables: TemplateVariables = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Expand *template* and send a request to the resulting URL.

        Extra keyword arguments go to ``httpx.Client.request`` unchanged.
        """
        url = self.expand(template, variables)
        response = self._client.request(method, url, **kwargs)
        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    def get(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return self.request("GET", template, variables, **kwargs)

    def post(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return self.request("POST", template, variables, **kwargs)

    def put(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return self.request("PUT", template, variables, **kwargs)

    def patch(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return self.request("PATCH", template, variables, **kwargs)

    def delete(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return self.request("DELETE", template, variables, **kwargs)

    def get_json(self, template: str, variables: TemplateVariables = None, **kwargs: Any) -> Any:
        """GET *template* and decode the JSON body.

        Raises ``httpx.HTTPStatusError`` for 4xx/5xx responses.
        """
        response = self.get(template, variables, **kwargs)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class AsyncRestClient(_TemplateExpansion):
    """Async counterpart of ``RestClient`` wrapping ``httpx.AsyncClient``.

    Usage::

        async with AsyncRestClient() as client:
            RootUriTemplateHandler.add_to(client, "https://api.example.com")
            data = await client.get_json("/items/{id}", {"id": 3})
    """

    __slots__ = ("_client",)

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        uri_template_handler: UriTemplateHandler | None = None,
    ) -> None:
        self._client = client if client is not None else httpx.AsyncClient()
        self._init_handler(uri_template_handler)

    @property
    def http(self) -> httpx.AsyncClient:
        """The underlying httpx client."""
        return self._client

    async def request(
        self,
        method: str,
        template: str,
        variables: TemplateVariables = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Expand *template* and send a request to the resulting URL."""
        url = self.expand(template, variables)
        response = await self._client.request(method, url, **kwargs)
        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    async def get(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return await self.request("GET", template, variables, **kwargs)

    async def post(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return await self.request("POST", template, variables, **kwargs)

    async def put(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return await self.request("PUT", template, variables, **kwargs)

    async def patch(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return await self.request("PATCH", template, variables, **kwargs)

    async def delete(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> httpx.Response:
        return await self.request("DELETE", template, variables, **kwargs)

    async def get_json(
        self, template: str, variables: TemplateVariables = None, **kwargs: Any
    ) -> Any:
        """GET *template* and decode the JSON body."""
        response = await self.get(template, variables, **kwargs)
        response.raise_for_status()
        return response.json()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncRestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
