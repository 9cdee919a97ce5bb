"""Root URI template handler.

Decorates another ``UriTemplateHandler`` so that root-relative templates
(those starting with ``/``) resolve against a fixed root URI::

    handler = RootUriTemplateHandler("https://api.example.com", DefaultUriTemplateHandler())
    handler.expand("/users/{id}", {"id": 7})
    # URL('https://api.example.com/users/7')
    handler.expand("https://other.example.com/ping", {})
    # URL('https://other.example.com/ping')

The relative/absolute decision looks only at the first character of the
raw template, before any variable is substituted. The root URI is
concatenated as given: a root ending in ``/`` produces ``//``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wren.errors import InvalidArgumentError
from wren.templating.default import DefaultUriTemplateHandler
from wren.templating.protocol import (
    PositionalVariables,
    TemplateHandlerHolder,
    UriTemplateHandler,
    UriVariables,
)

logger = logging.getLogger("wren.templating")

_sentinel: Any = object()


class RootUriTemplateHandler:
    """Prefix root-relative templates with a root URI, then delegate.

    Immutable after construction. Holds no per-call state, so one
    instance can serve concurrent callers as long as the delegate can.
    """

    __slots__ = ("_delegate", "_root_uri")

    def __init__(self, root_uri: str, delegate: UriTemplateHandler = _sentinel) -> None:
        if root_uri is None:
            msg = "Root URI must not be None"
            raise InvalidArgumentError(msg)
        if delegate is _sentinel:
            delegate = DefaultUriTemplateHandler()
        elif delegate is None:
            msg = "Handler must not be None (a delegate template handler is required)"
            raise InvalidArgumentError(msg)
        object.__setattr__(self, "_root_uri", root_uri)
        object.__setattr__(self, "_delegate", delegate)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def root_uri(self) -> str:
        """The root URI prepended to root-relative templates."""
        return self._root_uri

    @property
    def delegate(self) -> UriTemplateHandler:
        """The wrapped handler that performs the actual expansion."""
        return self._delegate

    def expand(self, template: str, variables: UriVariables) -> httpx.URL:
        return self._delegate.expand(self._apply_root(template), variables)

    def expand_positional(self, template: str, values: PositionalVariables) -> httpx.URL:
        return self._delegate.expand_positional(self._apply_root(template), values)

    def _apply_root(self, template: str) -> str:
        if template.startswith("/"):
            return self._root_uri + template
        return template

    @classmethod
    def add_to(cls, client: TemplateHandlerHolder, root_uri: str) -> RootUriTemplateHandler:
        """Wrap *client*'s current template handler and install the result.

        The client's previous handler becomes the delegate, so templates
        that are not root-relative expand exactly as before. Mutates
        *client* and returns the newly installed handler.
        """
        handler = cls(root_uri, client.uri_template_handler)
        client.uri_template_handler = handler
        logger.debug("Installed root URI %r on %s", root_uri, type(client).__name__)
        return handler

    def __repr__(self) -> str:
        return f"RootUriTemplateHandler(root_uri={self._root_uri!r}, delegate={self._delegate!r})"
