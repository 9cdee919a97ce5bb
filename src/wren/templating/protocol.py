"""URI template handler protocol.

A template handler is any object with these two methods::

    def expand(self, template: str, variables: UriVariables) -> httpx.URL: ...
    def expand_positional(self, template: str, values: PositionalVariables) -> httpx.URL: ...

No base class required. Handlers compose by wrapping one another:
``RootUriTemplateHandler`` decorates any other handler, including
user-supplied ones.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, TypeAlias

import httpx

# Named variables: placeholder name -> substitution value
UriVariables: TypeAlias = Mapping[str, object]

# Positional variables, bound to placeholders in order of first appearance
PositionalVariables: TypeAlias = Sequence[object]


class UriTemplateHandler(Protocol):
    """Protocol for expanding URI templates into concrete URLs."""

    def expand(self, template: str, variables: UriVariables) -> httpx.URL: ...

    def expand_positional(self, template: str, values: PositionalVariables) -> httpx.URL: ...


class TemplateHandlerHolder(Protocol):
    """Anything that exposes a replaceable ``uri_template_handler``.

    Both ``RestClient`` and ``AsyncRestClient`` satisfy this.
    """

    uri_template_handler: UriTemplateHandler
