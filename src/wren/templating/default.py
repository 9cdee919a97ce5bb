"""Default URI template expansion.

Fills ``{name}`` placeholders from named or positional variables and
returns an ``httpx.URL``. Variable values are percent-encoded in full
(reserved characters such as ``/`` and ``?`` included), so a value can
never change the structure of the URL it is placed into. Template
literal text is passed through as written.
"""

from urllib.parse import quote

import httpx

from wren.errors import UriTemplateError
from wren.templating.parser import parse_template, variable_names
from wren.templating.protocol import PositionalVariables, UriVariables


class DefaultUriTemplateHandler:
    """Standalone template handler backed by ``parse_template``.

    Usage::

        handler = DefaultUriTemplateHandler()
        handler.expand("/users/{id}", {"id": 42})
        # URL('/users/42')
        handler.expand_positional("/users/{id}/posts/{slug}", [42, "hello world"])
        # URL('/users/42/posts/hello%20world')

    Instances hold no per-call state and can be shared freely.
    """

    __slots__ = ("_encode_values",)

    def __init__(self, *, encode_values: bool = True) -> None:
        self._encode_values = encode_values

    @property
    def encode_values(self) -> bool:
        """Whether substituted values are percent-encoded."""
        return self._encode_values

    def expand(self, template: str, variables: UriVariables) -> httpx.URL:
        """Expand *template* using named *variables*.

        Raises ``UriTemplateError`` if a placeholder has no matching key.
        """
        parts: list[str] = []
        for segment in parse_template(template):
            if not segment.is_variable:
                parts.append(segment.value)
                continue
            if segment.value not in variables:
                raise UriTemplateError(template, f"missing value for variable {segment.value!r}")
            parts.append(self._render(variables[segment.value]))
        return httpx.URL("".join(parts))

    def expand_positional(self, template: str, values: PositionalVariables) -> httpx.URL:
        """Expand *template* binding *values* to variables by position.

        Distinct names are bound in order of first appearance; a name
        used twice reuses its value. Surplus values are ignored.
        """
        names = variable_names(template)
        if len(values) < len(names):
            msg = f"expected {len(names)} positional values, got {len(values)}"
            raise UriTemplateError(template, msg)
        return self.expand(template, dict(zip(names, values, strict=False)))

    def _render(self, value: object) -> str:
        text = "" if value is None else str(value)
        if self._encode_values:
            return quote(text, safe="")
        return text

    def __repr__(self) -> str:
        return f"DefaultUriTemplateHandler(encode_values={self._encode_values!r})"
