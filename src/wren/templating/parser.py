"""URI template parsing.

Splits a template such as ``/users/{id}/posts/{slug:[a-z-]+}`` into
literal and variable segments. The part after ``:`` in a placeholder is
accepted for compatibility with route-style templates and ignored on
expansion.
"""

from dataclasses import dataclass
from functools import lru_cache

from wren.errors import UriTemplateError


@dataclass(frozen=True, slots=True)
class TemplateSegment:
    """A parsed piece of a URI template.

    Literal:  ``/users/``  (is_variable=False)
    Variable: ``{id}``     (is_variable=True, value="id")
    Pattern:  ``{id:\\d+}`` (is_variable=True, value="id", pattern="\\d+")
    """

    value: str
    is_variable: bool = False
    pattern: str | None = None


@lru_cache(maxsize=512)
def parse_template(template: str) -> tuple[TemplateSegment, ...]:
    """Parse *template* into a tuple of segments.

    Raises ``UriTemplateError`` for unbalanced or nested braces and
    empty variable names.

    Examples::

        "/hello"       -> (TemplateSegment("/hello"),)
        "/users/{id}"  -> (TemplateSegment("/users/"), TemplateSegment("id", is_variable=True))
    """
    segments: list[TemplateSegment] = []
    literal_start = 0
    pos = 0
    length = len(template)

    while pos < length:
        char = template[pos]
        if char == "}":
            raise UriTemplateError(template, f"unmatched '}}' at offset {pos}")
        if char != "{":
            pos += 1
            continue

        if pos > literal_start:
            segments.append(TemplateSegment(template[literal_start:pos]))

        close = template.find("}", pos + 1)
        if close == -1:
            raise UriTemplateError(template, f"unclosed '{{' at offset {pos}")
        inner = template[pos + 1 : close]
        if "{" in inner:
            raise UriTemplateError(template, f"nested '{{' inside variable at offset {pos}")

        name, sep, pattern = inner.partition(":")
        name = name.strip()
        if not name:
            raise UriTemplateError(template, f"empty variable name at offset {pos}")
        segments.append(TemplateSegment(name, is_variable=True, pattern=pattern if sep else None))

        pos = close + 1
        literal_start = pos

    if literal_start < length:
        segments.append(TemplateSegment(template[literal_start:]))
    return tuple(segments)


def variable_names(template: str) -> tuple[str, ...]:
    """Distinct variable names in *template*, in order of first appearance."""
    seen: dict[str, None] = {}
    for segment in parse_template(template):
        if segment.is_variable:
            seen.setdefault(segment.value, None)
    return tuple(seen)
