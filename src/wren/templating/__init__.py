"""URI templates: the handler protocol, the default expander, and the
root URI decorator."""

from wren.templating.default import DefaultUriTemplateHandler
from wren.templating.parser import TemplateSegment, parse_template, variable_names
from wren.templating.protocol import (
    PositionalVariables,
    TemplateHandlerHolder,
    UriTemplateHandler,
    UriVariables,
)
from wren.templating.root import RootUriTemplateHandler

__all__ = [
    "DefaultUriTemplateHandler",
    "PositionalVariables",
    "RootUriTemplateHandler",
    "TemplateHandlerHolder",
    "TemplateSegment",
    "UriTemplateHandler",
    "UriVariables",
    "parse_template",
    "variable_names",
]
