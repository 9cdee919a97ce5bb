"""Wren exception hierarchy.

Shared across the template handlers, the clients, and configuration so
every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class InvalidArgumentError(WrenError, ValueError):
    """Raised when a required argument is missing or unusable.

    Raised at construction time so misconfiguration fails immediately
    instead of on first use.
    """


class ConfigurationError(WrenError):
    """Raised when client configuration is invalid.

    Typically raised by ``ClientConfig.from_env()`` for values that
    cannot be parsed.
    """


class UriTemplateError(WrenError, ValueError):
    """A URI template is malformed or cannot be expanded.

    Carries the offending *template* and a human-readable *detail*.
    """

    def __init__(self, template: str, detail: str) -> None:
        self.template = template
        self.detail = detail
        super().__init__(f"Invalid URI template {template!r}: {detail}")
