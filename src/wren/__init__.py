"""Wren — URI-template-aware HTTP clients on top of httpx.

Request targets are URI templates. Point a client at a root URI and
root-relative templates resolve against it; absolute URLs pass through.

Basic usage::

    from wren import ClientConfig, build_client

    client = build_client(ClientConfig(root_uri="https://api.example.com"))
    user = client.get_json("/users/{id}", {"id": 7})

Decorating an existing client::

    from wren import RestClient, RootUriTemplateHandler

    client = RestClient()
    RootUriTemplateHandler.add_to(client, "https://api.example.com")
"""

__version__ = "0.1.0"
__all__ = [
    "AsyncRestClient",
    "ClientConfig",
    "ConfigurationError",
    "DefaultUriTemplateHandler",
    "InvalidArgumentError",
    "RestClient",
    "RootUriTemplateHandler",
    "UriTemplateError",
    "UriTemplateHandler",
    "WrenError",
    "build_async_client",
    "build_client",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "AsyncRestClient": "wren.client",
    "RestClient": "wren.client",
    "ClientConfig": "wren.config",
    "build_async_client": "wren.config",
    "build_client": "wren.config",
    "ConfigurationError": "wren.errors",
    "InvalidArgumentError": "wren.errors",
    "UriTemplateError": "wren.errors",
    "WrenError": "wren.errors",
    "DefaultUriTemplateHandler": "wren.templating.default",
    "UriTemplateHandler": "wren.templating.protocol",
    "RootUriTemplateHandler": "wren.templating.root",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
