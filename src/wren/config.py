"""Client configuration.

ClientConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from wren.client import AsyncRestClient, RestClient
from wren.errors import ConfigurationError
from wren.templating.default import DefaultUriTemplateHandler
from wren.templating.root import RootUriTemplateHandler

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off", "")


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Client configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ClientConfig(root_uri="https://api.example.com", timeout=10.0)
    """

    # Templates
    root_uri: str | None = None  # Prepended to templates that start with "/"
    encode_values: bool = True  # Percent-encode substituted variable values

    # Transport
    timeout: float = 5.0
    follow_redirects: bool = False
    headers: tuple[tuple[str, str], ...] = ()  # Sent with every request

    @classmethod
    def from_env(
        cls,
        prefix: str = "WREN_",
        environ: Mapping[str, str] | None = None,
    ) -> ClientConfig:
        """Build a config from environment variables.

        Reads ``{prefix}ROOT_URI``, ``{prefix}TIMEOUT`` and
        ``{prefix}FOLLOW_REDIRECTS``. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        root_uri = env.get(f"{prefix}ROOT_URI") or defaults.root_uri

        timeout = defaults.timeout
        raw_timeout = env.get(f"{prefix}TIMEOUT")
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                msg = f"{prefix}TIMEOUT must be a number, got {raw_timeout!r}"
                raise ConfigurationError(msg) from None

        follow_redirects = defaults.follow_redirects
        raw_follow = env.get(f"{prefix}FOLLOW_REDIRECTS")
        if raw_follow is not None:
            value = raw_follow.strip().lower()
            if value in _TRUE_VALUES:
                follow_redirects = True
            elif value in _FALSE_VALUES:
                follow_redirects = False
            else:
                msg = f"{prefix}FOLLOW_REDIRECTS must be a boolean, got {raw_follow!r}"
                raise ConfigurationError(msg)

        return cls(root_uri=root_uri, timeout=timeout, follow_redirects=follow_redirects)


def _client_options(config: ClientConfig) -> dict[str, object]:
    return {
        "timeout": config.timeout,
        "follow_redirects": config.follow_redirects,
        "headers": list(config.headers),
    }


def build_client(
    config: ClientConfig | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> RestClient:
    """Create a ``RestClient`` from *config*.

    Installs a ``RootUriTemplateHandler`` when ``config.root_uri`` is set.
    """
    config = config or ClientConfig()
    http = httpx.Client(transport=transport, **_client_options(config))
    client = RestClient(
        http, uri_template_handler=DefaultUriTemplateHandler(encode_values=config.encode_values)
    )
    if config.root_uri is not None:
        RootUriTemplateHandler.add_to(client, config.root_uri)
    return client


def build_async_client(
    config: ClientConfig | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncRestClient:
    """Async counterpart of ``build_client``."""
    config = config or ClientConfig()
    http = httpx.AsyncClient(transport=transport, **_client_options(config))
    client = AsyncRestClient(
        http, uri_template_handler=DefaultUriTemplateHandler(encode_values=config.encode_values)
    )
    if config.root_uri is not None:
        RootUriTemplateHandler.add_to(client, config.root_uri)
    return client
