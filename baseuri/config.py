"""
Configuration sources for the base URI.
"""

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Protocol

from baseuri.exceptions import MissingConfigError
from baseuri.resolver import BaseUriResolver

logger = logging.getLogger(__name__)


class ConfigProvider(Protocol):
    def get(self, key: str) -> str | None: ...


@dataclass(frozen=True)
class EnvConfigProvider:
    """
    Read configuration from environment variables.

    Keys are mangled into variable names by prefixing `prefix`, replacing
    ``"."`` with ``"_"`` and upper-casing, e.g. ``"base_uri"`` with prefix
    ``"OIDC_SERVER"`` is read from ``OIDC_SERVER_BASE_URI``.

    Parameters
    ----------
    prefix
        Prefix of all variable names.
    getenv
        Lookup function, `os.environ.get` unless given.
    """

    prefix: str
    getenv: Callable[[str], str | None] = field(default=os.environ.get, repr=False)

    def mangle(self, key: str) -> str:
        return f"{self.prefix}_{key}".upper().replace(".", "_")

    def get(self, key: str) -> str | None:
        name = self.mangle(key)
        value = self.getenv(name)
        logger.debug("Config %s read from %s (set=%s)", key, name, value is not None)
        return value


@dataclass(frozen=True)
class DictConfigProvider:
    values: Mapping[str, str]

    def get(self, key: str) -> str | None:
        return self.values.get(key)


def base_uri_from_config(
    config: ConfigProvider, key: str = "base_uri"
) -> BaseUriResolver:
    """
    Build a `BaseUriResolver` from a configured base URI.

    Parameters
    ----------
    config
        Source providing the value of `key`.
    key
        Configuration key holding the base URI.

    Returns
    -------
    resolver
        Resolver for the configured base URI.

    Raises
    ------
    MissingConfigError
        If `key` has no value or a blank one.
    MalformedBaseError
        If the configured value lacks a scheme or host.
    """
    value = config.get(key)
    if not value or not value.strip():
        raise MissingConfigError(f"missing configuration value for '{key}'")
    return BaseUriResolver(value)
