"""
baseuri: Resolve application URLs and paths against a configured base URI.

The base URI may carry a mount path (``https://example.com/app``); derived
URLs and cookie paths keep it where required.
"""

import importlib.metadata

try:
    # Installed package will find its version
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError:
    # Repository clones will register an unknown version
    __version__ = "0.0.0+unknown"

from baseuri.config import (
    DictConfigProvider,
    EnvConfigProvider,
    base_uri_from_config,
)
from baseuri.exceptions import (
    BaseUriError,
    MalformedBaseError,
    MissingConfigError,
    NullInputError,
)
from baseuri.http.url import build_uri, build_uri_string
from baseuri.resolver import BaseUriResolver

__all__ = [
    "BaseUriResolver",
    "build_uri",
    "build_uri_string",
    "EnvConfigProvider",
    "DictConfigProvider",
    "base_uri_from_config",
    "BaseUriError",
    "NullInputError",
    "MalformedBaseError",
    "MissingConfigError",
]
