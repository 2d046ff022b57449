"""
Path-aware base URI resolution.

A deployment may be mounted below a path of its host, e.g.
``https://example.com/app``. `BaseUriResolver` keeps such a mount path when
deriving URLs and paths, while host-only bases like ``https://example.com``
keep behaving as before.
"""

import logging
from dataclasses import InitVar, dataclass, field
from urllib.parse import SplitResult, urlsplit

from baseuri.exceptions import MalformedBaseError, NullInputError
from baseuri.http.url import UriLike, parse_uri, resolve_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaseUriResolver:
    """
    Immutable base URI with two ways of deriving URLs from it.

    `resolve` follows RFC 3986: a reference starting with ``"/"`` replaces the
    mount path, anything else is resolved below it. `path` always prefixes the
    mount path and is meant for values such as cookie paths that must stay
    below the deployment.

    Parameters
    ----------
    uri
        Base URI with scheme and host, optionally port and mount path. Query
        and fragment are ignored.

    Raises
    ------
    NullInputError
        If `uri` is None.
    MalformedBaseError
        If `uri` has no scheme, no host or an invalid port.
    """

    uri: InitVar[UriLike | None]
    base_path: str = field(init=False)
    _resolution_base: SplitResult = field(init=False, repr=False)

    def __post_init__(self, uri: UriLike | None) -> None:
        parts = parse_uri(uri, name="base_uri")
        try:
            port = parts.port
        except ValueError as e:
            raise MalformedBaseError(f"base_uri has an invalid port: {uri}") from e
        if not parts.scheme or not parts.hostname:
            raise MalformedBaseError(f"base_uri must have a scheme and host: {uri}")

        # the last segment only counts as a directory with a trailing slash
        path = parts.path if parts.path.endswith("/") else parts.path + "/"
        resolution_base = parts._replace(path=path, query="", fragment="")

        object.__setattr__(self, "_resolution_base", resolution_base)
        object.__setattr__(self, "base_path", parts.path.rstrip("/"))
        logger.debug("Base URI %s (port %s, base path %r)", self, port, self.base_path)

    def resolve(self, relative_path: str | None) -> SplitResult:
        """
        Resolve a reference against the base URI.

        Parameters
        ----------
        relative_path
            Reference such as ``"/auth"`` (resolved from the host root) or
            ``"callback"`` (resolved below the base path).

        Returns
        -------
        uri
            The resolved URI.
        """
        if relative_path is None:
            raise NullInputError("relative_path must not be None")
        return resolve_reference(self._resolution_base, relative_path)

    def path(self, extra_path: str | None) -> str:
        """
        Combine the base path with an additional path.

        ``"/auth"`` and ``"auth"`` both give ``"/app/auth"`` for a base path of
        ``"/app"``. An empty `extra_path` gives the base path itself, or
        ``"/"`` when there is none.
        """
        if extra_path is None:
            raise NullInputError("extra_path must not be None")

        if not extra_path:
            return self.base_path or "/"

        if not extra_path.startswith("/"):
            extra_path = "/" + extra_path
        return self.base_path + extra_path

    @property
    def base_uri(self) -> SplitResult:
        """The base URI without trailing slash."""
        return urlsplit(str(self))

    def __str__(self) -> str:
        return self._resolution_base.geturl().rstrip("/")
