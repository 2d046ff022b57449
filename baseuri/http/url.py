# baseuri/http/url.py
from __future__ import annotations

from urllib.parse import (
    ParseResult,
    SplitResult,
    urljoin,
    urlsplit,
    uses_netloc,
    uses_relative,
)

from baseuri.exceptions import NullInputError

UriLike = str | SplitResult | ParseResult


def parse_uri(value: UriLike | None, *, name: str = "uri") -> SplitResult:
    """
    Coerce a URI given as string or parsed value into a `SplitResult`.

    Parameters
    ----------
    value
        URI string (surrounding whitespace is ignored), `SplitResult` or
        `ParseResult`.
    name
        Argument name used in the error message.

    Returns
    -------
    uri
        The URI split into scheme, netloc, path, query and fragment.

    Raises
    ------
    NullInputError
        If `value` is None.
    """
    if value is None:
        raise NullInputError(f"{name} must not be None")
    if isinstance(value, SplitResult):
        return value
    if isinstance(value, ParseResult):
        return urlsplit(value.geturl())
    return urlsplit(str(value).strip())


def resolve_reference(base: SplitResult, reference: str) -> SplitResult:
    """
    Resolve `reference` against `base` following RFC 3986.

    `urljoin` only resolves against schemes it knows to be hierarchical, so
    other schemes are resolved as http and then restored.
    """
    if base.scheme in uses_relative and base.scheme in uses_netloc:
        return urlsplit(urljoin(base.geturl(), reference))

    target = urlsplit(reference)
    if target.scheme:
        return target
    joined = urlsplit(urljoin(base._replace(scheme="http").geturl(), reference))
    return joined._replace(scheme=base.scheme)


def build_uri(base_uri: UriLike | None, *segments: str | None) -> SplitResult:
    """
    Append path segments to a base URI.

    Each segment becomes one more path component after the path of
    `base_uri`. Redundant slashes around segments are stripped and exactly one
    ``"/"`` separates components. None, empty or slash-only segments are
    skipped. Scheme, host, port, query and fragment of `base_uri` are kept.

    Parameters
    ----------
    base_uri
        Base URI, e.g. ``"https://example.com/app"``.
    segments
        Path segments to append (e.g. ``"auth", "callback"``).

    Returns
    -------
    uri
        The extended URI. `base_uri` unchanged if no segment contributes.

    Raises
    ------
    NullInputError
        If `base_uri` is None.
    """
    base = parse_uri(base_uri, name="base_uri")

    cleaned = [s.strip("/") for s in segments if s and s.strip("/")]
    if not cleaned:
        return base
    return base._replace(path=base.path.rstrip("/") + "/" + "/".join(cleaned))


def build_uri_string(base_uri: UriLike | None, *segments: str | None) -> str:
    """
    Same as `build_uri`, returning the URI as a string.
    """
    return build_uri(base_uri, *segments).geturl()
