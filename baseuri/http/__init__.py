from baseuri.http.url import build_uri, build_uri_string, parse_uri

__all__ = ["build_uri", "build_uri_string", "parse_uri"]
