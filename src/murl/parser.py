import logging
from dataclasses import dataclass, field
from urllib.parse import SplitResult, urlsplit

import loggi

from . import queries
from .queries import QueryPairs


@dataclass
class UriParts:
    """The components of a uri string after decomposition."""

    scheme: str = ""
    username: str = ""
    password: str = ""
    hostname: str = ""
    port: str = ""
    path: str = ""
    fragment: str = ""
    queries: QueryPairs = field(default_factory=list)
    anchor_queries: QueryPairs = field(default_factory=list)


def split_netloc(netloc: str) -> tuple[str, str, str, str]:
    """Split `netloc` into `(username, password, hostname, port)`.

    Brackets around an IPv6 host are removed."""
    userinfo, _, hostport = netloc.rpartition("@")
    username, _, password = userinfo.partition(":")
    if hostport.startswith("["):
        hostname, _, remainder = hostport[1:].partition("]")
        port = remainder[1:] if remainder.startswith(":") else ""
    else:
        hostname, _, port = hostport.partition(":")
    return username, password, hostname, port


def split_fragment(
    fragment: str, logger: loggi.Logger | logging.Logger | None = None
) -> tuple[str, QueryPairs]:
    """Split a raw fragment into its path and its query pairs.

    >>> split_fragment("/home/?page=10")
    ('/home/', [('page', '10')])"""
    fragment = fragment.strip()
    if not fragment:
        return "", []
    path, separator, query = fragment.partition("?")
    if not separator:
        return path, []
    return path, queries.collect(query, logger)


def _validate(result: SplitResult):
    # `urlsplit` only checks the port when it's accessed
    result.port


def decompose(
    raw: str, logger: loggi.Logger | logging.Logger | None = None
) -> UriParts:
    """Decompose `raw` into a `UriParts` instance.

    Malformed query tokens (no `=`) are dropped and reported to `logger`, if one is given.
    `ValueError`s raised by `urllib.parse` for malformed uris are not caught."""
    result = urlsplit(raw)
    _validate(result)
    username, password, hostname, port = split_netloc(result.netloc)
    fragment, anchor_queries = split_fragment(result.fragment, logger)
    return UriParts(
        scheme=result.scheme,
        username=username,
        password=password,
        hostname=hostname,
        port=port,
        path=result.path,
        fragment=fragment,
        queries=queries.collect(result.query, logger),
        anchor_queries=anchor_queries,
    )
