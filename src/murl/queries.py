"""Routines for ordered lists of query pairs.

Used for both the main query and the query embedded in a fragment.
A pair list behaves like a multimap: lookups and updates act on the first matching key
while `get_queries()` style reads see every pair, duplicates included."""

import logging

import loggi
from typing_extensions import Iterable

QueryPairs = list[tuple[str, str]]


def collect(
    query: str, logger: loggi.Logger | logging.Logger | None = None
) -> QueryPairs:
    """Split a raw query string into `(key, value)` pairs.

    Each `&` separated token is split on its first `=`.
    Tokens without an `=` are dropped."""
    pairs: QueryPairs = []
    for token in query.split("&"):
        key, separator, value = token.partition("=")
        if not separator:
            if logger and token:
                logger.info(f"Dropped query token `{token}`: no `=` separator.")
            continue
        pairs.append((key, value))
    return pairs


def copy_pairs(pairs: Iterable[tuple[str, str]]) -> QueryPairs:
    """Returns a new list of 2-tuples built from `pairs`."""
    return [(key, value) for key, value in pairs]


def find(pairs: QueryPairs, key: str) -> int:
    """Returns the index of the first pair with `key` or `-1`."""
    for i, pair in enumerate(pairs):
        if pair[0] == key:
            return i
    return -1


def lookup(pairs: QueryPairs, key: str, default: str = "") -> str:
    index = find(pairs, key)
    return default if index == -1 else pairs[index][1]


def upsert(pairs: QueryPairs, key: str, value: str, overwrite: bool = True):
    """Replace the value of the first pair with `key` or append `(key, value)` if there isn't one.

    If `overwrite` is `False` and `key` already has a non-empty value, `pairs` is left alone."""
    if not overwrite and lookup(pairs, key) != "":
        return
    index = find(pairs, key)
    if index == -1:
        pairs.append((key, value))
    else:
        pairs[index] = (key, value)


def render(pairs: QueryPairs, skip_empty: bool = False) -> str:
    """Join `pairs` as `key=value&key=value` with surrounding whitespace stripped from keys and values.

    If `skip_empty` is `True`, pairs that are empty after stripping are left out instead of rendering as `=`."""
    tokens: list[str] = []
    for key, value in pairs:
        key = key.strip()
        value = value.strip()
        if skip_empty and not key and not value:
            continue
        tokens.append(f"{key}={value}")
    return "&".join(tokens)


def render_query_string(pairs: QueryPairs, skip_empty: bool = False) -> str:
    """Same as `render()`, prefixed with `?`. Returns an empty string if there's nothing to render."""
    body = render(pairs, skip_empty)
    return f"?{body}" if body else ""
