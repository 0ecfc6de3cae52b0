from urllib.parse import quote, quote_plus, unquote, unquote_plus

from typing_extensions import Iterable


def encode(text: str, use_plus: bool = True) -> str:
    """Percent-encode every character of `text` outside the unreserved set (`A-Z a-z 0-9 - . _ ~`).

    If `use_plus` is `True`, spaces are encoded as `+` instead of `%20`."""
    if use_plus:
        return quote_plus(text, safe="")
    return quote(text, safe="")


def decode(text: str, decode_plus: bool = True) -> str:
    """Reverse `encode()`.

    If `decode_plus` is `True`, `+` is decoded to a space, otherwise it's left as is."""
    if decode_plus:
        return unquote_plus(text)
    return unquote(text)


def encode_query_pairs(
    pairs: Iterable[tuple[str, str]],
    use_plus: bool = True,
    omit_equals_on_empty: bool = True,
) -> str:
    """Encode `pairs` into a query string (no leading `?`).

    #### :params:
    `use_plus`: Encode spaces as `+` rather than `%20`.
    `omit_equals_on_empty`: Render a pair with an empty value as `key` instead of `key=`.

    >>> encode_query_pairs([("q", "a b"), ("flag", "")])
    'q=a+b&flag'"""
    tokens: list[str] = []
    for key, value in pairs:
        token = encode(key, use_plus)
        if value or not omit_equals_on_empty:
            token += "=" + encode(value, use_plus)
        tokens.append(token)
    return "&".join(tokens)
