import murl


def test__encode():
    assert murl.encode("a b&c/d") == "a+b%26c%2Fd"
    assert murl.encode("a b&c/d", use_plus=False) == "a%20b%26c%2Fd"
    assert murl.encode("AZaz09-._~") == "AZaz09-._~"
    assert murl.encode("é") == "%C3%A9"


def test__decode():
    assert murl.decode("a+b%26c") == "a b&c"
    assert murl.decode("a+b%26c", decode_plus=False) == "a+b&c"
    assert murl.decode("%C3%A9") == "é"
    assert murl.decode(murl.encode("x y+z", use_plus=False), False) == "x y+z"


def test__encode_query_pairs():
    pairs = [("q", "a b"), ("flag", "")]
    assert murl.encode_query_pairs(pairs) == "q=a+b&flag"
    assert murl.encode_query_pairs(pairs, omit_equals_on_empty=False) == "q=a+b&flag="
    assert murl.encode_query_pairs(pairs, use_plus=False) == "q=a%20b&flag"
    assert murl.encode_query_pairs([("a&b", "c=d")]) == "a%26b=c%3Dd"
    assert murl.encode_query_pairs([]) == ""
