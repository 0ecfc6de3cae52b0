from .codec import decode, encode, encode_query_pairs
from .errors import MurlError, SegmentIndexError
from .models import Uri, parse_uri
from .parser import UriParts, decompose

__version__ = "0.1.0"
__all__ = [
    "Uri",
    "parse_uri",
    "UriParts",
    "decompose",
    "encode",
    "decode",
    "encode_query_pairs",
    "MurlError",
    "SegmentIndexError",
]
