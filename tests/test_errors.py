import pytest

import murl


def test__SegmentIndexError():
    error = murl.SegmentIndexError("path", 5, ["a", "b"])
    assert isinstance(error, IndexError)
    assert isinstance(error, murl.MurlError)
    assert str(error) == "Could not find path segment `5` in `a/b` (2 segments)."
    assert error.index == 5


def test__SegmentIndexError_no_segments():
    uri = murl.Uri.parse("https://domain.com")
    with pytest.raises(
        murl.SegmentIndexError, match="the fragment has no segments"
    ):
        uri.get_anchor_segment(0)
