"""String routines for `/` separated paths.

Shared by the uri path and the path portion of the fragment.
Segment indices are 0-based and don't count the empty element produced by a leading `/`."""

separator = "/"


def split(path: str) -> list[str]:
    """Returns the segments of `path`.

    >>> split("/profile/1234")
    ['profile', '1234']"""
    if not path:
        return []
    segments = path.split(separator)
    if segments[0] == "":
        segments = segments[1:]
    return segments


def join(segments: list[str]) -> str:
    """Returns each of `segments` prefixed with a separator."""
    return "".join(separator + segment for segment in segments)


def in_range(segments: list[str], index: int) -> bool:
    return 0 <= index < len(segments)


def append(path: str, segment: str) -> str:
    """Add `segment` to the end of `path` with exactly one separator between them."""
    if path.endswith(separator):
        path = path[:-1]
    if segment.startswith(separator):
        segment = segment[1:]
    return path + separator + segment


def prepend(path: str, segment: str) -> str:
    """Add `segment` to the front of `path` with exactly one separator between them.

    The result always starts with a separator."""
    if path.startswith(separator):
        path = path[1:]
    if segment.endswith(separator):
        segment = segment[:-1]
    if not segment.startswith(separator):
        segment = separator + segment
    return segment + separator + path


def replace(path: str, segment: str, index: int) -> str:
    """Returns `path` with the segment at `index` swapped for `segment`.

    `path` is returned unchanged when `index` is out of range."""
    segments = split(path)
    if not in_range(segments, index):
        return path
    segments[index] = segment
    return join(segments)
