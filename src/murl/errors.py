class MurlError(Exception):
    """Base class for `murl` exceptions."""


class SegmentIndexError(IndexError, MurlError):
    def __init__(self, kind: str, index: int, segments: list[str]):
        message = f"Could not find {kind} segment `{index}`"
        if segments:
            message += f" in `{'/'.join(segments)}` ({len(segments)} segments)."
        else:
            message += f", the {kind} has no segments."
        super().__init__(message)
        self.kind = kind
        self.index = index
