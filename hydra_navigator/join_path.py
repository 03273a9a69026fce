"""Utility for joining path segments the way editor hosts do."""

import os


def join_path(*segments: str) -> str:
    """Join segments with the platform separator and normalize the result.

    Unlike os.path.join, a segment starting with a separator does not
    discard the segments before it: join_path("/ws/conf", "/db") is
    "/ws/conf/db". Empty segments are skipped.
    """
    joined = os.sep.join(s for s in segments if s)
    if not joined:
        return "."
    return os.path.normpath(joined)
