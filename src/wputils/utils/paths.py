"""Path joining."""


def join_path_segments(segments: list[str]) -> str:
    """Join path segments with single slashes.

    Slashes around each segment are stripped; a leading slash on the first
    segment and a trailing slash on the last are preserved.

    Examples:
        ``join_path_segments(["/a/", "/b", "c/"])`` is ``"/a/b/c/"``.
    """
    if not segments:
        return ""
    path = "/".join(segment.strip("/") for segment in segments)
    if segments[0].startswith("/"):
        path = "/" + path
    if segments[-1].endswith("/") and not path.endswith("/"):
        path += "/"
    return path
