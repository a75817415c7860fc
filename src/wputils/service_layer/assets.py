"""Theme asset locations."""

import logging
from pathlib import Path

from wputils import config
from wputils.utils.arrays import resolve_arglist
from wputils.utils.paths import join_path_segments
from wputils.utils.strings import str_prefix

logger = logging.getLogger(__name__)


def _asset_path(segments: tuple[str | list[str], ...]) -> str:
    return str_prefix(join_path_segments(resolve_arglist(segments)), "/")


def get_asset_uri(*segments: str | list[str], base_uri: str | None = None) -> str:
    """Get the URI of a theme asset.

    Args:
        *segments: Path segments, or a single list of them.
        base_uri: Theme base URI; defaults to the configured template URI.

    Raises:
        TemplateUriNotSetError: If *base_uri* is omitted and not configured.
    """
    if base_uri is None:
        base_uri = config.get_template_directory_uri()
    return base_uri.rstrip("/") + _asset_path(segments)


def get_asset_path(
    *segments: str | list[str], base_dir: str | Path | None = None
) -> str:
    """Get the filesystem path of a theme asset.

    Args:
        *segments: Path segments, or a single list of them.
        base_dir: Theme directory; defaults to the configured template
            directory.

    Raises:
        ThemeDirNotSetError: If *base_dir* is omitted and not configured.
    """
    if base_dir is None:
        base_dir = config.get_template_directory()
    return str(base_dir).rstrip("/") + _asset_path(segments)


def get_asset_contents(
    *segments: str | list[str], base_dir: str | Path | None = None
) -> str:
    """Read a theme asset as text.

    Returns:
        str: The file contents, or ``""`` if the file is missing or unreadable.
    """
    path = Path(get_asset_path(*segments, base_dir=base_dir))
    if not path.is_file():
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.warning("Could not read asset %s", path, exc_info=True)
        return ""
