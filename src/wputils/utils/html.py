"""HTML rendering helpers: class lists, attributes, inline styles, blocks, links."""

import html
import re
from collections.abc import Mapping
from typing import Any

from .arrays import Array, array_flatten, array_items, is_container
from .strings import strip_tags
from .values import is_numeric, not_empty

SPACING_SIDES = ("top", "right", "bottom", "left")
BLOCK_VAR_PREFIX = "var:"

_CLICKABLE = re.compile(
    r"(?P<url>(?<![\w/.@])(?:(?:https?|ftp)://|www\.)[^\s<>\"']+)"
    r"|(?P<email>(?<![\w.+-])[\w.+-]+@[\w-]+(?:\.[\w-]+)+)"
)
_URL_PREFIX = re.compile(r"(?:(?:https?|ftp)://|www\.)")
_URL_TRAILING = re.compile(r"[.,;:!?)\]]+$")
_HTTP_SCHEME = re.compile(r"^https?://")


def esc_attr(value: str) -> str:
    """Escape text for use inside a double-quoted HTML attribute."""
    return html.escape(value, quote=True)


# --- Class names ---


def class_names_array(classes: Array) -> list[str]:
    """Collect class names in the style of the ``classnames`` JS package.

    String keys are included when their value is non-empty; string values
    stored under positional keys are included as is; nested containers are
    resolved recursively into a single space-separated entry.

    Examples:
        ``class_names_array(["btn", {"active": True, "hidden": 0}])``
        gives ``["btn", "active"]``.
    """
    names = []
    for key, value in array_items(classes):
        if is_container(value):
            names.append(class_names(value))
        elif isinstance(key, str):
            if not_empty(value):
                names.append(key)
        elif isinstance(value, str):
            names.append(value)
    return names


def class_names(classes: Array) -> str:
    """Like `class_names_array`, joined with spaces."""
    return " ".join(class_names_array(classes))


def resolve_class_list(*class_list: Any) -> str:
    """Resolve strings and (nested) lists into an escaped class attribute value.

    Empty entries are dropped and dots become spaces, so ``"a.b"`` yields the
    two classes ``a`` and ``b``.
    """
    names = " ".join(str(name) for name in array_flatten(class_list) if not_empty(name))
    return esc_attr(names.replace(".", " "))


# --- Attributes ---


def _export_value(value: Any) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int() | float():
            return str(value)
        case _:
            return repr(value)


def html_attrs(attrs: Array) -> str:
    """Render a mapping as HTML attributes, e.g. ``id="main" hidden``.

    * Entries with a ``None`` value are left out.
    * Entries under numeric keys render their value as a boolean attribute.
    * String values are assumed to be escaped already.
    * Other values are exported (``True`` as ``true``, numbers as digits,
      anything else via ``repr``) and then escaped.

    Args:
        attrs: Attribute names and values.

    Returns:
        str: Space-separated attributes without surrounding whitespace.
    """
    output = []
    for name, value in array_items(attrs):
        if value is None:
            continue
        if not isinstance(value, str):
            value = esc_attr(_export_value(value))
        if isinstance(name, int) or is_numeric(name):
            output.append(value)
        else:
            output.append(f'{name}="{value}"')
    return " ".join(output).strip()


# --- Styles ---


def inline_styles(*styles: Mapping[Any, Any]) -> str:
    """Merge style mappings into a ``prop:value;`` inline style string.

    Later mappings override earlier ones. Non-string properties and values
    that are ``None`` or ``""`` are skipped.
    """
    merged: dict[Any, Any] = {}
    for style in styles:
        merged.update(style)
    return "".join(
        f"{prop}:{value};"
        for prop, value in merged.items()
        if isinstance(prop, str) and value is not None and value != ""
    )


def render_wp_block_style_rule(value: str | None) -> str | None:
    """Render a block editor style value.

    Preset references such as ``var:preset|spacing|40`` become
    ``var(--wp--preset--spacing--40)``; other values are returned unchanged.
    """
    if value and value.startswith(BLOCK_VAR_PREFIX):
        return "var(--wp--" + "--".join(value[len(BLOCK_VAR_PREFIX) :].split("|")) + ")"
    return value


def render_wp_block_spacing(values: Mapping[str, Any]) -> str:
    """Render ``top``/``right``/``bottom``/``left`` spacing as CSS shorthand.

    Missing sides default to ``0``. The shortest equivalent shorthand is used:
    one value when all sides match, two when top/bottom and right/left pair
    up, three when only right/left match, four otherwise.
    """
    sides = {side: values.get(side, 0) for side in SPACING_SIDES}
    rendered = {
        side: render_wp_block_style_rule(value) if isinstance(value, str) else value
        for side, value in sides.items()
    }
    top, right, bottom, left = (rendered[side] for side in SPACING_SIDES)
    output = [top]
    if len(set(map(str, rendered.values()))) > 1:
        output.append(right)
        if right != left:
            output.extend([bottom, left])
        elif top != bottom:
            output.append(bottom)
    return " ".join(str(value) for value in output)


# --- Blocks ---


def flatten_blocklist(blocklist: list[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """Return blocks depth-first, each followed by its ``innerBlocks``."""
    flat: list[Mapping[str, Any]] = []
    for block in blocklist:
        flat.append(block)
        inner = block.get("innerBlocks")
        if inner:
            flat.extend(flatten_blocklist(inner))
    return flat


# --- Links ---


def _link(match: re.Match[str], new_tab: bool) -> str:
    if email := match["email"]:
        return f'<a href="mailto:{esc_attr(email)}">{email}</a>'
    url = match["url"]
    trailing = _URL_TRAILING.search(url)
    suffix = trailing.group() if trailing else ""
    url = url[: len(url) - len(suffix)]
    if _URL_PREFIX.fullmatch(url):
        return match.group()
    href = url if "://" in url else f"http://{url}"
    rel = "nofollow noreferrer noopener" if new_tab else "nofollow"
    target = ' target="_blank"' if new_tab else ""
    text = _HTTP_SCHEME.sub("", url)
    return f'<a href="{esc_attr(href)}" rel="{rel}"{target}>{text}</a>{suffix}'


def make_plaintext_clickable(text: str, new_tab: bool = False) -> str:
    """Strip tags from *text* and turn URLs and email addresses into links.

    ``http(s)://``, ``ftp://`` and ``www.`` addresses become ``nofollow``
    links whose text drops the ``http(s)://`` scheme; ``www.`` addresses are
    linked over ``http://``. Trailing punctuation stays outside the link.
    Email addresses become ``mailto:`` links.

    Examples:
        ``make_plaintext_clickable("See https://example.com.")`` gives
        ``'See <a href="https://example.com" rel="nofollow">example.com</a>.'``

    Args:
        text: Plain text, possibly with markup to discard.
        new_tab: Open web links in a new tab, adding ``target="_blank"`` and
            ``noreferrer noopener`` to their ``rel``.

    Returns:
        str: The text with links.
    """
    return _CLICKABLE.sub(lambda match: _link(match, new_tab), strip_tags(text))
