"""String helpers: affixes, truncation, case conversion, slugs, and line breaks.

All case converters are built on `strip_case`, which normalizes any of
``camelCase``, ``PascalCase``, ``snake_case``, ``kebab-case`` or free text into
lowercase words separated by single spaces.
"""

import calendar
import re
import unicodedata
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from urllib.parse import unquote

_UPPERCASE_RUN = re.compile(r"([A-Z]+)")
_SEPARATOR_RUN = re.compile(r"[_-]+")
_WHITESPACE_RUN = re.compile(r"\s+")
_NON_WORD = re.compile(r"([^\w])")
_LINEBREAK = re.compile(r"\r\n|[\n\v\f\r\x85\u2028\u2029]")
_TAG = re.compile(r"<[^>]*>")
_SLUG_DISALLOWED = re.compile(r"[^a-z0-9\s_-]")
_SLUG_DASHES = re.compile(r"[\s-]+")

OPENING_QUOTE = "“"
CLOSING_QUOTE = "”"

TIME_UNITS = (
    ("y", "year"),
    ("m", "month"),
    ("w", "week"),
    ("d", "day"),
    ("h", "hour"),
    ("i", "minute"),
    ("s", "second"),
)


# --- Affixes ---


def str_prefix(text: str, prefix: str) -> str:
    """Ensure *text* starts with *prefix*."""
    return text if text.startswith(prefix) else prefix + text


def str_postfix(text: str, postfix: str) -> str:
    """Ensure *text* ends with *postfix*."""
    return text if text.endswith(postfix) else text + postfix


def str_bookend(text: str, bookend: str) -> str:
    """Ensure *text* both starts and ends with *bookend*."""
    return str_prefix(str_postfix(text, bookend), bookend)


def str_unprefix(text: str, prefix: str, max_count: int = -1) -> str:
    """Strip repeated occurrences of *prefix* from the start of *text*.

    Args:
        text: Subject.
        prefix: Substring to remove.
        max_count: Max number of removals; negative means no limit.

    Returns:
        str: The stripped text.
    """
    count = 0
    while prefix and (max_count < 0 or count < max_count) and text.startswith(prefix):
        text = text[len(prefix) :]
        count += 1
    return text


def str_unpostfix(text: str, postfix: str, max_count: int = -1) -> str:
    """Strip repeated occurrences of *postfix* from the end of *text*.

    Args:
        text: Subject.
        postfix: Substring to remove.
        max_count: Max number of removals; negative means no limit.

    Returns:
        str: The stripped text.
    """
    count = 0
    while postfix and (max_count < 0 or count < max_count) and text.endswith(postfix):
        text = text[: -len(postfix)]
        count += 1
    return text


def str_truncate(
    text: str, length: int, tolerance: int = 0, after_truncate: str = "…"
) -> str:
    """Truncate *text* to *length* characters and append a marker.

    Truncation only happens when *text* is longer than ``length + |tolerance|``,
    so slightly-too-long strings can be left alone. The kept part is stripped
    of surrounding whitespace before the marker is appended.
    """
    if length and length < len(text) - abs(tolerance):
        return text[:length].strip() + after_truncate
    return text


def str_quote(text: str) -> str:
    """Wrap *text* in typographic double quotes."""
    return f"{OPENING_QUOTE}{text}{CLOSING_QUOTE}"


def _stringify(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def sprintf_keys(format_str: str, pairs: Mapping[str, Any] | object) -> str:
    """Substitute ``%name%`` placeholders.

    Args:
        format_str: Text containing ``%name%`` placeholders.
        pairs: Mapping of names to values, or an object whose public
            attributes are used.

    Returns:
        str: The formatted text. Placeholders without a value are left as is.
    """
    if not isinstance(pairs, Mapping):
        pairs = {k: v for k, v in vars(pairs).items() if not k.startswith("_")}
    for key, value in pairs.items():
        format_str = format_str.replace(str_bookend(str(key), "%"), _stringify(value))
    return format_str


# --- Case conversion ---


def strip_case(text: str) -> str:
    """Lowercase words separated by single spaces.

    Runs of capitals start a new word, and underscores, hyphens and any
    whitespace become single spaces: ``"someHTML_text-here"`` becomes
    ``"some html text here"``.
    """
    text = _UPPERCASE_RUN.sub(r" \1", text)
    text = _SEPARATOR_RUN.sub(" ", text)
    text = _WHITESPACE_RUN.sub(" ", text)
    return text.strip().lower()


def _ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:]


def title_case(text: str) -> str:
    """Title case, i.e. ``This Text Is Titled``."""
    return " ".join(_ucfirst(word) for word in strip_case(text).split(" "))


def sentence_case(text: str) -> str:
    """Sentence case, i.e. ``This text is sentenced``."""
    return _ucfirst(strip_case(text))


def pascal_case(text: str) -> str:
    """Pascal case, i.e. ``ThisTextIsPascaled``."""
    return title_case(text).replace(" ", "")


def snake_case(text: str) -> str:
    """Snake case, i.e. ``this_text_is_snaked``."""
    return strip_case(text).replace(" ", "_")


def kebab_case(text: str) -> str:
    """Kebab case, i.e. ``this-text-is-kebabed``."""
    return strip_case(text).replace(" ", "-")


def camel_case(text: str) -> str:
    """Camel case, i.e. ``thisTextIsCameled``."""
    pascal = pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


# --- Escaping and markup ---


def esc_regex(text: str) -> str:
    """Backslash-escape every non-word character of *text*."""
    return _NON_WORD.sub(r"\\\1", text)


def preserve_newlines(text: str) -> str:
    """Convert every line break sequence to ``<br>``."""
    return _LINEBREAK.sub("<br>", text)


def reverse_wpautop(text: str) -> str:
    """Undo automatic paragraph tagging.

    Existing newlines are dropped, ``<br>`` variants become single newlines
    and paragraph ends become blank lines.
    """
    text = text.replace("\n", "").replace("<p>", "")
    for br in ("<br />", "<br>", "<br/>"):
        text = text.replace(br, "\n")
    return text.replace("</p>", "\n\n")


def strip_tags(text: str) -> str:
    """Remove HTML tags, keeping the text between them."""
    return _TAG.sub("", text)


def sanitize_title(title: str) -> str:
    """Turn a title into a URL slug.

    Tags are stripped, accents removed, the text lowercased, and every run
    of whitespace, dots or hyphens collapsed into a single hyphen. Characters
    other than ASCII letters, digits, underscores and hyphens are dropped.
    """
    text = strip_tags(title)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode()
    text = text.lower().replace(".", "-")
    text = _SLUG_DISALLOWED.sub("", text)
    return _SLUG_DASHES.sub("-", text).strip("-")


def sanitize_title_multiple(value: str) -> str:
    """Slugify each ``/``-separated segment of a URL-encoded path.

    Empty segments are dropped: ``"My%20Page//Sub Page"`` becomes
    ``"my-page/sub-page"``.
    """
    segments = (sanitize_title(segment) for segment in unquote(value).split("/"))
    return "/".join(segment for segment in segments if segment)


# --- Dates ---


def _to_datetime(value: datetime | int | float | str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=UTC)
    return datetime.fromisoformat(value)


def _calendar_diff(start: datetime, end: datetime) -> dict[str, int]:
    """Split the span between two datetimes into calendar units."""
    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day
    seconds = (end.hour * 3600 + end.minute * 60 + end.second) - (
        start.hour * 3600 + start.minute * 60 + start.second
    )
    if seconds < 0:
        seconds += 86400
        days -= 1
    if days < 0:
        months -= 1
        prev_year, prev_month = (
            (end.year, end.month - 1) if end.month > 1 else (end.year - 1, 12)
        )
        days += calendar.monthrange(prev_year, prev_month)[1]
    if months < 0:
        years -= 1
        months += 12
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return {
        "y": years,
        "m": months,
        "w": days // 7,
        "d": days % 7,
        "h": hours,
        "i": minutes,
        "s": seconds,
    }


def time_elapsed_string(
    when: datetime | int | float | str,
    full: bool = False,
    now: datetime | None = None,
) -> str:
    """Describe how long ago *when* was, e.g. ``"3 days ago"``.

    Args:
        when: A datetime, a Unix timestamp, or an ISO 8601 string.
        full: Include every non-zero unit (``"1 year, 2 weeks ago"``) instead
            of only the largest.
        now: Reference time; defaults to the current time in the timezone of
            *when* (UTC for timestamps).

    Returns:
        str: The description, or ``"just now"`` when under a second apart.
    """
    then = _to_datetime(when)
    if now is None:
        now = datetime.now(then.tzinfo)
    start, end = sorted((then, now))
    diff = _calendar_diff(start, end)
    parts = [
        f"{diff[unit]} {name}{'s' if diff[unit] > 1 else ''}"
        for unit, name in TIME_UNITS
        if diff[unit]
    ]
    if not full:
        parts = parts[:1]
    return ", ".join(parts) + " ago" if parts else "just now"
