"""A very small markdown-to-HTML converter.

Supports dashes, bold, italic, inline code, links, ATX headings, flat lists,
paragraphs and line breaks. Conversion is a fixed, ordered list of regex
substitutions applied once each; there is no nesting and no escaping of
HTML in the input.
"""

import logging
import re

logger = logging.getLogger(__name__)

_BLOCK_TAG = r"<(?:h[1-6]|ul|ol|p)>"
_LINE_ENDING = re.compile(r"\r\n?")

RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"-{3}"), "&mdash;"),
    (re.compile(r"-{2}"), "&ndash;"),
    (
        re.compile(
            r"(?:\*{2}((?:[^*]|(?:\\*))+)\*{2})"
            r"|(?:_{2}((?:[^_]|(?:\_))+)_{2})"
        ),
        r"<strong>\1\2</strong>",
    ),
    (
        re.compile(r"(?:\*((?:[^*]|(?:\\*))+)\*)|(?:_((?:[^_]|(?:\_))+)_)"),
        r"<em>\1\2</em>",
    ),
    (re.compile(r"`([^`]+)`"), r"<code>\1</code>"),
    (re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), r'<a href="\2">\1</a>'),
    (re.compile(r"\[\]\(([^)]+)\)"), r'<a href="\1">\1</a>'),
    *(
        (re.compile(rf"^#{{{level}}}\s(.*)", re.M), rf"<h{level}>\1</h{level}>")
        for level in range(6, 0, -1)
    ),
    (re.compile(r"^[*-]\s(.*)", re.M), r"<ul><li>\1</li></ul>"),
    (re.compile(r"^[0-9]+\.\s(.*)", re.M), r"<ol><li>\1</li></ol>"),
    (re.compile(r"</ul>\s*<ul>"), ""),
    (re.compile(r"</ol>\s*<ol>"), ""),
    (
        re.compile(
            rf"^(?!{_BLOCK_TAG})([^\n]+(?:\n(?!{_BLOCK_TAG})[^\n]+)*)",
            re.M,
        ),
        r"<p>\1</p>",
    ),
    (
        re.compile(r"(?<=[^\n])(?<!</h[1-6]>)(?<!</ul>)(?<!</ol>)(?<!</p>)\n"),
        "<br>",
    ),
)


def mini_markdown_parse(md: str) -> str:
    """Convert a small markdown subset to HTML.

    Rules run in this order: ``---`` to an em dash, ``--`` to an en dash,
    ``**bold**``/``__bold__``, ``*italic*``/``_italic_``, ``` `code` ```,
    ``[text](url)``, ``[](url)``, ``######`` down to ``#`` headings,
    ``-``/``*`` list items, ``1.`` list items, merging of adjacent lists,
    paragraphs, and finally single line breaks.

    Emphasis is greedy about what it wraps: it may span lines and open on
    whitespace, so ``a * b * c`` italicises `` b `` and star bullets pair
    up as emphasis before the list rule sees them. Use ``-`` bullets.

    Line endings are normalized to ``\\n`` first. Paragraphs are maximal runs
    of non-blank lines not starting with a block tag. A newline left inside
    content becomes ``<br>``; newlines after a closing block tag or another
    newline are kept.

    Examples:
        >>> mini_markdown_parse("**bold** and *italic*")
        '<p><strong>bold</strong> and <em>italic</em></p>'
        >>> mini_markdown_parse("# Title\\n\\n- a\\n- b")
        '<h1>Title</h1>\\n\\n<ul><li>a</li><li>b</li></ul>'

    Args:
        md: Markdown source.

    Returns:
        str: The HTML fragment.
    """
    md = _LINE_ENDING.sub("\n", md)
    for pattern, replacement in RULES:
        md = pattern.sub(replacement, md)
    return md
