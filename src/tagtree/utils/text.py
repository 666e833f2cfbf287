"""Text processing utilities for tagtree.

Escaping for HTML text and attribute values, and sanitizing of CSS property
names into class-name fragments.

Example:
    >>> from tagtree.utils.text import escape_text
    >>> escape_text("a < b & c")
    'a &lt; b &amp; c'
"""

from __future__ import annotations

import html
import re

_ATTRIBUTE_ESCAPES = str.maketrans({'"': "&quot;", "'": "&#39;"})
_CLASS_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")


def escape_text(text: str) -> str:
    """Escape text content.

    Only ``&``, ``<`` and ``>`` are reserved inside element content.

    Args:
        text: Text to escape

    Returns:
        Escaped text

    Examples:
        >>> escape_text("<script>")
        '&lt;script&gt;'
        >>> escape_text('say "hi"')
        'say "hi"'
    """
    if not text:
        return ""
    return html.escape(text, quote=False)


def escape_attribute(value: str) -> str:
    """Escape a quoted attribute value.

    Quote characters are replaced so the value cannot terminate the
    surrounding double quotes.

    Examples:
        >>> escape_attribute('say "hi"')
        'say &quot;hi&quot;'
        >>> escape_attribute("it's")
        'it&#39;s'
    """
    if not value:
        return ""
    return value.translate(_ATTRIBUTE_ESCAPES)


def sanitize_class_fragment(text: str, fallback: str = "c") -> str:
    """Turn arbitrary text into a fragment usable in a CSS class name.

    Examples:
        >>> sanitize_class_fragment("background-color")
        'background-color'
        >>> sanitize_class_fragment("--my var")
        '--my-var'
        >>> sanitize_class_fragment("")
        'c'
    """
    if not text:
        return fallback
    return _CLASS_UNSAFE.sub("-", text)
