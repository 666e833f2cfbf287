"""Utility modules for tagtree.

Provides:
- text: escape_text, escape_attribute, sanitize_class_fragment
- hashing: murmur3_32, encode_base62, class_id for content-addressed naming
- logger: get_logger and the log_level context manager
"""

from tagtree.utils.hashing import BASE62_ALPHABET, class_id, encode_base62, murmur3_32
from tagtree.utils.logger import get_logger, log_level
from tagtree.utils.text import escape_attribute, escape_text, sanitize_class_fragment

__all__ = [
    "BASE62_ALPHABET",
    "class_id",
    "encode_base62",
    "escape_attribute",
    "escape_text",
    "get_logger",
    "log_level",
    "murmur3_32",
    "sanitize_class_fragment",
]
