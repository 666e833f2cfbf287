"""Style values: declarations, media queries and pseudo selectors.

All three are frozen dataclasses with slots, so they hash structurally and can
serve directly as registry and grouping keys. Property and value strings are
opaque: nothing here parses, validates or escapes CSS.

Example:
    >>> style = Style("color", "red", pseudo=Pseudo.HOVER)
    >>> style.selector("color-0")
    '.color-0:hover'
    >>> style.declaration
    'color:red'

Thread Safety:
All values are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class MediaQuery:
    """A CSS media query, used only as a stylesheet grouping key.

    Examples:
            >>> MediaQuery("print") == MediaQuery.PRINT
            True

    """

    raw_value: str

    DARK: ClassVar[MediaQuery]
    PRINT: ClassVar[MediaQuery]

    def __str__(self) -> str:
        return self.raw_value


MediaQuery.DARK = MediaQuery("(prefers-color-scheme: dark)")
MediaQuery.PRINT = MediaQuery("print")


@dataclass(frozen=True, slots=True)
class Pseudo:
    """A pseudo-class or pseudo-element suffix such as ``:hover``.

    Pseudos compose by concatenation:

            >>> (Pseudo.HOVER + Pseudo.AFTER).raw_value
            ':hover::after'
            >>> Pseudo.not_(Pseudo.FIRST_CHILD).raw_value
            ':not(:first-child)'

    """

    raw_value: str

    ACTIVE: ClassVar[Pseudo]
    AFTER: ClassVar[Pseudo]
    BEFORE: ClassVar[Pseudo]
    CHECKED: ClassVar[Pseudo]
    DISABLED: ClassVar[Pseudo]
    EMPTY: ClassVar[Pseudo]
    ENABLED: ClassVar[Pseudo]
    FIRST_CHILD: ClassVar[Pseudo]
    FIRST_OF_TYPE: ClassVar[Pseudo]
    FOCUS: ClassVar[Pseudo]
    HOVER: ClassVar[Pseudo]
    IN_RANGE: ClassVar[Pseudo]
    INVALID: ClassVar[Pseudo]
    LANG: ClassVar[Pseudo]
    LAST_CHILD: ClassVar[Pseudo]
    LAST_OF_TYPE: ClassVar[Pseudo]
    LINK: ClassVar[Pseudo]
    ONLY_CHILD: ClassVar[Pseudo]
    ONLY_OF_TYPE: ClassVar[Pseudo]
    OPTIONAL: ClassVar[Pseudo]
    OUT_OF_RANGE: ClassVar[Pseudo]
    READ_ONLY: ClassVar[Pseudo]
    READ_WRITE: ClassVar[Pseudo]
    REQUIRED: ClassVar[Pseudo]
    ROOT: ClassVar[Pseudo]
    TARGET: ClassVar[Pseudo]
    VALID: ClassVar[Pseudo]
    VISITED: ClassVar[Pseudo]

    def __add__(self, other: Pseudo) -> Pseudo:
        if not isinstance(other, Pseudo):
            return NotImplemented
        return Pseudo(self.raw_value + other.raw_value)

    def __str__(self) -> str:
        return self.raw_value

    @classmethod
    def is_(cls, selector: str) -> Pseudo:
        return cls(f":is({selector})")

    @classmethod
    def not_(cls, other: Pseudo) -> Pseudo:
        return cls(f":not({other.raw_value})")

    @classmethod
    def nth_child(cls, n: str | int) -> Pseudo:
        return cls(f":nth-child({n})")

    @classmethod
    def nth_last_child(cls, n: str | int) -> Pseudo:
        return cls(f":nth-last-child({n})")

    @classmethod
    def nth_of_type(cls, n: str | int) -> Pseudo:
        return cls(f":nth-of-type({n})")

    @classmethod
    def nth_last_of_type(cls, n: str | int) -> Pseudo:
        return cls(f":nth-last-of-type({n})")


for _name, _raw in {
    "ACTIVE": ":active",
    "AFTER": "::after",
    "BEFORE": "::before",
    "CHECKED": ":checked",
    "DISABLED": ":disabled",
    "EMPTY": ":empty",
    "ENABLED": ":enabled",
    "FIRST_CHILD": ":first-child",
    "FIRST_OF_TYPE": ":first-of-type",
    "FOCUS": ":focus",
    "HOVER": ":hover",
    "IN_RANGE": ":in-range",
    "INVALID": ":invalid",
    "LANG": ":lang",
    "LAST_CHILD": ":last-child",
    "LAST_OF_TYPE": ":last-of-type",
    "LINK": ":link",
    "ONLY_CHILD": ":only-child",
    "ONLY_OF_TYPE": ":only-of-type",
    "OPTIONAL": ":optional",
    "OUT_OF_RANGE": ":out-of-range",
    "READ_ONLY": ":read-only",
    "READ_WRITE": ":read-write",
    "REQUIRED": ":required",
    "ROOT": ":root",
    "TARGET": ":target",
    "VALID": ":valid",
    "VISITED": ":visited",
}.items():
    setattr(Pseudo, _name, Pseudo(_raw))
del _name, _raw


@dataclass(frozen=True, slots=True)
class Style:
    """A single CSS declaration and the scope it applies in.

    Two styles are the same style iff all five fields are equal; a ``None``
    media means the global (unconditional) group.

    Attributes:
        property: CSS property name, passed through verbatim
        value: CSS value, passed through verbatim
        media: Media query the rule lives under (None = global)
        pre_selector: Selector prepended to the class, separated by a space
        pseudo: Suffix appended to the class selector

    """

    property: str
    value: str
    media: MediaQuery | None = None
    pre_selector: str | None = None
    pseudo: Pseudo | None = None

    @property
    def declaration(self) -> str:
        """The ``property:value`` text stored in the stylesheet."""
        return f"{self.property}:{self.value}"

    @property
    def hash_input(self) -> str:
        """Content that determines a hash-named class (property excluded)."""
        return (
            self.value
            + (self.media.raw_value if self.media else "")
            + (self.pre_selector or "")
            + (self.pseudo.raw_value if self.pseudo else "")
        )

    def selector(self, class_name: str) -> str:
        """Build the full selector for this style under ``class_name``."""
        pre = f"{self.pre_selector} " if self.pre_selector is not None else ""
        pseudo = self.pseudo.raw_value if self.pseudo is not None else ""
        return f"{pre}.{class_name}{pseudo}"


__all__ = ["MediaQuery", "Pseudo", "Style"]
