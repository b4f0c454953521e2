"""Value model describing a localizable message.

A message is a tree of immutable nodes. Leaves are scalars (text, numbers,
booleans, null and timestamps), arrays join their resolved items and the
remaining nodes either carry a literal template or one of the seven gettext
calls. Template-bearing nodes may attach an :data:`Argument` whose values are
themselves message nodes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .i18n import TranslationOracle

__all__ = [
    "LocaleCategory",
    "Positional",
    "Keyword",
    "Argument",
    "Text",
    "Integer",
    "Float",
    "Bool",
    "Unit",
    "Datetime",
    "Array",
    "FormattedText",
    "GetText",
    "NGetText",
    "PGetText",
    "DGetText",
    "DNGetText",
    "NPGetText",
    "DCNGetText",
    "Value",
    "TRANSLATION_CALLS",
    "PLURAL_CALLS",
]


class LocaleCategory(str, Enum):
    """Locale facets a translation lookup can be bound to."""

    CTYPE = "ctype"
    NUMERIC = "numeric"
    TIME = "time"
    COLLATE = "collate"
    MONETARY = "monetary"
    MESSAGES = "messages"
    ALL = "all"
    PAPER = "paper"
    NAME = "name"
    ADDRESS = "address"
    TELEPHONE = "telephone"
    MEASUREMENT = "measurement"
    IDENTIFICATION = "identification"

    @classmethod
    def parse(cls, value: str) -> "LocaleCategory":
        """Parse ``messages``, ``MESSAGES`` or ``LC_MESSAGES`` style names."""

        name = value.strip().lower()
        if name.startswith("lc_"):
            name = name[3:]
        try:
            return cls(name)
        except ValueError as exc:
            raise ValueError(f"Unknown locale category: {value}") from exc


@dataclass(slots=True, frozen=True)
class Positional:
    """Arguments substituted into ``%s`` placeholders, in order."""

    values: tuple["Value", ...] = ()


@dataclass(slots=True, frozen=True)
class Keyword:
    """Arguments substituted into ``%(name)s`` placeholders.

    *values* is copied into a read-only mapping.
    """

    values: Mapping[str, "Value"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))


Argument = Union[Positional, Keyword]


@dataclass(slots=True, frozen=True)
class Text:
    value: str


@dataclass(slots=True, frozen=True)
class Integer:
    value: int


@dataclass(slots=True, frozen=True)
class Float:
    value: float


@dataclass(slots=True, frozen=True)
class Bool:
    value: bool


@dataclass(slots=True, frozen=True)
class Unit:
    """Absent value, rendered as the translated ``n/a`` token."""


@dataclass(slots=True, frozen=True)
class Datetime:
    """Timestamp rendered with a ``strftime`` pattern."""

    strftime: str
    epoch: int


@dataclass(slots=True, frozen=True)
class Array:
    """Items joined by a separator; the separator is the first item."""

    items: tuple["Value", ...] = ()


@dataclass(slots=True, frozen=True)
class FormattedText:
    """Literal template that is never looked up in a catalog."""

    text: str
    args: Argument | None = None


@dataclass(slots=True, frozen=True)
class GetText:
    msgid: str
    args: Argument | None = None

    def translate(self, oracle: "TranslationOracle") -> str:
        return oracle.gettext(self.msgid)


@dataclass(slots=True, frozen=True)
class NGetText:
    singular: str
    plural: str
    n: int
    args: Argument | None = None

    def translate(self, oracle: "TranslationOracle") -> str:
        return oracle.ngettext(self.singular, self.plural, self.n)


@dataclass(slots=True, frozen=True)
class PGetText:
    ctx: str
    msgid: str
    args: Argument | None = None

    def translate(self, oracle: "TranslationOracle") -> str:
        return oracle.pgettext(self.ctx, self.msgid)


@dataclass(slots=True, frozen=True)
class DGetText:
    domain: str
    msgid: str
    args: Argument | None = None

    def translate(self, oracle: "TranslationOracle") -> str:
        return oracle.dgettext(self.domain, self.msgid)


@dataclass(slots=True, frozen=True)
class DNGetText:
    domain: str
    singular: str
    plural: str
    n: int
    args: Argument | None = None

    def translate(self, oracle: "TranslationOracle") -> str:
        return oracle.dngettext(self.domain, self.singular, self.plural, self.n)


@dataclass(slots=True, frozen=True)
class NPGetText:
    ctx: str
    singular: str
    plural: str
    n: int
    args: Argument | None = None

    def translate(self, oracle: "TranslationOracle") -> str:
        return oracle.npgettext(self.ctx, self.singular, self.plural, self.n)


@dataclass(slots=True, frozen=True)
class DCNGetText:
    domain: str
    singular: str
    plural: str
    n: int
    category: LocaleCategory
    args: Argument | None = None

    def translate(self, oracle: "TranslationOracle") -> str:
        return oracle.dcngettext(self.domain, self.singular, self.plural, self.n, self.category)


Value = Union[
    Text,
    Integer,
    Float,
    Bool,
    Unit,
    Datetime,
    Array,
    FormattedText,
    GetText,
    NGetText,
    PGetText,
    DGetText,
    DNGetText,
    NPGetText,
    DCNGetText,
]

TRANSLATION_CALLS = (GetText, NGetText, PGetText, DGetText, DNGetText, NPGetText, DCNGetText)

# Variants whose count is bound to ``n`` in keyword lookups.
PLURAL_CALLS = (NGetText, DNGetText, NPGetText, DCNGetText)
