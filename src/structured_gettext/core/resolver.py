"""Resolution of message trees into strings.

:class:`Resolver` walks a :data:`~structured_gettext.core.values.Value` tree
depth first. Every template-bearing node obtains its template (from the
translation oracle, or literally for :class:`FormattedText`), resolves its
arguments with the same resolver and substitutes them. The first failure
aborts the whole resolution.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from decimal import Decimal
from types import MappingProxyType

from .arguments import Lookup, bind_arguments, substitute
from .errors import MissingJoinSeparator
from .i18n import GettextOracle, TranslationOracle
from .utils.time_ import DatetimeRenderer
from .values import (
    PLURAL_CALLS,
    TRANSLATION_CALLS,
    Array,
    Bool,
    Datetime,
    Float,
    FormattedText,
    Integer,
    Text,
    Unit,
    Value,
)

__all__ = ["Resolver", "resolve", "format_float"]

Renderer = Callable[[str, int], str]
Formatter = Callable[[str, Lookup], str]

_EMPTY: Mapping[str, str] = MappingProxyType({})


def format_float(value: float) -> str:
    """Render *value* as the shortest decimal text, never in exponent form.

    ``1.0`` renders as ``1`` and ``1e20`` as ``100000000000000000000``. NaN
    and infinities render as ``NaN``, ``inf`` and ``-inf``.
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Resolver:
    """Resolve message trees with a fixed set of collaborators."""

    def __init__(
        self,
        oracle: TranslationOracle | None = None,
        *,
        render_datetime: Renderer | None = None,
        formatter: Formatter = substitute,
    ) -> None:
        self._oracle = oracle if oracle is not None else GettextOracle()
        self._render_datetime = render_datetime if render_datetime is not None else DatetimeRenderer()
        self._formatter = formatter

    @property
    def oracle(self) -> TranslationOracle:
        return self._oracle

    def resolve(self, node: Value, base: Mapping[str, str] | None = None) -> str:
        """Return the string *node* describes.

        Args:
            node: Root of the message tree.
            base: Substitution values available to every keyword lookup
                that does not define the key itself.

        Raises:
            FormatError: A template could not be substituted.
            MissingJoinSeparator: An array had no items.
        """

        return self._resolve(node, _EMPTY if base is None else base)

    __call__ = resolve

    def _resolve(self, node: Value, base: Mapping[str, str]) -> str:
        if isinstance(node, Text):
            return node.value
        if isinstance(node, Integer):
            return str(node.value)
        if isinstance(node, Float):
            return format_float(node.value)
        if isinstance(node, Bool):
            return self._oracle.gettext("yes" if node.value else "no")
        if isinstance(node, Unit):
            return self._oracle.gettext("n/a")
        if isinstance(node, Datetime):
            return self._render_datetime(node.strftime, node.epoch)
        if isinstance(node, Array):
            return self._join(node, base)
        if isinstance(node, FormattedText):
            return self._format(node.text, node, base)
        if isinstance(node, TRANSLATION_CALLS):
            return self._format(node.translate(self._oracle), node, base)
        raise TypeError(f"Unsupported message node: {type(node).__name__}")

    def _join(self, node: Array, base: Mapping[str, str]) -> str:
        if not node.items:
            raise MissingJoinSeparator()
        separator = self._resolve(node.items[0], base)
        return separator.join(self._resolve(item, base) for item in node.items[1:])

    def _format(self, template: str, node: Value, base: Mapping[str, str]) -> str:
        implicit = {"n": str(node.n)} if isinstance(node, PLURAL_CALLS) else None
        lookup = bind_arguments(node.args, base, self._resolve, implicit)
        return self._formatter(template, lookup)


def resolve(
    node: Value,
    base: Mapping[str, str] | None = None,
    *,
    resolver: Resolver | None = None,
) -> str:
    """Resolve *node* with *resolver* or a default :class:`Resolver`."""

    return (resolver or Resolver()).resolve(node, base)
