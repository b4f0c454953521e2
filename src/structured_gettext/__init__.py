"""Resolve structured, data-only message descriptions into localized text.

Usage:
    from structured_gettext import Resolver, load_message

    message = load_message('{"gettext": "Hello %(name)s!", "args": {"name": "Grace"}}')
    print(Resolver().resolve(message))
"""

from .bootstrap import build_oracle, build_resolver, configure_logging
from .config import AppConfig, load_settings
from .core.arguments import bind_arguments, overlay, substitute
from .core.errors import (
    CatalogError,
    DatetimeRangeError,
    FormatError,
    MissingJoinSeparator,
    PayloadFormatError,
    StructuredGettextError,
    ValueShapeError,
)
from .core.i18n import CATEGORY_NAMES, GettextOracle, JsonTranslations, TranslationOracle
from .core.resolver import Resolver, resolve
from .core.shapes import VALUE_SHAPES, argument_from_data, from_data
from .core.utils.json_yaml import load_message, validate_message
from .core.values import (
    Argument,
    Array,
    Bool,
    DCNGetText,
    DGetText,
    DNGetText,
    Datetime,
    Float,
    FormattedText,
    GetText,
    Integer,
    Keyword,
    LocaleCategory,
    NGetText,
    NPGetText,
    PGetText,
    Positional,
    Text,
    Unit,
    Value,
)

__all__ = [
    # Resolution
    "Resolver",
    "resolve",
    "bind_arguments",
    "overlay",
    "substitute",
    # Value model
    "Value",
    "Argument",
    "Positional",
    "Keyword",
    "LocaleCategory",
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
    # Loading
    "VALUE_SHAPES",
    "from_data",
    "argument_from_data",
    "load_message",
    "validate_message",
    # Translation
    "TranslationOracle",
    "GettextOracle",
    "JsonTranslations",
    "CATEGORY_NAMES",
    # Configuration
    "AppConfig",
    "load_settings",
    "build_oracle",
    "build_resolver",
    "configure_logging",
    # Errors
    "StructuredGettextError",
    "FormatError",
    "MissingJoinSeparator",
    "ValueShapeError",
    "CatalogError",
    "DatetimeRangeError",
    "PayloadFormatError",
]
