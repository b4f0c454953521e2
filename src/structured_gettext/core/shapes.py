"""Build message trees from parsed JSON/YAML data.

Messages carry no explicit type tag. :func:`from_data` tries the shapes in
:data:`VALUE_SHAPES` in order and keeps the first one that matches; extra
keys in an object are ignored. The order matters for any two shapes that
could accept the same input, so new shapes must be inserted deliberately.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .errors import ValueShapeError
from .values import (
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
    "VALUE_SHAPES",
    "from_data",
    "argument_from_data",
    "MAX_COUNT",
]

# Plural counts are unsigned 32-bit integers.
MAX_COUNT = 0xFFFFFFFF


class _NoMatch(Exception):
    """Signals that a shape does not accept the data."""


def _require(condition: bool) -> None:
    if not condition:
        raise _NoMatch


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    _require(isinstance(value, str))
    return value


def _count(data: Mapping[str, Any], key: str = "n") -> int:
    value = data.get(key)
    _require(isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_COUNT)
    return value


def _object(data: Any, key: str) -> Mapping[str, Any]:
    _require(isinstance(data, Mapping) and key in data)
    return data


def _nested(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    _require(isinstance(value, Mapping))
    return value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _args(data: Mapping[str, Any]) -> Argument | None:
    try:
        return argument_from_data(data.get("args"))
    except ValueShapeError as exc:
        raise _NoMatch from exc


def argument_from_data(data: Any) -> Argument | None:
    """Return the argument described by *data*.

    ``None`` means no argument, an object gives keyword arguments and a list
    gives positional arguments.
    """

    if data is None:
        return None
    if isinstance(data, Mapping):
        if all(isinstance(key, str) for key in data):
            return Keyword({key: from_data(value) for key, value in data.items()})
    elif _is_sequence(data):
        return Positional(tuple(from_data(value) for value in data))
    raise ValueShapeError(f"data did not match any argument shape: {data!r}")


def _text(data: Any) -> Value:
    _require(isinstance(data, str))
    return Text(data)


def _integer(data: Any) -> Value:
    _require(isinstance(data, int) and not isinstance(data, bool))
    return Integer(data)


def _float(data: Any) -> Value:
    _require(isinstance(data, float))
    return Float(data)


def _bool(data: Any) -> Value:
    _require(isinstance(data, bool))
    return Bool(data)


def _unit(data: Any) -> Value:
    _require(data is None)
    return Unit()


def _array(data: Any) -> Value:
    _require(_is_sequence(data))
    try:
        return Array(tuple(from_data(item) for item in data))
    except ValueShapeError as exc:
        raise _NoMatch from exc


def _formatted_text(data: Any) -> Value:
    obj = _object(data, "text")
    return FormattedText(text=_string(obj, "text"), args=_args(obj))


def _datetime(data: Any) -> Value:
    obj = _object(data, "strftime")
    epoch = obj.get("epoch")
    _require(isinstance(epoch, int) and not isinstance(epoch, bool))
    return Datetime(strftime=_string(obj, "strftime"), epoch=epoch)


def _gettext(data: Any) -> Value:
    obj = _object(data, "gettext")
    return GetText(msgid=_string(obj, "gettext"), args=_args(obj))


def _ngettext(data: Any) -> Value:
    obj = _object(data, "ngettext")
    call = _nested(obj, "ngettext")
    return NGetText(
        singular=_string(call, "singular"),
        plural=_string(call, "plural"),
        n=_count(call),
        args=_args(obj),
    )


def _pgettext(data: Any) -> Value:
    obj = _object(data, "pgettext")
    call = _nested(obj, "pgettext")
    return PGetText(ctx=_string(call, "ctx"), msgid=_string(call, "msgid"), args=_args(obj))


def _dgettext(data: Any) -> Value:
    obj = _object(data, "dgettext")
    call = _nested(obj, "dgettext")
    return DGetText(domain=_string(call, "domain"), msgid=_string(call, "msgid"), args=_args(obj))


def _dngettext(data: Any) -> Value:
    obj = _object(data, "dngettext")
    call = _nested(obj, "dngettext")
    return DNGetText(
        domain=_string(call, "domain"),
        singular=_string(call, "singular"),
        plural=_string(call, "plural"),
        n=_count(call),
        args=_args(obj),
    )


def _npgettext(data: Any) -> Value:
    obj = _object(data, "npgettext")
    call = _nested(obj, "npgettext")
    return NPGetText(
        ctx=_string(call, "ctx"),
        singular=_string(call, "singular"),
        plural=_string(call, "plural"),
        n=_count(call),
        args=_args(obj),
    )


def _dcngettext(data: Any) -> Value:
    obj = _object(data, "dcngettext")
    call = _nested(obj, "dcngettext")
    try:
        category = LocaleCategory.parse(_string(call, "category"))
    except ValueError as exc:
        raise _NoMatch from exc
    return DCNGetText(
        domain=_string(call, "domain"),
        singular=_string(call, "singular"),
        plural=_string(call, "plural"),
        n=_count(call),
        category=category,
        args=_args(obj),
    )


VALUE_SHAPES: tuple[Callable[[Any], Value], ...] = (
    _text,
    _integer,
    _float,
    _bool,
    _unit,
    _array,
    _formatted_text,
    _datetime,
    _gettext,
    _ngettext,
    _pgettext,
    _dgettext,
    _dngettext,
    _npgettext,
    _dcngettext,
)


def from_data(data: Any, shapes: Sequence[Callable[[Any], Value]] = VALUE_SHAPES) -> Value:
    """Build a message tree from parsed JSON/YAML *data*.

    Custom *shapes* signal a mismatch by raising :class:`ValueShapeError`.

    Raises:
        ValueShapeError: If *data* matches none of *shapes*.
    """

    for shape in shapes:
        try:
            return shape(data)
        except (_NoMatch, ValueShapeError):
            continue
    raise ValueShapeError(f"data did not match any message shape: {data!r}")
