"""Argument binding and printf-style substitution."""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Union

from .errors import FormatError
from .values import Argument, Keyword, Positional, Value

__all__ = [
    "Lookup",
    "overlay",
    "bind_arguments",
    "substitute",
]

Lookup = Union[tuple[str, ...], Mapping[str, str]]


def overlay(local: Mapping[str, str], base: Mapping[str, str]) -> ChainMap[str, str]:
    """Return a single lookup where *local* keys shadow *base* keys.

    The result is a live view: keys added to *base* later are visible.
    """

    return ChainMap(local, base)  # type: ignore[arg-type]


def bind_arguments(
    argument: Argument | None,
    base: Mapping[str, str],
    resolve: Callable[[Value, Mapping[str, str]], str],
    implicit: Mapping[str, str] | None = None,
) -> Lookup:
    """Resolve *argument* into the lookup handed to :func:`substitute`.

    Positional values become a tuple and never see *base* or *implicit*.
    Keyword values are stored on top of *implicit* and overlaid on *base*.
    """

    if isinstance(argument, Positional):
        return tuple(resolve(value, base) for value in argument.values)

    local: dict[str, str] = dict(implicit or {})
    if isinstance(argument, Keyword):
        for key, value in argument.values.items():
            local[key] = resolve(value, base)
    return overlay(local, base)


class _KeywordLookup(Mapping[str, str]):
    """Read-only view over a keyword lookup used during substitution.

    A conversion without a name (``%s``, ``%r``) consumes the whole lookup
    object; rendering it is refused instead of leaking its contents.
    """

    __slots__ = ("_lookup",)

    def __init__(self, lookup: Mapping[str, str]) -> None:
        self._lookup = lookup

    def __getitem__(self, key: str) -> str:
        return self._lookup[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lookup)

    def __len__(self) -> int:
        return len(self._lookup)

    def _refuse(self) -> str:
        raise FormatError("format requires positional arguments, got keyword arguments")

    __str__ = _refuse
    __repr__ = _refuse


def substitute(template: str, args: Sequence[str] | Mapping[str, str]) -> str:
    """Substitute ``%s`` or ``%(name)s`` placeholders in *template*.

    With a mapping only named placeholders are allowed.
    """

    if isinstance(args, Mapping):
        values: object = _KeywordLookup(args)
    else:
        values = tuple(args)
    try:
        return template % values
    except KeyError as exc:
        raise FormatError(f"missing argument {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise FormatError(str(exc)) from exc
