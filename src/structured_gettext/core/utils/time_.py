"""Time and date utilities."""

from __future__ import annotations

import datetime as _dt
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import DatetimeRangeError

__all__ = [
    "epoch_to_datetime",
    "render_epoch",
    "DatetimeRenderer",
]


def _get_zoneinfo(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {tz}") from exc


def epoch_to_datetime(epoch: float, tz: str | None = None) -> _dt.datetime:
    """Convert an epoch timestamp to a timezone aware datetime.

    Without *tz* the process' local timezone is used. Epochs outside the
    years 1 to 9999 raise :class:`DatetimeRangeError`.
    """

    zone = None if tz is None else _get_zoneinfo(tz)
    try:
        utc_dt = _dt.datetime.fromtimestamp(epoch, tz=_dt.timezone.utc)
        return utc_dt.astimezone(zone)
    except (OverflowError, OSError, ValueError) as exc:
        raise DatetimeRangeError(epoch) from exc


def render_epoch(pattern: str, epoch: float, tz: str | None = None) -> str:
    """Render *epoch* with a ``strftime`` *pattern* using the current locale."""

    return epoch_to_datetime(epoch, tz).strftime(pattern)


class DatetimeRenderer:
    """Callable renderer bound to an optional timezone."""

    __slots__ = ("tz",)

    def __init__(self, tz: str | None = None) -> None:
        if tz is not None:
            _get_zoneinfo(tz)
        self.tz = tz

    def __call__(self, pattern: str, epoch: int) -> str:
        return render_epoch(pattern, epoch, self.tz)
