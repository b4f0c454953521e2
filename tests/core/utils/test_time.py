import pytest

from structured_gettext.core.errors import DatetimeRangeError
from structured_gettext.core.utils.time_ import DatetimeRenderer, epoch_to_datetime, render_epoch

EPOCH = 1565854615  # 2019-08-15 07:36:55 UTC


def test_epoch_to_datetime_converts_timezone():
    result = epoch_to_datetime(EPOCH, tz="Europe/Brussels")
    assert result.hour == 9
    assert getattr(result.tzinfo, "key", "") == "Europe/Brussels"


def test_epoch_to_datetime_defaults_to_local_zone():
    result = epoch_to_datetime(0)
    assert result.tzinfo is not None
    assert result.timestamp() == 0


def test_render_epoch_with_zone_abbreviation():
    assert render_epoch("%Y-%m-%d %H:%M:%S %Z", EPOCH, "Europe/Brussels") == "2019-08-15 09:36:55 CEST"
    assert render_epoch("It is now: %H:%M", EPOCH, "UTC") == "It is now: 07:36"


def test_renderer_is_bound_to_zone():
    renderer = DatetimeRenderer("Asia/Tokyo")
    assert renderer("%H:%M", EPOCH) == "16:36"


def test_unknown_timezone():
    with pytest.raises(ValueError):
        DatetimeRenderer("Mars/Olympus_Mons")
    with pytest.raises(ValueError):
        render_epoch("%c", EPOCH, "Nowhere/Atlantis")


@pytest.mark.parametrize("epoch", [10**12, -(10**12), 2**63 - 1])
def test_epoch_out_of_calendar_range(epoch):
    with pytest.raises(DatetimeRangeError):
        render_epoch("%Y", epoch, "UTC")
    with pytest.raises(DatetimeRangeError):
        epoch_to_datetime(epoch)
