from datetime import datetime, timezone

from boardview.dates import format_date_value, parse_iso, to_epoch_ms


def test_parse_iso_accepts_z_suffix():
    assert parse_iso("2026-02-20T10:30:00Z") == datetime(2026, 2, 20, 10, 30, tzinfo=timezone.utc)


def test_parse_iso_naive_is_utc():
    assert parse_iso("2026-02-20") == datetime(2026, 2, 20, tzinfo=timezone.utc)


def test_parse_iso_rejects_junk():
    assert parse_iso("tomorrow") is None
    assert parse_iso("") is None
    assert parse_iso(None) is None


def test_to_epoch_ms():
    assert to_epoch_ms("1970-01-01T00:00:01Z") == 1000
    assert to_epoch_ms("2026-02-20T00:00:00.000Z") == to_epoch_ms("2026-02-20")
    assert to_epoch_ms("nope") is None


def test_format_date_value():
    assert format_date_value("2026-02-20T00:00:00.000Z") == "2026-02-20"
    assert format_date_value("2026-02-20") == "2026-02-20"
    assert format_date_value("someday") == "someday"


def test_to_epoch_ms_is_exact():
    midnight = to_epoch_ms("2026-02-20")
    for ms in range(1000):
        assert to_epoch_ms(f"2026-02-20T00:00:00.{ms:03d}Z") - midnight == ms
