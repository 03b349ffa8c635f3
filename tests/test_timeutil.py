"""
测试 bunny_sdk.timeutil 模块

测试各种时间格式的解析与秒级 RFC 3339 编码
"""

import pytest
from datetime import datetime, timedelta, timezone
from bunny_sdk.timeutil import format_bunny_time, parse_bunny_time


class TestParseBunnyTime:
    """测试 parse_bunny_time 函数"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2024-01-15T10:30:00Z", datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)),
            ("2024-01-15T10:30:00.5Z", datetime(2024, 1, 15, 10, 30, 0, 500000, tzinfo=timezone.utc)),
            ("2024-01-15T10:30:00.123456789Z", datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)),
            ("2024-01-15T10:30:00", datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)),
            ("2024-01-15T10:30:00.123", datetime(2024, 1, 15, 10, 30, 0, 123000, tzinfo=timezone.utc)),
            ("2024-01-15T10:30:00.123456", datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)),
            ("2024-01-15T10:30:00.123456789", datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)),
        ],
    )
    def test_supported_layouts(self, text, expected):
        """依次尝试的六种格式"""
        assert parse_bunny_time(text) == expected

    @pytest.mark.unit
    def test_keeps_offset(self):
        parsed = parse_bunny_time("2024-01-15T10:30:00+02:00")

        assert parsed.utcoffset() == timedelta(hours=2)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "null"])
    def test_no_value(self, value):
        assert parse_bunny_time(value) is None

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["not-a-date", "2024-01-15", 1705314600])
    def test_invalid_raises(self, value):
        with pytest.raises(ValueError):
            parse_bunny_time(value)


class TestFormatBunnyTime:
    """测试 format_bunny_time 函数"""

    @pytest.mark.unit
    def test_utc_uses_z_and_drops_fraction(self):
        value = datetime(2024, 1, 15, 10, 30, 0, 999999, tzinfo=timezone.utc)

        assert format_bunny_time(value) == "2024-01-15T10:30:00Z"

    @pytest.mark.unit
    def test_naive_is_treated_as_utc(self):
        assert format_bunny_time(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00Z"

    @pytest.mark.unit
    def test_offset_is_kept(self):
        value = datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=-5)))

        assert format_bunny_time(value) == "2024-01-15T10:30:00-05:00"

    @pytest.mark.unit
    def test_none(self):
        assert format_bunny_time(None) is None


class TestRoundTrip:
    """测试解析后再编码得到规范的秒级文本"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,canonical",
        [
            ("2024-01-02T03:04:05Z", "2024-01-02T03:04:05Z"),
            ("2024-01-02T03:04:05.123456789Z", "2024-01-02T03:04:05Z"),
            ("2024-01-02T03:04:05", "2024-01-02T03:04:05Z"),
            ("2024-01-02T03:04:05.123", "2024-01-02T03:04:05Z"),
            ("2024-01-02T03:04:05.123456", "2024-01-02T03:04:05Z"),
            ("2024-01-02T03:04:05.123456789", "2024-01-02T03:04:05Z"),
            ("2024-01-02T03:04:05+02:00", "2024-01-02T03:04:05+02:00"),
        ],
    )
    def test_format_of_parse_is_canonical(self, text, canonical):
        assert format_bunny_time(parse_bunny_time(text)) == canonical
