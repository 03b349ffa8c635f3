"""
时间戳编解码模块

Bunny 各 API 返回的时间格式并不统一（带/不带时区、不同精度的小数秒），
这里按固定优先级依次尝试解析，并统一编码为秒级精度的 RFC 3339 文本
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

# 表示“无值”的文本
NULL_SENTINEL = "null"

# 按优先级排列的格式：(strptime 格式, 允许的最大小数位数)
# None 表示不允许出现小数秒
BUNNY_TIME_LAYOUTS: tuple[tuple[str, int | None], ...] = (
    ("%Y-%m-%dT%H:%M:%S%z", None),  # RFC 3339
    ("%Y-%m-%dT%H:%M:%S.%f%z", 9),  # RFC 3339 纳秒
    ("%Y-%m-%dT%H:%M:%S", None),  # 无时区，按 UTC 处理
    ("%Y-%m-%dT%H:%M:%S.%f", 3),  # 毫秒，无时区
    ("%Y-%m-%dT%H:%M:%S.%f", 6),  # 微秒，无时区
    ("%Y-%m-%dT%H:%M:%S.%f", 9),  # 纳秒，无时区
)

# strptime 的 %f 最多接受 6 位
_MAX_STRPTIME_FRACTION = 6
_FRACTION_RE = re.compile(r"(?<=:\d\d)\.(\d+)")


def _parse_layout(text: str, layout: str, max_fraction: int | None) -> datetime:
    match = _FRACTION_RE.search(text)
    if max_fraction is None:
        if match:
            raise ValueError(f"unexpected fractional seconds in {text!r}")
        candidate = text
    else:
        if not match or len(match.group(1)) > max_fraction:
            raise ValueError(f"fractional seconds of {text!r} do not fit layout {layout!r}")
        digits = match.group(1)[:_MAX_STRPTIME_FRACTION]
        candidate = text[: match.start(1)] + digits + text[match.end(1) :]

    parsed = datetime.strptime(candidate, layout)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_bunny_time(value: Any) -> datetime | None:
    """
    解析 Bunny API 返回的时间文本

    参数:
        value: 时间文本；None、空字符串或 "null" 表示无值

    返回:
        带时区的 datetime，无值时返回 None

    异常:
        ValueError: 所有格式均无法解析，或输入不是字符串
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"cannot parse time from {type(value).__name__} value {value!r}")
    if value == "" or value == NULL_SENTINEL:
        return None

    last_error: ValueError | None = None
    for layout, max_fraction in BUNNY_TIME_LAYOUTS:
        try:
            return _parse_layout(value, layout, max_fraction)
        except ValueError as e:
            last_error = e
    raise ValueError(f"unable to parse time {value!r}: {last_error}")


def format_bunny_time(value: datetime | None) -> str | None:
    """
    将 datetime 编码为秒级精度的 RFC 3339 文本

    小数秒会被丢弃，UTC 输出为 "Z"；无值时返回 None（即 JSON null）
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        return text[:-6] + "Z"
    return text
