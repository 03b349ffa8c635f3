"""工具函数模块

提供日志脱敏、请求 ID 生成、路径转义等实用功能
"""

from __future__ import annotations

import time
import uuid
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlparse, urlunparse

from bunny_sdk.constants import HEADER_ACCESS_KEY

# 默认敏感请求头名称集合
DEFAULT_SENSITIVE_HEADERS = {
    HEADER_ACCESS_KEY,
    "Authorization",
    "Cookie",
}

# 默认敏感 URL 参数名称集合
DEFAULT_SENSITIVE_PARAMS = {
    "token",
    "cdnServerToken",
    "password",
    "secret",
    "key",
}

# 默认敏感请求体字段集合（Bunny 的请求体使用 PascalCase/camelCase 键名）
DEFAULT_SENSITIVE_FIELDS = {
    "Password",
    "ReadOnlyPassword",
    "Secret",
    "DeploymentKey",
    "Token",
    "password",
    "token",
    "passwordCredentials",
}


def _lowered(names: set[str]) -> set[str]:
    return {name.lower() for name in names}


def sanitize_headers(
    headers: dict[str, str],
    sensitive_keys: set[str] | None = None,
    mask: str = "***",
) -> dict[str, str]:
    """
    脱敏请求头中的敏感信息

    参数:
        headers: 原始请求头字典
        sensitive_keys: 敏感键名集合，不区分大小写。None 时使用默认集合
        mask: 脱敏后的替换字符串

    返回:
        脱敏后的请求头字典（新字典，不修改原字典）

    示例:
        >>> sanitize_headers({"AccessKey": "abc-123", "Accept": "application/json"})
        {"AccessKey": "***", "Accept": "application/json"}
    """
    hidden = _lowered(DEFAULT_SENSITIVE_HEADERS if sensitive_keys is None else sensitive_keys)
    return {name: mask if name.lower() in hidden else value for name, value in headers.items()}


def sanitize_url(
    url: str,
    sensitive_params: set[str] | None = None,
    mask: str = "***",
) -> str:
    """
    脱敏 URL 中的敏感参数

    示例:
        >>> sanitize_url("https://video.bunnycdn.com/OEmbed?url=x&token=abc")
        "https://video.bunnycdn.com/OEmbed?url=x&token=***"
    """
    parsed = urlparse(url)
    if not parsed.query:
        return url

    hidden = _lowered(DEFAULT_SENSITIVE_PARAMS if sensitive_params is None else sensitive_params)
    query = [
        (name, mask if name.lower() in hidden else value)
        for name, value in parse_qsl(parsed.query, keep_blank_values=True)
    ]
    return urlunparse(parsed._replace(query=urlencode(query)))


def sanitize_dict(
    data: Any,
    sensitive_keys: set[str] | None = None,
    mask: str = "***",
) -> Any:
    """
    递归脱敏请求体中的敏感字段

    参数:
        data: 原始数据（字典、列表或标量）
        sensitive_keys: 敏感键名集合，不区分大小写。None 时使用默认集合
        mask: 脱敏后的替换字符串

    返回:
        脱敏后的新对象，不修改原对象
    """
    hidden = _lowered(DEFAULT_SENSITIVE_FIELDS if sensitive_keys is None else sensitive_keys)

    def _walk(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: mask if str(k).lower() in hidden else _walk(v) for k, v in value.items()}
        if isinstance(value, list):
            return [_walk(item) for item in value]
        return value

    return _walk(data)


def quote_path_segment(value: Any) -> str:
    """对单个路径段做百分号编码（"/" 也会被编码）"""
    return quote(str(value), safe="")


def generate_request_id(suffix: Any = None) -> str:
    """生成全局唯一的请求 ID，用于日志追踪"""
    timestamp = int(time.time() * 1000)  # 毫秒级时间戳
    short_uuid = uuid.uuid4().hex[:8]
    if suffix is None:
        return f"REQ-{timestamp}-{short_uuid}"
    return f"REQ-{timestamp}-{short_uuid}-{suffix}"
