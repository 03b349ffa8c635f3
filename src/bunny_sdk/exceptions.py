"""
Bunny SDK 异常模块

定义所有 API 客户端相关的异常类，以及根据 HTTP 状态码和错误信封
构造具体异常的分类函数
"""

from __future__ import annotations

import json
from typing import Any

import requests

from bunny_sdk.constants import (
    ERROR_PREFIX_DEFAULT,
    HTTP_STATUS_FORBIDDEN,
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_SERVER_ERROR,
    HTTP_STATUS_TOO_MANY_REQUESTS,
    HTTP_STATUS_UNAUTHORIZED,
)


class BunnyError(Exception):
    """
    SDK 异常基类

    所有自定义异常的基类，用于统一捕获和处理客户端相关错误
    """


class BunnyAPIError(BunnyError):
    """
    远端 API 返回的错误响应

    当服务器返回 4xx 或 5xx 状态码时抛出此异常，也是 404/401/403/429
    三种细分异常的父类，所有子类共享相同的字段

    参数:
        status_code: HTTP 状态码
        message: 错误描述信息
        error_key: 机器可读的错误标识（可选）
        field: 出错的字段名（可选）
        prefix: 错误信息前缀，标识所属 API 区域
        response: 原始的 requests.Response 对象（可选）
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_key: str = "",
        field: str = "",
        prefix: str = ERROR_PREFIX_DEFAULT,
        response: requests.Response | None = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error_key = error_key or ""
        self.field = field or ""
        self.prefix = prefix
        self.response = response
        super().__init__(self._format())

    def _format(self) -> str:
        if self.field:
            return f"{self.prefix}: {self.message} (status: {self.status_code}, field: {self.field})"
        if self.error_key:
            return f"{self.prefix}: {self.message} (status: {self.status_code}, key: {self.error_key})"
        return f"{self.prefix}: {self.message} (status: {self.status_code})"

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTP_STATUS_NOT_FOUND

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (HTTP_STATUS_UNAUTHORIZED, HTTP_STATUS_FORBIDDEN)

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == HTTP_STATUS_TOO_MANY_REQUESTS

    @property
    def is_retryable(self) -> bool:
        """仅供调用方参考，SDK 本身不做任何重试"""
        return self.status_code >= HTTP_STATUS_SERVER_ERROR or self.status_code == HTTP_STATUS_TOO_MANY_REQUESTS


class BunnyNotFoundError(BunnyAPIError):
    """资源不存在（404）"""


class BunnyAuthError(BunnyAPIError):
    """认证或授权失败（401/403）"""


class BunnyRateLimitError(BunnyAPIError):
    """请求被限流（429）"""


class BunnyNetworkError(BunnyError):
    """
    网络连接异常

    当连接失败、DNS 解析失败等传输层问题发生时抛出，此时没有可供分类的响应
    """


class BunnyTimeoutError(BunnyNetworkError):
    """
    请求超时异常

    当请求执行时间超过传输层设定的超时时间时抛出此异常
    """


class BunnySerializationError(BunnyError):
    """
    请求体序列化失败

    在发出任何网络请求之前抛出
    """


class BunnyDecodeError(BunnyError):
    """
    响应解码失败

    当成功响应的内容不是合法 JSON，或与期望的结构不符时抛出

    属性:
        response: 原始响应对象，便于排查
    """

    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message)
        self.response = response


class BunnyConfigurationError(BunnyError):
    """
    客户端配置异常

    当客户端构造参数无效时抛出，例如基础 URL 为空或覆盖项名称未知
    """


# 状态码 -> 细分异常类型
_STATUS_ERROR_CLASSES: dict[int, type[BunnyAPIError]] = {
    HTTP_STATUS_NOT_FOUND: BunnyNotFoundError,
    HTTP_STATUS_UNAUTHORIZED: BunnyAuthError,
    HTTP_STATUS_FORBIDDEN: BunnyAuthError,
    HTTP_STATUS_TOO_MANY_REQUESTS: BunnyRateLimitError,
}


def parse_error_body(body: bytes | str | None) -> dict[str, str] | None:
    """
    解析错误信封 {"Message": ..., "ErrorKey": ..., "Field": ...}

    返回:
        包含 message、error_key、field 的字典；body 不是合法 JSON 对象时返回 None
    """
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        data: Any = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return {
        "message": _as_text(data.get("Message")),
        "error_key": _as_text(data.get("ErrorKey")),
        "field": _as_text(data.get("Field")),
    }


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def classify_error(
    status_code: int,
    body: bytes | str | None,
    prefix: str = ERROR_PREFIX_DEFAULT,
    response: requests.Response | None = None,
) -> BunnyAPIError:
    """
    根据状态码和响应体构造类型化的 API 异常

    参数:
        status_code: HTTP 状态码
        body: 原始响应体
        prefix: 错误信息前缀
        response: 原始响应对象（可选）

    返回:
        BunnyAPIError 或其子类实例（不会抛出）

    执行步骤:
        1. 尝试把响应体解析为错误信封
        2. 解析失败或 Message 为空时，使用原始响应文本作为 message
        3. 仅根据状态码选择异常类型
    """
    envelope = parse_error_body(body)
    if envelope and envelope["message"]:
        message, error_key, field = envelope["message"], envelope["error_key"], envelope["field"]
    else:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        message, error_key, field = body or "", "", ""

    error_class = _STATUS_ERROR_CLASSES.get(status_code, BunnyAPIError)
    return error_class(
        status_code,
        message,
        error_key=error_key,
        field=field,
        prefix=prefix,
        response=response,
    )
