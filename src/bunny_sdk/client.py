"""HTTP 客户端核心模块

提供所有 API 区域共用的请求/响应管道：
- 请求体 JSON 序列化
- 认证与内容协商请求头
- 错误响应分类
- 类型化响应解码
- 连接池管理与日志脱敏

各区域客户端（存储、流媒体、脚本、容器、防护）只是以不同的
ClientConfig 参数化同一条管道
"""

from __future__ import annotations

import dataclasses
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from requests.auth import AuthBase

from bunny_sdk.auth import AccessKeyAuth
from bunny_sdk.constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_API_BASE_URL,
    DEFAULT_POOL_CONFIG,
    DEFAULT_STREAM_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ERROR_PREFIX_DEFAULT,
    HEADER_ACCEPT,
    HEADER_ACCESS_KEY,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    HTTP_METHOD_DELETE,
    HTTP_METHOD_GET,
    HTTP_METHOD_PATCH,
    HTTP_METHOD_POST,
    HTTP_METHOD_PUT,
    HTTP_STATUS_ERROR_THRESHOLD,
    HTTP_STATUS_NO_CONTENT,
)
from bunny_sdk.exceptions import (
    BunnyAPIError,
    BunnyConfigurationError,
    BunnyNetworkError,
    BunnySerializationError,
    BunnyTimeoutError,
    classify_error,
)
from bunny_sdk.models import encode_value
from bunny_sdk.parser import BaseResponseParser, JSONResponseParser, StreamResponseParser
from bunny_sdk.utils import generate_request_id, sanitize_dict, sanitize_headers, sanitize_url

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """
    客户端配置（构造后不可变）

    属性:
        api_key: 访问密钥，作为认证头的值发送
        base_url: API 基础 URL
        stream_base_url: 视频数据面的基础 URL（仅流媒体区域使用）
        user_agent: User-Agent 请求头
        session: 调用方提供的 requests.Session（或任何具有 request 方法的对象），None 时由客户端创建
        timeout: 透传给传输层的超时时间（秒）
        error_prefix: 错误信息前缀
        auth_header: 认证头名称
    """

    api_key: str = dataclasses.field(default="", repr=False)
    base_url: str = DEFAULT_API_BASE_URL
    stream_base_url: str = DEFAULT_STREAM_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    session: Any = None
    timeout: float | None = DEFAULT_TIMEOUT
    error_prefix: str = ERROR_PREFIX_DEFAULT
    auth_header: str = HEADER_ACCESS_KEY

    def with_overrides(self, *overrides: Mapping[str, Any], **changes: Any) -> ClientConfig:
        """
        按顺序应用覆盖项，返回新的配置

        参数:
            *overrides: 覆盖项字典，依次应用
            **changes: 最后应用的覆盖项

        返回:
            新的 ClientConfig，后出现的同名覆盖项生效

        异常:
            BunnyConfigurationError: 覆盖项名称未知
        """
        merged: dict[str, Any] = {}
        for override in (*overrides, changes):
            for name, value in override.items():
                if name not in _CONFIG_FIELDS:
                    raise BunnyConfigurationError(f"unknown client option: {name!r}")
                merged[name] = value
        return dataclasses.replace(self, **merged)


_CONFIG_FIELDS = frozenset(f.name for f in dataclasses.fields(ClientConfig))


# ========== 覆盖项构造函数 ==========
def with_base_url(base_url: str) -> dict[str, Any]:
    return {"base_url": base_url}


def with_stream_base_url(stream_base_url: str) -> dict[str, Any]:
    return {"stream_base_url": stream_base_url}


def with_user_agent(user_agent: str) -> dict[str, Any]:
    return {"user_agent": user_agent}


def with_session(session: Any) -> dict[str, Any]:
    return {"session": session}


def with_timeout(timeout: float | None) -> dict[str, Any]:
    return {"timeout": timeout}


class Requester(ABC):
    """
    服务对象依赖的最小能力：发送 JSON 请求或原始字节请求

    任何实现了这两个方法的对象都可以替代真实客户端（例如测试替身）
    """

    @abstractmethod
    def do(self, method: str, path: str, body: Any = None, result_type: Any = None) -> Any:
        """发送 JSON 请求，result_type 不为 None 时把响应体解码为该类型"""

    @abstractmethod
    def do_raw(
        self,
        method: str,
        path: str,
        data: Any = None,
        content_type: str | None = None,
        headers: Mapping[str, str] | None = None,
        stream: bool = False,
        parser: BaseResponseParser | None = None,
    ) -> Any:
        """发送原始请求体；stream=True 时返回未关闭的响应对象"""


class BaseClient(Requester):
    """
    API 客户端基类

    实现一次完整的请求/响应管道，子类只需通过类属性指定各自的默认值

    类属性:
        base_url: 默认 API 基础 URL
        user_agent: 默认 User-Agent
        default_timeout: 默认超时时间（秒）
        error_prefix: 错误信息前缀
        auth_header: 认证头名称
        authentication_class: 认证类，以 (api_key, auth_header) 实例化
        pool_config: 连接池配置字典
        response_parser_class: JSON 响应解析器
    """

    # ========== 基础配置 ==========
    base_url: str = DEFAULT_API_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    default_timeout: float | None = DEFAULT_TIMEOUT
    error_prefix: str = ERROR_PREFIX_DEFAULT
    auth_header: str = HEADER_ACCESS_KEY

    # 认证类，用于在每个请求上附加访问密钥
    authentication_class: type[AuthBase] = AccessKeyAuth

    # 连接池配置字典，不配置任何重试
    pool_config: dict[str, Any] = DEFAULT_POOL_CONFIG

    # 响应数据解析器类，用于把成功响应解码为类型化记录
    response_parser_class: type[BaseResponseParser] = JSONResponseParser

    def __init__(self, api_key: str, *overrides: Mapping[str, Any], **options: Any):
        """
        初始化 API 客户端实例

        参数:
            api_key: 访问密钥
            *overrides: 覆盖项字典，按顺序应用
            **options: 最后应用的覆盖项（base_url、user_agent、session、timeout 等）

        执行步骤:
            1. 以类属性为默认值构造 ClientConfig
            2. 依次应用覆盖项，后者覆盖前者
            3. 校验基础 URL
            4. 使用调用方提供的 session，或创建新的 Session

        异常:
            BunnyConfigurationError: 基础 URL 为空或覆盖项名称未知
        """
        defaults = ClientConfig(
            api_key=api_key,
            base_url=self.base_url,
            user_agent=self.user_agent,
            timeout=self.default_timeout,
            error_prefix=self.error_prefix,
            auth_header=self.auth_header,
        )
        self.config = defaults.with_overrides(*overrides, **options)
        if not self.config.base_url:
            raise BunnyConfigurationError("base_url must not be empty")

        self.auth_instance = self.authentication_class(self.config.api_key, self.config.auth_header)
        self.response_parser_instance = self.response_parser_class()
        self._owns_session = self.config.session is None
        self.session = self.config.session if self.config.session is not None else self._create_session()

    def _create_session(self) -> requests.Session:
        """
        创建并配置 requests.Session 对象

        只挂载连接池大小配置，不配置重试策略
        """
        session = requests.Session()
        adapter = HTTPAdapter(**self.pool_config)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def bind(self, base_url: str) -> Requester:
        """返回一个把请求发往另一个基础 URL 的 Requester，复用本客户端的密钥与会话"""
        return ScopedRequester(self, base_url)

    # ========== Requester 接口 ==========
    def do(self, method: str, path: str, body: Any = None, result_type: Any = None) -> Any:
        return self.request_json(self.config.base_url, method, path, body, result_type)

    def do_raw(
        self,
        method: str,
        path: str,
        data: Any = None,
        content_type: str | None = None,
        headers: Mapping[str, str] | None = None,
        stream: bool = False,
        parser: BaseResponseParser | None = None,
    ) -> Any:
        return self.request_raw(
            self.config.base_url,
            method,
            path,
            data=data,
            content_type=content_type,
            headers=headers,
            stream=stream,
            parser=parser,
        )

    # ========== 管道 ==========
    def _base_headers(self) -> dict[str, str]:
        return {HEADER_USER_AGENT: self.config.user_agent}

    def _serialize(self, body: Any) -> str:
        try:
            return json.dumps(encode_value(body), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise BunnySerializationError(f"{self.config.error_prefix}: failed to marshal request body: {e}") from e

    def request_json(
        self,
        base_url: str,
        method: str,
        path: str,
        body: Any = None,
        result_type: Any = None,
    ) -> Any:
        """
        执行 JSON 请求并解码响应

        参数:
            base_url: 基础 URL
            method: HTTP 方法
            path: 以 "/" 开头的请求路径（可含查询字符串）
            body: 请求体（Model、dict、list 或 None）
            result_type: 期望的响应类型，None 表示丢弃响应体

        返回:
            解码后的记录；result_type 为 None 或状态码为 204 时返回 None

        执行步骤:
            1. 序列化请求体，失败时在发出请求前抛出 BunnySerializationError
            2. 附加认证、User-Agent、Accept 请求头，有请求体时附加 Content-Type
            3. 发送请求，4xx/5xx 响应经分类后抛出
            4. 按 result_type 解码响应体
            5. 任何路径上都关闭响应

        异常:
            BunnySerializationError: 请求体无法编码为 JSON
            BunnyAPIError: 服务器返回错误响应（及其子类）
            BunnyNetworkError: 传输层错误
            BunnyDecodeError: 响应体不是合法 JSON 或结构不符
        """
        headers = self._base_headers()
        headers[HEADER_ACCEPT] = CONTENT_TYPE_JSON
        data = None
        if body is not None:
            data = self._serialize(body)
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON

        request_id = generate_request_id()
        if body is not None and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"[{request_id}] Request body: {sanitize_dict(encode_value(body))}")

        response = self._make_request(request_id, method, base_url + path, headers, data)
        try:
            if result_type is None or response.status_code == HTTP_STATUS_NO_CONTENT:
                return None
            logger.debug(f"[{request_id}] Parsing response data")
            return self.response_parser_instance.parse(response, result_type)
        finally:
            response.close()

    def request_raw(
        self,
        base_url: str,
        method: str,
        path: str,
        data: Any = None,
        content_type: str | None = None,
        headers: Mapping[str, str] | None = None,
        stream: bool = False,
        parser: BaseResponseParser | None = None,
    ) -> Any:
        """
        执行原始字节请求（上传、下载）

        参数:
            data: 请求体（bytes、文件对象或 None）
            content_type: Content-Type，None 时不发送
            headers: 额外请求头
            stream: 是否以流式方式接收响应
            parser: 响应解析器；为流式解析器时响应交由其处理

        返回:
            stream=True 且未指定 parser 时返回未关闭的响应对象；
            指定 parser 时返回其解析结果；否则返回 None
        """
        if parser is None and stream:
            parser = StreamResponseParser()
        stream = stream or bool(parser and parser.is_stream)

        request_headers = self._base_headers()
        if content_type:
            request_headers[HEADER_CONTENT_TYPE] = content_type
        request_headers.update(headers or {})

        request_id = generate_request_id()
        response = self._make_request(request_id, method, base_url + path, request_headers, data, stream=stream)
        if isinstance(parser, StreamResponseParser):
            # 由调用方负责关闭
            return parser.parse(response)
        try:
            if parser is None:
                return None
            return parser.parse(response)
        finally:
            response.close()

    def _make_request(
        self,
        request_id: str,
        method: str,
        url: str,
        headers: dict[str, str],
        data: Any,
        stream: bool = False,
    ) -> requests.Response:
        """
        执行单个 HTTP 请求，返回状态码小于 400 的原始 Response 对象

        异常:
            BunnyTimeoutError: 请求超时
            BunnyAPIError: HTTP 错误响应（4xx, 5xx）
            BunnyNetworkError: 网络连接错误
        """
        safe_url = sanitize_url(url)
        logger.info(f"[{request_id}] Starting {method} request to {safe_url}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"[{request_id}] Request headers: {sanitize_headers(headers)}")

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                data=data,
                auth=self.auth_instance,
                timeout=self.config.timeout,
                stream=stream,
            )
        except requests.exceptions.Timeout as e:
            error = BunnyTimeoutError(f"Request to {safe_url} timed out after {self.config.timeout}s")
            logger.error(f"[{request_id}] Request failed: {error}")
            raise error from e
        except requests.exceptions.RequestException as e:
            error = BunnyNetworkError(f"Request to {safe_url} failed: {e}")
            logger.error(f"[{request_id}] Request failed: {error}")
            raise error from e

        logger.info(f"[{request_id}] Received {response.status_code} response")
        if response.status_code >= HTTP_STATUS_ERROR_THRESHOLD:
            try:
                error = self._error_from_response(response)
            finally:
                response.close()
            logger.error(f"[{request_id}] Request failed: {error}")
            raise error
        return response

    def _error_from_response(self, response: requests.Response) -> BunnyAPIError | BunnyNetworkError:
        try:
            body = response.content
        except requests.exceptions.RequestException as e:
            return BunnyNetworkError(f"{self.config.error_prefix}: failed to read error response: {e}")
        return classify_error(response.status_code, body, self.config.error_prefix, response)

    # ========== 资源管理 ==========
    def close(self):
        """关闭客户端自己创建的 Session，调用方提供的 session 由调用方负责"""
        if self.session is not None and self._owns_session:
            self.session.close()
            logger.info("Session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class ScopedRequester(Requester):
    """把请求发往指定基础 URL 的 Requester，复用所属客户端的配置与会话"""

    def __init__(self, client: BaseClient, base_url: str):
        self.client = client
        self.base_url = base_url

    def do(self, method: str, path: str, body: Any = None, result_type: Any = None) -> Any:
        return self.client.request_json(self.base_url, method, path, body, result_type)

    def do_raw(
        self,
        method: str,
        path: str,
        data: Any = None,
        content_type: str | None = None,
        headers: Mapping[str, str] | None = None,
        stream: bool = False,
        parser: BaseResponseParser | None = None,
    ) -> Any:
        return self.client.request_raw(
            self.base_url,
            method,
            path,
            data=data,
            content_type=content_type,
            headers=headers,
            stream=stream,
            parser=parser,
        )


class BaseService:
    """
    资源服务基类

    绑定一个 Requester，子类在构造时额外绑定路径作用域标识（如应用 ID、视频库 ID）。
    服务对象不缓存任何状态，每次访问器调用都会新建
    """

    def __init__(self, client: Requester):
        self.client = client

    def _get(self, path: str, result_type: Any = None) -> Any:
        return self.client.do(HTTP_METHOD_GET, path, None, result_type)

    def _post(self, path: str, body: Any = None, result_type: Any = None) -> Any:
        return self.client.do(HTTP_METHOD_POST, path, body, result_type)

    def _put(self, path: str, body: Any = None, result_type: Any = None) -> Any:
        return self.client.do(HTTP_METHOD_PUT, path, body, result_type)

    def _patch(self, path: str, body: Any = None, result_type: Any = None) -> Any:
        return self.client.do(HTTP_METHOD_PATCH, path, body, result_type)

    def _delete(self, path: str, body: Any = None, result_type: Any = None) -> Any:
        return self.client.do(HTTP_METHOD_DELETE, path, body, result_type)
