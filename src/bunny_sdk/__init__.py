"""
bunny-sdk Bunny.net API 客户端

以同一条请求/响应管道访问 Bunny.net 的各个 API 区域

主要组件:
    - Client: 账户级管理客户端，可派生各区域客户端
    - 区域客户端: StorageClient, StorageFileClient, StreamClient, ScriptingClient,
      ContainersClient, ShieldClient
    - 异常类: BunnyError 及其子类
    - 解析器: JSONResponseParser, StreamResponseParser, FileWriteResponseParser
    - 认证: AccessKeyAuth
    - 记录编解码: Model, CamelModel, BunnyTime（基于 pydantic）

各区域的数据模型与服务类从对应子包导入，例如 bunny_sdk.containers

使用示例:
    >>> from bunny_sdk import Client
    >>> from bunny_sdk.storage import CreateZoneRequest
    >>>
    >>> with Client("account-api-key") as client:
    ...     zone = client.storage_zones().create(CreateZoneRequest(name="assets"))
    ...     page = client.storage_zones().list()
"""

# 核心客户端
from bunny_sdk.auth import AccessKeyAuth
from bunny_sdk.bunny import Client
from bunny_sdk.client import (
    BaseClient,
    BaseService,
    ClientConfig,
    Requester,
    ScopedRequester,
    with_base_url,
    with_session,
    with_stream_base_url,
    with_timeout,
    with_user_agent,
)

# 区域客户端
from bunny_sdk.containers.client import ContainersClient
from bunny_sdk.scripting.client import ScriptingClient
from bunny_sdk.shield.client import ShieldClient
from bunny_sdk.storage.client import StorageClient, StorageFileClient, new_file_service
from bunny_sdk.stream.client import StreamClient

# 异常类
from bunny_sdk.exceptions import (
    BunnyAPIError,
    BunnyAuthError,
    BunnyConfigurationError,
    BunnyDecodeError,
    BunnyError,
    BunnyNetworkError,
    BunnyNotFoundError,
    BunnyRateLimitError,
    BunnySerializationError,
    BunnyTimeoutError,
    classify_error,
    parse_error_body,
)

# 响应解析器
from bunny_sdk.parser import (
    BaseResponseParser,
    FileWriteResponseParser,
    JSONResponseParser,
    StreamResponseParser,
)

# 记录编解码
from bunny_sdk.models import BunnyTime, CamelModel, Model, decode_value, encode_value

# 分页与查询字符串
from bunny_sdk.pagination import (
    ListOptions,
    PaginatedResponse,
    append_query,
    build_list_query,
    build_list_url,
    has_more_one_indexed,
    has_more_zero_indexed,
)

# 时间编解码
from bunny_sdk.timeutil import format_bunny_time, parse_bunny_time

# 工具函数
from bunny_sdk.utils import sanitize_dict, sanitize_headers, sanitize_url

# 常量配置
from bunny_sdk.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_CONTAINERS_BASE_URL,
    DEFAULT_STREAM_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    HEADER_ACCESS_KEY,
)

__all__ = [
    # 核心类
    "Client",
    "BaseClient",
    "BaseService",
    "ClientConfig",
    "Requester",
    "ScopedRequester",
    "with_base_url",
    "with_stream_base_url",
    "with_user_agent",
    "with_session",
    "with_timeout",
    # 区域客户端
    "StorageClient",
    "StorageFileClient",
    "new_file_service",
    "StreamClient",
    "ScriptingClient",
    "ContainersClient",
    "ShieldClient",
    # 异常
    "BunnyError",
    "BunnyAPIError",
    "BunnyNotFoundError",
    "BunnyAuthError",
    "BunnyRateLimitError",
    "BunnyNetworkError",
    "BunnyTimeoutError",
    "BunnySerializationError",
    "BunnyDecodeError",
    "BunnyConfigurationError",
    "classify_error",
    "parse_error_body",
    # 认证
    "AccessKeyAuth",
    # 解析器
    "BaseResponseParser",
    "JSONResponseParser",
    "StreamResponseParser",
    "FileWriteResponseParser",
    # 记录编解码
    "Model",
    "CamelModel",
    "BunnyTime",
    "decode_value",
    "encode_value",
    # 分页
    "ListOptions",
    "PaginatedResponse",
    "append_query",
    "build_list_query",
    "build_list_url",
    "has_more_zero_indexed",
    "has_more_one_indexed",
    # 时间
    "parse_bunny_time",
    "format_bunny_time",
    # 工具函数
    "sanitize_headers",
    "sanitize_url",
    "sanitize_dict",
    # 常量
    "DEFAULT_API_BASE_URL",
    "DEFAULT_STREAM_BASE_URL",
    "DEFAULT_CONTAINERS_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "HEADER_ACCESS_KEY",
]

__version__ = "1.0.0"
__author__ = "HACK-WU"
