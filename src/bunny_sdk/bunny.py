"""
账户级管理客户端

Client 使用账户 API Key，并把密钥、会话、User-Agent 与超时共享给
各区域客户端，调用方只需构造一个客户端即可访问管理面的全部区域
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from bunny_sdk.client import BaseClient
from bunny_sdk.constants import DEFAULT_API_BASE_URL, ERROR_PREFIX_DEFAULT
from bunny_sdk.containers.client import ContainersClient
from bunny_sdk.scripting.client import ScriptingClient
from bunny_sdk.scripting.scripts import ScriptService
from bunny_sdk.shield.client import ShieldClient
from bunny_sdk.storage.client import StorageClient
from bunny_sdk.storage.zones import ZoneService
from bunny_sdk.stream.client import StreamClient
from bunny_sdk.stream.libraries import LibraryService

logger = logging.getLogger(__name__)

AreaClient = TypeVar("AreaClient", bound=BaseClient)


class Client(BaseClient):
    """
    Bunny.net 管理客户端（api.bunny.net）

    区域客户端复用本客户端的 session，关闭本客户端即释放全部连接。
    与本客户端同域名的区域（存储、流媒体、脚本、防护）同时继承 base_url，
    容器区域始终使用自己的基础 URL

    示例:
        >>> with Client("account-api-key") as client:
        ...     zones = client.storage_zones().list()
        ...     apps = client.containers().applications().list()
    """

    base_url = DEFAULT_API_BASE_URL
    error_prefix = ERROR_PREFIX_DEFAULT

    def _shared_options(self, client_class: type[BaseClient]) -> dict[str, Any]:
        options = {
            "session": self.session,
            "user_agent": self.config.user_agent,
            "timeout": self.config.timeout,
            "stream_base_url": self.config.stream_base_url,
        }
        if client_class.base_url == DEFAULT_API_BASE_URL:
            options["base_url"] = self.config.base_url
        return options

    def _area(self, client_class: type[AreaClient]) -> AreaClient:
        logger.debug(f"Creating {client_class.__name__} sharing the management session")
        return client_class(self.config.api_key, self._shared_options(client_class))

    def storage(self) -> StorageClient:
        return self._area(StorageClient)

    def stream(self) -> StreamClient:
        return self._area(StreamClient)

    def scripting(self) -> ScriptingClient:
        return self._area(ScriptingClient)

    def storage_zones(self) -> ZoneService:
        return self.storage().zones()

    def libraries(self) -> LibraryService:
        return self.stream().libraries()

    def scripts(self) -> ScriptService:
        return self.scripting().scripts()

    def containers(self) -> ContainersClient:
        return self._area(ContainersClient)

    def shield(self) -> ShieldClient:
        return self._area(ShieldClient)
