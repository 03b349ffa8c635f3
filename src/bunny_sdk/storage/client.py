"""存储区域客户端"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bunny_sdk.client import BaseClient
from bunny_sdk.constants import DEFAULT_API_BASE_URL, ERROR_PREFIX_STORAGE
from bunny_sdk.storage.files import FileService, region_base_url
from bunny_sdk.storage.models import Region
from bunny_sdk.storage.zones import ZoneService


class StorageClient(BaseClient):
    """
    存储区管理客户端（api.bunny.net，使用全局 API Key）

    示例:
        >>> client = StorageClient("global-api-key", user_agent="my-app/2.0")
        >>> zone = client.zones().get(123)
    """

    base_url = DEFAULT_API_BASE_URL
    error_prefix = ERROR_PREFIX_STORAGE

    def zones(self) -> ZoneService:
        return ZoneService(self)


class StorageFileClient(BaseClient):
    """
    存储文件客户端（存储数据面，使用存储区密码）

    参数:
        zone_name: 存储区名称
        access_key: 存储区密码（FTP & API Access 中的密码）
        region: 存储区域，决定默认的基础 URL
        *overrides, **options: 与 BaseClient 相同，显式的 base_url 优先于区域推导的地址
    """

    error_prefix = ERROR_PREFIX_STORAGE

    def __init__(
        self,
        zone_name: str,
        access_key: str,
        region: Region | str = Region.FALKENSTEIN,
        *overrides: Mapping[str, Any],
        **options: Any,
    ):
        self.zone_name = zone_name
        self.region = region
        super().__init__(access_key, {"base_url": region_base_url(region)}, *overrides, **options)

    def files(self) -> FileService:
        return FileService(self, self.zone_name)


def new_file_service(
    zone_name: str,
    access_key: str,
    region: Region | str = Region.FALKENSTEIN,
    *overrides: Mapping[str, Any],
    **options: Any,
) -> FileService:
    """创建绑定到指定存储区的 FileService"""
    return StorageFileClient(zone_name, access_key, region, *overrides, **options).files()
