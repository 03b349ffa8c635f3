"""
存储区域

- StorageClient: 存储区管理（全局 API Key）
- StorageFileClient / FileService: 存储区文件读写（存储区密码）
"""

from bunny_sdk.storage.client import StorageClient, StorageFileClient, new_file_service
from bunny_sdk.storage.files import FileService, region_base_url
from bunny_sdk.storage.models import (
    AvailabilityResponse,
    CreateZoneRequest,
    File,
    Region,
    ResetPasswordResponse,
    ResetReadOnlyPasswordResponse,
    UpdateZoneRequest,
    UploadOptions,
    Zone,
    ZoneList,
    ZoneListOptions,
)
from bunny_sdk.storage.zones import ZoneService

__all__ = [
    # 客户端
    "StorageClient",
    "StorageFileClient",
    "new_file_service",
    # 服务
    "ZoneService",
    "FileService",
    "region_base_url",
    # 数据模型
    "Region",
    "Zone",
    "ZoneList",
    "ZoneListOptions",
    "CreateZoneRequest",
    "UpdateZoneRequest",
    "File",
    "UploadOptions",
    "AvailabilityResponse",
    "ResetPasswordResponse",
    "ResetReadOnlyPasswordResponse",
]
