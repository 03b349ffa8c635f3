"""存储区与存储文件的数据模型（PascalCase 键名）"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import Field

from bunny_sdk.models import BunnyTime, Model
from bunny_sdk.pagination import has_more_one_indexed


class Region(str, Enum):
    """存储区域代码"""

    FALKENSTEIN = "de"  # 默认区域
    NEW_YORK = "ny"
    LOS_ANGELES = "la"
    SINGAPORE = "sg"
    SYDNEY = "syd"
    STOCKHOLM = "se"
    SAO_PAULO = "br"
    JOHANNESBURG = "jh"
    LONDON = "uk"


class Zone(Model):
    id: int = 0
    name: str = ""
    password: str | None = None
    read_only_password: str | None = None
    region: str = ""
    replication_regions: list[str] = Field(default_factory=list)
    storage_used: int = 0
    files_stored: int = 0
    date_modified: BunnyTime = None
    deleted: bool = False
    pull_zones: list[int] = Field(default_factory=list)
    origin_url: str | None = Field(default=None, alias="OriginUrl")
    custom404_file_path: str | None = Field(default=None, alias="Custom404FilePath")
    rewrite404_to200: bool = Field(default=False, alias="Rewrite404To200")


class File(Model):
    """存储区中的文件或目录"""

    guid: str = ""
    storage_zone_name: str = ""
    path: str = ""
    object_name: str = ""
    length: int = 0
    last_changed: BunnyTime = None
    is_directory: bool = False
    date_created: BunnyTime = None
    server_id: int = 0
    storage_zone_id: int = 0
    user_id: str | None = None


class ZoneList(Model):
    """
    存储区分页列表

    该接口的 CurrentPage 与其余接口编号方式不同，
    使用 (current_page + 1) * page_size < total_items 判断是否还有下一页
    """

    items: list[Zone] = Field(default_factory=list)
    total_items: int = 0
    current_page: int = 0
    page_size: int = 0

    @property
    def has_more(self) -> bool:
        return has_more_one_indexed(self.current_page, self.page_size, self.total_items)


class CreateZoneRequest(Model):
    name: str
    region: str | None = None
    replication_regions: list[str] | None = None
    origin_url: str | None = Field(default=None, alias="OriginUrl")


class UpdateZoneRequest(Model):
    replication_regions: list[str] | None = None
    origin_url: str | None = Field(default=None, alias="OriginUrl")
    custom404_file_path: str | None = Field(default=None, alias="Custom404FilePath")
    rewrite404_to200: bool | None = Field(default=None, alias="Rewrite404To200")


@dataclass
class ZoneListOptions:
    page: int = 0
    per_page: int = 0
    include_deleted: bool = False
    search: str = ""

    def to_params(self) -> dict:
        return {
            "page": self.page,
            "perPage": self.per_page,
            "includeDeleted": self.include_deleted,
            "search": self.search,
        }


@dataclass
class UploadOptions:
    """
    文件上传选项

    属性:
        checksum: 大写十六进制 SHA256，作为 Checksum 请求头发送
        content_type: MIME 类型，为空时使用 application/octet-stream
    """

    checksum: str = ""
    content_type: str = ""


class AvailabilityResponse(Model):
    available: bool = False
    name: str = ""


class ResetPasswordResponse(Model):
    id: int = 0
    password: str | None = None
    success: bool = False


class ResetReadOnlyPasswordResponse(Model):
    id: int = 0
    read_only_password: str | None = None
    success: bool = False
