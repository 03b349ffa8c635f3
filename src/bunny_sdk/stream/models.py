"""
流媒体数据模型（camelCase 键名）

列表信封统一使用 current_page * items_per_page < total_items 判断是否还有下一页
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from pydantic import Field

from bunny_sdk.models import BunnyTime, CamelModel
from bunny_sdk.pagination import has_more_zero_indexed


class VideoState(str, Enum):
    CREATED = "created"
    PROCESSING = "processing"
    FINISHED = "finished"
    ERROR = "error"


class OutputCodec(IntEnum):
    X264 = 0
    VP9 = 1
    HEVC = 2
    AV1 = 3


# ========== 视频 ==========
class Moment(CamelModel):
    id: str = ""
    label: str = ""
    timestamp: int = 0  # 毫秒


class Chapter(CamelModel):
    id: str = ""
    title: str = ""
    start: int = 0  # 毫秒
    end: int = 0


class Caption(CamelModel):
    srclang: str = ""
    label: str = ""


class MetaTag(CamelModel):
    property: str = ""
    value: str = ""


class Video(CamelModel):
    video_id: str = ""
    video_library_id: int = 0
    title: str = ""
    description: str | None = None
    upload_date: BunnyTime = None
    views: int = 0
    duration: int = 0
    width: int = 0
    height: int = 0
    state: VideoState | None = None
    framerate: float = 0.0
    video_codec: str | None = None
    audio_codec: str | None = None
    collection_id: str | None = None
    thumbnail_file_name: str | None = None
    preview_image_urls: list[str] = Field(default_factory=list)
    moments: list[Moment] = Field(default_factory=list)
    chapters: list[Chapter] = Field(default_factory=list)
    captions: list[Caption] = Field(default_factory=list)
    meta_tags: list[MetaTag] = Field(default_factory=list)
    transcoding_messages: list[str] = Field(default_factory=list)


class _StreamPage(CamelModel):
    items_per_page: int = 0
    current_page: int = 0
    total_items: int = 0

    @property
    def has_more(self) -> bool:
        return has_more_zero_indexed(self.current_page, self.items_per_page, self.total_items)


class VideoList(_StreamPage):
    items: list[Video] = Field(default_factory=list)


class CreateVideoRequest(CamelModel):
    title: str
    collection_id: str | None = None
    thumbnail_time: int | None = None  # 毫秒


class UpdateVideoRequest(CamelModel):
    title: str | None = None
    collection_id: str | None = None


class FetchVideoRequest(CamelModel):
    url: str
    headers: dict[str, str] | None = None


class FetchVideoResponse(CamelModel):
    video_id: str = ""
    state: VideoState | None = None
    upload_date: BunnyTime = None


class Resolution(CamelModel):
    resolution: int = 0  # 高度（像素）
    bitrate: int = 0  # kbps


class ReencodeRequest(CamelModel):
    resolutions: list[Resolution] | None = None


class AddCaptionRequest(CamelModel):
    """
    属性:
        srclang: ISO 639-1 语言代码
        label: 显示名称
        captions_file: Base64 编码的 VTT/SRT 内容
    """

    srclang: str
    label: str
    captions_file: str


class SetThumbnailRequest(CamelModel):
    thumbnail_time: int  # 毫秒


class SetThumbnailResponse(CamelModel):
    video_id: str = ""
    thumbnail_file_name: str = ""
    thumbnail_url: str = ""


class HeatmapPoint(CamelModel):
    timestamp: int = 0
    watch_time: int = 0
    percentage: float = 0.0


class HeatmapData(CamelModel):
    video_id: str = ""
    heatmap_data: list[HeatmapPoint] = Field(default_factory=list)


class CountryViews(CamelModel):
    country: str = ""
    views: int = 0


class VideoStatistics(CamelModel):
    video_id: str = ""
    views: int = 0
    engagement_rate: float = 0.0
    average_watch_time: int = 0
    total_watch_time: int = 0
    unique_viewers: int = 0
    device_types: dict[str, int] = Field(default_factory=dict)
    countries: list[CountryViews] = Field(default_factory=list)


class CaptionTrack(CamelModel):
    srclang: str = ""
    label: str = ""
    url: str = ""


class PlaybackInfo(CamelModel):
    video_id: str = ""
    playback_url: str = ""
    hls_url: str = ""
    dash_url: str = ""
    caption_tracks: list[CaptionTrack] = Field(default_factory=list)


class VideoPlayData(CamelModel):
    """/play 接口返回的完整播放器配置"""

    video: Video | None = None
    library_name: str = ""
    captions_path: str = ""
    seek_path: str = ""
    thumbnail_url: str = ""
    fallback_url: str = ""
    video_playlist_url: str = ""
    original_url: str = ""
    preview_url: str = ""
    controls: str = ""
    enable_drm: bool = Field(default=False, alias="enableDRM")
    drm_version: int = 0
    player_key_color: str = ""
    vast_tag_url: str = ""
    captions_font_size: int = 0
    captions_font_color: str = ""
    captions_background: str = ""
    ui_language: str = ""
    allow_early_play: bool = False
    token_auth_enabled: bool = False
    enable_mp4_fallback: bool = Field(default=False, alias="enableMP4Fallback")
    show_heatmap: bool = False
    font_family: str = ""
    playback_speeds: str = ""
    remember_player_position: bool = False


class StatusResponse(CamelModel):
    success: bool = False
    message: str | None = None
    status_code: int = 0


class EncodedResolution(CamelModel):
    codec: str = ""
    resolution: str = ""
    size: int = 0


class StorageSizeData(CamelModel):
    encoded: list[EncodedResolution] = Field(default_factory=list)
    thumbnails: int = 0
    previews: int = 0
    originals: int = 0
    mp4_fallback: int = 0
    miscellaneous: int = 0
    calculated_at: str = ""


class StorageSizeResponse(StatusResponse):
    data: StorageSizeData | None = None


class ResolutionReference(CamelModel):
    resolution: str = ""
    codec: str = ""


class StorageObject(CamelModel):
    path: str = ""
    size: int = 0
    resolution: str = ""


class ResolutionsInfoData(CamelModel):
    video_id: str = ""
    video_library_id: int = 0
    available_resolutions: list[str] = Field(default_factory=list)
    configured_resolutions: list[str] = Field(default_factory=list)
    playlist_resolutions: list[ResolutionReference] = Field(default_factory=list)
    storage_resolutions: list[ResolutionReference] = Field(default_factory=list)
    mp4_resolutions: list[ResolutionReference] = Field(default_factory=list)
    storage_objects: list[StorageObject] = Field(default_factory=list)
    old_resolutions: list[StorageObject] = Field(default_factory=list)
    has_both_old_and_new_resolution_format: bool = False
    has_original: bool = False


class ResolutionsInfoResponse(StatusResponse):
    data: ResolutionsInfoData | None = None


class TranscribeRequest(CamelModel):
    target_languages: list[str] | None = None
    generate_title: bool | None = None
    generate_description: bool | None = None
    generate_chapters: bool | None = None
    generate_moments: bool | None = None
    source_language: str | None = None


class SmartActionsRequest(CamelModel):
    generate_title: bool | None = None
    generate_description: bool | None = None
    generate_chapters: bool | None = None
    generate_moments: bool | None = None
    source_language: str | None = None


# ========== 视频库 ==========
class Library(CamelModel):
    library_id: int = 0
    name: str = ""
    date_created: BunnyTime = None
    storage_used: int = 0
    storage_limit_gb: int = Field(default=0, alias="storageLimitGB")
    video_cache_expiration_days: int = 0
    video_count: int = 0
    collections: int = 0
    region: str = ""
    replication_regions: list[str] = Field(default_factory=list)


class LibraryList(_StreamPage):
    items: list[Library] = Field(default_factory=list)


class CreateLibraryRequest(CamelModel):
    name: str
    video_cache_expiration_days: int | None = None


class UpdateLibraryRequest(CamelModel):
    name: str | None = None
    video_cache_expiration_days: int | None = None


class TopVideo(CamelModel):
    video_id: str = ""
    title: str = ""
    views: int = 0


class LibraryStatistics(CamelModel):
    library_id: int = 0
    total_views: int = 0
    total_watch_time: int = 0
    video_count: int = 0
    bandwidth: int = 0
    top_videos: list[TopVideo] = Field(default_factory=list)
    views_by_country: list[CountryViews] = Field(default_factory=list)
    views_by_device: dict[str, int] = Field(default_factory=dict)


# ========== 合集 ==========
class Collection(CamelModel):
    video_library_id: int = 0
    guid: str = ""
    name: str = ""
    video_count: int = 0
    total_size: int = 0
    preview_video_ids: list[str] = Field(default_factory=list)
    preview_image_urls: list[str] = Field(default_factory=list)


class CollectionList(_StreamPage):
    items: list[Collection] = Field(default_factory=list)


class CreateCollectionRequest(CamelModel):
    name: str


class UpdateCollectionRequest(CamelModel):
    name: str


# ========== oEmbed ==========
class OEmbedResponse(CamelModel):
    version: str = ""
    title: str = ""
    type: str = ""
    thumbnail_url: str = Field(default="", alias="thumbnail_url")
    width: int = 0
    height: int = 0
    html: str = ""
    provider_name: str = Field(default="", alias="provider_name")
    provider_url: str = Field(default="", alias="provider_url")


# ========== 查询参数 ==========
@dataclass
class VideoListOptions:
    page: int = 0
    items_per_page: int = 0
    search: str = ""
    collection: str = ""
    order_by: str = ""
    include_thumbnails: bool = False

    def to_params(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "itemsPerPage": self.items_per_page,
            "search": self.search,
            "collection": self.collection,
            "orderBy": self.order_by,
            "includeThumbnails": self.include_thumbnails,
        }


@dataclass
class CollectionListOptions:
    page: int = 0
    items_per_page: int = 0
    order_by: str = ""
    include_thumbnails: bool = False

    def to_params(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "itemsPerPage": self.items_per_page,
            "orderBy": self.order_by,
            "includeThumbnails": self.include_thumbnails,
        }


@dataclass
class LibraryListOptions:
    page: int = 0
    items_per_page: int = 0

    def to_params(self) -> dict[str, Any]:
        return {"page": self.page, "itemsPerPage": self.items_per_page}


@dataclass
class StatisticsOptions:
    """date_from / date_to 为 ISO 8601 日期文本"""

    date_from: str = ""
    date_to: str = ""

    def to_params(self) -> dict[str, Any]:
        return {"dateFrom": self.date_from, "dateTo": self.date_to}


@dataclass
class CleanupResolutionsOptions:
    resolutions_to_delete: str = ""
    delete_non_configured_resolutions: bool = False
    delete_original: bool = False
    delete_mp4_files: bool = False
    dry_run: bool = False

    def to_params(self) -> dict[str, Any]:
        return {
            "resolutionsToDelete": self.resolutions_to_delete,
            "deleteNonConfiguredResolutions": self.delete_non_configured_resolutions,
            "deleteOriginal": self.delete_original,
            "deleteMp4Files": self.delete_mp4_files,
            "dryRun": self.dry_run,
        }


@dataclass
class RepackageOptions:
    keep_original_files: bool = False

    def to_params(self) -> dict[str, Any]:
        return {"keepOriginalFiles": self.keep_original_files}


@dataclass
class TranscribeOptions:
    force: bool = False

    def to_params(self) -> dict[str, Any]:
        return {"force": self.force}


@dataclass
class OEmbedOptions:
    url: str = ""
    max_width: int = 0
    max_height: int = 0
    token: str = ""
    expires: int = 0

    def to_params(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "maxWidth": self.max_width,
            "maxHeight": self.max_height,
            "token": self.token,
            "expires": self.expires,
        }
