"""
流媒体区域

- 视频库管理：api.bunny.net
- 视频、合集、oEmbed：video.bunnycdn.com
"""

from bunny_sdk.stream.client import StreamClient
from bunny_sdk.stream.collections import CollectionService
from bunny_sdk.stream.libraries import LibraryService
from bunny_sdk.stream.models import (
    AddCaptionRequest,
    Caption,
    CaptionTrack,
    Chapter,
    CleanupResolutionsOptions,
    Collection,
    CollectionList,
    CollectionListOptions,
    CountryViews,
    CreateCollectionRequest,
    CreateLibraryRequest,
    CreateVideoRequest,
    EncodedResolution,
    FetchVideoRequest,
    FetchVideoResponse,
    HeatmapData,
    HeatmapPoint,
    Library,
    LibraryList,
    LibraryListOptions,
    LibraryStatistics,
    MetaTag,
    Moment,
    OEmbedOptions,
    OEmbedResponse,
    OutputCodec,
    PlaybackInfo,
    ReencodeRequest,
    RepackageOptions,
    Resolution,
    ResolutionReference,
    ResolutionsInfoData,
    ResolutionsInfoResponse,
    SetThumbnailRequest,
    SetThumbnailResponse,
    SmartActionsRequest,
    StatisticsOptions,
    StatusResponse,
    StorageObject,
    StorageSizeData,
    StorageSizeResponse,
    TopVideo,
    TranscribeOptions,
    TranscribeRequest,
    UpdateCollectionRequest,
    UpdateLibraryRequest,
    UpdateVideoRequest,
    Video,
    VideoList,
    VideoListOptions,
    VideoPlayData,
    VideoState,
    VideoStatistics,
)
from bunny_sdk.stream.oembed import OEmbedService
from bunny_sdk.stream.videos import VideoService

__all__ = [
    # 客户端
    "StreamClient",
    # 服务
    "VideoService",
    "LibraryService",
    "CollectionService",
    "OEmbedService",
    # 数据模型
    "AddCaptionRequest",
    "Caption",
    "CaptionTrack",
    "Chapter",
    "CleanupResolutionsOptions",
    "Collection",
    "CollectionList",
    "CollectionListOptions",
    "CountryViews",
    "CreateCollectionRequest",
    "CreateLibraryRequest",
    "CreateVideoRequest",
    "EncodedResolution",
    "FetchVideoRequest",
    "FetchVideoResponse",
    "HeatmapData",
    "HeatmapPoint",
    "Library",
    "LibraryList",
    "LibraryListOptions",
    "LibraryStatistics",
    "MetaTag",
    "Moment",
    "OEmbedOptions",
    "OEmbedResponse",
    "OutputCodec",
    "PlaybackInfo",
    "ReencodeRequest",
    "RepackageOptions",
    "Resolution",
    "ResolutionReference",
    "ResolutionsInfoData",
    "ResolutionsInfoResponse",
    "SetThumbnailRequest",
    "SetThumbnailResponse",
    "SmartActionsRequest",
    "StatisticsOptions",
    "StatusResponse",
    "StorageObject",
    "StorageSizeData",
    "StorageSizeResponse",
    "TopVideo",
    "TranscribeOptions",
    "TranscribeRequest",
    "UpdateCollectionRequest",
    "UpdateLibraryRequest",
    "UpdateVideoRequest",
    "Video",
    "VideoList",
    "VideoListOptions",
    "VideoPlayData",
    "VideoState",
    "VideoStatistics",
]
