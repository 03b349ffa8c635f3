"""视频服务（video.bunnycdn.com，按视频库划分作用域）"""

from __future__ import annotations

from typing import IO, Any

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.constants import CONTENT_TYPE_OCTET_STREAM, HTTP_METHOD_PUT
from bunny_sdk.pagination import append_query
from bunny_sdk.stream.models import (
    AddCaptionRequest,
    CleanupResolutionsOptions,
    CreateVideoRequest,
    FetchVideoRequest,
    FetchVideoResponse,
    HeatmapData,
    PlaybackInfo,
    ReencodeRequest,
    RepackageOptions,
    ResolutionsInfoResponse,
    SetThumbnailRequest,
    SetThumbnailResponse,
    SmartActionsRequest,
    StatisticsOptions,
    StatusResponse,
    StorageSizeResponse,
    TranscribeOptions,
    TranscribeRequest,
    UpdateVideoRequest,
    Video,
    VideoList,
    VideoListOptions,
    VideoPlayData,
    VideoStatistics,
)


def _with_options(path: str, opts: Any) -> str:
    if opts is None:
        return path
    return append_query(path, opts.to_params())


class VideoService(BaseService):
    """
    视频库内的视频管理

    参数:
        client: 指向视频数据面的 Requester
        library_id: 视频库 ID
    """

    def __init__(self, client: Requester, library_id: int):
        super().__init__(client)
        self.library_id = library_id

    def _path(self, suffix: str = "") -> str:
        return f"/library/{self.library_id}/videos{suffix}"

    def list(self, opts: VideoListOptions | None = None) -> VideoList:
        return self._get(_with_options(self._path(), opts), VideoList)

    def get(self, video_id: str) -> Video:
        return self._get(self._path(f"/{video_id}"), Video)

    def create(self, req: CreateVideoRequest) -> Video:
        """创建视频占位记录，之后通过 upload 上传内容"""
        return self._post(self._path(), req, Video)

    def update(self, video_id: str, req: UpdateVideoRequest) -> Video:
        return self._post(self._path(f"/{video_id}"), req, Video)

    def delete(self, video_id: str) -> None:
        self._delete(self._path(f"/{video_id}"))

    def upload(self, video_id: str, data: bytes | IO[bytes]) -> None:
        """以 application/octet-stream 上传视频内容"""
        self.client.do_raw(HTTP_METHOD_PUT, self._path(f"/{video_id}"), data, CONTENT_TYPE_OCTET_STREAM)

    def fetch_from_url(self, req: FetchVideoRequest) -> FetchVideoResponse:
        return self._post(self._path("/fetch"), req, FetchVideoResponse)

    def reencode(self, video_id: str, req: ReencodeRequest | None = None) -> None:
        self._post(self._path(f"/{video_id}/reencode"), req)

    def add_caption(self, video_id: str, req: AddCaptionRequest) -> None:
        self._post(self._path(f"/{video_id}/captions"), req)

    def delete_caption(self, video_id: str, srclang: str) -> None:
        self._delete(self._path(f"/{video_id}/captions/{srclang}"))

    def set_thumbnail(self, video_id: str, req: SetThumbnailRequest) -> SetThumbnailResponse:
        return self._post(self._path(f"/{video_id}/thumbnail"), req, SetThumbnailResponse)

    def get_heatmap(self, video_id: str) -> HeatmapData:
        return self._get(self._path(f"/{video_id}/heatmap"), HeatmapData)

    def get_statistics(self, video_id: str, opts: StatisticsOptions | None = None) -> VideoStatistics:
        return self._get(_with_options(self._path(f"/{video_id}/statistics"), opts), VideoStatistics)

    def get_playback_info(self, video_id: str) -> PlaybackInfo:
        return self._get(self._path(f"/{video_id}/play"), PlaybackInfo)

    def get_play_data(self, video_id: str) -> VideoPlayData:
        """/play 接口的完整播放器配置视图"""
        return self._get(self._path(f"/{video_id}/play"), VideoPlayData)

    def get_storage_size(self, video_id: str) -> StorageSizeResponse:
        return self._get(self._path(f"/{video_id}/storage"), StorageSizeResponse)

    def get_resolutions(self, video_id: str) -> ResolutionsInfoResponse:
        return self._get(self._path(f"/{video_id}/resolutions"), ResolutionsInfoResponse)

    def cleanup_resolutions(
        self, video_id: str, opts: CleanupResolutionsOptions | None = None
    ) -> ResolutionsInfoResponse:
        path = _with_options(self._path(f"/{video_id}/resolutions/cleanup"), opts)
        return self._post(path, None, ResolutionsInfoResponse)

    def repackage(self, video_id: str, opts: RepackageOptions | None = None) -> Video:
        return self._post(_with_options(self._path(f"/{video_id}/repackage"), opts), None, Video)

    def transcribe(
        self, video_id: str, req: TranscribeRequest | None = None, opts: TranscribeOptions | None = None
    ) -> StatusResponse:
        return self._post(_with_options(self._path(f"/{video_id}/transcribe"), opts), req, StatusResponse)

    def smart_actions(self, video_id: str, req: SmartActionsRequest) -> StatusResponse:
        return self._post(self._path(f"/{video_id}/smart"), req, StatusResponse)
