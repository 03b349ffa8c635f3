"""流媒体区域客户端"""

from __future__ import annotations

from bunny_sdk.client import BaseClient, Requester
from bunny_sdk.constants import DEFAULT_API_BASE_URL, ERROR_PREFIX_STREAM
from bunny_sdk.stream.collections import CollectionService
from bunny_sdk.stream.libraries import LibraryService
from bunny_sdk.stream.oembed import OEmbedService
from bunny_sdk.stream.videos import VideoService


class StreamClient(BaseClient):
    """
    流媒体客户端

    视频库管理走 base_url（api.bunny.net），视频、合集与 oEmbed 走
    stream_base_url（video.bunnycdn.com），两者共用同一密钥与会话

    示例:
        >>> client = StreamClient("api-key", stream_base_url="https://video.example.test")
        >>> videos = client.videos(42).list(VideoListOptions(search="intro"))
    """

    base_url = DEFAULT_API_BASE_URL
    error_prefix = ERROR_PREFIX_STREAM

    def _stream(self) -> Requester:
        return self.bind(self.config.stream_base_url)

    def libraries(self) -> LibraryService:
        return LibraryService(self)

    def videos(self, library_id: int) -> VideoService:
        return VideoService(self._stream(), library_id)

    def collections(self, library_id: int) -> CollectionService:
        return CollectionService(self._stream(), library_id)

    def oembed(self) -> OEmbedService:
        return OEmbedService(self._stream())
