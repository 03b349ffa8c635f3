"""oEmbed 服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.pagination import append_query
from bunny_sdk.stream.models import OEmbedOptions, OEmbedResponse


class OEmbedService(BaseService):
    def get(self, opts: OEmbedOptions | None = None) -> OEmbedResponse:
        """返回视频的 oEmbed 嵌入信息，token 参数不会出现在日志中"""
        path = "/OEmbed"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, OEmbedResponse)
