"""边缘脚本发布服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.pagination import append_query
from bunny_sdk.scripting.models import EdgeScriptRelease, PublishReleaseRequest, ReleaseList, ReleaseListOptions


class ReleaseService(BaseService):
    def __init__(self, client: Requester, script_id: int):
        super().__init__(client)
        self.script_id = script_id

    def list(self, opts: ReleaseListOptions | None = None) -> ReleaseList:
        path = f"/compute/script/{self.script_id}/releases"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, ReleaseList)

    def get_active(self) -> EdgeScriptRelease:
        return self._get(f"/compute/script/{self.script_id}/releases/active", EdgeScriptRelease)

    def publish(self, req: PublishReleaseRequest | None = None) -> None:
        """发布当前代码为新版本"""
        self._post(f"/compute/script/{self.script_id}/publish", req)

    def publish_by_uuid(self, uuid: str, req: PublishReleaseRequest | None = None) -> None:
        """重新发布指定 UUID 的历史版本"""
        self._post(f"/compute/script/{self.script_id}/publish/{uuid}", req)
