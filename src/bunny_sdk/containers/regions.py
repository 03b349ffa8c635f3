"""部署区域与应用区域设置服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.containers.models import (
    ListOptions,
    OptimalRegionResponse,
    RegionList,
    RegionSettings,
    UpdateRegionSettingsRequest,
)
from bunny_sdk.pagination import append_query


class RegionService(BaseService):
    def list(self, opts: ListOptions | None = None) -> RegionList:
        path = "/regions"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, RegionList)

    def get_optimal(self, cdn_server_token: str = "") -> OptimalRegionResponse:
        """根据 CDN 边缘节点令牌返回延迟最低的区域"""
        return self._get(append_query("/regions/optimal", {"cdnServerToken": cdn_server_token}), OptimalRegionResponse)


class RegionSettingsService(BaseService):
    def __init__(self, client: Requester, app_id: str):
        super().__init__(client)
        self.app_id = app_id

    def get(self) -> RegionSettings:
        return self._get(f"/apps/{self.app_id}/region-settings", RegionSettings)

    def update(self, req: UpdateRegionSettingsRequest) -> None:
        self._put(f"/apps/{self.app_id}/region-settings", req)
