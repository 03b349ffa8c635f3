"""存储区管理服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.pagination import append_query
from bunny_sdk.storage.models import (
    AvailabilityResponse,
    CreateZoneRequest,
    ResetPasswordResponse,
    ResetReadOnlyPasswordResponse,
    UpdateZoneRequest,
    Zone,
    ZoneList,
    ZoneListOptions,
)
from bunny_sdk.utils import quote_path_segment


class ZoneService(BaseService):
    """
    存储区管理（使用全局 API Key）

    示例:
        >>> with StorageClient("global-api-key") as client:
        ...     page = client.zones().list(ZoneListOptions(page=1, per_page=50))
        ...     for zone in page.items:
        ...         print(zone.name)
    """

    def list(self, opts: ZoneListOptions | None = None) -> ZoneList:
        path = "/storagezone"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, ZoneList)

    def get(self, zone_id: int) -> Zone:
        return self._get(f"/storagezone/{zone_id}", Zone)

    def create(self, req: CreateZoneRequest) -> Zone:
        return self._post("/storagezone", req, Zone)

    def update(self, zone_id: int, req: UpdateZoneRequest) -> Zone:
        # 该接口使用 POST 更新
        return self._post(f"/storagezone/{zone_id}", req, Zone)

    def delete(self, zone_id: int) -> None:
        self._delete(f"/storagezone/{zone_id}")

    def check_availability(self, name: str) -> AvailabilityResponse:
        return self._get(f"/storagezone/checkavailability/{quote_path_segment(name)}", AvailabilityResponse)

    def reset_password(self, zone_id: int) -> ResetPasswordResponse:
        # 接口要求空 JSON 对象作为请求体
        return self._post(f"/storagezone/{zone_id}/resetPassword", {}, ResetPasswordResponse)

    def reset_read_only_password(self, zone_id: int) -> ResetReadOnlyPasswordResponse:
        return self._post(f"/storagezone/{zone_id}/resetReadOnlyPassword", {}, ResetReadOnlyPasswordResponse)
