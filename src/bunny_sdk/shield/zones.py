"""Shield 区域服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.shield.models import (
    CreateZoneRequest,
    PullZoneMappingResponse,
    ShieldZone,
    UpdateZoneRequest,
    ZoneList,
)


class ShieldZoneService(BaseService):
    def list(self) -> ZoneList:
        return self._get("/shield/zones", ZoneList)

    def create(self, req: CreateZoneRequest) -> ShieldZone:
        return self._post("/shield/zone", req, ShieldZone)

    def get(self, zone_id: str) -> ShieldZone:
        return self._get(f"/shield/zone/{zone_id}", ShieldZone)

    def update(self, zone_id: str, req: UpdateZoneRequest) -> ShieldZone:
        return self._patch(f"/shield/zone/{zone_id}", req, ShieldZone)

    def get_by_pull_zone(self, pull_zone_id: int) -> ShieldZone:
        """查询与拉取区域关联的 Shield 区域"""
        return self._get(f"/shield/zone/pullzone/{pull_zone_id}", ShieldZone)

    def get_pull_zone_mapping(self) -> PullZoneMappingResponse:
        return self._get("/shield/zones/pullzone-mapping", PullZoneMappingResponse)
