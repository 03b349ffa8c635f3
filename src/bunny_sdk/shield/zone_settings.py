"""区域级防护设置：机器人检测与上传扫描"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.shield.models import (
    BotDetectionSettings,
    UpdateBotDetectionRequest,
    UpdateUploadScanningRequest,
    UploadScanningConfig,
)


class BotDetectionService(BaseService):
    def __init__(self, client: Requester, zone_id: str):
        super().__init__(client)
        self.zone_id = zone_id

    def get(self) -> BotDetectionSettings:
        return self._get(f"/shield/zone/{self.zone_id}/bot-detection", BotDetectionSettings)

    def update(self, req: UpdateBotDetectionRequest) -> BotDetectionSettings:
        return self._patch(f"/shield/zone/{self.zone_id}/bot-detection", req, BotDetectionSettings)


class UploadScanningService(BaseService):
    def __init__(self, client: Requester, zone_id: str):
        super().__init__(client)
        self.zone_id = zone_id

    def get(self) -> UploadScanningConfig:
        return self._get(f"/shield/zone/{self.zone_id}/upload-scanning", UploadScanningConfig)

    def update(self, req: UpdateUploadScanningRequest) -> UploadScanningConfig:
        return self._patch(f"/shield/zone/{self.zone_id}/upload-scanning", req, UploadScanningConfig)
