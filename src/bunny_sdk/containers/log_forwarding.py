"""日志转发配置服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.containers.models import (
    CreateLogForwardingRequest,
    LogForwardingConfig,
    LogForwardingList,
    UpdateLogForwardingRequest,
)


class LogForwardingService(BaseService):
    """日志转发配置以应用 ID 为键"""

    def list(self) -> LogForwardingList:
        return self._get("/log/forwarding", LogForwardingList)

    def get(self, app_id: str) -> LogForwardingConfig:
        return self._get(f"/log/forwarding/{app_id}", LogForwardingConfig)

    def create(self, req: CreateLogForwardingRequest) -> LogForwardingConfig:
        return self._post("/log/forwarding", req, LogForwardingConfig)

    def update(self, app_id: str, req: UpdateLogForwardingRequest) -> LogForwardingConfig:
        return self._put(f"/log/forwarding/{app_id}", req, LogForwardingConfig)

    def delete(self, app_id: str) -> None:
        self._delete(f"/log/forwarding/{app_id}")
