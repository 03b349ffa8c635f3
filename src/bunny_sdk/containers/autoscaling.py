"""自动扩缩容服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.containers.models import AutoScaling


class AutoscalingService(BaseService):
    def __init__(self, client: Requester, app_id: str):
        super().__init__(client)
        self.app_id = app_id

    def get(self) -> AutoScaling:
        return self._get(f"/apps/{self.app_id}/autoscaling", AutoScaling)

    def update(self, req: AutoScaling) -> None:
        self._put(f"/apps/{self.app_id}/autoscaling", req)
