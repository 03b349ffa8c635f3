"""应用端点服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.containers.models import EndpointIDResponse, EndpointList, EndpointRequest


class EndpointService(BaseService):
    def __init__(self, client: Requester, app_id: str):
        super().__init__(client)
        self.app_id = app_id

    def list(self) -> EndpointList:
        return self._get(f"/apps/{self.app_id}/endpoints", EndpointList)

    def create(self, container_id: str, req: EndpointRequest) -> EndpointIDResponse:
        # 端点挂在容器模板下创建
        return self._post(f"/apps/{self.app_id}/containers/{container_id}/endpoints", req, EndpointIDResponse)

    def update(self, endpoint_id: str, req: EndpointRequest) -> None:
        self._put(f"/apps/{self.app_id}/endpoints/{endpoint_id}", req)

    def delete(self, endpoint_id: str) -> None:
        self._delete(f"/apps/{self.app_id}/endpoints/{endpoint_id}")
