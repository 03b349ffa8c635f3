"""配额、节点与 Pod 服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.containers.models import ListOptions, NodeList, UserLimits
from bunny_sdk.pagination import append_query


class LimitsService(BaseService):
    def get(self) -> UserLimits:
        return self._get("/limits", UserLimits)


class NodeService(BaseService):
    def list(self, opts: ListOptions | None = None) -> NodeList:
        path = "/nodes"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, NodeList)


class PodService(BaseService):
    def __init__(self, client: Requester, app_id: str):
        super().__init__(client)
        self.app_id = app_id

    def recreate(self, pod_id: str) -> None:
        self._post(f"/apps/{self.app_id}/pods/{pod_id}/recreate")
