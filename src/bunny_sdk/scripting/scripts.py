"""边缘脚本管理服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.pagination import append_query
from bunny_sdk.scripting.models import (
    CreateScriptRequest,
    EdgeScript,
    ScriptList,
    ScriptListOptions,
    ScriptStatistics,
    StatisticsOptions,
    UpdateScriptRequest,
)


class ScriptService(BaseService):
    def list(self, opts: ScriptListOptions | None = None) -> ScriptList:
        path = "/compute/script"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, ScriptList)

    def create(self, req: CreateScriptRequest) -> EdgeScript:
        return self._post("/compute/script", req, EdgeScript)

    def get(self, script_id: int) -> EdgeScript:
        return self._get(f"/compute/script/{script_id}", EdgeScript)

    def update(self, script_id: int, req: UpdateScriptRequest) -> EdgeScript:
        return self._post(f"/compute/script/{script_id}", req, EdgeScript)

    def delete(self, script_id: int, delete_linked_pull_zones: bool = False) -> None:
        path = append_query(f"/compute/script/{script_id}", {"deleteLinkedPullZones": delete_linked_pull_zones})
        self._delete(path)

    def get_statistics(self, script_id: int, opts: StatisticsOptions | None = None) -> ScriptStatistics:
        path = f"/compute/script/{script_id}/statistics"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, ScriptStatistics)

    def rotate_deployment_key(self, script_id: int) -> None:
        self._post(f"/compute/script/{script_id}/deploymentKey/rotate")
