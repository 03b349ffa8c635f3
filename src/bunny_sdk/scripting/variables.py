"""边缘脚本环境变量服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.scripting.models import (
    AddVariableRequest,
    EdgeScriptVariable,
    UpdateVariableRequest,
    UpsertVariableRequest,
)


class VariableService(BaseService):
    def __init__(self, client: Requester, script_id: int):
        super().__init__(client)
        self.script_id = script_id

    def _path(self, suffix: str = "") -> str:
        return f"/compute/script/{self.script_id}/variables{suffix}"

    def add(self, req: AddVariableRequest) -> EdgeScriptVariable:
        return self._post(self._path("/add"), req, EdgeScriptVariable)

    def get(self, variable_id: int) -> EdgeScriptVariable:
        return self._get(self._path(f"/{variable_id}"), EdgeScriptVariable)

    def update(self, variable_id: int, req: UpdateVariableRequest) -> EdgeScriptVariable:
        return self._post(self._path(f"/{variable_id}"), req, EdgeScriptVariable)

    def upsert(self, req: UpsertVariableRequest) -> EdgeScriptVariable | None:
        """更新已有变量时服务器返回 204，此时返回 None"""
        return self._put(self._path(), req, EdgeScriptVariable)

    def delete(self, variable_id: int) -> None:
        self._delete(self._path(f"/{variable_id}"))
