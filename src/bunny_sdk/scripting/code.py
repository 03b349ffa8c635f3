"""边缘脚本代码服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.scripting.models import EdgeScriptCode, UpdateCodeRequest


class CodeService(BaseService):
    def __init__(self, client: Requester, script_id: int):
        super().__init__(client)
        self.script_id = script_id

    def get(self) -> EdgeScriptCode:
        return self._get(f"/compute/script/{self.script_id}/code", EdgeScriptCode)

    def set(self, req: UpdateCodeRequest) -> None:
        self._post(f"/compute/script/{self.script_id}/code", req)
