"""边缘脚本密钥服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.scripting.models import (
    AddSecretRequest,
    EdgeScriptSecret,
    SecretList,
    UpdateSecretRequest,
    UpsertSecretRequest,
)


class SecretService(BaseService):
    """密钥的值只写不读，列表与详情只返回名称与修改时间"""

    def __init__(self, client: Requester, script_id: int):
        super().__init__(client)
        self.script_id = script_id

    def _path(self, suffix: str = "") -> str:
        return f"/compute/script/{self.script_id}/secrets{suffix}"

    def list(self) -> SecretList:
        return self._get(self._path(), SecretList)

    def add(self, req: AddSecretRequest) -> EdgeScriptSecret:
        return self._post(self._path(), req, EdgeScriptSecret)

    def update(self, secret_id: int, req: UpdateSecretRequest) -> EdgeScriptSecret:
        return self._post(self._path(f"/{secret_id}"), req, EdgeScriptSecret)

    def upsert(self, req: UpsertSecretRequest) -> EdgeScriptSecret | None:
        """
        按名称创建或更新密钥

        返回:
            新建时返回密钥记录；更新已有密钥时服务器返回 204，此时返回 None
        """
        return self._put(self._path(), req, EdgeScriptSecret)

    def delete(self, secret_id: int) -> None:
        self._delete(self._path(f"/{secret_id}"))
