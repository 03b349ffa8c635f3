"""访问控制列表服务（按 Shield 区域划分作用域）"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.shield.models import (
    AccessList,
    AccessListConfig,
    AccessListEntry,
    AccessListEnums,
    AddAccessListEntryRequest,
    DeleteAccessListEntriesRequest,
    UpdateAccessListConfigRequest,
    UpdateAccessListEntriesRequest,
)


class AccessListService(BaseService):
    def __init__(self, client: Requester, zone_id: str):
        super().__init__(client)
        self.zone_id = zone_id

    def _path(self, suffix: str = "") -> str:
        return f"/shield/zone/{self.zone_id}/access-lists{suffix}"

    def get(self) -> AccessList:
        return self._get(self._path(), AccessList)

    def add(self, req: AddAccessListEntryRequest) -> AccessListEntry:
        return self._post(self._path(), req, AccessListEntry)

    def update(self, req: UpdateAccessListEntriesRequest) -> None:
        self._patch(self._path(), req)

    def delete(self, req: DeleteAccessListEntriesRequest) -> None:
        # 待删除的条目放在 DELETE 请求体中
        self._delete(self._path(), req)

    def get_enums(self) -> AccessListEnums:
        return self._get(self._path("/enums"), AccessListEnums)

    def update_config(self, req: UpdateAccessListConfigRequest) -> AccessListConfig:
        return self._patch(self._path("/configurations"), req, AccessListConfig)
