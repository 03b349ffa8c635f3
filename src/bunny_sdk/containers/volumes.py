"""应用存储卷服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.containers.models import (
    UpdateVolumeRequest,
    VolumeInstanceIDResponse,
    VolumeInstanceIDsResponse,
    VolumeList,
    VolumeNameResponse,
    VolumeUpdateResponse,
)


class VolumeService(BaseService):
    def __init__(self, client: Requester, app_id: str):
        super().__init__(client)
        self.app_id = app_id

    def _path(self, suffix: str = "") -> str:
        return f"/apps/{self.app_id}/volumes{suffix}"

    def list(self) -> VolumeList:
        return self._get(self._path(), VolumeList)

    def update(self, volume_id: str, req: UpdateVolumeRequest) -> VolumeUpdateResponse:
        return self._patch(self._path(f"/{volume_id}"), req, VolumeUpdateResponse)

    def detach(self, volume_id: str) -> VolumeNameResponse:
        return self._post(self._path(f"/{volume_id}/detach"), None, VolumeNameResponse)

    def delete_instance(self, volume_id: str, instance_id: str) -> VolumeInstanceIDResponse:
        return self._delete(self._path(f"/{volume_id}/instances/{instance_id}"), None, VolumeInstanceIDResponse)

    def delete_all(self, volume_id: str) -> VolumeInstanceIDsResponse:
        """删除存储卷的全部实例"""
        return self._delete(self._path(f"/{volume_id}"), None, VolumeInstanceIDsResponse)
