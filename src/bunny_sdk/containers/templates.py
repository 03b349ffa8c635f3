"""容器模板服务（按应用划分作用域）"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.containers.models import (
    ContainerTemplate,
    CreateContainerTemplateRequest,
    PatchContainerTemplateRequest,
)


class ContainerTemplateService(BaseService):
    def __init__(self, client: Requester, app_id: str):
        super().__init__(client)
        self.app_id = app_id

    def _path(self, suffix: str = "") -> str:
        return f"/apps/{self.app_id}/containers{suffix}"

    def get(self, container_id: str) -> ContainerTemplate:
        return self._get(self._path(f"/{container_id}"), ContainerTemplate)

    def create(self, req: CreateContainerTemplateRequest) -> ContainerTemplate:
        return self._post(self._path(), req, ContainerTemplate)

    def patch(self, container_id: str, req: PatchContainerTemplateRequest) -> ContainerTemplate:
        return self._patch(self._path(f"/{container_id}"), req, ContainerTemplate)

    def delete(self, container_id: str) -> None:
        self._delete(self._path(f"/{container_id}"))

    def set_environment_variables(self, container_id: str, env: dict[str, str]) -> ContainerTemplate:
        """
        整体替换容器的环境变量

        参数:
            container_id: 容器模板 ID
            env: 变量名到变量值的映射
        """
        return self._put(self._path(f"/{container_id}/env"), dict(env), ContainerTemplate)
