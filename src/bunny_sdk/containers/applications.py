"""容器应用服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.containers.models import (
    Application,
    ApplicationIDResponse,
    ApplicationList,
    ApplicationOverview,
    ApplicationStatistics,
    CreateApplicationRequest,
    ListOptions,
    PatchApplicationRequest,
    StatisticsOptions,
    UpdateApplicationRequest,
)
from bunny_sdk.pagination import append_query


class ApplicationService(BaseService):
    """
    应用的增删改查与生命周期操作

    示例:
        >>> apps = client.applications()
        >>> page = apps.list(ListOptions(limit=20))
        >>> while page.has_more:
        ...     page = apps.list(ListOptions(next_cursor=page.cursor, limit=20))
    """

    def list(self, opts: ListOptions | None = None) -> ApplicationList:
        path = "/apps"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, ApplicationList)

    def get(self, app_id: str) -> Application:
        return self._get(f"/apps/{app_id}", Application)

    def create(self, req: CreateApplicationRequest) -> ApplicationIDResponse:
        return self._post("/apps", req, ApplicationIDResponse)

    def update(self, app_id: str, req: UpdateApplicationRequest) -> ApplicationIDResponse:
        return self._put(f"/apps/{app_id}", req, ApplicationIDResponse)

    def patch(self, app_id: str, req: PatchApplicationRequest) -> ApplicationIDResponse:
        return self._patch(f"/apps/{app_id}", req, ApplicationIDResponse)

    def delete(self, app_id: str) -> None:
        self._delete(f"/apps/{app_id}")

    def deploy(self, app_id: str) -> None:
        self._post(f"/apps/{app_id}/deploy")

    def undeploy(self, app_id: str) -> None:
        self._post(f"/apps/{app_id}/undeploy")

    def restart(self, app_id: str) -> None:
        self._post(f"/apps/{app_id}/restart")

    def get_overview(self, app_id: str) -> ApplicationOverview:
        return self._get(f"/apps/{app_id}/overview", ApplicationOverview)

    def get_statistics(self, app_id: str, opts: StatisticsOptions | None = None) -> ApplicationStatistics:
        path = f"/apps/{app_id}/statistics"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, ApplicationStatistics)
