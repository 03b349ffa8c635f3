"""容器编排区域客户端"""

from __future__ import annotations

from bunny_sdk.client import BaseClient
from bunny_sdk.constants import DEFAULT_CONTAINERS_BASE_URL, ERROR_PREFIX_CONTAINERS
from bunny_sdk.containers.applications import ApplicationService
from bunny_sdk.containers.autoscaling import AutoscalingService
from bunny_sdk.containers.endpoints import EndpointService
from bunny_sdk.containers.log_forwarding import LogForwardingService
from bunny_sdk.containers.misc import LimitsService, NodeService, PodService
from bunny_sdk.containers.regions import RegionService, RegionSettingsService
from bunny_sdk.containers.registries import RegistryService
from bunny_sdk.containers.templates import ContainerTemplateService
from bunny_sdk.containers.volumes import VolumeService


class ContainersClient(BaseClient):
    """
    容器编排客户端（api.bunny.net/mc）

    按应用划分作用域的服务需要传入应用 ID，例如 endpoints(app_id)
    """

    base_url = DEFAULT_CONTAINERS_BASE_URL
    error_prefix = ERROR_PREFIX_CONTAINERS

    def applications(self) -> ApplicationService:
        return ApplicationService(self)

    def registries(self) -> RegistryService:
        return RegistryService(self)

    def container_templates(self, app_id: str) -> ContainerTemplateService:
        return ContainerTemplateService(self, app_id)

    def endpoints(self, app_id: str) -> EndpointService:
        return EndpointService(self, app_id)

    def autoscaling(self, app_id: str) -> AutoscalingService:
        return AutoscalingService(self, app_id)

    def regions(self) -> RegionService:
        return RegionService(self)

    def region_settings(self, app_id: str) -> RegionSettingsService:
        return RegionSettingsService(self, app_id)

    def limits(self) -> LimitsService:
        return LimitsService(self)

    def nodes(self) -> NodeService:
        return NodeService(self)

    def pods(self, app_id: str) -> PodService:
        return PodService(self, app_id)

    def volumes(self, app_id: str) -> VolumeService:
        return VolumeService(self, app_id)

    def log_forwarding(self) -> LogForwardingService:
        return LogForwardingService(self)
