"""
容器编排数据模型（camelCase 键名）

列表接口使用游标分页：响应中的 cursor 非空时，把它作为下一次请求的 next_cursor
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import Field

from bunny_sdk.models import CamelModel


# ========== 枚举 ==========
class ApplicationStatus(str, Enum):
    UNKNOWN = "Unknown"
    ACTIVE = "Active"
    PROGRESSING = "Progressing"
    INACTIVE = "Inactive"
    FAILING = "Failing"
    SUSPENDED = "Suspended"


class RuntimeType(str, Enum):
    SHARED = "Shared"
    RESERVED = "Reserved"


class EndpointType(str, Enum):
    CDN = "CDN"
    ANYCAST = "Anycast"
    PUBLIC_IP = "PublicIp"


class Protocol(str, Enum):
    TCP = "Tcp"
    UDP = "Udp"
    SCTP = "Sctp"


class ImagePullPolicy(str, Enum):
    ALWAYS = "Always"
    IF_NOT_PRESENT = "IfNotPresent"


class RegistryType(str, Enum):
    DOCKER_HUB = "DockerHub"
    GITHUB = "GitHub"


class RegistryStatus(str, Enum):
    SAVED = "Saved"
    SECRETS_VALIDATION_FAILED = "SecretsValidationFailed"
    UNKNOWN_ERROR_OCCURED = "UnknownErrorOccured"
    NOT_FOUND = "NotFound"
    INVALID_INPUT = "InvalidInput"


class RegistryDeleteStatus(str, Enum):
    REMOVED = "Removed"
    IN_USE = "InUse"
    NOT_FOUND = "NotFound"


class LogForwardingType(str, Enum):
    SYSLOG_UDP = "SyslogUdp"
    SYSLOG_TCP = "SyslogTcp"


class LogForwardingFormat(str, Enum):
    RFC3164 = "SyslogRfc3164"
    RFC5424 = "SyslogRfc5424"


class VolumeStatus(str, Enum):
    ATTACHED = "Attached"
    DETACHED = "Detached"
    EXTENDING = "Extending"
    DELETING = "Deleting"
    CREATING = "Creating"
    UNKNOWN = "Unknown"


class ProvisioningType(str, Enum):
    STATIC = "Static"
    DYNAMIC = "Dynamic"


class StatisticsGranularity(str, Enum):
    DAILY = "Daily"
    HOURLY = "Hourly"
    MINUTE = "Minute"


class AnycastType(str, Enum):
    IPV4 = "IPv4"


# ========== 分页 ==========
class PaginationMeta(CamelModel):
    total_items: int = 0


class _CursorPage(CamelModel):
    meta: PaginationMeta = Field(default_factory=PaginationMeta)
    cursor: str = ""

    @property
    def has_more(self) -> bool:
        return bool(self.cursor)


@dataclass
class ListOptions:
    next_cursor: str = ""
    limit: int = 0

    def to_params(self) -> dict[str, Any]:
        return {"nextCursor": self.next_cursor, "limit": self.limit}


@dataclass
class StatisticsOptions:
    from_date: str = ""
    to_date: str = ""
    granularity: StatisticsGranularity | str = ""

    def to_params(self) -> dict[str, Any]:
        return {"fromDate": self.from_date, "toDate": self.to_date, "granularity": self.granularity}


# ========== 应用 ==========
class DisplayEndpoint(CamelModel):
    id: str = ""
    address: str = ""
    type: EndpointType | None = None


class ApplicationListItem(CamelModel):
    id: str = ""
    name: str = ""
    description: str = ""
    display_endpoint: DisplayEndpoint | None = None
    status: ApplicationStatus | None = None


class ApplicationList(_CursorPage):
    items: list[ApplicationListItem] = Field(default_factory=list)


class AutoScaling(CamelModel):
    min: int = 0
    max: int = 0


class RegionSettings(CamelModel):
    allowed_region_ids: list[str] = Field(default_factory=list)
    required_region_ids: list[str] = Field(default_factory=list)
    max_allowed_regions: int = 0
    node_selectors: dict[str, Any] = Field(default_factory=dict)
    provisioning_type: ProvisioningType | None = None


class ContainerInstance(CamelModel):
    id: str = ""
    name: str = ""
    status: str = ""
    region: str = ""
    node_name: str = ""


class EnvironmentVariable(CamelModel):
    name: str = ""
    value: str = ""


class EntryPoint(CamelModel):
    command: list[str] | None = None
    arguments: list[str] | None = None
    working_directory: str | None = None


class ProbeHTTPGet(CamelModel):
    path: str | None = None
    port: int | None = None
    scheme: str | None = None


class ProbeTCPSocket(CamelModel):
    port: int | None = None


class ProbeExec(CamelModel):
    command: list[str] | None = None


class Probe(CamelModel):
    http_get: ProbeHTTPGet | None = None
    tcp_socket: ProbeTCPSocket | None = None
    exec: ProbeExec | None = None
    initial_delay_seconds: int | None = None
    period_seconds: int | None = None
    timeout_seconds: int | None = None
    success_threshold: int | None = None
    failure_threshold: int | None = None


class Probes(CamelModel):
    startup: Probe | None = None
    readiness: Probe | None = None
    liveness: Probe | None = None


class VolumeMount(CamelModel):
    volume_name: str = ""
    mount_path: str = ""
    read_only: bool = False


class VolumeMountRequest(CamelModel):
    volume_name: str
    mount_path: str
    read_only: bool | None = None


class ContainerEndpoint(CamelModel):
    id: str = ""
    display_name: str = ""
    type: str = ""


class ContainerTemplate(CamelModel):
    id: str = ""
    name: str = ""
    package_id: str = ""
    image: str = ""
    image_name: str = ""
    image_namespace: str = ""
    image_tag: str = ""
    image_registry_id: str = ""
    image_digest: str = ""
    image_pull_policy: ImagePullPolicy | None = None
    entry_point: EntryPoint | None = None
    probes: Probes | None = None
    environment_variables: list[EnvironmentVariable] = Field(default_factory=list)
    endpoints: list[ContainerEndpoint] = Field(default_factory=list)
    volume_mounts: list[VolumeMount] = Field(default_factory=list)


class VolumeInstance(CamelModel):
    id: str = ""
    attached_pods: list[str] = Field(default_factory=list)
    attached_containers: list[str] = Field(default_factory=list)
    region: str = ""
    status: VolumeStatus | None = None
    size: int = 0
    usage: float = 0.0


class Volume(CamelModel):
    id: str = ""
    name: str = ""
    size: int = 0
    total_usage: float = 0.0
    total_instances_count: int = 0
    attached_instances_count: int = 0
    containers_count: int = 0
    volume_instances: list[VolumeInstance] = Field(default_factory=list)


class Application(CamelModel):
    id: str = ""
    name: str = ""
    status: ApplicationStatus | None = None
    runtime_type: RuntimeType | None = None
    display_endpoint: DisplayEndpoint | None = None
    region_settings: RegionSettings | None = None
    container_templates: list[ContainerTemplate] = Field(default_factory=list)
    container_instances: list[ContainerInstance] = Field(default_factory=list)
    volumes: list[Volume] = Field(default_factory=list)
    auto_scaling: AutoScaling | None = None


class VolumeRequest(CamelModel):
    name: str
    size: int  # 1-100 GB


class CreateRegionSettingsRequest(CamelModel):
    allowed_region_ids: list[str] | None = None
    required_region_ids: list[str] | None = None
    max_allowed_regions: int | None = None


class PortMapping(CamelModel):
    container_port: int = 0
    exposed_port: int | None = None
    protocols: list[Protocol] | None = None


class StickySessions(CamelModel):
    enabled: bool | None = None
    session_headers: list[str] | None = None
    cookie_name: str | None = None


class CDNEndpointConfig(CamelModel):
    is_ssl_enabled: bool | None = None
    sticky_sessions: StickySessions | None = None
    pull_zone_id: int | None = None
    port_mappings: list[PortMapping] | None = None


class AnycastEndpointConfig(CamelModel):
    type: AnycastType | None = None
    port_mappings: list[PortMapping] | None = None


class EndpointRequest(CamelModel):
    """cdn 与 anycast 二选一"""

    display_name: str
    cdn: CDNEndpointConfig | None = None
    anycast: AnycastEndpointConfig | None = None


class CreateContainerTemplateRequest(CamelModel):
    name: str
    image_name: str
    image_namespace: str
    image_tag: str
    image_registry_id: str
    image: str | None = None
    image_digest: str | None = None
    image_pull_policy: ImagePullPolicy | None = None
    entry_point: EntryPoint | None = None
    probes: Probes | None = None
    environment_variables: list[EnvironmentVariable] | None = None
    endpoints: list[EndpointRequest] | None = None
    volume_mounts: list[VolumeMountRequest] | None = None


class PatchContainerTemplateRequest(CamelModel):
    name: str | None = None
    image: str | None = None
    image_name: str | None = None
    image_namespace: str | None = None
    image_tag: str | None = None
    image_digest: str | None = None
    image_registry_id: str | None = None
    image_pull_policy: ImagePullPolicy | None = None
    entry_point: EntryPoint | None = None
    probes: Probes | None = None
    environment_variables: list[EnvironmentVariable] | None = None
    endpoints: list[EndpointRequest] | None = None
    volume_mounts: list[VolumeMountRequest] | None = None


class CreateApplicationRequest(CamelModel):
    name: str
    runtime_type: RuntimeType
    auto_scaling: AutoScaling
    region_settings: CreateRegionSettingsRequest
    termination_grace_period_seconds: int | None = None
    container_templates: list[CreateContainerTemplateRequest] | None = None
    volumes: list[VolumeRequest] | None = None


class UpdateApplicationRequest(CreateApplicationRequest):
    """PUT 全量更新，字段与创建请求相同"""


class PatchApplicationRequest(CamelModel):
    name: str | None = None
    runtime_type: RuntimeType | None = None
    auto_scaling: AutoScaling | None = None
    region_settings: CreateRegionSettingsRequest | None = None
    container_templates: list[CreateContainerTemplateRequest] | None = None
    volumes: list[VolumeRequest] | None = None


class ApplicationIDResponse(CamelModel):
    id: str = ""


class MetricValue(CamelModel):
    value: float = 0.0
    status: str = ""


class RegionOverview(CamelModel):
    id: str = ""
    name: str = ""
    instances: int = 0
    latency: float = 0.0


class ApplicationOverview(CamelModel):
    target_latency: MetricValue | None = None
    current_latency: MetricValue | None = None
    active_regions: MetricValue | None = None
    active_instances: MetricValue | None = None
    desired_instances: int = 0
    status: ApplicationStatus | None = None
    average_cpu: MetricValue | None = Field(default=None, alias="averageCPU")
    average_ram: MetricValue | None = Field(default=None, alias="averageRAM")
    average_volumes_usage: MetricValue | None = None
    regions: list[RegionOverview] = Field(default_factory=list)
    average_latency: float = 0.0
    total_volume_size_in_gb: int = 0
    monthly_cost: float = 0.0
    latency_chart: dict[str, Any] = Field(default_factory=dict)


class ApplicationStatistics(CamelModel):
    target_latency_chart: dict[str, Any] = Field(default_factory=dict)
    active_regions_chart: dict[str, Any] = Field(default_factory=dict)
    latency_chart: dict[str, Any] = Field(default_factory=dict)
    cpu_usage_chart: dict[str, Any] = Field(default_factory=dict)
    ram_usage_chart: dict[str, Any] = Field(default_factory=dict)
    traffic_chart: dict[str, Any] = Field(default_factory=dict)
    instances_chart: dict[str, Any] = Field(default_factory=dict)
    volumes_usage_chart: dict[str, Any] = Field(default_factory=dict)
    volumes_capacity_chart: dict[str, Any] = Field(default_factory=dict)
    volumes_split_usage_chart: dict[str, Any] = Field(default_factory=dict)
    volumes_split_capacity_chart: dict[str, Any] = Field(default_factory=dict)


# ========== 镜像仓库 ==========
class ContainerRegistry(CamelModel):
    id: int = 0
    account_id: str = ""
    user_id: str = ""
    namespace_id: str = ""
    display_name: str = ""
    host_name: str = ""
    user_name: str = ""
    first_password_symbols: str = ""
    last_password_symbols: str = ""
    created_at: str = ""
    is_public: bool = False
    last_updated_at: str = ""


class RegistryList(_CursorPage):
    items: list[ContainerRegistry] = Field(default_factory=list)


class PasswordCredentials(CamelModel):
    user_name: str
    password: str


class CreateRegistryRequest(CamelModel):
    display_name: str
    type: RegistryType | None = None
    password_credentials: PasswordCredentials | None = None


class UpdateRegistryRequest(CreateRegistryRequest):
    pass


class RegistryOperationResponse(CamelModel):
    id: int = 0
    error: str = ""
    status: RegistryStatus | None = None


class RegistryDeleteResponse(CamelModel):
    status: RegistryDeleteStatus | None = None
    applications: list[str] = Field(default_factory=list)


class ListImagesRequest(CamelModel):
    registry_id: str


class ContainerImage(CamelModel):
    id: str = ""
    namespace: str = ""


class ListTagsRequest(CamelModel):
    registry_id: str
    image_name: str
    image_namespace: str


class ImageTag(CamelModel):
    name: str = ""


class GetDigestRequest(CamelModel):
    registry_id: str
    image_name: str
    image_namespace: str
    tag: str


class ImageDigest(CamelModel):
    image_namespace: str = ""
    image: str = ""
    tag: str = ""
    digest: str = ""


class GetConfigSuggestionsRequest(GetDigestRequest):
    pass


class EndpointSuggestion(CamelModel):
    port: int = 0
    protocol: str = ""


class EnvironmentVariableSuggestion(CamelModel):
    name: str = ""
    description: str = ""
    required: bool = False


class ConfigSuggestions(CamelModel):
    endpoint_suggestions: list[EndpointSuggestion] = Field(default_factory=list)
    environment_variables_suggestions: list[EnvironmentVariableSuggestion] = Field(default_factory=list)
    app_name: str = ""
    description: str = ""
    instructions: str = ""
    registry_url: str = ""


class SearchPublicImagesRequest(CamelModel):
    registry_id: str
    prefix: str
    size: int | None = None
    page: int | None = None


# ========== 端点 ==========
class Endpoint(CamelModel):
    id: str = ""
    display_name: str = ""
    public_host: str = ""
    type: EndpointType | None = None
    is_ssl_enabled: bool = False
    pull_zone_id: str = ""
    port_mappings: list[PortMapping] = Field(default_factory=list)
    container_name: str = ""
    container_id: str = ""
    sticky_sessions: StickySessions | None = None
    internal_ip_addresses: list[str] = Field(default_factory=list)
    public_ip_addresses: list[str] = Field(default_factory=list)


class EndpointList(_CursorPage):
    items: list[Endpoint] = Field(default_factory=list)


class EndpointIDResponse(CamelModel):
    id: str = ""


# ========== 区域 ==========
class Region(CamelModel):
    id: str = ""
    name: str = ""
    group: str = ""
    has_anycast_support: bool = False
    has_capacity: bool = False


class RegionList(_CursorPage):
    items: list[Region] = Field(default_factory=list)


class OptimalRegionResponse(CamelModel):
    region: Region | None = None


class UpdateRegionSettingsRequest(CamelModel):
    allowed_region_ids: list[str] | None = None
    required_region_ids: list[str] | None = None
    max_allowed_regions: int | None = None
    node_selectors: dict[str, Any] | None = None


# ========== 存储卷 ==========
class VolumeSummary(CamelModel):
    total_pods: int = 0
    total_containers: int = 0
    total_storage: int = 0


class VolumeList(_CursorPage):
    items: list[Volume] = Field(default_factory=list)
    summary: VolumeSummary | None = None


class UpdateVolumeRequest(CamelModel):
    name: str | None = None
    size: int | None = None


class VolumeUpdateResponse(CamelModel):
    name: str = ""
    size: int = 0


class VolumeNameResponse(CamelModel):
    name: str = ""


class VolumeInstanceIDResponse(CamelModel):
    id: str = ""


class VolumeInstanceIDsResponse(CamelModel):
    ids: list[str] = Field(default_factory=list)


# ========== 日志转发 ==========
class LogForwardingConfig(CamelModel):
    id: str = ""
    app: str = ""
    product_id: str = ""
    type: LogForwardingType | None = None
    endpoint: str = ""
    port: int = 0
    created_at: str = ""
    token: str = ""
    format: LogForwardingFormat | None = None
    enabled: bool = False


class LogForwardingList(CamelModel):
    items: list[LogForwardingConfig] = Field(default_factory=list)


class CreateLogForwardingRequest(CamelModel):
    app: str
    type: LogForwardingType
    endpoint: str
    port: int
    format: LogForwardingFormat
    enabled: bool = True
    token: str | None = None


class UpdateLogForwardingRequest(CreateLogForwardingRequest):
    pass


# ========== 节点与配额 ==========
class NodeList(_CursorPage):
    items: list[str] = Field(default_factory=list)


class UserLimits(CamelModel):
    max_number_of_applications: int = 0
    existing_number_of_applications: int = 0
    max_number_of_regions_per_application: int = 0
    max_number_of_instances_per_region: int = 0
    max_number_of_instances_per_application: int = 0
    max_number_of_volumes_per_application: int = 0
    max_volume_size: int = 0
