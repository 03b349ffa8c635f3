"""容器编排区域"""

from bunny_sdk.containers.applications import ApplicationService
from bunny_sdk.containers.autoscaling import AutoscalingService
from bunny_sdk.containers.client import ContainersClient
from bunny_sdk.containers.endpoints import EndpointService
from bunny_sdk.containers.log_forwarding import LogForwardingService
from bunny_sdk.containers.misc import LimitsService, NodeService, PodService
from bunny_sdk.containers.models import (
    AnycastEndpointConfig,
    AnycastType,
    Application,
    ApplicationIDResponse,
    ApplicationList,
    ApplicationListItem,
    ApplicationOverview,
    ApplicationStatistics,
    ApplicationStatus,
    AutoScaling,
    CDNEndpointConfig,
    ConfigSuggestions,
    ContainerEndpoint,
    ContainerImage,
    ContainerInstance,
    ContainerRegistry,
    ContainerTemplate,
    CreateApplicationRequest,
    CreateContainerTemplateRequest,
    CreateLogForwardingRequest,
    CreateRegionSettingsRequest,
    CreateRegistryRequest,
    DisplayEndpoint,
    Endpoint,
    EndpointIDResponse,
    EndpointList,
    EndpointRequest,
    EndpointSuggestion,
    EndpointType,
    EntryPoint,
    EnvironmentVariable,
    EnvironmentVariableSuggestion,
    GetConfigSuggestionsRequest,
    GetDigestRequest,
    ImageDigest,
    ImagePullPolicy,
    ImageTag,
    ListImagesRequest,
    ListOptions,
    ListTagsRequest,
    LogForwardingConfig,
    LogForwardingFormat,
    LogForwardingList,
    LogForwardingType,
    MetricValue,
    NodeList,
    OptimalRegionResponse,
    PaginationMeta,
    PasswordCredentials,
    PatchApplicationRequest,
    PatchContainerTemplateRequest,
    PortMapping,
    Probe,
    ProbeExec,
    ProbeHTTPGet,
    ProbeTCPSocket,
    Probes,
    Protocol,
    ProvisioningType,
    Region,
    RegionList,
    RegionOverview,
    RegionSettings,
    RegistryDeleteResponse,
    RegistryDeleteStatus,
    RegistryList,
    RegistryOperationResponse,
    RegistryStatus,
    RegistryType,
    RuntimeType,
    SearchPublicImagesRequest,
    StatisticsGranularity,
    StatisticsOptions,
    StickySessions,
    UpdateApplicationRequest,
    UpdateLogForwardingRequest,
    UpdateRegionSettingsRequest,
    UpdateRegistryRequest,
    UpdateVolumeRequest,
    UserLimits,
    Volume,
    VolumeInstance,
    VolumeInstanceIDResponse,
    VolumeInstanceIDsResponse,
    VolumeList,
    VolumeMount,
    VolumeMountRequest,
    VolumeNameResponse,
    VolumeRequest,
    VolumeStatus,
    VolumeSummary,
    VolumeUpdateResponse,
)
from bunny_sdk.containers.regions import RegionService, RegionSettingsService
from bunny_sdk.containers.registries import RegistryService
from bunny_sdk.containers.templates import ContainerTemplateService
from bunny_sdk.containers.volumes import VolumeService

__all__ = [
    # 客户端
    "ContainersClient",
    # 服务
    "ApplicationService",
    "RegistryService",
    "ContainerTemplateService",
    "EndpointService",
    "AutoscalingService",
    "RegionService",
    "RegionSettingsService",
    "LimitsService",
    "NodeService",
    "PodService",
    "VolumeService",
    "LogForwardingService",
    # 数据模型
    "AnycastEndpointConfig",
    "AnycastType",
    "Application",
    "ApplicationIDResponse",
    "ApplicationList",
    "ApplicationListItem",
    "ApplicationOverview",
    "ApplicationStatistics",
    "ApplicationStatus",
    "AutoScaling",
    "CDNEndpointConfig",
    "ConfigSuggestions",
    "ContainerEndpoint",
    "ContainerImage",
    "ContainerInstance",
    "ContainerRegistry",
    "ContainerTemplate",
    "CreateApplicationRequest",
    "CreateContainerTemplateRequest",
    "CreateLogForwardingRequest",
    "CreateRegionSettingsRequest",
    "CreateRegistryRequest",
    "DisplayEndpoint",
    "Endpoint",
    "EndpointIDResponse",
    "EndpointList",
    "EndpointRequest",
    "EndpointSuggestion",
    "EndpointType",
    "EntryPoint",
    "EnvironmentVariable",
    "EnvironmentVariableSuggestion",
    "GetConfigSuggestionsRequest",
    "GetDigestRequest",
    "ImageDigest",
    "ImagePullPolicy",
    "ImageTag",
    "ListImagesRequest",
    "ListOptions",
    "ListTagsRequest",
    "LogForwardingConfig",
    "LogForwardingFormat",
    "LogForwardingList",
    "LogForwardingType",
    "MetricValue",
    "NodeList",
    "OptimalRegionResponse",
    "PaginationMeta",
    "PasswordCredentials",
    "PatchApplicationRequest",
    "PatchContainerTemplateRequest",
    "PortMapping",
    "Probe",
    "ProbeExec",
    "ProbeHTTPGet",
    "ProbeTCPSocket",
    "Probes",
    "Protocol",
    "ProvisioningType",
    "Region",
    "RegionList",
    "RegionOverview",
    "RegionSettings",
    "RegistryDeleteResponse",
    "RegistryDeleteStatus",
    "RegistryList",
    "RegistryOperationResponse",
    "RegistryStatus",
    "RegistryType",
    "RuntimeType",
    "SearchPublicImagesRequest",
    "StatisticsGranularity",
    "StatisticsOptions",
    "StickySessions",
    "UpdateApplicationRequest",
    "UpdateLogForwardingRequest",
    "UpdateRegionSettingsRequest",
    "UpdateRegistryRequest",
    "UpdateVolumeRequest",
    "UserLimits",
    "Volume",
    "VolumeInstance",
    "VolumeInstanceIDResponse",
    "VolumeInstanceIDsResponse",
    "VolumeList",
    "VolumeMount",
    "VolumeMountRequest",
    "VolumeNameResponse",
    "VolumeRequest",
    "VolumeStatus",
    "VolumeSummary",
    "VolumeUpdateResponse",
]
