"""Shield/WAF 区域"""

from bunny_sdk.shield.access_lists import AccessListService
from bunny_sdk.shield.client import ShieldClient
from bunny_sdk.shield.event_logs import EventLogService
from bunny_sdk.shield.metrics import MetricsService
from bunny_sdk.shield.misc import DDoSService, PromoService
from bunny_sdk.shield.models import (
    AIRecommendation,
    AIRecommendationResponse,
    AccessList,
    AccessListConfig,
    AccessListEntry,
    AccessListEntryIdentifier,
    AccessListEntryUpdate,
    AccessListEnums,
    AddAccessListEntryRequest,
    BotDetectionMetrics,
    BotDetectionSettings,
    BotTypeEntry,
    CreateCustomRuleRequest,
    CreateRateLimitRequest,
    CreateZoneRequest,
    CustomRule,
    CustomRuleList,
    DDoSEnums,
    DDoSProfile,
    DateRange,
    DateRangeOptions,
    DeleteAccessListEntriesRequest,
    EventLog,
    EventLogList,
    EventLogListOptions,
    MetricsBreakdown,
    MetricsDetailedOptions,
    MetricsOverview,
    MetricsOverviewDetailed,
    PlanSegment,
    PlanSegmentationResponse,
    Promo,
    PromoInfo,
    PullZoneMapping,
    PullZoneMappingResponse,
    RateLimit,
    RateLimitList,
    RateLimitMetrics,
    RateLimitMetricsList,
    RateLimitMetricsSummary,
    ReplaceCustomRuleRequest,
    ShieldZone,
    TopIPEntry,
    TopURLEntry,
    TriggeredRule,
    TriggeredRuleReview,
    TriggeredRuleReviewRequest,
    TriggeredRulesResponse,
    UpdateAccessListConfigRequest,
    UpdateAccessListEntriesRequest,
    UpdateBotDetectionRequest,
    UpdateCustomRuleRequest,
    UpdateRateLimitRequest,
    UpdateUploadScanningRequest,
    UpdateZoneRequest,
    UploadScanningConfig,
    UploadScanningMetrics,
    WAFEngineConfig,
    WAFEngineConfigRule,
    WAFEnums,
    WAFProfile,
    WAFProfilesResponse,
    WAFRule,
    WAFRuleList,
    WAFRuleMetrics,
    ZoneList,
    ZoneMetrics,
)
from bunny_sdk.shield.rate_limits import RateLimitService
from bunny_sdk.shield.waf import WAFService
from bunny_sdk.shield.zone_settings import BotDetectionService, UploadScanningService
from bunny_sdk.shield.zones import ShieldZoneService

__all__ = [
    # 客户端
    "ShieldClient",
    # 服务
    "ShieldZoneService",
    "WAFService",
    "AccessListService",
    "RateLimitService",
    "BotDetectionService",
    "UploadScanningService",
    "MetricsService",
    "EventLogService",
    "DDoSService",
    "PromoService",
    # 数据模型
    "AIRecommendation",
    "AIRecommendationResponse",
    "AccessList",
    "AccessListConfig",
    "AccessListEntry",
    "AccessListEntryIdentifier",
    "AccessListEntryUpdate",
    "AccessListEnums",
    "AddAccessListEntryRequest",
    "BotDetectionMetrics",
    "BotDetectionSettings",
    "BotTypeEntry",
    "CreateCustomRuleRequest",
    "CreateRateLimitRequest",
    "CreateZoneRequest",
    "CustomRule",
    "CustomRuleList",
    "DDoSEnums",
    "DDoSProfile",
    "DateRange",
    "DateRangeOptions",
    "DeleteAccessListEntriesRequest",
    "EventLog",
    "EventLogList",
    "EventLogListOptions",
    "MetricsBreakdown",
    "MetricsDetailedOptions",
    "MetricsOverview",
    "MetricsOverviewDetailed",
    "PlanSegment",
    "PlanSegmentationResponse",
    "Promo",
    "PromoInfo",
    "PullZoneMapping",
    "PullZoneMappingResponse",
    "RateLimit",
    "RateLimitList",
    "RateLimitMetrics",
    "RateLimitMetricsList",
    "RateLimitMetricsSummary",
    "ReplaceCustomRuleRequest",
    "ShieldZone",
    "TopIPEntry",
    "TopURLEntry",
    "TriggeredRule",
    "TriggeredRuleReview",
    "TriggeredRuleReviewRequest",
    "TriggeredRulesResponse",
    "UpdateAccessListConfigRequest",
    "UpdateAccessListEntriesRequest",
    "UpdateBotDetectionRequest",
    "UpdateCustomRuleRequest",
    "UpdateRateLimitRequest",
    "UpdateUploadScanningRequest",
    "UpdateZoneRequest",
    "UploadScanningConfig",
    "UploadScanningMetrics",
    "WAFEngineConfig",
    "WAFEngineConfigRule",
    "WAFEnums",
    "WAFProfile",
    "WAFProfilesResponse",
    "WAFRule",
    "WAFRuleList",
    "WAFRuleMetrics",
    "ZoneList",
    "ZoneMetrics",
]
