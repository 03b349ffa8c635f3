"""Shield/WAF 数据模型（PascalCase 键名）"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from bunny_sdk.models import Model


# ========== 区域 ==========
class ShieldZone(Model):
    id: str = ""
    name: str = ""
    host_names: list[str] = Field(default_factory=list)
    edge_script_id: str | None = None
    date_created: str | None = None


class ZoneList(Model):
    items: list[ShieldZone] = Field(default_factory=list)
    total_count: int = 0


class CreateZoneRequest(Model):
    name: str
    host_names: list[str] | None = None


class UpdateZoneRequest(Model):
    name: str | None = None
    host_names: list[str] | None = None


class PullZoneMapping(Model):
    shield_zone_id: str = ""
    pull_zone_id: int = 0


class PullZoneMappingResponse(Model):
    items: list[PullZoneMapping] = Field(default_factory=list)


# ========== WAF ==========
class WAFRule(Model):
    id: str = ""
    name: str = ""
    description: str | None = None
    rule_type: str | None = None
    category: str | None = None
    is_active: bool = False


class WAFRuleList(Model):
    items: list[WAFRule] = Field(default_factory=list)
    total_count: int = 0


class CustomRule(Model):
    id: str = ""
    name: str = ""
    description: str | None = None
    pattern: str | None = None
    action: str | None = None
    shield_zone_id: str | None = None
    is_active: bool = False
    date_created: str | None = None


class CustomRuleList(Model):
    items: list[CustomRule] = Field(default_factory=list)
    total_count: int = 0


class CreateCustomRuleRequest(Model):
    name: str
    description: str | None = None
    pattern: str | None = None
    action: str | None = None
    shield_zone_id: str | None = None
    is_active: bool = False


class ReplaceCustomRuleRequest(CreateCustomRuleRequest):
    """PUT 整体替换，字段与创建请求一致"""


class UpdateCustomRuleRequest(Model):
    name: str | None = None
    description: str | None = None
    pattern: str | None = None
    action: str | None = None
    is_active: bool | None = None


class WAFProfile(Model):
    id: str = ""
    name: str = ""
    description: str | None = None
    is_default: bool = False


class WAFProfilesResponse(Model):
    items: list[WAFProfile] = Field(default_factory=list)


class WAFEngineConfigRule(Model):
    id: str = ""
    is_active: bool = False
    action: str | None = None


class WAFEngineConfig(Model):
    profile_id: str | None = None
    is_enabled: bool = False
    analysis_mode: str | None = None
    rules: list[WAFEngineConfigRule] = Field(default_factory=list)


class WAFEnums(Model):
    rule_actions: list[str] = Field(default_factory=list)
    rule_types: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class TriggeredRule(Model):
    rule_id: str = ""
    rule_name: str = ""
    trigger_count: int = 0
    last_triggered: str | None = None
    recommended_action: str | None = None


class TriggeredRulesResponse(Model):
    items: list[TriggeredRule] = Field(default_factory=list)
    total_count: int = 0


class TriggeredRuleReviewRequest(Model):
    rule_id: str
    action: str
    comment: str | None = None


class TriggeredRuleReview(Model):
    review_id: str = ""
    rule_id: str = ""
    action: str = ""
    comment: str | None = None
    date_submitted: str | None = None


class AIRecommendation(Model):
    rule_id: str = ""
    rule_name: str = ""
    recommendation: str = ""
    confidence: float = 0.0


class AIRecommendationResponse(Model):
    recommendations: list[AIRecommendation] = Field(default_factory=list)


class PlanSegment(Model):
    plan_id: str = ""
    available_rules: int = 0
    max_custom_rules: int = 0


class PlanSegmentationResponse(Model):
    plans: list[PlanSegment] = Field(default_factory=list)


# ========== 访问控制列表 ==========
class AccessListEntry(Model):
    type: str = ""
    value: str = ""
    action: str | None = None
    comment: str | None = None
    date_added: str | None = None


class AccessList(Model):
    allowed: list[AccessListEntry] = Field(default_factory=list)
    blocked: list[AccessListEntry] = Field(default_factory=list)
    challenged: list[AccessListEntry] = Field(default_factory=list)


class AddAccessListEntryRequest(Model):
    type: str
    value: str
    action: str
    comment: str | None = None


class AccessListEntryUpdate(Model):
    type: str
    value: str
    action: str | None = None
    comment: str | None = None


class UpdateAccessListEntriesRequest(Model):
    updates: list[AccessListEntryUpdate] = Field(default_factory=list)


class AccessListEntryIdentifier(Model):
    type: str
    value: str


class DeleteAccessListEntriesRequest(Model):
    entries: list[AccessListEntryIdentifier] = Field(default_factory=list)


class AccessListEnums(Model):
    types: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)


class AccessListConfig(Model):
    default_action: str | None = None
    is_enabled: bool = False
    log_unmatched: bool = False
    date_updated: str | None = None


class UpdateAccessListConfigRequest(Model):
    default_action: str | None = None
    is_enabled: bool | None = None
    log_unmatched: bool | None = None


# ========== 限流 ==========
class RateLimit(Model):
    id: str = ""
    name: str = ""
    path: str | None = None
    requests_per_second: int = 0
    requests_per_minute: int = 0
    action: str | None = None
    shield_zone_id: str | None = None
    is_active: bool = False
    date_created: str | None = None


class RateLimitList(Model):
    items: list[RateLimit] = Field(default_factory=list)
    total_count: int = 0


class CreateRateLimitRequest(Model):
    name: str
    path: str | None = None
    requests_per_second: int | None = None
    requests_per_minute: int | None = None
    action: str | None = None
    shield_zone_id: str | None = None
    is_active: bool = False


class UpdateRateLimitRequest(Model):
    name: str | None = None
    path: str | None = None
    requests_per_second: int | None = None
    requests_per_minute: int | None = None
    action: str | None = None
    is_active: bool | None = None


# ========== 机器人检测 / 上传扫描 ==========
class BotDetectionSettings(Model):
    is_enabled: bool = False
    detection_level: str | None = None
    action: str | None = None
    allowed_bots: list[str] = Field(default_factory=list)
    blocked_bots: list[str] = Field(default_factory=list)


class UpdateBotDetectionRequest(Model):
    is_enabled: bool | None = None
    detection_level: str | None = None
    action: str | None = None
    allowed_bots: list[str] | None = None
    blocked_bots: list[str] | None = None


class UploadScanningConfig(Model):
    is_enabled: bool = False
    scan_level: str | None = None
    quarantine_infected: bool = False
    notify_on_detection: bool = False
    allowed_file_types: list[str] = Field(default_factory=list)
    max_file_size: int = 0


class UpdateUploadScanningRequest(Model):
    is_enabled: bool | None = None
    scan_level: str | None = None
    quarantine_infected: bool | None = None
    notify_on_detection: bool | None = None
    allowed_file_types: list[str] | None = None
    max_file_size: int | None = None


# ========== 指标 ==========
class DateRange(Model):
    # from 是关键字，键名显式指定
    start: str = Field(default="", alias="From")
    end: str = Field(default="", alias="To")


@dataclass
class DateRangeOptions:
    from_date: str = ""
    to_date: str = ""

    def to_params(self) -> dict[str, Any]:
        return {"from": self.from_date, "to": self.to_date}


@dataclass
class MetricsDetailedOptions(DateRangeOptions):
    zone_id: str = ""

    def to_params(self) -> dict[str, Any]:
        params = super().to_params()
        params["zoneId"] = self.zone_id
        return params


class MetricsOverview(Model):
    total_requests: int = 0
    blocked_requests: int = 0
    allowed_requests: int = 0
    bot_detection_blocks: int = 0
    rate_limit_blocks: int = 0
    access_list_blocks: int = 0
    date_range: DateRange = Field(default_factory=DateRange)


class MetricsBreakdown(Model):
    bot_detection: int = 0
    rate_limit: int = 0
    access_list: int = 0


class ZoneMetrics(Model):
    zone_id: str = ""
    zone_name: str = ""
    total_requests: int = 0
    blocked_requests: int = 0
    allowed_requests: int = 0
    breakdown: MetricsBreakdown = Field(default_factory=MetricsBreakdown)


class MetricsOverviewDetailed(Model):
    zones: list[ZoneMetrics] = Field(default_factory=list)
    date_range: DateRange = Field(default_factory=DateRange)


class TopURLEntry(Model):
    url: str = ""
    trigger_count: int = 0


class WAFRuleMetrics(Model):
    rule_id: str = ""
    rule_name: str = ""
    trigger_count: int = 0
    blocked_count: int = 0
    allowed_count: int = 0
    top_urls: list[TopURLEntry] = Field(default_factory=list)


class TopIPEntry(Model):
    ip: str = Field(default="", alias="IP")
    block_count: int = 0


class RateLimitMetrics(Model):
    rule_id: str = ""
    rule_name: str = ""
    path: str | None = None
    blocked_requests: int = 0
    top_blocked_ips: list[TopIPEntry] = Field(default_factory=list, alias="TopBlockedIPs")


class RateLimitMetricsSummary(Model):
    rule_id: str = ""
    rule_name: str = ""
    blocked_requests: int = 0


class RateLimitMetricsList(Model):
    items: list[RateLimitMetricsSummary] = Field(default_factory=list)
    total_count: int = 0


class BotTypeEntry(Model):
    bot_type: str = ""
    count: int = 0


class BotDetectionMetrics(Model):
    zone_id: str = ""
    zone_name: str = ""
    total_bot_requests: int = 0
    blocked_bots: int = 0
    challenged_bots: int = 0
    detection_level: str | None = None
    top_detected_bot_types: list[BotTypeEntry] = Field(default_factory=list)


class UploadScanningMetrics(Model):
    zone_id: str = ""
    zone_name: str = ""
    total_scanned_files: int = 0
    clean_files: int = 0
    malicious_files: int = 0
    quarantined_files: int = 0
    scan_errors: int = 0


# ========== 事件日志 ==========
@dataclass
class EventLogListOptions:
    zone_id: str = ""
    from_date: str = ""
    to_date: str = ""
    limit: int = 0
    offset: int = 0

    def to_params(self) -> dict[str, Any]:
        return {
            "zoneId": self.zone_id,
            "from": self.from_date,
            "to": self.to_date,
            "limit": self.limit,
            "offset": self.offset,
        }


class EventLog(Model):
    id: str = ""
    zone_id: str = ""
    timestamp: str = ""
    event_type: str = ""
    rule_id: str | None = None
    rule_name: str | None = None
    source_ip: str = Field(default="", alias="SourceIP")
    path: str = ""
    method: str = ""
    action: str = ""
    status_code: int = 0
    user_agent: str | None = None


class EventLogList(Model):
    items: list[EventLog] = Field(default_factory=list)
    total_count: int = 0


# ========== DDoS / 促销 ==========
class DDoSProfile(Model):
    id: str = ""
    name: str = ""
    description: str | None = None


class DDoSEnums(Model):
    profiles: list[DDoSProfile] = Field(default_factory=list)
    triggers: list[str] = Field(default_factory=list)


class Promo(Model):
    id: str = ""
    title: str = ""
    description: str | None = None
    valid_until: str | None = None


class PromoInfo(Model):
    current_promos: list[Promo] = Field(default_factory=list)
