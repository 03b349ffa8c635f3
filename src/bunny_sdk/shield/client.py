"""Shield/WAF 区域客户端"""

from __future__ import annotations

from bunny_sdk.client import BaseClient
from bunny_sdk.constants import DEFAULT_API_BASE_URL, ERROR_PREFIX_SHIELD
from bunny_sdk.shield.access_lists import AccessListService
from bunny_sdk.shield.event_logs import EventLogService
from bunny_sdk.shield.metrics import MetricsService
from bunny_sdk.shield.misc import DDoSService, PromoService
from bunny_sdk.shield.rate_limits import RateLimitService
from bunny_sdk.shield.waf import WAFService
from bunny_sdk.shield.zone_settings import BotDetectionService, UploadScanningService
from bunny_sdk.shield.zones import ShieldZoneService


class ShieldClient(BaseClient):
    """Shield/WAF 客户端，使用账户 API Key"""

    base_url = DEFAULT_API_BASE_URL
    error_prefix = ERROR_PREFIX_SHIELD

    def zones(self) -> ShieldZoneService:
        return ShieldZoneService(self)

    def waf(self) -> WAFService:
        return WAFService(self)

    def access_lists(self, zone_id: str) -> AccessListService:
        return AccessListService(self, zone_id)

    def rate_limits(self) -> RateLimitService:
        return RateLimitService(self)

    def bot_detection(self, zone_id: str) -> BotDetectionService:
        return BotDetectionService(self, zone_id)

    def upload_scanning(self, zone_id: str) -> UploadScanningService:
        return UploadScanningService(self, zone_id)

    def metrics(self) -> MetricsService:
        return MetricsService(self)

    def event_logs(self) -> EventLogService:
        return EventLogService(self)

    def ddos(self) -> DDoSService:
        return DDoSService(self)

    def promo(self) -> PromoService:
        return PromoService(self)
