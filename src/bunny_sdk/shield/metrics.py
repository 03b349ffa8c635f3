"""
Shield 指标服务

所有查询都接受可选的 from/to 日期范围，未设置的参数不会出现在查询串中
"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.pagination import append_query
from bunny_sdk.shield.models import (
    BotDetectionMetrics,
    DateRangeOptions,
    MetricsDetailedOptions,
    MetricsOverview,
    MetricsOverviewDetailed,
    RateLimitMetrics,
    RateLimitMetricsList,
    UploadScanningMetrics,
    WAFRuleMetrics,
)


def _with_range(path: str, opts: DateRangeOptions | None) -> str:
    if opts is None:
        return path
    return append_query(path, opts.to_params())


class MetricsService(BaseService):
    def get_overview(self, opts: DateRangeOptions | None = None) -> MetricsOverview:
        return self._get(_with_range("/shield/metrics/overview", opts), MetricsOverview)

    def get_overview_detailed(self, opts: MetricsDetailedOptions | None = None) -> MetricsOverviewDetailed:
        return self._get(_with_range("/shield/metrics/overview-detailed", opts), MetricsOverviewDetailed)

    def get_waf_rule_metrics(self, rule_id: str, opts: DateRangeOptions | None = None) -> WAFRuleMetrics:
        return self._get(_with_range(f"/shield/metrics/waf-rule/{rule_id}", opts), WAFRuleMetrics)

    def get_rate_limit_metrics(self, rate_limit_id: str, opts: DateRangeOptions | None = None) -> RateLimitMetrics:
        return self._get(_with_range(f"/shield/metrics/rate-limit/{rate_limit_id}", opts), RateLimitMetrics)

    def get_all_rate_limit_metrics(self, opts: DateRangeOptions | None = None) -> RateLimitMetricsList:
        return self._get(_with_range("/shield/metrics/rate-limits", opts), RateLimitMetricsList)

    def get_bot_detection_metrics(self, zone_id: str, opts: DateRangeOptions | None = None) -> BotDetectionMetrics:
        return self._get(_with_range(f"/shield/metrics/bot-detection/{zone_id}", opts), BotDetectionMetrics)

    def get_upload_scanning_metrics(self, zone_id: str, opts: DateRangeOptions | None = None) -> UploadScanningMetrics:
        return self._get(_with_range(f"/shield/metrics/upload-scanning/{zone_id}", opts), UploadScanningMetrics)
