"""限流规则服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.shield.models import CreateRateLimitRequest, RateLimit, RateLimitList, UpdateRateLimitRequest


class RateLimitService(BaseService):
    def list(self) -> RateLimitList:
        return self._get("/shield/rate-limits", RateLimitList)

    def create(self, req: CreateRateLimitRequest) -> RateLimit:
        return self._post("/shield/rate-limit", req, RateLimit)

    def get(self, rate_limit_id: str) -> RateLimit:
        return self._get(f"/shield/rate-limit/{rate_limit_id}", RateLimit)

    def update(self, rate_limit_id: str, req: UpdateRateLimitRequest) -> RateLimit:
        return self._patch(f"/shield/rate-limit/{rate_limit_id}", req, RateLimit)

    def delete(self, rate_limit_id: str) -> None:
        self._delete(f"/shield/rate-limit/{rate_limit_id}")
