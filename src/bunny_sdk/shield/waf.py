"""
WAF 规则服务

包含预置规则、自定义规则、防护配置以及触发规则的审核
"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.pagination import append_query
from bunny_sdk.shield.models import (
    AIRecommendationResponse,
    CreateCustomRuleRequest,
    CustomRule,
    CustomRuleList,
    PlanSegmentationResponse,
    ReplaceCustomRuleRequest,
    TriggeredRuleReview,
    TriggeredRuleReviewRequest,
    TriggeredRulesResponse,
    UpdateCustomRuleRequest,
    WAFEngineConfig,
    WAFEnums,
    WAFProfilesResponse,
    WAFRuleList,
)


class WAFService(BaseService):
    def list_rules(self) -> WAFRuleList:
        return self._get("/shield/waf/rules", WAFRuleList)

    # ---------- 自定义规则 ----------
    def list_custom_rules(self) -> CustomRuleList:
        return self._get("/shield/waf/custom-rules", CustomRuleList)

    def create_custom_rule(self, req: CreateCustomRuleRequest) -> CustomRule:
        return self._post("/shield/waf/custom-rule", req, CustomRule)

    def get_custom_rule(self, rule_id: str) -> CustomRule:
        return self._get(f"/shield/waf/custom-rule/{rule_id}", CustomRule)

    def update_custom_rule(self, rule_id: str, req: UpdateCustomRuleRequest) -> CustomRule:
        """PATCH 部分更新，未设置的字段保持不变"""
        return self._patch(f"/shield/waf/custom-rule/{rule_id}", req, CustomRule)

    def replace_custom_rule(self, rule_id: str, req: ReplaceCustomRuleRequest) -> CustomRule:
        return self._put(f"/shield/waf/custom-rule/{rule_id}", req, CustomRule)

    def delete_custom_rule(self, rule_id: str) -> None:
        self._delete(f"/shield/waf/custom-rule/{rule_id}")

    # ---------- 配置 ----------
    def get_profiles(self) -> WAFProfilesResponse:
        return self._get("/shield/waf/profiles", WAFProfilesResponse)

    def get_engine_config(self) -> WAFEngineConfig:
        return self._get("/shield/waf/engine-config", WAFEngineConfig)

    def get_enums(self) -> WAFEnums:
        return self._get("/shield/waf/enums", WAFEnums)

    # ---------- 触发规则审核 ----------
    def get_triggered_rules(self) -> TriggeredRulesResponse:
        return self._get("/shield/waf/rules/review-triggered", TriggeredRulesResponse)

    def submit_triggered_rule_review(self, req: TriggeredRuleReviewRequest) -> TriggeredRuleReview:
        return self._post("/shield/waf/rules/review-triggered", req, TriggeredRuleReview)

    def get_ai_recommendation(self, rule_id: str = "") -> AIRecommendationResponse:
        path = append_query("/shield/waf/rules/review-triggered/ai-recommendation", {"ruleId": rule_id})
        return self._get(path, AIRecommendationResponse)

    def get_plan_segmentation(self) -> PlanSegmentationResponse:
        return self._get("/shield/waf/rules/plan-segmentation", PlanSegmentationResponse)
