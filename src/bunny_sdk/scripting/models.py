"""边缘脚本数据模型（PascalCase 键名）"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import Field

from bunny_sdk.models import Model


class ScriptType(str, Enum):
    DNS = "DNS"
    CDN = "CDN"
    MIDDLEWARE = "Middleware"


class ReleaseStatus(str, Enum):
    ARCHIVED = "Archived"
    LIVE = "Live"


class LinkedPullZone(Model):
    id: int = 0
    name: str | None = None


class SourceCodeIntegration(Model):
    id: int = 0
    integration_type: str | None = None
    repository_url: str | None = None
    branch: str | None = None


class EdgeScriptVariable(Model):
    id: int = 0
    name: str | None = None
    required: bool = False
    default_value: str | None = None


class EdgeScript(Model):
    id: int = 0
    name: str | None = None
    last_modified: str = ""
    script_type: ScriptType | None = None
    current_release_id: int = 0
    edge_script_variables: list[EdgeScriptVariable] = Field(default_factory=list)
    deleted: bool = False
    linked_pull_zones: list[LinkedPullZone] = Field(default_factory=list)
    integration: SourceCodeIntegration | None = None
    default_hostname: str | None = None
    system_hostname: str | None = None
    deployment_key: str | None = None
    repository_id: int | None = None
    integration_id: int | None = None
    monthly_cost: float = 0.0
    monthly_request_count: int = 0
    monthly_cpu_time: int = 0


class EdgeScriptRelease(Model):
    id: int = 0
    deleted: bool = False
    code: str | None = None
    uuid: str | None = None
    note: str | None = None
    author: str | None = None
    author_email: str | None = None
    commit_sha: str | None = None
    status: ReleaseStatus | None = None
    date_released: str = ""
    date_published: str = ""


class EdgeScriptSecret(Model):
    id: int = 0
    name: str | None = None
    last_modified: str = ""


class EdgeScriptCode(Model):
    code: str | None = None
    last_modified: str = ""


class ScriptStatistics(Model):
    total_requests_served: int = 0
    total_cpu_used: float = 0.0
    total_monthly_cost: float = 0.0
    average_cpu_time_per_execution: float = 0.0
    requests_served_chart: dict[str, int] = Field(default_factory=dict)
    average_cpu_time_chart: dict[str, float] = Field(default_factory=dict)
    total_cpu_time_chart: dict[str, float] = Field(default_factory=dict)


class ScriptList(Model):
    """脚本列表，是否还有下一页以服务器返回的 HasMoreItems 为准"""

    items: list[EdgeScript] = Field(default_factory=list)
    current_page: int = 0
    total_items: int = 0
    has_more_items: bool = False

    @property
    def has_more(self) -> bool:
        return self.has_more_items


class ReleaseList(Model):
    items: list[EdgeScriptRelease] = Field(default_factory=list)
    current_page: int = 0
    total_items: int = 0
    has_more_items: bool = False

    @property
    def has_more(self) -> bool:
        return self.has_more_items


class SecretList(Model):
    secrets: list[EdgeScriptSecret] = Field(default_factory=list)


# ========== 请求体 ==========
class CreateScriptRequest(Model):
    name: str | None = None
    code: str | None = None
    script_type: ScriptType | None = None
    create_linked_pull_zone: bool = False
    linked_pull_zone_name: str | None = None
    integration: SourceCodeIntegration | None = None


class UpdateScriptRequest(Model):
    name: str | None = None
    script_type: ScriptType | None = None


class UpdateCodeRequest(Model):
    code: str | None = None


class PublishReleaseRequest(Model):
    note: str | None = None


class AddSecretRequest(Model):
    name: str
    secret: str | None = None


class UpdateSecretRequest(Model):
    secret: str | None = None


class UpsertSecretRequest(Model):
    name: str
    secret: str | None = None


class AddVariableRequest(Model):
    name: str
    required: bool = False
    default_value: str | None = None


class UpdateVariableRequest(Model):
    default_value: str | None = None
    required: bool | None = None


class UpsertVariableRequest(Model):
    name: str
    required: bool | None = None
    default_value: str | None = None


# ========== 查询参数 ==========
@dataclass
class ScriptListOptions:
    page: int = 0
    per_page: int = 0
    search: str = ""
    include_linked_pullzones: bool = False
    integration_id: int | None = None

    def to_params(self) -> dict[str, Any]:
        params = {
            "page": self.page,
            "perPage": self.per_page,
            "search": self.search,
            "includeLinkedPullzones": self.include_linked_pullzones,
        }
        # integrationId=0 也是有效的过滤条件
        if self.integration_id is not None:
            params["integrationId"] = str(self.integration_id)
        return params


@dataclass
class StatisticsOptions:
    date_from: str = ""
    date_to: str = ""
    load_latest: bool = False
    hourly: bool = False

    def to_params(self) -> dict[str, Any]:
        return {
            "dateFrom": self.date_from,
            "dateTo": self.date_to,
            "loadLatest": self.load_latest,
            "hourly": self.hourly,
        }


@dataclass
class ReleaseListOptions:
    page: int = 0
    per_page: int = 0

    def to_params(self) -> dict[str, Any]:
        return {"page": self.page, "perPage": self.per_page}
