"""边缘脚本区域"""

from bunny_sdk.scripting.client import ScriptingClient
from bunny_sdk.scripting.code import CodeService
from bunny_sdk.scripting.models import (
    AddSecretRequest,
    AddVariableRequest,
    CreateScriptRequest,
    EdgeScript,
    EdgeScriptCode,
    EdgeScriptRelease,
    EdgeScriptSecret,
    EdgeScriptVariable,
    LinkedPullZone,
    PublishReleaseRequest,
    ReleaseList,
    ReleaseListOptions,
    ReleaseStatus,
    ScriptList,
    ScriptListOptions,
    ScriptStatistics,
    ScriptType,
    SecretList,
    SourceCodeIntegration,
    StatisticsOptions,
    UpdateCodeRequest,
    UpdateScriptRequest,
    UpdateSecretRequest,
    UpdateVariableRequest,
    UpsertSecretRequest,
    UpsertVariableRequest,
)
from bunny_sdk.scripting.releases import ReleaseService
from bunny_sdk.scripting.scripts import ScriptService
from bunny_sdk.scripting.secrets import SecretService
from bunny_sdk.scripting.variables import VariableService

__all__ = [
    "ScriptingClient",
    "ScriptService",
    "CodeService",
    "ReleaseService",
    "SecretService",
    "VariableService",
    "AddSecretRequest",
    "AddVariableRequest",
    "CreateScriptRequest",
    "EdgeScript",
    "EdgeScriptCode",
    "EdgeScriptRelease",
    "EdgeScriptSecret",
    "EdgeScriptVariable",
    "LinkedPullZone",
    "PublishReleaseRequest",
    "ReleaseList",
    "ReleaseListOptions",
    "ReleaseStatus",
    "ScriptList",
    "ScriptListOptions",
    "ScriptStatistics",
    "ScriptType",
    "SecretList",
    "SourceCodeIntegration",
    "StatisticsOptions",
    "UpdateCodeRequest",
    "UpdateScriptRequest",
    "UpdateSecretRequest",
    "UpdateVariableRequest",
    "UpsertSecretRequest",
    "UpsertVariableRequest",
]
