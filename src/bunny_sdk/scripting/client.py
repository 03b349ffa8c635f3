"""边缘脚本区域客户端"""

from __future__ import annotations

from bunny_sdk.client import BaseClient
from bunny_sdk.constants import DEFAULT_API_BASE_URL, ERROR_PREFIX_SCRIPTING
from bunny_sdk.scripting.code import CodeService
from bunny_sdk.scripting.releases import ReleaseService
from bunny_sdk.scripting.scripts import ScriptService
from bunny_sdk.scripting.secrets import SecretService
from bunny_sdk.scripting.variables import VariableService


class ScriptingClient(BaseClient):
    """
    边缘脚本客户端（api.bunny.net/compute）

    示例:
        >>> with ScriptingClient("global-api-key") as client:
        ...     client.code(7).set(UpdateCodeRequest(code="export default {}"))
        ...     client.releases(7).publish(PublishReleaseRequest(note="v2"))
    """

    base_url = DEFAULT_API_BASE_URL
    error_prefix = ERROR_PREFIX_SCRIPTING

    def scripts(self) -> ScriptService:
        return ScriptService(self)

    def code(self, script_id: int) -> CodeService:
        return CodeService(self, script_id)

    def releases(self, script_id: int) -> ReleaseService:
        return ReleaseService(self, script_id)

    def secrets(self, script_id: int) -> SecretService:
        return SecretService(self, script_id)

    def variables(self, script_id: int) -> VariableService:
        return VariableService(self, script_id)
