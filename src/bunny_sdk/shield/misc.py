"""DDoS 枚举与促销信息服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.shield.models import DDoSEnums, PromoInfo


class DDoSService(BaseService):
    def get_enums(self) -> DDoSEnums:
        return self._get("/shield/ddos/enums", DDoSEnums)


class PromoService(BaseService):
    def get(self) -> PromoInfo:
        return self._get("/shield/promo", PromoInfo)
