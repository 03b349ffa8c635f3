"""
认证模块

Bunny.net 的所有管理 API 都以请求头携带访问密钥
"""

from __future__ import annotations

import requests
from requests.auth import AuthBase

from bunny_sdk.constants import HEADER_ACCESS_KEY


class AccessKeyAuth(AuthBase):
    """
    访问密钥认证

    在每个请求上设置认证头，头名称默认为 AccessKey

    参数:
        api_key: 访问密钥
        header_name: 认证头名称
    """

    def __init__(self, api_key: str, header_name: str = HEADER_ACCESS_KEY):
        self.api_key = api_key
        self.header_name = header_name

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers[self.header_name] = self.api_key
        return r

    def __repr__(self) -> str:
        return f"{type(self).__name__}(header_name={self.header_name!r})"
