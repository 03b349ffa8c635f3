"""
测试 bunny_sdk.utils 模块

测试日志脱敏、路径转义与请求 ID 生成
"""

import re

import pytest
from bunny_sdk.utils import (
    generate_request_id,
    quote_path_segment,
    sanitize_dict,
    sanitize_headers,
    sanitize_url,
)


class TestSanitizeHeaders:
    """测试 sanitize_headers 函数"""

    @pytest.mark.unit
    def test_masks_access_key(self):
        headers = {"AccessKey": "secret-key", "Accept": "application/json"}

        result = sanitize_headers(headers)

        assert result == {"AccessKey": "***", "Accept": "application/json"}
        assert headers["AccessKey"] == "secret-key"

    @pytest.mark.unit
    def test_case_insensitive(self):
        assert sanitize_headers({"accesskey": "x", "authorization": "y"}) == {"accesskey": "***", "authorization": "***"}

    @pytest.mark.unit
    def test_custom_keys_and_mask(self):
        assert sanitize_headers({"X-Token": "t"}, sensitive_keys={"x-token"}, mask="[hidden]") == {"X-Token": "[hidden]"}


class TestSanitizeUrl:
    """测试 sanitize_url 函数"""

    @pytest.mark.unit
    def test_masks_token(self):
        url = "https://video.bunnycdn.com/OEmbed?url=https%3A%2F%2Fx&token=abc"

        result = sanitize_url(url)

        assert "token=%2A%2A%2A" in result
        assert "abc" not in result

    @pytest.mark.unit
    def test_url_without_query_is_unchanged(self):
        url = "https://api.bunny.net/storagezone/1"

        assert sanitize_url(url) == url


class TestSanitizeDict:
    """测试 sanitize_dict 函数"""

    @pytest.mark.unit
    def test_masks_nested_fields(self):
        data = {"Name": "zone", "Password": "p", "Items": [{"Secret": "s", "Id": 1}]}

        result = sanitize_dict(data)

        assert result == {"Name": "zone", "Password": "***", "Items": [{"Secret": "***", "Id": 1}]}
        assert data["Password"] == "p"

    @pytest.mark.unit
    def test_scalars_pass_through(self):
        assert sanitize_dict("text") == "text"


class TestQuotePathSegment:
    """测试 quote_path_segment 函数"""

    @pytest.mark.unit
    def test_escapes_slash_and_space(self):
        assert quote_path_segment("my zone/1") == "my%20zone%2F1"

    @pytest.mark.unit
    def test_integers(self):
        assert quote_path_segment(42) == "42"


class TestGenerateRequestId:
    """测试 generate_request_id 函数"""

    @pytest.mark.unit
    def test_format(self):
        assert re.fullmatch(r"REQ-\d+-[0-9a-f]{8}", generate_request_id())

    @pytest.mark.unit
    def test_suffix_and_uniqueness(self):
        assert generate_request_id("x").endswith("-x")
        assert generate_request_id() != generate_request_id()
