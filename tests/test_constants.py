"""
测试 bunny_sdk.constants 模块

确认默认地址、请求头与连接池配置
"""

import pytest
from bunny_sdk import constants


class TestDefaults:
    """测试默认配置常量"""

    @pytest.mark.unit
    def test_base_urls(self):
        assert constants.DEFAULT_API_BASE_URL == "https://api.bunny.net"
        assert constants.DEFAULT_STREAM_BASE_URL == "https://video.bunnycdn.com"
        assert constants.DEFAULT_CONTAINERS_BASE_URL == "https://api.bunny.net/mc"

    @pytest.mark.unit
    def test_headers(self):
        assert constants.HEADER_ACCESS_KEY == "AccessKey"
        assert constants.DEFAULT_USER_AGENT == "bunny-sdk-python/1.0"

    @pytest.mark.unit
    def test_pool_never_retries(self):
        assert constants.DEFAULT_POOL_CONFIG["max_retries"] == 0

    @pytest.mark.unit
    def test_error_prefixes_are_distinct(self):
        prefixes = {
            constants.ERROR_PREFIX_DEFAULT,
            constants.ERROR_PREFIX_STORAGE,
            constants.ERROR_PREFIX_STREAM,
            constants.ERROR_PREFIX_SCRIPTING,
            constants.ERROR_PREFIX_CONTAINERS,
            constants.ERROR_PREFIX_SHIELD,
        }

        assert len(prefixes) == 6
