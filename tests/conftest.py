"""
通用测试 Fixture 定义

提供测试所需的 Mock 对象、Fixture 和工具函数
"""

import json

import pytest
from unittest.mock import MagicMock, Mock

API_KEY = "test-api-key"


def make_response(status_code=200, payload=None, content=None):
    """构造 Mock Response 对象，payload 会同时作为 json() 返回值和 content"""
    response = Mock()
    response.status_code = status_code
    if content is None:
        content = b"" if payload is None else json.dumps(payload).encode()
    response.content = content
    response.text = content.decode()
    if payload is None:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def mock_session():
    """Mock requests.Session，默认返回 200 和一个空 JSON 对象"""
    session = MagicMock()
    session.request.return_value = make_response(200, {})
    return session


@pytest.fixture
def storage_client():
    from bunny_sdk import StorageClient

    client = StorageClient(API_KEY)
    yield client
    client.close()


@pytest.fixture
def stream_client():
    from bunny_sdk import StreamClient

    client = StreamClient(API_KEY)
    yield client
    client.close()


@pytest.fixture
def scripting_client():
    from bunny_sdk import ScriptingClient

    client = ScriptingClient(API_KEY)
    yield client
    client.close()


@pytest.fixture
def containers_client():
    from bunny_sdk import ContainersClient

    client = ContainersClient(API_KEY)
    yield client
    client.close()


@pytest.fixture
def shield_client():
    from bunny_sdk import ShieldClient

    client = ShieldClient(API_KEY)
    yield client
    client.close()
