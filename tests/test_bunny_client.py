"""
账户级管理客户端测试

测试区域客户端共享会话、User-Agent 与基础 URL 的规则
"""

import pytest
import requests
import responses
from bunny_sdk import Client, ContainersClient, ShieldClient, StorageClient
from bunny_sdk.constants import DEFAULT_CONTAINERS_BASE_URL, ERROR_PREFIX_CONTAINERS, ERROR_PREFIX_STORAGE
from bunny_sdk.exceptions import BunnyNotFoundError

API_KEY = "test-api-key"


class TestAreaClients:
    """测试区域客户端派生"""

    @pytest.mark.unit
    def test_areas_share_session_and_user_agent(self, mock_session):
        # Arrange
        client = Client(API_KEY, session=mock_session, user_agent="my-app/2.0", timeout=5)

        # Act
        storage = client.storage()
        shield = client.shield()

        # Assert
        assert isinstance(storage, StorageClient)
        assert isinstance(shield, ShieldClient)
        for area in (storage, shield):
            assert area.session is mock_session
            assert area.config.api_key == API_KEY
            assert area.config.user_agent == "my-app/2.0"
            assert area.config.timeout == 5

    @pytest.mark.unit
    def test_areas_keep_their_error_prefix(self, mock_session):
        client = Client(API_KEY, session=mock_session)

        assert client.storage().config.error_prefix == ERROR_PREFIX_STORAGE
        assert client.containers().config.error_prefix == ERROR_PREFIX_CONTAINERS

    @pytest.mark.unit
    def test_base_url_propagates_to_management_areas(self, mock_session):
        client = Client(API_KEY, session=mock_session, base_url="https://api.example.test")

        assert client.storage().config.base_url == "https://api.example.test"
        assert client.scripting().config.base_url == "https://api.example.test"

    @pytest.mark.unit
    def test_containers_keep_own_base_url(self, mock_session):
        client = Client(API_KEY, session=mock_session, base_url="https://api.example.test")

        containers = client.containers()

        assert isinstance(containers, ContainersClient)
        assert containers.config.base_url == DEFAULT_CONTAINERS_BASE_URL

    @pytest.mark.unit
    def test_stream_base_url_is_shared(self, mock_session):
        client = Client(API_KEY, session=mock_session, stream_base_url="https://video.example.test")

        assert client.stream().config.stream_base_url == "https://video.example.test"

    @pytest.mark.unit
    def test_closing_area_does_not_close_shared_session(self, mock_session):
        client = Client(API_KEY, session=mock_session)

        client.storage().close()

        mock_session.close.assert_not_called()


class TestShortcuts:
    """测试常用服务的快捷入口"""

    @pytest.mark.unit
    @responses.activate
    def test_storage_zones_list_uses_shared_session(self):
        # Arrange
        responses.add(
            responses.GET,
            "https://api.bunny.net/storagezone",
            json={"Items": [{"Id": 1, "Name": "assets"}], "CurrentPage": 0, "TotalItems": 1, "PageSize": 10},
            status=200,
        )
        session = requests.Session()
        client = Client(API_KEY, session=session)

        # Act
        page = client.storage_zones().list()

        # Assert
        assert client.storage().session is session
        assert responses.calls[0].request.headers["AccessKey"] == API_KEY
        assert page.items[0].name == "assets"
        assert page.has_more is False
        session.close()

    @pytest.mark.unit
    @responses.activate
    def test_libraries_not_found(self):
        responses.add(responses.GET, "https://api.bunny.net/library/9", json={"Message": "missing"}, status=404)

        with Client(API_KEY) as client:
            with pytest.raises(BunnyNotFoundError) as exc_info:
                client.libraries().get(9)

        assert str(exc_info.value) == "bunny stream: missing (status: 404)"

    @pytest.mark.unit
    @responses.activate
    def test_scripts_shortcut(self):
        responses.add(responses.GET, "https://api.bunny.net/compute/script/3", json={"Id": 3, "Name": "mw"}, status=200)

        with Client(API_KEY) as client:
            script = client.scripts().get(3)

        assert script.name == "mw"
