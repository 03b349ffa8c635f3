"""
存储区管理服务测试

测试 ZoneService 的路径、HTTP 方法、查询参数以及存储区列表的分页规则
"""

import json

import pytest
import responses
from bunny_sdk.exceptions import BunnyDecodeError, BunnyNotFoundError
from bunny_sdk.storage import CreateZoneRequest, UpdateZoneRequest, ZoneListOptions

BASE = "https://api.bunny.net"


class TestZoneList:
    """测试存储区列表"""

    @pytest.mark.unit
    @responses.activate
    def test_single_page_has_no_more(self, storage_client):
        # Arrange
        responses.add(
            responses.GET,
            f"{BASE}/storagezone",
            json={"Items": [{"Id": 1}], "TotalItems": 1, "CurrentPage": 0, "PageSize": 10},
            status=200,
        )

        # Act
        page = storage_client.zones().list()

        # Assert
        assert len(page.items) == 1
        assert page.items[0].id == 1
        assert page.has_more is False
        assert responses.calls[0].request.url == f"{BASE}/storagezone"

    @pytest.mark.unit
    @responses.activate
    def test_not_found_error(self, storage_client):
        responses.add(responses.GET, f"{BASE}/storagezone", json={"Message": "not found"}, status=404)

        with pytest.raises(BunnyNotFoundError) as exc_info:
            storage_client.zones().list()

        assert exc_info.value.message == "not found"
        assert str(exc_info.value).startswith("bunny storage: not found")

    @pytest.mark.unit
    @responses.activate
    def test_numeric_strings_in_envelope(self, storage_client):
        """分页字段以字符串返回时解码为 int"""
        responses.add(
            responses.GET,
            f"{BASE}/storagezone",
            json={"Items": [], "TotalItems": "25", "CurrentPage": "1", "PageSize": "10"},
            status=200,
        )

        page = storage_client.zones().list()

        assert page.total_items == 25
        assert page.has_more is True

    @pytest.mark.unit
    @responses.activate
    def test_malformed_envelope_raises_decode_error(self, storage_client):
        responses.add(responses.GET, f"{BASE}/storagezone", json={"Items": {"Id": 1}, "TotalItems": 1}, status=200)

        with pytest.raises(BunnyDecodeError):
            storage_client.zones().list()

    @pytest.mark.unit
    @responses.activate
    def test_one_indexed_has_more(self, storage_client):
        responses.add(
            responses.GET,
            f"{BASE}/storagezone",
            json={"Items": [], "TotalItems": 25, "CurrentPage": 1, "PageSize": 10},
            status=200,
        )

        page = storage_client.zones().list()

        assert page.has_more is True

    @pytest.mark.unit
    @responses.activate
    def test_empty_options_emit_no_query(self, storage_client):
        responses.add(responses.GET, f"{BASE}/storagezone", json={"Items": []}, status=200)

        storage_client.zones().list(ZoneListOptions())

        assert "?" not in responses.calls[0].request.url

    @pytest.mark.unit
    @responses.activate
    def test_options_become_query(self, storage_client):
        responses.add(responses.GET, f"{BASE}/storagezone", json={"Items": []}, status=200)

        storage_client.zones().list(ZoneListOptions(page=2, per_page=50, include_deleted=True, search="img"))

        assert responses.calls[0].request.url == f"{BASE}/storagezone?page=2&perPage=50&includeDeleted=true&search=img"

    @pytest.mark.unit
    @responses.activate
    def test_search_only(self, storage_client):
        responses.add(responses.GET, f"{BASE}/storagezone", json={"Items": []}, status=200)

        storage_client.zones().list(ZoneListOptions(search="img"))

        assert responses.calls[0].request.url == f"{BASE}/storagezone?search=img"


class TestZoneCrud:
    """测试存储区增删改查"""

    @pytest.mark.unit
    @responses.activate
    def test_get(self, storage_client):
        responses.add(
            responses.GET,
            f"{BASE}/storagezone/7",
            json={"Id": 7, "Name": "assets", "DateModified": "2024-03-01T12:00:00.123", "ReplicationRegions": ["NY"]},
            status=200,
        )

        zone = storage_client.zones().get(7)

        assert zone.name == "assets"
        assert zone.replication_regions == ["NY"]
        assert zone.date_modified.year == 2024

    @pytest.mark.unit
    @responses.activate
    def test_create_omits_unset_fields(self, storage_client):
        responses.add(responses.POST, f"{BASE}/storagezone", json={"Id": 9, "Name": "assets"}, status=201)

        zone = storage_client.zones().create(CreateZoneRequest(name="assets", region="DE"))

        assert json.loads(responses.calls[0].request.body) == {"Name": "assets", "Region": "DE"}
        assert zone.id == 9

    @pytest.mark.unit
    @responses.activate
    def test_update_uses_post(self, storage_client):
        responses.add(responses.POST, f"{BASE}/storagezone/9", status=204)

        result = storage_client.zones().update(9, UpdateZoneRequest(rewrite404_to200=True))

        assert result is None
        assert json.loads(responses.calls[0].request.body) == {"Rewrite404To200": True}

    @pytest.mark.unit
    @responses.activate
    def test_delete(self, storage_client):
        responses.add(responses.DELETE, f"{BASE}/storagezone/9", status=204)

        storage_client.zones().delete(9)

        assert responses.calls[0].request.method == "DELETE"

    @pytest.mark.unit
    @responses.activate
    def test_check_availability_escapes_name(self, storage_client):
        responses.add(
            responses.GET,
            f"{BASE}/storagezone/checkavailability/my%20zone",
            json={"Available": True, "Name": "my zone"},
            status=200,
        )

        result = storage_client.zones().check_availability("my zone")

        assert result.available is True

    @pytest.mark.unit
    @responses.activate
    @pytest.mark.parametrize("method_name,suffix", [("reset_password", "resetPassword"), ("reset_read_only_password", "resetReadOnlyPassword")])
    def test_reset_passwords_send_empty_object(self, storage_client, method_name, suffix):
        responses.add(responses.POST, f"{BASE}/storagezone/3/{suffix}", json={"Id": 3, "Success": True}, status=200)

        result = getattr(storage_client.zones(), method_name)(3)

        assert json.loads(responses.calls[0].request.body) == {}
        assert result.id == 3
