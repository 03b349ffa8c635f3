"""
容器服务测试

测试 /mc 基础地址、游标分页、camelCase 编解码与各子服务路径
"""

import json

import pytest
import responses
from bunny_sdk.containers import (
    ApplicationStatus,
    AutoScaling,
    CDNEndpointConfig,
    CreateApplicationRequest,
    CreateLogForwardingRequest,
    CreateRegionSettingsRequest,
    EndpointRequest,
    ListImagesRequest,
    ListOptions,
    LogForwardingFormat,
    LogForwardingType,
    PortMapping,
    RegistryDeleteStatus,
    RuntimeType,
    StatisticsOptions,
    UpdateVolumeRequest,
)
from bunny_sdk.exceptions import BunnyAPIError, BunnyNotFoundError

BASE = "https://api.bunny.net/mc"


class TestApplicationService:
    """测试应用服务"""

    @pytest.mark.unit
    @responses.activate
    def test_list_cursor_page(self, containers_client):
        """有游标时 has_more 为 True"""
        # Arrange
        responses.add(
            responses.GET,
            f"{BASE}/apps",
            json={
                "items": [{"id": "app-1", "name": "web", "status": "Active"}],
                "meta": {"totalItems": 3},
                "cursor": "next-token",
            },
            status=200,
        )

        # Act
        page = containers_client.applications().list()

        # Assert
        assert page.items[0].id == "app-1"
        assert page.items[0].status is ApplicationStatus.ACTIVE
        assert page.meta.total_items == 3
        assert page.has_more is True

    @pytest.mark.unit
    @responses.activate
    def test_list_last_page_without_cursor(self, containers_client):
        responses.add(responses.GET, f"{BASE}/apps", json={"items": [], "meta": {"totalItems": 0}}, status=200)

        page = containers_client.applications().list()

        assert page.has_more is False

    @pytest.mark.unit
    @responses.activate
    def test_list_cursor_query(self, containers_client):
        responses.add(responses.GET, f"{BASE}/apps", json={"items": []}, status=200)

        containers_client.applications().list(ListOptions(next_cursor="abc", limit=20))

        assert responses.calls[0].request.url == f"{BASE}/apps?nextCursor=abc&limit=20"

    @pytest.mark.unit
    @responses.activate
    def test_list_empty_options_have_no_query(self, containers_client):
        responses.add(responses.GET, f"{BASE}/apps", json={"items": []}, status=200)

        containers_client.applications().list(ListOptions())

        assert responses.calls[0].request.url == f"{BASE}/apps"

    @pytest.mark.unit
    @responses.activate
    def test_create_sends_camel_case_body(self, containers_client):
        # Arrange
        responses.add(responses.POST, f"{BASE}/apps", json={"id": "app-9"}, status=201)
        req = CreateApplicationRequest(
            name="api",
            runtime_type=RuntimeType.SHARED,
            auto_scaling=AutoScaling(min=1, max=3),
            region_settings=CreateRegionSettingsRequest(allowed_region_ids=["DE"]),
        )

        # Act
        result = containers_client.applications().create(req)

        # Assert
        body = json.loads(responses.calls[0].request.body)
        assert body["name"] == "api"
        assert body["runtimeType"] == "Shared"
        assert body["autoScaling"] == {"min": 1, "max": 3}
        assert body["regionSettings"] == {"allowedRegionIds": ["DE"]}
        assert "volumes" not in body
        assert result.id == "app-9"

    @pytest.mark.unit
    @responses.activate
    def test_lifecycle_actions(self, containers_client):
        for action in ("deploy", "undeploy", "restart"):
            responses.add(responses.POST, f"{BASE}/apps/app-1/{action}", status=204)

        apps = containers_client.applications()
        apps.deploy("app-1")
        apps.undeploy("app-1")
        apps.restart("app-1")

        assert [call.request.url for call in responses.calls] == [
            f"{BASE}/apps/app-1/deploy",
            f"{BASE}/apps/app-1/undeploy",
            f"{BASE}/apps/app-1/restart",
        ]

    @pytest.mark.unit
    @responses.activate
    def test_statistics_query(self, containers_client):
        responses.add(responses.GET, f"{BASE}/apps/app-1/statistics", json={}, status=200)

        containers_client.applications().get_statistics(
            "app-1", StatisticsOptions(from_date="2024-01-01", to_date="2024-01-02")
        )

        assert responses.calls[0].request.url == f"{BASE}/apps/app-1/statistics?fromDate=2024-01-01&toDate=2024-01-02"

    @pytest.mark.unit
    @responses.activate
    def test_not_found_uses_containers_prefix(self, containers_client):
        responses.add(responses.GET, f"{BASE}/apps/missing", json={"Message": "app not found"}, status=404)

        with pytest.raises(BunnyNotFoundError) as exc_info:
            containers_client.applications().get("missing")

        assert str(exc_info.value) == "bunny containers: app not found (status: 404)"

    @pytest.mark.unit
    @responses.activate
    def test_plain_text_error_body(self, containers_client):
        responses.add(responses.POST, f"{BASE}/apps", body="bad gateway", status=502)

        with pytest.raises(BunnyAPIError) as exc_info:
            containers_client.applications().create(
                CreateApplicationRequest(
                    name="api",
                    runtime_type=RuntimeType.RESERVED,
                    auto_scaling=AutoScaling(min=1, max=1),
                    region_settings=CreateRegionSettingsRequest(),
                )
            )

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "bad gateway"


class TestRegistryService:
    """测试镜像仓库服务"""

    @pytest.mark.unit
    @responses.activate
    def test_delete_returns_status(self, containers_client):
        responses.add(
            responses.DELETE,
            f"{BASE}/registries/7",
            json={"status": "InUse", "applications": ["app-1"]},
            status=200,
        )

        result = containers_client.registries().delete(7)

        assert result.status is RegistryDeleteStatus.IN_USE
        assert result.applications == ["app-1"]

    @pytest.mark.unit
    @responses.activate
    def test_list_images_decodes_array(self, containers_client):
        responses.add(
            responses.POST,
            f"{BASE}/registries/images",
            json=[{"id": "nginx", "namespace": "library"}, {"id": "redis", "namespace": "library"}],
            status=200,
        )

        images = containers_client.registries().list_images(ListImagesRequest(registry_id="3"))

        assert [image.id for image in images] == ["nginx", "redis"]
        assert json.loads(responses.calls[0].request.body) == {"registryId": "3"}


class TestAppScopedServices:
    """测试按应用划分的子服务"""

    @pytest.mark.unit
    @responses.activate
    def test_set_environment_variables(self, containers_client):
        responses.add(responses.PUT, f"{BASE}/apps/app-1/containers/c-1/env", json={"id": "c-1"}, status=200)

        containers_client.container_templates("app-1").set_environment_variables("c-1", {"MODE": "prod"})

        assert json.loads(responses.calls[0].request.body) == {"MODE": "prod"}

    @pytest.mark.unit
    @responses.activate
    def test_create_endpoint_path(self, containers_client):
        # Arrange
        responses.add(
            responses.POST,
            f"{BASE}/apps/app-1/containers/c-1/endpoints",
            json={"id": "ep-1"},
            status=201,
        )
        req = EndpointRequest(
            display_name="public",
            cdn=CDNEndpointConfig(is_ssl_enabled=True, port_mappings=[PortMapping(container_port=8080)]),
        )

        # Act
        result = containers_client.endpoints("app-1").create("c-1", req)

        # Assert
        body = json.loads(responses.calls[0].request.body)
        assert body == {
            "displayName": "public",
            "cdn": {"isSslEnabled": True, "portMappings": [{"containerPort": 8080}]},
        }
        assert result.id == "ep-1"

    @pytest.mark.unit
    @responses.activate
    def test_update_volume_uses_patch(self, containers_client):
        responses.add(responses.PATCH, f"{BASE}/apps/app-1/volumes/v-1", json={"name": "data", "size": 20}, status=200)

        result = containers_client.volumes("app-1").update("v-1", UpdateVolumeRequest(size=20))

        assert json.loads(responses.calls[0].request.body) == {"size": 20}
        assert result.size == 20

    @pytest.mark.unit
    @responses.activate
    def test_autoscaling_get(self, containers_client):
        responses.add(responses.GET, f"{BASE}/apps/app-1/autoscaling", json={"min": 2, "max": 5}, status=200)

        result = containers_client.autoscaling("app-1").get()

        assert (result.min, result.max) == (2, 5)

    @pytest.mark.unit
    @responses.activate
    def test_recreate_pod(self, containers_client):
        responses.add(responses.POST, f"{BASE}/apps/app-1/pods/p-1/recreate", status=204)

        assert containers_client.pods("app-1").recreate("p-1") is None


class TestAccountScopedServices:
    """测试账户级子服务"""

    @pytest.mark.unit
    @responses.activate
    def test_log_forwarding_create(self, containers_client):
        responses.add(responses.POST, f"{BASE}/log/forwarding", json={"id": "lf-1", "enabled": True}, status=201)

        result = containers_client.log_forwarding().create(
            CreateLogForwardingRequest(
                app="app-1",
                type=LogForwardingType.SYSLOG_TCP,
                endpoint="logs.example.com",
                port=514,
                format=LogForwardingFormat.RFC5424,
            )
        )

        body = json.loads(responses.calls[0].request.body)
        assert body["type"] == "SyslogTcp"
        assert body["format"] == "SyslogRfc5424"
        assert body["enabled"] is True
        assert "token" not in body
        assert result.enabled is True

    @pytest.mark.unit
    @responses.activate
    def test_optimal_region_query(self, containers_client):
        responses.add(responses.GET, f"{BASE}/regions/optimal", json={"region": {"id": "DE"}}, status=200)

        result = containers_client.regions().get_optimal("tok")

        assert responses.calls[0].request.url == f"{BASE}/regions/optimal?cdnServerToken=tok"
        assert result.region.id == "DE"

    @pytest.mark.unit
    @responses.activate
    def test_optimal_region_without_token(self, containers_client):
        responses.add(responses.GET, f"{BASE}/regions/optimal", json={}, status=200)

        result = containers_client.regions().get_optimal()

        assert responses.calls[0].request.url == f"{BASE}/regions/optimal"
        assert result.region is None

    @pytest.mark.unit
    @responses.activate
    def test_limits(self, containers_client):
        responses.add(responses.GET, f"{BASE}/limits", json={"maxNumberOfApplications": 10}, status=200)

        assert containers_client.limits().get().max_number_of_applications == 10
