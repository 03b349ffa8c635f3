"""镜像仓库服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.containers.models import (
    ConfigSuggestions,
    ContainerImage,
    ContainerRegistry,
    CreateRegistryRequest,
    GetConfigSuggestionsRequest,
    GetDigestRequest,
    ImageDigest,
    ImageTag,
    ListImagesRequest,
    ListTagsRequest,
    RegistryDeleteResponse,
    RegistryList,
    RegistryOperationResponse,
    SearchPublicImagesRequest,
    UpdateRegistryRequest,
)


class RegistryService(BaseService):
    def list(self) -> RegistryList:
        return self._get("/registries", RegistryList)

    def get(self, registry_id: int) -> ContainerRegistry:
        return self._get(f"/registries/{registry_id}", ContainerRegistry)

    def create(self, req: CreateRegistryRequest) -> RegistryOperationResponse:
        return self._post("/registries", req, RegistryOperationResponse)

    def update(self, registry_id: int, req: UpdateRegistryRequest) -> RegistryOperationResponse:
        return self._put(f"/registries/{registry_id}", req, RegistryOperationResponse)

    def delete(self, registry_id: int) -> RegistryDeleteResponse:
        """仓库仍被应用引用时 status 为 InUse，applications 列出引用方"""
        return self._delete(f"/registries/{registry_id}", None, RegistryDeleteResponse)

    def list_images(self, req: ListImagesRequest) -> list[ContainerImage]:
        return self._post("/registries/images", req, list[ContainerImage])

    def list_tags(self, req: ListTagsRequest) -> list[ImageTag]:
        return self._post("/registries/tags", req, list[ImageTag])

    def get_digest(self, req: GetDigestRequest) -> ImageDigest:
        return self._post("/registries/digest", req, ImageDigest)

    def get_config_suggestions(self, req: GetConfigSuggestionsRequest) -> ConfigSuggestions:
        return self._post("/registries/config-suggestions", req, ConfigSuggestions)

    def search_public_images(self, req: SearchPublicImagesRequest) -> list[ContainerImage]:
        return self._post("/registries/public-images/search", req, list[ContainerImage])
