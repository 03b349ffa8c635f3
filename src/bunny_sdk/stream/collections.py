"""视频合集服务（video.bunnycdn.com）"""

from __future__ import annotations

from bunny_sdk.client import BaseService, Requester
from bunny_sdk.pagination import append_query
from bunny_sdk.stream.models import (
    Collection,
    CollectionList,
    CollectionListOptions,
    CreateCollectionRequest,
    UpdateCollectionRequest,
)


class CollectionService(BaseService):
    def __init__(self, client: Requester, library_id: int):
        super().__init__(client)
        self.library_id = library_id

    def _path(self, suffix: str = "") -> str:
        return f"/library/{self.library_id}/collections{suffix}"

    def list(self, opts: CollectionListOptions | None = None) -> CollectionList:
        path = self._path()
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, CollectionList)

    def get(self, collection_id: str) -> Collection:
        return self._get(self._path(f"/{collection_id}"), Collection)

    def create(self, req: CreateCollectionRequest) -> Collection:
        return self._post(self._path(), req, Collection)

    def update(self, collection_id: str, req: UpdateCollectionRequest) -> Collection:
        return self._post(self._path(f"/{collection_id}"), req, Collection)

    def delete(self, collection_id: str) -> None:
        self._delete(self._path(f"/{collection_id}"))
