"""视频库管理服务（api.bunny.net）"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.pagination import append_query
from bunny_sdk.stream.models import (
    CreateLibraryRequest,
    Library,
    LibraryList,
    LibraryListOptions,
    LibraryStatistics,
    UpdateLibraryRequest,
)


class LibraryService(BaseService):
    def list(self, opts: LibraryListOptions | None = None) -> LibraryList:
        path = "/library"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, LibraryList)

    def get(self, library_id: int) -> Library:
        return self._get(f"/library/{library_id}", Library)

    def create(self, req: CreateLibraryRequest) -> Library:
        return self._post("/library", req, Library)

    def update(self, library_id: int, req: UpdateLibraryRequest) -> Library:
        return self._post(f"/library/{library_id}", req, Library)

    def delete(self, library_id: int) -> None:
        self._delete(f"/library/{library_id}")

    def get_statistics(self, library_id: int) -> LibraryStatistics:
        return self._get(f"/library/{library_id}/statistics", LibraryStatistics)
