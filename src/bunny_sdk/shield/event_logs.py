"""安全事件日志服务"""

from __future__ import annotations

from bunny_sdk.client import BaseService
from bunny_sdk.pagination import append_query
from bunny_sdk.shield.models import EventLogList, EventLogListOptions


class EventLogService(BaseService):
    def list(self, opts: EventLogListOptions | None = None) -> EventLogList:
        """按 limit/offset 分页，TotalCount 为匹配的事件总数"""
        path = "/shield/event-logs"
        if opts is not None:
            path = append_query(path, opts.to_params())
        return self._get(path, EventLogList)
