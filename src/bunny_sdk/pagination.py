"""
分页与查询字符串工具模块

各 API 区域对“当前页”的编号方式并不一致：
- 流媒体与通用列表：current_page * page_size < total 时还有下一页
- 存储区列表：(current_page + 1) * page_size < total 时还有下一页

两种判断分别由对应区域的列表信封使用，不做统一
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar
from urllib.parse import urlencode

from pydantic import Field

from bunny_sdk.constants import DEFAULT_ITEMS_PER_PAGE, DEFAULT_PAGE
from bunny_sdk.models import Model


def has_more_zero_indexed(current_page: int, page_size: int, total_items: int) -> bool:
    """current_page * page_size < total_items"""
    return current_page * page_size < total_items


def has_more_one_indexed(current_page: int, page_size: int, total_items: int) -> bool:
    """(current_page + 1) * page_size < total_items"""
    return (current_page + 1) * page_size < total_items


def _encode_param(value: Any) -> Any:
    if value is True:
        return "true"
    if isinstance(value, Enum):
        return value.value
    return value


_PAGING_KEYS = frozenset({"page", "perPage", "itemsPerPage"})


def _is_sent(key: str, value: Any) -> bool:
    if value in (None, "", 0, False):
        return False
    if key in _PAGING_KEYS and isinstance(value, int) and value < 0:
        return False
    return True


def build_list_query(params: dict[str, Any] | None) -> str:
    """
    构建查询字符串（不含 "?"）

    值为 None、0、空字符串或 False 的参数会被省略，True 编码为 "true"；
    分页参数（page、perPage、itemsPerPage）只在大于 0 时发送

    参数:
        params: 有序的参数字典，键为查询参数名

    返回:
        URL 编码后的查询字符串，所有参数都被省略时返回空字符串
    """
    if not params:
        return ""
    kept = [(key, _encode_param(value)) for key, value in params.items() if _is_sent(key, value)]
    return urlencode(kept)


def append_query(path: str, params: dict[str, Any] | None) -> str:
    """在路径后追加查询字符串；路径已含 "?" 时以 "&" 连接，没有参数时原样返回"""
    query = build_list_query(params)
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"


@dataclass
class ListOptions:
    """
    通用列表查询参数

    属性:
        page: 页码，0 表示不发送
        items_per_page: 每页条数，0 表示不发送
        search: 搜索关键字
        order_by: 排序字段
    """

    page: int = 0
    items_per_page: int = 0
    search: str = ""
    order_by: str = ""

    @classmethod
    def default(cls) -> ListOptions:
        return cls(page=DEFAULT_PAGE, items_per_page=DEFAULT_ITEMS_PER_PAGE)

    def to_params(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "itemsPerPage": self.items_per_page,
            "search": self.search,
            "orderBy": self.order_by,
        }


def build_list_url(path: str, options: ListOptions | None) -> str:
    """根据 ListOptions 构建列表请求路径"""
    if options is None:
        return path
    return append_query(path, options.to_params())


T = TypeVar("T")


class PaginatedResponse(Model, Generic[T]):
    """
    分页列表信封

    元素类型通过参数化指定，例如 PaginatedResponse[Video]
    """

    items: list[T] = Field(default_factory=list)
    current_page: int = 0
    total_items: int = 0
    items_per_page: int = 0

    @property
    def has_more(self) -> bool:
        return has_more_zero_indexed(self.current_page, self.items_per_page, self.total_items)
