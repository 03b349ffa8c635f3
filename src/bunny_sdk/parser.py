"""
响应解析器模块

提供多种响应解析器，支持类型化 JSON 解码、字节流透传、文件下载等不同的响应处理方式
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any

import requests
from pydantic import ValidationError

from bunny_sdk.constants import DEFAULT_CHUNK_SIZE
from bunny_sdk.exceptions import BunnyDecodeError, BunnyNetworkError
from bunny_sdk.models import decode_value

logger = logging.getLogger(__name__)


class BaseResponseParser(ABC):
    """响应解析器基类，定义解析 requests.Response 的接口。"""

    # 是否需要以流式方式发送请求
    is_stream: bool = False

    @abstractmethod
    def parse(self, response: requests.Response, result_type: Any = None) -> Any:
        """解析 requests.Response 对象并返回所需格式的数据。"""


class JSONResponseParser(BaseResponseParser):
    """解析响应为 JSON，并按 result_type 解码为类型化记录"""

    is_stream: bool = False

    def parse(self, response: requests.Response, result_type: Any = None) -> Any:
        logger.debug("Parsing response as JSON")
        try:
            payload = response.json()
        except ValueError as e:
            raise BunnyDecodeError(f"failed to decode response: {e}", response=response) from e

        if result_type is None:
            return payload
        try:
            return decode_value(result_type, payload)
        except ValidationError as e:
            type_name = getattr(result_type, "__name__", str(result_type))
            raise BunnyDecodeError(
                f"response does not match {type_name}: {e.error_count()} validation error(s)",
                response=response,
            ) from e


class StreamResponseParser(BaseResponseParser):
    """
    流式响应解析器

    返回原始响应对象，响应内容不会自动加载到内存。
    调用方负责关闭响应（支持 with 语句）。

    使用示例:
        >>> with files.download("videos/intro.mp4") as response:
        ...     for chunk in response.iter_content(chunk_size=8192):
        ...         process_chunk(chunk)
    """

    is_stream: bool = True

    def parse(self, response: requests.Response, result_type: Any = None) -> requests.Response:
        logger.debug("Returning raw response object with streaming enabled")
        return response


class FileWriteResponseParser(BaseResponseParser):
    """
    文件写入响应解析器

    将响应内容以流式方式分块写入指定文件，适用于大文件下载

    参数:
        file_path: 目标文件路径，所在目录不存在时自动创建
        chunk_size: 分块读取大小（字节）
    """

    is_stream: bool = True
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __init__(self, file_path: str | os.PathLike, chunk_size: int | None = None):
        self.file_path = os.fspath(file_path)
        self.chunk_size = chunk_size or self.chunk_size

    def parse(self, response: requests.Response, result_type: Any = None) -> str:
        directory = os.path.dirname(self.file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.debug(f"Writing response content to file: {self.file_path}")
        try:
            with open(self.file_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.chunk_size):
                    if chunk:
                        f.write(chunk)
        except requests.exceptions.RequestException as e:
            # 不保留写了一半的文件
            os.remove(self.file_path)
            logger.error(f"Download to {self.file_path} interrupted: {e}")
            raise BunnyNetworkError(f"download to {self.file_path} interrupted: {e}") from e
        return self.file_path
