"""
存储文件操作服务

文件操作走存储数据面（按区域划分的 storage.bunnycdn.com 域名），
使用存储区密码（而非全局 API Key）认证
"""

from __future__ import annotations

import os
from typing import IO, Any

import requests

from bunny_sdk.client import BaseService
from bunny_sdk.constants import (
    CONTENT_TYPE_OCTET_STREAM,
    DEFAULT_STORAGE_FILE_BASE_URL,
    HEADER_CHECKSUM,
    HTTP_METHOD_DELETE,
    HTTP_METHOD_GET,
    HTTP_METHOD_PUT,
)
from bunny_sdk.parser import FileWriteResponseParser
from bunny_sdk.storage.models import File, Region, UploadOptions


def region_base_url(region: Region | str) -> str:
    """
    返回存储区域对应的数据面基础 URL

    "de"（默认区域）与未知区域使用 https://storage.bunnycdn.com，
    其余区域使用 https://{code}.storage.bunnycdn.com
    """
    code = region.value if isinstance(region, Region) else str(region)
    try:
        region = Region(code)
    except ValueError:
        return DEFAULT_STORAGE_FILE_BASE_URL
    if region is Region.FALKENSTEIN:
        return DEFAULT_STORAGE_FILE_BASE_URL
    return f"https://{region.value}.storage.bunnycdn.com"


class FileService(BaseService):
    """
    存储区文件服务

    参数:
        client: 指向存储数据面的 Requester
        zone_name: 存储区名称，作为每个路径的第一段

    路径不包含存储区名称，例如 "documents/report.pdf"；开头的 "/" 会被去掉
    """

    def __init__(self, client, zone_name: str):
        super().__init__(client)
        self.zone_name = zone_name

    def _path(self, path: str) -> str:
        return f"/{self.zone_name}/{path.lstrip('/')}"

    def upload(self, path: str, data: bytes | IO[bytes] | Any, opts: UploadOptions | None = None) -> None:
        """
        上传文件，目录会自动创建

        参数:
            path: 文件路径
            data: 文件内容（bytes 或二进制文件对象）
            opts: 上传选项（校验和、Content-Type）
        """
        headers = {}
        content_type = CONTENT_TYPE_OCTET_STREAM
        if opts is not None:
            if opts.checksum:
                headers[HEADER_CHECKSUM] = opts.checksum
            if opts.content_type:
                content_type = opts.content_type
        self.client.do_raw(HTTP_METHOD_PUT, self._path(path), data, content_type, headers)

    def download(self, path: str) -> requests.Response:
        """
        下载文件

        返回:
            未关闭的流式响应，调用方负责关闭（支持 with 语句）
        """
        return self.client.do_raw(HTTP_METHOD_GET, self._path(path), stream=True)

    def download_to_file(self, path: str, target: str | os.PathLike, chunk_size: int | None = None) -> str:
        """
        下载文件并分块写入本地路径

        返回:
            写入的本地文件路径
        """
        parser = FileWriteResponseParser(target, chunk_size=chunk_size)
        return self.client.do_raw(HTTP_METHOD_GET, self._path(path), parser=parser)

    def list(self, path: str = "") -> list[File]:
        """列出目录下的文件与子目录（自动补全结尾的 "/"）"""
        if not path.endswith("/"):
            path += "/"
        return self.client.do(HTTP_METHOD_GET, self._path(path), None, list[File])

    def delete(self, path: str) -> None:
        """删除单个文件（去掉结尾的 "/"）"""
        self.client.do_raw(HTTP_METHOD_DELETE, self._path(path.removesuffix("/")))

    def delete_directory(self, path: str) -> None:
        """递归删除目录及其全部内容"""
        if not path.endswith("/"):
            path += "/"
        self.client.do_raw(HTTP_METHOD_DELETE, self._path(path))
