"""
parser.py 模块的单元测试

测试 JSON 解码、流式透传与文件写入三种解析器
"""

import os

import pytest
import requests
from abc import ABC
from unittest.mock import Mock
from bunny_sdk.exceptions import BunnyDecodeError, BunnyNetworkError
from bunny_sdk.models import Model
from bunny_sdk.parser import (
    BaseResponseParser,
    FileWriteResponseParser,
    JSONResponseParser,
    StreamResponseParser,
)


class Zone(Model):
    id: int = 0
    name: str = ""


class TestBaseResponseParser:
    """测试 BaseResponseParser 抽象基类"""

    @pytest.mark.unit
    def test_is_abstract_class(self):
        """验证 BaseResponseParser 是抽象类"""
        assert issubclass(BaseResponseParser, ABC)

        with pytest.raises(TypeError):
            BaseResponseParser()

    @pytest.mark.unit
    def test_is_stream_defaults_to_false(self):
        assert BaseResponseParser.is_stream is False


class TestJSONResponseParser:
    """测试 JSONResponseParser 解析器"""

    @pytest.fixture
    def parser(self):
        return JSONResponseParser()

    @pytest.mark.unit
    def test_decodes_into_result_type(self, parser):
        # Arrange
        response = Mock()
        response.json.return_value = {"Id": 1, "Name": "assets"}

        # Act
        result = parser.parse(response, Zone)

        # Assert
        assert result == Zone(id=1, name="assets")

    @pytest.mark.unit
    def test_without_result_type_returns_payload(self, parser):
        response = Mock()
        response.json.return_value = [1, 2]

        assert parser.parse(response) == [1, 2]

    @pytest.mark.unit
    def test_invalid_json_raises_decode_error(self, parser):
        response = Mock()
        response.json.side_effect = ValueError("Expecting value")

        with pytest.raises(BunnyDecodeError) as exc_info:
            parser.parse(response, Zone)

        assert exc_info.value.response is response

    @pytest.mark.unit
    def test_shape_mismatch_raises_decode_error(self, parser):
        response = Mock()
        response.json.return_value = ["not", "an", "object"]

        with pytest.raises(BunnyDecodeError):
            parser.parse(response, Zone)

    @pytest.mark.unit
    def test_nested_object_in_string_field_raises_decode_error(self, parser):
        """字符串字段收到对象时报解码错误，而不是原样塞进记录"""
        response = Mock()
        response.json.return_value = {"Id": "abc", "Name": {"x": 1}}

        with pytest.raises(BunnyDecodeError) as exc_info:
            parser.parse(response, Zone)

        assert "Zone" in str(exc_info.value)
        assert exc_info.value.response is response

    @pytest.mark.unit
    def test_numeric_string_is_coerced(self, parser):
        response = Mock()
        response.json.return_value = {"Id": "5", "Name": "assets"}

        result = parser.parse(response, Zone)

        assert result.id == 5


class TestStreamResponseParser:
    """测试 StreamResponseParser 解析器"""

    @pytest.mark.unit
    def test_returns_response_unchanged(self):
        parser = StreamResponseParser()
        response = Mock()

        assert parser.is_stream is True
        assert parser.parse(response) is response
        response.close.assert_not_called()


class TestFileWriteResponseParser:
    """测试 FileWriteResponseParser 解析器"""

    @pytest.mark.unit
    def test_writes_chunks_to_file(self, tmp_path):
        # Arrange
        target = tmp_path / "nested" / "dir" / "file.bin"
        parser = FileWriteResponseParser(target, chunk_size=4)
        response = Mock()
        response.iter_content.return_value = [b"abcd", b"", b"ef"]

        # Act
        result = parser.parse(response)

        # Assert
        assert result == os.fspath(target)
        assert target.read_bytes() == b"abcdef"
        response.iter_content.assert_called_once_with(chunk_size=4)

    @pytest.mark.unit
    def test_default_chunk_size(self, tmp_path):
        parser = FileWriteResponseParser(tmp_path / "f.bin")

        assert parser.chunk_size == 8192
        assert parser.is_stream is True

    @pytest.mark.unit
    def test_interrupted_download_removes_partial_file(self, tmp_path):
        """传输中断时删除写了一半的文件并抛出网络异常"""
        # Arrange
        target = tmp_path / "file.bin"
        parser = FileWriteResponseParser(target)

        def broken_stream(chunk_size):
            yield b"partial"
            raise requests.exceptions.ChunkedEncodingError("connection broken")

        response = Mock()
        response.iter_content.side_effect = broken_stream

        # Act
        with pytest.raises(BunnyNetworkError) as exc_info:
            parser.parse(response)

        # Assert
        assert not target.exists()
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ChunkedEncodingError)
