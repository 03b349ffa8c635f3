"""
测试 bunny_sdk.exceptions 模块

测试异常类的属性、继承关系以及错误响应的分类
"""

import pytest
from unittest.mock import Mock
from bunny_sdk.exceptions import (
    BunnyAPIError,
    BunnyAuthError,
    BunnyDecodeError,
    BunnyError,
    BunnyNetworkError,
    BunnyNotFoundError,
    BunnyRateLimitError,
    BunnyTimeoutError,
    classify_error,
    parse_error_body,
)


class TestBunnyAPIError:
    """测试 BunnyAPIError 异常类"""

    @pytest.mark.unit
    def test_message_with_field(self):
        """带 field 时格式中包含字段名"""
        error = BunnyAPIError(400, "invalid name", error_key="validation", field="Name", prefix="bunny storage")

        assert str(error) == "bunny storage: invalid name (status: 400, field: Name)"

    @pytest.mark.unit
    def test_message_with_error_key(self):
        """只有 error_key 时格式中包含错误标识"""
        error = BunnyAPIError(400, "bad request", error_key="validation")

        assert str(error) == "bunny: bad request (status: 400, key: validation)"

    @pytest.mark.unit
    def test_message_without_details(self):
        error = BunnyAPIError(500, "boom")

        assert str(error) == "bunny: boom (status: 500)"
        assert error.error_key == ""
        assert error.field == ""
        assert error.response is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "status,not_found,auth,limited,retryable",
        [
            (404, True, False, False, False),
            (401, False, True, False, False),
            (403, False, True, False, False),
            (429, False, False, True, True),
            (503, False, False, False, True),
            (400, False, False, False, False),
        ],
    )
    def test_status_predicates(self, status, not_found, auth, limited, retryable):
        """状态码判断属性"""
        error = BunnyAPIError(status, "x")

        assert error.is_not_found is not_found
        assert error.is_auth_error is auth
        assert error.is_rate_limited is limited
        assert error.is_retryable is retryable

    @pytest.mark.unit
    def test_hierarchy(self):
        assert issubclass(BunnyNotFoundError, BunnyAPIError)
        assert issubclass(BunnyAuthError, BunnyAPIError)
        assert issubclass(BunnyRateLimitError, BunnyAPIError)
        assert issubclass(BunnyTimeoutError, BunnyNetworkError)
        assert issubclass(BunnyAPIError, BunnyError)
        assert issubclass(BunnyDecodeError, BunnyError)


class TestParseErrorBody:
    """测试错误信封解析"""

    @pytest.mark.unit
    def test_full_envelope(self):
        body = b'{"Message": "zone not found", "ErrorKey": "notfound", "Field": "Id"}'

        assert parse_error_body(body) == {"message": "zone not found", "error_key": "notfound", "field": "Id"}

    @pytest.mark.unit
    def test_missing_keys_become_empty(self):
        assert parse_error_body('{"Message": "x"}') == {"message": "x", "error_key": "", "field": ""}

    @pytest.mark.unit
    @pytest.mark.parametrize("body", [None, b"", b"not json", b"[1, 2]"])
    def test_invalid_body_returns_none(self, body):
        assert parse_error_body(body) is None


class TestClassifyError:
    """测试 classify_error 函数"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "status,error_class",
        [
            (404, BunnyNotFoundError),
            (401, BunnyAuthError),
            (403, BunnyAuthError),
            (429, BunnyRateLimitError),
            (400, BunnyAPIError),
            (500, BunnyAPIError),
        ],
    )
    def test_type_depends_on_status_only(self, status, error_class):
        error = classify_error(status, b'{"Message": "x"}')

        assert type(error) is error_class
        assert error.status_code == status

    @pytest.mark.unit
    def test_uses_envelope_message(self):
        error = classify_error(404, b'{"Message": "not found"}', "bunny stream")

        assert error.message == "not found"
        assert error.prefix == "bunny stream"
        assert str(error) == "bunny stream: not found (status: 404)"

    @pytest.mark.unit
    def test_falls_back_to_raw_text(self):
        """非 JSON 响应体作为 message 原样保留"""
        error = classify_error(502, b"Bad Gateway")

        assert error.message == "Bad Gateway"
        assert error.error_key == ""

    @pytest.mark.unit
    def test_empty_message_falls_back_to_raw_text(self):
        error = classify_error(400, b'{"Message": "", "ErrorKey": "k"}')

        assert error.message == '{"Message": "", "ErrorKey": "k"}'
        assert error.error_key == ""

    @pytest.mark.unit
    def test_keeps_response(self):
        response = Mock()

        error = classify_error(500, b"", response=response)

        assert error.response is response
        assert error.message == ""
