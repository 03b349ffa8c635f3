"""
数据模型基类模块

所有资源记录都是 pydantic 模型，继承自 Model：
- JSON 键名由 alias_generator 推导：Model 为 PascalCase（date_modified -> DateModified），
  CamelModel 为 camelCase（date_modified -> dateModified），不规则的键名用 Field(alias=...) 指定
- 时间字段声明为 BunnyTime，走灵活时间戳编解码
- Enum 字段遇到未知取值时保留原始值
- 解码时忽略未知键，编码时省略值为 None 的字段
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, get_args

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel, to_pascal

from bunny_sdk.timeutil import format_bunny_time, parse_bunny_time


def _parse_time(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    return parse_bunny_time(value)


# 可为空的时间戳："" 与 "null" 解码为 None，编码为秒级 RFC 3339
BunnyTime = Annotated[
    datetime | None,
    BeforeValidator(_parse_time),
    PlainSerializer(format_bunny_time, when_used="unless-none"),
]


def _enum_type(annotation: Any) -> type[Enum] | None:
    """在注解（含 X | None、list[X]）中查找 Enum 类型"""
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return annotation
    for arg in get_args(annotation):
        found = _enum_type(arg)
        if found is not None:
            return found
    return None


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


def _enum_or_raw(enum_type: type[Enum], value: Any) -> Any:
    if isinstance(value, list):
        return [_enum_or_raw(enum_type, item) for item in value]
    try:
        return enum_type(value)
    except ValueError:
        return value


class Model(BaseModel):
    """资源记录基类（PascalCase 键名）"""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _keep_unknown_enum_values(cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            enum_type = _enum_type(cls.model_fields[info.field_name].annotation)
            if enum_type is None:
                raise
            if not (_is_scalar(value) or (isinstance(value, list) and all(_is_scalar(item) for item in value))):
                raise
            return _enum_or_raw(enum_type, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """
        从 JSON 对象构造记录

        异常:
            pydantic.ValidationError: 数据的形状与字段类型不符
        """
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """编码为 JSON 对象，值为 None 的字段被省略"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CamelModel(Model):
    """使用 camelCase 键名的资源记录基类"""

    model_config = ConfigDict(alias_generator=to_camel)


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode_value(tp: Any, value: Any) -> Any:
    """
    按类型将 JSON 值解码为 Python 对象（Model、list[Model]、dict 等）

    异常:
        pydantic.ValidationError: 值的形状与类型不符
    """
    if value is None or tp is Any:
        return value
    return _adapter(tp).validate_python(value)


def encode_value(value: Any) -> Any:
    """将请求体（Model、dict、list 或标量）编码为可 JSON 序列化的值"""
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_bunny_time(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(item) for item in value]
    if isinstance(value, Mapping):
        return {key: encode_value(item) for key, item in value.items()}
    return value
