# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
This codec type is used for plain records: each dataclass field is encoded as an object member named after the field,
using the codec type of the field's annotation.

>>> from dataclasses import dataclass
>>> @dataclass(frozen=True)
... class Item:
...     name: str
>>> item_codec_type = make_dataclass_codec_type(Item)
>>> item_codec_type.to_bytes(Item(name='Request 1'))
b'{"name":"Request 1"}'
>>> item_codec_type.json_to_value({'name': 'Request 1'})
Item(name='Request 1')

Members that are not fields are ignored, a missing field is an error:

>>> item_codec_type.json_to_value({'name': 'Request 1', 'other': 0})
Item(name='Request 1')
>>> str(item_codec_type.decode_json({}).unwrap_err())
"missing key 'name' (at $)"
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from tagcodec.codec_types.codec_type import CodecType
from tagcodec.serialization import Deserializer, PayloadTypeMismatchError, SerializationError, Serializer
from tagcodec.utils.result import Err, Ok, Result, propagate_result

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

    from tagcodec.codec_types import TypeToCodecTypeMap

D = TypeVar('D', bound='DataclassInstance')


def make_dataclass_codec_type(
    class_: type[D],
    *,
    extra_codec_types_map: TypeToCodecTypeMap | None = None,
) -> DataclassCodecType[D]:
    """ Helper function to build a CodecType for the given dataclass.
    """
    from tagcodec.codec_types import DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_CODEC_TYPE_MAP
    extras = extra_codec_types_map or {}
    codec_types_map = {**DEFAULT_TYPE_TO_CODEC_TYPE_MAP, **extras}
    type_map = CodecType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, codec_types_map)
    return DataclassCodecType._from_type(class_, type_map=type_map)


class DataclassCodecType(CodecType[D]):
    __slots__ = ('_fields', '_class')
    _is_hashable = False  # it might be possible to calculate _is_hashable, but we don't need it
    _fields: dict[str, CodecType]
    _class: type[D]

    def __init__(self, fields_: dict[str, CodecType], class_: type[D]):
        self._fields = fields_
        self._class = class_

    @override
    @classmethod
    def _from_type(cls, type_: type[D], /, *, type_map: CodecType.TypeMap) -> Self:
        if not is_dataclass(type_):
            raise TypeError('expected a dataclass')
        # XXX: resolves string annotations, which is what fields have when `from __future__ import annotations` is used
        hints = get_type_hints(type_)
        values: dict[str, CodecType] = {}
        for field in fields(type_):
            if not field.init:
                continue
            values[field.name] = CodecType.from_type(hints[field.name], type_map=type_map)
        return cls(values, type_)

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise TypeError(f'expected {self._class.__name__} instance')
        if deep:
            for field_name, field_codec_type in self._fields.items():
                field_codec_type._check_value(getattr(value, field_name), deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: D, /) -> None:
        container = serializer.open_object()
        for field_name, field_codec_type in self._fields.items():
            container.encode(field_name, getattr(value, field_name), field_codec_type.serialize)

    @override
    @propagate_result
    def _deserialize(self, deserializer: Deserializer, /) -> Result[D, SerializationError]:
        container = deserializer.open_object().unwrap_or_propagate()
        kwargs: dict[str, Any] = {}
        for field_name, field_codec_type in self._fields.items():
            kwargs[field_name] = container.decode(field_name, field_codec_type.deserialize).unwrap_or_propagate()
        try:
            return Ok(self._class(**kwargs))
        except (TypeError, ValueError) as e:
            return Err(PayloadTypeMismatchError(
                f'invalid {self._class.__name__}: {e}',
                path=deserializer.coding_path(),
            ), cause=e)
