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

from __future__ import annotations

from types import NoneType
from typing import TypeVar, get_args

from typing_extensions import Self, override

from tagcodec.codec_types.codec_type import CodecType
from tagcodec.serialization import Deserializer, SerializationError, Serializer
from tagcodec.serialization.compound_encoding.optional import decode_optional, encode_optional
from tagcodec.utils.result import Result

V = TypeVar('V')


class OptionalCodecType(CodecType[V | None]):
    """ Represents a codec type that is either `V` or `None`.
    """

    __slots__ = ('_is_hashable', '_value')

    _value: CodecType[V]

    def __init__(self, codec_type: CodecType[V]) -> None:
        self._value = codec_type
        self._is_hashable = codec_type.is_hashable()

    @override
    @classmethod
    def _from_type(cls, type_: type[V | None], /, *, type_map: CodecType.TypeMap) -> Self:
        args = get_args(type_)
        if len(args) != 2 or NoneType not in args:
            raise TypeError('type must be either `None | T` or `T | None`')
        not_none_type, = tuple(set(args) - {NoneType})  # get the type that is not None
        return cls(CodecType.from_type(not_none_type, type_map=type_map))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: V | None, /) -> None:
        encode_optional(serializer, value, self._value.serialize)

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[V | None, SerializationError]:
        return decode_optional(deserializer, self._value.deserialize)
