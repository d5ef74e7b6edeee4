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

from enum import StrEnum
from typing import TypeVar

from typing_extensions import Self, override

from tagcodec.codec_types.codec_type import CodecType
from tagcodec.codec_types.utils import is_subclass
from tagcodec.serialization import Deserializer, PayloadTypeMismatchError, SerializationError, Serializer
from tagcodec.serialization.encoding.text import decode_text, encode_text
from tagcodec.utils.result import Err, Ok, Result, propagate_result

E = TypeVar('E', bound=StrEnum)


class StrEnumCodecType(CodecType[E]):
    """Codec type for StrEnum subclasses, a member is encoded as its string value."""

    __slots__ = ('enum_class',)

    _is_hashable = True

    def __init__(self, enum_class: type[E]) -> None:
        self.enum_class = enum_class

    @override
    @classmethod
    def _from_type(cls, type_: type[E], /, *, type_map: CodecType.TypeMap) -> Self:
        if not is_subclass(type_, StrEnum):
            raise TypeError('expected StrEnum subclass')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self.enum_class):
            raise TypeError(f'expected {self.enum_class.__name__}')

    @override
    def _serialize(self, serializer: Serializer, value: E, /) -> None:
        encode_text(serializer, value.value)

    @override
    @propagate_result
    def _deserialize(self, deserializer: Deserializer, /) -> Result[E, SerializationError]:
        raw = decode_text(deserializer).unwrap_or_propagate()
        try:
            return Ok(self.enum_class(raw))
        except ValueError:
            return Err(PayloadTypeMismatchError(
                f'{raw!r} is not a valid {self.enum_class.__name__}',
                path=deserializer.coding_path(),
            ))
