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

from dataclasses import dataclass
from enum import StrEnum
from types import UnionType
from typing import TypeVar, Union
from uuid import UUID

from tagcodec.codec_types.bool_codec_type import BoolCodecType
from tagcodec.codec_types.codec_type import CodecType
from tagcodec.codec_types.dataclass_codec_type import DataclassCodecType, make_dataclass_codec_type
from tagcodec.codec_types.enum_codec_type import StrEnumCodecType
from tagcodec.codec_types.optional_codec_type import OptionalCodecType
from tagcodec.codec_types.str_codec_type import StrCodecType
from tagcodec.codec_types.tuple_codec_type import TupleCodecType
from tagcodec.codec_types.url_codec_type import URLCodecType
from tagcodec.codec_types.utils import TypeAliasMap, TypeToCodecTypeMap
from tagcodec.codec_types.uuid_codec_type import UUIDCodecType
from tagcodec.types import URL

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_CODEC_TYPE_MAP',
    'BoolCodecType',
    'CodecType',
    'DataclassCodecType',
    'OptionalCodecType',
    'StrCodecType',
    'StrEnumCodecType',
    'TupleCodecType',
    'TypeAliasMap',
    'TypeToCodecTypeMap',
    'URLCodecType',
    'UUIDCodecType',
    'make_codec_type',
    'make_dataclass_codec_type',
]

T = TypeVar('T')

# the mutable `list` is decoded as the immutable `tuple`, a `list[T]` annotation becomes `tuple[T, ...]`
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    # XXX: technically types.UnionType is not a type, so mypy complains, but for our purposes it is a type
    Union: UnionType,
    list: tuple,
}

# Mapping between types and CodecType classes.
DEFAULT_TYPE_TO_CODEC_TYPE_MAP: TypeToCodecTypeMap = {
    # builtin types:
    bool: BoolCodecType,
    str: StrCodecType,
    tuple: TupleCodecType,
    # other Python types:
    UnionType: OptionalCodecType,
    UUID: UUIDCodecType,
    StrEnum: StrEnumCodecType,
    dataclass: DataclassCodecType,
    # tagcodec types:
    URL: URLCodecType,
}

DEFAULT_TYPE_MAP = CodecType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_CODEC_TYPE_MAP)


def make_codec_type(type_: type[T], /) -> CodecType[T]:
    """ Like CodecType.from_type, but with the default maps.

    If you need to customize the mapping use `CodecType.from_type` instead.
    """
    return CodecType.from_type(type_, type_map=DEFAULT_TYPE_MAP)
