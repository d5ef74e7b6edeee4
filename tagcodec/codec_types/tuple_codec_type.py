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

from collections.abc import Iterable
from typing import get_args, get_origin

from typing_extensions import Self, override

from tagcodec.codec_types.codec_type import CodecType
from tagcodec.serialization import Deserializer, SerializationError, Serializer
from tagcodec.utils.result import Result


# XXX: we can't usefully describe the tuple type
class TupleCodecType(CodecType[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    Both are encoded as a JSON array. The fixed size form is what the multi-value packer produces: one element per
    position, decoded in the declared order.
    """

    __slots__ = ('_is_hashable', '_varsize', '_args', '_strict')

    _varsize: bool
    _args: tuple[CodecType, ...]
    _strict: bool

    def __init__(self, args: CodecType | Iterable[CodecType], *, strict: bool = False) -> None:
        if isinstance(args, CodecType):
            self._varsize = True
            self._args = (args,)
            self._is_hashable = args.is_hashable()
        else:
            self._varsize = False
            self._args = tuple(args)
            for arg in self._args:
                assert isinstance(arg, CodecType)
            self._is_hashable = all(arg_codec_type.is_hashable() for arg_codec_type in self._args)
        # only relevant to the fixed size form, when set trailing elements are rejected
        self._strict = strict

    @override
    @classmethod
    def _from_type(cls, type_: type[tuple], /, *, type_map: CodecType.TypeMap) -> Self:
        origin_type: type = get_origin(type_) or type_
        if not issubclass(origin_type, tuple):
            raise TypeError('expected tuple-like type')
        args = list(get_args(type_))
        if not args:
            raise TypeError('expected tuple[<args...>]')
        if args[-1] == Ellipsis:
            if len(args) != 2:
                raise TypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(CodecType.from_type(arg, type_map=type_map))
        else:
            return cls(CodecType.from_type(arg, type_map=type_map) for arg in args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, (tuple, list)):
            raise TypeError('expected tuple-like')
        if not self._varsize and len(value) != len(self._args):
            raise TypeError('wrong tuple size')
        if deep:
            if self._varsize:
                arg_codec_type, = self._args
                for i in value:
                    arg_codec_type._check_value(i, deep=True)
            else:
                for i, arg_codec_type in zip(value, self._args):
                    arg_codec_type._check_value(i, deep=True)

    @override
    def _serialize(self, serializer: Serializer, value: tuple, /) -> None:
        from tagcodec.serialization.compound_encoding.collection import encode_collection
        from tagcodec.serialization.compound_encoding.tuple import encode_tuple
        if self._varsize:
            assert len(self._args) == 1
            encode_collection(serializer, value, self._args[0].serialize)
        else:
            encode_tuple(serializer, tuple(value), tuple(i.serialize for i in self._args))

    @override
    def _deserialize(self, deserializer: Deserializer, /) -> Result[tuple, SerializationError]:
        from tagcodec.serialization.compound_encoding.collection import decode_collection
        from tagcodec.serialization.compound_encoding.tuple import decode_tuple
        if self._varsize:
            assert len(self._args) == 1
            return decode_collection(deserializer, self._args[0].deserialize, tuple)
        else:
            return decode_tuple(deserializer, tuple(i.deserialize for i in self._args), strict=self._strict)
