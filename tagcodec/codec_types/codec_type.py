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

from abc import ABC, abstractmethod
from functools import partial
from typing import Generic, NamedTuple, TypeVar, final

from typing_extensions import Self

from tagcodec.codec_types.utils import TypeAliasMap, TypeToCodecTypeMap, get_aliased_type, get_usable_origin_type
from tagcodec.serialization import Deserializer, Json, SerializationError, Serializer
from tagcodec.serialization.consts import DEFAULT_MAX_INPUT_BYTES
from tagcodec.utils.result import Result, propagate_result

T = TypeVar('T')


class CodecType(ABC, Generic[T]):
    """ This class is used to model a type with a known type signature and how it will be encoded and decoded.

    An instance knows how to check a value of the type, how to write it to a `Serializer` and how to read it back
    from a `Deserializer`. The `serialize`/`deserialize` methods match the `Encoder`/`Decoder` protocols, so they can be
    passed directly to compound encoders, that is how compound codec types delegate to the codec types of their parts.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        codec_types_map: TypeToCodecTypeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _is_hashable: bool

    @final
    @staticmethod
    def from_type(type_: type[T], /, *, type_map: TypeMap) -> CodecType[T]:
        """ Instantiate a CodecType instance from a type signature using the given maps.

        The `codec_types_map` associates concrete types to concrete CodecType classes, while the `alias_map` associates
        types with substitute types to use instead (for example `list` is replaced by `tuple`).
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        codec_type = type_map.codec_types_map[usable_origin]
        aliased_type = get_aliased_type(type_, type_map.alias_map)
        return codec_type._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: type[T], /, *, type_map: TypeMap) -> Self:
        """ Instantiate a CodecType instance from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `CodecType.from_type` with the given `type_map` for its inner types.
        """
        # XXX: a CodecType that is only meant for local use does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a CodecType.TypeMap')

    @final
    def is_hashable(self) -> bool:
        """ Indicates whether the type being abstracted over is expected to be hashable."""
        return self._is_hashable

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeError if the value is not compatible, recursing into compound values."""
        # XXX: subclasses must implement CodecType._check_value, not CodecType.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Write a value according to the signature that was abstracted.

        Serialization includes a shallow check of the value, each inner value is checked when it's serialized.
        """
        # XXX: subclasses must implement CodecType._serialize, not CodecType.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, /) -> Result[T, SerializationError]:
        """ Read a value according to the signature that was abstracted.

        Decoders are expected to always produce valid values, the shallow check made here is only a double check.
        """
        # XXX: subclasses must implement CodecType._deserialize, not CodecType.deserialize
        return self._deserialize(deserializer).inspect(partial(self._check_value, deep=False))

    @final
    def value_to_json(self, value: T, /) -> Json:
        """ Convert a value to an object compatible with `json.dump`."""
        serializer = Serializer.build_json_serializer()
        self.serialize(serializer, value)
        return serializer.finalize()

    @final
    def decode_json(self, json_value: Json, /) -> Result[T, SerializationError]:
        """ Like `json_to_value`, but the failure is returned instead of raised."""
        return self.deserialize(Deserializer.build_json_deserializer(json_value))

    @final
    def json_to_value(self, json_value: Json, /) -> T:
        """ Convert a value that comes out from `json.load` into the value that this class expects.

        Will raise a SerializationError if the given `json_value` is not compatible.
        """
        return self.decode_json(json_value).unwrap_or_raise()

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to convert a value T to a compact UTF-8 JSON document."""
        serializer = Serializer.build_json_serializer()
        self.serialize(serializer, value)
        return serializer.to_bytes()

    @final
    @propagate_result
    def decode_bytes(
        self,
        data: bytes,
        /,
        *,
        max_bytes: int | None = DEFAULT_MAX_INPUT_BYTES,
    ) -> Result[T, SerializationError]:
        """ Like `from_bytes`, but the failure is returned instead of raised."""
        deserializer = Deserializer.build_json_bytes_deserializer(data, max_bytes=max_bytes).unwrap_or_propagate()
        return self.deserialize(deserializer)

    @final
    def from_bytes(self, data: bytes, /, *, max_bytes: int | None = DEFAULT_MAX_INPUT_BYTES) -> T:
        """ Shortcut to parse a value T from an untrusted JSON document.

        Will raise a SerializationError if the document is malformed or the value is not compatible.
        """
        return self.decode_bytes(data, max_bytes=max_bytes).unwrap_or_raise()

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `CodecType.check_value`, should raise a TypeError if the value is not valid.

        Compound values should use `CodecType._check_value` on the inner type(s) instead of `CodecType.check_value` and
        pass the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the given value has been "shallow checked".

        When implementing the serialization with compound encoders, `CodecType.serialize` should be passed as an
        `Encoder` instead of `CodecType._serialize`, that way inner values are checked as well.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, /) -> Result[T, SerializationError]:
        """ Inner implementation of `deserialize`.

        `CodecType.deserialize` should be passed as a `Decoder` to compound decoders, for the same reason as above.
        """
        raise NotImplementedError
