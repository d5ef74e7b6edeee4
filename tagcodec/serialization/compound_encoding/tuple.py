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

r"""
In Python a tuple type can be used in annotations in 2 different ways:

1. `tuple[A, B, C]`: known fixed length and heterogeneous types
2. `tuple[X, ...]`: variable length and homogeneous type

This module only implements encoding of the first case, the second case can be encoded using the collection encoder.

The values are packed into a single JSON array, one element per position, each encoded with its own encoder. There are
no names or tags inside the array: the position is the only thing that associates an element with its type, so
decoding must use the decoders in the same order the encoders were used.

>>> from uuid import UUID
>>> from tagcodec.serialization.encoding.bool import decode_bool, encode_bool
>>> from tagcodec.serialization.encoding.text import decode_text, encode_text
>>> from tagcodec.serialization.encoding.uuid import decode_uuid, encode_uuid
>>> se = Serializer.build_json_serializer()
>>> values = ('foobar', False, UUID(int=1))
>>> encode_tuple(se, values, (encode_text, encode_bool, encode_uuid))
>>> se.to_bytes()
b'["foobar",false,"00000000-0000-0000-0000-000000000001"]'

>>> de = Deserializer.build_json_deserializer(['foobar', False, '00000000-0000-0000-0000-000000000001'])
>>> decode_tuple(de, (decode_text, decode_bool, decode_uuid))
Ok(('foobar', False, UUID('00000000-0000-0000-0000-000000000001')))

A missing position is an error, extra trailing elements are left unread unless `strict=True`:

>>> de = Deserializer.build_json_deserializer(['foobar'])
>>> type(decode_tuple(de, (decode_text, decode_bool)).unwrap_err()).__name__
'TruncatedSequenceError'
>>> de = Deserializer.build_json_deserializer(['foobar', True, 'extra'])
>>> decode_tuple(de, (decode_text, decode_bool))
Ok(('foobar', True))
>>> de = Deserializer.build_json_deserializer(['foobar', True, 'extra'])
>>> type(decode_tuple(de, (decode_text, decode_bool), strict=True).unwrap_err()).__name__
'TrailingDataError'

The `encode_values`/`decode_values` variants do the same thing for the member of an object under a given key.
"""

from typing import Any

from typing_extensions import TypeVarTuple, Unpack

from tagcodec.serialization import Deserializer, ObjectDeserializer, ObjectSerializer, SerializationError, Serializer
from tagcodec.utils.result import Ok, Result, propagate_result

from . import Decoder, Encoder

Ts = TypeVarTuple('Ts')


def encode_tuple(serializer: Serializer, values: tuple[Unpack[Ts]], encoders: tuple[Encoder[Any], ...]) -> None:
    assert len(values) == len(encoders)
    array = serializer.open_array()
    # mypy can't track tuple element-wise mapping yet, safe due to length check above
    for value, encoder in zip(values, encoders):  # type: ignore
        array.encode(value, encoder)


@propagate_result
def decode_tuple(
    deserializer: Deserializer,
    decoders: tuple[Decoder[Any], ...],
    *,
    strict: bool = False,
) -> Result[tuple[Unpack[Ts]], SerializationError]:
    array = deserializer.open_array().unwrap_or_propagate()
    values = tuple(array.decode_next(decoder).unwrap_or_propagate() for decoder in decoders)
    if strict:
        array.finalize().unwrap_or_propagate()
    return Ok(values)


def encode_values(
    container: ObjectSerializer,
    key: str,
    values: tuple[Unpack[Ts]],
    encoders: tuple[Encoder[Any], ...],
) -> None:
    """Pack the values into one array under `key`, in the given order."""
    encode_tuple(container.key(key), values, encoders)


def decode_values(
    container: ObjectDeserializer,
    key: str,
    decoders: tuple[Decoder[Any], ...],
    *,
    strict: bool = False,
) -> Result[tuple[Unpack[Ts]], SerializationError]:
    """Unpack the array under `key` into a tuple, one decoder per position."""
    return container.key(key).and_then(lambda deserializer: decode_tuple(deserializer, decoders, strict=strict))
