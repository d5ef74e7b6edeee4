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
A collection is basically any value that has a known size and is iterable, all elements share the same encoder.

Layout: [value_0, ..., value_N]

>>> from tagcodec.serialization.encoding.text import decode_text, encode_text
>>> se = Serializer.build_json_serializer()
>>> encode_collection(se, ['connected', 'disconnected'], encode_text)
>>> se.to_bytes()
b'["connected","disconnected"]'

When decoding, the builder can be any compatible collection, it only matters that the collection can be initialized
with an `Iterable[T]`.

>>> de = Deserializer.build_json_deserializer(['connected', 'disconnected'])
>>> decode_collection(de, decode_text, tuple)
Ok(('connected', 'disconnected'))

>>> de = Deserializer.build_json_deserializer(['connected', 1])
>>> str(decode_collection(de, decode_text, tuple).unwrap_err())
'expected str, found int (at $[1])'
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from tagcodec.serialization import Deserializer, SerializationError, Serializer
from tagcodec.utils.result import Ok, Result, propagate_result

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    array = serializer.open_array()
    for value in values:
        array.encode(value, encoder)


@propagate_result
def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> Result[R, SerializationError]:
    array = deserializer.open_array().unwrap_or_propagate()
    values = [array.decode_next(decoder).unwrap_or_propagate() for _ in range(array.remaining())]
    return Ok(builder(values))
