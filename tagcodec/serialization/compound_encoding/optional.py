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
An optional value is encoded as JSON `null` when absent, or as the inner encoding when present.

>>> from tagcodec.serialization.encoding.text import decode_text, encode_text
>>> se = Serializer.build_json_serializer()
>>> encode_optional(se, None, encode_text)
>>> se.to_bytes()
b'null'

>>> decode_optional(Deserializer.build_json_deserializer('foobar'), decode_text)
Ok('foobar')
>>> decode_optional(Deserializer.build_json_deserializer(None), decode_text)
Ok(None)

XXX: an optional of an optional can't be told apart on the wire, `None` and `Some(None)` are both `null`.
"""

from typing import Optional, TypeVar

from tagcodec.serialization import Deserializer, SerializationError, Serializer
from tagcodec.utils.result import Result

from . import Decoder, Encoder

T = TypeVar('T')


def encode_optional(serializer: Serializer, value: Optional[T], encoder: Encoder[T]) -> None:
    if value is None:
        serializer.write_null()
    else:
        encoder(serializer, value)


def decode_optional(deserializer: Deserializer, decoder: Decoder[T]) -> Result[Optional[T], SerializationError]:
    if deserializer.is_null():
        return deserializer.read_null()
    return decoder(deserializer)
