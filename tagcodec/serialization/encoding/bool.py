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
This module implements encoding a boolean value as a JSON `true`/`false`.

>>> se = Serializer.build_json_serializer()
>>> encode_bool(se, True)
>>> se.to_bytes()
b'true'

>>> decode_bool(Deserializer.build_json_deserializer(False))
Ok(False)

Numbers are not booleans, even `0` and `1`:

>>> str(decode_bool(Deserializer.build_json_deserializer(1)).unwrap_err())
'expected bool, found int (at $)'
"""

from tagcodec.serialization import Deserializer, SerializationError, Serializer
from tagcodec.utils.result import Result


def encode_bool(serializer: Serializer, value: bool) -> None:
    assert isinstance(value, bool)
    serializer.write_bool(value)


def decode_bool(deserializer: Deserializer) -> Result[bool, SerializationError]:
    return deserializer.read_bool()
