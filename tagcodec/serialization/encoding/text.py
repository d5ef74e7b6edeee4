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
This module implements encoding a text value as a JSON string.

The JSON document is UTF-8 when turned into bytes, so any unicode text is accepted:

>>> se = Serializer.build_json_serializer()
>>> encode_text(se, 'Request 😎')
>>> se.to_bytes().decode('utf-8')
'"Request 😎"'

>>> decode_text(Deserializer.build_json_deserializer('π'))
Ok('π')
"""

from tagcodec.serialization import Deserializer, SerializationError, Serializer
from tagcodec.utils.result import Result


def encode_text(serializer: Serializer, value: str) -> None:
    assert isinstance(value, str)
    serializer.write_str(value)


def decode_text(deserializer: Deserializer) -> Result[str, SerializationError]:
    return deserializer.read_str()
