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
This module implements encoding an absolute URL as a JSON string, the text is kept exactly as given.

>>> se = Serializer.build_json_serializer()
>>> encode_url(se, URL('wss://stocks.websocket.demo.cleora.app'))
>>> se.finalize()
'wss://stocks.websocket.demo.cleora.app'

>>> decode_url(Deserializer.build_json_deserializer('https://hathor.network/'))
Ok(URL('https://hathor.network/'))

>>> str(decode_url(Deserializer.build_json_deserializer('/relative/path')).unwrap_err())
"'/relative/path' is not an absolute URL (at $)"
"""

from tagcodec.serialization import Deserializer, PayloadTypeMismatchError, SerializationError, Serializer
from tagcodec.types import URL
from tagcodec.utils.result import Err, Ok, Result, propagate_result


def encode_url(serializer: Serializer, value: URL) -> None:
    assert isinstance(value, URL)
    serializer.write_str(value)


@propagate_result
def decode_url(deserializer: Deserializer) -> Result[URL, SerializationError]:
    raw = deserializer.read_str().unwrap_or_propagate()
    try:
        url = URL(raw)
    except ValueError:
        return Err(PayloadTypeMismatchError(f'{raw!r} is not an absolute URL', path=deserializer.coding_path()))
    return Ok(url)
