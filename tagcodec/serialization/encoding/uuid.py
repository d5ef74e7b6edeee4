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
This module implements encoding a UUID as a JSON string in its canonical hyphenated form.

Encoding always produces lowercase hex digits, decoding accepts any case but requires the 8-4-4-4-12 layout, other
forms that `uuid.UUID` would take (braces, `urn:uuid:` prefix, no hyphens) are rejected.

>>> from uuid import UUID
>>> se = Serializer.build_json_serializer()
>>> encode_uuid(se, UUID('E621E1F8-C36C-495A-93FC-0C247A3E6E5F'))
>>> se.finalize()
'e621e1f8-c36c-495a-93fc-0c247a3e6e5f'

>>> decode_uuid(Deserializer.build_json_deserializer('E621E1F8-C36C-495A-93FC-0C247A3E6E5F'))
Ok(UUID('e621e1f8-c36c-495a-93fc-0c247a3e6e5f'))

>>> str(decode_uuid(Deserializer.build_json_deserializer('e621e1f8c36c495a93fc0c247a3e6e5f')).unwrap_err())
"'e621e1f8c36c495a93fc0c247a3e6e5f' is not a valid UUID (at $)"
"""

import re
from uuid import UUID

from tagcodec.serialization import Deserializer, PayloadTypeMismatchError, SerializationError, Serializer
from tagcodec.utils.result import Err, Ok, Result, propagate_result

_UUID_REGEX = re.compile(r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}', re.IGNORECASE)


def encode_uuid(serializer: Serializer, value: UUID) -> None:
    assert isinstance(value, UUID)
    serializer.write_str(str(value))


@propagate_result
def decode_uuid(deserializer: Deserializer) -> Result[UUID, SerializationError]:
    raw = deserializer.read_str().unwrap_or_propagate()
    if not _UUID_REGEX.fullmatch(raw):
        return Err(PayloadTypeMismatchError(f'{raw!r} is not a valid UUID', path=deserializer.coding_path()))
    return Ok(UUID(raw))
