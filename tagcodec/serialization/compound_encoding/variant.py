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
A variant of a closed sum type is encoded as an object with exactly one member: the member's key is the variant's
discriminator and the member's value is the variant's payload. There is no separate type tag field, the presence of
the key is the tag.

Layout, depending on how many values the variant carries:

    {"<key>": true}             no payload, the placeholder is never inspected when decoding
    {"<key>": <value>}          one payload value, using the value's own encoder (may be `null`)
    {"<key>": [<v1>, <v2>]}     several payload values, packed in order with `encode_values`

>>> from enum import StrEnum
>>> from tagcodec.serialization.encoding.text import encode_text
>>> class Key(StrEnum):
...     EMPTY = 'empty'
...     EDITING = 'editing'
>>> se = Serializer.build_json_serializer()
>>> encode_unit_variant(se, Key.EMPTY)
>>> se.to_bytes()
b'{"empty":true}'
>>> se = Serializer.build_json_serializer()
>>> encode_variant(se, Key.EDITING, 'body', encode_text)
>>> se.to_bytes()
b'{"editing":"body"}'

Decoding first selects the discriminator, the payload is decoded by the caller from the returned container:

>>> container, key = decode_variant_key(Deserializer.build_json_deserializer({'editing': 'body'}), Key).unwrap()
>>> key
<Key.EDITING: 'editing'>
>>> container.decode(key, lambda de: de.read_str())
Ok('body')

Zero or several keys, or a single unknown key, fail with `AmbiguousOrMissingDiscriminatorError` or
`UnknownDiscriminatorError` respectively, before any payload is read.
"""

from enum import StrEnum
from typing import Any, TypeVar

from structlog import get_logger
from typing_extensions import TypeVarTuple, Unpack

from tagcodec.serialization import (
    AmbiguousOrMissingDiscriminatorError,
    Deserializer,
    ObjectDeserializer,
    SerializationError,
    Serializer,
    UnknownDiscriminatorError,
)
from tagcodec.serialization.consts import UNIT_VARIANT_PLACEHOLDER
from tagcodec.utils.result import Err, Ok, Result, propagate_result

from . import Encoder
from .tuple import encode_values

logger = get_logger()

T = TypeVar('T')
K = TypeVar('K', bound=StrEnum)
Ts = TypeVarTuple('Ts')


def encode_unit_variant(serializer: Serializer, key: StrEnum) -> None:
    """Encode a variant without payload."""
    container = serializer.open_object()
    container.key(key).write_bool(UNIT_VARIANT_PLACEHOLDER)


def encode_variant(serializer: Serializer, key: StrEnum, value: T, encoder: Encoder[T]) -> None:
    """Encode a variant with a single payload value."""
    container = serializer.open_object()
    container.encode(key, value, encoder)


def encode_multi_value_variant(
    serializer: Serializer,
    key: StrEnum,
    values: tuple[Unpack[Ts]],
    encoders: tuple[Encoder[Any], ...],
) -> None:
    """Encode a variant with several payload values."""
    container = serializer.open_object()
    encode_values(container, key, values, encoders)


@propagate_result
def decode_variant_key(
    deserializer: Deserializer,
    keys: type[K],
) -> Result[tuple[ObjectDeserializer, K], SerializationError]:
    """ Select the discriminator of an encoded variant.

    Exactly one key must be present and it must be a member of `keys`, this is checked before anything else is read.
    """
    container = deserializer.open_object().unwrap_or_propagate()
    present = container.keys()
    path = container.coding_path()
    if len(present) != 1:
        logger.debug('variant discriminator rejected', keys=sorted(present), path=path)
        expected = ', '.join(repr(str(k)) for k in keys)
        found = ', '.join(repr(k) for k in sorted(present)) or 'none'
        return Err(AmbiguousOrMissingDiscriminatorError(
            f'expected exactly one of {expected}, found {found}',
            path=path,
        ))
    raw_key, = present
    try:
        key = keys(raw_key)
    except ValueError:
        logger.debug('variant discriminator rejected', keys=[raw_key], path=path)
        return Err(UnknownDiscriminatorError(f'unknown {keys.__name__} {raw_key!r}', path=path))
    return Ok((container, key))


def skip_unit_payload(container: ObjectDeserializer, key: StrEnum) -> Result[None, SerializationError]:
    """Check that the placeholder of a variant without payload is there, its value is ignored."""
    return container.key(key).and_then(lambda deserializer: deserializer.read_any()).map(lambda _: None)
