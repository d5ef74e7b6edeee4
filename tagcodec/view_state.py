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
The state of a request-editor view, modelled as a closed sum type, and its codec.

`ViewState` is exactly one of four variants, each carrying a different payload:

- `Empty()`: nothing;
- `Editing(subview)`: one `EditSubview`;
- `ExchangeHistory(connection)`: one optional `Connection`;
- `Listing(selected_id, expanded_items)`: a `UUID` and a sequence of `Item`.

On the wire a variant is an object with a single member, keyed by the variant's discriminator:

>>> codec = ViewStateCodecType()
>>> codec.to_bytes(Empty())
b'{"empty":true}'
>>> codec.to_bytes(Editing(EditSubview.BODY))
b'{"editing":"body"}'
>>> codec.to_bytes(ExchangeHistory(None))
b'{"exchangeHistory":null}'
>>> codec.from_bytes(b'{"editing":"body"}')
Editing(subview=<EditSubview.BODY: 'body'>)
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, TypeAlias, get_args
from uuid import UUID

from typing_extensions import Self, assert_never, override

from tagcodec.codec_types import DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_CODEC_TYPE_MAP, CodecType, make_codec_type
from tagcodec.conf.settings import CodecSettings
from tagcodec.serialization import Deserializer, SerializationError, Serializer
from tagcodec.serialization.compound_encoding.tuple import decode_values
from tagcodec.serialization.compound_encoding.variant import (
    decode_variant_key,
    encode_multi_value_variant,
    encode_unit_variant,
    encode_variant,
    skip_unit_payload,
)
from tagcodec.types import URL
from tagcodec.utils.result import Ok, Result, propagate_result


class EditSubview(StrEnum):
    HEADERS = 'headers'
    QUERY = 'query'
    BODY = 'body'


@dataclass(frozen=True, slots=True)
class Item:
    name: str


@dataclass(frozen=True, slots=True)
class Connection:
    url: URL
    messages: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # accept any sequence, but keep it immutable
        object.__setattr__(self, 'messages', tuple(self.messages))


class ViewStateKey(StrEnum):
    """Discriminator keys, one per variant."""
    EMPTY = 'empty'
    EDITING = 'editing'
    EXCHANGE_HISTORY = 'exchangeHistory'
    LIST = 'list'


@dataclass(frozen=True, slots=True)
class Empty:
    key: ClassVar[ViewStateKey] = ViewStateKey.EMPTY


@dataclass(frozen=True, slots=True)
class Editing:
    key: ClassVar[ViewStateKey] = ViewStateKey.EDITING
    subview: EditSubview


@dataclass(frozen=True, slots=True)
class ExchangeHistory:
    key: ClassVar[ViewStateKey] = ViewStateKey.EXCHANGE_HISTORY
    connection: Connection | None


@dataclass(frozen=True, slots=True)
class Listing:
    key: ClassVar[ViewStateKey] = ViewStateKey.LIST
    selected_id: UUID
    expanded_items: tuple[Item, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'expanded_items', tuple(self.expanded_items))


ViewState: TypeAlias = Empty | Editing | ExchangeHistory | Listing

VIEW_STATE_VARIANTS: tuple[type, ...] = get_args(ViewState)


class ViewStateCodecType(CodecType[ViewState]):
    """ Codec type for `ViewState`, the dispatch over variants is written out by hand, one case per variant.

    Payloads are delegated to the codec types of their own types, a variant with two values is packed into an array.
    With `strict=True` trailing elements after the packed values are rejected instead of ignored.
    """

    __slots__ = ('_subview', '_connection', '_selected_id', '_expanded_items', '_strict')

    _is_hashable = True

    _subview: CodecType[EditSubview]
    _connection: CodecType[Connection | None]
    _selected_id: CodecType[UUID]
    _expanded_items: CodecType[tuple[Item, ...]]
    _strict: bool

    def __init__(self, *, strict: bool = False) -> None:
        self._subview = make_codec_type(EditSubview)
        self._connection = make_codec_type(Connection | None)  # type: ignore[arg-type]
        self._selected_id = make_codec_type(UUID)
        self._expanded_items = make_codec_type(tuple[Item, ...])
        self._strict = strict

    @classmethod
    def from_settings(cls, settings: CodecSettings) -> Self:
        return cls(strict=settings.STRICT_SEQUENCE_LENGTH)

    @override
    @classmethod
    def _from_type(cls, type_: type[ViewState], /, *, type_map: CodecType.TypeMap) -> Self:
        if frozenset(get_args(type_)) != frozenset(VIEW_STATE_VARIANTS):
            raise TypeError('expected the ViewState union')
        return cls()

    @override
    def _check_value(self, value: ViewState, /, *, deep: bool) -> None:
        if not isinstance(value, VIEW_STATE_VARIANTS):
            raise TypeError('expected a ViewState variant')
        if not deep:
            return
        match value:
            case Empty():
                pass
            case Editing(subview=subview):
                self._subview.check_value(subview)
            case ExchangeHistory(connection=connection):
                self._connection.check_value(connection)
            case Listing(selected_id=selected_id, expanded_items=expanded_items):
                self._selected_id.check_value(selected_id)
                self._expanded_items.check_value(expanded_items)
            case _:
                assert_never(value)

    @override
    def _serialize(self, serializer: Serializer, value: ViewState, /) -> None:
        match value:
            case Empty():
                encode_unit_variant(serializer, ViewStateKey.EMPTY)
            case Editing(subview=subview):
                encode_variant(serializer, ViewStateKey.EDITING, subview, self._subview.serialize)
            case ExchangeHistory(connection=connection):
                encode_variant(serializer, ViewStateKey.EXCHANGE_HISTORY, connection, self._connection.serialize)
            case Listing(selected_id=selected_id, expanded_items=expanded_items):
                encode_multi_value_variant(
                    serializer,
                    ViewStateKey.LIST,
                    (selected_id, expanded_items),
                    (self._selected_id.serialize, self._expanded_items.serialize),
                )
            case _:
                assert_never(value)

    @override
    @propagate_result
    def _deserialize(self, deserializer: Deserializer, /) -> Result[ViewState, SerializationError]:
        container, key = decode_variant_key(deserializer, ViewStateKey).unwrap_or_propagate()
        match key:
            case ViewStateKey.EMPTY:
                skip_unit_payload(container, key).unwrap_or_propagate()
                return Ok(Empty())
            case ViewStateKey.EDITING:
                return container.decode(key, self._subview.deserialize).map(Editing)
            case ViewStateKey.EXCHANGE_HISTORY:
                return container.decode(key, self._connection.deserialize).map(ExchangeHistory)
            case ViewStateKey.LIST:
                selected_id, expanded_items = decode_values(
                    container,
                    key,
                    (self._selected_id.deserialize, self._expanded_items.deserialize),
                    strict=self._strict,
                ).unwrap_or_propagate()
                return Ok(Listing(selected_id, expanded_items))
            case _:
                assert_never(key)


VIEW_STATE_TYPE_TO_CODEC_TYPE_MAP: dict[Any, type[CodecType]] = {
    **DEFAULT_TYPE_TO_CODEC_TYPE_MAP,
    frozenset(VIEW_STATE_VARIANTS): ViewStateCodecType,
}

# use this to build codec types for records that have a `ViewState` field
VIEW_STATE_TYPE_MAP = CodecType.TypeMap(DEFAULT_TYPE_ALIAS_MAP, VIEW_STATE_TYPE_TO_CODEC_TYPE_MAP)

VIEW_STATE_CODEC_TYPE = ViewStateCodecType()

SAMPLE_VIEW_STATES: tuple[ViewState, ...] = (
    Empty(),
    Editing(subview=EditSubview.HEADERS),
    ExchangeHistory(
        connection=Connection(
            url=URL('wss://stocks.websocket.demo.cleora.app'),
            messages=('connected', 'disconnected'),
        ),
    ),
    Listing(
        selected_id=UUID('e621e1f8-c36c-495a-93fc-0c247a3e6e5f'),
        expanded_items=(Item(name='Request 1'), Item(name='Request 2')),
    ),
)
