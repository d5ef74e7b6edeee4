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

from typing import Union

from typing_extensions import override

from tagcodec.util import json_dumpb

from .exceptions import DuplicateKeyError, SerializationError
from .serializer import ArraySerializer, ObjectSerializer, Serializer
from .types import CodingPath, Json

_Node = Union['JsonObjectSerializer', 'JsonArraySerializer', None, bool, int, str]
_UNSET = object()


class JsonSerializer(Serializer):
    """ Implementation of Serializer that builds a tree of `json`-module compatible values in memory.

    Containers are kept as serializers until `finalize` is called, which collapses the whole tree into plain values.
    """

    __slots__ = ('_path', '_node')

    def __init__(self, path: CodingPath = ()) -> None:
        self._path = path
        self._node: _Node | object = _UNSET

    def _set(self, node: _Node) -> None:
        if self._node is not _UNSET:
            raise SerializationError('a value was already written', path=self._path)
        self._node = node

    def finalize(self) -> Json:
        """Get the resulting value, every slot in the tree must have been written."""
        node = self._node
        if node is _UNSET:
            raise SerializationError('no value was written', path=self._path)
        if isinstance(node, (JsonObjectSerializer, JsonArraySerializer)):
            return node.finalize()
        return node  # type: ignore[return-value]

    def to_bytes(self) -> bytes:
        """Get the resulting value as a compact UTF-8 JSON document."""
        return json_dumpb(self.finalize())

    @override
    def coding_path(self) -> CodingPath:
        return self._path

    @override
    def write_null(self) -> None:
        self._set(None)

    @override
    def write_bool(self, value: bool) -> None:
        assert isinstance(value, bool)
        self._set(value)

    @override
    def write_int(self, value: int) -> None:
        assert isinstance(value, int) and not isinstance(value, bool)
        self._set(value)

    @override
    def write_str(self, value: str) -> None:
        assert isinstance(value, str)
        # XXX: str subclasses (enums, URL, ...) are stored as plain str
        self._set(str.__str__(value))

    @override
    def open_object(self) -> JsonObjectSerializer:
        container = JsonObjectSerializer(self._path)
        self._set(container)
        return container

    @override
    def open_array(self) -> JsonArraySerializer:
        container = JsonArraySerializer(self._path)
        self._set(container)
        return container


class JsonObjectSerializer(ObjectSerializer):
    __slots__ = ('_path', '_members')

    def __init__(self, path: CodingPath) -> None:
        self._path = path
        self._members: dict[str, JsonSerializer] = {}

    def finalize(self) -> dict[str, Json]:
        return {key: slot.finalize() for key, slot in self._members.items()}

    @override
    def coding_path(self) -> CodingPath:
        return self._path

    @override
    def key(self, key: str) -> JsonSerializer:
        key = str.__str__(key)
        if key in self._members:
            raise DuplicateKeyError(f'key {key!r} was already written', path=self._path)
        slot = JsonSerializer(self._path + (key,))
        self._members[key] = slot
        return slot


class JsonArraySerializer(ArraySerializer):
    __slots__ = ('_path', '_elements')

    def __init__(self, path: CodingPath) -> None:
        self._path = path
        self._elements: list[JsonSerializer] = []

    def finalize(self) -> list[Json]:
        return [slot.finalize() for slot in self._elements]

    @override
    def coding_path(self) -> CodingPath:
        return self._path

    @override
    def append(self) -> JsonSerializer:
        slot = JsonSerializer(self._path + (len(self._elements),))
        self._elements.append(slot)
        return slot
