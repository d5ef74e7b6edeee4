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

import json
from typing import TypeVar

from typing_extensions import override

from tagcodec.util import json_loadb
from tagcodec.utils.result import Err, Ok, Result

from .consts import DEFAULT_MAX_INPUT_BYTES
from .deserializer import ArrayDeserializer, Deserializer, ObjectDeserializer
from .exceptions import (
    MalformedDataError,
    MissingKeyError,
    PayloadTypeMismatchError,
    SerializationError,
    TooLongError,
    TrailingDataError,
    TruncatedSequenceError,
)
from .types import CodingPath, Json, json_type_name

T = TypeVar('T')


def _reject_duplicate_keys(pairs: list[tuple[str, Json]]) -> dict[str, Json]:
    """Build an object, a member that appears twice makes the document ambiguous."""
    members: dict[str, Json] = {}
    for key, value in pairs:
        if key in members:
            raise ValueError(f'duplicate key {key!r}')
        members[key] = value
    return members


class JsonDeserializer(Deserializer):
    """ Implementation of Deserializer that walks a tree of values as produced by `json.load`.

    >>> de = Deserializer.build_json_deserializer({'list': [1, 'a']})
    >>> obj = de.open_object().unwrap()
    >>> sorted(obj.keys())
    ['list']
    >>> array = obj.nested_array('list').unwrap()
    >>> array.next().and_then(lambda d: d.read_int())
    Ok(1)
    >>> str(array.next().and_then(lambda d: d.read_int()).unwrap_err())
    'expected int, found str (at $.list[1])'
    """

    __slots__ = ('_value', '_path')

    def __init__(self, value: Json, path: CodingPath = ()) -> None:
        self._value = value
        self._path = path

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        *,
        max_bytes: int | None = DEFAULT_MAX_INPUT_BYTES,
    ) -> Result[JsonDeserializer, SerializationError]:
        if max_bytes is not None and len(data) > max_bytes:
            return Err(TooLongError(f'input has {len(data)} bytes, maximum is {max_bytes}'))
        try:
            value = json_loadb(data, object_pairs_hook=_reject_duplicate_keys)
        except json.JSONDecodeError as e:
            return Err(MalformedDataError(f'invalid JSON: {e.msg}'), cause=e)
        except ValueError as e:
            # duplicate members, or integers over the interpreter's digit limit
            return Err(MalformedDataError(f'invalid JSON: {e}'), cause=e)
        except RecursionError as e:
            return Err(MalformedDataError('invalid JSON: nesting is too deep'), cause=e)
        return Ok(cls(value))

    def _mismatch(self, expected: str) -> Err[SerializationError]:
        found = json_type_name(self._value)
        return Err(PayloadTypeMismatchError(f'expected {expected}, found {found}', path=self._path))

    @override
    def coding_path(self) -> CodingPath:
        return self._path

    @override
    def is_null(self) -> bool:
        return self._value is None

    @override
    def read_null(self) -> Result[None, SerializationError]:
        if self._value is not None:
            return self._mismatch('null')
        return Ok(None)

    @override
    def read_bool(self) -> Result[bool, SerializationError]:
        if not isinstance(self._value, bool):
            return self._mismatch('bool')
        return Ok(self._value)

    @override
    def read_int(self) -> Result[int, SerializationError]:
        # XXX: bool is a subclass of int, but `true` is not a JSON number
        if not isinstance(self._value, int) or isinstance(self._value, bool):
            return self._mismatch('int')
        return Ok(self._value)

    @override
    def read_str(self) -> Result[str, SerializationError]:
        if not isinstance(self._value, str):
            return self._mismatch('str')
        return Ok(self._value)

    @override
    def read_any(self) -> Result[Json, SerializationError]:
        return Ok(self._value)

    @override
    def open_object(self) -> Result[ObjectDeserializer, SerializationError]:
        if not isinstance(self._value, dict):
            return self._mismatch('object')
        return Ok(JsonObjectDeserializer(self._value, self._path))

    @override
    def open_array(self) -> Result[ArrayDeserializer, SerializationError]:
        if not isinstance(self._value, list):
            return self._mismatch('array')
        return Ok(JsonArrayDeserializer(self._value, self._path))


class JsonObjectDeserializer(ObjectDeserializer):
    __slots__ = ('_members', '_path')

    def __init__(self, members: dict[str, Json], path: CodingPath) -> None:
        self._members = members
        self._path = path

    @override
    def coding_path(self) -> CodingPath:
        return self._path

    @override
    def keys(self) -> frozenset[str]:
        return frozenset(self._members)

    @override
    def key(self, key: str) -> Result[Deserializer, SerializationError]:
        key = str.__str__(key)
        if key not in self._members:
            return Err(MissingKeyError(f'missing key {key!r}', path=self._path))
        return Ok(JsonDeserializer(self._members[key], self._path + (key,)))


class JsonArrayDeserializer(ArrayDeserializer):
    __slots__ = ('_elements', '_path', '_index')

    def __init__(self, elements: list[Json], path: CodingPath) -> None:
        self._elements = elements
        self._path = path
        self._index = 0

    @override
    def coding_path(self) -> CodingPath:
        return self._path

    @override
    def remaining(self) -> int:
        return len(self._elements) - self._index

    @override
    def next(self) -> Result[Deserializer, SerializationError]:
        index = self._index
        if index >= len(self._elements):
            return Err(TruncatedSequenceError(
                f'expected an element at position {index}, array has {len(self._elements)}',
                path=self._path + (index,),
            ))
        self._index += 1
        return Ok(JsonDeserializer(self._elements[index], self._path + (index,)))

    @override
    def finalize(self) -> Result[None, SerializationError]:
        if self.remaining():
            return Err(TrailingDataError(
                f'{self.remaining()} trailing element(s) after position {self._index - 1}',
                path=self._path,
            ))
        return Ok(None)
