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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar, final

from tagcodec.utils.result import Result

from .consts import DEFAULT_MAX_INPUT_BYTES
from .exceptions import SerializationError
from .types import CodingPath, Json

if TYPE_CHECKING:
    from .compound_encoding import Decoder
    from .json_deserializer import JsonDeserializer

T = TypeVar('T')


class Deserializer(ABC):
    """ A single value slot of a structured document being read.

    Reading never raises for bad input, failures are returned as `Err` values carrying the slot's coding path.
    """

    @abstractmethod
    def coding_path(self) -> CodingPath:
        raise NotImplementedError

    @abstractmethod
    def is_null(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_null(self) -> Result[None, SerializationError]:
        raise NotImplementedError

    @abstractmethod
    def read_bool(self) -> Result[bool, SerializationError]:
        raise NotImplementedError

    @abstractmethod
    def read_int(self) -> Result[int, SerializationError]:
        raise NotImplementedError

    @abstractmethod
    def read_str(self) -> Result[str, SerializationError]:
        raise NotImplementedError

    @abstractmethod
    def read_any(self) -> Result[Json, SerializationError]:
        """Read whatever well-formed value is in this slot, without interpreting it."""
        raise NotImplementedError

    @abstractmethod
    def open_object(self) -> Result[ObjectDeserializer, SerializationError]:
        raise NotImplementedError

    @abstractmethod
    def open_array(self) -> Result[ArrayDeserializer, SerializationError]:
        raise NotImplementedError

    @staticmethod
    def build_json_deserializer(json_value: Json) -> JsonDeserializer:
        from .json_deserializer import JsonDeserializer
        return JsonDeserializer(json_value)

    @staticmethod
    def build_json_bytes_deserializer(
        data: bytes,
        *,
        max_bytes: int | None = DEFAULT_MAX_INPUT_BYTES,
    ) -> Result[JsonDeserializer, SerializationError]:
        """Parse `data` as a JSON document and return a deserializer for its root value."""
        from .json_deserializer import JsonDeserializer
        return JsonDeserializer.from_bytes(data, max_bytes=max_bytes)


class ObjectDeserializer(ABC):
    """An object container, members are read by key."""

    @abstractmethod
    def coding_path(self) -> CodingPath:
        raise NotImplementedError

    @abstractmethod
    def keys(self) -> frozenset[str]:
        """The set of keys actually present."""
        raise NotImplementedError

    @abstractmethod
    def key(self, key: str) -> Result[Deserializer, SerializationError]:
        """Return the slot for `key`, fails with `MissingKeyError` if it is absent."""
        raise NotImplementedError

    @final
    def decode(self, key: str, decoder: Decoder[T]) -> Result[T, SerializationError]:
        """Read the value under `key` using the given decoder."""
        return self.key(key).and_then(decoder)

    @final
    def nested_array(self, key: str) -> Result[ArrayDeserializer, SerializationError]:
        return self.key(key).and_then(lambda deserializer: deserializer.open_array())


class ArrayDeserializer(ABC):
    """An array container, elements are read in order."""

    @abstractmethod
    def coding_path(self) -> CodingPath:
        raise NotImplementedError

    @abstractmethod
    def remaining(self) -> int:
        """Number of elements not read yet."""
        raise NotImplementedError

    @abstractmethod
    def next(self) -> Result[Deserializer, SerializationError]:
        """Return the slot for the next element, fails with `TruncatedSequenceError` when there is none."""
        raise NotImplementedError

    @abstractmethod
    def finalize(self) -> Result[None, SerializationError]:
        """Check that every element was read, fails with `TrailingDataError` otherwise."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.remaining() == 0

    @final
    def decode_next(self, decoder: Decoder[T]) -> Result[T, SerializationError]:
        """Read the next element using the given decoder."""
        return self.next().and_then(decoder)
