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

from .types import CodingPath

if TYPE_CHECKING:
    from .compound_encoding import Encoder
    from .json_serializer import JsonSerializer

T = TypeVar('T')


class Serializer(ABC):
    """ A single value slot of a structured document being written.

    A slot receives exactly one value: either a scalar or a nested object/array container.
    """

    @abstractmethod
    def coding_path(self) -> CodingPath:
        raise NotImplementedError

    @abstractmethod
    def write_null(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_bool(self, value: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_int(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_str(self, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def open_object(self) -> ObjectSerializer:
        """Make this slot an object and return the container to write its members."""
        raise NotImplementedError

    @abstractmethod
    def open_array(self) -> ArraySerializer:
        """Make this slot an array and return the container to append its elements."""
        raise NotImplementedError

    @staticmethod
    def build_json_serializer() -> JsonSerializer:
        from .json_serializer import JsonSerializer
        return JsonSerializer()


class ObjectSerializer(ABC):
    """An object container, members are written by key."""

    @abstractmethod
    def coding_path(self) -> CodingPath:
        raise NotImplementedError

    @abstractmethod
    def key(self, key: str) -> Serializer:
        """Return the slot for `key`, writing the same key twice is an error."""
        raise NotImplementedError

    @final
    def encode(self, key: str, value: T, encoder: Encoder[T]) -> None:
        """Write `value` under `key` using the given encoder."""
        encoder(self.key(key), value)

    @final
    def nested_array(self, key: str) -> ArraySerializer:
        return self.key(key).open_array()


class ArraySerializer(ABC):
    """An array container, elements are appended in order."""

    @abstractmethod
    def coding_path(self) -> CodingPath:
        raise NotImplementedError

    @abstractmethod
    def append(self) -> Serializer:
        """Return the slot for the next element."""
        raise NotImplementedError

    @final
    def encode(self, value: T, encoder: Encoder[T]) -> None:
        """Append `value` using the given encoder."""
        encoder(self.append(), value)
