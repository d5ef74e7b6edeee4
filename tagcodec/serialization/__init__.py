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

from .deserializer import ArrayDeserializer, Deserializer, ObjectDeserializer
from .exceptions import (
    AmbiguousOrMissingDiscriminatorError,
    DataCorruptedError,
    DuplicateKeyError,
    MalformedDataError,
    MissingKeyError,
    PayloadTypeMismatchError,
    SerializationError,
    TooLongError,
    TrailingDataError,
    TruncatedSequenceError,
    UnknownDiscriminatorError,
)
from .serializer import ArraySerializer, ObjectSerializer, Serializer
from .types import CodingPath, Json, format_coding_path

__all__ = [
    'AmbiguousOrMissingDiscriminatorError',
    'ArrayDeserializer',
    'ArraySerializer',
    'CodingPath',
    'DataCorruptedError',
    'Deserializer',
    'DuplicateKeyError',
    'Json',
    'MalformedDataError',
    'MissingKeyError',
    'ObjectDeserializer',
    'ObjectSerializer',
    'PayloadTypeMismatchError',
    'SerializationError',
    'Serializer',
    'TooLongError',
    'TrailingDataError',
    'TruncatedSequenceError',
    'UnknownDiscriminatorError',
    'format_coding_path',
]
