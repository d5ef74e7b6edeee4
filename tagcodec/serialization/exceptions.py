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

from tagcodec.exception import TagCodecError

from .types import CodingPath, format_coding_path


class SerializationError(TagCodecError):
    """ Base class for errors of the structured writer/reader and the encoders built on it.

    Every error carries the coding path of the value where it happened, the path is rendered after the message:

    >>> str(SerializationError('something went wrong', path=('list', 0)))
    'something went wrong (at $.list[0])'
    """

    def __init__(self, message: str, *, path: CodingPath = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return f'{self.message} (at {format_coding_path(self.path)})'


class DuplicateKeyError(SerializationError):
    """The same key was written twice to an object."""


class MissingKeyError(SerializationError):
    """A required key is not present in an object."""


class PayloadTypeMismatchError(SerializationError):
    """A value's shape or type does not match the statically expected type."""


class TruncatedSequenceError(SerializationError):
    """An array has fewer elements than expected."""


class TrailingDataError(SerializationError):
    """An array has more elements than were read from it."""


class TooLongError(SerializationError):
    """The input is longer than the allowed maximum."""


class DataCorruptedError(SerializationError):
    """The data cannot be interpreted at all."""


class MalformedDataError(DataCorruptedError):
    """The input is not a valid JSON document."""


class AmbiguousOrMissingDiscriminatorError(DataCorruptedError):
    """Zero or more than one discriminator keys are present."""


class UnknownDiscriminatorError(DataCorruptedError):
    """The discriminator key does not match any declared variant."""
