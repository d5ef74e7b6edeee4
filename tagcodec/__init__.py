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
This module exports the view state types and the codec used to convert them to and from JSON.
"""

from tagcodec.codec_types import CodecType, make_codec_type
from tagcodec.exception import TagCodecError
from tagcodec.serialization import (
    AmbiguousOrMissingDiscriminatorError,
    DataCorruptedError,
    MalformedDataError,
    PayloadTypeMismatchError,
    SerializationError,
    TooLongError,
    TrailingDataError,
    TruncatedSequenceError,
    UnknownDiscriminatorError,
)
from tagcodec.types import URL
from tagcodec.version import __version__
from tagcodec.view_state import (
    SAMPLE_VIEW_STATES,
    VIEW_STATE_CODEC_TYPE,
    Connection,
    Editing,
    EditSubview,
    Empty,
    ExchangeHistory,
    Item,
    Listing,
    ViewState,
    ViewStateCodecType,
    ViewStateKey,
)

__all__ = [
    'CodecType',
    'make_codec_type',
    'TagCodecError',
    'AmbiguousOrMissingDiscriminatorError',
    'DataCorruptedError',
    'MalformedDataError',
    'PayloadTypeMismatchError',
    'SerializationError',
    'TooLongError',
    'TrailingDataError',
    'TruncatedSequenceError',
    'UnknownDiscriminatorError',
    'URL',
    'SAMPLE_VIEW_STATES',
    'VIEW_STATE_CODEC_TYPE',
    'Connection',
    'Editing',
    'EditSubview',
    'Empty',
    'ExchangeHistory',
    'Item',
    'Listing',
    'ViewState',
    'ViewStateCodecType',
    'ViewStateKey',
    '__version__',
]
