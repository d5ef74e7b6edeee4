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

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from tagcodec.serialization.consts import DEFAULT_MAX_INPUT_BYTES
from tagcodec.utils.yaml import dict_from_yaml


class CodecSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    # Largest encoded document accepted by `CodecType.from_bytes`, larger inputs fail with TooLongError
    MAX_INPUT_BYTES: int = Field(default=DEFAULT_MAX_INPUT_BYTES, gt=0)

    # When set, packed arrays with more elements than expected fail with TrailingDataError instead of the extra
    # elements being ignored
    STRICT_SEQUENCE_LENGTH: bool = False

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
