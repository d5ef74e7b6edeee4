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

from typing import TypeAlias

# These are all the values that can be observed when parsing a JSON with the builtin json module
# See: https://docs.python.org/3/library/json.html#encoders-and-decoders
Json: TypeAlias = dict | list | str | int | float | bool | None

CodingKey: TypeAlias = str | int
CodingPath: TypeAlias = tuple[CodingKey, ...]


def format_coding_path(path: CodingPath) -> str:
    """ Render a coding path with object keys as attributes and array positions as indexes.

    >>> format_coding_path(())
    '$'
    >>> format_coding_path(('list', 1, 0, 'name'))
    '$.list[1][0].name'
    """
    parts = ['$']
    for key in path:
        if isinstance(key, int):
            parts.append(f'[{key}]')
        else:
            parts.append(f'.{key}')
    return ''.join(parts)


def json_type_name(value: object) -> str:
    """ Name of the JSON type of a value, as used in error messages.

    >>> json_type_name(True), json_type_name(1), json_type_name(None), json_type_name([])
    ('bool', 'int', 'null', 'array')
    """
    # XXX: bool must come before int, bool is a subclass of int
    if isinstance(value, bool):
        return 'bool'
    if isinstance(value, int):
        return 'int'
    if isinstance(value, float):
        return 'float'
    if isinstance(value, str):
        return 'str'
    if value is None:
        return 'null'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__
