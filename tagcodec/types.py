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

from urllib.parse import urlsplit

from typing_extensions import Self


class URL(str):
    """ An absolute URL, kept as the exact text it was built from.

    It behaves as a `str` in every other respect, only construction is validated:

    >>> URL('wss://stocks.websocket.demo.cleora.app')
    URL('wss://stocks.websocket.demo.cleora.app')
    >>> URL('wss://stocks.websocket.demo.cleora.app').scheme
    'wss'
    >>> URL('not a url')
    Traceback (most recent call last):
    ...
    ValueError: not an absolute URL: 'not a url'
    """

    __slots__ = ()

    def __new__(cls, value: str) -> Self:
        if not isinstance(value, str):
            raise TypeError('expected str')
        # XXX: urlsplit raises ValueError on its own for some malformed inputs, like unbalanced IPv6 brackets
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f'not an absolute URL: {value!r}')
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f'URL({str.__repr__(self)})'

    @property
    def scheme(self) -> str:
        return urlsplit(self).scheme

    @property
    def host(self) -> str | None:
        return urlsplit(self).hostname
