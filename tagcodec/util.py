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

import json
from typing import Any, Callable, Optional


def json_loadb(raw: bytes, *, object_pairs_hook: Optional[Callable[[list[tuple[str, Any]]], Any]] = None) -> Any:
    """Compact loading as UTF-8 encoded bytes/string to a Python object."""
    # XXX: from Python3.6 onwards, json.loads can take bytes
    #      See: https://docs.python.org/3/library/json.html#json.loads
    try:
        return json.loads(raw, object_pairs_hook=object_pairs_hook)
    except UnicodeDecodeError as exc:
        # We cannot do `doc=raw` because it expects a str and there
        # is no way to decode it.
        raise json.JSONDecodeError(msg=str(exc), doc=raw.hex(), pos=exc.start) from exc


def json_dumpb(obj: object) -> bytes:
    """Compact formating obj as JSON to UTF-8 encoded bytes."""
    return json_dumps(obj).encode('utf-8')


def json_dumps(obj: object, *, indent: int | None = None) -> str:
    """Formating obj as JSON to UTF-8 encoded string, compact unless an indent is given."""
    if indent is not None:
        return json.dumps(obj, indent=indent, ensure_ascii=False)
    return json.dumps(obj, separators=(',', ':'), ensure_ascii=False)
