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

import sys

from structlog import get_logger
from typing_extensions import assert_never

logger = get_logger()


def main() -> int:
    from tagcodec.cli.util import create_parser
    from tagcodec.conf.get_settings import get_global_settings
    from tagcodec.conf.settings import CodecSettings
    from tagcodec.serialization import format_coding_path
    from tagcodec.utils.result import Err, Ok
    from tagcodec.view_state import ViewStateCodecType

    parser = create_parser()
    parser.add_argument('file', nargs='?', help='Path to a JSON document, read from stdin when omitted')
    parser.add_argument('--config-yaml', help='Path to a YAML file with the codec settings')
    args = parser.parse_args()

    log = logger.new()

    if args.config_yaml:
        settings = CodecSettings.from_yaml(filepath=args.config_yaml)
    else:
        settings = get_global_settings()

    if args.file is None:
        data = sys.stdin.buffer.read()
    else:
        with open(args.file, 'rb') as file:
            data = file.read()

    codec = ViewStateCodecType.from_settings(settings)
    result = codec.decode_bytes(data, max_bytes=settings.MAX_INPUT_BYTES)
    match result:
        case Ok(view_state):
            print(repr(view_state))
            print(codec.to_bytes(view_state).decode('utf-8'))
            return 0
        case Err(error):
            log.error('could not decode view state', kind=type(error).__name__, path=format_coding_path(error.path),
                      reason=error.message)
            return 1
        case _:
            assert_never(result)
