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

def main() -> int:
    from tagcodec.cli.util import create_parser
    from tagcodec.conf.get_settings import get_global_settings
    from tagcodec.view_state import SAMPLE_VIEW_STATES, ViewStateCodecType

    parser = create_parser()
    parser.parse_args()

    codec = ViewStateCodecType.from_settings(get_global_settings())
    for view_state in SAMPLE_VIEW_STATES:
        encoded = codec.to_bytes(view_state)
        print(encoded.decode('utf-8'))
        decoded = codec.from_bytes(encoded)
        print(repr(decoded))
        assert decoded == view_state
    return 0
