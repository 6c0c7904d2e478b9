# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from datetime import datetime, timezone


TRUTHY_VALUES = frozenset(['true', 'yes', '1'])
FAIL_FAST_KEY = 'IPCSTUB_FAIL_FAST'


def get_env_bool(env_key: str, default: bool) -> bool:
    """Get a boolean value from an environment variable, with a default."""
    return os.getenv(env_key, str(default)).casefold() in TRUTHY_VALUES


def get_generation_time() -> datetime:
    """Return the timestamp stamped into generated stubs.

    Honours SOURCE_DATE_EPOCH so that repeated builds produce identical output.
    """
    epoch = os.getenv('SOURCE_DATE_EPOCH')
    if epoch:
        return datetime.fromtimestamp(int(epoch), tz=timezone.utc)
    return datetime.now(timezone.utc)


IPCSTUB_LOG_LEVEL = os.getenv('IPCSTUB_LOG_LEVEL', 'INFO')
DEFAULT_OUTPUT_DIR = os.getenv('IPCSTUB_OUTPUT_DIR', 'build/ipcstub')
FAIL_FAST = get_env_bool(FAIL_FAST_KEY, True)
DEFAULT_CAPABILITY = 'ipcstub.ipc.IpcCommand'
DEFAULT_ENCODING = 'utf-8'
ENTRY_TEMPLATE = 'main'
TEMPLATE_SUFFIX = '.j2'
