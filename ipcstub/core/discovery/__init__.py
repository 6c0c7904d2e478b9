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

"""Discovery of IpcCommands on a classpath."""

from .classifier import CommandClassifier, discover_commands
from .inspector import inspect_command
from .loader import TypeLoader, resolve_dotted_path
from .scanner import ClassPath

__all__ = [
    'ClassPath',
    'CommandClassifier',
    'TypeLoader',
    'discover_commands',
    'inspect_command',
    'resolve_dotted_path',
]
