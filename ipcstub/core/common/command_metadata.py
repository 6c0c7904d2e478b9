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

import dataclasses
from ...ipc import Param, Return, Tag, Throw


@dataclasses.dataclass(frozen=True)
class CommandMetadata:
    """Declarative metadata of an IpcCommand, as read from its tags."""

    description: str = ''
    deprecated: bool = False
    params: tuple[Param, ...] = ()
    throws: tuple[Throw, ...] = ()
    returns: tuple[Return, ...] = ()
    has_meta_informations: bool = False
    tags: tuple[Tag, ...] = ()
