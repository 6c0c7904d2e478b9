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
from .command_metadata import CommandMetadata


@dataclasses.dataclass(frozen=True)
class CommandDescriptor:
    """Identity of a discovered IpcCommand class."""

    full_name: str
    name: str
    command: type = dataclasses.field(compare=False, repr=False)

    @classmethod
    def of(cls, full_name: str, command: type) -> 'CommandDescriptor':
        """Create a descriptor for a class found under the given dotted name."""
        return cls(full_name=full_name, name=full_name.rpartition('.')[2], command=command)

    @property
    def namespace(self) -> str:
        """Return the dotted namespace containing the command, empty if there is none."""
        return self.full_name.rpartition('.')[0]

    @property
    def meta(self) -> CommandMetadata:
        """Return the declarative metadata of the command."""
        from ..discovery.inspector import inspect_command

        return inspect_command(self)
