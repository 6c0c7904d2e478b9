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

"""Reads the declarative metadata attached to IpcCommand classes."""

from ...ipc import (
    Deprecated,
    Description,
    Param,
    Params,
    Return,
    Returns,
    Throw,
    Throws,
    get_tag,
    get_tags,
    is_meta_tag,
)
from ..common.command_metadata import CommandMetadata
from typing import Any


def inspect_command(command: Any) -> CommandMetadata:
    """Return the metadata of a command class or of a descriptor's class."""
    cls = getattr(command, 'command', command)
    return CommandMetadata(
        description=get_description(cls),
        deprecated=is_deprecated(cls),
        params=_union(cls, Param, Params),
        throws=_union(cls, Throw, Throws),
        returns=_union(cls, Return, Returns),
        has_meta_informations=has_meta_informations(cls),
        tags=get_tags(cls),
    )


def get_description(cls: type) -> str:
    """Return the description of the command, empty if there is none."""
    description = get_tag(cls, Description)
    return description.value if description is not None else ''


def is_deprecated(cls: type) -> bool:
    """Check whether the command is deprecated.

    Both the Deprecated tag and the PEP 702 warnings.deprecated decorator count.
    """
    return get_tag(cls, Deprecated) is not None or '__deprecated__' in cls.__dict__


def has_meta_informations(cls: type) -> bool:
    """Check whether any tag on the command is declared as carrying meta information."""
    return any(is_meta_tag(type(tag)) for tag in get_tags(cls))


def _union(cls: type, single: type, group: type) -> tuple:
    items = []
    tag = get_tag(cls, single)
    if tag is not None:
        items.append(tag)
    tags = get_tag(cls, group)
    if tags is not None:
        items.extend(tags.value)
    return tuple(items)
