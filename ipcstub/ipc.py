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

"""The IpcCommand capability and the tags used to describe commands.

Tags are applied as class decorators::

    @Description('Lists users')
    @Param('limit', 'maximum number of users', type='int', optional=True)
    @Returns(Return('users', 'list of user names'), Return('total'))
    class ListUsers(IpcCommand):
        def execute(self, call, result):
            ...

Each tag type can be used once per class; use the plural group tags for
several parameters, throws or returns. Tags are stored on the decorated class
only and are not inherited by subclasses.
"""

import abc
import dataclasses
from typing import Any


TAGS_ATTRIBUTE = '__ipc_tags__'
META_ATTRIBUTE = '__ipc_meta__'


class IpcCommand(abc.ABC):
    """A remotely invocable command."""

    @abc.abstractmethod
    def execute(self, call: Any, result: dict[str, Any]) -> None:
        """Execute the command for the given call, filling in the result."""


class Tag:
    """Base class for declarative metadata attached to a command class.

    Subclasses declared with ``meta=True`` carry generator relevant meta
    information; any command using such a tag reports it.
    """

    def __init_subclass__(cls, meta: bool = False, **kwargs):
        """Record the meta marker on the tag's own declaration."""
        super().__init_subclass__(**kwargs)
        setattr(cls, META_ATTRIBUTE, meta)

    def __call__(self, command: type) -> type:
        """Attach this tag to the decorated class."""
        if not isinstance(command, type):
            raise TypeError(f'{type(self).__name__} can only decorate classes, got {command!r}')
        existing = command.__dict__.get(TAGS_ATTRIBUTE, {})
        if type(self) in existing:
            raise ValueError(
                f'{type(self).__name__} is already present on {command.__qualname__}'
            )
        # decorators apply bottom-up, prepend to keep declaration order
        setattr(command, TAGS_ATTRIBUTE, {type(self): self, **existing})
        return command


def is_meta_tag(tag_type: type) -> bool:
    """Check whether the given tag type carries the meta marker."""
    return bool(tag_type.__dict__.get(META_ATTRIBUTE, False))


def get_tags(command: type) -> tuple[Tag, ...]:
    """Return the tags declared on the class itself, in declaration order."""
    return tuple(command.__dict__.get(TAGS_ATTRIBUTE, {}).values())


def get_tag(command: type, tag_type: type) -> Any:
    """Return the tag of the given type declared on the class, or None."""
    return command.__dict__.get(TAGS_ATTRIBUTE, {}).get(tag_type)


@dataclasses.dataclass(frozen=True)
class Description(Tag):
    """Free text describing a command."""

    value: str


@dataclasses.dataclass(frozen=True)
class Deprecated(Tag):
    """Marks a command as deprecated."""

    reason: str = ''


@dataclasses.dataclass(frozen=True)
class Param(Tag):
    """A parameter accepted by a command."""

    name: str
    description: str = ''
    type: str = ''
    optional: bool = False
    default: str = ''


@dataclasses.dataclass(frozen=True)
class Throw(Tag):
    """A failure condition a command may signal."""

    name: str
    description: str = ''


@dataclasses.dataclass(frozen=True)
class Return(Tag):
    """A value a command puts into its result."""

    name: str
    description: str = ''


class _Group(Tag):
    item_type: type = Tag

    def __init__(self, *items):
        for item in items:
            if not isinstance(item, self.item_type):
                raise TypeError(
                    f'{type(self).__name__} expects {self.item_type.__name__} items, got {item!r}'
                )
        self.value = tuple(items)

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))

    def __repr__(self):
        return f'{type(self).__name__}{self.value!r}'


class Params(_Group):
    """Several parameters accepted by a command."""

    item_type = Param


class Throws(_Group):
    """Several failure conditions a command may signal."""

    item_type = Throw


class Returns(_Group):
    """Several values a command puts into its result."""

    item_type = Return
