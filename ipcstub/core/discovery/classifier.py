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

import enum
import inspect
from ...ipc import IpcCommand
from ..common.command import CommandDescriptor
from ..common.errors import ClasspathError
from ..common.helpers import in_packages
from .loader import TypeLoader, resolve_dotted_path
from .scanner import ClassPath
from collections.abc import Sequence
from loguru import logger
from typing import Protocol


class CommandClassifier:
    """Decides which type names on the classpath are IpcCommands.

    The rules are applied in order:

    1. the name must lie below one of the configured packages,
    2. it must resolve to a class (unresolvable names are skipped silently),
    3. the class must implement the capability,
    4. it must not be a protocol, abstract or an enumeration.
    """

    def __init__(
        self,
        packages: Sequence[str],
        loader: TypeLoader,
        capability: type = IpcCommand,
    ):
        """Initialize the classifier."""
        self.packages = tuple(packages)
        self.loader = loader
        self.capability = capability

    def classify(self, type_name: str) -> CommandDescriptor | None:
        """Return a descriptor if the named type is a concrete command, else None."""
        if not in_packages(type_name, self.packages):
            return None

        resolved = self.loader.load(type_name)
        if resolved is None:
            return None

        if not issubclass(resolved, self.capability):
            return None

        if is_protocol(resolved) or inspect.isabstract(resolved) or issubclass(resolved, enum.Enum):
            return None

        logger.info('    {}', type_name)
        return CommandDescriptor.of(type_name, resolved)


def is_protocol(cls: type) -> bool:
    """Check whether a class is a typing.Protocol, the closest thing to an interface."""
    return issubclass(type(cls), type(Protocol)) and bool(getattr(cls, '_is_protocol', False))


def discover_commands(
    classpath: Sequence, packages: Sequence[str], capability: type | str = IpcCommand
) -> tuple[CommandDescriptor, ...]:
    """Find all concrete IpcCommands below the given packages on the classpath.

    The capability may be given as a dotted path; it is then resolved with the
    classpath importable, so it can live in the scanned library itself.

    The result keeps discovery order: roots in classpath order, modules sorted
    by path, classes in source order.
    """
    found: dict[str, CommandDescriptor] = {}
    type_names = ClassPath(classpath).scan(packages)
    with TypeLoader(classpath) as loader:
        if isinstance(capability, str):
            capability = resolve_dotted_path(capability)
        if not isinstance(capability, type):
            raise ClasspathError(f'capability {capability!r} is not a class')
        classifier = CommandClassifier(packages, loader, capability)
        for type_name in type_names:
            descriptor = classifier.classify(type_name)
            if descriptor is not None:
                found.setdefault(descriptor.full_name, descriptor)
    return tuple(found.values())
