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

"""Resolves type names found on a classpath into classes."""

import importlib
import sys
from ..common.errors import ClasspathError
from ..common.helpers import NAMESPACE_DELIMITER
from collections.abc import Sequence
from loguru import logger
from pathlib import Path
from types import ModuleType


def resolve_dotted_path(dotted_path: str) -> object:
    """Import the object named by a 'module.attribute' path."""
    module_name, _, attribute = dotted_path.rpartition(NAMESPACE_DELIMITER)
    if not module_name:
        raise ClasspathError(f'not a dotted path: {dotted_path}')
    try:
        return getattr(importlib.import_module(module_name), attribute)
    except (ImportError, AttributeError) as e:
        raise ClasspathError(f'cannot resolve {dotted_path}: {e}') from e


class TypeLoader:
    """Loads classes from the classpath roots.

    The roots are put in front of sys.path only while the loader is entered;
    the previous import path is restored on exit.
    """

    def __init__(self, roots: Sequence[Path | str]):
        """Initialize the loader with the classpath roots."""
        self.roots = [str(Path(root).resolve()) for root in roots]
        self._saved_path: list[str] | None = None
        self._modules: dict[str, ModuleType | None] = {}

    def __enter__(self) -> 'TypeLoader':
        """Make the classpath roots importable."""
        self._saved_path = list(sys.path)
        sys.path[:0] = [root for root in self.roots if root not in sys.path]
        importlib.invalidate_caches()
        return self

    def __exit__(self, *exc_info):
        """Restore the import path."""
        if self._saved_path is not None:
            sys.path[:] = self._saved_path
            self._saved_path = None

    def load_module(self, module_name: str) -> ModuleType | None:
        """Import a module, returning None if it cannot be found.

        :raises ClasspathError: If the module exists but fails while importing.
        """
        if module_name not in self._modules:
            try:
                self._modules[module_name] = importlib.import_module(module_name)
            except ImportError as e:
                logger.debug('Cannot import {}: {}', module_name, e)
                self._modules[module_name] = None
            except Exception as e:
                raise ClasspathError(f'cannot load module {module_name}: {e}') from e
        return self._modules[module_name]

    def load(self, type_name: str) -> type | None:
        """Resolve a fully qualified type name, returning None if it is unresolvable."""
        module_name, _, class_name = type_name.rpartition(NAMESPACE_DELIMITER)
        if not module_name:
            return None
        module = self.load_module(module_name)
        if module is None:
            return None
        resolved = getattr(module, class_name, None)
        if not isinstance(resolved, type):
            logger.debug('{} does not resolve to a class', type_name)
            return None
        return resolved
