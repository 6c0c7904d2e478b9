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

"""Enumerates the type names defined on a classpath without importing anything."""

import ast
import zipfile
from ..common.errors import ClasspathError
from ..common.helpers import NAMESPACE_DELIMITER, may_contain
from collections.abc import Iterator, Sequence
from loguru import logger
from pathlib import Path, PurePosixPath
from typing import NamedTuple


SOURCE_SUFFIX = '.py'
PACKAGE_MODULE = '__init__'
IGNORED_MODULES = frozenset({'__main__'})
IGNORED_DIRECTORIES = frozenset({'__pycache__'})


class SourceUnit(NamedTuple):
    """A module source found on the classpath."""

    module: str
    origin: str
    source: bytes


def module_name_for(relative_path: PurePosixPath) -> str | None:
    """Derive the dotted module name of a source file relative to its root.

    Returns None for entries that are not importable modules.
    """
    if relative_path.suffix != SOURCE_SUFFIX:
        return None
    parts = list(relative_path.with_suffix('').parts)
    if not parts or any(part in IGNORED_DIRECTORIES for part in parts[:-1]):
        return None
    if parts[-1] in IGNORED_MODULES:
        return None
    if parts[-1] == PACKAGE_MODULE:
        parts.pop()
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return NAMESPACE_DELIMITER.join(parts)


def class_names_in(unit: SourceUnit) -> list[str]:
    """Return the names of the classes a module defines at module level, in source order."""
    try:
        tree = ast.parse(unit.source, filename=unit.origin)
    except (SyntaxError, ValueError) as e:
        logger.warning('Skipping {}, cannot parse source: {}', unit.origin, e)
        return []
    return list(dict.fromkeys(_module_level_classes(tree.body)))


def _module_level_classes(statements: list[ast.stmt]) -> Iterator[str]:
    # descends into module level if and try blocks, never into functions or classes
    for node in statements:
        if isinstance(node, ast.ClassDef):
            yield node.name
        elif isinstance(node, ast.If):
            yield from _module_level_classes(node.body)
            yield from _module_level_classes(node.orelse)
        elif isinstance(node, ast.Try):
            yield from _module_level_classes(node.body)
            for handler in node.handlers:
                yield from _module_level_classes(handler.body)
            yield from _module_level_classes(node.orelse)
            yield from _module_level_classes(node.finalbody)


class ClassPath:
    """An ordered list of classpath roots, each a source directory or a zip archive."""

    def __init__(self, roots: Sequence[Path | str]):
        """Initialize the classpath with its roots."""
        self.roots = [Path(root) for root in roots]

    def scan(self, packages: Sequence[str] | None = None) -> list[str]:
        """Return the fully qualified names of all types found on the classpath.

        Unreadable roots are skipped with a warning.

        :param packages: If given, modules that cannot define types below one of
            these packages are not read at all.
        :raises ClasspathError: If there is no root or none of the roots is readable.
        """
        if not self.roots:
            raise ClasspathError('no classpath roots given')

        found: dict[str, None] = {}
        readable = 0
        for root in self.roots:
            try:
                units = self._units(root, packages)
            except ClasspathError as e:
                logger.warning('{}', e)
                continue
            readable += 1
            for unit in units:
                for class_name in class_names_in(unit):
                    found.setdefault(f'{unit.module}{NAMESPACE_DELIMITER}{class_name}', None)

        if readable == 0:
            raise ClasspathError(
                f'none of the classpath roots could be read: {", ".join(map(str, self.roots))}'
            )
        logger.debug('Found {} types on the classpath', len(found))
        return list(found)

    def _units(self, root: Path, packages: Sequence[str] | None) -> list[SourceUnit]:
        if root.is_dir():
            return list(self._directory_units(root, packages))
        if root.is_file():
            return self._archive_units(root, packages)
        raise ClasspathError(f'classpath root does not exist: {root}')

    def _directory_units(self, root: Path, packages: Sequence[str] | None) -> Iterator[SourceUnit]:
        for path in sorted(root.rglob(f'*{SOURCE_SUFFIX}')):
            module = module_name_for(PurePosixPath(path.relative_to(root).as_posix()))
            if module is None or not path.is_file():
                continue
            if packages is not None and not may_contain(module, packages):
                continue
            try:
                yield SourceUnit(module, str(path), path.read_bytes())
            except OSError as e:
                logger.warning('Skipping {}, cannot read file: {}', path, e)

    def _archive_units(self, root: Path, packages: Sequence[str] | None) -> list[SourceUnit]:
        try:
            with zipfile.ZipFile(root) as archive:
                units = []
                for entry in sorted(archive.namelist()):
                    module = module_name_for(PurePosixPath(entry))
                    if module is None:
                        continue
                    if packages is not None and not may_contain(module, packages):
                        continue
                    units.append(SourceUnit(module, f'{root}!{entry}', archive.read(entry)))
                return units
        except (OSError, zipfile.BadZipFile) as e:
            raise ClasspathError(f'failed to read archive {root}: {e}') from e
