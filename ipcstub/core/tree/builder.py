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

from ..common.command import CommandDescriptor
from ..common.errors import NamespaceError
from ..common.helpers import NAMESPACE_DELIMITER
from .namespace import NamespaceNode, NamespaceTree
from collections.abc import Iterable


def build_namespace_tree(descriptors: Iterable[CommandDescriptor]) -> NamespaceTree:
    """Organize commands into a new tree of namespaces mirroring their dotted names.

    :raises NamespaceError: If a command has no namespace or a malformed name.
    """
    tree = NamespaceTree()
    for node in build(tree, list(descriptors), None):
        tree.attach_child(None, node)
    return tree


def build(
    tree: NamespaceTree,
    descriptors: list[CommandDescriptor],
    parent: NamespaceNode | None,
) -> list[NamespaceNode]:
    """Partition commands by their first namespace segment below parent.

    Commands directly inside parent are attached to it; for every distinct
    sub-namespace a node is created, or an existing child of parent reused,
    and filled recursively. Commands outside of parent are ignored.

    :return: The newly created nodes directly below parent, in first seen order.
    """
    prefix = '' if parent is None else parent.full_name + NAMESPACE_DELIMITER
    known = {node.full_name: node for node in parent.packages} if parent is not None else {}
    groups: dict[str, list[CommandDescriptor]] = {}

    for descriptor in descriptors:
        if not descriptor.full_name.startswith(prefix):
            continue
        remaining = descriptor.full_name[len(prefix):]

        index = remaining.find(NAMESPACE_DELIMITER)
        if index == 0 or not remaining:
            raise NamespaceError(f'invalid class definition found: {descriptor.full_name}')
        if index == -1:
            if parent is None:
                raise NamespaceError(f'found an IpcCommand without a package: {descriptor.full_name}')
            tree.add_command(parent, descriptor)
            continue

        groups.setdefault(prefix + remaining[:index], []).append(descriptor)

    created = []
    for full_name, members in groups.items():
        node = known.get(full_name)
        if node is None:
            node = tree.add_node(full_name, parent)
            created.append(node)
        for child in build(tree, members, node):
            tree.attach_child(node, child)
    return created
