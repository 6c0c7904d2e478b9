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

"""Namespace tree of discovered commands.

Nodes live in an arena owned by a NamespaceTree and refer to each other by
index; NamespaceNode is a read-only view over one slot of the arena.
"""

import dataclasses
from ..common.command import CommandDescriptor
from ..common.helpers import NAMESPACE_DELIMITER
from collections.abc import Iterator


ROOT = -1


@dataclasses.dataclass
class _Slot:
    full_name: str
    parent: int
    children: list[int] = dataclasses.field(default_factory=list)
    commands: dict[str, CommandDescriptor] = dataclasses.field(default_factory=dict)


class NamespaceTree:
    """Arena holding all namespace nodes built for one generation configuration."""

    def __init__(self):
        """Initialize an empty tree."""
        self._slots: list[_Slot] = []
        self._roots: list[int] = []

    def __len__(self) -> int:
        """Return the number of namespace nodes."""
        return len(self._slots)

    @property
    def roots(self) -> tuple['NamespaceNode', ...]:
        """Return the top level namespaces, the root forest."""
        return tuple(NamespaceNode(self, index) for index in self._roots)

    def nodes(self) -> Iterator['NamespaceNode']:
        """Iterate over all nodes, parents before their children."""
        for root in self.roots:
            yield from root.walk()

    def find(self, full_name: str) -> 'NamespaceNode | None':
        """Return the node with the given full name, if any."""
        for index, slot in enumerate(self._slots):
            if slot.full_name == full_name:
                return NamespaceNode(self, index)
        return None

    def add_node(self, full_name: str, parent: 'NamespaceNode | None') -> 'NamespaceNode':
        """Create a node below the given parent, or a root node if parent is None."""
        parent_index = ROOT if parent is None else self._index_of(parent)
        self._slots.append(_Slot(full_name=full_name, parent=parent_index))
        return NamespaceNode(self, len(self._slots) - 1)

    def attach_child(self, parent: 'NamespaceNode | None', child: 'NamespaceNode'):
        """Register a node as child of the given parent, or as root if parent is None."""
        siblings = self._roots if parent is None else self._slots[self._index_of(parent)].children
        index = self._index_of(child)
        if index not in siblings:
            siblings.append(index)

    def add_command(self, node: 'NamespaceNode', descriptor: CommandDescriptor):
        """Attach a command to the given node."""
        self._slots[self._index_of(node)].commands.setdefault(descriptor.full_name, descriptor)

    def _index_of(self, node: 'NamespaceNode') -> int:
        if node.tree is not self:
            raise ValueError(f'node {node.full_name} belongs to another tree')
        return node.index

    def _slot(self, index: int) -> _Slot:
        return self._slots[index]


class NamespaceNode:
    """One segment of a dotted namespace, with its sub-namespaces and commands."""

    __slots__ = ('tree', 'index')

    def __init__(self, tree: NamespaceTree, index: int):
        """Initialize a view over the given arena slot."""
        self.tree = tree
        self.index = index

    def __eq__(self, other):
        """Return True if both views refer to the same slot of the same tree."""
        return (
            isinstance(other, NamespaceNode)
            and self.tree is other.tree
            and self.index == other.index
        )

    def __hash__(self):
        """Hash by tree identity and slot."""
        return hash((id(self.tree), self.index))

    def __repr__(self):
        """Return a debugging representation."""
        return f'NamespaceNode({self.full_name!r})'

    @property
    def full_name(self) -> str:
        """Return the dotted path from the root."""
        return self.tree._slot(self.index).full_name

    @property
    def name(self) -> str:
        """Return the last segment of the dotted path."""
        return self.full_name.rpartition(NAMESPACE_DELIMITER)[2]

    @property
    def parent(self) -> 'NamespaceNode | None':
        """Return the enclosing namespace, None for a root."""
        parent = self.tree._slot(self.index).parent
        return None if parent == ROOT else NamespaceNode(self.tree, parent)

    @property
    def packages(self) -> tuple['NamespaceNode', ...]:
        """Return the direct sub-namespaces."""
        return tuple(NamespaceNode(self.tree, child) for child in self.tree._slot(self.index).children)

    @property
    def commands(self) -> tuple[CommandDescriptor, ...]:
        """Return the commands directly inside this namespace."""
        return tuple(self.tree._slot(self.index).commands.values())

    @property
    def depth(self) -> int:
        """Return the number of segments of the full name."""
        return self.full_name.count(NAMESPACE_DELIMITER) + 1

    def walk(self) -> Iterator['NamespaceNode']:
        """Iterate over this node and all nodes below it, depth first."""
        yield self
        for child in self.packages:
            yield from child.walk()
