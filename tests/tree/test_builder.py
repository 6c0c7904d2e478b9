import pytest
from ipcstub.core.common.command import CommandDescriptor
from ipcstub.core.common.errors import NamespaceError
from ipcstub.core.generator.orchestrator import filter_commands
from ipcstub.core.tree.builder import build, build_namespace_tree
from ipcstub.core.tree.namespace import NamespaceTree


def _descriptors(*names):
    return [CommandDescriptor.of(name, object) for name in names]


def _commands(node):
    return [command.name for command in node.commands]


def _assert_path_invariant(tree):
    for node in tree.nodes():
        if node.parent is None:
            assert node.full_name == node.name
        else:
            assert node.full_name == f'{node.parent.full_name}.{node.name}'


def test_nested_namespaces():
    """Test that each command lands in the node of its immediate namespace."""
    tree = build_namespace_tree(_descriptors('a.Baz', 'a.b.Foo', 'a.b.c.Bar'))

    (a,) = tree.roots
    assert a.full_name == 'a'
    assert a.parent is None
    assert _commands(a) == ['Baz']

    (b,) = a.packages
    assert b.full_name == 'a.b'
    assert b.parent == a
    assert _commands(b) == ['Foo']

    (c,) = b.packages
    assert c.full_name == 'a.b.c'
    assert c.name == 'c'
    assert c.depth == 3
    assert _commands(c) == ['Bar']
    assert c.packages == ()
    assert len(tree) == 3


def test_command_without_namespace_is_fatal():
    """Test that a command without any namespace segment is rejected."""
    with pytest.raises(NamespaceError, match='without a package: Root'):
        build_namespace_tree(_descriptors('a.Fine', 'Root'))


@pytest.mark.parametrize('name', ['.a.Foo', 'a..Foo', 'a.b.', ''])
def test_malformed_names_are_fatal(name):
    """Test that empty segments are rejected."""
    with pytest.raises(NamespaceError, match='invalid class definition'):
        build_namespace_tree(_descriptors(name))


def test_forest_keeps_first_seen_order():
    """Test that roots and children keep insertion order."""
    tree = build_namespace_tree(
        _descriptors('zeta.x.One', 'alpha.Two', 'zeta.a.Three', 'zeta.x.Four', 'zeta.Five')
    )

    assert [root.full_name for root in tree.roots] == ['zeta', 'alpha']
    zeta = tree.roots[0]
    assert [child.name for child in zeta.packages] == ['x', 'a']
    assert _commands(zeta) == ['Five']
    assert _commands(zeta.packages[0]) == ['One', 'Four']
    _assert_path_invariant(tree)


def test_partition_completeness():
    """Test that every command ends up in exactly one node."""
    names = ['p.q.A', 'p.B', 'p.q.r.C', 'p.q.r.D', 's.E', 's.t.u.F', 'p.q.G']
    tree = build_namespace_tree(_descriptors(*names))

    placed = [command.full_name for node in tree.nodes() for command in node.commands]

    assert sorted(placed) == sorted(names)
    for node in tree.nodes():
        for command in node.commands:
            assert command.namespace == node.full_name
    _assert_path_invariant(tree)


def test_build_below_parent_ignores_other_branches():
    """Test the recursive step scoped to an existing parent node."""
    tree = NamespaceTree()
    parent = tree.add_node('a', None)

    created = build(tree, _descriptors('a.b.Foo', 'a.Baz', 'x.y.Other'), parent)

    assert [node.full_name for node in created] == ['a.b']
    assert _commands(parent) == ['Baz']
    assert tree.find('x') is None
    assert tree.find('x.y') is None


def test_build_reuses_known_children():
    """Test that commands of an existing sub-namespace are added to its node."""
    tree = NamespaceTree()
    parent = tree.add_node('a', None)
    for child in build(tree, _descriptors('a.b.Foo'), parent):
        tree.attach_child(parent, child)

    assert build(tree, _descriptors('a.b.Bar', 'a.b.c.Deep'), parent) == []

    (known,) = parent.packages
    assert known.full_name == 'a.b'
    assert _commands(known) == ['Foo', 'Bar']
    assert [child.full_name for child in known.packages] == ['a.b.c']
    assert _commands(tree.find('a.b.c')) == ['Deep']
    assert len(tree) == 3


def test_trees_of_overlapping_configurations_are_distinct():
    """Test that overlapping configurations get their own node graphs."""
    descriptors = _descriptors('a.Baz', 'a.b.Foo', 'a.b.c.Bar', 'other.Thing')

    first = build_namespace_tree(filter_commands(descriptors, ['a']))
    second = build_namespace_tree(filter_commands(descriptors, ['a.b', 'other']))

    assert [root.full_name for root in first.roots] == ['a']
    assert [root.full_name for root in second.roots] == ['a', 'other']
    assert _commands(second.roots[0]) == []
    shared_first = first.find('a.b.c')
    shared_second = second.find('a.b.c')
    assert _commands(shared_first) == _commands(shared_second) == ['Bar']
    assert shared_first != shared_second
    assert shared_first.tree is not shared_second.tree


def test_nodes_belong_to_their_tree():
    """Test that a node of one tree cannot be used in another."""
    node = NamespaceTree().add_node('a', None)

    with pytest.raises(ValueError):
        NamespaceTree().add_node('a.b', node)
