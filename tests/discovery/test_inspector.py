import dataclasses
import pytest
import sys
from ipcstub.core.common.command import CommandDescriptor
from ipcstub.core.discovery.inspector import inspect_command
from ipcstub.ipc import (
    Deprecated,
    Description,
    IpcCommand,
    Param,
    Params,
    Return,
    Returns,
    Tag,
    Throw,
    Throws,
)


@dataclasses.dataclass(frozen=True)
class Audited(Tag, meta=True):
    level: str = 'full'


@dataclasses.dataclass(frozen=True)
class Owner(Tag):
    team: str


def test_description_and_parameters():
    """Test a command with a description and two parameters."""

    @Description('Lists users')
    @Params(Param('limit', 'maximum number of users'), Param('offset', 'first user'))
    class ListUsers(IpcCommand):
        def execute(self, call, result):
            pass

    meta = inspect_command(CommandDescriptor.of('app.ListUsers', ListUsers))

    assert meta.description == 'Lists users'
    assert [param.name for param in meta.params] == ['limit', 'offset']
    assert not meta.deprecated
    assert not meta.has_meta_informations


def test_defaults_without_tags():
    """Test that a command without tags has empty metadata."""

    class Bare(IpcCommand):
        def execute(self, call, result):
            pass

    meta = inspect_command(Bare)

    assert meta.description == ''
    assert meta.params == ()
    assert meta.throws == ()
    assert meta.returns == ()
    assert meta.tags == ()
    assert not meta.deprecated


def test_single_tag_comes_before_group():
    """Test that singular tags precede the items of their group."""

    @Params(Param('b'), Param('c'))
    @Param('a')
    @Throws(Throw('KeyError'), Throw('ValueError'))
    @Throw('OSError')
    @Return('first')
    @Returns(Return('second'))
    class Ordered(IpcCommand):
        def execute(self, call, result):
            pass

    meta = inspect_command(Ordered)

    assert [param.name for param in meta.params] == ['a', 'b', 'c']
    assert [throw.name for throw in meta.throws] == ['OSError', 'KeyError', 'ValueError']
    assert [ret.name for ret in meta.returns] == ['first', 'second']


def test_deprecated_tag():
    """Test that the Deprecated tag marks a command deprecated."""

    @Deprecated('use NewCommand')
    class Old(IpcCommand):
        def execute(self, call, result):
            pass

    assert inspect_command(Old).deprecated


@pytest.mark.skipif(sys.version_info < (3, 13), reason='warnings.deprecated needs Python 3.13')
def test_pep702_deprecation():
    """Test that warnings.deprecated marks a command deprecated."""
    import warnings

    @warnings.deprecated('use NewCommand')
    class Old(IpcCommand):
        def execute(self, call, result):
            pass

    assert inspect_command(Old).deprecated


def test_meta_informations():
    """Test that only tags declared with the meta marker count."""

    @Owner('payments')
    class Plain(IpcCommand):
        def execute(self, call, result):
            pass

    @Owner('payments')
    @Audited()
    class Marked(IpcCommand):
        def execute(self, call, result):
            pass

    assert not inspect_command(Plain).has_meta_informations
    meta = inspect_command(Marked)
    assert meta.has_meta_informations
    assert meta.tags == (Owner('payments'), Audited())


def test_descriptor_meta_property():
    """Test that descriptors expose the metadata of their command."""

    @Description('Pings')
    class Ping(IpcCommand):
        def execute(self, call, result):
            pass

    assert CommandDescriptor.of('net.Ping', Ping).meta.description == 'Pings'
