import pytest
import sys
import textwrap
import zipfile
from pathlib import Path


def _locations(module):
    locations = [getattr(module, '__file__', None) or '']
    locations.extend(str(path) for path in getattr(module, '__path__', None) or [])
    return locations


@pytest.fixture(autouse=True)
def isolated_imports(tmp_path_factory):
    """Forget the modules tests import from temporary command libraries."""
    base = tmp_path_factory.getbasetemp()
    prefixes = (str(base), str(base.resolve()))
    modules = set(sys.modules)
    path = list(sys.path)
    yield
    for name in set(sys.modules) - modules:
        module = sys.modules[name]
        if any(location.startswith(prefixes) for location in _locations(module)):
            del sys.modules[name]
    sys.path[:] = path


@pytest.fixture
def make_library(tmp_path):
    """Write a command library below tmp_path and return its root directory."""

    def make(files: dict[str, str], root: str = 'lib') -> Path:
        base = tmp_path / root
        base.mkdir(parents=True, exist_ok=True)
        for relative, source in files.items():
            path = base / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding='utf-8')
        return base

    return make


@pytest.fixture
def make_archive(tmp_path):
    """Write a command library into a zip archive and return its path."""

    def make(files: dict[str, str], name: str = 'lib.zip') -> Path:
        archive = tmp_path / name
        with zipfile.ZipFile(archive, 'w') as zf:
            for relative, source in files.items():
                zf.writestr(relative, textwrap.dedent(source))
        return archive

    return make
