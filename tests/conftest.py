import sys
from pathlib import Path

import pytest

PATH_ROOT = Path(__file__).resolve().parent.parent
if str(PATH_ROOT) not in sys.path:
    sys.path.insert(0, str(PATH_ROOT))


@pytest.fixture
def write_config(tmp_path):
    def write(text, name='config.yml'):
        path = tmp_path / name
        path.write_text(text, encoding='UTF-8')
        return path

    return write


@pytest.fixture
def set_version(monkeypatch):
    """Stamp with a given version instead of the package's own."""
    from namestamp import version

    def set(value):
        monkeypatch.setattr(version, '__version__', value)

    return set
