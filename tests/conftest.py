import pytest

from frpconf.core.provider import ConfigProvider

AUTHORITY = "frpconf.config"


class _Gate:
    def __init__(self, read=False, write=False):
        self.read = read
        self.write = write

    def can_read(self) -> bool:
        return self.read

    def can_write(self) -> bool:
        return self.write


@pytest.fixture
def gate():
    return _Gate()


@pytest.fixture
def provider(tmp_path, gate):
    return ConfigProvider(tmp_path, AUTHORITY, gate)


@pytest.fixture
def make_entry(tmp_path):
    def _make(type_token, name, content=b""):
        directory = tmp_path / type_token
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(content)
        return path

    return _make
