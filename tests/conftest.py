import pytest

from lineshell.shell import Shell


@pytest.fixture
def shell():
    return Shell()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary directory"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


