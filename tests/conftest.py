"""
Shared fixtures for INI reader tests
"""
import pytest


@pytest.fixture
def write_ini(tmp_path):
    """Write text into an INI file under tmp_path and return its path"""
    def _write(text, name="test.ini", encoding="utf-8"):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path
    return _write


@pytest.fixture
def valid_ini(write_ini):
    return write_ini(
        "; leading comment\n"
        "# another one\n"
        "\n"
        "[server]\n"
        "host = example.org   ; inline comment\n"
        "port = 8080\n"
        "timeout = 2.5\n"
        "motd = \"hello ; world\"\n"
        "\n"
        "[flags]\n"
        "debug = on\n"
        "verbose = No\n"
        "weird = maybe\n"
        "big = 9000000000\n"
    )
