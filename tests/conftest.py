"""
conftest.py
-----------
Shared pytest fixtures for tomlreadme tests.

Provides fixtures for:
- Temporary document files
- Sample TOML documents
- Canonical Entry / Config factories
"""
import pytest
from pathlib import Path
from datetime import date
from tempfile import TemporaryDirectory

from tomlreadme.dataclasses.entry import Config, Entry


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_document(tmp_dir):
    """Write text to a file in tmp_dir and return its path."""
    def _write(text: str, name: str = "entries.toml") -> Path:
        path = tmp_dir / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# ----- Sample Document Fixtures -----

@pytest.fixture
def minimal_toml():
    """One entry with only the required fields."""
    return """
[[entries]]
title = "Hello"
date = 2024-09-30
at = "Earth"
senpan = ""
"""


@pytest.fixture
def legacy_toml():
    """Document using the legacy [[yasunori]] key and a header."""
    return '''
markdown_header = """
# yasunori

"""

[[yasunori]]
id = 1
title = "Hello"
date = "2024-09-30"
at = "Earth"
senpan = ""
content = """
yasunori said,
Let there be light.
"""
meta = """
"""
'''


@pytest.fixture
def multi_entry_toml():
    """Three entries in non-chronological order."""
    return '''
markdown_header = "# Archive\\n"

[[entries]]
id = 3
title = "Third"
date = 2024-10-02
at = "vim-jp #times-yasunori"
senpan = "takeokunn"
content = "c3\\n"
meta = "m3\\n"

[[entries]]
id = 1
title = "First"
date = 2024-09-01
at = "vim-jp"
senpan = "None"

[[entries]]
id = 2
title = "Second"
date = 2024-09-15
at = "slack"
senpan = "someone"
content = "c2\\n"
'''


# ----- Model Factories -----

def make_entry(**overrides) -> Entry:
    """Build an Entry with sensible defaults."""
    fields = dict(
        id=1,
        title="Hello World!",
        date=date(2024, 9, 30),
        content="",
        meta="",
        at="vim-jp",
        senpan="None",
    )
    fields.update(overrides)
    return Entry(**fields)


@pytest.fixture
def hello_entry():
    """The canonical single-entry example."""
    return make_entry()


@pytest.fixture
def hello_config(hello_entry):
    """Config holding only hello_entry."""
    return Config(markdown_header="", entries=(hello_entry,))


@pytest.fixture
def entry_factory():
    """Expose make_entry to tests."""
    return make_entry
