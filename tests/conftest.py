import os
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def pytest_configure(config):
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep settings independent of the developer's environment.

    Removes any ``MEDIA_TYPE_*`` variables and runs each test from an empty
    directory so a stray ``.env`` file is never read.
    """
    for key in list(os.environ):
        if key.upper().startswith("MEDIA_TYPE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
