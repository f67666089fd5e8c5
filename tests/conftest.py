"""Root conftest - isolates tests from the real user configuration.

Sets MEMOARCHIVER_DIR to a throwaway directory and clears the
MEMOARCHIVER_* overrides BEFORE any memoarchiver module is imported, so a
developer's own settings.toml or environment never leaks into tests.
"""

import os
import tempfile

import pytest

for _key in (
    "MEMOARCHIVER_PATH",
    "MEMOARCHIVER_EXT",
    "MEMOARCHIVER_PATH_MODE",
    "MEMOARCHIVER_LOG_LEVEL",
):
    os.environ.pop(_key, None)

# Force-set (not setdefault) to prevent real env vars from leaking into tests
os.environ["MEMOARCHIVER_DIR"] = tempfile.mkdtemp(prefix="memoarchiver-test-")


@pytest.fixture(autouse=True)
def _restore_environ():
    """Restore os.environ after each test (load_dotenv writes to it directly)."""
    saved = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(saved)
