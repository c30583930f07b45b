import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'strata' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from strata.core.config import ENV_PREFIX
from strata.core.logging_setup import reset_logging_for_tests
from helpers.site import SiteBuilder


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Drop STRATA_* overrides from the developer shell and reset logging."""
    import os

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_logging_for_tests()


@pytest.fixture
def site(tmp_path) -> SiteBuilder:
    """A throwaway site with its own system layer under tmp_path."""
    return SiteBuilder(tmp_path)
