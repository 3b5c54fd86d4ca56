"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
import pytest

import gitreview.config as config
from gitreview.options import ReviewOptions


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Restore the active configuration and clear config env vars around each test."""
    monkeypatch.delenv(config.MODEL_ID_ENV_VAR, raising=False)
    monkeypatch.delenv(config.PROVIDER_ENV_VAR, raising=False)
    saved = (config.ACTIVE_PROVIDER, config.ACTIVE_MODEL, config.MAX_TOKENS, config.TEMPERATURE)
    yield
    config.ACTIVE_PROVIDER, config.ACTIVE_MODEL, config.MAX_TOKENS, config.TEMPERATURE = saved


@pytest.fixture
def sample_diff():
    """Sample git diff for testing."""
    return """diff --git a/app/auth.py b/app/auth.py
index 1234567..abcdefg 100644
--- a/app/auth.py
+++ b/app/auth.py
@@ -1,5 +1,8 @@
 def login(user, password):
-    return check(user, password)
+    query = f"SELECT * FROM users WHERE name = '{user}'"
+    return db.execute(query)
+
+def logout(user):
+    return True
"""


@pytest.fixture
def security_options():
    """Review options using the security template."""
    return ReviewOptions(template="security")


@pytest.fixture
def sample_review():
    """Sample review text as stored in the cache."""
    return (
        "The change rewrites login to query the database directly.\n\n"
        "app/auth.py: the query is built with an f-string and is open to SQL injection. "
        "Use a parameterized query."
    )


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
