"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from commitflow import config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    mock_dir = temp_dir / ".commitflow"
    mocker.patch("commitflow.global_config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture(autouse=True)
def reset_active_config(monkeypatch):
    """Restore module-level active config values after each test."""
    for name, value in {
        "ACTIVE_MODEL": config.DEFAULT_MODEL,
        "OLLAMA_HOST": config.DEFAULT_OLLAMA_HOST,
        "TIMEOUT": config.DEFAULT_TIMEOUT,
        "FALLBACK_MESSAGE": config.DEFAULT_FALLBACK_MESSAGE,
        "SHOW_LINE_NUMBERS": config.DEFAULT_SHOW_LINE_NUMBERS,
        "COLLAPSE_CONTEXT": config.DEFAULT_COLLAPSE_CONTEXT,
    }.items():
        monkeypatch.setattr(config, name, value)
    monkeypatch.delenv(config.MODEL_ENV_VAR, raising=False)
    monkeypatch.delenv(config.HOST_ENV_VAR, raising=False)


@pytest.fixture
def sample_diff():
    """Sample two-file staged diff."""
    return """diff --git a/new_file.py b/new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/new_file.py
@@ -0,0 +1,2 @@
+def hello():
+    print("Hello, world!")
diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,3 +1,4 @@
 def main():
-    print("old")
+    print("new")
+    return 0
 
"""


@pytest.fixture
def long_context_diff():
    """Diff whose single hunk has a run of 25 unchanged lines."""
    context = "\n".join(f" line {i}" for i in range(1, 26))
    return f"@@ -10,27 +10,27 @@\n-old first\n+new first\n{context}\n-old last\n+new last\n"


class FakeRunner:
    """Model runner returning canned output."""

    def __init__(self, reply="feat: add greeting", model="test-model"):
        self.reply = reply
        self.model = model
        self.prompts = []

    def run(self, prompt):
        self.prompts.append(prompt)
        return self.reply


@pytest.fixture
def fake_runner():
    """A model runner that answers with a fixed commit message."""
    return FakeRunner()
