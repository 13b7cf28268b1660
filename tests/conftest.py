"""
Pytest configuration for StackScript tests.
"""
import sys
import os

import pytest

# Make `import stackscript` work from a source checkout
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
	"""Point config loading at an empty location and clear overriding env vars."""
	monkeypatch.setenv("STACKSCRIPT_CONFIG", str(tmp_path / "config.json"))
	monkeypatch.delenv("STACKSCRIPT_LOG_LEVEL", raising=False)
	monkeypatch.delenv("STACKSCRIPT_STRICT_STRINGS", raising=False)
	return tmp_path / "config.json"
