"""
Pytest Configuration and Fixtures

Shared fixtures for all tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Dict, Any

from richtag.tags import TagScanner


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def scanner() -> TagScanner:
    """Fresh scanner instance."""
    return TagScanner()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove RICHTAG_* overrides from the environment."""
    monkeypatch.delenv("RICHTAG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RICHTAG_LOG_FILE", raising=False)
    return monkeypatch


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    """Sample configuration for testing."""
    return {
        "log_level": "debug",
        "verbose_logging": True,
        "console_output": False,
    }


@pytest.fixture
def sample_tags() -> list:
    """Sample raw tags for testing."""
    return [
        "<b>",
        "</b>",
        "<i>",
        "<color=#FF00FFFF>",
        "</color>",
        '<size="14">',
        "<delay=0.5>",
    ]


@pytest.fixture
def sample_dialogue() -> str:
    """Sample display text with embedded markup."""
    return (
        "Hello <b>traveler</b>!<delay=0.5> The <color=#FF0000FF>red</color> "
        "door is <delay=0.5>locked.<anim=shake>!</anim> Try again."
    )
