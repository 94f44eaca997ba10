"""
Centralized environment variable loading for richtag.

Ensures a project-level .env is loaded once so that RICHTAG_* settings are
visible to the config loader.

Usage:
    from richtag.core.env_loader import ensure_env_loaded
    ensure_env_loaded()
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_env_loaded = False


def get_project_root() -> Path:
    """Get the project root directory (where .env is located)."""
    # This file is at richtag/core/env_loader.py
    return Path(__file__).parent.parent.parent


def ensure_env_loaded(env_path: Optional[Path] = None, override: bool = False) -> bool:
    """
    Ensure environment variables from .env are loaded.

    Args:
        env_path: Explicit .env path. Defaults to the project root.
        override: If True, .env values replace variables already set

    Returns:
        True if .env was loaded, False if already loaded or file not found
    """
    global _env_loaded

    if _env_loaded:
        return False

    env_path = Path(env_path) if env_path else get_project_root() / ".env"

    if not env_path.exists():
        return False

    load_dotenv(env_path, override=override)
    _env_loaded = True
    return True


def get_env_setting(key_name: str, fallback_keys: Optional[list[str]] = None) -> Optional[str]:
    """
    Get a setting from the environment, with fallback names.

    Args:
        key_name: Primary environment variable name
        fallback_keys: List of fallback variable names to try

    Returns:
        Value or None if not found
    """
    ensure_env_loaded()

    value = os.getenv(key_name)
    if value:
        return value

    if fallback_keys:
        for fallback in fallback_keys:
            value = os.getenv(fallback)
            if value:
                return value

    return None
