"""
PURPOSE: Manage version information for the MNQ Strat webhook relay.

This module reads version data from version.json and exposes it through
a get_version() function. Version data is cached after the first read
to minimize file I/O operations.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

_version_cache: Optional[Dict[str, Any]] = None

VERSION_FILE: Path = Path(__file__).parent.parent.parent / "version.json"


def get_version() -> Dict[str, Any]:
    """
    PURPOSE: Retrieve version information for the relay.

    Reads version.json from the project root and caches the result
    in a module-level variable. Subsequent calls return the cached
    version data without re-reading the file.

    Returns:
        Dict[str, Any]: Version information including version string,
            codename and updated_at timestamp.

    Raises:
        FileNotFoundError: If version.json cannot be found in the project root.
        json.JSONDecodeError: If version.json is invalid JSON.
    """
    global _version_cache

    if _version_cache is not None:
        return _version_cache

    with open(VERSION_FILE, "r", encoding="utf-8") as f:
        _version_cache = json.load(f)

    return _version_cache
