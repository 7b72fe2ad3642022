"""
Utility functions for launchbar.
"""

import os
from pathlib import Path


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/launchbar).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_package_config_path(filename: str = "launch_config.json") -> Path:
    """
    Path of a configuration file shipped inside the package.

    Args:
        filename: Name of the file under ``launchbar/config``

    Returns:
        Absolute path to the packaged file (it may not exist)
    """
    return Path(__file__).parent / "config" / filename
