"""
Launch configuration provider reading a JSON file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from launchbar.core.launch_config import LaunchConfig, load_launch_config


class FileLaunchConfigProvider:
    """Loads (and caches) the launch configuration from disk."""

    def __init__(self, config_path: Optional[str | Path] = None) -> None:
        self._config_path = config_path
        self._config: Optional[LaunchConfig] = None

    def fetch_launch_config(self) -> LaunchConfig:
        if self._config is None:
            self._config = load_launch_config(self._config_path)
        return self._config

    def reload(self) -> LaunchConfig:
        self._config = None
        return self.fetch_launch_config()
