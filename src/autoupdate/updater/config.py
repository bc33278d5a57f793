"""
Checker configuration and state management for autoupdate
"""

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from autoupdate.updater.errors import FormatError

DEFAULT_QUERY_URI = 'http://localhost/'
DEFAULT_CURRENT_VERSION = '1.0'
CONFIG_DIR_ENV = 'AUTOUPDATE_CONFIG_DIR'


class UpdateConfig:
    """
    Manages update checker configuration and state.

    Stores configuration in ~/.autoupdate/ (or $AUTOUPDATE_CONFIG_DIR) and
    tracks the last check time and the latest version seen.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize update configuration.

        Args:
            config_dir: Optional custom config directory.
                       Defaults to $AUTOUPDATE_CONFIG_DIR, then ~/.autoupdate/
        """
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(env_dir) if env_dir else Path.home() / '.autoupdate'
        self.config_dir = Path(config_dir)

        self.config_file = self.config_dir / 'config.json'
        self.state_file = self.config_dir / 'state.json'

        self._load_config()
        self._load_state()

    def _read_json(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except ValueError as e:
            raise FormatError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise FormatError(f"Expected a JSON object in {path}")
        return data

    def _load_config(self):
        """Load configuration from file or set defaults"""
        config = self._read_json(self.config_file)

        self.query_uri: str = config.get('query_uri', DEFAULT_QUERY_URI)
        self.current_version: str = config.get('current_version', DEFAULT_CURRENT_VERSION)
        self.headers: Dict[str, str] = dict(config.get('headers') or {})
        self.timeout_seconds: float = config.get('timeout_seconds', 30)
        self.verify_tls: bool = config.get('verify_tls', True)

    def _load_state(self):
        """Load checker state from file or initialize defaults"""
        state = self._read_json(self.state_file)

        self.last_check_time: Optional[str] = state.get('last_check_time')
        self.last_latest_version: Optional[str] = state.get('last_latest_version')

    def save_config(self):
        """Save configuration to file"""
        config = {
            'query_uri': self.query_uri,
            'current_version': self.current_version,
            'headers': self.headers,
            'timeout_seconds': self.timeout_seconds,
            'verify_tls': self.verify_tls
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2)

    def save_state(self):
        """Save checker state to file"""
        state = {
            'last_check_time': self.last_check_time,
            'last_latest_version': self.last_latest_version
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.state_file, 'w', encoding='utf-8') as f:
            json.dump(state, f, indent=2)

    def record_check(self, latest_version: Optional[str] = None):
        """
        Record that an update check was performed.

        Args:
            latest_version: Latest version reported by the manifest
        """
        self.last_check_time = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
        if latest_version is not None:
            self.last_latest_version = str(latest_version)
        self.save_state()

    def __repr__(self) -> str:
        return f"UpdateConfig(version={self.current_version}, uri={self.query_uri})"
