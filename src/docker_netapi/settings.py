"""
Client settings for docker-netapi
Settings stored in a JSON file, overridable from the environment
"""

import json
import os
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    'docker_socket_path': '',
    'timeout': 60,
    'api_version': '',
    'log_level': 'WARNING',
}

# environment variable -> setting key
ENV_OVERRIDES = {
    'DOCKER_HOST': 'docker_socket_path',
    'DOCKER_API_VERSION': 'api_version',
    'DOCKER_CLIENT_TIMEOUT': 'timeout',
}


class ClientSettings:
    """Settings used to build a DockerClient"""

    @staticmethod
    def get_user_settings_path() -> str:
        """Get path to user settings file"""
        if os.name == 'nt':  # Windows
            base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # macOS, Linux
            base_dir = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return os.path.join(base_dir, 'docker-netapi', 'settings.json')

    def __init__(self, settings_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """
        Initialize settings

        Args:
            settings_file: JSON settings file (default: per-user path)
            environ: Environment mapping (default: os.environ)
        """
        self.settings_file = settings_file or self.get_user_settings_path()
        self.environ = os.environ if environ is None else environ
        self.settings: Dict[str, Any] = {}

        self.load()

    def _load_file_settings(self) -> Dict[str, Any]:
        if not os.path.exists(self.settings_file):
            return {}
        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load settings from {self.settings_file}: {e}")
            return {}
        if not isinstance(loaded, dict):
            logger.warning(f"Ignoring settings file {self.settings_file}: expected a JSON object")
            return {}
        logger.info(f"Settings loaded from {self.settings_file}")
        return loaded

    def load(self):
        """Load defaults, then the settings file, then environment overrides"""
        self.settings = DEFAULT_SETTINGS.copy()
        self.settings.update(self._load_file_settings())

        for env_key, key in ENV_OVERRIDES.items():
            value = self.environ.get(env_key)
            if value:
                self.settings[key] = value

        try:
            self.settings['timeout'] = int(self.settings['timeout'])
        except (TypeError, ValueError):
            logger.warning(f"Invalid timeout {self.settings['timeout']!r}, using default")
            self.settings['timeout'] = DEFAULT_SETTINGS['timeout']

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get setting value

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Setting value
        """
        return self.settings.get(key, default)

    @property
    def base_url(self) -> Optional[str]:
        return self.settings.get('docker_socket_path') or None

    @property
    def timeout(self) -> int:
        return self.settings['timeout']

    @property
    def api_version(self) -> Optional[str]:
        version = self.settings.get('api_version') or None
        if version and version.startswith('v'):
            version = version[1:]
        return version

    @property
    def log_level(self) -> str:
        return str(self.settings.get('log_level', 'WARNING')).upper()
