"""Default paths, environment variable names, and API constants."""

from __future__ import annotations

import platformdirs

from vimeo_client import __version__

APP_NAME = "vimeo-client"
APP_AUTHOR = "vimeo-client"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_TOKEN = "VIMEO_TOKEN"
ENV_PROFILE = "VIMEO_PROFILE"
ENV_BASE_URL = "VIMEO_BASE_URL"

# API defaults
DEFAULT_BASE_URL = "https://api.vimeo.com/"
DEFAULT_USER_AGENT = f"vimeo-client/{__version__}"
DEFAULT_TIMEOUT = 30.0
MEDIA_TYPE_VERSION = "application/vnd.vimeo.*+json;version=3.2"

# Rate limit headers
HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_RESET = "X-RateLimit-Reset"
