"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "teamcity-client"
APP_AUTHOR = "teamcity-client"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_SERVER_URL = "TEAMCITY_ADDR"
ENV_TOKEN = "TEAMCITY_TOKEN"
ENV_USERNAME = "TEAMCITY_USER"
ENV_PASSWORD = "TEAMCITY_PASSWORD"
ENV_PROFILE = "TEAMCITY_PROFILE"

# API defaults
TOKEN_API_BASE = "/app/rest/"
BASIC_AUTH_API_BASE = "/httpAuth/app/rest/"
DEFAULT_TIMEOUT = 30.0
