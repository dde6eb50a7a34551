"""Test configuration and fixtures for webform."""

import os

# Must be in place before webform resolves its configuration at import time
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("LOG_FILE", None)

from tests.fixtures import *  # noqa: E402,F401,F403
