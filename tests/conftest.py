import os

# settings are read once at import time
os.environ["AUTH_SECRET"] = "dev-secret-key-change-in-production"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest

from app.core.config import settings


@pytest.fixture
def secret():
    return settings.AUTH_SECRET
