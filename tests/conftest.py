"""Root conftest: shared test configuration."""

import os

import pytest

from datadip_mock.config import get_settings

# Tests run against defaults, not whatever the shell exported
for _var in ("PORT", "HOST", "LOG_LEVEL", "LOG_FORMAT"):
    os.environ.pop(_var, None)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
