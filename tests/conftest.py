from __future__ import annotations

import logging

import pytest

from featureview.config.settings import configure


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test against default settings and restore them afterwards."""
    previous = configure()
    yield
    configure(previous)


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("featureview")
    level = logger.level
    yield logger
    logger.setLevel(level)
