"""Pytest configuration for the client test suite.

Clears the cached timeout presets around each test so environment overrides
set with ``monkeypatch`` never leak between tests.
"""

from __future__ import annotations

from typing import Iterator, Tuple
import io
import logging

import pytest

from backoffice_client.config import ClientSettings, reset_timeout_config
from backoffice_client.tests.utils import RecordingNotifier, make_console


@pytest.fixture(autouse=True)
def fresh_timeout_config() -> Iterator[None]:
    reset_timeout_config()
    yield
    reset_timeout_config()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def console() -> Tuple[logging.Logger, io.StringIO]:
    return make_console()


@pytest.fixture()
def dev_settings() -> ClientSettings:
    return ClientSettings(api_url="https://api.example.com", environment="development")


@pytest.fixture()
def prod_settings() -> ClientSettings:
    return ClientSettings(
        api_url="https://api.example.com",
        environment="production",
        log_endpoint="https://logs.example.com/ingest",
        page_url="https://admin.example.com/customers",
        user_agent="backoffice-tests/1.0",
    )
