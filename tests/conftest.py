"""Pytest configuration and fixtures for DFA Services tests."""

from types import SimpleNamespace
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from dfa_services.config import DfaSettings
from dfa_services.services import v1_11, v1_12
from dfa_services.user import DfaUser

TEST_SERVER = "https://dfa.example.com/"


@pytest.fixture
def settings() -> DfaSettings:
    """Settings with test credentials, ignoring any .env file."""
    return DfaSettings(
        _env_file=None,
        user_name="u",
        password="p",
        auth_token=None,
        application_name="app",
        dfa_api_server=TEST_SERVER,
        proxy=None,
        request_timeout=None,
    )


@pytest.fixture
def user(settings: DfaSettings) -> DfaUser:
    """A user whose headers come from the test settings."""
    return DfaUser(settings=settings)


@pytest.fixture
def login_profile() -> SimpleNamespace:
    """Profile returned by LoginRemoteService.authenticate."""
    return SimpleNamespace(name="u", token="T1")


@pytest.fixture
def mock_login(login_profile: SimpleNamespace) -> Generator[MagicMock, None, None]:
    """Patch v1.12 LoginRemoteService.authenticate."""
    with patch.object(
        v1_12.LoginRemoteService, "authenticate", return_value=login_profile
    ) as mock:
        yield mock


@pytest.fixture
def mock_login_v1_11(login_profile: SimpleNamespace) -> Generator[MagicMock, None, None]:
    """Patch v1.11 LoginRemoteService.authenticate."""
    with patch.object(
        v1_11.LoginRemoteService, "authenticate", return_value=login_profile
    ) as mock:
        yield mock
