"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the test suite.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add parent directory to path so imports work
# This allows: from models import ... to find /project/models.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from logging_config import setup_logging
from models import CommandResult, ServerConfig, UserCredential


# Configure logging once for entire test session
@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging for all tests.

    Runs once before any tests (scope="session", autouse=True).
    """
    setup_logging(verbose=False)
    yield


@pytest.fixture
def ok_result() -> CommandResult:
    """Successful command result."""
    return CommandResult(returncode=0, stdout="", stderr="")


@pytest.fixture
def failed_result() -> CommandResult:
    """Failed command result."""
    return CommandResult(returncode=1, stdout="", stderr="boom")


@pytest.fixture
def sample_users() -> list[UserCredential]:
    """Two valid accounts."""
    return [
        UserCredential.parse("alice:pw1"),
        UserCredential.parse("bob:pw2"),
    ]


@pytest.fixture
def sample_server_config(sample_users: list[UserCredential]) -> ServerConfig:
    """Typical resolved configuration."""
    return ServerConfig(
        local_ip="192.168.99.1",
        client_range="192.168.99.100-120",
        dns_servers=["1.1.1.1", "8.8.8.8"],
        users=sample_users,
    )
