"""Shared fixtures: an in-process responder and a fresh service per test."""

import pytest

from fakes import FakeGateway
from solace.errors import UpstreamError
from solace.service import CompanionService, build_service


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def failing_gateway():
    return FakeGateway(error=UpstreamError("Failed to get AI response"))


@pytest.fixture
def service(gateway) -> CompanionService:
    return build_service(gateway=gateway)
