from unittest.mock import AsyncMock, MagicMock

import pytest

from use_cases.bootstrap import build_app
from use_cases.gateways import ResponsePayload


def successful_registration_stub():
    return ResponsePayload(success=True)


def failed_registration_stub():
    return ResponsePayload(
        success=False,
        server_message="Failed: credentials not valid must be (email and >3 chars on password).",
    )


def successful_login_stub():
    return ResponsePayload(success=True, token="a@b1234.com", email="a@b.com")


def failed_login_stub():
    return ResponsePayload(success=False, server_message="Failed: no user record.")


@pytest.fixture
def router_gateway():
    return MagicMock()


@pytest.fixture
def data_gateway():
    gateway = MagicMock()
    gateway.post = AsyncMock(return_value=successful_login_stub())
    return gateway


@pytest.fixture
def app(data_gateway, router_gateway):
    return build_app(data_gateway, router_gateway)
