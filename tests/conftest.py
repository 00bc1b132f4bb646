"""Test support for hmrpc."""

from __future__ import annotations

import logging
from unittest.mock import Mock, patch

import pytest

from hmrpc.client import Client

from tests import helper

logging.basicConfig(level=logging.INFO)

# pylint: disable=protected-access, redefined-outer-name


@pytest.fixture(autouse=True)
def teardown():
    """Clean up."""
    patch.stopall()


@pytest.fixture
def proxy() -> Mock:
    """Return a proxy mock answering with the wire fixtures."""
    return helper.get_mock_proxy()


@pytest.fixture
def client(proxy: Mock) -> Client:
    """Return a client on top of the proxy mock."""
    return Client(proxy=proxy)
