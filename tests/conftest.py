"""Shared fixtures for the contact tool tests."""
from unittest.mock import MagicMock

import pytest

from core.hubspot_client import HubSpotClient


@pytest.fixture
def mock_client():
    """A HubSpotClient stand-in; every method is a MagicMock."""
    return MagicMock(spec=HubSpotClient)
