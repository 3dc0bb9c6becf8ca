"""Shared fixtures."""

from __future__ import annotations

import pytest

from federate.config import OAuth1Settings
from federate.identity import OAuth1Info, passthrough
from federate.providers import LinkedInProvider
from tests.mocks import FakeHTTPLayer, FakeSigner


@pytest.fixture
def settings() -> OAuth1Settings:
    return OAuth1Settings(consumer_key="ckey", consumer_secret="csecret")


@pytest.fixture
def auth_info() -> OAuth1Info:
    return OAuth1Info(token="tok", secret="sec")


@pytest.fixture
def make_provider(settings):
    """Build a provider around a FakeHTTPLayer; returns (provider, http, signer)."""

    def _make(payload=None, *, error=None, json_error=None, builder=passthrough):
        http = FakeHTTPLayer(payload, error=error, json_error=json_error)
        signer = FakeSigner()
        provider = LinkedInProvider(settings, http, builder, signer=signer)
        return provider, http, signer

    return _make
