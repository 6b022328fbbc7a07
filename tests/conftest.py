"""Mini README: Shared fixtures for the BillingRecord test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from billingrecord.configuration import BillingRecordSettings, get_settings
from billingrecord.interface import create_application
from billingrecord.ledger import Ledger


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture()
def client(ledger: Ledger) -> TestClient:
    settings = BillingRecordSettings(currency_symbol="¥", placeholder_description="unspecified")
    return TestClient(create_application(ledger=ledger, settings=settings))
