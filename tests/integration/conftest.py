"""Fixtures for tests that drive the assembled application.

Importing ``app`` initializes every bounded context. Each test gets a
fresh client and every domain's stores are cleared afterwards.
"""

import importlib

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def app_module():
    return importlib.import_module("app")


@pytest.fixture()
def client(app_module, reset_domain):
    yield TestClient(app_module.app)

    for domain in app_module.DOMAINS:
        with domain.domain_context():
            reset_domain(domain)
