"""Shared fixtures: the app runs against an in-memory item store."""

from __future__ import annotations

import pytest

from inventory_api import create_app
from inventory_api.config import TestingConfig
from inventory_api.repositories.item_repository import InMemoryItemRepository

HAMBURGUESA = {
    "name": "Hamburguesa",
    "type": "Alimentación",
    "price": 2.55,
    "amount": 5621,
}


@pytest.fixture
def repository() -> InMemoryItemRepository:
    return InMemoryItemRepository()


@pytest.fixture
def app(repository):
    return create_app(TestingConfig, repository=repository)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def hamburguesa() -> dict:
    return dict(HAMBURGUESA)
