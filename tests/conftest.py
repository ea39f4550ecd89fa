import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config.app_config import AppConfig, DatabaseConfig, SecurityConfig, GeneratorConfig
from api.app import create_app
from api.context import EXTENSION_KEY
from data.db import Database

TEST_SECRET = "s" * 32


@pytest.fixture
def config(tmp_path):
    return AppConfig(
        database=DatabaseConfig(path=str(tmp_path / "traffic.db")),
        security=SecurityConfig(jwt_secret=TEST_SECRET, bcrypt_rounds=4),
        generator=GeneratorConfig(enabled=False),
    )


@pytest.fixture
def app(config):
    app = create_app(config)
    yield app
    app.extensions[EXTENSION_KEY].cleanup()


@pytest.fixture
def container(app):
    return app.extensions[EXTENSION_KEY]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    client.post("/api/auth/signup", json={
        "username": "viewer",
        "email": "viewer@example.com",
        "password": "correct-horse",
    })
    response = client.post("/api/auth/login", json={
        "email": "viewer@example.com",
        "password": "correct-horse",
    })
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def database(tmp_path):
    db = Database(str(tmp_path / "repo.db"))
    db.initialize_schema()
    yield db
    db.close_pool()
