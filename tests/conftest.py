import json
from unittest.mock import MagicMock

import pytest

import clients


@pytest.fixture(autouse=True)
def lambda_env(monkeypatch):
    monkeypatch.setenv("USER_POOL_ID", "eu-west-1_testpool")
    monkeypatch.setenv("TABLE_NAME", "users-test")
    monkeypatch.delenv("SERVICE_ACCOUNT", raising=False)


@pytest.fixture
def cognito(monkeypatch):
    client = MagicMock()
    client.admin_create_user.return_value = {
        "User": {
            "Username": "jo@example.com",
            "Attributes": [
                {"Name": "sub", "Value": "uid-123"},
                {"Name": "email", "Value": "jo@example.com"},
            ],
        }
    }
    monkeypatch.setattr(clients, "cognito", lambda: client)
    return client


@pytest.fixture
def table(monkeypatch):
    table = MagicMock()
    monkeypatch.setattr(clients, "table", lambda: table)
    return table


@pytest.fixture
def registration():
    return {
        "email": "jo@example.com",
        "password": "s3cret-Pass!",
        "firstName": "Jo",
        "lastName": "Bloggs",
        "category": "admin",
        "phone": "+33600000000",
    }


def post_event(body, **extra):
    event = {"httpMethod": "POST", "body": body if isinstance(body, str) else json.dumps(body)}
    event.update(extra)
    return event
