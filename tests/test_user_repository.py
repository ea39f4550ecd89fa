from unittest.mock import MagicMock

import bcrypt
import pytest

from core.exceptions import UserAlreadyExistsError
from data.db import Database
from data.models import User
from data.user_repository import UserRepository


def _user(password_hash):
    return User(id=1, username="user", email="user@example.com", password_hash=password_hash)


def test_verify_credentials_success():
    db = MagicMock(spec=Database)
    repo = UserRepository(db)
    hashpw = bcrypt.hashpw(b"secret", bcrypt.gensalt(rounds=4)).decode()
    repo.get_user_by_email = MagicMock(return_value=_user(hashpw))
    user = repo.verify_credentials("user@example.com", "secret")
    assert user.id == 1


def test_verify_credentials_wrong_password():
    db = MagicMock(spec=Database)
    repo = UserRepository(db)
    hashpw = bcrypt.hashpw(b"secret", bcrypt.gensalt(rounds=4)).decode()
    repo.get_user_by_email = MagicMock(return_value=_user(hashpw))
    assert repo.verify_credentials("user@example.com", "wrong") is None


def test_verify_credentials_unknown_email():
    db = MagicMock(spec=Database)
    repo = UserRepository(db)
    repo.get_user_by_email = MagicMock(return_value=None)
    assert repo.verify_credentials("nobody@example.com", "secret") is None


def test_verify_credentials_invalid_hash_rejected():
    db = MagicMock(spec=Database)
    repo = UserRepository(db)
    repo.get_user_by_email = MagicMock(return_value=_user("not-a-bcrypt-hash"))
    assert repo.verify_credentials("user@example.com", "secret") is None


def test_create_user_stores_hash_not_password(database):
    repo = UserRepository(database, bcrypt_rounds=4)
    user_id = repo.create_user("alice", "alice@example.com", "hunter22")

    user = repo.get_user_by_id(user_id)
    assert user.username == "alice"
    assert user.password_hash != "hunter22"
    assert repo.verify_credentials("alice@example.com", "hunter22") == user


@pytest.mark.parametrize("username,email,conflict", [
    ("alice", "other@example.com", "alice"),
    ("bob", "alice@example.com", "alice@example.com"),
])
def test_create_user_rejects_duplicates(database, username, email, conflict):
    repo = UserRepository(database, bcrypt_rounds=4)
    repo.create_user("alice", "alice@example.com", "hunter22")

    with pytest.raises(UserAlreadyExistsError) as excinfo:
        repo.create_user(username, email, "hunter22")

    assert excinfo.value.identifier == conflict
    assert repo.get_user_count() == 1
