"""Tests for the Authenticating concept."""

import pytest

from agora.core.errors import (
    BadValuesError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
)
from agora.models import User


def test_create_user_hides_password(concepts) -> None:
    created = concepts.authing.create("alice", "pw")
    assert created["msg"] == "User created successfully!"
    assert created["user"]["username"] == "alice"
    assert "password" not in created["user"]
    assert "password_hash" not in created["user"]


def test_duplicate_username_keeps_single_record(concepts, db_session) -> None:
    concepts.authing.create("alice", "pw")
    with pytest.raises(DuplicateUsernameError) as exc_info:
        concepts.authing.create("alice", "other")

    assert exc_info.value.username == "alice"
    assert db_session.query(User).filter(User.username == "alice").count() == 1


def test_usernames_are_case_sensitive(concepts) -> None:
    concepts.authing.create("alice", "pw")
    concepts.authing.create("Alice", "pw")
    assert len(concepts.authing.get_users()) == 2


def test_empty_credentials_rejected(concepts) -> None:
    with pytest.raises(BadValuesError):
        concepts.authing.create("", "pw")
    with pytest.raises(BadValuesError):
        concepts.authing.create("alice", "")


def test_authenticate_does_not_reveal_which_part_failed(concepts) -> None:
    concepts.authing.create("alice", "pw")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        concepts.authing.authenticate("alice", "nope")
    with pytest.raises(InvalidCredentialsError) as wrong_username:
        concepts.authing.authenticate("nobody", "pw")

    assert str(wrong_password.value) == str(wrong_username.value)


def test_authenticate_returns_id(concepts) -> None:
    user_id = concepts.authing.create("alice", "pw")["user"]["_id"]
    assert concepts.authing.authenticate("alice", "pw")["_id"] == user_id


def test_update_username_enforces_uniqueness(concepts) -> None:
    alice_id = concepts.authing.create("alice", "pw")["user"]["_id"]
    concepts.authing.create("bob", "pw")

    with pytest.raises(DuplicateUsernameError):
        concepts.authing.update_username(alice_id, "bob")

    concepts.authing.update_username(alice_id, "alicia")
    assert concepts.authing.get_user_by_id(alice_id)["username"] == "alicia"


def test_update_password_requires_current_password(concepts) -> None:
    alice_id = concepts.authing.create("alice", "pw")["user"]["_id"]

    with pytest.raises(InvalidCredentialsError):
        concepts.authing.update_password(alice_id, "wrong", "new")

    concepts.authing.update_password(alice_id, "pw", "new")
    concepts.authing.authenticate("alice", "new")


def test_lookups_and_delete(concepts) -> None:
    alice_id = concepts.authing.create("alice", "pw")["user"]["_id"]
    assert concepts.authing.get_user_by_username("alice")["_id"] == alice_id

    concepts.authing.delete(alice_id)

    with pytest.raises(NotFoundError):
        concepts.authing.get_user_by_id(alice_id)
    with pytest.raises(NotFoundError):
        concepts.authing.get_user_by_username("alice")


def test_ids_to_usernames_preserves_order(concepts) -> None:
    alice_id = concepts.authing.create("alice", "pw")["user"]["_id"]
    bob_id = concepts.authing.create("bob", "pw")["user"]["_id"]

    names = concepts.authing.ids_to_usernames([bob_id, "0" * 32, alice_id, bob_id])

    assert names == ["bob", "DELETED_USER", "alice", "bob"]
