"""Tests for the synchronizations composing several concepts."""

import pytest

from agora.concepts.friending import FriendRequestNotFoundError
from agora.core.errors import (
    AlreadyLoggedInError,
    InvalidCredentialsError,
    InvalidStateError,
    NotFoundError,
    ParentNotFoundError,
    UnauthenticatedError,
)
from tests.conftest import PASSWORD


def test_create_user_requires_logged_out_session(sync, alice) -> None:
    with pytest.raises(AlreadyLoggedInError):
        sync.create_user(alice, "mallory", PASSWORD)


def test_log_in_requires_logged_out_session(sync, alice) -> None:
    with pytest.raises(AlreadyLoggedInError):
        sync.log_in(alice, "alice", PASSWORD)


def test_log_in_with_bad_credentials(sync) -> None:
    handle = sync.sessioning.open()
    sync.create_user(handle, "alice", PASSWORD)

    with pytest.raises(InvalidCredentialsError):
        sync.log_in(handle, "alice", "wrong")
    with pytest.raises(UnauthenticatedError):
        sync.get_session_user(handle)


def test_log_out_twice(sync, alice) -> None:
    assert sync.get_session_user(alice)["username"] == "alice"

    assert sync.log_out(alice) == {"msg": "Logged out!"}
    assert sync.log_out(alice) == {"msg": "Logged out!"}

    with pytest.raises(UnauthenticatedError):
        sync.get_session_user(alice)


def test_delete_user_ends_every_session(sync, alice) -> None:
    other_device = sync.sessioning.open()
    sync.log_in(other_device, "alice", PASSWORD)

    sync.delete_user(alice)

    with pytest.raises(UnauthenticatedError):
        sync.get_session_user(other_device)
    with pytest.raises(NotFoundError):
        sync.get_user("alice")


def test_update_username_and_password(sync, alice) -> None:
    sync.update_username(alice, "alicia")
    sync.update_password(alice, PASSWORD, "new password")
    sync.log_out(alice)

    sync.log_in(alice, "alicia", "new password")
    assert sync.get_session_user(alice)["username"] == "alicia"


def test_responses_use_usernames(sync, alice, bob) -> None:
    post_id = sync.create_post(alice, "hello")["post"]["_id"]
    sync.create_comment(bob, "hi", post_id)
    sync.create_reaction(bob, "like", post_id)

    assert sync.get_posts()[0]["author"] == "alice"
    assert sync.get_posts(author="bob") == []
    assert sync.get_comments_by_parent(post_id)[0]["author"] == "bob"
    assert sync.get_comments(author="bob")[0]["content"] == "hi"
    assert sync.get_reactions_by_item(post_id)[0]["author"] == "bob"
    assert sync.get_reactions(author="alice") == []


def test_comment_on_comment(sync, alice, bob) -> None:
    post_id = sync.create_post(alice, "hello")["post"]["_id"]
    comment_id = sync.create_comment(bob, "first", post_id)["comment"]["_id"]

    reply = sync.create_comment(alice, "reply", comment_id)
    reaction = sync.create_reaction(bob, "laugh", comment_id)

    assert reply["parentKind"] == "Comment"
    assert reply["comment"]["parent"] == comment_id
    assert reaction["itemKind"] == "Comment"


def test_orphaned_children_remain_but_block_new_children(sync, alice, bob) -> None:
    post_id = sync.create_post(alice, "hello")["post"]["_id"]
    comment_id = sync.create_comment(bob, "nice", post_id)["comment"]["_id"]

    sync.delete_post(alice, post_id)

    assert [c["_id"] for c in sync.get_comments_by_parent(post_id)] == [comment_id]
    with pytest.raises(ParentNotFoundError):
        sync.create_comment(bob, "again", post_id)
    with pytest.raises(ParentNotFoundError):
        sync.create_reaction(bob, "like", post_id)


def test_friend_flow_by_username(sync, alice, bob) -> None:
    sync.send_friend_request(alice, "bob")
    with pytest.raises(InvalidStateError):
        sync.send_friend_request(alice, "bob")

    requests = sync.get_friend_requests(bob)
    assert [(r["from_user"], r["to_user"], r["status"]) for r in requests] == [
        ("alice", "bob", "pending")
    ]

    sync.accept_friend_request(bob, "alice")

    assert sync.get_friends(alice) == ["bob"]
    assert sync.get_friends(bob) == ["alice"]

    sync.remove_friend(alice, "bob")
    assert sync.get_friends(bob) == []


def test_reject_and_withdraw(sync, alice, bob) -> None:
    sync.send_friend_request(alice, "bob")
    sync.reject_friend_request(bob, "alice")
    assert sync.get_friends(alice) == []

    sync.send_friend_request(alice, "bob")
    sync.remove_friend_request(alice, "bob")
    with pytest.raises(FriendRequestNotFoundError):
        sync.accept_friend_request(bob, "alice")


def test_friend_request_to_unknown_user(sync, alice) -> None:
    with pytest.raises(NotFoundError):
        sync.send_friend_request(alice, "nobody")


def test_follow_flow(sync, alice, bob) -> None:
    sync.follow(alice, "bob")

    assert [(f["follower"], f["followee"]) for f in sync.get_followers("bob")] == [("alice", "bob")]
    assert [(f["follower"], f["followee"]) for f in sync.get_following("alice")] == [("alice", "bob")]

    sync.unfollow(alice, "bob")
    assert sync.get_following("alice") == []


def test_scores(sync, alice) -> None:
    assert sync.get_score(alice)["score"] == 0

    post_id = sync.create_post(alice, "hello")["post"]["_id"]
    sync.update_score_by_item(alice, post_id, 7)

    assert sync.get_score_by_item(post_id)["score"] == 7


def test_score_update_requires_login(sync, alice) -> None:
    post_id = sync.create_post(alice, "hello")["post"]["_id"]
    anonymous = sync.sessioning.open()

    with pytest.raises(UnauthenticatedError):
        sync.update_score_by_item(anonymous, post_id, 7)
