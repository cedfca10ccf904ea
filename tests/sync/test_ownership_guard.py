"""Tests for the ownership guard and authorization synchronizations."""

import pytest

from agora.core.errors import InvalidIdError, NotAuthorError, NotFoundError
from agora.sync.parents import POST


def test_guard_dispatches_by_kind(sync, alice) -> None:
    user = sync.sessioning.get_user(alice)
    post_id = sync.create_post(alice, "hello")["post"]["_id"]

    sync.guard.assert_owner(POST, post_id, user)
    with pytest.raises(NotAuthorError):
        sync.guard.assert_owner(POST, post_id, "b" * 32)
    with pytest.raises(KeyError):
        sync.guard.assert_owner("Score", post_id, user)


@pytest.mark.parametrize("kind", ["post", "comment", "reaction"])
def test_non_author_cannot_delete(sync, alice, bob, kind) -> None:
    post_id = sync.create_post(alice, "hello")["post"]["_id"]
    if kind == "post":
        item_id, delete = post_id, sync.delete_post
    elif kind == "comment":
        item_id = sync.create_comment(alice, "mine", post_id)["comment"]["_id"]
        delete = sync.delete_comment
    else:
        item_id = sync.create_reaction(alice, "like", post_id)["reaction"]["_id"]
        delete = sync.delete_reaction

    with pytest.raises(NotAuthorError) as exc_info:
        delete(bob, item_id)
    assert exc_info.value.author == sync.sessioning.get_user(bob)

    assert "deleted" in delete(alice, item_id)["msg"]
    with pytest.raises(NotFoundError):
        delete(alice, item_id)


def test_non_author_cannot_update(sync, alice, bob) -> None:
    post_id = sync.create_post(alice, "hello")["post"]["_id"]
    comment_id = sync.create_comment(alice, "hi", post_id)["comment"]["_id"]

    with pytest.raises(NotAuthorError):
        sync.update_post(bob, post_id, "hijacked")
    with pytest.raises(NotAuthorError):
        sync.update_comment(bob, comment_id, "hijacked")

    sync.update_post(alice, post_id, "edited")
    sync.update_comment(alice, comment_id, "edited too")
    assert sync.get_post(post_id)["content"] == "edited"
    assert sync.get_comments_by_parent(post_id)[0]["content"] == "edited too"


def test_malformed_id_fails_before_any_concept(sync, alice) -> None:
    with pytest.raises(InvalidIdError):
        sync.delete_post(alice, "not-an-id")
