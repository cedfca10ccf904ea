"""Synchronizations: the fixed call sequences behind each app operation.

Each method of :class:`Synchronizations` corresponds to one HTTP route. It
resolves the acting user from the session handle, resolves and checks any
referenced items, performs the primary concept call, publishes follow-up
events and shapes the result for the client. Failures propagate unchanged
to the caller; the only place one is caught is the parent probe in
:class:`~agora.sync.parents.ParentResolver`.
"""
from __future__ import annotations

import logging
from typing import Any

from agora.core.settings import settings
from agora.db.ids import parse_id

from .app import Concepts
from .events import EventBus, ItemCreated, ScoreFanout
from .ownership import OwnershipGuard
from .parents import COMMENT, POST, ParentResolver, Probe
from .responses import Responses

logger = logging.getLogger(__name__)

USER = "User"
REACTION = "Reaction"


class Synchronizations:
    """App operations composed from concept calls."""

    def __init__(self, concepts: Concepts, bus: EventBus | None = None) -> None:
        self.concepts = concepts
        self.authing = concepts.authing
        self.sessioning = concepts.sessioning
        self.posting = concepts.posting
        self.commenting = concepts.commenting
        self.reacting = concepts.reacting
        self.following = concepts.following
        self.friending = concepts.friending
        self.scoring = concepts.scoring

        self.responses = Responses(self.authing)
        self.guard = OwnershipGuard(
            {POST: self.posting, COMMENT: self.commenting, REACTION: self.reacting}
        )
        self.comment_parents = ParentResolver(
            [Probe(POST, self.posting.assert_exists), Probe(COMMENT, self.commenting.assert_exists)]
        )
        self.reaction_items = ParentResolver(
            [Probe(POST, self.posting.assert_exists), Probe(COMMENT, self.commenting.assert_exists)]
        )
        if bus is None:
            bus = EventBus()
            bus.subscribe(
                ItemCreated,
                ScoreFanout(self.scoring, concepts.db, settings.initial_score),
            )
        self.bus = bus

    def _user_id(self, username: str) -> str:
        return self.authing.get_user_by_username(username)["_id"]

    # Sessions and users

    def get_session_user(self, session: str) -> dict[str, Any]:
        user = self.sessioning.get_user(session)
        return self.authing.get_user_by_id(user)

    def get_users(self, username: str | None = None) -> list[dict[str, Any]]:
        return self.authing.get_users(username)

    def get_user(self, username: str) -> dict[str, Any]:
        return self.authing.get_user_by_username(username)

    def create_user(self, session: str, username: str, password: str) -> dict[str, Any]:
        self.sessioning.is_logged_out(session)
        created = self.authing.create(username, password)
        self.bus.publish(ItemCreated(USER, created["user"]["_id"]))
        return created

    def update_username(self, session: str, username: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.authing.update_username(user, username)

    def update_password(self, session: str, current_password: str, new_password: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.authing.update_password(user, current_password, new_password)

    def delete_user(self, session: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        self.sessioning.end_all_for_user(user)
        return self.authing.delete(user)

    def log_in(self, session: str, username: str, password: str) -> dict[str, str]:
        self.sessioning.is_logged_out(session)
        user = self.authing.authenticate(username, password)["_id"]
        self.sessioning.start(session, user)
        return {"msg": "Logged in!"}

    def log_out(self, session: str) -> dict[str, str]:
        self.sessioning.end(session)
        return {"msg": "Logged out!"}

    # Posts

    def get_posts(self, author: str | None = None) -> list[dict[str, Any]]:
        if author:
            posts = self.posting.get_by_author(self._user_id(author))
        else:
            posts = self.posting.get_all()
        return self.responses.posts(posts)

    def get_post(self, _id: str) -> dict[str, Any]:
        return self.responses.post(self.posting.get_by_id(parse_id(_id)))

    def create_post(
        self,
        session: str,
        content: str,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        user = self.sessioning.get_user(session)
        created = self.posting.create(user, content, options)
        self.bus.publish(ItemCreated(POST, created["post"]["_id"]))
        return {"msg": created["msg"], "post": self.responses.post(created["post"])}

    def update_post(
        self,
        session: str,
        _id: str,
        content: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        oid = parse_id(_id)
        self.guard.assert_owner(POST, oid, user)
        return self.posting.update(oid, content, options)

    def delete_post(self, session: str, _id: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        oid = parse_id(_id)
        self.guard.assert_owner(POST, oid, user)
        return self.posting.delete(oid)

    # Comments

    def get_comments(self, author: str | None = None) -> list[dict[str, Any]]:
        if author:
            comments = self.commenting.get_by_author(self._user_id(author))
        else:
            comments = self.commenting.get_all()
        return self.responses.comments(comments)

    def get_comments_by_parent(self, parent: str) -> list[dict[str, Any]]:
        return self.responses.comments(self.commenting.get_by_parent(parse_id(parent)))

    def create_comment(self, session: str, content: str, parent: str) -> dict[str, Any]:
        user = self.sessioning.get_user(session)
        parent_oid = parse_id(parent)
        parent_kind = self.comment_parents.resolve(parent_oid)
        created = self.commenting.create(user, content, parent_oid)
        self.bus.publish(ItemCreated(COMMENT, created["comment"]["_id"]))
        return {
            "msg": created["msg"],
            "comment": self.responses.comment(created["comment"]),
            "parentKind": parent_kind,
        }

    def update_comment(self, session: str, _id: str, content: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        oid = parse_id(_id)
        self.guard.assert_owner(COMMENT, oid, user)
        return self.commenting.update(oid, content)

    def delete_comment(self, session: str, _id: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        oid = parse_id(_id)
        self.guard.assert_owner(COMMENT, oid, user)
        return self.commenting.delete(oid)

    # Reactions

    def get_reactions(self, author: str | None = None) -> list[dict[str, Any]]:
        if author:
            reactions = self.reacting.get_by_author(self._user_id(author))
        else:
            reactions = self.reacting.get_all()
        return self.responses.reactions(reactions)

    def get_reactions_by_item(self, item: str) -> list[dict[str, Any]]:
        return self.responses.reactions(self.reacting.get_by_item(parse_id(item)))

    def create_reaction(self, session: str, type: str, item: str) -> dict[str, Any]:
        user = self.sessioning.get_user(session)
        item_oid = parse_id(item)
        item_kind = self.reaction_items.resolve(item_oid)
        created = self.reacting.create(user, type, item_oid)
        return {
            "msg": created["msg"],
            "reaction": self.responses.reaction(created["reaction"]),
            "itemKind": item_kind,
        }

    def delete_reaction(self, session: str, _id: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        oid = parse_id(_id)
        self.guard.assert_owner(REACTION, oid, user)
        return self.reacting.delete(oid)

    # Friends

    def get_friends(self, session: str) -> list[str]:
        user = self.sessioning.get_user(session)
        return self.authing.ids_to_usernames(self.friending.get_friends(user))

    def remove_friend(self, session: str, friend: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.friending.remove_friend(user, self._user_id(friend))

    def get_friend_requests(self, session: str) -> list[dict[str, Any]]:
        user = self.sessioning.get_user(session)
        return self.responses.friend_requests(self.friending.get_requests(user))

    def send_friend_request(self, session: str, to: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.friending.send_request(user, self._user_id(to))

    def remove_friend_request(self, session: str, to: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.friending.remove_request(user, self._user_id(to))

    def accept_friend_request(self, session: str, from_: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.friending.accept_request(self._user_id(from_), user)

    def reject_friend_request(self, session: str, from_: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.friending.reject_request(self._user_id(from_), user)

    # Follows

    def get_followers(self, username: str) -> list[dict[str, Any]]:
        return self.responses.follows(self.following.get_followers(self._user_id(username)))

    def get_following(self, username: str) -> list[dict[str, Any]]:
        return self.responses.follows(self.following.get_following(self._user_id(username)))

    def follow(self, session: str, username: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.following.follow(user, self._user_id(username))

    def unfollow(self, session: str, username: str) -> dict[str, str]:
        user = self.sessioning.get_user(session)
        return self.following.unfollow(user, self._user_id(username))

    # Scores

    def get_score(self, session: str) -> dict[str, Any]:
        user = self.sessioning.get_user(session)
        return self.scoring.get_by_item(user)

    def get_score_by_item(self, item: str) -> dict[str, Any]:
        return self.scoring.get_by_item(parse_id(item))

    def update_score_by_item(self, session: str, item: str, score: float) -> dict[str, Any]:
        self.sessioning.get_user(session)
        return self.scoring.update(parse_id(item), score)
