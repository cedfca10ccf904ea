"""Tests for follow endpoints."""

from fastapi import status


def test_follow_and_unfollow(alice_client, bob_client) -> None:
    response = alice_client.post("/api/v1/follow", json={"username": "bob"})
    assert response.status_code == status.HTTP_201_CREATED

    response = alice_client.post("/api/v1/follow", json={"username": "bob"})
    assert response.status_code == status.HTTP_403_FORBIDDEN

    followers = bob_client.get("/api/v1/followers", params={"username": "bob"}).json()
    assert [f["follower"] for f in followers] == ["alice"]
    following = bob_client.get("/api/v1/following", params={"username": "alice"}).json()
    assert [f["followee"] for f in following] == ["bob"]

    response = alice_client.delete("/api/v1/follow", params={"username": "bob"})
    assert response.json() == {"msg": "Unfollowed!"}
    response = alice_client.delete("/api/v1/follow", params={"username": "bob"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_cannot_follow_self(alice_client) -> None:
    response = alice_client.post("/api/v1/follow", json={"username": "alice"})
    assert response.status_code == status.HTTP_403_FORBIDDEN
