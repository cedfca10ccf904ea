"""Tests for friend and friend-request endpoints."""

from fastapi import status


def test_request_accept_unfriend(alice_client, bob_client) -> None:
    response = alice_client.post("/api/v1/friend/requests/bob")
    assert response.status_code == status.HTTP_201_CREATED

    response = alice_client.post("/api/v1/friend/requests/bob")
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["kind"] == "InvalidState"

    pending = bob_client.get("/api/v1/friend/requests").json()
    assert [(r["from_user"], r["status"]) for r in pending] == [("alice", "pending")]

    response = bob_client.put("/api/v1/friend/accept/alice")
    assert response.json() == {"msg": "Accepted request!"}

    assert alice_client.get("/api/v1/friends").json() == ["bob"]
    assert bob_client.get("/api/v1/friends").json() == ["alice"]

    response = bob_client.delete("/api/v1/friends/alice")
    assert response.json() == {"msg": "Unfriended!"}
    response = bob_client.delete("/api/v1/friends/alice")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_accept_without_request(alice_client, bob_client) -> None:
    response = bob_client.put("/api/v1/friend/accept/alice")
    assert response.status_code == status.HTTP_409_CONFLICT


def test_reject_and_withdraw(alice_client, bob_client) -> None:
    alice_client.post("/api/v1/friend/requests/bob")
    assert bob_client.put("/api/v1/friend/reject/alice").status_code == status.HTTP_200_OK
    assert alice_client.get("/api/v1/friends").json() == []

    alice_client.post("/api/v1/friend/requests/bob")
    assert alice_client.delete("/api/v1/friend/requests/bob").status_code == status.HTTP_200_OK
    assert bob_client.put("/api/v1/friend/accept/alice").status_code == status.HTTP_409_CONFLICT


def test_request_to_self(alice_client) -> None:
    response = alice_client.post("/api/v1/friend/requests/alice")
    assert response.status_code == status.HTTP_403_FORBIDDEN
