"""Tests for score endpoints."""

from fastapi import status


def test_own_score(alice_client) -> None:
    response = alice_client.get("/api/v1/score")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["score"] == 0


def test_update_item_score(alice_client) -> None:
    post_id = alice_client.post("/api/v1/posts", json={"content": "hello"}).json()["post"]["_id"]

    response = alice_client.patch(f"/api/v1/score/{post_id}", json={"score": 12.5})
    assert response.status_code == status.HTTP_200_OK
    assert alice_client.get(f"/api/v1/score/{post_id}").json()["score"] == 12.5


def test_update_score_requires_login(client) -> None:
    response = client.patch(f"/api/v1/score/{'c' * 32}", json={"score": 1})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_unknown_score(alice_client) -> None:
    assert alice_client.get(f"/api/v1/score/{'c' * 32}").status_code == status.HTTP_404_NOT_FOUND


def test_non_finite_score_rejected(alice_client) -> None:
    post_id = alice_client.post("/api/v1/posts", json={"content": "hello"}).json()["post"]["_id"]

    for literal in ("NaN", "Infinity", "-Infinity"):
        response = alice_client.patch(
            f"/api/v1/score/{post_id}",
            content='{"score": ' + literal + "}",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    assert alice_client.get(f"/api/v1/score/{post_id}").json()["score"] == 0
