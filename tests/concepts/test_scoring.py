"""Tests for the Scoring concept."""

import pytest

from agora.core.errors import NotAllowedError, NotFoundError

ITEM = "e" * 32


def test_create_and_update_score(concepts) -> None:
    concepts.scoring.create(ITEM)
    assert concepts.scoring.get_by_item(ITEM)["score"] == 0

    updated = concepts.scoring.update(ITEM, 4.5)
    assert updated["score"]["score"] == 4.5
    assert concepts.scoring.get_by_item(ITEM)["score"] == 4.5


def test_score_created_once_per_item(concepts) -> None:
    concepts.scoring.create(ITEM)
    with pytest.raises(NotAllowedError):
        concepts.scoring.create(ITEM, 3)


def test_missing_score(concepts) -> None:
    with pytest.raises(NotFoundError):
        concepts.scoring.get_by_item(ITEM)
    with pytest.raises(NotFoundError):
        concepts.scoring.update(ITEM, 1)
