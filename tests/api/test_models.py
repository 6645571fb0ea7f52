from uuid import UUID, uuid4

import pytest

from src.api.models import (
    AddPlayerRequest,
    AssignPlayerRequest,
    FinishMatchRequest,
    UpdatePlayerRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Gender, MatchResult


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - AddPlayerRequest --
@pytest.mark.parametrize("level", [1, 9, 18])
def test_valid_level(mock_id: UUID, level: int) -> None:
    request = AddPlayerRequest(session_id=mock_id, name="Ann", level=level, gender=Gender.FEMALE)
    assert request.level == level


@pytest.mark.parametrize("level", [0, 19, -3])
def test_invalid_level(mock_id: UUID, level: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = AddPlayerRequest(session_id=mock_id, name="Ann", level=level)


def test_gender_is_optional(mock_id: UUID) -> None:
    request = AddPlayerRequest(session_id=mock_id, name="Ann", level=3)
    assert request.gender is None


# -- Validation - UpdatePlayerRequest --
def test_update_without_level(mock_id: UUID) -> None:
    """Only the given fields change: a missing level skips validation."""
    request = UpdatePlayerRequest(session_id=mock_id, player_id="p1", name="Annie")
    assert request.level is None


def test_update_with_invalid_level(mock_id: UUID) -> None:
    with pytest.raises(InvalidRequestError):
        _ = UpdatePlayerRequest(session_id=mock_id, player_id="p1", level=40)


# -- Validation - AssignPlayerRequest --
@pytest.mark.parametrize("slot", [0, 1, 2, 3])
def test_valid_slot(mock_id: UUID, slot: int) -> None:
    request = AssignPlayerRequest(session_id=mock_id, court_id="c1", player_id="p1", slot=slot)
    assert request.slot == slot


@pytest.mark.parametrize("slot", [-1, 4])
def test_invalid_slot(mock_id: UUID, slot: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = AssignPlayerRequest(session_id=mock_id, court_id="c1", player_id="p1", slot=slot)


# -- FinishMatchRequest --
def test_winner_parsed_from_wire_value(mock_id: UUID) -> None:
    request = FinishMatchRequest(session_id=mock_id, court_id="c1", winner="teamB")
    assert request.winner == MatchResult.TEAM_B


def test_no_winner(mock_id: UUID) -> None:
    request = FinishMatchRequest(session_id=mock_id, court_id="c1")
    assert request.winner is None
