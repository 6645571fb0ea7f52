"""Unit tests for /src/allocation/roster.py"""

import pytest

from src.allocation.roster import Court, Player
from src.core.exceptions import RotationError, SessionStateError
from src.core.models import CourtModel, PlayerModel
from src.core.shared_types import CourtStatus, Gender, Hall


def court_model(status: str = "allocating", hall: str = "A") -> CourtModel:
    return CourtModel(id="c1", name="Court 1", status=status, player_ids=[None] * 4, hall=hall)


def test_court_from_model() -> None:
    court = Court.from_model(court_model(status="playing", hall="B"))
    assert court.status == CourtStatus.PLAYING
    assert court.hall == Hall.B
    assert court.to_model() == court_model(status="playing", hall="B")


@pytest.mark.parametrize(
    "status, hall",
    [
        ("finished", "A"),  # unknown status
        ("allocating", "C"),  # unknown hall
        ("allocating", "a"),  # halls are case sensitive
    ],
)
def test_invalid_court_model(status: str, hall: str) -> None:
    with pytest.raises(SessionStateError):
        Court.from_model(court_model(status=status, hall=hall))


def test_player_from_model() -> None:
    model = PlayerModel(id="p1", name="Ann", is_active=True, level=7, gender="F")
    player = Player.from_model(model)
    assert player.gender == Gender.FEMALE
    assert player.to_model() == model


def test_invalid_gender_is_a_rotation_error() -> None:
    """Callers can catch every bad stored value with the one base class."""
    model = PlayerModel(id="p1", name="Ann", is_active=True, level=7, gender="X")
    with pytest.raises(RotationError):
        Player.from_model(model)
