"""
Match history: rounds of matches, keyed by player NAME.

History records who played by name, not by id. Two players sharing a name therefore share statistics,
and a renamed player loses the matches recorded under the old name. Every name lookup goes through
`plays_in` so moving history to ids only has to touch that one function.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Optional, Self
from uuid import uuid4

from src.allocation.roster import Court, Player
from src.core.models import MatchModel, RoundModel
from src.core.shared_types import MatchResult

logger = logging.getLogger(__name__)

# Matches started within this window of the round's first match belong to the same round
ROUND_WINDOW = timedelta(minutes=15)

UNKNOWN_PLAYER_NAME = "Unknown"


@dataclass(frozen=True)
class Match:
    court_name: str
    player_names: tuple[str, ...]
    started_at: datetime
    result: Optional[MatchResult] = None

    @classmethod
    def from_model(cls, model: MatchModel) -> Self:
        return cls(
            court_name=model.court_name,
            player_names=tuple(model.player_names),
            started_at=model.started_at,
            result=MatchResult(model.result) if model.result else None,
        )

    def to_model(self) -> MatchModel:
        return MatchModel(
            court_name=self.court_name,
            player_names=list(self.player_names),
            started_at=self.started_at,
            result=self.result.value if self.result else None,
        )


@dataclass(frozen=True)
class Round:
    id: str
    number: int
    started_at: datetime
    matches: tuple[Match, ...] = field(default_factory=tuple)

    @classmethod
    def from_model(cls, model: RoundModel) -> Self:
        return cls(
            id=model.id,
            number=model.number,
            started_at=model.started_at,
            matches=tuple(Match.from_model(m) for m in model.matches),
        )

    def to_model(self) -> RoundModel:
        return RoundModel(
            id=self.id,
            number=self.number,
            started_at=self.started_at,
            matches=[m.to_model() for m in self.matches],
        )


def plays_in(match: Match, player_name: str) -> bool:
    """Did the player (by name) take part in the match?"""
    return player_name in match.player_names


def record_match_start(
    history: tuple[Round, ...], court: Court, roster: list[Player], now: datetime
) -> tuple[Round, ...]:
    """
    Return a new history with a match started on `court` at `now`.
    ----

    * Joins the latest round if that round started less than ROUND_WINDOW ago, otherwise opens a new round.
    * Starting the same line-up on the same court twice within a round is recorded once.
    * A seated id that is not on the roster is recorded as "Unknown".
    """
    names_by_id = {player.id: player.name for player in roster}
    player_names = tuple(
        names_by_id.get(pid, UNKNOWN_PLAYER_NAME) for pid in court.slots.player_ids()
    )
    new_match = Match(court_name=court.name, player_names=player_names, started_at=now)

    if history and now - history[-1].started_at < ROUND_WINDOW:
        last_round = history[-1]
        is_duplicate = any(
            m.court_name == new_match.court_name and m.player_names == player_names
            for m in last_round.matches
        )
        if is_duplicate:
            logger.debug("Match on %s already recorded in round %d", court.name, last_round.number)
            return history
        updated_round = replace(last_round, matches=last_round.matches + (new_match,))
        return history[:-1] + (updated_round,)

    new_round = Round(
        id=uuid4().hex,
        number=len(history) + 1,
        started_at=now,
        matches=(new_match,),
    )
    logger.debug("Opened round %d with a match on %s", new_round.number, court.name)
    return history + (new_round,)


def record_match_result(
    history: tuple[Round, ...], court_name: str, result: Optional[MatchResult]
) -> tuple[Round, ...]:
    """
    Set the winner on the most recent match on `court_name` that has no result yet.

    result=None means the match was cancelled / ended without a winner: the match stays in history without a result.
    """
    for round_idx in range(len(history) - 1, -1, -1):
        this_round = history[round_idx]
        for match_idx in range(len(this_round.matches) - 1, -1, -1):
            match = this_round.matches[match_idx]
            if match.court_name != court_name or match.result is not None:
                continue
            matches = list(this_round.matches)
            matches[match_idx] = replace(match, result=result)
            updated_round = replace(this_round, matches=tuple(matches))
            return history[:round_idx] + (updated_round,) + history[round_idx + 1 :]
    logger.debug("No open match on %s to record a result for", court_name)
    return history
