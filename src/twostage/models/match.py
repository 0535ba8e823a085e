"""Match data class."""

# Two Stage
# Copyright (C) 2025  Two Stage developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict, Optional

from twostage.models.enums import Slot, Stage


@dataclass
class Match:
    """A single fixture between two participants.

    Participant ids are None in bracket matches still waiting for a feeder
    result. ``next_match_id`` and ``next_match_slot`` are only set on bracket
    matches, always together; a bracket match without them is the final.

    Attributes:
        id: Unique identifier for the match
        tournament_id: Owning tournament
        stage: Stage the match belongs to
        round: Round number (1-indexed) within its stage
        participant_a_id: Participant in slot A, or None if undecided
        participant_b_id: Participant in slot B, or None if undecided
        score_a: Score of participant A, None until recorded
        score_b: Score of participant B, None until recorded
        winner_id: Winning participant, None until recorded
        is_completed: Whether a result has been recorded
        next_match_id: Match the winner advances to
        next_match_slot: Slot of the next match the winner occupies
    """

    id: str
    tournament_id: str
    stage: Stage
    round: int
    participant_a_id: Optional[str] = None
    participant_b_id: Optional[str] = None
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    winner_id: Optional[str] = None
    is_completed: bool = False
    next_match_id: Optional[str] = None
    next_match_slot: Optional[Slot] = None

    @property
    def has_participants(self) -> bool:
        """Both slots are decided."""
        return self.participant_a_id is not None and self.participant_b_id is not None

    @property
    def is_final(self) -> bool:
        """Bracket match with no successor."""
        return self.stage == Stage.SINGLE_ELIMINATION and self.next_match_id is None

    def involves(self, participant_id: str) -> bool:
        """Check if a participant plays in this match."""
        return participant_id in (self.participant_a_id, self.participant_b_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "stage": self.stage.value,
            "round": self.round,
            "participant_a_id": self.participant_a_id,
            "participant_b_id": self.participant_b_id,
            "score_a": self.score_a,
            "score_b": self.score_b,
            "winner_id": self.winner_id,
            "is_completed": self.is_completed,
            "next_match_id": self.next_match_id,
            "next_match_slot": (
                self.next_match_slot.value if self.next_match_slot else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        slot = data.get("next_match_slot")
        return cls(
            id=data["id"],
            tournament_id=data["tournament_id"],
            stage=Stage(data["stage"]),
            round=data["round"],
            participant_a_id=data.get("participant_a_id"),
            participant_b_id=data.get("participant_b_id"),
            score_a=data.get("score_a"),
            score_b=data.get("score_b"),
            winner_id=data.get("winner_id"),
            is_completed=data.get("is_completed", False),
            next_match_id=data.get("next_match_id"),
            next_match_slot=Slot(slot) if slot else None,
        )
