"""Participant data class."""

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

from twostage.constants import DEFAULT_GROUP


@dataclass
class Participant:
    """One competitor (player or team) in a tournament.

    Attributes
    ----------
    id : str
        Opaque unique identifier. Substitution creates a new one.
    name : str
        Display name.
    group : str
        First stage group label.
    wins, matches_played, points_for, points_against : int
        Aggregates for the stage last passed to the standings calculator.
        Always derived from matches, never a source of truth.
    rank : int
        1-based position within the group, 0 until computed.
    global_rank : int, optional
        1-based position across all groups, None until computed.
    manual_rank_adjustment : int
        Operator tie-break override, higher wins ties.
    is_qualified : bool
        Set when the tournament advances to the second stage.
    is_dropped : bool
        Carried in stored data only. Substitution replaces the record
        in place, so a live participant always has it False.
    original_id : str, optional
        Identifier of the participant this one replaced.
    """

    id: str
    name: str
    group: str = DEFAULT_GROUP
    wins: int = 0
    matches_played: int = 0
    points_for: int = 0
    points_against: int = 0
    rank: int = 0
    global_rank: Optional[int] = None
    manual_rank_adjustment: int = 0
    is_qualified: bool = False
    is_dropped: bool = False
    original_id: Optional[str] = None

    @property
    def point_difference(self) -> int:
        """Points scored minus points conceded."""
        return self.points_for - self.points_against

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "group": self.group,
            "wins": self.wins,
            "matches_played": self.matches_played,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "rank": self.rank,
            "global_rank": self.global_rank,
            "manual_rank_adjustment": self.manual_rank_adjustment,
            "is_qualified": self.is_qualified,
            "is_dropped": self.is_dropped,
            "original_id": self.original_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            group=data.get("group") or DEFAULT_GROUP,
            wins=data.get("wins", 0),
            matches_played=data.get("matches_played", 0),
            points_for=data.get("points_for", 0),
            points_against=data.get("points_against", 0),
            rank=data.get("rank", 0),
            global_rank=data.get("global_rank"),
            manual_rank_adjustment=data.get("manual_rank_adjustment") or 0,
            is_qualified=data.get("is_qualified", False),
            is_dropped=data.get("is_dropped", False),
            original_id=data.get("original_id"),
        )
