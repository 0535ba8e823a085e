"""Tournament aggregate.

A Tournament is an immutable snapshot per operation: scheduling, standings and
controller functions return new Tournament objects rather than editing the one
they were given, so the caller decides what gets persisted.
"""

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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from twostage.models.enums import EliminationType, Stage, TournamentStatus
from twostage.models.match import Match
from twostage.models.participant import Participant
from twostage.models.tournament_config import TournamentConfig


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_created_at(value: str) -> datetime:
    created_at = isoparse(value)
    # Timestamps without an offset are taken as UTC
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at


@dataclass
class Tournament:
    """Aggregate root holding configuration, participants and matches.

    Matches reference participants by id only.

    Attributes:
        id: Unique identifier for the tournament
        config: Tournament settings
        status: Lifecycle status
        participants: All participants, including qualification flags
        matches: Matches of every stage
        created_at: Creation time (timezone aware)
    """

    id: str
    config: TournamentConfig
    status: TournamentStatus = TournamentStatus.SETUP
    participants: List[Participant] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def slug(self) -> str:
        """Get tournament URL slug."""
        return self.config.slug

    @property
    def qualification_count(self) -> int:
        """Get number of participants advancing to stage 2."""
        return self.config.qualification_count

    @property
    def elimination_type(self) -> EliminationType:
        """Get format of stage 2."""
        return self.config.elimination_type

    # ========== Lookups ==========

    def get_participant(self, participant_id: str) -> Optional[Participant]:
        """Find a participant by id, or None."""
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        return None

    def get_match(self, match_id: str) -> Optional[Match]:
        """Find a match by id, or None."""
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def matches_for_stage(self, stage: Stage) -> List[Match]:
        """Get matches of one stage, in stored order."""
        return [m for m in self.matches if m.stage == stage]

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "id": self.id,
            "config": self.config.to_dict(),
            "status": self.status.value,
            "participants": [p.to_dict() for p in self.participants],
            "matches": [m.to_dict() for m in self.matches],
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object
        """
        created_at = data.get("created_at")
        return cls(
            id=data["id"],
            config=TournamentConfig.from_dict(data["config"]),
            status=TournamentStatus(data.get("status", TournamentStatus.SETUP)),
            participants=[
                Participant.from_dict(p) for p in data.get("participants", [])
            ],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            created_at=_parse_created_at(created_at) if created_at else _utcnow(),
        )
