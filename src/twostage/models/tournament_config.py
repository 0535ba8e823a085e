"""TournamentConfig data class."""

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
from typing import Any, Dict

from twostage.models.enums import EliminationType


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    slug : str
        URL-safe key, unique across all stored tournaments.
    title : str
        Short display title, e.g. an edition name.
    description : str
        Free text shown alongside the tournament.
    participant_count : int
        Number of participants entered at setup.
    qualification_count : int
        Exact number of participants advancing to the second stage,
        independent of group sizes.
    elimination_type : EliminationType
        Format of the second stage: a single elimination bracket or a
        second round robin among the qualifiers.
    """

    name: str
    slug: str
    title: str = ""
    description: str = ""
    participant_count: int = 0
    qualification_count: int = 4
    elimination_type: EliminationType = EliminationType.SINGLE_ELIMINATION

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "participant_count": self.participant_count,
            "qualification_count": self.qualification_count,
            "elimination_type": self.elimination_type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            slug=data["slug"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            participant_count=data.get("participant_count", 0),
            qualification_count=data["qualification_count"],
            elimination_type=EliminationType(
                data.get("elimination_type", EliminationType.SINGLE_ELIMINATION)
            ),
        )
