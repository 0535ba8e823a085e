"""Standings calculation for a tournament stage.

Aggregates are rebuilt from scratch from the completed matches of one stage,
then participants are ranked globally and within their groups using the same
ordering:

1. Wins
2. Point difference (points for minus points against)
3. Points for
4. Manual rank adjustment (operator override, last resort)

All criteria are descending. Ties left after the fourth keep the order the
participants were given in.
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

from dataclasses import replace
from typing import Dict, List, Tuple

from twostage.constants import DEFAULT_GROUP
from twostage.models import Match, Participant, Stage
from twostage.utils import setup_logger

logger = setup_logger(__name__)


def standings_sort_key(participant: Participant) -> Tuple[int, int, int, int]:
    """Sort key placing the best participant first under an ascending sort."""
    return (
        -participant.wins,
        -participant.point_difference,
        -participant.points_for,
        -(participant.manual_rank_adjustment or 0),
    )


def _group_of(participant: Participant) -> str:
    return participant.group or DEFAULT_GROUP


def calculate_standings(
    participants: List[Participant], matches: List[Match], stage: Stage
) -> List[Participant]:
    """Compute aggregates, global rank and group rank for a stage.

    Inputs are not modified; every returned participant is a new record.

    Args:
        participants: Participants to rank
        matches: Matches of any stage; only completed ones of ``stage`` count
        stage: Stage whose results are aggregated

    Returns:
        Participants ordered by group label, then by rank within the group
    """
    stats: Dict[str, Participant] = {
        p.id: replace(p, wins=0, matches_played=0, points_for=0, points_against=0)
        for p in participants
    }

    counted = 0
    for match in matches:
        if match.stage != stage or not match.is_completed:
            continue

        side_a = stats.get(match.participant_a_id)
        side_b = stats.get(match.participant_b_id)
        if side_a is None or side_b is None:
            logger.debug(f"Skipping match {match.id}: participant not in standings")
            continue

        score_a = match.score_a or 0
        score_b = match.score_b or 0

        side_a.matches_played += 1
        side_b.matches_played += 1
        side_a.points_for += score_a
        side_a.points_against += score_b
        side_b.points_for += score_b
        side_b.points_against += score_a

        if match.winner_id == side_a.id:
            side_a.wins += 1
        if match.winner_id == side_b.id:
            side_b.wins += 1
        counted += 1

    ranked = list(stats.values())

    # Global rank, ignoring groups
    for position, participant in enumerate(
        sorted(ranked, key=standings_sort_key), start=1
    ):
        participant.global_rank = position

    # Group rank, numbering restarts for each group
    ranked.sort(key=lambda p: (_group_of(p), standings_sort_key(p)))
    group_counts: Dict[str, int] = {}
    for participant in ranked:
        group = _group_of(participant)
        group_counts[group] = group_counts.get(group, 0) + 1
        participant.rank = group_counts[group]

    logger.debug(
        f"Standings for {stage.value}: {counted} completed matches, "
        f"{len(ranked)} participants in {len(group_counts)} groups"
    )
    return ranked
