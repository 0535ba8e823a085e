"""Transition from the group stage to the second stage.

Stage 1 standings are cut at the tournament's qualification count, ignoring
group boundaries, and the qualifiers are scheduled into either a single
elimination bracket or a second round robin.
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
from typing import List

from twostage.constants import FINALS_GROUP
from twostage.models import EliminationType, Match, Stage, Tournament
from twostage.scheduling import generate_bracket, generate_round_robin
from twostage.standings import calculate_standings
from twostage.utils import setup_logger

logger = setup_logger(__name__)


def stage_2_of(elimination_type: EliminationType) -> Stage:
    """Get the stage generated for an elimination type."""
    if elimination_type == EliminationType.SINGLE_ELIMINATION:
        return Stage.SINGLE_ELIMINATION
    return Stage.ROUND_ROBIN_2


def is_stage_complete(matches: List[Match], stage: Stage) -> bool:
    """Check that a stage has matches and all of them are completed."""
    stage_matches = [m for m in matches if m.stage == stage]
    return bool(stage_matches) and all(m.is_completed for m in stage_matches)


def has_stage_2(matches: List[Match]) -> bool:
    """Check whether second stage matches have been generated."""
    return any(m.stage != Stage.ROUND_ROBIN_1 for m in matches)


def can_advance_to_stage_2(tournament: Tournament) -> bool:
    """Stage 1 is fully played and stage 2 does not exist yet."""
    return is_stage_complete(
        tournament.matches, Stage.ROUND_ROBIN_1
    ) and not has_stage_2(tournament.matches)


def advance_to_stage_2(tournament: Tournament) -> Tournament:
    """Qualify the top participants and generate second stage matches.

    The first ``qualification_count`` participants by global rank qualify.
    A count larger than the field qualifies everybody. Single elimination
    seeds the bracket in rank order; otherwise the qualifiers play a round
    robin as one "Finals" group.

    Nothing is validated here: the caller decides whether the tournament
    is ready to advance (see ``can_advance_to_stage_2``).

    Args:
        tournament: Snapshot to advance; not modified

    Returns:
        New snapshot with qualification flags set and stage 2 matches
        appended after the untouched stage 1 matches
    """
    standings = calculate_standings(
        tournament.participants, tournament.matches, Stage.ROUND_ROBIN_1
    )

    by_global_rank = sorted(standings, key=lambda p: p.global_rank)
    qualifiers = by_global_rank[: tournament.qualification_count]
    qualified_ids = {p.id for p in qualifiers}

    participants = [
        replace(p, is_qualified=p.id in qualified_ids) for p in standings
    ]

    if tournament.elimination_type == EliminationType.SINGLE_ELIMINATION:
        new_matches = generate_bracket(tournament.id, qualifiers)
    else:
        finalists = [replace(p, group=FINALS_GROUP) for p in qualifiers]
        new_matches = generate_round_robin(
            tournament.id, finalists, Stage.ROUND_ROBIN_2
        )

    stage = stage_2_of(tournament.elimination_type)
    logger.info(
        f"Advanced {tournament.name} to {stage.value}: "
        f"{len(qualifiers)} of {len(standings)} qualified, "
        f"{len(new_matches)} matches generated"
    )

    return replace(
        tournament,
        participants=participants,
        matches=list(tournament.matches) + new_matches,
    )
