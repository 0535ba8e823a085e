"""TournamentManager - orchestrates tournament operations against a store.

This is the primary interface for applications: it loads a snapshot, applies
one of the pure controller functions, stores the result and returns it.
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

import random
from dataclasses import replace
from typing import List, Optional

from twostage.constants import FINALS_GROUP
from twostage.controllers.participants import (
    replace_participant,
    set_manual_rank_adjustment,
)
from twostage.controllers.result_recorder import (
    apply_match_result,
    reset_match_result,
    simulate_results,
)
from twostage.controllers.setup import create_tournament
from twostage.controllers.stage_advancer import (
    advance_to_stage_2,
    can_advance_to_stage_2,
    has_stage_2,
    is_stage_complete,
    stage_2_of,
)
from twostage.exceptions import (
    DuplicateTournamentException,
    TournamentNotFoundException,
    TournamentStateException,
)
from twostage.models import (
    Participant,
    Stage,
    Tournament,
    TournamentConfig,
    TournamentStatus,
)
from twostage.standings import calculate_standings
from twostage.storage import TournamentStore
from twostage.utils import setup_logger
from twostage.utils.validation import validate_score_entry_strict, validate_slug_strict

logger = setup_logger(__name__)


class TournamentManager:
    """Main tournament management class.

    Coordinates setup, result entry, participant changes and the stage
    transition on top of an injected ``TournamentStore``. Every mutating
    method returns the stored snapshot.
    """

    def __init__(self, store: TournamentStore) -> None:
        """Initialize the manager.

        Args:
            store: Persistence backend keyed by slug
        """
        self.store = store

    def _save(self, tournament: Tournament) -> Tournament:
        self.store.put(tournament)
        return tournament

    # ========== Tournament Management ==========

    def create_tournament(
        self,
        config: TournamentConfig,
        participant_names: List[str],
        group_assignments: Optional[List[str]] = None,
    ) -> Tournament:
        """Set up and store a new tournament.

        Raises:
            DuplicateTournamentException: If the slug is already taken
            SlugValidationException: If the slug is not URL-safe
            InvalidConfigurationException: If any other setup value is invalid
        """
        slug = validate_slug_strict(config.slug)
        if self.store.exists(slug):
            raise DuplicateTournamentException(
                f"URL slug {slug} is already taken. Please choose another."
            )
        tournament = create_tournament(config, participant_names, group_assignments)
        return self._save(tournament)

    def get_tournament(self, slug: str) -> Tournament:
        """Load a tournament. The slug is matched case-insensitively.

        Raises:
            TournamentNotFoundException: If the slug is unknown
        """
        slug = slug.strip().lower()
        tournament = self.store.get(slug)
        if tournament is None:
            raise TournamentNotFoundException(f"No tournament stored as {slug}")
        return tournament

    def list_tournaments(self) -> List[Tournament]:
        """Get all stored tournaments, newest first."""
        return self.store.list_all()

    # ========== Result Management ==========

    def record_result(
        self, slug: str, match_id: str, score_a: int, score_b: int
    ) -> Tournament:
        """Validate and record a match result.

        The tournament is marked completed once every second stage match
        has a result.

        Raises:
            InvalidResultException: If the scores are invalid or a draw
            MatchNotFoundException: If the match does not exist
            TournamentStateException: If the match cannot be recorded yet
        """
        validate_score_entry_strict(score_a, score_b)
        tournament = self.get_tournament(slug)
        matches = apply_match_result(tournament.matches, match_id, score_a, score_b)
        return self._save(self._with_status(replace(tournament, matches=matches)))

    def reset_result(self, slug: str, match_id: str) -> Tournament:
        """Clear a match result.

        Raises:
            MatchNotFoundException: If the match does not exist
            TournamentStateException: If the next bracket match was played
        """
        tournament = self.get_tournament(slug)
        matches = reset_match_result(tournament.matches, match_id)
        return self._save(self._with_status(replace(tournament, matches=matches)))

    def simulate_results(
        self, slug: str, stage: Stage, seed: Optional[int] = None
    ) -> Tournament:
        """Fill the pending matches of a stage with random results."""
        tournament = self.get_tournament(slug)
        matches = simulate_results(tournament.matches, stage, random.Random(seed))
        return self._save(self._with_status(replace(tournament, matches=matches)))

    def _with_status(self, tournament: Tournament) -> Tournament:
        stage = stage_2_of(tournament.elimination_type)
        if is_stage_complete(tournament.matches, stage):
            status = TournamentStatus.COMPLETED
        else:
            status = TournamentStatus.STARTED
        if status != tournament.status:
            logger.info(f"Tournament {tournament.slug} is now {status.value}")
        return replace(tournament, status=status)

    # ========== Participant Management ==========

    def replace_participant(self, slug: str, old_id: str, new_name: str) -> Tournament:
        """Substitute a participant, keeping their results and fixtures."""
        tournament = self.get_tournament(slug)
        return self._save(replace_participant(tournament, old_id, new_name))

    def set_manual_rank_adjustment(
        self, slug: str, participant_id: str, value: int
    ) -> Tournament:
        """Set a participant's tie-break override."""
        tournament = self.get_tournament(slug)
        return self._save(set_manual_rank_adjustment(tournament, participant_id, value))

    # ========== Stages and Standings ==========

    def start_stage_2(self, slug: str) -> Tournament:
        """Close the group stage and generate the second stage.

        Raises:
            TournamentStateException: If stage 1 is unfinished or stage 2
                already exists
        """
        tournament = self.get_tournament(slug)
        if not can_advance_to_stage_2(tournament):
            if has_stage_2(tournament.matches):
                reason = "stage 2 has already started"
            else:
                reason = "not all stage 1 matches are completed"
            raise TournamentStateException(
                f"Cannot start stage 2 of {tournament.name}: {reason}"
            )
        return self._save(advance_to_stage_2(tournament))

    def get_standings(
        self, slug: str, stage: Stage = Stage.ROUND_ROBIN_1
    ) -> List[Participant]:
        """Compute standings for one stage of a stored tournament.

        Second stage standings only include qualifiers, ranked as the
        single "Finals" group.
        """
        tournament = self.get_tournament(slug)
        participants = tournament.participants
        if stage != Stage.ROUND_ROBIN_1:
            participants = [
                replace(p, group=FINALS_GROUP) for p in participants if p.is_qualified
            ]
        return calculate_standings(participants, tournament.matches, stage)
