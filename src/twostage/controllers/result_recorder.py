"""Result recording for tournament matches.

This module applies and resets match results, moving bracket winners into the
match they feed. Score legality (no draws, non-negative scores) is checked by
the caller, see ``twostage.utils.validation.validate_score_entry``.
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

from twostage.constants import MAX_LOSING_SCORE, WINNING_SCORE
from twostage.exceptions import MatchNotFoundException, TournamentStateException
from twostage.models import Match, Slot, Stage
from twostage.utils import setup_logger

logger = setup_logger(__name__)


def _index_of(matches: List[Match], match_id: str) -> int:
    for index, match in enumerate(matches):
        if match.id == match_id:
            return index
    raise MatchNotFoundException(f"Match {match_id} does not exist")


def _find_index(matches: List[Match], match_id: str) -> Optional[int]:
    try:
        return _index_of(matches, match_id)
    except MatchNotFoundException:
        return None


def _with_slot(match: Match, slot: Slot, participant_id: Optional[str]) -> Match:
    if slot == Slot.A:
        return replace(match, participant_a_id=participant_id)
    return replace(match, participant_b_id=participant_id)


def apply_match_result(
    matches: List[Match], match_id: str, score_a: int, score_b: int
) -> List[Match]:
    """Record the result of a single match.

    The higher score wins. If the match feeds a bracket match, the winner is
    placed into the recorded slot of that match.

    Args:
        matches: All tournament matches; not modified
        match_id: Match to record
        score_a: Score of participant A
        score_b: Score of participant B

    Returns:
        New match list with the result applied

    Raises:
        MatchNotFoundException: If the match does not exist
        TournamentStateException: If the match's participants are undecided,
            or a changed winner would invalidate an already played next match
    """
    index = _index_of(matches, match_id)
    match = matches[index]

    if not match.has_participants:
        raise TournamentStateException(
            f"Match {match_id} cannot be recorded before both participants are known"
        )

    winner_id = match.participant_a_id if score_a > score_b else match.participant_b_id

    updated = list(matches)
    updated[index] = replace(
        match,
        score_a=score_a,
        score_b=score_b,
        winner_id=winner_id,
        is_completed=True,
    )

    if match.next_match_id:
        next_index = _find_index(updated, match.next_match_id)
        if next_index is None:
            logger.warning(
                f"Match {match_id} points at missing match {match.next_match_id}"
            )
        else:
            next_match = updated[next_index]
            if next_match.is_completed and match.winner_id != winner_id:
                raise TournamentStateException(
                    f"Cannot change the winner of match {match_id}: "
                    f"match {next_match.id} has already been played"
                )
            updated[next_index] = _with_slot(
                next_match, match.next_match_slot, winner_id
            )
            logger.debug(
                f"Advanced {winner_id} to match {next_match.id} "
                f"slot {match.next_match_slot.value}"
            )

    logger.debug(f"Recorded match {match_id}: {score_a}-{score_b}, winner {winner_id}")
    return updated


def reset_match_result(matches: List[Match], match_id: str) -> List[Match]:
    """Clear the result of a match.

    A bracket winner that was moved into the next match is removed from it
    again.

    Args:
        matches: All tournament matches; not modified
        match_id: Match to reset

    Returns:
        New match list with the result cleared

    Raises:
        MatchNotFoundException: If the match does not exist
        TournamentStateException: If the next bracket match has been played
    """
    index = _index_of(matches, match_id)
    match = matches[index]

    updated = list(matches)
    if not match.is_completed:
        logger.debug(f"Match {match_id} has no result to reset")
        return updated

    if match.next_match_id:
        next_index = _find_index(updated, match.next_match_id)
        if next_index is not None:
            next_match = updated[next_index]
            if next_match.is_completed:
                raise TournamentStateException(
                    f"Cannot reset match {match_id}: "
                    f"match {next_match.id} has already been played"
                )
            updated[next_index] = _with_slot(next_match, match.next_match_slot, None)

    updated[index] = replace(
        match, score_a=None, score_b=None, winner_id=None, is_completed=False
    )
    logger.info(f"Reset result of match {match_id}")
    return updated


def simulate_results(
    matches: List[Match], stage: Stage, rng: Optional[random.Random] = None
) -> List[Match]:
    """Fill every pending match of a stage with a random result.

    The winner scores 16 and the loser 0 to 14. Rounds are played in order,
    so a bracket is simulated through to its final. Completed matches are
    left alone.

    Args:
        matches: All tournament matches; not modified
        stage: Stage to simulate
        rng: Random source, for reproducible runs

    Returns:
        New match list with simulated results
    """
    rng = rng or random.Random()
    updated = list(matches)

    rounds = sorted({m.round for m in updated if m.stage == stage})
    simulated = 0
    for round_number in rounds:
        pending = [
            m.id
            for m in updated
            if m.stage == stage
            and m.round == round_number
            and not m.is_completed
            and m.has_participants
        ]
        for match_id in pending:
            loser_score = rng.randint(0, MAX_LOSING_SCORE)
            if rng.random() > 0.5:
                score_a, score_b = WINNING_SCORE, loser_score
            else:
                score_a, score_b = loser_score, WINNING_SCORE
            updated = apply_match_result(updated, match_id, score_a, score_b)
            simulated += 1

    logger.info(f"Simulated {simulated} {stage.value} matches")
    return updated
