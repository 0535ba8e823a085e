"""Participant operations: substitution and manual rank adjustment."""

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

from twostage.exceptions import ParticipantNotFoundException
from twostage.models import Participant, Tournament
from twostage.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def get_participant(tournament: Tournament, participant_id: str) -> Participant:
    """Get a participant or raise.

    Raises:
        ParticipantNotFoundException: If no participant has this id
    """
    participant = tournament.get_participant(participant_id)
    if participant is None:
        raise ParticipantNotFoundException(
            f"Participant {participant_id} not found in {tournament.name}"
        )
    return participant


def replace_participant(
    tournament: Tournament, old_id: str, new_name: str
) -> Tournament:
    """Substitute a participant with a new one.

    The replacement gets a fresh id and keeps the old record's place, group
    and manual adjustment, with ``original_id`` pointing back at the id it
    replaced. Every match reference to the old id (both slots and the
    winner) is rewritten, so the replacement inherits results and future
    fixtures.

    Args:
        tournament: Snapshot to update; not modified
        old_id: Participant being substituted out
        new_name: Display name of the replacement

    Returns:
        New tournament snapshot

    Raises:
        ParticipantNotFoundException: If ``old_id`` is unknown
    """
    old = get_participant(tournament, old_id)
    new_id = generate_id()

    def swap(value):
        return new_id if value == old_id else value

    participants = [
        (
            replace(p, id=new_id, name=new_name, original_id=old_id, is_dropped=False)
            if p.id == old_id
            else p
        )
        for p in tournament.participants
    ]
    matches = [
        replace(
            m,
            participant_a_id=swap(m.participant_a_id),
            participant_b_id=swap(m.participant_b_id),
            winner_id=swap(m.winner_id),
        )
        for m in tournament.matches
    ]

    logger.info(f"Replaced {old.name} ({old_id}) with {new_name} ({new_id})")
    return replace(tournament, participants=participants, matches=matches)


def set_manual_rank_adjustment(
    tournament: Tournament, participant_id: str, value: int
) -> Tournament:
    """Set the operator tie-break override of a participant.

    Raises:
        ParticipantNotFoundException: If ``participant_id`` is unknown
    """
    participant = get_participant(tournament, participant_id)
    participants = [
        replace(p, manual_rank_adjustment=value) if p.id == participant_id else p
        for p in tournament.participants
    ]
    logger.info(f"Set manual rank adjustment of {participant.name} to {value}")
    return replace(tournament, participants=participants)
