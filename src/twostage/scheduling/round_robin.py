"""Round robin scheduling using the circle method.

Player 0 of each group stays fixed while the others rotate one position per
round, so every pair meets exactly once over n-1 rounds when the group size n
is even.
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

from typing import Dict, List, Tuple

from twostage.constants import DEFAULT_GROUP
from twostage.models import Match, Participant, Stage
from twostage.type_hints import GroupMembers
from twostage.utils import generate_id, setup_logger

logger = setup_logger(__name__)


def group_participants(participants: List[Participant]) -> GroupMembers:
    """Partition participant ids by group label.

    Groups and members keep the order in which they are first seen.

    Args:
        participants: Participants to partition

    Returns:
        Mapping of group label to participant ids
    """
    groups: Dict[str, List[str]] = {}
    for participant in participants:
        groups.setdefault(participant.group or DEFAULT_GROUP, []).append(
            participant.id
        )
    return groups


def circle_rounds(player_ids: List[str]) -> List[List[Tuple[str, str]]]:
    """Build round pairings for one group with the circle method.

    Round r pairs position i with position n-1-i. After each round the last
    player moves to index 1 and everybody from there on shifts right.

    With an odd number of players the middle position sits out each round
    and some pairings are never produced.

    Args:
        player_ids: Ids in seeding order; not modified

    Returns:
        One list of (a, b) id pairs per round
    """
    n = len(player_ids)
    if n < 2:
        return []

    order = list(player_ids)
    half = n // 2
    rounds = []
    for _ in range(n - 1):
        rounds.append([(order[i], order[n - 1 - i]) for i in range(half)])
        order.insert(1, order.pop())
    return rounds


def generate_round_robin(
    tournament_id: str, participants: List[Participant], stage: Stage
) -> List[Match]:
    """Generate a complete round robin fixture list for every group.

    Groups with fewer than two members are skipped. Matches come out group by
    group, round by round, pair by pair.

    Args:
        tournament_id: Owning tournament
        participants: Participants, partitioned by their ``group``
        stage: Stage stamped on every generated match

    Returns:
        New, unplayed matches
    """
    matches: List[Match] = []

    for label, player_ids in group_participants(participants).items():
        if len(player_ids) < 2:
            logger.debug(f"Group {label} has fewer than 2 players, no matches")
            continue
        if len(player_ids) % 2 != 0:
            logger.warning(
                f"Group {label} has an odd number of players ({len(player_ids)}); "
                "one player sits out each round and the schedule is incomplete"
            )

        for round_index, pairs in enumerate(circle_rounds(player_ids)):
            for a_id, b_id in pairs:
                matches.append(
                    Match(
                        id=generate_id(),
                        tournament_id=tournament_id,
                        stage=stage,
                        round=round_index + 1,
                        participant_a_id=a_id,
                        participant_b_id=b_id,
                    )
                )

    logger.info(f"Generated {len(matches)} {stage.value} matches")
    return matches
