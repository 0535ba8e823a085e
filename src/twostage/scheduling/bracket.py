"""Single elimination bracket generation.

Round 1 pairs seeds from fixed tables for 4, 8 and 16 qualifiers so the top
seeds cannot meet early. Every later match is fed by two consecutive matches
of the previous round.
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

from typing import List

from twostage.constants import SEEDING_TABLES
from twostage.models import Match, Participant, Slot, Stage
from twostage.type_hints import SeedPairs
from twostage.utils import generate_id, setup_logger
from twostage.utils.validation import is_power_of_two

logger = setup_logger(__name__)


def seed_pairs(count: int) -> SeedPairs:
    """Get round 1 pairings as 0-based indices into the seeded list.

    Sizes 4, 8 and 16 use the standard tables. Any other size folds the list
    (seed i against seed N-1-i), which does not keep top seeds apart.

    Args:
        count: Number of qualifiers

    Returns:
        Index pairs in visual top-to-bottom order
    """
    if count in SEEDING_TABLES:
        return [(a - 1, b - 1) for a, b in SEEDING_TABLES[count]]
    return [(i, count - 1 - i) for i in range(count // 2)]


def _round_sizes(first_round: int) -> List[int]:
    """Number of matches in each round, down to the final."""
    sizes = [first_round]
    while sizes[-1] > 1:
        sizes.append((sizes[-1] + 1) // 2)
    return sizes


def generate_bracket(tournament_id: str, qualifiers: List[Participant]) -> List[Match]:
    """Build a single elimination match tree.

    All ids are allocated up front, so each match is created exactly once
    with its ``next_match_id``/``next_match_slot`` already set: match i of a
    round feeds match i // 2 of the next round, slot A when i is even and
    slot B when odd. The last match created is the final.

    Sizes that are not a power of two are accepted. When a round has an odd
    number of matches the leftover one feeds a match whose slot B is never
    filled, so the tree is ill-formed; callers should only ask for powers of
    two.

    Args:
        tournament_id: Owning tournament
        qualifiers: Participants ordered by seed, seed 1 first

    Returns:
        Bracket matches ordered round by round
    """
    count = len(qualifiers)
    if not is_power_of_two(count):
        logger.warning(
            f"Bracket of {count} qualifiers is not a power of two; "
            "using fallback seeding"
        )

    pairs = seed_pairs(count)
    if not pairs:
        return []

    round_ids = [
        [generate_id() for _ in range(size)] for size in _round_sizes(len(pairs))
    ]

    matches: List[Match] = []
    for round_index, ids in enumerate(round_ids):
        is_last = round_index + 1 == len(round_ids)
        next_ids = None if is_last else round_ids[round_index + 1]

        for position, match_id in enumerate(ids):
            if round_index == 0:
                a_index, b_index = pairs[position]
                a_id, b_id = qualifiers[a_index].id, qualifiers[b_index].id
            else:
                a_id = b_id = None

            matches.append(
                Match(
                    id=match_id,
                    tournament_id=tournament_id,
                    stage=Stage.SINGLE_ELIMINATION,
                    round=round_index + 1,
                    participant_a_id=a_id,
                    participant_b_id=b_id,
                    next_match_id=next_ids[position // 2] if next_ids else None,
                    next_match_slot=(
                        (Slot.A if position % 2 == 0 else Slot.B) if next_ids else None
                    ),
                )
            )

    logger.info(
        f"Generated bracket for {count} qualifiers: "
        f"{len(matches)} matches over {len(round_ids)} rounds"
    )
    return matches
