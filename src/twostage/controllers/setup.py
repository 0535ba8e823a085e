"""Tournament setup.

Validates setup input and builds a started tournament with its group stage
fixtures. This is the input-validation boundary: the scheduling code accepts
anything, so odd groups and impossible qualification counts are refused here.
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

from collections import Counter
from dataclasses import replace
from typing import List, Optional

from twostage.constants import DEFAULT_GROUP
from twostage.exceptions import InvalidConfigurationException
from twostage.models import (
    Participant,
    Stage,
    Tournament,
    TournamentConfig,
    TournamentStatus,
)
from twostage.scheduling import generate_round_robin
from twostage.utils import generate_id, setup_logger
from twostage.utils.validation import (
    validate_group_sizes,
    validate_non_empty,
    validate_participant_name,
    validate_qualification_count,
    validate_slug_strict,
)

logger = setup_logger(__name__)


def _check(result) -> None:
    if not result.is_valid:
        raise InvalidConfigurationException(result.error_message)


def create_tournament(
    config: TournamentConfig,
    participant_names: List[str],
    group_assignments: Optional[List[str]] = None,
) -> Tournament:
    """Create a tournament ready for its first round robin.

    Args:
        config: Tournament settings; ``participant_count`` is taken from
            the number of names
        participant_names: Display names, in seeding order
        group_assignments: Group label for each name, parallel to
            ``participant_names``; everybody is in group "A" if omitted

    Returns:
        New tournament with status STARTED and all stage 1 matches

    Raises:
        SlugValidationException: If the slug is not URL-safe
        InvalidConfigurationException: If any other setup value is invalid
    """
    slug = validate_slug_strict(config.slug)
    _check(validate_non_empty(config.name, "Tournament name"))

    names = []
    for name in participant_names:
        result = validate_participant_name(name)
        _check(result)
        names.append(result.sanitized_value)

    if group_assignments is None:
        groups = [DEFAULT_GROUP] * len(names)
    elif len(group_assignments) != len(names):
        raise InvalidConfigurationException(
            f"Got {len(group_assignments)} group assignments "
            f"for {len(names)} participants"
        )
    else:
        groups = [(g or "").strip() or DEFAULT_GROUP for g in group_assignments]

    _check(validate_group_sizes(dict(Counter(groups))))
    _check(
        validate_qualification_count(
            config.qualification_count, len(names), config.elimination_type
        )
    )

    tournament_id = generate_id()
    participants = [
        Participant(id=generate_id(), name=name, group=group)
        for name, group in zip(names, groups)
    ]
    matches = generate_round_robin(tournament_id, participants, Stage.ROUND_ROBIN_1)

    tournament = Tournament(
        id=tournament_id,
        config=replace(
            config, slug=slug, name=config.name.strip(), participant_count=len(names)
        ),
        status=TournamentStatus.STARTED,
        participants=participants,
        matches=matches,
    )
    logger.info(
        f"Created tournament {tournament.name} ({slug}): "
        f"{len(participants)} participants, {len(matches)} group matches"
    )
    return tournament
