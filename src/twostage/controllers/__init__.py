"""Tournament controllers: stage transition, results, participants and setup."""

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

from twostage.controllers.participants import (
    get_participant,
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
from twostage.controllers.tournament_manager import TournamentManager

__all__ = [
    "TournamentManager",
    "advance_to_stage_2",
    "apply_match_result",
    "can_advance_to_stage_2",
    "create_tournament",
    "get_participant",
    "has_stage_2",
    "is_stage_complete",
    "replace_participant",
    "reset_match_result",
    "set_manual_rank_adjustment",
    "simulate_results",
    "stage_2_of",
]
