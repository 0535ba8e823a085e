"""Fixture generation: round robin schedules and elimination brackets."""

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

from twostage.scheduling.bracket import generate_bracket, seed_pairs
from twostage.scheduling.round_robin import (
    circle_rounds,
    generate_round_robin,
    group_participants,
)

__all__ = [
    "circle_rounds",
    "generate_bracket",
    "generate_round_robin",
    "group_participants",
    "seed_pairs",
]
