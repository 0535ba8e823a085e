"""Enumerations shared by the tournament models."""

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

from enum import Enum


class Stage(str, Enum):
    """Sequential phase a match belongs to."""

    ROUND_ROBIN_1 = "RR1"
    SINGLE_ELIMINATION = "SE"
    ROUND_ROBIN_2 = "RR2"


class EliminationType(str, Enum):
    """Format of the second stage."""

    SINGLE_ELIMINATION = "SINGLE_ELIMINATION"
    ROUND_ROBIN_2 = "ROUND_ROBIN_2"


class TournamentStatus(str, Enum):
    """Lifecycle of a tournament."""

    SETUP = "SETUP"
    STARTED = "STARTED"
    COMPLETED = "COMPLETED"


class Slot(str, Enum):
    """Side of a bracket match a feeder winner is placed into."""

    A = "A"
    B = "B"
