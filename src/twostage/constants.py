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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"
DEFAULT_STORE_FILE = f"tournaments{SAVE_FILE_EXTENSION}"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Groups
DEFAULT_GROUP = "A"
FINALS_GROUP = "Finals"  # Synthetic group used for the second round robin

# Seeding tables for single elimination, 1-based seeds in visual top-to-bottom
# order. Other bracket sizes fall back to folding the seed list.
SEEDING_TABLES = {
    4: [(1, 4), (2, 3)],
    8: [(1, 8), (4, 5), (3, 6), (2, 7)],
    16: [
        (1, 16),
        (8, 9),
        (5, 12),
        (4, 13),
        (6, 11),
        (3, 14),
        (7, 10),
        (2, 15),
    ],
}

# Simulated results (first to 16)
WINNING_SCORE = 16
MAX_LOSING_SCORE = 14

# Smallest group that can play a round robin
MIN_GROUP_SIZE = 2
