"""Tournament persistence keyed by URL slug.

Stores are injected into ``TournamentManager``; the scheduling and standings
code never touches them. Tournaments are kept in serialized form so a stored
snapshot cannot be changed through an object a caller still holds.
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

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from twostage.exceptions import FileLoadException, FileSaveException
from twostage.models import Tournament
from twostage.utils import setup_logger

logger = setup_logger(__name__)


class TournamentStore(ABC):
    """Key-value store of tournaments, keyed by slug."""

    @abstractmethod
    def get(self, slug: str) -> Optional[Tournament]:
        """Load a tournament, or None if the slug is unknown."""

    @abstractmethod
    def put(self, tournament: Tournament) -> None:
        """Insert or overwrite the tournament stored under its slug."""

    @abstractmethod
    def exists(self, slug: str) -> bool:
        """Check whether a slug is taken."""

    @abstractmethod
    def list_all(self) -> List[Tournament]:
        """Load every tournament, newest first."""


def _newest_first(tournaments: List[Tournament]) -> List[Tournament]:
    return sorted(tournaments, key=lambda t: t.created_at, reverse=True)


class InMemoryTournamentStore(TournamentStore):
    """Process-local store, mostly for tests and the demo command."""

    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Any]] = {}

    def get(self, slug: str) -> Optional[Tournament]:
        data = self._data.get(slug)
        return Tournament.from_dict(data) if data is not None else None

    def put(self, tournament: Tournament) -> None:
        self._data[tournament.slug] = tournament.to_dict()

    def exists(self, slug: str) -> bool:
        return slug in self._data

    def list_all(self) -> List[Tournament]:
        return _newest_first([Tournament.from_dict(d) for d in self._data.values()])


class JsonFileTournamentStore(TournamentStore):
    """All tournaments in one JSON file: ``{"tournaments": {slug: {...}}}``.

    A missing file reads as an empty store and is created on first write.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, Dict[str, Any]]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.exception(f"Error loading tournaments from {self.path}:")
            raise FileLoadException(f"Could not load {self.path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(
            data.get("tournaments", {}), dict
        ):
            raise FileLoadException(f"{self.path} is not a tournament store")
        return data.get("tournaments", {})

    def _write(self, tournaments: Dict[str, Dict[str, Any]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"tournaments": tournaments}, f, indent=4)
        except OSError as e:
            logger.exception(f"Error saving tournaments to {self.path}:")
            raise FileSaveException(f"Could not save {self.path}: {e}") from e

    def _load(self, slug: str, data: Dict[str, Any]) -> Tournament:
        try:
            return Tournament.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.exception(f"Error reading tournament {slug} from {self.path}:")
            raise FileLoadException(
                f"Tournament {slug} in {self.path} is malformed: {e}"
            ) from e

    def get(self, slug: str) -> Optional[Tournament]:
        data = self._read().get(slug)
        return self._load(slug, data) if data is not None else None

    def put(self, tournament: Tournament) -> None:
        tournaments = self._read()
        tournaments[tournament.slug] = tournament.to_dict()
        self._write(tournaments)
        logger.debug(f"Saved {tournament.slug} to {self.path}")

    def exists(self, slug: str) -> bool:
        return slug in self._read()

    def list_all(self) -> List[Tournament]:
        return _newest_first(
            [self._load(slug, d) for slug, d in self._read().items()]
        )
