import json
from datetime import datetime, timedelta, timezone

import pytest

from twostage.controllers import create_tournament
from twostage.exceptions import FileLoadException
from twostage.models import TournamentConfig
from twostage.storage import InMemoryTournamentStore, JsonFileTournamentStore


def _tournament(slug="spring-cup", created_at=None):
    config = TournamentConfig(name="Spring Cup", slug=slug, qualification_count=2)
    tournament = create_tournament(config, ["Ana", "Bruno", "Carla", "Dario"])
    if created_at is not None:
        tournament.created_at = created_at
    return tournament


@pytest.fixture(params=["memory", "json"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemoryTournamentStore()
    return JsonFileTournamentStore(tmp_path / "data" / "tournaments.json")


def test_put_and_get(store):
    tournament = _tournament()

    store.put(tournament)

    assert store.exists("spring-cup")
    loaded = store.get("spring-cup")
    assert loaded == tournament
    assert loaded is not tournament


def test_unknown_slug(store):
    assert store.get("nothing-here") is None
    assert not store.exists("nothing-here")
    assert store.list_all() == []


def test_put_overwrites(store):
    tournament = _tournament()
    store.put(tournament)

    tournament.participants[0].name = "Eva"
    store.put(tournament)

    assert store.get("spring-cup").participants[0].name == "Eva"
    assert len(store.list_all()) == 1


def test_list_all_newest_first(store):
    now = datetime(2025, 5, 1, tzinfo=timezone.utc)
    store.put(_tournament("old-cup", now - timedelta(days=2)))
    store.put(_tournament("new-cup", now))
    store.put(_tournament("mid-cup", now - timedelta(days=1)))

    assert [t.slug for t in store.list_all()] == ["new-cup", "mid-cup", "old-cup"]


def test_json_file_layout(tmp_path):
    path = tmp_path / "tournaments.json"
    JsonFileTournamentStore(path).put(_tournament())

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    assert list(data) == ["tournaments"]
    stored = data["tournaments"]["spring-cup"]
    assert stored["config"]["slug"] == "spring-cup"
    assert stored["matches"][0]["stage"] == "RR1"
    assert stored["status"] == "STARTED"


def test_json_store_survives_reopen(tmp_path):
    path = tmp_path / "tournaments.json"
    tournament = _tournament()
    JsonFileTournamentStore(path).put(tournament)

    assert JsonFileTournamentStore(path).get("spring-cup") == tournament


def test_malformed_json_raises(tmp_path):
    path = tmp_path / "tournaments.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FileLoadException):
        JsonFileTournamentStore(path).get("spring-cup")


def test_unexpected_json_shape_raises(tmp_path):
    path = tmp_path / "tournaments.json"
    path.write_text(json.dumps({"tournaments": ["spring-cup"]}), encoding="utf-8")

    with pytest.raises(FileLoadException):
        JsonFileTournamentStore(path).list_all()


@pytest.mark.parametrize(
    "entry",
    [
        {"id": "x"},
        {"id": "x", "config": {"slug": "cup"}},
        {"id": "x", "config": {"slug": "cup", "qualification_count": 4}, "status": "?"},
        {"id": "x", "config": {"slug": "cup", "qualification_count": 4}, "matches": 3},
    ],
)
def test_malformed_tournament_entry_raises(tmp_path, entry):
    path = tmp_path / "tournaments.json"
    path.write_text(json.dumps({"tournaments": {"cup": entry}}), encoding="utf-8")
    store = JsonFileTournamentStore(path)

    with pytest.raises(FileLoadException):
        store.get("cup")
    with pytest.raises(FileLoadException):
        store.list_all()


def test_timestamp_without_offset_is_read_as_utc(tmp_path):
    path = tmp_path / "tournaments.json"
    store = JsonFileTournamentStore(path)
    store.put(_tournament("new-cup", datetime(2025, 5, 2, tzinfo=timezone.utc)))
    old = _tournament("old-cup").to_dict()
    old["created_at"] = "2025-05-01T12:00:00"
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    data["tournaments"]["old-cup"] = old
    path.write_text(json.dumps(data), encoding="utf-8")

    tournaments = store.list_all()

    assert [t.slug for t in tournaments] == ["new-cup", "old-cup"]
    assert tournaments[1].created_at == datetime(2025, 5, 1, 12, tzinfo=timezone.utc)
