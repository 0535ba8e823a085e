import pytest

from twostage.controllers import create_tournament
from twostage.exceptions import InvalidConfigurationException, SlugValidationException
from twostage.models import EliminationType, Stage, TournamentConfig, TournamentStatus


def _names(groups=3, size=4):
    names, labels = [], []
    for label in "ABCDEFGH"[:groups]:
        for i in range(size):
            names.append(f"Player {label}{i + 1}")
            labels.append(label)
    return names, labels


def _config(**kwargs):
    defaults = {"name": "Spring Cup", "slug": "spring-cup", "qualification_count": 8}
    defaults.update(kwargs)
    return TournamentConfig(**defaults)


def test_create_tournament_with_groups():
    names, groups = _names()

    tournament = create_tournament(_config(), names, groups)

    assert tournament.status == TournamentStatus.STARTED
    assert tournament.config.participant_count == 12
    assert len(tournament.participants) == 12
    assert [p.name for p in tournament.participants] == names
    assert [p.group for p in tournament.participants] == groups
    assert len(tournament.matches) == 3 * 6
    assert all(m.stage == Stage.ROUND_ROBIN_1 for m in tournament.matches)
    assert all(m.tournament_id == tournament.id for m in tournament.matches)
    assert len({p.id for p in tournament.participants}) == 12


def test_names_and_slug_are_cleaned():
    config = _config(name="  Spring Cup ", slug=" Spring-Cup", qualification_count=2)

    tournament = create_tournament(config, [" Ana ", "Bruno"])

    assert tournament.slug == "spring-cup"
    assert tournament.name == "Spring Cup"
    assert [p.name for p in tournament.participants] == ["Ana", "Bruno"]


def test_everybody_in_one_group_by_default():
    tournament = create_tournament(_config(qualification_count=4), ["a", "b", "c", "d"])

    assert {p.group for p in tournament.participants} == {"A"}
    assert len(tournament.matches) == 6


def test_blank_group_label_means_default_group():
    tournament = create_tournament(
        _config(qualification_count=2), ["a", "b", "c", "d"], ["A", " ", "", "A"]
    )

    assert {p.group for p in tournament.participants} == {"A"}


def test_odd_group_is_rejected():
    names, groups = _names(groups=2, size=3)

    with pytest.raises(InvalidConfigurationException, match="even number"):
        create_tournament(_config(qualification_count=4), names, groups)


def test_invalid_slug_is_rejected():
    names, groups = _names()

    with pytest.raises(SlugValidationException):
        create_tournament(_config(slug="spring cup"), names, groups)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "  "},
        {"qualification_count": 6},
        {"qualification_count": 16},
        {"qualification_count": 1},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    names, groups = _names()

    with pytest.raises(InvalidConfigurationException):
        create_tournament(_config(**kwargs), names, groups)


def test_second_round_robin_needs_no_power_of_two():
    names, groups = _names()
    config = _config(
        qualification_count=6, elimination_type=EliminationType.ROUND_ROBIN_2
    )

    tournament = create_tournament(config, names, groups)

    assert tournament.qualification_count == 6


def test_blank_participant_name_is_rejected():
    with pytest.raises(InvalidConfigurationException, match="participant names"):
        create_tournament(_config(qualification_count=2), ["Ana", " "])


def test_group_assignments_must_match_names():
    with pytest.raises(InvalidConfigurationException):
        create_tournament(_config(qualification_count=2), ["a", "b"], ["A"])
