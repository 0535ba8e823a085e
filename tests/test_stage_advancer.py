import random
from dataclasses import replace

from twostage.constants import FINALS_GROUP
from twostage.controllers import (
    advance_to_stage_2,
    can_advance_to_stage_2,
    create_tournament,
    has_stage_2,
    is_stage_complete,
    simulate_results,
    stage_2_of,
)
from twostage.models import (
    EliminationType,
    Participant,
    Stage,
    Tournament,
    TournamentConfig,
)
from twostage.standings import calculate_standings


def _played_group_stage(
    qualify=8, elimination=EliminationType.SINGLE_ELIMINATION, seed=5
):
    names, groups = [], []
    for label in "ABC":
        for i in range(4):
            names.append(f"Player {label}{i + 1}")
            groups.append(label)
    config = TournamentConfig(
        name="Spring Cup",
        slug="spring-cup",
        qualification_count=qualify,
        elimination_type=elimination,
    )
    tournament = create_tournament(config, names, groups)
    matches = simulate_results(
        tournament.matches, Stage.ROUND_ROBIN_1, random.Random(seed)
    )
    return replace(tournament, matches=matches)


def test_stage_2_of():
    assert stage_2_of(EliminationType.SINGLE_ELIMINATION) == Stage.SINGLE_ELIMINATION
    assert stage_2_of(EliminationType.ROUND_ROBIN_2) == Stage.ROUND_ROBIN_2


def test_readiness_checks():
    config = TournamentConfig(name="Cup", slug="cup")
    tournament = create_tournament(config, ["a", "b", "c", "d"])

    assert not is_stage_complete(tournament.matches, Stage.ROUND_ROBIN_1)
    assert not is_stage_complete([], Stage.ROUND_ROBIN_1)
    assert not can_advance_to_stage_2(tournament)

    played = simulate_results(tournament.matches, Stage.ROUND_ROBIN_1)
    assert is_stage_complete(played, Stage.ROUND_ROBIN_1)
    assert not has_stage_2(played)


def test_top_global_ranks_qualify_for_bracket():
    tournament = _played_group_stage()
    assert can_advance_to_stage_2(tournament)

    advanced = advance_to_stage_2(tournament)

    standings = calculate_standings(
        tournament.participants, tournament.matches, Stage.ROUND_ROBIN_1
    )
    expected = {p.id for p in standings if p.global_rank <= 8}
    qualified = {p.id for p in advanced.participants if p.is_qualified}
    assert qualified == expected
    assert len(qualified) == 8


def test_bracket_is_seeded_by_global_rank():
    advanced = advance_to_stage_2(_played_group_stage())
    rank = {p.id: p.global_rank for p in advanced.participants}

    bracket = advanced.matches_for_stage(Stage.SINGLE_ELIMINATION)
    assert len(bracket) == 7

    first_round = [m for m in bracket if m.round == 1]
    pairs = [(rank[m.participant_a_id], rank[m.participant_b_id]) for m in first_round]
    assert pairs == [(1, 8), (4, 5), (3, 6), (2, 7)]
    assert all(m.tournament_id == advanced.id for m in bracket)


def test_stage_1_matches_are_kept_unchanged():
    tournament = _played_group_stage()

    advanced = advance_to_stage_2(tournament)

    stage_1 = tournament.matches
    assert advanced.matches[: len(stage_1)] == stage_1
    assert all(m.stage != Stage.ROUND_ROBIN_1 for m in advanced.matches[len(stage_1) :])
    assert has_stage_2(advanced.matches)
    assert not can_advance_to_stage_2(advanced)


def test_input_tournament_is_not_modified():
    tournament = _played_group_stage()
    match_count = len(tournament.matches)

    advance_to_stage_2(tournament)

    assert len(tournament.matches) == match_count
    assert not any(p.is_qualified for p in tournament.participants)


def test_second_round_robin_among_qualifiers():
    tournament = _played_group_stage(
        qualify=4, elimination=EliminationType.ROUND_ROBIN_2
    )

    advanced = advance_to_stage_2(tournament)

    qualified = {p.id for p in advanced.participants if p.is_qualified}
    final_round = advanced.matches_for_stage(Stage.ROUND_ROBIN_2)
    assert len(qualified) == 4
    assert len(final_round) == 6
    for m in final_round:
        assert m.participant_a_id in qualified
        assert m.participant_b_id in qualified
        assert m.next_match_id is None
    assert {m.round for m in final_round} == {1, 2, 3}
    # Qualifiers keep their group stage group
    assert FINALS_GROUP not in {p.group for p in advanced.participants}


def test_oversized_qualification_count_qualifies_everyone():
    tournament = Tournament(
        id="t1",
        config=TournamentConfig(name="Cup", slug="cup", qualification_count=20),
        participants=[Participant(id=f"P{i}", name=f"P{i}") for i in range(4)],
    )

    advanced = advance_to_stage_2(tournament)

    assert all(p.is_qualified for p in advanced.participants)
    assert len(advanced.matches_for_stage(Stage.SINGLE_ELIMINATION)) == 3
