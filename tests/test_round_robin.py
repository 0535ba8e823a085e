import logging
from collections import Counter
from itertools import combinations

import pytest

from twostage.models import Participant, Stage
from twostage.scheduling import circle_rounds, generate_round_robin


def _participants(count, group="A", prefix="P"):
    return [
        Participant(id=f"{prefix}{i + 1}", name=f"Player {prefix}{i + 1}", group=group)
        for i in range(count)
    ]


@pytest.mark.parametrize("size", [2, 4, 6, 8, 16])
def test_even_group_plays_every_pair_once(size):
    players = _participants(size)
    matches = generate_round_robin("t1", players, Stage.ROUND_ROBIN_1)

    assert len(matches) == size * (size - 1) // 2

    pairs = Counter(
        frozenset((m.participant_a_id, m.participant_b_id)) for m in matches
    )
    expected = {frozenset(pair) for pair in combinations([p.id for p in players], 2)}
    assert set(pairs) == expected
    assert all(count == 1 for count in pairs.values())


@pytest.mark.parametrize("size", [4, 6, 8])
def test_each_player_appears_once_per_round(size):
    matches = generate_round_robin("t1", _participants(size), Stage.ROUND_ROBIN_1)

    rounds = sorted({m.round for m in matches})
    assert rounds == list(range(1, size))

    for round_number in rounds:
        seen = []
        for m in matches:
            if m.round == round_number:
                seen.extend([m.participant_a_id, m.participant_b_id])
        assert sorted(seen) == sorted(f"P{i + 1}" for i in range(size))


def test_circle_method_rotation_order():
    rounds = circle_rounds(["p0", "p1", "p2", "p3"])

    assert rounds == [
        [("p0", "p3"), ("p1", "p2")],
        [("p0", "p2"), ("p3", "p1")],
        [("p0", "p1"), ("p2", "p3")],
    ]


def test_circle_rounds_does_not_modify_input():
    ids = ["a", "b", "c", "d"]
    circle_rounds(ids)
    assert ids == ["a", "b", "c", "d"]


def test_groups_are_scheduled_separately_in_order():
    group_a = _participants(4, group="A", prefix="A")
    group_b = _participants(4, group="B", prefix="B")
    matches = generate_round_robin("t1", group_a + group_b, Stage.ROUND_ROBIN_1)

    assert len(matches) == 12
    first_half, second_half = matches[:6], matches[6:]
    assert all(m.participant_a_id.startswith("A") for m in first_half)
    assert all(m.participant_b_id.startswith("A") for m in first_half)
    assert all(m.participant_a_id.startswith("B") for m in second_half)
    assert all(m.participant_b_id.startswith("B") for m in second_half)
    # Round by round within a group
    assert [m.round for m in first_half] == [1, 1, 2, 2, 3, 3]


def test_groups_with_fewer_than_two_players_are_skipped():
    lonely = _participants(1, group="Z", prefix="Z")
    matches = generate_round_robin(
        "t1", lonely + _participants(2, group="A"), Stage.ROUND_ROBIN_1
    )

    assert len(matches) == 1
    assert {matches[0].participant_a_id, matches[0].participant_b_id} == {"P1", "P2"}


def test_empty_input_gives_no_matches():
    assert generate_round_robin("t1", [], Stage.ROUND_ROBIN_1) == []


def test_blank_group_label_joins_default_group():
    players = _participants(2, group="A")
    players.append(Participant(id="X1", name="No group", group=""))
    players.append(Participant(id="X2", name="No group either", group=""))

    matches = generate_round_robin("t1", players, Stage.ROUND_ROBIN_1)

    assert len(matches) == 6


def test_new_matches_are_unplayed_and_stamped():
    matches = generate_round_robin("t42", _participants(4), Stage.ROUND_ROBIN_2)

    assert len({m.id for m in matches}) == len(matches)
    for m in matches:
        assert m.tournament_id == "t42"
        assert m.stage == Stage.ROUND_ROBIN_2
        assert m.score_a is None and m.score_b is None
        assert m.winner_id is None
        assert not m.is_completed
        assert m.next_match_id is None and m.next_match_slot is None


def test_odd_group_leaves_one_player_out_each_round(caplog):
    with caplog.at_level(logging.WARNING, logger="twostage"):
        matches = generate_round_robin("t1", _participants(5), Stage.ROUND_ROBIN_1)

    assert "odd number of players" in caplog.text
    assert len(matches) == 4 * 2
    for m in matches:
        assert m.participant_a_id != m.participant_b_id
    for round_number in range(1, 5):
        players = [
            pid
            for m in matches
            if m.round == round_number
            for pid in (m.participant_a_id, m.participant_b_id)
        ]
        assert len(players) == len(set(players)) == 4
