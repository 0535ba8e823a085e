import pytest

from twostage.exceptions import InvalidResultException, SlugValidationException
from twostage.models import EliminationType
from twostage.utils.validation import (
    is_power_of_two,
    validate_group_sizes,
    validate_non_empty,
    validate_participant_name,
    validate_qualification_count,
    validate_score_entry,
    validate_score_entry_strict,
    validate_slug,
    validate_slug_strict,
)

SE = EliminationType.SINGLE_ELIMINATION
RR2 = EliminationType.ROUND_ROBIN_2


@pytest.mark.parametrize("n", [1, 2, 4, 8, 16, 64])
def test_powers_of_two(n):
    assert is_power_of_two(n)


@pytest.mark.parametrize("n", [0, -4, 3, 6, 12])
def test_not_powers_of_two(n):
    assert not is_power_of_two(n)


@pytest.mark.parametrize(
    "slug, expected",
    [
        ("spring-cup", "spring-cup"),
        ("  Winter-Cup-2025 ", "winter-cup-2025"),
        ("a1", "a1"),
    ],
)
def test_valid_slugs(slug, expected):
    result = validate_slug(slug)
    assert result
    assert result.sanitized_value == expected
    assert validate_slug_strict(slug) == expected


@pytest.mark.parametrize(
    "slug", [None, "", "   ", "spring cup", "-cup", "cup-", "a--b", "cup_2025", "café"]
)
def test_invalid_slugs(slug):
    result = validate_slug(slug)
    assert not result
    assert result.error_message
    with pytest.raises(SlugValidationException):
        validate_slug_strict(slug)


def test_non_empty():
    assert validate_non_empty(" Cup ", "Tournament name").sanitized_value == "Cup"
    result = validate_non_empty("  ", "Tournament name")
    assert not result
    assert result.error_message == "Tournament name cannot be empty"


def test_participant_names():
    assert validate_participant_name("Ana - Bruno").sanitized_value == "Ana - Bruno"
    assert not validate_participant_name("")
    assert not validate_participant_name(None)


def test_group_sizes():
    assert validate_group_sizes({"A": 4, "B": 2})
    assert not validate_group_sizes({})
    assert not validate_group_sizes({"A": 4, "B": 1})

    odd = validate_group_sizes({"A": 4, "B": 3})
    assert not odd
    assert '"B"' in odd.error_message


@pytest.mark.parametrize(
    "count, total, elimination, valid",
    [
        (8, 12, SE, True),
        (4, 4, SE, True),
        (6, 12, SE, False),
        (6, 12, RR2, True),
        (1, 12, RR2, False),
        (16, 12, SE, False),
        (13, 12, RR2, False),
    ],
)
def test_qualification_count(count, total, elimination, valid):
    assert bool(validate_qualification_count(count, total, elimination)) is valid


def test_score_entry():
    result = validate_score_entry(16, 9)
    assert result
    assert result.sanitized_value == "16-9"
    assert validate_score_entry(0, 1)


@pytest.mark.parametrize(
    "score_a, score_b, message",
    [
        (16, 16, "Draws are not allowed"),
        (-1, 16, "negative"),
        (16, 2.5, "whole numbers"),
        (True, 0, "whole numbers"),
        ("16", 4, "whole numbers"),
    ],
)
def test_invalid_score_entry(score_a, score_b, message):
    result = validate_score_entry(score_a, score_b)
    assert not result
    assert message in result.error_message
    with pytest.raises(InvalidResultException):
        validate_score_entry_strict(score_a, score_b)


def test_validation_result_repr():
    assert "VALID" in repr(validate_slug("cup"))
    assert "INVALID" in repr(validate_slug(""))
