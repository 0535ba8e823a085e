"""Validation utilities for Two Stage.

This module provides reusable validation functions with consistent error handling.
Tournament setup and score entry run through these checks before anything is
handed to the scheduling and standings code, which never rejects input itself.
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

import re
from typing import Dict, Optional

from twostage.constants import MIN_GROUP_SIZE
from twostage.exceptions import InvalidResultException, SlugValidationException
from twostage.models.enums import EliminationType


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def is_power_of_two(n: int) -> bool:
    """Check whether n is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


# ========== Slug Validation ==========


def validate_slug(slug: Optional[str]) -> ValidationResult:
    """Validate a URL slug.

    Slugs are lowercase letters and digits separated by single hyphens,
    e.g. ``winter-cup-2025``.

    Args:
        slug: Slug to validate

    Returns:
        ValidationResult with the lower-cased slug as sanitized value
    """
    if not slug or not slug.strip():
        return ValidationResult(is_valid=False, error_message="URL slug is required")

    slug = slug.strip().lower()

    if not re.match(r"^[a-z0-9]+(-[a-z0-9]+)*$", slug):
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Invalid URL slug: {slug} "
                "(use letters, digits and single hyphens)"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=slug)


def validate_slug_strict(slug: str) -> str:
    """Validate slug and return it sanitized or raise exception.

    Args:
        slug: Slug to validate

    Returns:
        Sanitized slug

    Raises:
        SlugValidationException: If slug is invalid
    """
    result = validate_slug(slug)
    if not result.is_valid:
        raise SlugValidationException(result.error_message)
    return result.sanitized_value or ""


# ========== Generic Validation ==========


def validate_non_empty(
    value: Optional[str], field_name: str = "Field"
) -> ValidationResult:
    """Validate that a field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if not value or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


# ========== Participant Validation ==========


def validate_participant_name(name: Optional[str]) -> ValidationResult:
    """Validate a participant's display name.

    Names are free text (team names such as "Ana - Bruno" are common), so the
    only requirement is that something remains after stripping whitespace.
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="All participant names must be filled",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_group_sizes(groups: Dict[str, int]) -> ValidationResult:
    """Validate group sizes for the first round robin.

    Every group needs at least two members, and an even number of them:
    the circle method has no bye handling, so odd groups would leave
    pairings unplayed.

    Args:
        groups: Mapping of group label to member count

    Returns:
        ValidationResult with validation status
    """
    if not groups:
        return ValidationResult(
            is_valid=False, error_message="At least one group is required"
        )

    for label, size in groups.items():
        if size < MIN_GROUP_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f'Group "{label}" must have at least '
                    f"{MIN_GROUP_SIZE} participants"
                ),
            )
        if size % 2 != 0:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f'Group "{label}" has {size} participants; '
                    "groups must have an even number of participants"
                ),
            )

    return ValidationResult(is_valid=True)


def validate_qualification_count(
    count: int, participant_count: int, elimination_type: EliminationType
) -> ValidationResult:
    """Validate how many participants advance to the second stage.

    Args:
        count: Number of qualifiers
        participant_count: Total number of participants
        elimination_type: Format of the second stage

    Returns:
        ValidationResult with validation status
    """
    if count < 2:
        return ValidationResult(
            is_valid=False, error_message="At least 2 participants must qualify"
        )

    if count > participant_count:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Cannot qualify {count} players from only "
                f"{participant_count} participants"
            ),
        )

    if (
        elimination_type == EliminationType.SINGLE_ELIMINATION
        and not is_power_of_two(count)
    ):
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Single elimination needs a power of two qualifiers, got {count}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=str(count))


# ========== Score Validation ==========


def validate_score_entry(score_a: int, score_b: int) -> ValidationResult:
    """Validate a pair of match scores.

    Scores must be non-negative integers and draws are not allowed.

    Args:
        score_a: Score of participant A
        score_b: Score of participant B

    Returns:
        ValidationResult with validation status
    """
    for score in (score_a, score_b):
        if isinstance(score, bool) or not isinstance(score, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Scores must be whole numbers: {score!r}",
            )
        if score < 0:
            return ValidationResult(
                is_valid=False,
                error_message=f"Scores cannot be negative: {score}",
            )

    if score_a == score_b:
        return ValidationResult(
            is_valid=False,
            error_message="Draws are not allowed. One player must win.",
        )

    return ValidationResult(is_valid=True, sanitized_value=f"{score_a}-{score_b}")


def validate_score_entry_strict(score_a: int, score_b: int) -> None:
    """Validate scores and raise exception if invalid.

    Raises:
        InvalidResultException: If the score entry is invalid
    """
    result = validate_score_entry(score_a, score_b)
    if not result.is_valid:
        raise InvalidResultException(result.error_message)
