"""Exceptions for use in Two Stage"""

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


# ========== Base Application Exception ==========


class TwoStageException(Exception):
    """Base exception for all Two Stage errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(TwoStageException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class TournamentNotFoundException(TournamentException):
    """Raised when no tournament is stored under the requested slug."""

    pass


class DuplicateTournamentException(TournamentException):
    """Raised when attempting to create a tournament whose slug is taken."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a requested match does not exist."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(TwoStageException):
    """Base exception for participant-related errors."""

    pass


class ParticipantNotFoundException(ParticipantException):
    """Raised when a requested participant cannot be found."""

    pass


# ========== Result Exceptions ==========


class ResultException(TwoStageException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., a draw or a negative score)."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(TwoStageException):
    """Base exception for validation errors."""

    pass


class SlugValidationException(ValidationException):
    """Raised when a tournament slug is not URL-safe."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TwoStageException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when tournament setup data is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(TwoStageException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
