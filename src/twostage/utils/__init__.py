"""Shared utilities: logging setup and identifier generation."""

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

import logging
import uuid

from twostage.constants import LOG_FORMAT

_handler_installed = False


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger, installing the package handler once.

    Args:
        name: Logger name, normally ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    global _handler_installed

    if not _handler_installed:
        root = logging.getLogger("twostage")
        if not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
            root.setLevel(logging.WARNING)
        _handler_installed = True

    return logging.getLogger(name)


def generate_id() -> str:
    """Generate an opaque identifier, unique within the process."""
    return uuid.uuid4().hex
