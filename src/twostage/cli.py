"""Command-line interface for running demo tournaments."""

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

import argparse
import logging
import string
import sys
from typing import Dict, List, Optional

from twostage import APP_NAME, APP_VERSION
from twostage.constants import DEFAULT_STORE_FILE
from twostage.controllers import TournamentManager, stage_2_of
from twostage.exceptions import TwoStageException
from twostage.models import (
    EliminationType,
    Match,
    Participant,
    Stage,
    Tournament,
    TournamentConfig,
)
from twostage.storage import (
    InMemoryTournamentStore,
    JsonFileTournamentStore,
    TournamentStore,
)
from twostage.utils import setup_logger

logger = setup_logger(__name__)

ELIMINATION_CHOICES = {
    "se": EliminationType.SINGLE_ELIMINATION,
    "rr2": EliminationType.ROUND_ROBIN_2,
}


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive integer
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Value must be positive, got {number}")
    return number


def group_count(value: str) -> int:
    """Parse a number of groups; groups are labelled A to Z.

    Raises:
        argparse.ArgumentTypeError: If the value is not between 1 and 26
    """
    number = positive_int(value)
    if number > len(string.ascii_uppercase):
        raise argparse.ArgumentTypeError(
            f"At most {len(string.ascii_uppercase)} groups are supported, "
            f"got {number}"
        )
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="twostage",
        description=f"{APP_NAME} tournament engine",
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show progress logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    demo = subparsers.add_parser(
        "demo", help="Play a simulated tournament from setup to final"
    )
    demo.add_argument(
        "--groups", type=group_count, default=3, help="Number of groups (default: 3)"
    )
    demo.add_argument(
        "--group-size",
        type=positive_int,
        default=4,
        help="Participants per group (default: 4)",
    )
    demo.add_argument(
        "--qualify",
        type=positive_int,
        default=8,
        help="Participants advancing to stage 2 (default: 8)",
    )
    demo.add_argument(
        "--elimination",
        choices=sorted(ELIMINATION_CHOICES),
        default="se",
        help="Stage 2 format: single elimination or second round robin",
    )
    demo.add_argument("--seed", type=int, help="Random seed for simulated results")
    demo.add_argument("--slug", default="demo-cup", help="URL slug of the tournament")
    demo.add_argument(
        "--store",
        nargs="?",
        const=DEFAULT_STORE_FILE,
        help=f"Save into a JSON store file ({DEFAULT_STORE_FILE} if no path given)",
    )
    return parser


def _names(tournament: Tournament) -> Dict[str, str]:
    return {p.id: p.name for p in tournament.participants}


def format_standings(standings: List[Participant]) -> str:
    """Render standings as a plain text table, one block per group."""
    lines = []
    current_group = None
    for p in standings:
        if p.group != current_group:
            current_group = p.group
            lines.append("")
            lines.append(f"Group {current_group}")
            lines.append(
                f"{'#':>3} {'Name':<20} {'W':>3} {'P':>3} {'+/-':>5} {'Pts':>4}"
            )
        lines.append(
            f"{p.rank:>3} {p.name:<20} {p.wins:>3} {p.matches_played:>3} "
            f"{p.point_difference:>5} {p.points_for:>4}"
        )
    return "\n".join(lines)


def format_matches(matches: List[Match], names: Dict[str, str]) -> str:
    """Render matches grouped by round."""
    lines = []
    current_round = None
    for match in sorted(matches, key=lambda m: m.round):
        if match.round != current_round:
            current_round = match.round
            lines.append(f"Round {current_round}")
        name_a = names.get(match.participant_a_id, "TBD")
        name_b = names.get(match.participant_b_id, "TBD")
        if match.is_completed:
            score = f"{match.score_a}-{match.score_b}"
        else:
            score = "vs"
        lines.append(f"  {name_a:>20} {score:^7} {name_b}")
    return "\n".join(lines)


def run_demo_command(args: argparse.Namespace) -> int:
    """Run a complete simulated tournament and print it."""
    store: TournamentStore
    if args.store:
        store = JsonFileTournamentStore(args.store)
    else:
        store = InMemoryTournamentStore()
    manager = TournamentManager(store)

    labels = list(string.ascii_uppercase[: args.groups])
    names, groups = [], []
    for label in labels:
        for i in range(args.group_size):
            names.append(f"Player {label}{i + 1}")
            groups.append(label)

    elimination_type = ELIMINATION_CHOICES[args.elimination]
    config = TournamentConfig(
        name="Demo Cup",
        slug=args.slug,
        title="Simulated tournament",
        qualification_count=args.qualify,
        elimination_type=elimination_type,
    )

    try:
        tournament = manager.create_tournament(config, names, groups)
        slug = tournament.slug
        manager.simulate_results(slug, Stage.ROUND_ROBIN_1, seed=args.seed)

        print(f"{tournament.name}: stage 1 standings")
        print(format_standings(manager.get_standings(slug)))

        tournament = manager.start_stage_2(slug)
        stage = stage_2_of(elimination_type)
        seed = None if args.seed is None else args.seed + 1
        tournament = manager.simulate_results(slug, stage, seed=seed)
    except TwoStageException as e:
        logger.error(f"Demo failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    qualified = [p.name for p in tournament.participants if p.is_qualified]
    print()
    print(f"Qualified ({len(qualified)}): {', '.join(qualified)}")
    print()
    print(f"Stage 2 ({stage.value})")
    print(format_matches(tournament.matches_for_stage(stage), _names(tournament)))
    print()
    print(f"Status: {tournament.status.value}")
    if args.store:
        print(f"Saved to {args.store} as {slug}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``twostage`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("twostage").setLevel(logging.INFO)

    if args.command == "demo":
        return run_demo_command(args)

    parser.print_help()
    return 0
