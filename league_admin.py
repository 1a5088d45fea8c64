#!/usr/bin/env python3
"""
Pickleball League Admin CLI

Standings, score progress, player swaps and week completion against a
league JSON file.

Usage:
    python league_admin.py standings --season S1
    python league_admin.py progress --week W1
    python league_admin.py swap --week W1 --round 2 --players P3 P7
    python league_admin.py complete --week W1
    python league_admin.py validate
"""

import argparse
import logging
import sys
from pathlib import Path

from pickleleague import JsonLeagueStore, format_rank, format_win_percentage
from pickleleague.league import (
    active_week_id,
    mark_week_complete,
    season_standings,
    swap_players,
    week_progress,
)
from pickleleague.logging_config import setup_logging
from pickleleague.schemas import LeagueFile
from pickleleague.utils import validate_json_file


def print_standings(store: JsonLeagueStore, season_id: str) -> None:
    standings = season_standings(store, season_id)
    if not standings:
        print("No completed games yet.")
        return

    print("=" * 60)
    print("STANDINGS")
    print("=" * 60)
    for player in standings:
        print(
            f"  {format_rank(player.rank, player.is_tied):>4}  {player.player_name:<24}"
            f"{player.total_points:>5} pts  {player.wins}-{player.games_played - player.wins}"
            f"  {format_win_percentage(player.win_percentage)}"
        )


def main():
    parser = argparse.ArgumentParser(description="Pickleball league administration")
    parser.add_argument(
        "--league", "-l",
        default="data/league.json",
        help="Path to league JSON file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Write logs to this directory as well as the console",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    standings_parser = subparsers.add_parser("standings", help="Show season leaderboard")
    standings_parser.add_argument("--season", "-s", required=True, help="Season id")

    progress_parser = subparsers.add_parser("progress", help="Show score entry progress")
    progress_parser.add_argument("--week", "-w", help="Week id (defaults to the active week)")
    progress_parser.add_argument("--season", "-s", help="Season id, used to find the active week")

    swap_parser = subparsers.add_parser("swap", help="Swap two players in a round")
    swap_parser.add_argument("--week", "-w", required=True, help="Week id")
    swap_parser.add_argument("--round", "-r", type=int, required=True, help="Round number")
    swap_parser.add_argument("--players", "-p", nargs=2, required=True, help="Two player ids")

    complete_parser = subparsers.add_parser("complete", help="Mark a week complete")
    complete_parser.add_argument("--week", "-w", required=True, help="Week id")

    subparsers.add_parser("validate", help="Validate the league file")

    args = parser.parse_args()

    setup_logging(
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_to_file=args.log_dir is not None,
    )

    league_path = Path(args.league)

    if args.command == "validate":
        is_valid, error = validate_json_file(league_path, LeagueFile)
        if not is_valid:
            print(f"❌ {error}")
            sys.exit(1)
        print(f"✓ {league_path} is valid")
        return

    if not league_path.exists():
        print(f"❌ League file not found: {league_path}")
        sys.exit(1)

    store = JsonLeagueStore(league_path)

    try:
        if args.command == "standings":
            print_standings(store, args.season)

        elif args.command == "progress":
            week_id = args.week or (active_week_id(store, args.season) if args.season else None)
            if week_id is None:
                print("❌ Give --week, or --season with at least one week")
                sys.exit(1)
            progress = week_progress(store, week_id)
            print(f"{progress.completed} of {progress.total} games scored ({progress.percentage}%)")

        elif args.command == "swap":
            result, warnings = swap_players(store, args.week, args.round, *args.players)
            if not result.success:
                print(f"❌ {result.error}")
                sys.exit(1)
            print("✓ Swap saved")
            for warning in warnings:
                print(f"⚠️  {warning}")

        elif args.command == "complete":
            check = mark_week_complete(store, args.week)
            if not check.can_mark_complete:
                print(f"❌ {check.error_message}")
                sys.exit(1)
            if check.has_missing_scores:
                print(f"⚠️  {check.missing_scores_count} games have no score")
            print("✓ Week marked complete")

    except KeyError as e:
        print(f"❌ {e.args[0]}")
        sys.exit(1)


if __name__ == "__main__":
    main()
