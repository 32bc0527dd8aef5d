#!/usr/bin/env python3
"""Print the leaderboard, best score first."""

import argparse
from typing import List

from snake_engine.data_access import LeaderboardEntry, LeaderboardRepository


def format_table(entries: List[LeaderboardEntry]) -> str:
    lines = [
        f"{'Rank':<5}{'Name':<20}{'Score':<10}{'Date':<15}{'Time':<10}{'Configuration':<30}{'Map':<30}"
    ]
    for rank, e in enumerate(entries, start=1):
        lines.append(
            f"{rank:<5}{e.name:<20}{e.score:<10}{e.date:<15}{e.time:<10}{e.config_path:<30}{e.map_path:<30}"
        )
    return "\n".join(line.rstrip() for line in lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the snake leaderboard")
    parser.add_argument("--data-dir", type=str, default=None, help="Directory holding leaderboard/")
    parser.add_argument("--limit", type=int, default=None, help="Show only the top N entries")
    args = parser.parse_args()

    entries = LeaderboardRepository(args.data_dir).entries()
    if args.limit is not None:
        entries = entries[: args.limit]
    print(format_table(entries))


if __name__ == "__main__":
    main()
