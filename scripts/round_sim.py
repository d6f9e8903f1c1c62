#!/usr/bin/env python3
"""Play many Flip 7 games offline with fixed stay-at-threshold players.

Every seat stays as soon as its hand would bank at least ``--stay-at`` points,
which makes the run a quick way to exercise the engine end to end.

Draws on an exhausted deck change nothing, so a round only ends once every
seat has stayed, busted or frozen. With a very high ``--stay-at`` and many
seats the deck can run dry first and the run never finishes; the engine logs
a warning on every empty draw when that happens.

Example:
    python scripts/round_sim.py --games 200 --players 4 --stay-at 25
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from typing import Callable

from flip7.models import Decision, GameConfig, Player
from flip7.session import GameSession

LOGGER = logging.getLogger("round_sim")


def stay_at(threshold: int) -> Callable[[Player], Decision]:
    def decide(player: Player) -> Decision:
        if player.hand.provisional_score() >= threshold:
            return Decision.STAY
        return Decision.DRAW

    return decide


def run_simulation(args: argparse.Namespace) -> None:
    wins: Counter = Counter()
    rounds_played = 0
    for game in range(args.games):
        players = [Player(f"Seat{idx}") for idx in range(args.players)]
        config = GameConfig(target_score=args.target, seed=args.seed + game, journal=False)
        session = GameSession(players, stay_at(args.stay_at), config=config)
        winner = session.play()
        wins[winner.name] += 1
        rounds_played += session.round_number
        LOGGER.debug("Game %s won by %s in %s rounds", game, winner.name, session.round_number)

    LOGGER.info("Played %s games, %.2f rounds per game", args.games, rounds_played / max(args.games, 1))
    for idx in range(args.players):
        name = f"Seat{idx}"
        LOGGER.info("  %s won %s", name, wins[name])


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run offline Flip 7 games with threshold players")
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--players", type=int, default=4)
    parser.add_argument("--stay-at", type=int, default=25, help="provisional score at which a seat stays")
    parser.add_argument("--target", type=int, default=200)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    # Engine chatter is per draw; keep it out of simulation output.
    logging.getLogger("flip7").setLevel(logging.WARNING)
    run_simulation(args)


if __name__ == "__main__":
    main()
