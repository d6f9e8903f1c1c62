import argparse
import logging
import sys
from typing import List, Optional

from flip7.journal import Journal, JsonJournal
from flip7.models import TARGET_SCORE, GameConfig, Player
from flip7.session import GameSession

from .prompt import ConsolePrompt

LOGGER = logging.getLogger("flip7.table")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flip 7 at the terminal")
    parser.add_argument("--players", type=int, help="Number of players (asked when omitted)")
    parser.add_argument("--names", nargs="*", default=[], help="Player names, in seating order")
    parser.add_argument("--target", type=int, default=TARGET_SCORE, help="Score that ends the game")
    parser.add_argument("--seed", type=int, help="Seed for reproducible shuffles")
    parser.add_argument("--log-dir", default="logs", help="Directory for the JSON game journal")
    parser.add_argument("--no-journal", action="store_true", help="Keep the journal in memory only")
    parser.add_argument("--log-level", default="INFO", help="INFO shows busts, freezes, second chances and Flip 7")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, prompt: ConsolePrompt) -> Player:
    count = args.players or len(args.names) or prompt.ask_int("Number of players: ")
    if len(args.names) > count:
        raise ValueError("More names than players")
    names = prompt.ask_names(count, args.names)

    config = GameConfig(target_score=args.target, seed=args.seed, log_dir=args.log_dir, journal=not args.no_journal)
    journal = JsonJournal(config.log_dir) if config.journal else Journal()
    session = GameSession([Player(name) for name in names], prompt, journal, config)

    while not session.is_over():
        prompt.print_fn(f"\n===== Round {session.round_number + 1} =====")
        scores = session.play_round()
        for player in session.players:
            prompt.print_fn(f"{player.name} scores {scores[player.name]} (total {player.total_score})")

    winner = session.winner()
    prompt.print_fn(f"\nWinner: {winner.name} with {winner.total_score}")
    if isinstance(journal, JsonJournal):
        LOGGER.info("Game journal saved to %s", journal.path)
    return winner


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    # Engine records double as table talk, so print them bare.
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    try:
        run(args, ConsolePrompt())
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
