from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Sequence

from .cards import Deck
from .game import DecisionProvider, RoundEngine
from .journal import Journal
from .models import GameConfig, Player

LOGGER = logging.getLogger("flip7.session")


class GameSession:
    """Plays rounds until somebody reaches the target score."""

    def __init__(
        self,
        players: Sequence[Player],
        decide: DecisionProvider,
        journal: Optional[Journal] = None,
        config: Optional[GameConfig] = None,
    ) -> None:
        if not players:
            raise ValueError("At least one player is required")
        self.players: List[Player] = list(players)
        self.decide = decide
        self.journal = journal or Journal()
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.seed)
        self.round_number = 0

    def new_deck(self) -> Deck:
        return Deck.standard(rng=self.rng)

    def play_round(self) -> Dict[str, int]:
        if self.is_over():
            raise RuntimeError("Game is already over")
        self.round_number += 1
        engine = RoundEngine(self.new_deck(), self.players, self.decide, self.journal)
        return engine.play(self.round_number)

    def play(self) -> Player:
        while not self.is_over():
            self.play_round()
        winner = self.winner()
        LOGGER.info("%s wins with %s after %s rounds", winner.name, winner.total_score, self.round_number)
        return winner

    def is_over(self) -> bool:
        return any(player.total_score >= self.config.target_score for player in self.players)

    def standings(self) -> List[Player]:
        # sorted() is stable, so seating order breaks ties.
        return sorted(self.players, key=lambda player: player.total_score, reverse=True)

    def winner(self) -> Player:
        return self.standings()[0]
