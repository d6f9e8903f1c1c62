from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence, Union

from .cards import Card, CardKind, Deck
from .journal import Journal
from .models import (
    FLIP_TARGET,
    FLIP_THREE_DRAWS,
    AddResult,
    Decision,
    Event,
    EventKind,
    Player,
)

LOGGER = logging.getLogger("flip7.round")

DecisionProvider = Callable[[Player], Union[Decision, str]]

# RoundEngine holds the rules for a single round. Prompting lives behind the
# decision provider and persistence behind the journal.


class RoundEngine:
    """Deals, resolves draws and scores one round of Flip 7."""

    def __init__(
        self,
        deck: Deck,
        players: Sequence[Player],
        decide: DecisionProvider,
        journal: Journal,
    ) -> None:
        if not players:
            raise ValueError("At least one player is required")
        names = [player.name for player in players]
        if len(set(names)) != len(names):
            raise ValueError("Player names must be unique")
        self.deck = deck
        self.players: List[Player] = list(players)
        self.decide = decide
        self.journal = journal
        self.round_over = False
        self.played = False

    # Round lifecycle -------------------------------------------------
    def play(self, round_number: int) -> Dict[str, int]:
        if self.played:
            raise RuntimeError("Round already played")
        self.played = True

        for player in self.players:
            player.hand.reset()
        self.journal.start_round(round_number, self.players)
        LOGGER.info("Round %s starts with %s cards in the deck", round_number, len(self.deck))

        try:
            # Everyone gets one card before the first decision.
            for player in self.players:
                self.resolve_draw(player)
                if self.round_over:
                    break

            self._turn_loop()
        except Exception:
            self.journal.abort_round()
            raise
        return self._score_round()

    def _turn_loop(self) -> None:
        while not self.round_over:
            in_play = [player for player in self.players if player.hand.in_play]
            if not in_play:
                break
            for player in in_play:
                decision = Decision(self.decide(player))
                if decision == Decision.STAY:
                    self.stay(player)
                    continue
                self.resolve_draw(player)
                if self.round_over:
                    break

    def stay(self, player: Player) -> None:
        if not player.hand.in_play:
            raise RuntimeError(f"{player.name} is not in play")
        player.hand.has_stayed = True
        self.journal.log(Event(EventKind.STAY, player.name))
        LOGGER.info("%s stays with %s", player.name, sorted(player.hand.collected_numbers))

    # Draw resolution -------------------------------------------------
    def resolve_draw(self, player: Player, depth: int = 0) -> None:
        hand = player.hand
        if not hand.in_play:
            raise RuntimeError(f"{player.name} is not in play")

        card = self.deck.draw()
        self.journal.log(
            Event(EventKind.DRAW, player.name, {"card": card.to_dict() if card else None, "depth": depth})
        )
        if card is None:
            LOGGER.warning("Deck exhausted; draw for %s has no effect", player.name)
            return
        LOGGER.debug("%s draws %s", player.name, card.label)

        if card.kind == CardKind.NUMBER:
            self._resolve_number(player, card)
        elif card.kind == CardKind.FREEZE:
            hand.is_frozen = True
            LOGGER.info("%s is frozen", player.name)
        elif card.kind == CardKind.FLIP_THREE:
            for _ in range(FLIP_THREE_DRAWS):
                if self.round_over or not hand.in_play:
                    break
                self.resolve_draw(player, depth + 1)
        elif card.kind == CardKind.SECOND_CHANCE:
            if hand.has_second_chance:
                LOGGER.debug("%s already holds a second chance; extra card discarded", player.name)
            hand.has_second_chance = True
        elif card.kind == CardKind.BONUS:
            hand.bonuses.append(card.value)  # type: ignore[arg-type]
        elif card.kind == CardKind.MULTIPLIER:
            hand.has_multiplier = True
        else:
            raise ValueError(f"Unsupported card {card}")

    def _resolve_number(self, player: Player, card: Card) -> None:
        hand = player.hand
        value = card.value
        assert value is not None
        if hand.try_add_number(value) == AddResult.DUPLICATE:
            if hand.has_second_chance:
                hand.has_second_chance = False
                LOGGER.info("%s burns a second chance on duplicate %s", player.name, value)
            else:
                hand.is_active = False
                LOGGER.info("%s busts on duplicate %s", player.name, value)
            return

        if hand.unique_count == FLIP_TARGET:
            # Flip 7 stops the round for everybody. It is not a stay, so the hand banks nothing.
            self.round_over = True
            LOGGER.info("%s flips 7!", player.name)

    # Scoring ---------------------------------------------------------
    def _score_round(self) -> Dict[str, int]:
        scores: Dict[str, int] = {}
        for player in self.players:
            points = player.hand.compute_round_score()
            player.add_score(points)
            scores[player.name] = points
            self.journal.log(
                Event(
                    EventKind.SCORE,
                    player.name,
                    {"points": points, "total": player.total_score, "hand": player.hand.snapshot()},
                )
            )
            LOGGER.info("%s scores %s (total %s)", player.name, points, player.total_score)
        self.journal.end_round(self.players)
        return scores
