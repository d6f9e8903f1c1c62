from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from flip7.cards import Card, CardKind, Deck, number
from flip7.game import RoundEngine
from flip7.journal import Journal
from flip7.models import Decision, EventKind, Player


def n(*values: int) -> List[Card]:
    """Shorthand for a run of number cards."""
    return [number(value) for value in values]


def make_players(*names: str) -> List[Player]:
    return [Player(name) for name in (names or ("Alpha", "Beta"))]


class ScriptedDecisions:
    """Replays per-player decision queues; falls back to ``default`` when a queue runs dry."""

    def __init__(self, script: dict | None = None, default: Decision = Decision.STAY) -> None:
        self.queues = {name: list(choices) for name, choices in (script or {}).items()}
        self.default = default
        self.asked: List[str] = []

    def __call__(self, player: Player) -> Decision:
        self.asked.append(player.name)
        queue = self.queues.get(player.name)
        if queue:
            return Decision(queue.pop(0))
        return self.default


def create_round(
    cards: Iterable[Card],
    players: Sequence[Player] | None = None,
    script: dict | None = None,
) -> Tuple[RoundEngine, Journal, ScriptedDecisions]:
    """Engine over a stacked deck; cards are drawn in the order given."""
    journal = Journal()
    decide = ScriptedDecisions(script)
    engine = RoundEngine(Deck.stacked(cards), players or make_players(), decide, journal)
    return engine, journal, decide


def hand_with(numbers: Iterable[int], bonuses: Iterable[int] = (), multiplier: bool = False, stayed: bool = True):
    player = Player("Solo")
    hand = player.hand
    hand.reset()
    for value in numbers:
        hand.try_add_number(value)
    hand.bonuses.extend(bonuses)
    hand.has_multiplier = multiplier
    hand.has_stayed = stayed
    return hand


def drawn_labels(journal: Journal, player: str | None = None) -> List[str | None]:
    labels = []
    for event in journal.events:
        if event.kind != EventKind.DRAW or (player is not None and event.player != player):
            continue
        card = event.payload["card"]
        labels.append(None if card is None else Card(CardKind(card["type"]), card.get("value")).label)
    return labels

