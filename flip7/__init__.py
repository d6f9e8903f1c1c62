"""Flip 7 rules engine: deck, hands, round resolution and scoring."""

from .cards import Card, CardKind, Deck, parse_label, standard_cards
from .game import DecisionProvider, RoundEngine
from .journal import Journal, JsonJournal
from .models import AddResult, Decision, Event, EventKind, GameConfig, HandState, Player, PlayerHand
from .session import GameSession

__all__ = [
    "Card",
    "CardKind",
    "Deck",
    "parse_label",
    "standard_cards",
    "DecisionProvider",
    "RoundEngine",
    "Journal",
    "JsonJournal",
    "AddResult",
    "Decision",
    "Event",
    "EventKind",
    "GameConfig",
    "HandState",
    "Player",
    "PlayerHand",
    "GameSession",
]
