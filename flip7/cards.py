from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

NUMBER_VALUES = range(0, 13)
BONUS_VALUES = range(2, 11)
ACTION_COPIES = 3


class CardKind(str, Enum):
    NUMBER = "number"
    FREEZE = "freeze"
    FLIP_THREE = "flip_three"
    SECOND_CHANCE = "second_chance"
    BONUS = "bonus"
    MULTIPLIER = "multiplier"


_VALUE_RANGES = {
    CardKind.NUMBER: NUMBER_VALUES,
    CardKind.BONUS: BONUS_VALUES,
}


@dataclass(frozen=True)
class Card:
    kind: CardKind
    value: Optional[int] = None

    def __post_init__(self) -> None:
        allowed = _VALUE_RANGES.get(self.kind)
        if allowed is None:
            if self.value is not None:
                raise ValueError(f"{self.kind.value} card takes no value")
            return
        if self.value is None or self.value not in allowed:
            raise ValueError(f"Invalid {self.kind.value} value: {self.value}")

    @property
    def label(self) -> str:
        if self.kind == CardKind.NUMBER:
            return str(self.value)
        if self.kind == CardKind.BONUS:
            return f"+{self.value}"
        if self.kind == CardKind.MULTIPLIER:
            return "x2"
        return self.kind.value

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {"type": self.kind.value}
        if self.value is not None:
            data["value"] = self.value
        return data


def number(value: int) -> Card:
    return Card(CardKind.NUMBER, value)


def bonus(value: int) -> Card:
    return Card(CardKind.BONUS, value)


FREEZE = Card(CardKind.FREEZE)
FLIP_THREE = Card(CardKind.FLIP_THREE)
SECOND_CHANCE = Card(CardKind.SECOND_CHANCE)
MULTIPLIER = Card(CardKind.MULTIPLIER)


def parse_label(label: str) -> Card:
    if label.isdigit():
        return number(int(label))
    if label.startswith("+") and label[1:].isdigit():
        return bonus(int(label[1:]))
    if label == "x2":
        return MULTIPLIER
    try:
        kind = CardKind(label)
    except ValueError:
        raise ValueError(f"Invalid card label: {label}") from None
    return Card(kind)


def standard_cards() -> List[Card]:
    """Full 97-card set in build order: numbers, actions, bonuses, multiplier.

    Number value N appears N times, so 0 is absent from the deck entirely.
    """
    cards: List[Card] = []
    for value in NUMBER_VALUES:
        cards.extend(number(value) for _ in range(value))
    for kind in (CardKind.FREEZE, CardKind.FLIP_THREE, CardKind.SECOND_CHANCE):
        cards.extend(Card(kind) for _ in range(ACTION_COPIES))
    cards.extend(bonus(value) for value in BONUS_VALUES)
    cards.append(Card(CardKind.MULTIPLIER))
    return cards


class Deck:
    """Draw pile for a single round. The top of the pile is the end of the list."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.cards: List[Card] = []

    @classmethod
    def standard(cls, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> "Deck":
        deck = cls(rng or random.Random(seed))
        deck.build()
        deck.shuffle()
        return deck

    @classmethod
    def stacked(cls, cards: Iterable[Card]) -> "Deck":
        # cards are given in draw order; the first one comes off the top first
        deck = cls()
        deck.cards = list(cards)[::-1]
        return deck

    def build(self) -> None:
        self.cards = standard_cards()

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)

    def draw(self) -> Optional[Card]:
        if not self.cards:
            return None
        return self.cards.pop()

    def composition(self) -> Dict[str, int]:
        return dict(Counter(card.label for card in self.cards))

    def __len__(self) -> int:
        return len(self.cards)
