from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set

from .cards import NUMBER_VALUES

FLIP_TARGET = 7
FLIP_BONUS = 15
FLIP_THREE_DRAWS = 3
TARGET_SCORE = 200


class HandState(str, Enum):
    PLAYING = "PLAYING"
    STAYED = "STAYED"
    FROZEN = "FROZEN"
    BUSTED = "BUSTED"


class AddResult(str, Enum):
    ACCEPTED = "ACCEPTED"
    DUPLICATE = "DUPLICATE"


class Decision(str, Enum):
    STAY = "stay"
    DRAW = "draw"


class EventKind(str, Enum):
    ROUND_START = "round_start"
    DRAW = "draw"
    STAY = "stay"
    SCORE = "score"
    ROUND_END = "round_end"


@dataclass
class GameConfig:
    target_score: int = TARGET_SCORE
    seed: Optional[int] = None
    log_dir: str = "logs"
    journal: bool = True


@dataclass
class Event:
    kind: EventKind
    player: Optional[str] = None
    payload: Dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {"type": self.kind.value}
        if self.player is not None:
            data["player"] = self.player
        data.update(self.payload)
        return data


@dataclass
class PlayerHand:
    # Round-scoped; reset in place at the start of every round.
    collected_numbers: Set[int] = field(default_factory=set)
    bonuses: List[int] = field(default_factory=list)
    has_multiplier: bool = False
    has_second_chance: bool = False
    is_active: bool = True
    has_stayed: bool = False
    is_frozen: bool = False
    was_reset: bool = False

    def reset(self) -> None:
        self.collected_numbers.clear()
        self.bonuses.clear()
        self.has_multiplier = False
        self.has_second_chance = False
        self.is_active = True
        self.has_stayed = False
        self.is_frozen = False
        self.was_reset = True

    @property
    def state(self) -> HandState:
        if not self.is_active:
            return HandState.BUSTED
        if self.is_frozen:
            return HandState.FROZEN
        if self.has_stayed:
            return HandState.STAYED
        return HandState.PLAYING

    @property
    def in_play(self) -> bool:
        return self.state == HandState.PLAYING

    @property
    def unique_count(self) -> int:
        return len(self.collected_numbers)

    def try_add_number(self, value: int) -> AddResult:
        if value not in NUMBER_VALUES:
            raise ValueError(f"Invalid number value: {value}")
        if value in self.collected_numbers:
            return AddResult.DUPLICATE
        self.collected_numbers.add(value)
        return AddResult.ACCEPTED

    def provisional_score(self) -> int:
        """Points the hand would bank if the player stayed right now."""
        base = sum(self.collected_numbers)
        if self.has_multiplier:
            base *= 2
        total = base + sum(self.bonuses)
        if self.unique_count == FLIP_TARGET:
            total += FLIP_BONUS
        return total

    def compute_round_score(self) -> int:
        if not self.was_reset:
            raise RuntimeError("Hand scored before it was reset")
        # Freezing forfeits the round: only a voluntary stay banks points.
        if not self.has_stayed or self.is_frozen:
            return 0
        return self.provisional_score()

    def snapshot(self) -> Dict[str, object]:
        return {
            "numbers": sorted(self.collected_numbers),
            "bonuses": list(self.bonuses),
            "multiplier": self.has_multiplier,
            "second_chance": self.has_second_chance,
            "state": self.state.value,
        }


@dataclass
class Player:
    name: str
    total_score: int = 0
    hand: PlayerHand = field(default_factory=PlayerHand)

    def add_score(self, points: int) -> None:
        if points < 0:
            raise ValueError("Round score cannot be negative")
        self.total_score += points
