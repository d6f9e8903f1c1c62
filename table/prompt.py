from __future__ import annotations

from typing import Callable, Dict, List, Optional

from flip7.models import Decision, Player

_CHOICES: Dict[str, Decision] = {
    "d": Decision.DRAW,
    "draw": Decision.DRAW,
    "p": Decision.DRAW,
    "s": Decision.STAY,
    "stay": Decision.STAY,
}


class ConsolePrompt:
    """Decision provider backed by a terminal. Re-asks until the answer is usable."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[[str], None] = print,
    ) -> None:
        self.input_fn = input_fn
        self.print_fn = print_fn

    def __call__(self, player: Player) -> Decision:
        while True:
            hand = player.hand
            status = f"[{', '.join(str(n) for n in sorted(hand.collected_numbers)) or '-'}]"
            if hand.bonuses:
                status += f" +{sum(hand.bonuses)}"
            if hand.has_multiplier:
                status += " x2"
            if hand.has_second_chance:
                status += " (second chance)"
            choice = self.input_fn(f"\n{player.name} {status} → (d)raw or (s)tay? ").strip().lower()
            decision = _CHOICES.get(choice)
            if decision is not None:
                return decision
            self.print_fn("Please answer d (draw) or s (stay).")

    def ask_int(self, prompt: str, minimum: int = 1) -> int:
        while True:
            value = self.input_fn(prompt).strip()
            try:
                amount = int(value)
            except ValueError:
                self.print_fn("Enter a valid integer")
                continue
            if amount < minimum:
                self.print_fn(f"Enter a number of at least {minimum}")
                continue
            return amount

    def ask_names(self, count: int, given: Optional[List[str]] = None) -> List[str]:
        names = list(given or [])
        while len(names) < count:
            name = self.input_fn(f"Name of player {len(names) + 1}: ").strip()
            if not name:
                self.print_fn("Name cannot be empty")
                continue
            if name in names:
                self.print_fn(f"{name} is already playing")
                continue
            names.append(name)
        return names
